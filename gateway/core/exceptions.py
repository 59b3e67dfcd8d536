from typing import Any, Dict, Optional, Union

from fastapi import status

from gateway.domain.models.envelope import Envelope, ErrorKind


class GatewayError(Exception):
    """
    Base exception for gateway errors.

    Every failure the gateway reports carries an HTTP status and a structured
    error kind so handlers never have to inspect the message text.
    """

    kind: ErrorKind = ErrorKind.UNEXPECTED

    def __init__(
        self,
        detail: str = "An unexpected error occurred",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.status_code = status_code
        self.detail = detail
        self.context = context or {}
        super().__init__(self.detail)

    def to_envelope(self) -> Envelope:
        """Convert exception to a failure envelope."""
        return Envelope.fail(self.detail, kind=self.kind)


class ValidationException(GatewayError):
    """Exception raised when request input fails validation."""

    kind = ErrorKind.VALIDATION

    def __init__(self, detail: str = "Validation error", field: Optional[str] = None):
        super().__init__(
            detail=detail,
            status_code=status.HTTP_400_BAD_REQUEST,
            context={"field": field} if field else None,
        )


class NotFoundError(GatewayError):
    """Exception raised when a provider reports the queried resource does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(
        self,
        resource_type: str,
        resource_id: Union[str, int],
        detail: Optional[str] = None,
    ):
        if detail is None:
            detail = f"{resource_type} with ID {resource_id} not found"
        super().__init__(
            detail=detail,
            status_code=status.HTTP_404_NOT_FOUND,
            context={"resource_type": resource_type, "resource_id": str(resource_id)},
        )


class UpstreamError(GatewayError):
    """Exception raised when a provider call fails or returns an unusable payload."""

    kind = ErrorKind.UPSTREAM

    def __init__(
        self,
        detail: str = "External API error",
        provider: Optional[str] = None,
        upstream_status: Optional[int] = None,
        original_exception: Optional[Exception] = None,
    ):
        context: Dict[str, Any] = {}
        if provider:
            context["provider"] = provider
        if upstream_status is not None:
            context["upstream_status"] = upstream_status
        if original_exception is not None:
            context["original_error"] = str(original_exception)
        super().__init__(detail=detail, context=context)
        self.original_exception = original_exception


class ConfigurationError(GatewayError):
    """Exception raised when a required credential or setting is missing."""

    kind = ErrorKind.CONFIGURATION

    def __init__(self, detail: str = "Required configuration is missing", setting: Optional[str] = None):
        super().__init__(detail=detail, context={"setting": setting} if setting else None)
