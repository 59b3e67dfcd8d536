import asyncio
from abc import ABC
from typing import Any, Awaitable, Callable, Dict, Optional, Tuple, TypeVar

import httpx

from gateway.core.config import Settings
from gateway.core.exceptions import ConfigurationError, GatewayError, NotFoundError, UpstreamError
from gateway.core.logging import get_logger
from gateway.domain.models.envelope import Envelope, ErrorKind

R = TypeVar('R')  # Domain record (or list of records) produced by an operation

logger = get_logger(__name__)


class ProviderAdapter(ABC):
    """
    Abstract base for third-party API adapters.

    An adapter owns one provider: it issues bounded-latency GET requests to a
    fixed base URL, maps the provider's JSON into domain records and reports
    every outcome as an Envelope. Operations never raise; failures come back
    as failed envelopes tagged with an ErrorKind.

    Subclasses set ``key`` (registry name), ``name`` (used in error text) and
    ``operations``, and build their public methods on ``execute``.
    """

    key: str = ""
    name: str = "Provider"
    operations: Tuple[str, ...] = ()

    def __init__(self, base_url: str, http_client: httpx.AsyncClient, timeout: float = 5.0):
        """
        Initialize the adapter.

        Args:
            base_url: Provider base URL, without a trailing slash
            http_client: Shared async client used for every outbound call
            timeout: Per-call deadline in seconds
        """
        self.base_url = base_url.rstrip('/')
        self.http_client = http_client
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings, http_client: httpx.AsyncClient) -> "ProviderAdapter":
        """Build the adapter from application settings."""
        raise NotImplementedError

    def check_configuration(self) -> None:
        """
        Pre-flight check run before any outbound call.

        Raises:
            ConfigurationError: If a required credential is missing
        """

    def is_configured(self) -> bool:
        try:
            self.check_configuration()
        except ConfigurationError:
            return False
        return True

    def get_capabilities(self) -> Dict[str, Any]:
        """Describe this adapter for the health endpoint."""
        return {
            "provider": self.key,
            "base_url": self.base_url,
            "operations": list(self.operations),
            "configured": self.is_configured(),
        }

    def default_headers(self) -> Dict[str, str]:
        return {"Accept": "application/json"}

    def build_url(self, path: str) -> str:
        if not path:
            return self.base_url
        return f"{self.base_url}/{path.lstrip('/')}"

    async def get_json(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        not_found: Optional[NotFoundError] = None,
    ) -> Any:
        """
        Perform one GET against the provider and decode the JSON body.

        Args:
            path: Path relative to the base URL
            params: Optional query parameters
            not_found: Error to raise when the provider answers 404

        Returns:
            The decoded JSON payload

        Raises:
            NotFoundError: If the provider answers 404 and ``not_found`` is given
            UpstreamError: On transport failure, timeout, error status or non-JSON body
        """
        url = self.build_url(path)
        try:
            # httpx timeouts apply per phase; wait_for bounds the whole call
            response = await asyncio.wait_for(
                self.http_client.get(
                    url,
                    params=params,
                    headers=self.default_headers(),
                    timeout=self.timeout,
                ),
                timeout=self.timeout,
            )
        except (httpx.TimeoutException, asyncio.TimeoutError) as e:
            raise UpstreamError(
                f"{self.name} API error: request timed out after {self.timeout:g}s",
                provider=self.key,
                original_exception=e,
            )
        except httpx.HTTPError as e:
            raise UpstreamError(
                f"{self.name} API error: {str(e) or type(e).__name__}",
                provider=self.key,
                original_exception=e,
            )

        if response.status_code == 404 and not_found is not None:
            raise not_found

        if not response.is_success:
            raise self.classify_error_response(response)

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(
                f"{self.name} API returned a non-JSON response ({response.status_code})",
                provider=self.key,
                upstream_status=response.status_code,
                original_exception=e,
            )

    def classify_error_response(self, response: httpx.Response) -> GatewayError:
        """
        Turn a non-2xx provider response into a gateway error.

        Subclasses override this to recognize provider-specific error codes.
        """
        return UpstreamError(
            f"{self.name} API failed ({response.status_code}): {self.provider_message(response)}",
            provider=self.key,
            upstream_status=response.status_code,
        )

    @staticmethod
    def error_payload(response: httpx.Response) -> Dict[str, Any]:
        try:
            payload = response.json()
        except ValueError:
            return {}
        return payload if isinstance(payload, dict) else {}

    def provider_message(self, response: httpx.Response) -> str:
        """Best-effort extraction of the provider's own error message."""
        payload = self.error_payload(response)
        message = payload.get("message")
        nested = payload.get("error")
        if not message and isinstance(nested, dict):
            message = nested.get("message")
        elif not message and isinstance(nested, str):
            message = nested
        return str(message) if message else (response.reason_phrase or "Unknown error")

    async def execute(self, operation: Callable[..., Awaitable[R]], *args: Any) -> Envelope:
        """
        Run one adapter operation and wrap the outcome in an Envelope.

        The configuration pre-flight runs first; when it fails the operation is
        never started, so no outbound call is attempted.
        """
        try:
            self.check_configuration()
            return Envelope.ok(await operation(*args))
        except GatewayError as e:
            logger.warning(
                f"{self.name} API call failed: {e.detail}",
                extra={"provider": self.key, "error_kind": e.kind.value, "context": e.context},
            )
            return e.to_envelope()
        except (KeyError, TypeError, ValueError) as e:
            logger.error(
                f"{self.name} API returned a malformed payload: {e!r}",
                extra={"provider": self.key},
            )
            return Envelope.fail(f"{self.name} API returned a malformed payload", kind=ErrorKind.UPSTREAM)
        except Exception as e:
            logger.error(f"{self.name} API error: {str(e)}", extra={"provider": self.key}, exc_info=True)
            return Envelope.fail(f"{self.name} API error: {str(e) or type(e).__name__}", kind=ErrorKind.UNEXPECTED)
