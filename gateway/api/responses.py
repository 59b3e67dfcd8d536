from typing import Dict, Optional

from fastapi import status
from fastapi.responses import JSONResponse

from gateway.domain.models.envelope import Envelope, ErrorKind

# Failure kinds that are the caller's fault or a missing resource; anything
# else is reported as a server error.
STATUS_BY_KIND: Dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def status_for(envelope: Envelope) -> int:
    """HTTP status for an envelope, chosen from its structured error kind."""
    if envelope.success:
        return status.HTTP_200_OK
    return STATUS_BY_KIND.get(envelope.error_kind, status.HTTP_500_INTERNAL_SERVER_ERROR)


def envelope_response(
    envelope: Envelope,
    status_code: Optional[int] = None,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code or status_for(envelope),
        content=envelope.to_dict(),
        headers=headers,
    )


def error_response(message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR) -> JSONResponse:
    """Failure envelope for errors raised outside any adapter."""
    return envelope_response(Envelope.fail(message), status_code=status_code)
