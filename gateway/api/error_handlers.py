from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from gateway.api.responses import envelope_response, error_response
from gateway.core.exceptions import GatewayError, ValidationException
from gateway.core.logging import correlation_id, get_logger

# Initialize logger
logger = get_logger(__name__)


async def handle_gateway_error(request: Request, exc: GatewayError) -> JSONResponse:
    """
    Handle GatewayError instances raised outside an adapter.

    Args:
        request: FastAPI request object
        exc: GatewayError instance

    Returns:
        JSONResponse: Failure envelope with the exception's status
    """
    if isinstance(exc, ValidationException):
        logger.warning(
            f"Validation error: {exc.detail}",
            extra={"field": exc.context.get("field"), "request_path": request.url.path},
        )
    else:
        logger.error(
            f"Gateway error: {exc.detail}",
            extra={"error_kind": exc.kind.value, "context": exc.context},
        )

    return envelope_response(exc.to_envelope(), status_code=exc.status_code)


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle FastAPI's own parameter validation errors as 400 envelopes."""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        messages.append(f"{location}: {error.get('msg')}")

    message = "; ".join(messages) or "Request validation error"
    logger.warning(f"Request validation error: {message}", extra={"request_path": request.url.path})
    return error_response(message, status_code=status.HTTP_400_BAD_REQUEST)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle framework HTTP errors, such as unknown routes, as envelopes."""
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        message = f"The endpoint {request.url.path} does not exist"
    else:
        message = str(exc.detail)
    return error_response(message, status_code=exc.status_code)


async def handle_unexpected_exception(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.error(
        f"Unhandled exception: {str(exc)}",
        extra={"request_path": request.url.path, "method": request.method},
        exc_info=exc,
    )
    response = error_response("Internal server error")
    # The request middleware never sees this response, so echo the ID here
    response.headers["X-Correlation-ID"] = correlation_id.get() or request.headers.get("X-Correlation-ID", "")
    return response


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(GatewayError, handle_gateway_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_exception)
