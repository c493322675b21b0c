# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
#
# Every error response body is built by build_error_envelope(), which is the
# only place that decides whether error details reach the client. Outside
# the "development" environment the detail is always replaced by
# REDACTED_DETAIL, and stack traces are only ever written to the server log.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.types import Receive, Scope, Send

from app.config import Settings, get_settings
from core.models.status import ErrorEnvelope

logger = logging.getLogger(__name__)

REDACTED_DETAIL = "Something went wrong"
INTERNAL_ERROR_MESSAGE = "Internal server error"


class StorefrontError(Exception):
    """
    Base exception for the storefront API.

    Route collaborators raise subclasses to pick a status code; the body is
    still an ErrorEnvelope and the detail is still redacted outside
    development.
    """

    def __init__(
        self,
        message: str,
        code: str = "STOREFRONT_ERROR",
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}


class InvalidJSONError(StorefrontError):
    """Raised by the body parser when a JSON body cannot be decoded."""

    def __init__(self, error: str):
        super().__init__(
            message="Invalid JSON payload",
            code="INVALID_JSON",
            status_code=400,
            details={"error": error},
        )


class PayloadTooLargeError(StorefrontError):
    """Raised by the body parser when a JSON body exceeds the size limit."""

    def __init__(self, size: int, limit: int):
        super().__init__(
            message="Request entity too large",
            code="PAYLOAD_TOO_LARGE",
            status_code=413,
            details={"error": f"Body of {size} bytes exceeds the {limit} byte limit"},
        )


# =============================================================================
# Envelope
# =============================================================================

def build_error_envelope(
    message: str,
    detail: str | None,
    *,
    status_code: int,
    config: Settings | None = None,
) -> JSONResponse:
    """
    Build the JSON error response.

    Args:
        message: Human-readable summary, always sent
        detail: Underlying error text; sent verbatim only in development
        status_code: HTTP status of the response
        config: Settings to read the environment label from

    Returns:
        JSONResponse with an ErrorEnvelope body
    """
    config = config or get_settings()
    if detail is not None and not config.is_development:
        detail = REDACTED_DETAIL

    envelope = ErrorEnvelope(message=message, error=detail)
    return JSONResponse(status_code=status_code, content=envelope.to_content())


def _request_settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or get_settings()


# =============================================================================
# Exception Handlers
# =============================================================================

async def storefront_exception_handler(
    request: Request,
    exc: StorefrontError
) -> JSONResponse:
    """Convert StorefrontError to an envelope with the exception's status."""
    if exc.status_code >= 500:
        logger.exception(f"Server error on {request.method} {request.url.path}: {exc.message}")
    detail = exc.details.get("error")
    return build_error_envelope(
        exc.message,
        str(detail) if detail is not None else None,
        status_code=exc.status_code,
        config=_request_settings(request),
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request validation errors raised while binding route parameters.

    Malformed JSON that slips past the body parser (e.g. a collaborator
    reading a non-JSON content type as JSON) is still a 400.
    """
    errors = exc.errors()
    if any(error.get("type") == "json_invalid" for error in errors):
        return build_error_envelope(
            "Invalid JSON payload",
            str(errors),
            status_code=400,
            config=_request_settings(request),
        )
    return build_error_envelope(
        "Validation error",
        str(errors),
        status_code=422,
        config=_request_settings(request),
    )


async def unhandled_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Terminal handler for anything raised during dispatch.

    Logs the full traceback server side and never re-enters the chain.
    """
    logger.exception(f"Server Error: {exc}")
    return build_error_envelope(
        INTERNAL_ERROR_MESSAGE,
        str(exc),
        status_code=500,
        config=_request_settings(request),
    )


async def route_not_found(request: Request) -> JSONResponse:
    """Catch-all endpoint reached only when no other route matched."""
    # Echo the path as sent, percent-encoding included
    raw_path = request.scope.get("raw_path")
    if raw_path:
        path = raw_path.split(b"?", 1)[0].decode("latin-1")
    else:
        path = request.url.path
    if request.url.query:
        path = f"{path}?{request.url.query}"
    envelope = ErrorEnvelope(message=f"Route {path} not found")
    return JSONResponse(status_code=404, content=envelope.to_content())


class RouteNotFoundApp:
    """
    ASGI endpoint for the catch-all route.

    A plain ASGI app (not a function) so the route claims every HTTP
    method, including ones like TRACE or PROPFIND that never get a 405.
    """

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        response = await route_not_found(Request(scope, receive))
        await response(scope, receive, send)
