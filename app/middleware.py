# =============================================================================
# app/middleware.py - Request Pipeline Middleware
# =============================================================================
# First stage of the request pipeline. JSON bodies are decoded once here and
# exposed as request.state.json_body; handlers can still read the raw body.
# Bad JSON never reaches a route handler and never becomes a 500.
#
# ErrorTranslationMiddleware is the innermost stage: uncaught route errors
# become the 500 envelope before CORS headers are applied.
# =============================================================================

import json
import logging

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

from app.exceptions import (
    InvalidJSONError,
    PayloadTooLargeError,
    StorefrontError,
    build_error_envelope,
    unhandled_exception_handler,
)

logger = logging.getLogger(__name__)


def _reject_constant(token: str):
    # NaN, Infinity and -Infinity are not JSON
    raise InvalidJSONError(f"Unexpected token {token}")


def is_json_content_type(content_type: str | None) -> bool:
    """True for application/json and application/*+json media types."""
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or (
        media_type.startswith("application/") and media_type.endswith("+json")
    )


class JSONBodyMiddleware(BaseHTTPMiddleware):
    """
    Parse JSON request bodies before routing.

    Requests without a JSON content type, or with an empty body, pass
    through untouched and request.state.json_body is None.
    """

    def __init__(self, app: ASGIApp, max_body_bytes: int = 100 * 1024) -> None:
        super().__init__(app)
        self.max_body_bytes = max_body_bytes

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request.state.json_body = None

        if is_json_content_type(request.headers.get("content-type")):
            try:
                request.state.json_body = await self._parse(request)
            except StorefrontError as exc:
                logger.info(f"Rejected body on {request.method} {request.url.path}: {exc.message}")
                return build_error_envelope(
                    exc.message,
                    exc.details.get("error"),
                    status_code=exc.status_code,
                    config=getattr(request.app.state, "settings", None),
                )

        return await call_next(request)

    async def _parse(self, request: Request):
        declared = request.headers.get("content-length")
        if declared and declared.isdigit() and int(declared) > self.max_body_bytes:
            raise PayloadTooLargeError(int(declared), self.max_body_bytes)

        body = await request.body()
        if len(body) > self.max_body_bytes:
            raise PayloadTooLargeError(len(body), self.max_body_bytes)
        if not body.strip():
            return None

        try:
            text = body.decode("utf-8")
            return json.loads(text, parse_constant=_reject_constant)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise InvalidJSONError(str(e)) from e


class ErrorTranslationMiddleware(BaseHTTPMiddleware):
    """
    Turn any exception a route lets escape into the 500 envelope.

    Sits inside CORSMiddleware so that error responses carry the same
    cross-origin headers as every other response.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return await unhandled_exception_handler(request, exc)
