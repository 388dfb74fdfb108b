"""Custom exceptions and centralized FastAPI error handlers.

Every failure leaves the service as a structured body:
``{"success": false, "error": ..., "message": ...}``.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class PassProxyError(Exception):
    """Base exception with HTTP status code."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.status_code = status_code


class AuthError(PassProxyError):
    def __init__(self):
        super().__init__("Invalid API key", status_code=401)


class MissingUniverseError(PassProxyError):
    def __init__(self):
        super().__init__(
            "Missing required parameter: universeId, placeId, or userId",
            status_code=400,
        )


class UnresolvablePlaceError(PassProxyError):
    def __init__(self):
        super().__init__(
            "Could not find universe ID for the provided place ID",
            status_code=400,
        )


class UpstreamError(PassProxyError):
    """Roblox answered with a non-success status."""

    def __init__(self, status: int):
        super().__init__(f"Roblox API returned {status}", status_code=500)
        self.upstream_status = status


def failure_body(error: str, message: str | None = None) -> dict:
    body = {"success": False, "error": error}
    if message is not None:
        body["message"] = message
    return body


def register_error_handlers(app: FastAPI) -> None:
    """Register centralized exception handlers on the FastAPI app."""

    @app.exception_handler(PassProxyError)
    async def handle_pass_proxy_error(_request: Request, exc: PassProxyError):
        return JSONResponse(failure_body(str(exc)), status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception):
        logger.exception("Unhandled error: %s", exc)
        return JSONResponse(
            failure_body("Internal server error", str(exc)),
            status_code=500,
        )
