"""Optional shared-secret gate for protected routes."""

from fastapi import Header, Request

from errors import AuthError


async def require_api_key(request: Request, x_api_key: str | None = Header(None)) -> None:
    """Reject the request unless it carries the configured API key.

    With no API_KEY configured every request passes.
    """
    api_key = request.app.state.settings.api_key
    if api_key and x_api_key != api_key:
        raise AuthError()
