"""FastAPI application entry point for the Roblox pass proxy."""

import logging
import sys

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from config import Settings, settings as default_settings
from errors import register_error_handlers
from services.cache import PassCache
from services.roblox import RobloxClient

# Structured logging: JSON for production, human-readable for local
if default_settings.is_production:
    logging.basicConfig(
        level=logging.INFO,
        format='{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","message":"%(message)s"}',
        stream=sys.stdout,
    )
else:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, roblox: RobloxClient | None = None) -> FastAPI:
    settings = settings or default_settings
    app = FastAPI(title="Roblox Pass API", version="1.0.0")

    app.state.settings = settings
    app.state.pass_cache = PassCache(ttl_seconds=settings.cache_ttl_seconds)
    app.state.roblox = roblox or RobloxClient(
        apis_base_url=settings.roblox_apis_base_url,
        games_base_url=settings.roblox_games_base_url,
        timeout=settings.upstream_timeout,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Security headers
    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response: Response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        if settings.is_production:
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response

    # Centralized error handlers
    register_error_handlers(app)

    from routes.health import router as health_router
    from routes.passes import router as passes_router

    app.include_router(health_router)
    app.include_router(passes_router)

    @app.on_event("startup")
    async def _log_startup() -> None:
        logger.info("Server running on port %d", settings.port)
        logger.info("API key protection: %s", "ENABLED" if settings.api_key_enabled else "DISABLED")

    return app


app = create_app()


def main() -> None:
    uvicorn.run(app, host="0.0.0.0", port=default_settings.port)


if __name__ == "__main__":
    main()
