"""Centralized configuration — all env vars in one place."""

import os


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.port: int = int(os.getenv("PORT", "8080"))
        self.api_key: str = os.getenv("API_KEY", "")
        self.environment: str = os.getenv("ENVIRONMENT", "local")
        self.cors_origins: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")

        # Game-pass listings are cached for 10 minutes
        self.cache_ttl_seconds: float = float(os.getenv("CACHE_TTL_SECONDS", "600"))

        # Roblox public API
        self.roblox_apis_base_url: str = os.getenv("ROBLOX_APIS_BASE_URL", "https://apis.roblox.com")
        self.roblox_games_base_url: str = os.getenv("ROBLOX_GAMES_BASE_URL", "https://games.roblox.com")
        timeout = os.getenv("UPSTREAM_TIMEOUT_SECONDS")
        self.upstream_timeout: float | None = float(timeout) if timeout else None

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def api_key_enabled(self) -> bool:
        return bool(self.api_key)


settings = Settings()
