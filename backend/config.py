"""Centralized configuration — all env vars in one place."""

import math
import os

DEFAULT_PLACES_API_BASE_URL = "https://places.googleapis.com/v1"


def _number_env(name: str, default: float) -> float:
    """Read a non-negative finite number, falling back to the default when unset or invalid."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    if not math.isfinite(value) or value < 0:
        return default
    return value


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.git_sha: str = os.getenv("GIT_SHA", "unknown")
        self.environment: str = os.getenv("ENVIRONMENT", "local")
        self.port: int = int(_number_env("PORT", 10000))

        # Google Places
        self.place_id: str | None = os.getenv("GOOGLE_PLACE_ID") or None
        self.api_key: str | None = os.getenv("GOOGLE_MAPS_API_KEY") or None
        self.places_base_url: str = os.getenv("PLACES_API_BASE_URL", DEFAULT_PLACES_API_BASE_URL).rstrip("/")
        self.places_timeout_seconds: float = _number_env("PLACES_TIMEOUT_SECONDS", 10)

        # Leave empty when the endpoint is not called from a browser
        self.front_origin: str = os.getenv("FRONT_ORIGIN", "")
        self.cache_ttl_minutes: float = _number_env("CACHE_TTL_MINUTES", 30)

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def cache_ttl_seconds(self) -> float:
        return self.cache_ttl_minutes * 60

    def validate(self) -> list[str]:
        """Return list of missing required env vars for the Places lookup."""
        required = ["GOOGLE_PLACE_ID", "GOOGLE_MAPS_API_KEY"]
        return [var for var in required if not getattr(self, _attr_for(var))]


settings = Settings()


def _attr_for(env_var: str) -> str:
    """Map env var name to Settings attribute name."""
    mapping = {
        "GOOGLE_PLACE_ID": "place_id",
        "GOOGLE_MAPS_API_KEY": "api_key",
    }
    return mapping.get(env_var, env_var.lower())
