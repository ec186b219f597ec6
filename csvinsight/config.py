"""Application configuration loaded from environment variables."""

from __future__ import annotations

import functools

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """CSV Insight backend settings.

    ``gemini_api_key`` must be set via the environment (or ``.env`` file).
    Everything else has a default.
    """

    # Required
    gemini_api_key: str

    # Optional with defaults
    model_id: str = "gemini-2.5-flash"
    cors_origins: str = "http://localhost:5173"
    max_upload_size_mb: int = 10
    log_level: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "protected_namespaces": (),
    }

    @property
    def cors_list(self) -> list[str]:
        return [s.strip() for s in self.cors_origins.split(",") if s.strip()]


@functools.lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance (singleton)."""
    return Settings()
