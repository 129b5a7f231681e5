from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Squirrel Tracker API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./squirrel_tracker.db"
    database_echo: bool = False
    cors_origins: list[str] = ["http://localhost:5173"]

    # Record store client (used by the sighting controller)
    store_base_url: str = "http://localhost:8020/api/v1"
    store_timeout: float = 30.0

    # Sighting table
    page_size: int = 10

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_http: str = "WARNING"          # httpx / httpcore — outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_lifecycle: str = "INFO"        # SightingController actions

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
