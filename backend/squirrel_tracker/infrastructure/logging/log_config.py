"""Centralized logging configuration.

Each noisy library (SQLAlchemy, httpx, uvicorn) and the sighting
lifecycle loggers get their own level from Settings, independent of the
root level.

Usage:
    from squirrel_tracker.infrastructure.logging.log_config import setup_logging
    setup_logging()   # once, from the FastAPI lifespan or a script entry point
"""

import logging
import sys

from squirrel_tracker.config import Settings, get_settings

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s — %(message)s"

# Settings field → logger names it controls
_CATEGORY_MAP: dict[str, tuple[str, ...]] = {
    "log_level_sql": ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite"),
    "log_level_http": ("httpx", "httpcore"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    "log_level_lifecycle": (
        "SightingController",
        "squirrel_tracker.application.services",
        "squirrel_tracker.infrastructure.store",
    ),
}


def setup_logging(settings: Settings | None = None) -> None:
    """Apply root and per-category log levels."""
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))

    # uvicorn installs its own handler; scripts and tests may not have one
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)

    applied: dict[str, str] = {}
    for settings_field, logger_names in _CATEGORY_MAP.items():
        raw_level: str = getattr(settings, settings_field, "INFO")
        for name in logger_names:
            logging.getLogger(name).setLevel(_parse_level(raw_level))
        applied[settings_field.removeprefix("log_level_")] = raw_level

    logging.getLogger(__name__).debug(
        "Logging configured — root=%s, %s",
        settings.log_level,
        ", ".join(f"{k}={v}" for k, v in applied.items()),
    )


def _parse_level(raw: str) -> int:
    """Convert a level name string to a logging constant, defaulting to INFO."""
    numeric = getattr(logging, raw.upper(), None)
    if isinstance(numeric, int):
        return numeric
    return logging.INFO
