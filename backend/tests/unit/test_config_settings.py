"""Unit tests for application settings configuration."""

import logging
from pathlib import Path

from squirrel_tracker.config import Settings
from squirrel_tracker.infrastructure.database.session import get_async_url
from squirrel_tracker.infrastructure.logging.log_config import setup_logging


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("PAGE_SIZE", "25")
    monkeypatch.setenv("STORE_BASE_URL", "http://squirrels.internal/api/v1")

    settings = Settings()

    assert settings.page_size == 25
    assert settings.store_base_url == "http://squirrels.internal/api/v1"


def test_async_url_picks_async_drivers():
    assert get_async_url("sqlite:///./x.db") == "sqlite+aiosqlite:///./x.db"
    assert get_async_url("postgresql://u:p@h/db") == "postgresql+asyncpg://u:p@h/db"
    assert get_async_url("sqlite+aiosqlite:///:memory:") == "sqlite+aiosqlite:///:memory:"


def test_setup_logging_applies_category_levels():
    setup_logging(Settings(log_level_sql="ERROR", log_level_lifecycle="DEBUG"))

    assert logging.getLogger("sqlalchemy.engine").level == logging.ERROR
    assert logging.getLogger("SightingController").level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING
