"""Unit tests for settings loading and log formatting."""

from __future__ import annotations

import json
import logging

import pytest

from app.core import config
from app.core.observability import JSONFormatter
from app.core.observability import setup_logging


@pytest.fixture(autouse=True)
def _fresh_settings():
    config.get_settings.cache_clear()
    yield
    config.get_settings.cache_clear()


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "DASHBOARD_DATABASE_URL",
        "DASHBOARD_PASSWORD_HASH_ROUNDS",
        "DASHBOARD_LOG_LEVEL",
        "DASHBOARD_LOG_FORMAT",
        "DASHBOARD_ITEMS_PER_PAGE",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = config.get_settings()

    assert settings.password_hash_rounds == 10
    assert settings.items_per_page == 6
    assert settings.log_format == "text"


def test_settings_read_environment_and_redact_password(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DASHBOARD_DATABASE_URL", "postgresql+psycopg://app:hunter2@db:5432/dashboard")
    monkeypatch.setenv("DASHBOARD_PASSWORD_HASH_ROUNDS", "12")

    settings = config.get_settings()
    safe = settings.safe_for_logging()

    assert settings.password_hash_rounds == 12
    assert "hunter2" not in safe["database_url"]
    assert safe["database_url"] == "postgresql+psycopg://app:***@db:5432/dashboard"


def test_json_formatter_includes_known_extras() -> None:
    record = logging.LogRecord("app.services", logging.ERROR, __file__, 1, "Store error during %s", ("insert-user",), None)
    record.operation = "insert-user"

    payload = json.loads(JSONFormatter().format(record))

    assert payload["level"] == "ERROR"
    assert payload["logger"] == "app.services"
    assert payload["message"] == "Store error during insert-user"
    assert payload["operation"] == "insert-user"
    assert "path" not in payload


def test_setup_logging_replaces_only_its_own_handler() -> None:
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    try:
        setup_logging("DEBUG", "json")
        setup_logging("WARNING", "text")

        added = [handler for handler in root.handlers if handler not in before]
        assert len(added) == 1
        assert root.level == logging.WARNING
    finally:
        for handler in list(root.handlers):
            if handler not in before:
                root.removeHandler(handler)
        root.setLevel(level)
