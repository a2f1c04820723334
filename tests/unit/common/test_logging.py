from __future__ import annotations

import pytest
from loguru import logger

import gitsigning
from gitsigning.common import AppInfo, LoggingConfig, create_logger, disable_library_logging, setup_cli_logging
from gitsigning.config import MemoryConfigStore
from gitsigning.settings import Settings


@pytest.fixture(autouse=True)
def _restore_logging():
    yield
    logger.remove()
    disable_library_logging()


def test_library_logging_can_be_enabled() -> None:
    messages: list[str] = []

    gitsigning.enable_logging("DEBUG")
    logger.add(messages.append, level="WARNING", format="{message}")

    store = MemoryConfigStore.from_entries([("commit.gpgSign", "sometimes")])
    assert store.get_boolean("commit", "gpgSign", False) is False

    assert messages == ["Invalid boolean value, using default\n"]


def test_library_logging_is_disabled_by_default() -> None:
    messages: list[str] = []
    logger.add(messages.append, level="TRACE")

    MemoryConfigStore.from_entries([("commit.gpgSign", "sometimes")]).get_boolean("commit", "gpgSign", False)

    assert messages == []


def test_create_logger_binds_scope() -> None:
    records: list[dict] = []
    logger.add(lambda message: records.append(message.record), level="INFO")

    create_logger("signing").info("hello")

    assert records[-1]["extra"]["scope"] == "signing"


def test_setup_cli_logging_returns_handler() -> None:
    handler_id = setup_cli_logging(AppInfo(environment="test"), LoggingConfig(log_level="ERROR"))

    assert isinstance(handler_id, int)


def test_settings_read_nested_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITSIGNING_LOGGING__LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("GITSIGNING_APP__ENVIRONMENT", "dev")

    settings = Settings()

    assert settings.logging.log_level == "DEBUG"
    assert settings.logging.enabled is True
    assert settings.app.environment == "dev"
