"""Testes para validacao de settings no bootstrap."""

from __future__ import annotations

import logging

import pytest

from app.bootstrap import initialize_app, validate_runtime_settings
from config.settings import (
    get_base_settings,
    get_calendar_settings,
    get_sheets_settings,
    get_slack_settings,
)
from utils.errors import ConfigurationError

_GETTERS = (get_base_settings, get_calendar_settings, get_sheets_settings, get_slack_settings)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    for getter in _GETTERS:
        getter.cache_clear()
    yield
    for getter in _GETTERS:
        getter.cache_clear()


@pytest.fixture
def valid_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    monkeypatch.setenv("SPREADSHEET_ID", "sheet-1")
    monkeypatch.setenv("SLACK_WEBHOOK_URL", "https://hooks.slack.com/services/x")
    monkeypatch.setenv("CALENDAR_TIMEZONE", "Asia/Tokyo")
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    return monkeypatch


def test_validate_runtime_settings_ok(valid_env: pytest.MonkeyPatch) -> None:
    validate_runtime_settings()


def test_validate_runtime_settings_lists_all_errors(valid_env: pytest.MonkeyPatch) -> None:
    valid_env.delenv("SPREADSHEET_ID")
    valid_env.delenv("SLACK_WEBHOOK_URL")

    with pytest.raises(ConfigurationError) as exc_info:
        validate_runtime_settings()

    message = str(exc_info.value)
    assert "sheets: SPREADSHEET_ID não configurado" in message
    assert "slack: SLACK_WEBHOOK_URL não configurado" in message


def test_validate_runtime_settings_can_skip_slack(valid_env: pytest.MonkeyPatch) -> None:
    valid_env.delenv("SLACK_WEBHOOK_URL")

    validate_runtime_settings(require_slack=False)


@pytest.fixture
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.mark.usefixtures("_restore_root_logger")
def test_initialize_app_falls_back_to_info_on_invalid_level(
    valid_env: pytest.MonkeyPatch,
) -> None:
    valid_env.setenv("LOG_LEVEL", "VERBOSE")

    initialize_app()

    assert logging.getLogger().level == logging.INFO
    with pytest.raises(ConfigurationError, match="base: LOG_LEVEL inválido: VERBOSE"):
        validate_runtime_settings()


@pytest.mark.usefixtures("_restore_root_logger")
def test_initialize_app_uses_configured_level(valid_env: pytest.MonkeyPatch) -> None:
    valid_env.setenv("LOG_LEVEL", "debug")

    initialize_app()

    assert logging.getLogger().level == logging.DEBUG
