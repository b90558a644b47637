"""Testes do composition root (logging, validação de settings, LineClient)."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
from pythonjsonlogger.json import JsonFormatter

from api.connectors.line.client import LineClient
from api.connectors.line.errors import LineClientConfigError
from app.bootstrap import (
    get_line_client,
    initialize_app,
    initialize_test_app,
    validate_runtime_settings,
)
from config.logging import CorrelationIdFilter
from config.settings import get_base_settings, get_line_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in ("ENVIRONMENT", "LOG_LEVEL", "LINE_CHANNEL_SECRET", "LINE_CHANNEL_ACCESS_TOKEN"):
        monkeypatch.delenv(name, raising=False)
    get_base_settings.cache_clear()
    get_line_settings.cache_clear()
    get_line_client.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_line_settings.cache_clear()
    get_line_client.cache_clear()


def _configure_line(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LINE_CHANNEL_SECRET", "testsecret")
    monkeypatch.setenv("LINE_CHANNEL_ACCESS_TOKEN", "testtoken")


def test_initialize_app_development_uses_text(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "development")

    initialize_app()

    handler = logging.getLogger().handlers[0]
    assert not isinstance(handler.formatter, JsonFormatter)
    assert any(isinstance(f, CorrelationIdFilter) for f in handler.filters)


def test_initialize_app_production_uses_json(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")

    initialize_app()

    root = logging.getLogger()
    assert isinstance(root.handlers[0].formatter, JsonFormatter)
    assert root.level == logging.WARNING


def test_initialize_test_app_debug() -> None:
    initialize_test_app()

    assert logging.getLogger().level == logging.DEBUG


def test_validate_runtime_settings_ok(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    _configure_line(monkeypatch)

    validate_runtime_settings()


def test_validate_runtime_settings_strict_in_production(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")

    with pytest.raises(RuntimeError, match="LINE_CHANNEL_SECRET"):
        validate_runtime_settings()


def test_validate_runtime_settings_warns_in_development(
    caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level(logging.WARNING, logger="app.bootstrap"):
        validate_runtime_settings()

    assert any(record.message == "settings_validation_failed" for record in caplog.records)


def test_get_line_client_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    _configure_line(monkeypatch)

    client = get_line_client()

    assert isinstance(client, LineClient)
    assert client.channel_secret == "testsecret"
    assert get_line_client() is client


def test_get_line_client_without_credentials() -> None:
    with pytest.raises(LineClientConfigError):
        get_line_client()
