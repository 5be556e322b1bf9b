"""Testes do bootstrap (validacao de settings no startup)."""

from __future__ import annotations

import logging

import pytest

from app import bootstrap
from config.settings import BaseSettings, XSettings


def test_missing_credentials_only_warn(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setattr(bootstrap, "get_base_settings", lambda: BaseSettings())
    monkeypatch.setattr(bootstrap, "get_x_settings", lambda: XSettings())

    with caplog.at_level(logging.WARNING, logger="app.bootstrap"):
        errors = bootstrap.validate_runtime_settings()

    assert errors
    assert any(record.getMessage() == "settings_validation_failed" for record in caplog.records)


def test_valid_settings_return_no_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(bootstrap, "get_base_settings", lambda: BaseSettings())
    monkeypatch.setattr(bootstrap, "get_x_settings", lambda: XSettings(bearer_token="t"))

    assert bootstrap.validate_runtime_settings() == []


def test_create_post_provider_uses_x_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(bootstrap, "get_x_settings", lambda: XSettings(bearer_token="t"))

    provider = bootstrap.create_post_provider()

    assert hasattr(provider, "fetch_post")
