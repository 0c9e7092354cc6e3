from __future__ import annotations

import logging

from config import settings


def test_http_timeout_defaults(monkeypatch) -> None:
    monkeypatch.delenv("PLSPARSE_HTTP_TIMEOUT", raising=False)
    assert settings.http_timeout_seconds() == settings.HTTP_TIMEOUT_SECONDS


def test_http_timeout_ignores_invalid_values(monkeypatch) -> None:
    monkeypatch.setenv("PLSPARSE_HTTP_TIMEOUT", "soon")
    assert settings.http_timeout_seconds() == settings.HTTP_TIMEOUT_SECONDS

    monkeypatch.setenv("PLSPARSE_HTTP_TIMEOUT", "-2")
    assert settings.http_timeout_seconds() == settings.HTTP_TIMEOUT_SECONDS


def test_log_level_from_env(monkeypatch) -> None:
    monkeypatch.setenv("PLSPARSE_LOG_LEVEL", "debug")
    assert settings.log_level() == logging.DEBUG

    monkeypatch.setenv("PLSPARSE_LOG_LEVEL", "chatty")
    assert settings.log_level() == logging.INFO
