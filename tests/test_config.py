from __future__ import annotations

import logging

import pytest

from gasstation.shared.config import DEFAULT_ORACLE_URL, load_settings
from gasstation.shared.logging import configure_logging


ENV_NAMES = (
    "ORACLE_URL",
    "ORACLE_TIMEOUT_SECONDS",
    "ORACLE_DIVISOR_POLICY",
    "DATABASE_URL",
    "ESTIMATES_WINDOW_SIZE",
    "ESTIMATES_MAX_WINDOW_SIZE",
    "STORE_WRITE_WORKERS",
    "CORS_ALLOW_ORIGIN_REGEX",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch):
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = load_settings()

    assert settings.oracle_url == DEFAULT_ORACLE_URL
    assert settings.oracle_timeout_seconds == 10.0
    assert settings.oracle_divisor_policy == "oracle"
    assert settings.estimates_window_size == 240
    assert settings.estimates_max_window_size == 10000
    assert settings.store_write_workers == 4
    assert settings.database_url.startswith("sqlite")


def test_env_overrides(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ORACLE_DIVISOR_POLICY", "Constant")
    monkeypatch.setenv("ESTIMATES_WINDOW_SIZE", "4")
    monkeypatch.setenv("ORACLE_TIMEOUT_SECONDS", "2.5")

    settings = load_settings()

    assert settings.oracle_divisor_policy == "constant"
    assert settings.estimates_window_size == 4
    assert settings.oracle_timeout_seconds == 2.5


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("ORACLE_DIVISOR_POLICY", "uniform"),
        ("ESTIMATES_WINDOW_SIZE", "0"),
        ("ESTIMATES_WINDOW_SIZE", "20000"),
        ("ORACLE_TIMEOUT_SECONDS", "0"),
        ("STORE_WRITE_WORKERS", "-1"),
    ],
)
def test_invalid_values_raise(monkeypatch: pytest.MonkeyPatch, name: str, value: str):
    monkeypatch.setenv(name, value)

    with pytest.raises(ValueError):
        load_settings()


def test_configure_logging_does_not_duplicate_handlers():
    name = "gasstation.tests.configure_logging"
    first = configure_logging("debug", name=name)
    second = configure_logging("warning", name=name)

    assert first is second
    assert len(second.handlers) == 1
    assert second.level == logging.WARNING
