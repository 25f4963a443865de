"""Tests for environment settings and logging configuration."""

from __future__ import annotations

import logging

import pytest

from solarday.config import DEFAULT_SERIES_MAX_DAYS, Settings
from solarday.contracts import Horizon
from solarday.logs import _coerce_level, configure_logging


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Without environment overrides the official horizon is used."""
    monkeypatch.delenv("SOLARDAY_HORIZON", raising=False)
    monkeypatch.delenv("SOLARDAY_SERIES_MAX_DAYS", raising=False)

    settings = Settings.from_env()

    assert settings.horizon is Horizon.OFFICIAL
    assert settings.series_max_days == DEFAULT_SERIES_MAX_DAYS


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Environment variables override defaults after normalization."""
    monkeypatch.setenv("SOLARDAY_HORIZON", "  Civil ")
    monkeypatch.setenv("SOLARDAY_SERIES_MAX_DAYS", "31")

    settings = Settings.from_env()

    assert settings.horizon is Horizon.CIVIL
    assert settings.series_max_days == 31


@pytest.mark.parametrize(
    ("name", "value", "message"),
    [
        ("SOLARDAY_HORIZON", "lunar", "SOLARDAY_HORIZON"),
        ("SOLARDAY_SERIES_MAX_DAYS", "many", "must be an integer"),
        ("SOLARDAY_SERIES_MAX_DAYS", "0", ">= 1"),
    ],
)
def test_settings_reject_invalid_env(
    monkeypatch: pytest.MonkeyPatch, name: str, value: str, message: str
) -> None:
    """Invalid values fail loudly and name the variable or constraint."""
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError, match=message):
        Settings.from_env()


def test_coerce_level_accepts_names_and_numbers() -> None:
    """Level parsing accepts names, digits and falls back to INFO."""
    assert _coerce_level("debug") == logging.DEBUG
    assert _coerce_level("30") == 30
    assert _coerce_level(logging.ERROR) == logging.ERROR
    assert _coerce_level("nonsense") == logging.INFO
    assert _coerce_level(None) == logging.INFO


def test_configure_logging_reads_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """LOG_LEVEL drives the root level when no override is given."""
    monkeypatch.setenv("LOG_LEVEL", "WARNING")

    assert configure_logging() == logging.WARNING
    assert logging.getLogger().level == logging.WARNING
    assert configure_logging(level="DEBUG") == logging.DEBUG
