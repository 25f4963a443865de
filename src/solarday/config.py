"""Environment-driven settings for the CLI and HTTP app."""

from __future__ import annotations

import os
from dataclasses import dataclass

from solarday.contracts import Horizon

DEFAULT_SERIES_MAX_DAYS = 3660


def _resolve_horizon(raw: str | None) -> Horizon:
    """Resolve a horizon name, defaulting to the official sunrise zenith."""
    value = (raw or Horizon.OFFICIAL.value).strip().lower()
    try:
        return Horizon(value)
    except ValueError as exc:
        choices = ", ".join(h.value for h in Horizon)
        raise ValueError(f"SOLARDAY_HORIZON must be one of: {choices}") from exc


def _resolve_positive_int(raw: str | None, default: int, name: str) -> int:
    """Parse a positive integer environment value."""
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer") from exc
    if value < 1:
        raise ValueError(f"{name} must be >= 1")
    return value


@dataclass(frozen=True)
class Settings:
    """Runtime defaults shared by the CLI and the API."""

    horizon: Horizon = Horizon.OFFICIAL
    series_max_days: int = DEFAULT_SERIES_MAX_DAYS

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from ``SOLARDAY_*`` environment variables."""
        return cls(
            horizon=_resolve_horizon(os.getenv("SOLARDAY_HORIZON")),
            series_max_days=_resolve_positive_int(
                os.getenv("SOLARDAY_SERIES_MAX_DAYS"),
                DEFAULT_SERIES_MAX_DAYS,
                "SOLARDAY_SERIES_MAX_DAYS",
            ),
        )
