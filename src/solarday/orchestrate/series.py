"""Day-by-day daylight tables over a date range."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from datetime import date, timedelta
from typing import Any

import numpy as np

from solarday.calculator import calculate
from solarday.config import DEFAULT_SERIES_MAX_DAYS
from solarday.contracts import Horizon, SolarInput
from solarday.errors import NoSunriseOrSunset

LOG = logging.getLogger(__name__)

_FULL_DAY_MINUTES = 1440.0


@dataclass(frozen=True, slots=True)
class DailyDaylight:
    """Sun events for one calendar date.

    ``condition`` is ``"normal"``, ``"polar_day"`` or ``"polar_night"``; the
    event times are None unless the condition is normal.
    """

    date: date
    condition: str
    sunlight_minutes: float
    sunrise_hms: str | None = None
    sunset_hms: str | None = None
    solar_noon_hms: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize the row to a JSON-compatible dictionary."""
        payload = asdict(self)
        payload["date"] = self.date.isoformat()
        return payload


def iter_dates(start: date, end: date) -> list[date]:
    """Return every date in [start, end]."""
    if start > end:
        raise ValueError("start must be <= end.")
    return [start + timedelta(days=offset) for offset in range((end - start).days + 1)]


def daylight_series(
    latitude_deg: float,
    longitude_deg: float,
    utc_offset_hours: float,
    start: date,
    end: date,
    horizon: Horizon = Horizon.OFFICIAL,
    max_days: int = DEFAULT_SERIES_MAX_DAYS,
) -> list[DailyDaylight]:
    """Compute sunrise, sunset and sunlight for each date in [start, end].

    Dates on which the sun never crosses the horizon are kept as polar-day
    (1440 minutes of sunlight) or polar-night (0 minutes) rows.
    """
    dates = iter_dates(start, end)
    if len(dates) > max_days:
        raise ValueError(f"date range of {len(dates)} days exceeds max_days={max_days}")

    rows: list[DailyDaylight] = []
    for day in dates:
        inputs = SolarInput(
            latitude_deg=latitude_deg,
            longitude_deg=longitude_deg,
            utc_offset_hours=utc_offset_hours,
            year=day.year,
            month=day.month,
            day=day.day,
        )
        try:
            report = calculate(inputs, horizon=horizon)
        except NoSunriseOrSunset as exc:
            rows.append(
                DailyDaylight(
                    date=day,
                    condition=exc.condition,
                    sunlight_minutes=_FULL_DAY_MINUTES if exc.polar_day else 0.0,
                )
            )
            continue

        rows.append(
            DailyDaylight(
                date=day,
                condition="normal",
                sunlight_minutes=report.times.sunlight_duration_min,
                sunrise_hms=report.sunrise_hms,
                sunset_hms=report.sunset_hms,
                solar_noon_hms=report.solar_noon_hms,
            )
        )

    LOG.debug("daylight series %s..%s rows=%d", start.isoformat(), end.isoformat(), len(rows))
    return rows


def summarize_daylight(rows: list[DailyDaylight]) -> dict[str, Any]:
    """Summarize sunlight minutes across a series."""
    if not rows:
        raise ValueError("rows must not be empty.")

    minutes = np.asarray([row.sunlight_minutes for row in rows], dtype=np.float64)
    shortest = int(np.argmin(minutes))
    longest = int(np.argmax(minutes))
    return {
        "days": len(rows),
        "min_sunlight_minutes": float(minutes[shortest]),
        "max_sunlight_minutes": float(minutes[longest]),
        "mean_sunlight_minutes": float(np.mean(minutes)),
        "shortest_day": rows[shortest].date.isoformat(),
        "longest_day": rows[longest].date.isoformat(),
        "polar_days": sum(1 for row in rows if row.condition == "polar_day"),
        "polar_nights": sum(1 for row in rows if row.condition == "polar_night"),
    }
