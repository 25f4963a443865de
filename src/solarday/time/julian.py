"""Calendar date to Julian Day/Century conversion."""

from __future__ import annotations

from datetime import date
from math import floor

from solarday.contracts import JulianMoment
from solarday.errors import InvalidInput

J2000_JULIAN_DAY = 2451545.0
DAYS_PER_JULIAN_CENTURY = 36525.0


def julian_day(year: int, month: int, day: int) -> float:
    """Return the Julian Day at 0h UT of a proleptic Gregorian date.

    January and February count as months 13 and 14 of the previous year so
    the leap day falls at the end of the computational year.
    """
    if not 1 <= month <= 12:
        raise InvalidInput(f"month must be in [1, 12], got {month}.")
    try:
        date(year, month, day)
    except ValueError as exc:
        raise InvalidInput(f"invalid calendar date {year}-{month}-{day}.") from exc

    adj_year = year
    adj_month = month
    if month <= 2:
        adj_year -= 1
        adj_month += 12

    a = floor(adj_year / 100)
    b = 2 - a + floor(a / 4)
    return (
        floor(365.25 * (adj_year + 4716))
        + floor(30.6001 * (adj_month + 1))
        + day
        + b
        - 1524.5
    )


def julian_century(jd: float) -> float:
    """Return Julian centuries elapsed since J2000.0."""
    return (jd - J2000_JULIAN_DAY) / DAYS_PER_JULIAN_CENTURY


def julian_moment(year: int, month: int, day: int) -> JulianMoment:
    """Convert a calendar date into a JulianMoment."""
    jd = julian_day(year, month, day)
    return JulianMoment(julian_day=jd, julian_century=julian_century(jd))
