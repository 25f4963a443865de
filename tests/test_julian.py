"""Tests for calendar date to Julian Day conversion."""

from __future__ import annotations

import pytest

from solarday.errors import InvalidInput
from solarday.time.julian import julian_century, julian_day, julian_moment


@pytest.mark.parametrize(
    ("year", "month", "day", "expected"),
    [
        (2000, 1, 1, 2451544.5),
        (1957, 10, 4, 2436115.5),
        (1582, 10, 15, 2299160.5),
        (2016, 1, 1, 2457388.5),
        (1, 1, 1, 1721425.5),
    ],
)
def test_julian_day_known_dates(year: int, month: int, day: int, expected: float) -> None:
    """Julian Day at 0h UT should match published values."""
    assert julian_day(year, month, day) == expected


def test_julian_day_across_leap_day() -> None:
    """January/February belong to the previous computational year, so Feb 29 -> Mar 1 is one day."""
    assert julian_day(2024, 3, 1) - julian_day(2024, 2, 29) == 1.0
    assert julian_day(2024, 1, 1) - julian_day(2023, 12, 31) == 1.0


def test_julian_century_is_zero_at_j2000_noon() -> None:
    """J2000.0 epoch is 2000-01-01 12h, half a day after the 0h Julian Day."""
    assert julian_century(2451545.0) == 0.0
    assert julian_century(julian_day(2000, 1, 1)) == pytest.approx(-0.5 / 36525.0)


def test_julian_moment_reference_date() -> None:
    """The moment record carries both the day and century values."""
    moment = julian_moment(2016, 1, 1)

    assert moment.julian_day == 2457388.5
    assert moment.julian_century == pytest.approx(0.159986311, abs=1e-9)


@pytest.mark.parametrize(
    ("year", "month", "day"),
    [(2023, 2, 29), (2024, 4, 31), (2024, 13, 1), (2024, 0, 10), (2024, 1, 0)],
)
def test_julian_day_rejects_invalid_dates(year: int, month: int, day: int) -> None:
    """Impossible calendar dates should raise InvalidInput."""
    with pytest.raises(InvalidInput):
        julian_day(year, month, day)
