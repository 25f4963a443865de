"""Tests for equation of time, hour angles and daily sun events."""

from __future__ import annotations

import math

import pytest

from solarday.astro.events import (
    equation_of_time,
    solar_noon,
    sun_times,
    sunrise_hour_angle,
    sunrise_hour_angle_cosine,
)
from solarday.astro.geometry import solar_geometry
from solarday.contracts import Horizon
from solarday.errors import NoSunriseOrSunset
from solarday.time.julian import julian_moment


def _geometry(year: int, month: int, day: int):
    return solar_geometry(julian_moment(year, month, day).julian_century)


def test_equation_of_time_reference_date() -> None:
    """Equation of time for 2016-01-01 is about -3.08 minutes."""
    assert equation_of_time(_geometry(2016, 1, 1)) == pytest.approx(-3.082222, abs=1e-6)


def test_sun_times_reference_location() -> None:
    """Istanbul-area reference values for 2016-01-01 at UTC+2."""
    times = sun_times(_geometry(2016, 1, 1), 41.0, 29.0, 2.0)

    assert times.sunrise_hour_angle_deg == pytest.approx(69.566976, abs=1e-6)
    assert times.sunset_hour_angle_deg == -times.sunrise_hour_angle_deg
    assert times.sunrise * 86400.0 == pytest.approx(26928.859, abs=1e-3)
    assert times.sunset * 86400.0 == pytest.approx(60321.008, abs=1e-3)
    assert times.solar_noon * 86400.0 == pytest.approx(43624.933, abs=1e-3)
    assert times.sunlight_duration_min == pytest.approx(556.535808, abs=1e-5)


def test_sunrise_and_sunset_are_symmetric_about_noon() -> None:
    """Sunrise and sunset sit the same distance either side of solar noon."""
    times = sun_times(_geometry(2024, 6, 21), -33.8688, 151.2093, 10.0)

    assert times.solar_noon - times.sunrise == pytest.approx(times.sunset - times.solar_noon)
    assert (times.sunset - times.sunrise) * 1440.0 == pytest.approx(times.sunlight_duration_min)


def test_sunlight_plus_night_is_a_full_day() -> None:
    """Sunlight and night durations add up to exactly 1440 minutes."""
    for year, month, day, lat in [(2016, 1, 1, 41.0), (2024, 6, 21, 51.5), (2024, 3, 20, 0.0)]:
        times = sun_times(_geometry(year, month, day), lat, 0.0, 0.0)
        assert times.sunlight_duration_min + times.night_duration_min == 1440.0


def test_equator_equinox_geometric_horizon_is_twelve_hours() -> None:
    """With the geometric horizon the equator gets 12 hours on an equinox."""
    times = sun_times(_geometry(2024, 3, 20), 0.0, 0.0, 0.0, horizon=Horizon.GEOMETRIC)

    assert times.sunlight_duration_min == pytest.approx(720.0, abs=1e-6)


def test_official_horizon_adds_refraction_and_disk() -> None:
    """The 90.833 degree zenith lengthens the equinox day by a few minutes."""
    times = sun_times(_geometry(2024, 3, 20), 0.0, 0.0, 0.0)

    assert times.sunlight_duration_min == pytest.approx(8.0 * 90.833, abs=1e-3)


def test_twilight_horizons_lengthen_the_day() -> None:
    """Deeper horizons give longer daylight at mid-latitudes."""
    geo = _geometry(2024, 10, 1)
    durations = [
        sun_times(geo, 48.0, 11.0, 2.0, horizon=h).sunlight_duration_min
        for h in (Horizon.GEOMETRIC, Horizon.OFFICIAL, Horizon.CIVIL, Horizon.NAUTICAL, Horizon.ASTRONOMICAL)
    ]

    assert durations == sorted(durations)


def test_polar_night_raises_no_sunrise_or_sunset() -> None:
    """North of the Arctic Circle at the December solstice the sun never rises."""
    with pytest.raises(NoSunriseOrSunset) as excinfo:
        sun_times(_geometry(2024, 12, 21), 80.0, 15.0, 1.0)

    assert excinfo.value.condition == "polar_night"
    assert excinfo.value.polar_day is False
    assert excinfo.value.argument == pytest.approx(2.367402, abs=1e-6)


def test_polar_day_raises_no_sunrise_or_sunset() -> None:
    """North of the Arctic Circle at the June solstice the sun never sets."""
    with pytest.raises(NoSunriseOrSunset) as excinfo:
        sun_times(_geometry(2024, 6, 21), 80.0, 15.0, 1.0)

    assert excinfo.value.condition == "polar_day"
    assert excinfo.value.polar_day is True


def test_pole_latitude_reports_polar_condition() -> None:
    """At the pole the hour-angle cosine diverges instead of returning NaN."""
    with pytest.raises(NoSunriseOrSunset):
        sunrise_hour_angle(90.0, 10.0)


def test_hour_angle_cosine_is_finite_and_checked_before_acos() -> None:
    """Out-of-domain cosines are detected, never silently NaN."""
    cos_ha = sunrise_hour_angle_cosine(80.0, -23.4)

    assert math.isfinite(cos_ha)
    assert cos_ha > 1.0


def test_solar_noon_shifts_four_minutes_per_degree() -> None:
    """Moving one degree west delays solar noon by four minutes."""
    east = solar_noon(15.0, 0.0, 1.0)
    west = solar_noon(14.0, 0.0, 1.0)

    assert (west - east) * 1440.0 == pytest.approx(4.0)
    assert solar_noon(15.0, 0.0, 1.0) == pytest.approx(0.5)
