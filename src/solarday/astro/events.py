"""Equation of time, sunrise/sunset hour angles and daily solar events."""

from __future__ import annotations

import logging
from math import acos, cos, degrees, radians, sin, tan

from solarday.contracts import Horizon, SolarGeometry, SunTimes
from solarday.errors import NoSunriseOrSunset

LOG = logging.getLogger(__name__)

MINUTES_PER_DAY = 1440.0


def equation_of_time(geometry: SolarGeometry) -> float:
    """Return the equation of time in minutes."""
    half_obliq = radians(geometry.obliquity_correction_deg / 2.0)
    y = tan(half_obliq) * tan(half_obliq)
    ecc = geometry.eccentricity
    lon2 = 2.0 * radians(geometry.mean_longitude_deg)
    anom = radians(geometry.mean_anomaly_deg)

    return 4.0 * degrees(
        y * sin(lon2)
        - 2.0 * ecc * sin(anom)
        + 4.0 * ecc * y * sin(anom) * cos(lon2)
        - 0.5 * y * y * sin(2.0 * lon2)
        - 1.25 * ecc * ecc * sin(2.0 * anom)
    )


def sunrise_hour_angle_cosine(
    latitude_deg: float,
    declination_deg: float,
    zenith_deg: float = Horizon.OFFICIAL.zenith_deg,
) -> float:
    """Return the cosine of the sunrise hour angle.

    The value lies outside [-1, 1] when the sun never crosses the horizon
    defined by ``zenith_deg`` on that date.
    """
    lat = radians(latitude_deg)
    decl = radians(declination_deg)
    return cos(radians(zenith_deg)) / (cos(lat) * cos(decl)) - tan(lat) * tan(decl)


def sunrise_hour_angle(
    latitude_deg: float,
    declination_deg: float,
    zenith_deg: float = Horizon.OFFICIAL.zenith_deg,
) -> float:
    """Return the sunrise hour angle in degrees.

    Raises:
        NoSunriseOrSunset: the arccosine argument is outside [-1, 1].
    """
    cos_ha = sunrise_hour_angle_cosine(latitude_deg, declination_deg, zenith_deg)
    if not -1.0 <= cos_ha <= 1.0:
        raise NoSunriseOrSunset(cos_ha)
    return degrees(acos(cos_ha))


def solar_noon(longitude_deg: float, equation_of_time_min: float, utc_offset_hours: float) -> float:
    """Return local solar noon as a fraction of the day."""
    return (
        720.0 - 4.0 * longitude_deg - equation_of_time_min + utc_offset_hours * 60.0
    ) / MINUTES_PER_DAY


def sun_times(
    geometry: SolarGeometry,
    latitude_deg: float,
    longitude_deg: float,
    utc_offset_hours: float,
    horizon: Horizon = Horizon.OFFICIAL,
) -> SunTimes:
    """Compute equation of time, solar noon, sunrise, sunset and durations."""
    eot = equation_of_time(geometry)
    try:
        ha_rise = sunrise_hour_angle(latitude_deg, geometry.declination_deg, horizon.zenith_deg)
    except NoSunriseOrSunset as exc:
        LOG.info(
            "no %s sunrise/sunset at lat=%.4f decl=%.4f: %s",
            horizon.value,
            latitude_deg,
            geometry.declination_deg,
            exc.condition,
        )
        raise
    ha_set = -ha_rise

    noon = solar_noon(longitude_deg, eot, utc_offset_hours)
    sunrise = (noon * MINUTES_PER_DAY - ha_rise * 4.0) / MINUTES_PER_DAY
    sunset = (noon * MINUTES_PER_DAY - ha_set * 4.0) / MINUTES_PER_DAY
    sunlight = 8.0 * ha_rise

    return SunTimes(
        equation_of_time_min=eot,
        sunrise_hour_angle_deg=ha_rise,
        sunset_hour_angle_deg=ha_set,
        solar_noon=noon,
        sunrise=sunrise,
        sunset=sunset,
        sunlight_duration_min=sunlight,
        night_duration_min=MINUTES_PER_DAY - sunlight,
    )
