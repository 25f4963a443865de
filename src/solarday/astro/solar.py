"""Solar position helpers.

Computes where the sun stands in the local sky at a clock time: true solar
time, hour angle, zenith/elevation, refraction and azimuth.
"""

from __future__ import annotations

from math import acos, cos, degrees, radians, sin, tan

from solarday.astro.angles import acos_deg, normalize_degrees, wrap
from solarday.contracts import InstantPosition, SolarGeometry

MINUTES_PER_DAY = 1440.0


def _clamp(value: float, lower: float, upper: float) -> float:
    """Clamp a numeric value into an inclusive range."""
    return max(lower, min(upper, value))


def true_solar_time(
    day_fraction: float,
    equation_of_time_min: float,
    longitude_deg: float,
    utc_offset_hours: float,
) -> float:
    """Return true solar time in minutes, normalized to [0, 1440)."""
    return wrap(
        day_fraction * MINUTES_PER_DAY
        + equation_of_time_min
        + 4.0 * longitude_deg
        - 60.0 * utc_offset_hours,
        MINUTES_PER_DAY,
    )


def hour_angle(true_solar_time_min: float) -> float:
    """Return the hour angle in degrees, zero at local solar noon."""
    quarter = true_solar_time_min / 4.0
    if quarter < 0.0:
        return quarter + 180.0
    return quarter - 180.0


def zenith_angle(latitude_deg: float, declination_deg: float, hour_angle_deg: float) -> float:
    """Return the solar zenith angle in degrees."""
    lat = radians(latitude_deg)
    decl = radians(declination_deg)
    cos_zenith = sin(lat) * sin(decl) + cos(lat) * cos(decl) * cos(radians(hour_angle_deg))
    return acos_deg(cos_zenith, "zenith cosine")


def atmospheric_refraction(elevation_deg: float) -> float:
    """Approximate atmospheric refraction in degrees for a true elevation."""
    if elevation_deg > 85.0:
        return 0.0

    if elevation_deg > 5.0:
        t = tan(radians(elevation_deg))
        return (58.1 / t - 0.07 / t**3 + 0.000086 / t**5) / 3600.0

    if elevation_deg > -0.575:
        e = elevation_deg
        return (1735.0 + e * (-518.2 + e * (103.4 + e * (-1279.0 + e * 0.711)))) / 3600.0

    return -20.772 / tan(radians(elevation_deg)) / 3600.0


def azimuth_angle(
    latitude_deg: float,
    declination_deg: float,
    zenith_deg: float,
    hour_angle_deg: float,
) -> float:
    """Return the solar azimuth in degrees clockwise from north, [0, 360).

    The arccosine argument is clamped to [-1, 1]: near the poles and the
    zenith the ratio below overshoots by far more than rounding error. With
    the sun exactly overhead the direction is undefined and north is
    returned.
    """
    lat = radians(latitude_deg)
    zen = radians(zenith_deg)
    denominator = cos(lat) * sin(zen)
    if denominator == 0.0:
        cos_az = -1.0
    else:
        cos_az = _clamp(
            (sin(lat) * cos(zen) - sin(radians(declination_deg))) / denominator,
            -1.0,
            1.0,
        )
    angle = degrees(acos(cos_az))

    if hour_angle_deg > 0.0:
        return normalize_degrees(angle + 180.0)
    return normalize_degrees(540.0 - angle)


def solar_position(
    geometry: SolarGeometry,
    equation_of_time_min: float,
    latitude_deg: float,
    longitude_deg: float,
    utc_offset_hours: float,
    day_fraction: float,
) -> InstantPosition:
    """Compute the sun's local position at a fraction of the local day.

    Args:
        geometry: Solar geometry for the date.
        equation_of_time_min: Equation of time in minutes.
        latitude_deg: Latitude in degrees (north positive).
        longitude_deg: Longitude in degrees (east positive).
        utc_offset_hours: Local clock offset from UTC in hours.
        day_fraction: Elapsed time past local midnight as a fraction of a day.

    Returns:
        InstantPosition with true solar time, hour angle, zenith, elevation,
        refraction, refraction-corrected elevation and azimuth.
    """
    tst = true_solar_time(day_fraction, equation_of_time_min, longitude_deg, utc_offset_hours)
    ha = hour_angle(tst)
    zenith = zenith_angle(latitude_deg, geometry.declination_deg, ha)
    elevation = 90.0 - zenith
    refraction = atmospheric_refraction(elevation)
    azimuth = azimuth_angle(latitude_deg, geometry.declination_deg, zenith, ha)

    return InstantPosition(
        true_solar_time_min=tst,
        hour_angle_deg=ha,
        zenith_deg=zenith,
        elevation_deg=elevation,
        refraction_deg=refraction,
        corrected_elevation_deg=elevation + refraction,
        azimuth_deg=azimuth,
    )
