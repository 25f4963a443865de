"""Solar geometry from a Julian Century (NOAA/Meeus low-precision series)."""

from __future__ import annotations

import logging
from math import atan2, cos, degrees, radians, sin

from solarday.astro.angles import asin_deg, normalize_degrees
from solarday.contracts import SolarGeometry

LOG = logging.getLogger(__name__)


def geometric_mean_longitude(jc: float) -> float:
    """Geometric mean longitude of the sun in degrees, [0, 360)."""
    return normalize_degrees(280.46646 + jc * (36000.76983 + jc * 0.0003032))


def geometric_mean_anomaly(jc: float) -> float:
    """Geometric mean anomaly of the sun in degrees (not normalized)."""
    return 357.52911 + jc * (35999.05029 - 0.0001537 * jc)


def orbit_eccentricity(jc: float) -> float:
    """Eccentricity of the Earth's orbit."""
    return 0.016708634 - jc * (0.000042037 + 0.0000001267 * jc)


def equation_of_center(jc: float, mean_anomaly_deg: float) -> float:
    """Sun's equation of center in degrees."""
    m = radians(mean_anomaly_deg)
    return (
        sin(m) * (1.914602 - jc * (0.004817 + 0.000014 * jc))
        + sin(2.0 * m) * (0.019993 - 0.000101 * jc)
        + sin(3.0 * m) * 0.000289
    )


def radius_vector(eccentricity: float, true_anomaly_deg: float) -> float:
    """Sun-Earth distance in astronomical units."""
    return (
        1.000001018
        * (1.0 - eccentricity * eccentricity)
        / (1.0 + eccentricity * cos(radians(true_anomaly_deg)))
    )


def _moon_node_deg(jc: float) -> float:
    """Longitude of the ascending node of the Moon's orbit, unreduced."""
    return 125.04 - 1934.136 * jc


def apparent_longitude(jc: float, true_longitude_deg: float) -> float:
    """Apparent longitude of the sun in degrees (nutation and aberration)."""
    return true_longitude_deg - 0.00569 - 0.00478 * sin(radians(_moon_node_deg(jc)))


def mean_obliquity(jc: float) -> float:
    """Mean obliquity of the ecliptic in degrees."""
    arcsec = 21.448 - jc * (46.815 + jc * (0.00059 - jc * 0.001813))
    return 23.0 + (26.0 + arcsec / 60.0) / 60.0


def obliquity_correction(jc: float, mean_obliquity_deg: float) -> float:
    """Obliquity corrected for nutation, in degrees."""
    return mean_obliquity_deg + 0.00256 * cos(radians(_moon_node_deg(jc)))


def solar_geometry(jc: float) -> SolarGeometry:
    """Compute every solar geometry quantity for a Julian Century.

    Right ascension is returned straight from ``atan2`` in (-180, 180] and
    is not reduced to [0, 360).
    """
    mean_lon = geometric_mean_longitude(jc)
    mean_anom = geometric_mean_anomaly(jc)
    ecc = orbit_eccentricity(jc)
    center = equation_of_center(jc, mean_anom)
    true_lon = mean_lon + center
    true_anom = mean_anom + center
    radius = radius_vector(ecc, true_anom)
    app_lon = apparent_longitude(jc, true_lon)
    obliq_mean = mean_obliquity(jc)
    obliq = obliquity_correction(jc, obliq_mean)

    obliq_rad = radians(obliq)
    app_lon_rad = radians(app_lon)
    right_ascension = degrees(
        atan2(cos(obliq_rad) * sin(app_lon_rad), cos(app_lon_rad))
    )
    declination = asin_deg(sin(obliq_rad) * sin(app_lon_rad), "declination sine")

    LOG.debug(
        "solar geometry jc=%.9f lon=%.6f anomaly=%.6f decl=%.6f",
        jc,
        app_lon,
        true_anom,
        declination,
    )
    return SolarGeometry(
        mean_longitude_deg=mean_lon,
        mean_anomaly_deg=mean_anom,
        eccentricity=ecc,
        equation_of_center_deg=center,
        true_longitude_deg=true_lon,
        true_anomaly_deg=true_anom,
        radius_vector_au=radius,
        apparent_longitude_deg=app_lon,
        mean_obliquity_deg=obliq_mean,
        obliquity_correction_deg=obliq,
        right_ascension_deg=right_ascension,
        declination_deg=declination,
    )
