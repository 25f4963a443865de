"""Fixed-width text rendering of a SolarReport."""

from __future__ import annotations

from solarday.contracts import SolarReport

_RULE = "=" * 45
_THIN_RULE = "-" * 45


def _row(label: str, value: str) -> str:
    return f" {label:<36}: {value}"


def _num(value: float, digits: int = 6) -> str:
    return f"{value:.{digits}f}"


def render_report(report: SolarReport, *, include_intermediate: bool = True) -> str:
    """Render a report as labeled, fixed-width text sections."""
    inp = report.inputs
    lines = [
        _RULE,
        "     Solar Calculations",
        _RULE,
        _row("Latitude", f"{inp.latitude_deg:8.3f}"),
        _row("Longitude", f"{inp.longitude_deg:8.3f}"),
        _row("UTC offset (hours)", f"{inp.utc_offset_hours:+.2f}"),
        _row("Date", f"{inp.year:04d}-{inp.month:02d}-{inp.day:02d}"),
        _row("Past local midnight", f"{inp.hour:02d}:{inp.minute:02d}:{inp.second:02d}"),
        _row("Horizon", f"{report.horizon.value} ({report.horizon.zenith_deg:g} deg zenith)"),
    ]

    if include_intermediate:
        geo = report.geometry
        times = report.times
        pos = report.position
        lines += [
            _RULE,
            _row("Julian Day", _num(report.julian.julian_day, 3)),
            _row("Julian Century", _num(report.julian.julian_century, 9)),
            _row("Geometric mean longitude (deg)", _num(geo.mean_longitude_deg)),
            _row("Geometric mean anomaly (deg)", _num(geo.mean_anomaly_deg)),
            _row("Orbit eccentricity", _num(geo.eccentricity, 9)),
            _row("Equation of center (deg)", _num(geo.equation_of_center_deg)),
            _row("True longitude (deg)", _num(geo.true_longitude_deg)),
            _row("True anomaly (deg)", _num(geo.true_anomaly_deg)),
            _row("Radius vector (AU)", _num(geo.radius_vector_au, 7)),
            _row("Apparent longitude (deg)", _num(geo.apparent_longitude_deg)),
            _row("Mean obliquity (deg)", _num(geo.mean_obliquity_deg)),
            _row("Obliquity correction (deg)", _num(geo.obliquity_correction_deg)),
            _row("Right ascension (deg)", _num(geo.right_ascension_deg)),
            _row("Declination (deg)", _num(geo.declination_deg)),
            _row("Equation of time (min)", _num(times.equation_of_time_min)),
            _row("Hour angle of sunrise (deg)", _num(times.sunrise_hour_angle_deg)),
            _row("Hour angle of sunset (deg)", _num(times.sunset_hour_angle_deg)),
            _THIN_RULE,
            _row("True solar time (min)", _num(pos.true_solar_time_min)),
            _row("Hour angle (deg)", _num(pos.hour_angle_deg)),
            _row("Solar zenith angle (deg)", _num(pos.zenith_deg)),
            _row("Solar elevation angle (deg)", _num(pos.elevation_deg)),
            _row("Atmospheric refraction (deg)", _num(pos.refraction_deg)),
            _row("Refraction-corrected elevation (deg)", _num(pos.corrected_elevation_deg)),
            _row("Solar azimuth (deg from north)", _num(pos.azimuth_deg)),
        ]

    lines += [
        _RULE,
        _row("Solar Noon", report.solar_noon_hms),
        _row("Sunrise Time", report.sunrise_hms),
        _row("Sunset Time", report.sunset_hms),
        _THIN_RULE,
        _row("Sunlight Duration", report.sunlight_duration_hms),
        _row("Nighttime Duration", report.night_duration_hms),
        _RULE,
    ]
    return "\n".join(lines)
