"""End-to-end solar day calculation for one location, date and clock time."""

from __future__ import annotations

import logging

from solarday.astro.events import sun_times
from solarday.astro.geometry import solar_geometry
from solarday.astro.solar import solar_position
from solarday.contracts import Horizon, SolarInput, SolarReport
from solarday.time.clock import day_fraction_to_hms, fraction_of_day, minutes_to_hms
from solarday.time.julian import julian_moment

LOG = logging.getLogger(__name__)


def calculate(inputs: SolarInput, horizon: Horizon = Horizon.OFFICIAL) -> SolarReport:
    """Run the full pipeline and return a SolarReport.

    Each stage consumes only the records produced before it:
    date -> JulianMoment -> SolarGeometry -> SunTimes -> InstantPosition.

    Raises:
        NoSunriseOrSunset: the sun does not cross ``horizon`` on that date.
    """
    horizon = Horizon(horizon)
    julian = julian_moment(inputs.year, inputs.month, inputs.day)
    geometry = solar_geometry(julian.julian_century)
    times = sun_times(
        geometry,
        inputs.latitude_deg,
        inputs.longitude_deg,
        inputs.utc_offset_hours,
        horizon=horizon,
    )
    position = solar_position(
        geometry,
        times.equation_of_time_min,
        inputs.latitude_deg,
        inputs.longitude_deg,
        inputs.utc_offset_hours,
        fraction_of_day(inputs.hour, inputs.minute, inputs.second),
    )

    report = SolarReport(
        inputs=inputs,
        horizon=horizon,
        julian=julian,
        geometry=geometry,
        times=times,
        position=position,
        solar_noon_hms=day_fraction_to_hms(times.solar_noon),
        sunrise_hms=day_fraction_to_hms(times.sunrise),
        sunset_hms=day_fraction_to_hms(times.sunset),
        sunlight_duration_hms=minutes_to_hms(times.sunlight_duration_min),
        night_duration_hms=minutes_to_hms(times.night_duration_min),
    )
    LOG.debug(
        "calculated %s lat=%.4f lon=%.4f sunrise=%s sunset=%s",
        inputs.calendar_date.isoformat(),
        inputs.latitude_deg,
        inputs.longitude_deg,
        report.sunrise_hms,
        report.sunset_hms,
    )
    return report
