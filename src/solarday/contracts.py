"""Core data contracts for the solar day calculator."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date, datetime
from enum import StrEnum
from math import isfinite
from typing import Any

from solarday.errors import InvalidInput

MAX_UTC_OFFSET_HOURS = 18.0


class Horizon(StrEnum):
    """Named horizons for the sunrise/sunset hour-angle formula."""

    OFFICIAL = "official"
    GEOMETRIC = "geometric"
    CIVIL = "civil"
    NAUTICAL = "nautical"
    ASTRONOMICAL = "astronomical"

    @property
    def zenith_deg(self) -> float:
        """Solar zenith angle at which the sun is considered risen or set."""
        return _HORIZON_ZENITH_DEG[self]


_HORIZON_ZENITH_DEG = {
    Horizon.OFFICIAL: 90.833,
    Horizon.GEOMETRIC: 90.0,
    Horizon.CIVIL: 96.0,
    Horizon.NAUTICAL: 102.0,
    Horizon.ASTRONOMICAL: 108.0,
}


def _require_finite(value: float, label: str) -> float:
    """Coerce to float and reject NaN/inf values."""
    try:
        out = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidInput(f"{label} must be a number.") from exc
    if not isfinite(out):
        raise InvalidInput(f"{label} must be finite.")
    return out


def _require_int_in(value: int, lower: int, upper: int, label: str) -> int:
    """Validate an integer component against an inclusive range."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInput(f"{label} must be an integer.")
    if not lower <= value <= upper:
        raise InvalidInput(f"{label} must be in [{lower}, {upper}], got {value}.")
    return value


@dataclass(frozen=True, slots=True)
class SolarInput:
    """Location, calendar date and local clock time for one calculation.

    The time-of-day is the elapsed time past local midnight at
    ``utc_offset_hours``. Validation happens at construction so that no
    computation ever sees an out-of-range value.
    """

    latitude_deg: float
    longitude_deg: float
    utc_offset_hours: float
    year: int
    month: int
    day: int
    hour: int = 12
    minute: int = 0
    second: int = 0

    def __post_init__(self) -> None:
        """Validate input ranges."""
        lat = _require_finite(self.latitude_deg, "latitude_deg")
        lon = _require_finite(self.longitude_deg, "longitude_deg")
        offset = _require_finite(self.utc_offset_hours, "utc_offset_hours")
        if not -90.0 <= lat <= 90.0:
            raise InvalidInput(f"latitude_deg must be in [-90, 90], got {lat}.")
        if not -180.0 <= lon <= 180.0:
            raise InvalidInput(f"longitude_deg must be in [-180, 180], got {lon}.")
        if not -MAX_UTC_OFFSET_HOURS <= offset <= MAX_UTC_OFFSET_HOURS:
            raise InvalidInput(
                f"utc_offset_hours must be in [-{MAX_UTC_OFFSET_HOURS:g}, "
                f"{MAX_UTC_OFFSET_HOURS:g}], got {offset}."
            )
        object.__setattr__(self, "latitude_deg", lat)
        object.__setattr__(self, "longitude_deg", lon)
        object.__setattr__(self, "utc_offset_hours", offset)

        _require_int_in(self.year, 1, 9999, "year")
        _require_int_in(self.month, 1, 12, "month")
        _require_int_in(self.day, 1, 31, "day")
        try:
            date(self.year, self.month, self.day)
        except ValueError as exc:
            raise InvalidInput(
                f"day {self.day} is out of range for {self.year:04d}-{self.month:02d}."
            ) from exc

        _require_int_in(self.hour, 0, 23, "hour")
        _require_int_in(self.minute, 0, 59, "minute")
        _require_int_in(self.second, 0, 59, "second")

    @classmethod
    def from_datetime(cls, latitude_deg: float, longitude_deg: float, dt: datetime) -> "SolarInput":
        """Build an input from a timezone-aware local datetime."""
        offset = dt.utcoffset()
        if offset is None:
            raise InvalidInput("dt must be timezone-aware.")
        return cls(
            latitude_deg=latitude_deg,
            longitude_deg=longitude_deg,
            utc_offset_hours=offset.total_seconds() / 3600.0,
            year=dt.year,
            month=dt.month,
            day=dt.day,
            hour=dt.hour,
            minute=dt.minute,
            second=dt.second,
        )

    @property
    def calendar_date(self) -> date:
        """Calendar date of the calculation."""
        return date(self.year, self.month, self.day)


@dataclass(frozen=True, slots=True)
class JulianMoment:
    """Julian Day at 0h of the calendar date and its Julian Century."""

    julian_day: float
    julian_century: float


@dataclass(frozen=True, slots=True)
class SolarGeometry:
    """Orbital and apparent solar quantities for one Julian Century."""

    mean_longitude_deg: float
    mean_anomaly_deg: float
    eccentricity: float
    equation_of_center_deg: float
    true_longitude_deg: float
    true_anomaly_deg: float
    radius_vector_au: float
    apparent_longitude_deg: float
    mean_obliquity_deg: float
    obliquity_correction_deg: float
    right_ascension_deg: float
    declination_deg: float


@dataclass(frozen=True, slots=True)
class SunTimes:
    """Equation of time, hour angles and day events.

    ``solar_noon``, ``sunrise`` and ``sunset`` are fractions of the local
    24-hour day; durations are in minutes.
    """

    equation_of_time_min: float
    sunrise_hour_angle_deg: float
    sunset_hour_angle_deg: float
    solar_noon: float
    sunrise: float
    sunset: float
    sunlight_duration_min: float
    night_duration_min: float


@dataclass(frozen=True, slots=True)
class InstantPosition:
    """Sun position in the local sky at the requested time-of-day."""

    true_solar_time_min: float
    hour_angle_deg: float
    zenith_deg: float
    elevation_deg: float
    refraction_deg: float
    corrected_elevation_deg: float
    azimuth_deg: float


@dataclass(frozen=True, slots=True)
class SolarReport:
    """Full result of one pipeline invocation."""

    inputs: SolarInput
    horizon: Horizon
    julian: JulianMoment
    geometry: SolarGeometry
    times: SunTimes
    position: InstantPosition
    solar_noon_hms: str
    sunrise_hms: str
    sunset_hms: str
    sunlight_duration_hms: str
    night_duration_hms: str

    def to_dict(self) -> dict[str, Any]:
        """Serialize the report to a JSON-compatible dictionary."""
        return {
            "inputs": asdict(self.inputs),
            "horizon": self.horizon.value,
            "julian": asdict(self.julian),
            "geometry": asdict(self.geometry),
            "times": asdict(self.times),
            "position": asdict(self.position),
            "formatted": {
                "solar_noon": self.solar_noon_hms,
                "sunrise": self.sunrise_hms,
                "sunset": self.sunset_hms,
                "sunlight_duration": self.sunlight_duration_hms,
                "night_duration": self.night_duration_hms,
            },
        }
