"""Clock helpers: time-of-day fractions and HH:MM:SS formatting."""

from __future__ import annotations

from math import floor, isfinite

from solarday.errors import InvalidInput

SECONDS_PER_DAY = 86_400.0


def fraction_of_day(hour: int, minute: int = 0, second: int = 0) -> float:
    """Return elapsed time past local midnight as a fraction of a day."""
    return (hour + minute / 60.0 + second / 3600.0) / 24.0


def split_hms(total_seconds: float) -> tuple[int, int, int]:
    """Split non-negative seconds into `(hours, minutes, seconds)`.

    Seconds are rounded half-up; a rounded value of 60 carries into minutes
    and, from there, into hours. Hours are not wrapped at 24.
    """
    if not isfinite(total_seconds):
        raise InvalidInput("total_seconds must be finite.")
    if total_seconds < 0.0:
        raise InvalidInput(f"total_seconds must be non-negative, got {total_seconds}.")

    hours = floor(total_seconds / 3600.0)
    minutes = floor((total_seconds % 3600.0) / 60.0)
    seconds = floor(total_seconds % 60.0 + 0.5)

    if seconds >= 60:
        seconds -= 60
        minutes += 1
    if minutes >= 60:
        minutes -= 60
        hours += 1
    return hours, minutes, seconds


def format_hms(total_seconds: float) -> str:
    """Format seconds as zero-padded `HH:MM:SS`.

    Negative values (an event before local midnight) keep a leading `-`.
    """
    sign = "-" if total_seconds < 0.0 else ""
    hours, minutes, seconds = split_hms(abs(total_seconds))
    if sign and hours == minutes == seconds == 0:
        sign = ""
    return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}"


def day_fraction_to_hms(fraction: float) -> str:
    """Format a fraction of a 24-hour day as `HH:MM:SS`."""
    return format_hms(fraction * SECONDS_PER_DAY)


def minutes_to_hms(minutes: float) -> str:
    """Format a duration in minutes as `HH:MM:SS`."""
    return format_hms(minutes * 60.0)
