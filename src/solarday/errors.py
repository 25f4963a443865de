"""Error types raised by the solar calculation pipeline."""

from __future__ import annotations


class SolarCalcError(Exception):
    """Base class for all solarday errors."""


class InvalidInput(SolarCalcError, ValueError):
    """Raised when an input is out of range before any computation starts."""


class DomainError(SolarCalcError, ValueError):
    """Raised when an inverse-trig argument is out of domain beyond rounding error."""


class NoSunriseOrSunset(SolarCalcError):
    """Raised when the sun does not cross the chosen horizon on the given date.

    Attributes:
        argument: The arccosine argument of the sunrise hour-angle formula.
            Values below -1 mean the sun stays above the horizon all day,
            values above 1 mean it stays below.
        condition: ``"polar_day"`` or ``"polar_night"``.
    """

    def __init__(self, argument: float) -> None:
        self.argument = argument
        self.condition = "polar_day" if argument < -1.0 else "polar_night"
        super().__init__(
            f"no sunrise or sunset on this date ({self.condition}, "
            f"hour-angle cosine {argument:.6f} outside [-1, 1])"
        )

    @property
    def polar_day(self) -> bool:
        """Return True when the sun never sets."""
        return self.condition == "polar_day"
