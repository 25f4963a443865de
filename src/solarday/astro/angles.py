"""Angle normalization and domain-safe inverse trigonometry."""

from __future__ import annotations

from math import acos, asin, degrees, isnan

from solarday.errors import DomainError

# Largest overshoot past +/-1 that is still attributed to rounding.
_DOMAIN_TOLERANCE = 1e-9


def wrap(value: float, period: float) -> float:
    """Normalize a value into [0, period)."""
    out = value % period
    if out >= period:
        # `-1e-20 % 360.0` rounds to 360.0
        out -= period
    return out


def normalize_degrees(angle_deg: float) -> float:
    """Normalize an angle to [0, 360)."""
    return wrap(angle_deg, 360.0)


def clamp_unit(value: float, label: str = "argument") -> float:
    """Clamp an inverse-trig argument to [-1, 1].

    Overshoot within rounding tolerance is clamped; anything further out is
    a computational defect and raises DomainError.
    """
    if isnan(value):
        raise DomainError(f"{label} is NaN.")
    if abs(value) > 1.0 + _DOMAIN_TOLERANCE:
        raise DomainError(f"{label} {value!r} is outside [-1, 1].")
    return max(-1.0, min(1.0, value))


def acos_deg(value: float, label: str = "acos argument") -> float:
    """Return arccosine in degrees of a clamped argument."""
    return degrees(acos(clamp_unit(value, label)))


def asin_deg(value: float, label: str = "asin argument") -> float:
    """Return arcsine in degrees of a clamped argument."""
    return degrees(asin(clamp_unit(value, label)))
