"""Logging helpers for solarday entry points."""

from __future__ import annotations

import logging
import os
from typing import Any

__all__ = ["configure_logging"]

_DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _coerce_level(value: str | int | None) -> int:
    """Return a logging level from a name, a number or None (INFO)."""
    if value is None:
        return logging.INFO
    if isinstance(value, int):
        return value

    candidate = value.strip()
    if not candidate:
        return logging.INFO
    if candidate.isdigit():
        return int(candidate)

    resolved = logging.getLevelName(candidate.upper())
    if isinstance(resolved, int):
        return resolved
    return logging.INFO


def configure_logging(*, level: str | int | None = None, **kwargs: Any) -> int:
    """Configure root logging for the CLI and the HTTP app.

    ``level`` overrides the ``LOG_LEVEL`` environment variable. Remaining
    keyword arguments are forwarded to :func:`logging.basicConfig`.

    Returns:
        The effective level applied to the root logger.
    """
    effective_level = _coerce_level(level if level is not None else os.environ.get("LOG_LEVEL"))
    logging.basicConfig(
        level=effective_level,
        format=kwargs.pop("format", _DEFAULT_FORMAT),
        datefmt=kwargs.pop("datefmt", _DEFAULT_DATEFMT),
        force=kwargs.pop("force", True),
        **kwargs,
    )
    return effective_level
