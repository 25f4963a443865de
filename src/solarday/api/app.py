"""FastAPI app exposing solar day calculations."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field, model_validator

from solarday.calculator import calculate
from solarday.config import Settings
from solarday.contracts import MAX_UTC_OFFSET_HOURS, Horizon, SolarInput
from solarday.errors import InvalidInput, NoSunriseOrSunset
from solarday.orchestrate.series import daylight_series, summarize_daylight

LOG = logging.getLogger(__name__)


class LocationRequest(BaseModel):
    """Observer location and clock offset."""

    lat: float = Field(ge=-90.0, le=90.0)
    lon: float = Field(ge=-180.0, le=180.0)
    utc_offset_hours: float = Field(ge=-MAX_UTC_OFFSET_HOURS, le=MAX_UTC_OFFSET_HOURS)
    horizon: Horizon | None = None


class SolarRequest(LocationRequest):
    """Request schema for one solar calculation."""

    local_date: date
    hour: int = Field(default=12, ge=0, le=23)
    minute: int = Field(default=0, ge=0, le=59)
    second: int = Field(default=0, ge=0, le=59)

    def to_input(self) -> SolarInput:
        """Convert API model into the SolarInput contract."""
        return SolarInput(
            latitude_deg=self.lat,
            longitude_deg=self.lon,
            utc_offset_hours=self.utc_offset_hours,
            year=self.local_date.year,
            month=self.local_date.month,
            day=self.local_date.day,
            hour=self.hour,
            minute=self.minute,
            second=self.second,
        )


class SeriesRequest(LocationRequest):
    """Request schema for a daylight series."""

    start: date
    end: date

    @model_validator(mode="after")
    def validate_range(self) -> "SeriesRequest":
        """Validate date ordering."""
        if self.start > self.end:
            raise ValueError("start must be <= end")
        return self


class SeriesResponse(BaseModel):
    """Daylight series payload."""

    rows: list[dict[str, Any]]
    summary: dict[str, Any]


def _no_sun_event(exc: NoSunriseOrSunset) -> HTTPException:
    """Map a polar condition to a 422 response."""
    return HTTPException(
        status_code=422,
        detail={
            "error": "no_sunrise_or_sunset",
            "condition": exc.condition,
            "message": str(exc),
        },
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI app."""
    resolved = settings or Settings.from_env()
    app = FastAPI(title="solarday", version="0.1.0")
    app.state.settings = resolved

    @app.get("/health")
    def get_health() -> dict[str, str]:
        return {"status": "ok", "horizon": resolved.horizon.value}

    @app.post("/solar")
    def post_solar(payload: SolarRequest) -> dict[str, Any]:
        """Compute the full solar report for one location, date and time."""
        horizon = payload.horizon or resolved.horizon
        try:
            report = calculate(payload.to_input(), horizon=horizon)
        except InvalidInput as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except NoSunriseOrSunset as exc:
            raise _no_sun_event(exc) from exc
        return report.to_dict()

    @app.post("/daylight-series", response_model=SeriesResponse)
    def post_daylight_series(payload: SeriesRequest) -> SeriesResponse:
        """Compute sunrise/sunset rows and a summary over a date range."""
        horizon = payload.horizon or resolved.horizon
        try:
            rows = daylight_series(
                payload.lat,
                payload.lon,
                payload.utc_offset_hours,
                payload.start,
                payload.end,
                horizon=horizon,
                max_days=resolved.series_max_days,
            )
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        LOG.info(
            "daylight series lat=%.4f lon=%.4f days=%d",
            payload.lat,
            payload.lon,
            len(rows),
        )
        return SeriesResponse(
            rows=[row.to_dict() for row in rows],
            summary=summarize_daylight(rows),
        )

    return app


app = create_app()
