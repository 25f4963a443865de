"""Command-line entrypoint for solarday."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence
from datetime import date, time

from solarday.calculator import calculate
from solarday.config import Settings
from solarday.contracts import Horizon, SolarInput
from solarday.errors import NoSunriseOrSunset
from solarday.logs import configure_logging
from solarday.orchestrate.series import daylight_series, summarize_daylight
from solarday.report import render_report

EXIT_INVALID_INPUT = 2
EXIT_NO_SUN_EVENT = 3


def _parse_date(value: str) -> date:
    """Parse an ISO `YYYY-MM-DD` date."""
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid date: {value}") from exc


def _parse_time(value: str) -> time:
    """Parse a local `HH:MM[:SS]` clock time."""
    try:
        return time.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid time: {value}") from exc


def _add_location_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--lat", type=float, required=True, help="Latitude, north positive.")
    parser.add_argument("--lon", type=float, required=True, help="Longitude, east positive.")
    parser.add_argument(
        "--utc-offset",
        type=float,
        required=True,
        help="Local clock offset from UTC in hours, east positive.",
    )
    parser.add_argument(
        "--horizon",
        choices=[h.value for h in Horizon],
        default=None,
        help="Sunrise/sunset horizon (default from SOLARDAY_HORIZON or 'official').",
    )
    parser.add_argument("--json", action="store_true", help="Emit JSON instead of text.")


def build_parser() -> argparse.ArgumentParser:
    """Create and return the top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="solarday",
        description="Solar position, sunrise and sunset calculator.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 0.1.0",
    )
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL.")

    subparsers = parser.add_subparsers(dest="command")
    calc = subparsers.add_parser(
        "calc",
        help="Compute solar position and day events for one date and time.",
    )
    _add_location_args(calc)
    calc.add_argument("--date", type=_parse_date, required=True)
    calc.add_argument("--time", type=_parse_time, default=time(12, 0, 0))
    calc.add_argument(
        "--brief",
        action="store_true",
        help="Text output without intermediate quantities.",
    )

    series = subparsers.add_parser(
        "series",
        help="Tabulate sunrise, sunset and sunlight for every date in a range.",
    )
    _add_location_args(series)
    series.add_argument("--start", type=_parse_date, required=True)
    series.add_argument("--end", type=_parse_date, required=True)

    return parser


def _run_calc(args: argparse.Namespace, horizon: Horizon) -> int:
    inputs = SolarInput(
        latitude_deg=args.lat,
        longitude_deg=args.lon,
        utc_offset_hours=args.utc_offset,
        year=args.date.year,
        month=args.date.month,
        day=args.date.day,
        hour=args.time.hour,
        minute=args.time.minute,
        second=args.time.second,
    )
    report = calculate(inputs, horizon=horizon)
    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        print(render_report(report, include_intermediate=not args.brief))
    return 0


def _run_series(args: argparse.Namespace, horizon: Horizon, settings: Settings) -> int:
    rows = daylight_series(
        args.lat,
        args.lon,
        args.utc_offset,
        args.start,
        args.end,
        horizon=horizon,
        max_days=settings.series_max_days,
    )
    summary = summarize_daylight(rows)
    if args.json:
        print(json.dumps({"rows": [row.to_dict() for row in rows], "summary": summary}, indent=2))
        return 0

    for row in rows:
        print(
            f"{row.date.isoformat()}  "
            f"{row.sunrise_hms or '--:--:--'}  "
            f"{row.sunset_hms or '--:--:--'}  "
            f"{row.sunlight_minutes:8.2f} min  {row.condition}"
        )
    print(
        f"days={summary['days']} "
        f"shortest={summary['shortest_day']} ({summary['min_sunlight_minutes']:.2f} min) "
        f"longest={summary['longest_day']} ({summary['max_sunlight_minutes']:.2f} min) "
        f"mean={summary['mean_sunlight_minutes']:.2f} min"
    )
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI application."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(level=args.log_level)
    settings = Settings.from_env()
    horizon = Horizon(args.horizon) if args.horizon else settings.horizon

    try:
        if args.command == "calc":
            return _run_calc(args, horizon)
        if args.command == "series":
            return _run_series(args, horizon, settings)
    except NoSunriseOrSunset as exc:
        print(f"no sunrise or sunset: {exc.condition}", file=sys.stderr)
        return EXIT_NO_SUN_EVENT
    except ValueError as exc:
        print(f"invalid input: {exc}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
