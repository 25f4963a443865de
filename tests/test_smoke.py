"""Smoke tests for the package CLI."""

from __future__ import annotations

import json

import pytest

from solarday.__main__ import EXIT_INVALID_INPUT, EXIT_NO_SUN_EVENT, main


def test_cli_import_smoke() -> None:
    """Ensure CLI entrypoint can be imported and executed."""
    assert main([]) == 0


def test_cli_calc_text_report(capsys: pytest.CaptureFixture[str]) -> None:
    """`calc` prints the fixed-width report for the reference location."""
    code = main(
        ["calc", "--lat", "41", "--lon", "29", "--utc-offset", "2", "--date", "2016-01-01"]
    )

    out = capsys.readouterr().out
    assert code == 0
    assert "07:28:49" in out
    assert "16:45:21" in out


def test_cli_calc_json(capsys: pytest.CaptureFixture[str]) -> None:
    """`calc --json` emits the structured report."""
    code = main(
        [
            "calc",
            "--lat", "41",
            "--lon", "29",
            "--utc-offset", "2",
            "--date", "2016-01-01",
            "--time", "12:00:00",
            "--json",
        ]
    )

    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["formatted"]["sunlight_duration"] == "09:16:32"
    assert payload["inputs"]["hour"] == 12


def test_cli_calc_polar_night_exit_code(capsys: pytest.CaptureFixture[str]) -> None:
    """Polar night is reported on stderr with a dedicated exit code."""
    code = main(["calc", "--lat", "80", "--lon", "15", "--utc-offset", "1", "--date", "2024-12-21"])

    assert code == EXIT_NO_SUN_EVENT
    assert "polar_night" in capsys.readouterr().err


def test_cli_calc_invalid_input_exit_code(capsys: pytest.CaptureFixture[str]) -> None:
    """Out-of-range coordinates are rejected before computation."""
    code = main(["calc", "--lat", "95", "--lon", "15", "--utc-offset", "1", "--date", "2024-12-21"])

    assert code == EXIT_INVALID_INPUT
    assert "latitude_deg" in capsys.readouterr().err


def test_cli_rejects_malformed_date() -> None:
    """argparse reports malformed dates as usage errors."""
    with pytest.raises(SystemExit) as excinfo:
        main(["calc", "--lat", "0", "--lon", "0", "--utc-offset", "0", "--date", "2024-02-30"])

    assert excinfo.value.code == 2


def test_cli_series_text(capsys: pytest.CaptureFixture[str]) -> None:
    """`series` prints one row per day and a summary line."""
    code = main(
        [
            "series",
            "--lat", "41",
            "--lon", "29",
            "--utc-offset", "2",
            "--start", "2016-01-01",
            "--end", "2016-01-03",
        ]
    )

    lines = capsys.readouterr().out.strip().splitlines()
    assert code == 0
    assert len(lines) == 4
    assert lines[0].startswith("2016-01-01  07:28:49  16:45:21")
    assert lines[-1].startswith("days=3 ")


def test_cli_series_reversed_range(capsys: pytest.CaptureFixture[str]) -> None:
    """A reversed date range is an input error."""
    code = main(
        [
            "series",
            "--lat", "41",
            "--lon", "29",
            "--utc-offset", "2",
            "--start", "2016-01-03",
            "--end", "2016-01-01",
        ]
    )

    assert code == EXIT_INVALID_INPUT
    assert "start must be <= end" in capsys.readouterr().err
