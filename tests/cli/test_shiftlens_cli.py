import json
from pathlib import Path

import pandas as pd
from typer.testing import CliRunner

from shiftlens.cli.main import app
from shiftlens.telemetry import read_jsonl

ROSTER = Path(__file__).resolve().parents[1] / "fixtures" / "roster_week.json"


def _invoke(args: list[str]):
    runner = CliRunner()
    return runner.invoke(app, args, prog_name="shiftlens")


def test_hours_exports_sorted_table(tmp_path: Path) -> None:
    out_csv = tmp_path / "hours.csv"
    trace_log = tmp_path / "trace.jsonl"
    result = _invoke(
        [
            "hours",
            str(ROSTER),
            "--date",
            "2024-04-03",
            "--timeframe",
            "week",
            "--out-csv",
            str(out_csv),
            "--trace-log",
            str(trace_log),
        ]
    )
    assert result.exit_code == 0, result.output
    assert "Overtime threshold: 40.0 h" in result.output

    frame = pd.read_csv(out_csv, dtype={"shift_ids": str})
    assert frame["name"].tolist() == ["John Doe", "Jane Smith", "Alex Kim"]
    assert frame["total_hours"].tolist() == [16.0, 12.0, 8.0]
    assert frame["shift_ids"].tolist() == ["1|2", "3|4", "5"]
    assert not frame["is_overtime"].any()

    events = read_jsonl(trace_log)
    excluded = {record["shift_id"] for record in events if record["event"] == "shift_excluded"}
    assert excluded == {"6", "7"}
    assert events[-1]["event"] == "aggregate_complete"
    assert events[-1]["context"]["command"] == "hours"


def test_hours_month_with_config_threshold(tmp_path: Path) -> None:
    config = tmp_path / "shiftlens.yaml"
    config.write_text("analytics:\n  monthly_overtime_hours: 10\n")
    out_csv = tmp_path / "hours.csv"
    result = _invoke(
        [
            "hours",
            str(ROSTER),
            "-d",
            "2024-04-20",
            "-t",
            "month",
            "--sort",
            "name",
            "--direction",
            "asc",
            "--config",
            str(config),
            "--out-csv",
            str(out_csv),
        ]
    )
    assert result.exit_code == 0, result.output
    assert "Overtime threshold: 10.0 h" in result.output
    frame = pd.read_csv(out_csv).set_index("name")
    assert bool(frame.loc["John Doe", "is_overtime"]) is True
    assert bool(frame.loc["Jane Smith", "is_overtime"]) is True
    assert bool(frame.loc["Alex Kim", "is_overtime"]) is False


def test_hours_rejects_bad_options() -> None:
    assert _invoke(["hours", str(ROSTER), "--timeframe", "year"]).exit_code != 0
    assert _invoke(["hours", str(ROSTER), "--date", "2024-02-30"]).exit_code != 0


def test_overlaps_reports_conflicts() -> None:
    result = _invoke(["overlaps", str(ROSTER)])
    assert result.exit_code == 0, result.output
    assert "1 conflict(s) found" in result.output

    failing = _invoke(["overlaps", str(ROSTER), "--fail-on-conflict"])
    assert failing.exit_code == 1


def test_overlaps_clean_roster(tmp_path: Path) -> None:
    roster = tmp_path / "clean.json"
    roster.write_text(
        json.dumps(
            [
                {"id": "a", "employeeName": "Ann", "role": "Cook", "date": "2024-04-03",
                 "startTime": "09:00", "endTime": "13:00"},
                {"id": "b", "employeeName": "Ann", "role": "Cook", "date": "2024-04-03",
                 "startTime": "13:00", "endTime": "17:00"},
            ]
        )
    )
    result = _invoke(["overlaps", str(roster), "--fail-on-conflict"])
    assert result.exit_code == 0, result.output
    assert "No overlapping shifts." in result.output


def test_timeline_role_layout_json(tmp_path: Path) -> None:
    out_json = tmp_path / "timeline.json"
    result = _invoke(
        [
            "timeline",
            str(ROSTER),
            "--date",
            "2024-04-03",
            "--group-by",
            "role",
            "--out-json",
            str(out_json),
        ]
    )
    assert result.exit_code == 0, result.output
    payload = json.loads(out_json.read_text())
    assert payload["date"] == "2024-04-03"
    assert payload["group_by"] == "role"
    assert payload["hour_range"] == [7, 29]
    assert len(payload["hour_labels"]) == 23
    assert list(payload["entries"]) == ["Cook", "Front Desk"]
    cook = payload["entries"]["Cook"]
    assert [entry["id"] for entry in cook] == ["3", "4"]
    assert [entry["vertical_slot"] for entry in cook] == [0, 1]
    assert cook[0]["color"] == "#ef4444"
    assert payload["entries"]["Front Desk"][0]["width_fraction"] == 8 / 23


def test_timeline_rejects_unknown_grouping() -> None:
    result = _invoke(["timeline", str(ROSTER), "--group-by", "department"])
    assert result.exit_code != 0


def test_staffing_csv(tmp_path: Path) -> None:
    out_csv = tmp_path / "staffing.csv"
    result = _invoke(["staffing", str(ROSTER), "--date", "2024-04-03", "--out-csv", str(out_csv)])
    assert result.exit_code == 0, result.output
    frame = pd.read_csv(out_csv)
    assert frame.columns.tolist() == ["hour", "total", "Cook", "Front Desk"]
    by_hour = frame.set_index("hour")["total"]
    assert by_hour[16] == 2
    assert by_hour[22] == 1
    assert by_hour[3] == 1
    assert by_hour[6] == 0


def test_heatmap_and_summary() -> None:
    heatmap = _invoke(["heatmap", str(ROSTER)])
    assert heatmap.exit_code == 0, heatmap.output
    assert "Weekly activity" in heatmap.output

    summary = _invoke(["summary", str(ROSTER), "--date", "2024-04-03"])
    assert summary.exit_code == 0, summary.output
    assert "Total shifts" in summary.output
    assert "Confirmed=4" in summary.output


def test_missing_file_is_rejected(tmp_path: Path) -> None:
    result = _invoke(["hours", str(tmp_path / "missing.json")])
    assert result.exit_code != 0


def test_unsupported_roster_is_a_usage_error(tmp_path: Path) -> None:
    roster = tmp_path / "roster.txt"
    roster.write_text("id,employeeName\n1,Ann\n")
    result = _invoke(["hours", str(roster), "--date", "2024-04-03"])
    assert result.exit_code == 2
    assert isinstance(result.exception, SystemExit)

    scalar = tmp_path / "scalar.json"
    scalar.write_text("42")
    assert _invoke(["overlaps", str(scalar)]).exit_code == 2


def test_bad_config_is_a_usage_error(tmp_path: Path) -> None:
    listing = tmp_path / "list.yaml"
    listing.write_text("- 1\n- 2\n")
    result = _invoke(["hours", str(ROSTER), "--date", "2024-04-03", "--config", str(listing)])
    assert result.exit_code == 2
    assert isinstance(result.exception, SystemExit)

    invalid = tmp_path / "invalid.yaml"
    invalid.write_text("analytics:\n  timeline_start_hour: 23\n  timeline_end_hour: 7\n")
    result = _invoke(
        ["timeline", str(ROSTER), "--date", "2024-04-03", "--config", str(invalid)]
    )
    assert result.exit_code == 2
    assert isinstance(result.exception, SystemExit)
