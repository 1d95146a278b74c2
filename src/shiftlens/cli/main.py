from __future__ import annotations

import json
from pathlib import Path

import click
import typer
from rich.console import Console
from rich.table import Table

from shiftlens.cli._utils import (
    format_hours,
    load_roster,
    load_settings,
    observer_for,
    resolve_reference_date,
)
from shiftlens.core.errors import ShiftLensValueError
from shiftlens.evaluation import (
    WEEKDAY_LABELS,
    aggregate_hours,
    aggregates_dataframe,
    conflicting_pairs,
    hourly_staffing,
    roster_summary,
    sort_aggregates,
    staffing_dataframe,
    weekly_heatmap,
)
from shiftlens.scheduling import format_display_date, format_hour_label, format_time_12h, layout_timeline

app = typer.Typer(add_completion=False, no_args_is_help=True, help="Shift analytics for roster files.")
console = Console()
TIMEFRAME = click.Choice(["week", "month"], case_sensitive=False)
GROUP_BY = click.Choice(["employee", "role"], case_sensitive=False)
SORT_KEY = click.Choice(["name", "hours", "shifts"], case_sensitive=False)
SORT_DIRECTION = click.Choice(["asc", "desc"], case_sensitive=False)

DATE_HELP = "Reference date (YYYY-MM-DD). Defaults to today."


@app.command()
def hours(
    shifts_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Shift file (.json or .csv)."),
    date: str | None = typer.Option(None, "--date", "-d", help=DATE_HELP),
    timeframe: str = typer.Option(
        "week",
        "--timeframe",
        "-t",
        help="Aggregation window (week|month).",
        show_choices=True,
        click_type=TIMEFRAME,
    ),
    sort: str = typer.Option("hours", "--sort", help="Sort column.", click_type=SORT_KEY),
    direction: str = typer.Option("desc", "--direction", help="Sort direction.", click_type=SORT_DIRECTION),
    config_path: Path | None = typer.Option(None, "--config", help="Optional analytics YAML."),
    trace_log: Path | None = typer.Option(None, "--trace-log", help="Append trace events to this JSONL file."),
    out_csv: Path | None = typer.Option(None, "--out-csv", help="Optional path to write the hour table as CSV."),
) -> None:
    """Show hours per employee with overtime flags."""
    shifts = load_roster(shifts_path)
    reference = resolve_reference_date(date)
    settings = load_settings(config_path)
    observer = observer_for(trace_log, command="hours", source=shifts_path)
    try:
        rows = aggregate_hours(shifts, reference, timeframe, config=settings, observer=observer)
        rows = sort_aggregates(rows, by=sort, direction=direction)
    except ShiftLensValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    threshold = settings.threshold_for(timeframe)
    table = Table(title=f"Hours ({timeframe.lower()} of {format_display_date(reference)})")
    table.add_column("Employee")
    table.add_column("Hours", justify="right")
    table.add_column("Shifts", justify="right")
    table.add_column("By role")
    table.add_column("Overtime")
    for row in rows:
        roles = ", ".join(f"{role} {format_hours(value)}" for role, value in row.hours_by_role.items())
        flag = "[red]yes[/red]" if row.is_overtime else "no"
        table.add_row(row.name, format_hours(row.total_hours), str(row.shift_count), roles, flag)
    console.print(table)
    console.print(f"Overtime threshold: {format_hours(threshold)} h")

    if out_csv:
        out_csv.parent.mkdir(parents=True, exist_ok=True)
        aggregates_dataframe(rows).to_csv(out_csv, index=False)
        console.print(f"Wrote hour table to {out_csv}")


@app.command()
def overlaps(
    shifts_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Shift file (.json or .csv)."),
    fail_on_conflict: bool = typer.Option(
        False,
        "--fail-on-conflict",
        help="Exit with status 1 when any conflict is found.",
    ),
) -> None:
    """List shifts that double-book an employee in the same role."""
    shifts = load_roster(shifts_path)
    pairs = conflicting_pairs(shifts)
    if not pairs:
        console.print("[green]No overlapping shifts.[/green]")
        return
    table = Table(title="Overlapping shifts")
    table.add_column("Date")
    table.add_column("Employee")
    table.add_column("Role")
    table.add_column("Shift A")
    table.add_column("Shift B")
    for first, second in pairs:
        table.add_row(
            first.date,
            first.employee_name,
            first.role,
            f"{first.id} {format_time_12h(first.start_time)}-{format_time_12h(first.end_time)}",
            f"{second.id} {format_time_12h(second.start_time)}-{format_time_12h(second.end_time)}",
        )
    console.print(table)
    console.print(f"[yellow]{len(pairs)} conflict(s) found[/yellow]")
    if fail_on_conflict:
        raise typer.Exit(1)


@app.command()
def timeline(
    shifts_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Shift file (.json or .csv)."),
    date: str | None = typer.Option(None, "--date", "-d", help=DATE_HELP),
    group_by: str = typer.Option(
        "employee",
        "--group-by",
        "-g",
        help="Lane grouping (employee|role).",
        show_choices=True,
        click_type=GROUP_BY,
    ),
    config_path: Path | None = typer.Option(None, "--config", help="Optional analytics YAML."),
    trace_log: Path | None = typer.Option(None, "--trace-log", help="Append trace events to this JSONL file."),
    out_json: Path | None = typer.Option(None, "--out-json", help="Optional path to write the layout as JSON."),
) -> None:
    """Lay out one day's shifts on an hour timeline."""
    shifts = load_roster(shifts_path)
    reference = resolve_reference_date(date)
    settings = load_settings(config_path)
    observer = observer_for(trace_log, command="timeline", source=shifts_path)
    try:
        layout = layout_timeline(shifts, reference, group_by, config=settings, observer=observer)
    except ShiftLensValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    start_hour, end_hour = layout.hour_range
    console.print(
        f"[bold]Timeline {format_display_date(reference)}[/bold] "
        f"{format_hour_label(start_hour)} - {format_hour_label(end_hour)}"
    )
    table = Table()
    table.add_column(group_by.capitalize())
    table.add_column("Lane", justify="right")
    table.add_column("Shift")
    table.add_column("Time")
    table.add_column("Offset", justify="right")
    table.add_column("Width", justify="right")
    for group, entries in layout.entries.items():
        for entry in entries:
            label = entry.shift.role if group_by.lower() == "employee" else entry.shift.employee_name
            table.add_row(
                group,
                str(entry.vertical_slot),
                f"{entry.shift.id} {label}",
                f"{format_time_12h(entry.shift.start_time)}-{format_time_12h(entry.shift.end_time)}",
                f"{entry.start_offset_fraction:.1%}",
                f"{entry.width_fraction:.1%}",
            )
    console.print(table)

    if out_json:
        payload = {
            "date": layout.date,
            "group_by": layout.group_by.value,
            "hour_range": list(layout.hour_range),
            "hour_labels": layout.hour_labels(),
            "entries": {
                group: [
                    {
                        "id": entry.shift.id,
                        "employee_name": entry.shift.employee_name,
                        "role": entry.shift.role,
                        "vertical_slot": entry.vertical_slot,
                        "start_offset_fraction": entry.start_offset_fraction,
                        "width_fraction": entry.width_fraction,
                        "color": entry.color,
                    }
                    for entry in entries
                ]
                for group, entries in layout.entries.items()
            },
        }
        out_json.parent.mkdir(parents=True, exist_ok=True)
        out_json.write_text(json.dumps(payload, indent=2))
        console.print(f"Wrote layout to {out_json}")


@app.command()
def staffing(
    shifts_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Shift file (.json or .csv)."),
    date: str | None = typer.Option(None, "--date", "-d", help=DATE_HELP),
    out_csv: Path | None = typer.Option(None, "--out-csv", help="Optional path to write hourly levels as CSV."),
) -> None:
    """Show how many shifts are on duty each hour of a day."""
    shifts = load_roster(shifts_path)
    reference = resolve_reference_date(date)
    levels = hourly_staffing(shifts, reference)
    roles = list(levels[0].by_role) if levels else []
    table = Table(title=f"Staffing levels {format_display_date(reference)}")
    table.add_column("Hour")
    table.add_column("Total", justify="right")
    for role in roles:
        table.add_column(role, justify="right")
    for level in levels:
        if level.total == 0:
            continue
        table.add_row(
            format_hour_label(level.hour),
            str(level.total),
            *(str(level.by_role[role]) for role in roles),
        )
    console.print(table)
    if out_csv:
        out_csv.parent.mkdir(parents=True, exist_ok=True)
        staffing_dataframe(levels).to_csv(out_csv, index=False)
        console.print(f"Wrote staffing levels to {out_csv}")


@app.command()
def heatmap(
    shifts_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Shift file (.json or .csv)."),
) -> None:
    """Print distinct employees on duty per weekday and hour."""
    grid = weekly_heatmap(load_roster(shifts_path))
    table = Table(title="Weekly activity")
    table.add_column("Day")
    for hour in range(24):
        table.add_column(format_hour_label(hour) if hour % 3 == 0 else "", justify="right")
    for label, row in zip(WEEKDAY_LABELS, grid):
        table.add_row(label, *(str(value) if value else "" for value in row))
    console.print(table)


@app.command()
def summary(
    shifts_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Shift file (.json or .csv)."),
    date: str | None = typer.Option(None, "--date", "-d", help=DATE_HELP),
) -> None:
    """Print dashboard totals for a roster."""
    shifts = load_roster(shifts_path)
    result = roster_summary(shifts, resolve_reference_date(date))
    table = Table(title=f"Roster: {shifts_path.name}")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Total shifts", str(result.total_shifts))
    table.add_row("Employees", str(result.unique_employees))
    table.add_row("Total hours", format_hours(result.total_hours))
    table.add_row("Shifts today", str(result.shifts_today))
    console.print(table)
    if result.status_counts:
        console.print(
            "[bold]Status[/bold] "
            + ", ".join(f"{status}={count}" for status, count in sorted(result.status_counts.items()))
        )
    if result.role_distribution:
        console.print(
            "[bold]Roles[/bold] "
            + ", ".join(f"{role}={count}" for role, count in result.role_distribution)
        )


if __name__ == "__main__":
    app()
