"""CLI helper utilities for shiftlens."""

from __future__ import annotations

from pathlib import Path

import typer
from pydantic import ValidationError

from shiftlens.core.errors import ShiftLensValueError
from shiftlens.roster.contract.models import AnalyticsConfig, Shift
from shiftlens.roster.io import load_config, load_shifts
from shiftlens.scheduling.dates import CalendarDate, coerce_calendar_date
from shiftlens.telemetry.trace import JsonlTraceObserver


def resolve_reference_date(value: str | None) -> CalendarDate:
    """Parse ``--date`` (``YYYY-MM-DD``), falling back to today's date."""
    if value is None:
        return CalendarDate.today()
    try:
        return coerce_calendar_date(value)
    except ShiftLensValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--date") from exc


def load_roster(path: Path) -> list[Shift]:
    """Load the shift file argument, reporting unreadable files as usage errors."""
    try:
        return load_shifts(path)
    except (ShiftLensValueError, ValidationError) as exc:
        raise typer.BadParameter(str(exc), param_hint="SHIFTS_PATH") from exc


def load_settings(config_path: Path | None) -> AnalyticsConfig:
    """Return defaults, or the ``--config`` YAML validated into :class:`AnalyticsConfig`."""
    if config_path is None:
        return AnalyticsConfig()
    try:
        return load_config(config_path)
    except FileNotFoundError as exc:
        raise typer.BadParameter(f"{config_path} does not exist", param_hint="--config") from exc
    except (ShiftLensValueError, ValidationError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc


def observer_for(trace_log: Path | None, *, command: str, source: Path) -> JsonlTraceObserver | None:
    if trace_log is None:
        return None
    return JsonlTraceObserver(trace_log, context={"command": command, "source": str(source)})


def format_hours(value: float) -> str:
    return f"{value:.1f}"


__all__ = [
    "resolve_reference_date",
    "load_roster",
    "load_settings",
    "observer_for",
    "format_hours",
]
