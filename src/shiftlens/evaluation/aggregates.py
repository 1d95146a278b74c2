"""Per-employee hour aggregation over a week or month."""

from __future__ import annotations

import datetime as dt
import locale
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field

import pandas as pd

from shiftlens.core.errors import ShiftLensValueError
from shiftlens.roster.contract.models import AnalyticsConfig, Shift, Timeframe
from shiftlens.scheduling.dates import CalendarDate, in_range, timeframe_range, to_canonical_string
from shiftlens.scheduling.resolve import resolve_shift
from shiftlens.telemetry.trace import TraceObserver, emit

__all__ = [
    "EMPLOYEE_HOURS_COLUMNS",
    "ROLE_HOURS_COLUMNS",
    "EmployeeAggregate",
    "aggregate_hours",
    "sort_aggregates",
    "aggregates_dataframe",
    "role_hours_dataframe",
]

EMPLOYEE_HOURS_COLUMNS = [
    "name",
    "total_hours",
    "shift_count",
    "is_overtime",
    "shift_ids",
]

ROLE_HOURS_COLUMNS = ["name", "role", "hours"]


@dataclass(slots=True)
class EmployeeAggregate:
    """Hours worked by one employee inside the requested timeframe.

    Attributes
    ----------
    name:
        Employee display name (the grouping key).
    total_hours:
        Sum of all included shift durations, in hours.
    shift_count:
        Number of included shifts; always ``len(shift_ids)``.
    hours_by_role:
        Hours contributed under each role present for this employee.
    is_overtime:
        ``True`` when ``total_hours`` is strictly above the timeframe threshold.
    shift_ids:
        Ids of the included shifts, in input order.
    """

    name: str
    total_hours: float = 0.0
    shift_count: int = 0
    hours_by_role: dict[str, float] = field(default_factory=dict)
    is_overtime: bool = False
    shift_ids: list[str] = field(default_factory=list)


@dataclass(slots=True)
class _Tally:
    minutes: int = 0
    minutes_by_role: dict[str, int] = field(default_factory=dict)
    shift_ids: list[str] = field(default_factory=list)


def aggregate_hours(
    shifts: Iterable[Shift],
    reference_date: CalendarDate | dt.date | str,
    timeframe: Timeframe | str,
    *,
    config: AnalyticsConfig | None = None,
    observer: TraceObserver | None = None,
) -> list[EmployeeAggregate]:
    """Aggregate shift hours per employee for the week or month around ``reference_date``.

    Parameters
    ----------
    shifts:
        Shift records to consider. Records with an unreadable date or time are skipped.
    reference_date:
        Any day inside the wanted window.
    timeframe:
        ``"week"`` (Sunday-Saturday) or ``"month"``.
    config:
        Optional thresholds; defaults to 40 h/week and 160 h/month.
    observer:
        Optional trace observer receiving ``shift_excluded`` and ``aggregate_complete``.

    Returns
    -------
    list[EmployeeAggregate]
        One entry per employee, in order of first appearance. Durations are summed as
        whole minutes before conversion so the totals do not depend on input order.

    Raises
    ------
    ShiftLensValueError
        If ``timeframe`` is unknown or ``reference_date`` is not a valid date.
    """
    frame = Timeframe.coerce(timeframe)
    settings = config or AnalyticsConfig()
    start, end = timeframe_range(reference_date, frame)
    threshold = settings.threshold_for(frame)

    tallies: dict[str, _Tally] = {}
    for shift in shifts:
        resolved = resolve_shift(shift, observer=observer)
        if resolved is None or not in_range(resolved.day, start, end):
            continue
        tally = tallies.setdefault(shift.employee_name, _Tally())
        tally.minutes += resolved.duration_minutes
        tally.minutes_by_role[shift.role] = (
            tally.minutes_by_role.get(shift.role, 0) + resolved.duration_minutes
        )
        tally.shift_ids.append(shift.id)

    aggregates: list[EmployeeAggregate] = []
    for name, tally in tallies.items():
        total_hours = tally.minutes / 60
        aggregates.append(
            EmployeeAggregate(
                name=name,
                total_hours=total_hours,
                shift_count=len(tally.shift_ids),
                hours_by_role={role: minutes / 60 for role, minutes in tally.minutes_by_role.items()},
                is_overtime=total_hours > threshold,
                shift_ids=list(tally.shift_ids),
            )
        )
    emit(
        observer,
        "aggregate_complete",
        timeframe=frame.value,
        start=to_canonical_string(start),
        end=to_canonical_string(end),
        employees=len(aggregates),
    )
    return aggregates


_SORT_KEYS: dict[str, Callable[[EmployeeAggregate], object]] = {
    "name": lambda item: (locale.strxfrm(item.name.casefold()), item.name),
    "hours": lambda item: item.total_hours,
    "shifts": lambda item: item.shift_count,
}


def sort_aggregates(
    aggregates: Sequence[EmployeeAggregate],
    by: str = "hours",
    direction: str = "desc",
) -> list[EmployeeAggregate]:
    """Return a sorted copy of ``aggregates``.

    ``by`` is ``"name"`` (case-insensitive collation), ``"hours"`` or ``"shifts"``;
    ``direction`` is ``"asc"`` or ``"desc"``.
    """
    key = _SORT_KEYS.get(by.lower())
    if key is None:
        raise ShiftLensValueError(
            f"Unknown sort key {by!r}. Expected one of: {', '.join(_SORT_KEYS)}"
        )
    order = direction.lower()
    if order not in {"asc", "desc"}:
        raise ShiftLensValueError(f"Unknown sort direction {direction!r}. Expected asc or desc")
    return sorted(aggregates, key=key, reverse=order == "desc")


def aggregates_dataframe(aggregates: Sequence[EmployeeAggregate]) -> pd.DataFrame:
    """Return one row per employee (``EMPLOYEE_HOURS_COLUMNS``).

    ``shift_ids`` are joined with ``|`` so the frame round-trips through CSV.
    """
    if not aggregates:
        return pd.DataFrame(columns=EMPLOYEE_HOURS_COLUMNS)
    rows = [
        {
            "name": item.name,
            "total_hours": item.total_hours,
            "shift_count": item.shift_count,
            "is_overtime": item.is_overtime,
            "shift_ids": "|".join(item.shift_ids),
        }
        for item in aggregates
    ]
    return pd.DataFrame(rows).reindex(columns=EMPLOYEE_HOURS_COLUMNS)


def role_hours_dataframe(aggregates: Sequence[EmployeeAggregate]) -> pd.DataFrame:
    """Return the per-role breakdown in long form (``name``, ``role``, ``hours``)."""
    rows = [
        {"name": item.name, "role": role, "hours": hours}
        for item in aggregates
        for role, hours in item.hours_by_role.items()
    ]
    if not rows:
        return pd.DataFrame(columns=ROLE_HOURS_COLUMNS)
    return pd.DataFrame(rows).reindex(columns=ROLE_HOURS_COLUMNS)
