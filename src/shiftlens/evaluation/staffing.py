"""Staffing level, weekly heatmap and roster summary analytics."""

from __future__ import annotations

import datetime as dt
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

import pandas as pd

from shiftlens.roster.contract.models import Shift
from shiftlens.scheduling.dates import (
    CalendarDate,
    coerce_calendar_date,
    from_canonical_string,
)
from shiftlens.scheduling.resolve import ResolvedShift, resolve_shift, resolve_shifts
from shiftlens.telemetry.trace import TraceObserver

__all__ = [
    "HOURS_PER_DAY",
    "WEEKDAY_LABELS",
    "HourlyStaffing",
    "RosterSummary",
    "covered_hours",
    "hourly_staffing",
    "weekly_heatmap",
    "roster_summary",
    "staffing_dataframe",
]

HOURS_PER_DAY = 24
WEEKDAY_LABELS = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]


@dataclass(slots=True)
class HourlyStaffing:
    hour: int
    total: int = 0
    by_role: dict[str, int] = field(default_factory=dict)


@dataclass(slots=True)
class RosterSummary:
    """Headline numbers for the dashboard.

    Attributes
    ----------
    total_shifts:
        Every shift record supplied, valid or not.
    unique_employees:
        Distinct non-blank employee names.
    total_hours:
        Hours across shifts whose date and times parse.
    shifts_today:
        Shifts dated on the reference day.
    status_counts:
        Shift count per workflow status.
    role_distribution:
        ``(role, count)`` pairs, most frequent first.
    """

    total_shifts: int
    unique_employees: int
    total_hours: float
    shifts_today: int
    status_counts: dict[str, int]
    role_distribution: list[tuple[str, int]]


def covered_hours(item: ResolvedShift) -> list[int]:
    """Return the absolute hour slots (0.. past 24 for overnight) the shift touches."""
    if item.duration_minutes <= 0:
        return []
    first = item.start_minutes // 60
    last = (item.end_minutes - 1) // 60
    return list(range(first, last + 1))


def hourly_staffing(
    shifts: Iterable[Shift],
    date: CalendarDate | dt.date | str,
    *,
    observer: TraceObserver | None = None,
) -> list[HourlyStaffing]:
    """Count shifts working each hour of ``date``, overall and per role.

    The portion of an overnight shift after midnight folds back onto the early hours
    of the same 24-bucket list.
    """
    target = coerce_calendar_date(date)
    day_shifts = [item for item in resolve_shifts(shifts, observer=observer) if item.day == target]
    roles = list(dict.fromkeys(item.shift.role for item in day_shifts))
    levels = [
        HourlyStaffing(hour=hour, by_role={role: 0 for role in roles})
        for hour in range(HOURS_PER_DAY)
    ]
    for item in day_shifts:
        buckets = {hour % HOURS_PER_DAY for hour in covered_hours(item)}
        for bucket in sorted(buckets):
            levels[bucket].total += 1
            levels[bucket].by_role[item.shift.role] += 1
    return levels


def weekly_heatmap(
    shifts: Iterable[Shift], *, observer: TraceObserver | None = None
) -> list[list[int]]:
    """Return a 7x24 grid (Sunday first) of distinct employees working each hour.

    Hours after midnight of an overnight shift land on the following weekday row.
    """
    grid: list[list[set[str]]] = [[set() for _ in range(HOURS_PER_DAY)] for _ in range(7)]
    for item in resolve_shifts(shifts, observer=observer):
        row = item.day.days_since_sunday()
        for hour in covered_hours(item):
            day_offset, column = divmod(hour, HOURS_PER_DAY)
            grid[(row + day_offset) % 7][column].add(item.shift.employee_name)
    return [[len(cell) for cell in day] for day in grid]


def roster_summary(
    shifts: Sequence[Shift], today: CalendarDate | dt.date | str
) -> RosterSummary:
    """Summarise a roster relative to ``today``."""
    target = coerce_calendar_date(today)
    total_minutes = 0
    shifts_today = 0
    for shift in shifts:
        if from_canonical_string(shift.date) == target:
            shifts_today += 1
        resolved = resolve_shift(shift)
        if resolved is not None:
            total_minutes += resolved.duration_minutes
    names = {shift.employee_name for shift in shifts if shift.employee_name.strip()}
    statuses = Counter(shift.status for shift in shifts if shift.status)
    roles = Counter(shift.role for shift in shifts if shift.role)
    return RosterSummary(
        total_shifts=len(shifts),
        unique_employees=len(names),
        total_hours=total_minutes / 60,
        shifts_today=shifts_today,
        status_counts=dict(statuses),
        role_distribution=sorted(roles.items(), key=lambda pair: pair[1], reverse=True),
    )


def staffing_dataframe(levels: Sequence[HourlyStaffing]) -> pd.DataFrame:
    """Return ``hour``, ``total`` and one column per role."""
    roles: list[str] = []
    for level in levels:
        for role in level.by_role:
            if role not in roles:
                roles.append(role)
    columns = ["hour", "total", *roles]
    if not levels:
        return pd.DataFrame(columns=columns)
    rows = [
        {"hour": level.hour, "total": level.total, **{role: level.by_role.get(role, 0) for role in roles}}
        for level in levels
    ]
    return pd.DataFrame(rows).reindex(columns=columns)
