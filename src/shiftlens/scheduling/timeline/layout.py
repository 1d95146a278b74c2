"""One-day timeline layout with per-role lane stacking."""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable, Mapping, Sequence

from shiftlens.roster.contract.models import AnalyticsConfig, GroupBy, Shift
from shiftlens.scheduling.dates import CalendarDate, coerce_calendar_date, to_canonical_string
from shiftlens.scheduling.resolve import ResolvedShift, resolve_shifts
from shiftlens.scheduling.roles import merged_role_colors, role_color
from shiftlens.telemetry.trace import TraceObserver, emit

from .models import TimelineEntry, TimelineLayout

__all__ = ["compute_hour_range", "assign_vertical_slots", "layout_timeline"]


def compute_hour_range(
    shifts: Iterable[ResolvedShift], config: AnalyticsConfig | None = None
) -> tuple[int, int]:
    """Return the ``(min_hour, max_hour)`` window covering every shift.

    Starts from the configured default (7 to 23), widens to the earliest start hour and
    the latest end hour (overnight ends count past 24), then enforces the minimum span.
    """
    settings = config or AnalyticsConfig()
    min_hour = settings.timeline_start_hour
    max_hour = settings.timeline_end_hour
    for item in shifts:
        min_hour = min(min_hour, item.start_minutes // 60)
        max_hour = max(max_hour, item.end_minutes // 60)
    if max_hour - min_hour < settings.timeline_min_span_hours:
        max_hour = min_hour + settings.timeline_min_span_hours
    return min_hour, max_hour


def assign_vertical_slots(shifts: Sequence[ResolvedShift]) -> list[int]:
    """Greedy lane assignment for shifts already ordered by start time.

    Each shift takes the lowest lane not held by an earlier shift whose interval it
    intersects (half-open, overnight ends wrapped). The result is collision free but not
    necessarily the minimum number of lanes.
    """
    slots: list[int] = []
    for index, current in enumerate(shifts):
        taken = {
            slots[prev_index]
            for prev_index, previous in enumerate(shifts[:index])
            if previous.start_minutes < current.end_minutes
            and previous.end_minutes > current.start_minutes
        }
        slot = 0
        while slot in taken:
            slot += 1
        slots.append(slot)
    return slots


def _place(
    item: ResolvedShift,
    slot: int,
    hour_range: tuple[int, int],
    palette: Mapping[str, str],
) -> TimelineEntry:
    min_hour, max_hour = hour_range
    span = max_hour - min_hour + 1
    return TimelineEntry(
        shift=item.shift,
        vertical_slot=slot,
        start_minutes=item.start_minutes,
        end_minutes=item.end_minutes,
        start_offset_fraction=(item.start_minutes / 60 - min_hour) / span,
        width_fraction=item.duration_hours / span,
        color=role_color(item.shift.role, palette),
    )


def layout_timeline(
    shifts: Iterable[Shift],
    date: CalendarDate | dt.date | str,
    group_by: GroupBy | str,
    *,
    config: AnalyticsConfig | None = None,
    role_colors: Mapping[str, str] | None = None,
    observer: TraceObserver | None = None,
) -> TimelineLayout:
    """Lay out the shifts of ``date`` on a horizontal hour timeline.

    Parameters
    ----------
    shifts:
        Candidate shifts; only those on ``date`` with readable times are placed.
    date:
        Calendar day to render.
    group_by:
        ``"employee"`` (one lane per person) or ``"role"`` (shifts of a role stacked into
        lanes so simultaneous shifts do not cover each other).
    config:
        Optional default hour window / minimum span and role colour overrides.
    role_colors:
        Role to colour lookup supplied by the caller; wins over ``config.role_colors``.
    observer:
        Optional trace observer.

    Returns
    -------
    TimelineLayout
        Hour range and entries grouped by employee name or role. Groups and the entries
        inside them follow start time, ties keeping input order.

    Raises
    ------
    ShiftLensValueError
        If ``group_by`` is unknown or ``date`` is not a valid date.
    """
    mode = GroupBy.coerce(group_by)
    target = coerce_calendar_date(date)
    settings = config or AnalyticsConfig()
    palette = merged_role_colors(settings.role_colors)
    if role_colors:
        palette.update(role_colors)

    day_shifts = [item for item in resolve_shifts(shifts, observer=observer) if item.day == target]
    hour_range = compute_hour_range(day_shifts, settings)
    ordered = sorted(day_shifts, key=lambda item: item.start_minutes)

    groups: dict[str, list[ResolvedShift]] = {}
    for item in ordered:
        key = item.shift.employee_name if mode is GroupBy.EMPLOYEE else item.shift.role
        groups.setdefault(key, []).append(item)

    entries: dict[str, list[TimelineEntry]] = {}
    for key, items in groups.items():
        if mode is GroupBy.ROLE:
            slots = assign_vertical_slots(items)
        else:
            slots = [0] * len(items)
        entries[key] = [
            _place(item, slot, hour_range, palette) for item, slot in zip(items, slots)
        ]

    emit(
        observer,
        "timeline_complete",
        date=to_canonical_string(target),
        group_by=mode.value,
        hour_range=list(hour_range),
        placed=len(ordered),
    )
    return TimelineLayout(
        date=to_canonical_string(target),
        group_by=mode,
        hour_range=hour_range,
        entries=entries,
    )
