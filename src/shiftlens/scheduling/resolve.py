"""Resolve raw shift records into dated, timed intervals."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from shiftlens.roster.contract.models import Shift
from shiftlens.scheduling.dates import CalendarDate, from_canonical_string
from shiftlens.scheduling.times import MINUTES_PER_DAY, shift_interval
from shiftlens.telemetry.trace import TraceObserver, emit

__all__ = ["ResolvedShift", "resolve_shift", "resolve_shifts"]


@dataclass(frozen=True, slots=True)
class ResolvedShift:
    """A shift whose date and times all parsed.

    ``end_minutes`` carries the overnight wraparound (``>= 1440`` for shifts ending the
    next day); ``raw_end_minutes`` is the end time as written, on the same day.
    """

    shift: Shift
    day: CalendarDate
    start_minutes: int
    end_minutes: int

    @property
    def raw_end_minutes(self) -> int:
        return self.end_minutes % MINUTES_PER_DAY

    @property
    def duration_minutes(self) -> int:
        return self.end_minutes - self.start_minutes

    @property
    def duration_hours(self) -> float:
        return self.duration_minutes / 60

    @property
    def is_overnight(self) -> bool:
        return self.end_minutes >= MINUTES_PER_DAY


def resolve_shift(shift: Shift, *, observer: TraceObserver | None = None) -> ResolvedShift | None:
    """Return the resolved interval for ``shift`` or ``None`` when it must be excluded."""
    day = from_canonical_string(shift.date)
    if day is None:
        emit(observer, "shift_excluded", shift_id=shift.id, reason="invalid_date", value=shift.date)
        return None
    interval = shift_interval(shift.start_time, shift.end_time)
    if interval is None:
        emit(
            observer,
            "shift_excluded",
            shift_id=shift.id,
            reason="invalid_time",
            value=f"{shift.start_time}-{shift.end_time}",
        )
        return None
    start_minutes, end_minutes = interval
    return ResolvedShift(shift=shift, day=day, start_minutes=start_minutes, end_minutes=end_minutes)


def resolve_shifts(
    shifts: Iterable[Shift], *, observer: TraceObserver | None = None
) -> list[ResolvedShift]:
    """Resolve every shift, silently dropping the ones that cannot be placed."""
    resolved: list[ResolvedShift] = []
    for shift in shifts:
        item = resolve_shift(shift, observer=observer)
        if item is not None:
            resolved.append(item)
    return resolved
