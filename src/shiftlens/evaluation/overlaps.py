"""Conflict detection for shifts double-booking one person in one role."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from shiftlens.roster.contract.models import Shift
from shiftlens.scheduling.resolve import ResolvedShift, resolve_shift

__all__ = ["OverlapResult", "find_overlaps", "overlap_map", "conflicting_pairs"]


@dataclass(slots=True)
class OverlapResult:
    has_overlap: bool = False
    overlapping_shifts: list[Shift] = field(default_factory=list)


def _intervals_overlap(first: ResolvedShift, second: ResolvedShift) -> bool:
    # Same-day instants as written; back-to-back shifts share an endpoint and do not clash.
    return (
        first.start_minutes < second.raw_end_minutes
        and first.raw_end_minutes > second.start_minutes
    )


def _same_slot(subject: ResolvedShift, other: ResolvedShift) -> bool:
    return (
        other.shift.id != subject.shift.id
        and other.day == subject.day
        and other.shift.employee_name == subject.shift.employee_name
        and other.shift.role == subject.shift.role
    )


def find_overlaps(subject: Shift, all_shifts: Iterable[Shift]) -> OverlapResult:
    """Return the shifts that clash with ``subject``.

    Only shifts on the same date, for the same employee and the same role count; the
    same person working two different roles at once is not reported. Shifts with an
    unreadable date or time never overlap anything.
    """
    resolved_subject = resolve_shift(subject)
    if resolved_subject is None:
        return OverlapResult()
    overlapping: list[Shift] = []
    for other in all_shifts:
        resolved_other = resolve_shift(other)
        if resolved_other is None or not _same_slot(resolved_subject, resolved_other):
            continue
        if _intervals_overlap(resolved_subject, resolved_other):
            overlapping.append(other)
    return OverlapResult(has_overlap=bool(overlapping), overlapping_shifts=overlapping)


def overlap_map(shifts: Sequence[Shift]) -> dict[str, OverlapResult]:
    """Return the :func:`find_overlaps` result for every shift, keyed by id."""
    return {shift.id: find_overlaps(shift, shifts) for shift in shifts}


def conflicting_pairs(shifts: Sequence[Shift]) -> list[tuple[Shift, Shift]]:
    """List each clashing pair once, ordered by the position of the first shift."""
    pairs: list[tuple[Shift, Shift]] = []
    seen: set[frozenset[str]] = set()
    for shift in shifts:
        for other in find_overlaps(shift, shifts).overlapping_shifts:
            key = frozenset((shift.id, other.id))
            if key in seen:
                continue
            seen.add(key)
            pairs.append((shift, other))
    return pairs
