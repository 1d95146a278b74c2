"""Timeline geometry returned by the day layout engine."""

from __future__ import annotations

from dataclasses import dataclass, field

from shiftlens.roster.contract.models import GroupBy, Shift
from shiftlens.scheduling.times import format_hour_label


@dataclass(slots=True)
class TimelineEntry:
    """A shift placed on the day timeline.

    ``start_offset_fraction`` and ``width_fraction`` are relative to the full hour range
    (``max - min + 1`` hours). ``vertical_slot`` is the lane inside the group; it is
    always 0 when grouping by employee.
    """

    shift: Shift
    vertical_slot: int
    start_minutes: int
    end_minutes: int
    start_offset_fraction: float
    width_fraction: float
    color: str

    @property
    def duration_hours(self) -> float:
        return (self.end_minutes - self.start_minutes) / 60


@dataclass(slots=True)
class TimelineLayout:
    """Hour window plus grouped entries for one calendar date."""

    date: str
    group_by: GroupBy
    hour_range: tuple[int, int]
    entries: dict[str, list[TimelineEntry]] = field(default_factory=dict)

    @property
    def hour_span(self) -> int:
        """Number of hour columns covered (both ends inclusive)."""
        return self.hour_range[1] - self.hour_range[0] + 1

    def hour_labels(self) -> list[str]:
        start, end = self.hour_range
        return [format_hour_label(hour) for hour in range(start, end + 1)]

    def lane_count(self, group: str) -> int:
        items = self.entries.get(group, [])
        if not items:
            return 0
        return max(entry.vertical_slot for entry in items) + 1

    def iter_entries(self):
        for items in self.entries.values():
            yield from items


__all__ = ["TimelineEntry", "TimelineLayout"]
