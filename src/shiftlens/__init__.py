"""Shift analytics and day-timeline layout for roster calendars."""

from shiftlens.core.errors import ShiftLensValueError
from shiftlens.evaluation import (
    EmployeeAggregate,
    HourlyStaffing,
    OverlapResult,
    RosterSummary,
    aggregate_hours,
    find_overlaps,
    hourly_staffing,
    overlap_map,
    roster_summary,
    sort_aggregates,
    weekly_heatmap,
)
from shiftlens.roster.contract import AnalyticsConfig, GroupBy, Shift, Timeframe
from shiftlens.roster.io import load_config, load_shifts
from shiftlens.scheduling import (
    CalendarDate,
    TimelineEntry,
    TimelineLayout,
    duration_hours,
    from_canonical_string,
    layout_timeline,
    parse_time,
    timeframe_range,
    to_canonical_string,
)

__version__ = "0.3.0"

__all__ = [
    "ShiftLensValueError",
    "Shift",
    "Timeframe",
    "GroupBy",
    "AnalyticsConfig",
    "load_shifts",
    "load_config",
    "CalendarDate",
    "to_canonical_string",
    "from_canonical_string",
    "timeframe_range",
    "parse_time",
    "duration_hours",
    "EmployeeAggregate",
    "aggregate_hours",
    "sort_aggregates",
    "OverlapResult",
    "find_overlaps",
    "overlap_map",
    "TimelineEntry",
    "TimelineLayout",
    "layout_timeline",
    "HourlyStaffing",
    "RosterSummary",
    "hourly_staffing",
    "weekly_heatmap",
    "roster_summary",
]
