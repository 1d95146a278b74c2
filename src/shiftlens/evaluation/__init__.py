"""Evaluation layer (hour aggregation, overlap detection, staffing analytics)."""

from .aggregates import (
    EMPLOYEE_HOURS_COLUMNS,
    ROLE_HOURS_COLUMNS,
    EmployeeAggregate,
    aggregate_hours,
    aggregates_dataframe,
    role_hours_dataframe,
    sort_aggregates,
)
from .overlaps import OverlapResult, conflicting_pairs, find_overlaps, overlap_map
from .staffing import (
    WEEKDAY_LABELS,
    HourlyStaffing,
    RosterSummary,
    hourly_staffing,
    roster_summary,
    staffing_dataframe,
    weekly_heatmap,
)

__all__ = [
    "EMPLOYEE_HOURS_COLUMNS",
    "ROLE_HOURS_COLUMNS",
    "EmployeeAggregate",
    "aggregate_hours",
    "aggregates_dataframe",
    "role_hours_dataframe",
    "sort_aggregates",
    "OverlapResult",
    "find_overlaps",
    "overlap_map",
    "conflicting_pairs",
    "WEEKDAY_LABELS",
    "HourlyStaffing",
    "RosterSummary",
    "hourly_staffing",
    "weekly_heatmap",
    "roster_summary",
    "staffing_dataframe",
]
