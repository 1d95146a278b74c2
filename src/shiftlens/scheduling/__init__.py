"""Scheduling primitives (dates, times, roles, timeline layout)."""

from .dates import (
    CalendarDate,
    coerce_calendar_date,
    date_options,
    format_display_date,
    from_canonical_string,
    in_range,
    timeframe_range,
    to_canonical_string,
)
from .resolve import ResolvedShift, resolve_shift, resolve_shifts
from .roles import DEFAULT_ROLE_COLORS, FALLBACK_ROLE_COLOR, merged_role_colors, role_color
from .times import (
    MINUTES_PER_DAY,
    combine_date_and_time,
    duration_hours,
    duration_minutes,
    format_hour_label,
    format_time_12h,
    parse_time,
    shift_interval,
)
from .timeline import (
    TimelineEntry,
    TimelineLayout,
    assign_vertical_slots,
    compute_hour_range,
    layout_timeline,
)

__all__ = [
    "CalendarDate",
    "coerce_calendar_date",
    "date_options",
    "format_display_date",
    "from_canonical_string",
    "in_range",
    "timeframe_range",
    "to_canonical_string",
    "ResolvedShift",
    "resolve_shift",
    "resolve_shifts",
    "DEFAULT_ROLE_COLORS",
    "FALLBACK_ROLE_COLOR",
    "merged_role_colors",
    "role_color",
    "MINUTES_PER_DAY",
    "combine_date_and_time",
    "duration_hours",
    "duration_minutes",
    "format_hour_label",
    "format_time_12h",
    "parse_time",
    "shift_interval",
    "TimelineEntry",
    "TimelineLayout",
    "assign_vertical_slots",
    "compute_hour_range",
    "layout_timeline",
]
