"""Day timeline layout (hour window, horizontal geometry, lane stacking)."""

from .layout import assign_vertical_slots, compute_hour_range, layout_timeline
from .models import TimelineEntry, TimelineLayout

__all__ = [
    "TimelineEntry",
    "TimelineLayout",
    "compute_hour_range",
    "assign_vertical_slots",
    "layout_timeline",
]
