"""Roster data contract (shift records, enumerations, analytics settings)."""

from .models import AnalyticsConfig, GroupBy, Shift, Timeframe

__all__ = ["Shift", "Timeframe", "GroupBy", "AnalyticsConfig"]
