"""Pydantic models describing shiftlens roster inputs."""

from __future__ import annotations

import math
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from shiftlens.core.errors import ShiftLensValueError

__all__ = ["Shift", "Timeframe", "GroupBy", "AnalyticsConfig"]


class Timeframe(str, Enum):
    """Aggregation window anchored at a reference date."""

    WEEK = "week"
    MONTH = "month"

    @classmethod
    def coerce(cls, value: Timeframe | str) -> Timeframe:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            options = ", ".join(member.value for member in cls)
            raise ShiftLensValueError(
                f"Unknown timeframe {value!r}. Expected one of: {options}"
            ) from None


class GroupBy(str, Enum):
    """Lane grouping for the one-day timeline."""

    EMPLOYEE = "employee"
    ROLE = "role"

    @classmethod
    def coerce(cls, value: GroupBy | str) -> GroupBy:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            options = ", ".join(member.value for member in cls)
            raise ShiftLensValueError(
                f"Unknown group_by {value!r}. Expected one of: {options}"
            ) from None


class Shift(BaseModel):
    """A scheduled shift as handed over by the application's data layer.

    Attributes
    ----------
    id:
        Opaque identifier, stable for the lifetime of the shift.
    employee_name:
        Display name of the assigned person; doubles as the employee grouping key.
    role:
        Role label (``"Server"``, ``"Cook"``, ... or any free-form string).
    date:
        Calendar date in ``YYYY-MM-DD`` form. May be blank or malformed.
    start_time / end_time:
        ``"09:00"`` or ``"9:00 AM"`` style times. May be blank or malformed.
    status:
        Workflow label (``"Confirmed"``, ``"Pending"``, ``"Canceled"``).
    color:
        Optional display colour carried through untouched.

    Records are accepted with either snake_case names or the camelCase keys used by
    the web client (``employeeName``, ``startTime``, ``endTime``). Missing, ``None``
    or NaN values become empty strings so that partially entered shifts can still be
    constructed; the analytics engines exclude them later.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = ""
    employee_name: str = Field(default="", alias="employeeName")
    role: str = ""
    date: str = ""
    start_time: str = Field(default="", alias="startTime")
    end_time: str = Field(default="", alias="endTime")
    status: str = ""
    color: str | None = None

    @field_validator(
        "id", "employee_name", "role", "date", "start_time", "end_time", "status", mode="before"
    )
    @classmethod
    def _coerce_text(cls, value: object) -> str:
        if value is None:
            return ""
        if isinstance(value, float):
            if math.isnan(value):
                return ""
            if value.is_integer():
                return str(int(value))
        return str(value)

    @field_validator("color", mode="before")
    @classmethod
    def _blank_color(cls, value: object) -> str | None:
        if value is None:
            return None
        if isinstance(value, float) and math.isnan(value):
            return None
        text = str(value).strip()
        return text or None


class AnalyticsConfig(BaseModel):
    """Tunable thresholds and defaults for the analytics engines.

    Attributes
    ----------
    weekly_overtime_hours:
        Hours above which a weekly aggregate is flagged as overtime (strictly greater).
    monthly_overtime_hours:
        Same threshold for the monthly timeframe.
    timeline_start_hour / timeline_end_hour:
        Default visible hour window of the day timeline before it is widened to fit shifts.
    timeline_min_span_hours:
        Narrowest window the timeline may render, in hours.
    role_colors:
        Role label to colour overrides layered on top of the default palette.
    """

    weekly_overtime_hours: float = 40.0
    monthly_overtime_hours: float = 160.0
    timeline_start_hour: int = 7
    timeline_end_hour: int = 23
    timeline_min_span_hours: int = 16
    role_colors: dict[str, str] = Field(default_factory=dict)

    @field_validator("weekly_overtime_hours", "monthly_overtime_hours")
    @classmethod
    def _threshold_non_negative(cls, value: float) -> float:
        if value < 0:
            raise ValueError("overtime thresholds must be non-negative")
        return value

    @field_validator("timeline_min_span_hours")
    @classmethod
    def _span_positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("timeline_min_span_hours must be positive")
        return value

    @model_validator(mode="after")
    def _window_ordered(self) -> AnalyticsConfig:
        if not 0 <= self.timeline_start_hour < self.timeline_end_hour <= 47:
            raise ValueError(
                "timeline hours must satisfy 0 <= timeline_start_hour < timeline_end_hour <= 47"
            )
        return self

    def threshold_for(self, timeframe: Timeframe | str) -> float:
        """Return the overtime threshold (hours) for ``timeframe``."""
        if Timeframe.coerce(timeframe) is Timeframe.WEEK:
            return self.weekly_overtime_hours
        return self.monthly_overtime_hours
