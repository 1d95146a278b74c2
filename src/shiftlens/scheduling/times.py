"""Time-of-day parsing and shift interval helpers."""

from __future__ import annotations

import datetime as dt
import re

from shiftlens.scheduling.dates import from_canonical_string

__all__ = [
    "MINUTES_PER_DAY",
    "parse_time",
    "shift_interval",
    "duration_minutes",
    "duration_hours",
    "format_time_12h",
    "format_hour_label",
    "combine_date_and_time",
]

MINUTES_PER_DAY = 24 * 60

_TIME_24H = re.compile(r"^([0-9]{1,2}):([0-9]{2})$")
_TIME_12H = re.compile(r"^([0-9]{1,2}):([0-9]{2})\s*([AaPp][Mm])$")


def parse_time(text: str | None) -> int | None:
    """Return minutes since midnight for ``"HH:MM"`` or ``"h:mm AM/PM"``, else ``None``.

    Twelve-hour input maps ``12 AM`` to hour 0, adds 12 to ``1..11 PM`` and keeps
    ``12 PM`` at noon. Hours outside ``0..23`` (24-hour) or ``1..12`` (12-hour) and
    minutes outside ``0..59`` are rejected.
    """
    if not text:
        return None
    cleaned = text.strip()
    match = _TIME_24H.match(cleaned)
    if match:
        hour, minute = int(match.group(1)), int(match.group(2))
        if hour > 23 or minute > 59:
            return None
        return hour * 60 + minute
    match = _TIME_12H.match(cleaned)
    if match:
        hour, minute = int(match.group(1)), int(match.group(2))
        if not 1 <= hour <= 12 or minute > 59:
            return None
        meridiem = match.group(3).upper()
        if meridiem == "AM" and hour == 12:
            hour = 0
        elif meridiem == "PM" and hour < 12:
            hour += 12
        return hour * 60 + minute
    return None


def shift_interval(start: str | None, end: str | None) -> tuple[int, int] | None:
    """Return ``(start_minutes, end_minutes)`` with overnight wraparound applied.

    An end earlier than the start is read as the next day and pushed past 1440. Equal
    values stay a zero-length interval on the same day. ``None`` when either side fails
    to parse.
    """
    start_minutes = parse_time(start)
    end_minutes = parse_time(end)
    if start_minutes is None or end_minutes is None:
        return None
    if end_minutes < start_minutes:
        end_minutes += MINUTES_PER_DAY
    return start_minutes, end_minutes


def duration_minutes(start: str | None, end: str | None) -> int | None:
    interval = shift_interval(start, end)
    if interval is None:
        return None
    return interval[1] - interval[0]


def duration_hours(start: str | None, end: str | None) -> float | None:
    """Return the shift length in hours (fractional), or ``None`` if unparseable."""
    minutes = duration_minutes(start, end)
    if minutes is None:
        return None
    return minutes / 60


def format_time_12h(text: str | None) -> str:
    """Render a 24-hour time as ``"2:30 PM"``.

    Values already carrying a meridiem are returned unchanged, blank input gives ``""``
    and anything unparseable is echoed back as-is.
    """
    if not text:
        return ""
    if _TIME_12H.match(text.strip()):
        return text
    minutes = parse_time(text)
    if minutes is None:
        return text
    hour, minute = divmod(minutes, 60)
    suffix = "AM" if hour < 12 else "PM"
    display = hour % 12 or 12
    return f"{display}:{minute:02d} {suffix}"


def format_hour_label(hour: int) -> str:
    """Label an hour slot (``0`` -> ``"12 AM"``, ``13`` -> ``"1 PM"``); wraps past 24."""
    hour = hour % 24
    if hour == 0:
        return "12 AM"
    if hour < 12:
        return f"{hour} AM"
    if hour == 12:
        return "12 PM"
    return f"{hour - 12} PM"


def combine_date_and_time(date_text: str | None, time_text: str | None) -> dt.datetime | None:
    """Combine ``YYYY-MM-DD`` and a time-of-day string into a naive local datetime."""
    day = from_canonical_string(date_text)
    minutes = parse_time(time_text)
    if day is None or minutes is None:
        return None
    hour, minute = divmod(minutes, 60)
    return dt.datetime(day.year, day.month, day.day, hour, minute)
