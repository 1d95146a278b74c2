"""Calendar-date normalisation helpers.

All dates are plain local calendar days. Strings are split literally on ``-`` rather
than handed to a general date parser, so a ``YYYY-MM-DD`` value can never drift to a
neighbouring day.
"""

from __future__ import annotations

import calendar
import datetime as dt
import re
from dataclasses import dataclass

from shiftlens.core.errors import ShiftLensValueError
from shiftlens.roster.contract.models import Timeframe

__all__ = [
    "CalendarDate",
    "to_canonical_string",
    "from_canonical_string",
    "coerce_calendar_date",
    "timeframe_range",
    "in_range",
    "format_display_date",
    "date_options",
]

_DIGITS = re.compile(r"^[0-9]+$")


@dataclass(frozen=True, slots=True, order=True)
class CalendarDate:
    """Year/month/day triple without time-of-day or timezone.

    Field order makes the generated comparisons lexicographic on ``(year, month, day)``.
    """

    year: int
    month: int
    day: int

    @classmethod
    def from_date(cls, value: dt.date) -> CalendarDate:
        return cls(value.year, value.month, value.day)

    @classmethod
    def today(cls) -> CalendarDate:
        return cls.from_date(dt.date.today())

    def to_date(self) -> dt.date:
        return dt.date(self.year, self.month, self.day)

    def add_days(self, days: int) -> CalendarDate:
        return CalendarDate.from_date(self.to_date() + dt.timedelta(days=days))

    def days_since_sunday(self) -> int:
        """Return 0 for Sunday through 6 for Saturday."""
        return (self.to_date().weekday() + 1) % 7

    def __str__(self) -> str:
        return to_canonical_string(self)


def to_canonical_string(value: CalendarDate | dt.date) -> str:
    """Format ``value`` as zero-padded ``YYYY-MM-DD`` using its own components."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def from_canonical_string(text: str | None) -> CalendarDate | None:
    """Parse ``YYYY-MM-DD`` into a :class:`CalendarDate`.

    Returns ``None`` for blank input, a part count other than three, non-numeric parts,
    or a day that does not exist in the calendar (``2024-02-30``).
    """
    if not text:
        return None
    cleaned = text.strip()
    parts = cleaned.split("-")
    if len(parts) != 3 or not all(_DIGITS.match(part) for part in parts):
        return None
    year, month, day = (int(part) for part in parts)
    try:
        dt.date(year, month, day)
    except ValueError:
        return None
    return CalendarDate(year, month, day)


def coerce_calendar_date(value: CalendarDate | dt.date | str) -> CalendarDate:
    """Return a :class:`CalendarDate` for a caller-supplied reference date.

    Unlike shift dates, a reference date comes from the caller, so an unreadable value
    raises :class:`ShiftLensValueError` instead of being skipped.
    """
    if isinstance(value, CalendarDate):
        return value
    if isinstance(value, dt.datetime):
        return CalendarDate(value.year, value.month, value.day)
    if isinstance(value, dt.date):
        return CalendarDate.from_date(value)
    parsed = from_canonical_string(value)
    if parsed is None:
        raise ShiftLensValueError(f"Invalid reference date {value!r}; expected YYYY-MM-DD")
    return parsed


def timeframe_range(
    reference: CalendarDate | dt.date | str, timeframe: Timeframe | str
) -> tuple[CalendarDate, CalendarDate]:
    """Return the inclusive ``(start, end)`` dates of the window containing ``reference``.

    ``week`` spans the Sunday on or before ``reference`` through the following Saturday;
    ``month`` spans day 1 through the last day of the reference month.
    """
    ref = coerce_calendar_date(reference)
    frame = Timeframe.coerce(timeframe)
    if frame is Timeframe.WEEK:
        start = ref.add_days(-ref.days_since_sunday())
        return start, start.add_days(6)
    last_day = calendar.monthrange(ref.year, ref.month)[1]
    return CalendarDate(ref.year, ref.month, 1), CalendarDate(ref.year, ref.month, last_day)


def in_range(value: CalendarDate, start: CalendarDate, end: CalendarDate) -> bool:
    return start <= value <= end


def format_display_date(value: CalendarDate | dt.date | str) -> str:
    """Return a friendly label such as ``"Wed, Apr 3, 2024"``."""
    day = coerce_calendar_date(value).to_date()
    return f"{day:%a}, {day:%b} {day.day}, {day.year}"


def date_options(
    reference: CalendarDate | dt.date | str, days: int = 7
) -> list[tuple[str, str]]:
    """Return ``(value, label)`` pairs for ``days`` consecutive dates from ``reference``.

    The first two entries are labelled ``Today`` and ``Tomorrow``; later ones read like
    ``"Fri, Apr 5"``.
    """
    ref = coerce_calendar_date(reference)
    options: list[tuple[str, str]] = []
    for offset in range(days):
        current = ref.add_days(offset)
        if offset == 0:
            label = "Today"
        elif offset == 1:
            label = "Tomorrow"
        else:
            day = current.to_date()
            label = f"{day:%a}, {day:%b} {day.day}"
        options.append((to_canonical_string(current), label))
    return options
