from __future__ import annotations

import datetime as dt

import pytest
from hypothesis import given, strategies as st

from shiftlens.core.errors import ShiftLensValueError
from shiftlens.scheduling.dates import (
    CalendarDate,
    coerce_calendar_date,
    date_options,
    format_display_date,
    from_canonical_string,
    in_range,
    timeframe_range,
    to_canonical_string,
)


@given(st.dates(min_value=dt.date(1, 1, 1), max_value=dt.date(9999, 12, 31)))
def test_canonical_round_trip(value: dt.date):
    text = value.isoformat()
    assert to_canonical_string(from_canonical_string(text)) == text


def test_from_canonical_string_splits_components():
    assert from_canonical_string("2024-04-03") == CalendarDate(2024, 4, 3)
    assert from_canonical_string(" 2024-04-03 ") == CalendarDate(2024, 4, 3)
    assert from_canonical_string("2024-4-3") == CalendarDate(2024, 4, 3)


@pytest.mark.parametrize(
    "text",
    [
        "",
        None,
        "2024 -04- 03",
        "2024-04 -03",
        "2024-02-30",
        "2024-13-01",
        "2024-00-10",
        "abcd-01-01",
        "2024-01",
        "2024/01/01",
        "2024-01-01-01",
    ],
)
def test_from_canonical_string_rejects_invalid(text):
    assert from_canonical_string(text) is None


def test_to_canonical_string_uses_own_components():
    assert to_canonical_string(CalendarDate(987, 1, 5)) == "0987-01-05"
    assert to_canonical_string(dt.date(2024, 4, 3)) == "2024-04-03"
    assert to_canonical_string(dt.datetime(2024, 4, 3, 23, 59)) == "2024-04-03"


def test_calendar_date_ordering_is_lexicographic():
    assert CalendarDate(2024, 1, 31) < CalendarDate(2024, 2, 1)
    assert CalendarDate(2023, 12, 31) < CalendarDate(2024, 1, 1)
    assert CalendarDate(2024, 4, 3) == from_canonical_string("2024-04-03")


@pytest.mark.parametrize("reference", ["2024-03-31", "2024-04-03", "2024-04-06"])
def test_week_range_runs_sunday_to_saturday(reference):
    start, end = timeframe_range(reference, "week")
    assert start == CalendarDate(2024, 3, 31)
    assert end == CalendarDate(2024, 4, 6)
    assert start.days_since_sunday() == 0


def test_week_range_crosses_year_boundary():
    start, end = timeframe_range(dt.date(2025, 1, 1), "week")
    assert (start, end) == (CalendarDate(2024, 12, 29), CalendarDate(2025, 1, 4))


def test_month_range_covers_whole_month():
    assert timeframe_range("2024-02-10", "month") == (CalendarDate(2024, 2, 1), CalendarDate(2024, 2, 29))
    assert timeframe_range("2023-12-15", "MONTH") == (CalendarDate(2023, 12, 1), CalendarDate(2023, 12, 31))


def test_in_range_is_inclusive():
    start, end = timeframe_range("2024-04-03", "week")
    assert in_range(start, start, end)
    assert in_range(end, start, end)
    assert not in_range(CalendarDate(2024, 4, 7), start, end)


def test_invalid_timeframe_raises():
    with pytest.raises(ShiftLensValueError):
        timeframe_range("2024-04-03", "fortnight")


def test_invalid_reference_date_raises():
    with pytest.raises(ShiftLensValueError):
        coerce_calendar_date("not-a-date")


def test_display_helpers():
    assert format_display_date("2024-04-03") == "Wed, Apr 3, 2024"
    assert date_options("2024-04-03", days=3) == [
        ("2024-04-03", "Today"),
        ("2024-04-04", "Tomorrow"),
        ("2024-04-05", "Fri, Apr 5"),
    ]
