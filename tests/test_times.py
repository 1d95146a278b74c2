from __future__ import annotations

import datetime as dt

import pytest
from hypothesis import given, strategies as st

from shiftlens.scheduling.times import (
    combine_date_and_time,
    duration_hours,
    format_hour_label,
    format_time_12h,
    parse_time,
    shift_interval,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("09:00", 540),
        ("9:00", 540),
        ("00:00", 0),
        ("23:59", 1439),
        ("12:00 AM", 0),
        ("12:30 am", 30),
        ("9:15 PM", 1275),
        ("12:00 PM", 720),
        ("11:59 pm", 1439),
        (" 7:05 AM ", 425),
    ],
)
def test_parse_time_accepts_both_clocks(text, expected):
    assert parse_time(text) == expected


@pytest.mark.parametrize(
    "text",
    ["", None, "invalid", "24:00", "12:60", "13:00 PM", "0:30 AM", "9 AM", "9:00 XM", "ab:cd", "9:5"],
)
def test_parse_time_rejects_malformed(text):
    assert parse_time(text) is None


@given(st.integers(min_value=0, max_value=23), st.integers(min_value=0, max_value=59))
def test_twelve_hour_rendering_parses_back(hour, minute):
    text = f"{hour:02d}:{minute:02d}"
    assert parse_time(format_time_12h(text)) == parse_time(text) == hour * 60 + minute


def test_overnight_duration_wraps():
    assert duration_hours("23:00", "07:00") == 8.0
    assert duration_hours("9:00 PM", "5:00 AM") == 8.0
    assert shift_interval("22:00", "02:00") == (1320, 1560)


def test_zero_length_shift_is_not_overnight():
    assert duration_hours("09:00", "09:00") == 0.0
    assert shift_interval("09:00", "09:00") == (540, 540)


def test_mixed_formats_and_fractions():
    assert duration_hours("09:00", "5:00 PM") == 8.0
    assert duration_hours("09:15", "10:00") == 0.75


def test_duration_reports_failure():
    assert duration_hours("invalid", "17:00") is None
    assert duration_hours("09:00", "") is None


def test_format_time_12h():
    assert format_time_12h("14:30") == "2:30 PM"
    assert format_time_12h("00:05") == "12:05 AM"
    assert format_time_12h("12:00") == "12:00 PM"
    assert format_time_12h("9:00 AM") == "9:00 AM"
    assert format_time_12h("") == ""
    assert format_time_12h("bogus") == "bogus"


@pytest.mark.parametrize(
    ("hour", "label"),
    [(0, "12 AM"), (7, "7 AM"), (12, "12 PM"), (23, "11 PM"), (25, "1 AM")],
)
def test_format_hour_label(hour, label):
    assert format_hour_label(hour) == label


def test_combine_date_and_time():
    assert combine_date_and_time("2024-04-03", "9:30 PM") == dt.datetime(2024, 4, 3, 21, 30)
    assert combine_date_and_time("2024-04-03", "late") is None
    assert combine_date_and_time("", "09:00") is None
