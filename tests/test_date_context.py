from datetime import datetime

import pytest
from zoneinfo import ZoneInfo

from dayschedule.services.date_context import build_date_context, shift_days


BERLIN = ZoneInfo("Europe/Berlin")


def test_calendar_fields_for_berlin_equinox():
    ctx = build_date_context(datetime(2024, 3, 20, 12, 0, tzinfo=BERLIN))
    assert ctx.iso_date() == "2024-03-20"
    assert ctx.weekday == 2
    assert ctx.day_of_year == 80
    assert ctx.iso_week == 12
    assert ctx.is_leap_year is True
    assert ctx.is_dst is False
    assert ctx.utc_offset_hours == 1.0
    assert ctx.month_remaining_days == 11
    assert ctx.year_remaining_days == 286
    assert ctx.time_of_day == 12.0
    assert ctx.is_weekend is False


def test_shift_days_keeps_wall_clock_across_dst():
    anchor = datetime(2024, 3, 30, 12, 0, tzinfo=BERLIN)
    shifted = shift_days(anchor, 1)
    assert shifted.hour == 12
    ctx = build_date_context(shifted)
    assert ctx.is_dst is True
    assert ctx.utc_offset_hours == 2.0


def test_shift_days_normalises_skipped_wall_time():
    anchor = datetime(2024, 3, 30, 2, 30, tzinfo=BERLIN)
    shifted = shift_days(anchor, 1)
    assert shifted.date().isoformat() == "2024-03-31"
    assert shifted.hour == 3


def test_dst_at_noon_is_reported_for_the_switch_day():
    ctx = build_date_context(datetime(2024, 3, 31, 1, 0, tzinfo=BERLIN))
    assert ctx.is_dst is False
    assert ctx.is_dst_noon is True


def test_naive_moment_is_rejected():
    with pytest.raises(ValueError):
        build_date_context(datetime(2024, 3, 20, 12, 0))
