"""Wall-clock calendar facts for one day of the schedule window."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime, time as time_cls, timedelta
from zoneinfo import ZoneInfo

from .conversions import decimal_hours


@dataclass(frozen=True)
class DateContext:
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    weekday: int  # Monday == 0
    day_of_year: int
    iso_week: int
    is_leap_year: bool
    is_dst: bool
    is_dst_noon: bool
    utc_offset_hours: float
    month_days: int
    month_progress: float
    month_remaining_days: int
    year_progress: float
    year_remaining_days: int
    tz: str

    @property
    def date(self) -> date:
        return date(self.year, self.month, self.day)

    @property
    def time_of_day(self) -> float:
        return decimal_hours(self.hour, self.minute, self.second)

    @property
    def is_weekend(self) -> bool:
        return self.weekday >= 5

    def iso_date(self) -> str:
        return self.date.isoformat()


def shift_days(anchor: datetime, offset: int) -> datetime:
    """Move ``anchor`` by whole days keeping its local wall-clock time."""

    if anchor.tzinfo is None:
        raise ValueError("anchor must be timezone aware")
    naive = anchor.replace(tzinfo=None) + timedelta(days=offset)
    shifted = naive.replace(tzinfo=anchor.tzinfo)
    # Round-trip through UTC to normalise wall times skipped by a DST jump.
    return shifted.astimezone(ZoneInfo("UTC")).astimezone(anchor.tzinfo)


def build_date_context(moment: datetime) -> DateContext:
    """Derive the calendar fields of ``moment`` in its own timezone."""

    if moment.tzinfo is None:
        raise ValueError("moment must be timezone aware")

    tz = moment.tzinfo
    local_date = moment.date()
    noon = datetime.combine(local_date, time_cls(12, 0), tzinfo=tz)
    leap = calendar.isleap(moment.year)
    year_days = 366 if leap else 365
    month_days = calendar.monthrange(moment.year, moment.month)[1]
    day_of_year = local_date.timetuple().tm_yday
    offset = moment.utcoffset() or timedelta(0)

    return DateContext(
        year=moment.year,
        month=moment.month,
        day=moment.day,
        hour=moment.hour,
        minute=moment.minute,
        second=moment.second,
        weekday=moment.weekday(),
        day_of_year=day_of_year,
        iso_week=local_date.isocalendar()[1],
        is_leap_year=leap,
        is_dst=bool(moment.dst()),
        is_dst_noon=bool(noon.dst()),
        utc_offset_hours=offset.total_seconds() / 3600.0,
        month_days=month_days,
        month_progress=moment.day / month_days,
        month_remaining_days=month_days - moment.day,
        year_progress=day_of_year / year_days,
        year_remaining_days=year_days - day_of_year,
        tz=str(tz),
    )
