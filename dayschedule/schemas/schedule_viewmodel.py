"""Day schedule request options and viewmodel schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator
from typing import Any, Dict, List, Literal, Optional


ScheduleKind = Literal[
    "MoonPhaseS",
    "MoonRise",
    "MoonSet",
    "MoonSign",
    "MoonTransit",
    "ObsDate",
    "ObsIsDST",
    "SeasonMeteo",
    "SeasonPheno",
    "ObsSeason",
    "DaySeasonalHr",
    "Daytime",
    "SunRise",
    "SunSet",
    "SunSign",
    "SunTransit",
    "AstroTwilightEvening",
    "AstroTwilightMorning",
    "CivilTwilightEvening",
    "CivilTwilightMorning",
    "NauticTwilightEvening",
    "NauticTwilightMorning",
    "CustomTwilightEvening",
    "CustomTwilightMorning",
]

InformativeDay = Literal[
    "ValentinesDay",
    "WalpurgisNight",
    "AshWednesday",
    "MothersDay",
    "FathersDay",
    "HarvestFestival",
    "MartinSingEv",
    "Martinmas",
    "RemembranceDay",
    "LastSundayBeforeAdvent",
    "StNicholasDay",
    "BiblicalMagi",
    "InternationalWomensDay",
    "StPatricksDay",
    "LaborDay",
    "LiberationDay",
    "Ascension",
    "Pentecost",
    "CorpusChristi",
    "AssumptionDay",
    "WorldChildrensDay",
    "GermanUnificationDay",
    "ReformationDay",
    "AllSaintsDay",
    "AllSoulsDay",
    "DayOfPrayerandRepentance",
]

AnnualEvent = Literal[
    "Carnival",
    "CarnivalLong",
    "Fasching",
    "FaschingLong",
    "StrongBeerFestival",
    "HolyWeek",
    "Easter",
    "EasterTraditional",
    "Lent",
    "Oktoberfest",
    "Halloween",
    "Advent",
    "AdventEarly",
    "TurnOfTheYear",
    "Christmas",
    "ChristmasLong",
]

MONTH_DAY = r"^(0[1-9]|1[0-2])-(0[1-9]|[12][0-9]|3[01])$"


class SchedulePlace(BaseModel):
    lat: Optional[float] = Field(default=None, ge=-90.0, le=90.0)
    lon: Optional[float] = Field(default=None, ge=-180.0, le=180.0)
    tz: Optional[str] = None
    query: Optional[str] = None
    elevation: Optional[float] = None


class ScheduleOptions(BaseModel):
    day_parts: Optional[int] = Field(default=None, ge=1, le=24)
    night_parts: Optional[int] = Field(default=None, ge=1, le=24)
    seasonal_hours: Optional[str] = Field(
        default=None,
        description='"D" or "D:N" seasonal hours; "4" selects Roman hours (12 day, 4 night)',
    )
    roman_day: bool = Field(default=False)
    roman_night: bool = Field(default=False)
    earlyspring: str = Field(default="02-22", pattern=MONTH_DAY)
    earlyfall: str = Field(default="08-20", pattern=MONTH_DAY)
    schedule: Optional[List[ScheduleKind]] = Field(default=None, description="Event kinds; all when omitted")
    informative_days: List[InformativeDay] = Field(default_factory=list)
    annual_events: List[AnnualEvent] = Field(default_factory=list)
    horizon: Optional[float] = Field(default=None, ge=-18.0, le=18.0, description="Custom twilight horizon in degrees")
    lang: str = Field(default="en")
    day_offset: int = Field(default=0, ge=-2, le=2)

    @field_validator("seasonal_hours")
    @classmethod
    def _check_seasonal_hours(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        parts = value.split(":")
        if len(parts) > 2 or not all(p.isdigit() for p in parts):
            raise ValueError("seasonal_hours must look like 'D' or 'D:N'")
        if not all(1 <= int(p) <= 24 for p in parts):
            raise ValueError("seasonal hour counts must be within 1..24")
        return value


class ScheduleRequest(BaseModel):
    date: Optional[str] = None
    time: Optional[str] = None
    place: Optional[SchedulePlace] = None
    options: ScheduleOptions = Field(default_factory=ScheduleOptions)


class HeaderVM(BaseModel):
    date_local: str
    time_local: str
    tz: str
    place_label: str
    lat: float
    lon: float
    lang: str
    day_offset: int


class CalendarVM(BaseModel):
    weekday: int
    day_type: str
    day_description: str
    iso_week: int
    day_of_year: int
    is_leap_year: bool
    is_dst: bool
    is_dst_noon: bool
    utc_offset: float
    month_progress: float
    month_remaining_days: int
    year_progress: float
    year_remaining_days: int
    time_roman: str


class PartitionVM(BaseModel):
    day_parts: int
    night_parts: int
    day_part_len: str
    night_part_len: str
    case: str
    index: int
    roman: str
    next_boundary: Optional[str] = None
    boundaries: Dict[str, str]


class DaytimeVM(BaseModel):
    scheme: str
    position: Optional[int] = None
    display_name: Optional[str] = None


class SeasonVM(BaseModel):
    key: str
    index: int
    display_name: str
    change: int = 0


class SeasonsVM(BaseModel):
    astronomical: Optional[SeasonVM] = None
    meteorological: SeasonVM
    phenological: Optional[SeasonVM] = None


class ScheduleEntryVM(BaseModel):
    time: str
    labels: List[str]


class LookupVM(BaseModel):
    last: Optional[str] = None
    last_time: Optional[str] = None
    next: Optional[str] = None
    next_time: Optional[str] = None
    recent: List[str] = Field(default_factory=list)
    upcoming: List[str] = Field(default_factory=list)


class DayScheduleViewModel(BaseModel):
    header: HeaderVM
    calendar: CalendarVM
    partition: Optional[PartitionVM] = None
    daytime: Optional[DaytimeVM] = None
    seasons: SeasonsVM
    changes: Dict[str, int]
    schedule: List[ScheduleEntryVM]
    all_day: List[str] = Field(default_factory=list)
    annual_events: List[str] = Field(default_factory=list)
    lookup: LookupVM
    meta: Dict[str, Any] = Field(default_factory=dict)
