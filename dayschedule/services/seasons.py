"""Meteorological and phenological season estimates."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional, Tuple

from geopy.distance import geodesic

from .constants import (
    DEFAULT_EARLYFALL,
    DEFAULT_EARLYSPRING,
    PHENO_LAT_RANGE,
    PHENO_LON_RANGE,
    PHENO_REFERENCE_POINTS,
    PHENO_STAGES,
    SEASON_METEO_MONTHS,
    SEASON_NAMES,
)


# Spread of the seasonal wave in km/day: (to 40 % of observer, to observer, full span).
SPRING_RATES = (37.5, 31.0, 37.5)
FALL_RATES = (35.0, 29.5, 45.0)


@dataclass(frozen=True)
class SeasonEstimate:
    name: str
    index: int


def meteorological_season(month: int, latitude: float) -> SeasonEstimate:
    """Season by calendar month; names flip south of the equator."""

    for index, key in enumerate(SEASON_NAMES["N"]):
        first, last = SEASON_METEO_MONTHS[key]
        if first <= last:
            hit = first <= month <= last
        else:
            hit = month >= first or month <= last
        if hit:
            return SeasonEstimate(SEASON_NAMES["S" if latitude < 0 else "N"][index], index)
    raise ValueError(f"invalid month {month!r}")


def pheno_in_range(latitude: float, longitude: float) -> bool:
    return (
        PHENO_LAT_RANGE[0] <= latitude < PHENO_LAT_RANGE[1]
        and PHENO_LON_RANGE[0] <= longitude < PHENO_LON_RANGE[1]
    )


def parse_month_day(value: str) -> Tuple[int, int]:
    month_s, day_s = value.split("-", 1)
    month, day = int(month_s), int(day_s)
    if not 1 <= month <= 12 or not 1 <= day <= 31:
        raise ValueError(f"invalid month-day {value!r}")
    return month, day


def _origin(year: int, month_day: str) -> date:
    month, day = parse_month_day(month_day)
    # A 02-29 origin outside leap years starts on 03-01.
    last = calendar.monthrange(year, month)[1]
    if day > last:
        return date(year, month, last) + timedelta(days=day - last)
    return date(year, month, day)


def _advance(progress_days: float, dist_obs: float, dist_total: float, rates, stages) -> Optional[int]:
    """Walk the three distance-closure thresholds; None before the origin."""

    if progress_days < 0.0:
        return None
    stage = stages[0]
    if dist_obs - progress_days * rates[0] <= dist_obs * 0.4:
        stage = stages[1]
        if dist_obs - progress_days * rates[1] <= 0.0:
            stage = stages[2]
            if dist_total - progress_days * rates[2] <= 0.0:
                stage = stages[3]
    return stage


def phenological_season(
    day: date,
    latitude: float,
    longitude: float,
    earlyspring: str = DEFAULT_EARLYSPRING,
    earlyfall: str = DEFAULT_EARLYFALL,
) -> Optional[SeasonEstimate]:
    """Stage of the phenological year, or None outside the modelled region."""

    if not pheno_in_range(latitude, longitude):
        return None

    observer = (latitude, longitude)
    spring_point = PHENO_REFERENCE_POINTS["earlyspring"]
    fall_point = PHENO_REFERENCE_POINTS["earlyfall"]
    leap = calendar.isleap(day.year)
    stage = 0

    if day.month < 6:
        origin = _origin(day.year, earlyspring)
        if leap and (origin.month == 3 or origin.day == 29):
            origin -= timedelta(days=1)
        reached = _advance(
            (day - origin).days,
            geodesic(observer, spring_point).km,
            geodesic(spring_point, fall_point).km,
            SPRING_RATES,
            (1, 2, 3, 4),
        )
        if reached is not None:
            stage = reached
    elif day.month < 12:
        stage = 4 + (day.month >= 7) + (day.month >= 8)

    if 8 <= day.month < 12:
        origin = _origin(day.year, earlyfall)
        if leap:
            origin -= timedelta(days=1)
        reached = _advance(
            (day - origin).days,
            geodesic(observer, fall_point).km,
            geodesic(fall_point, spring_point).km,
            FALL_RATES,
            (7, 8, 9, 0),
        )
        if reached is not None:
            stage = reached

    return SeasonEstimate(PHENO_STAGES[stage], stage)
