"""Build a day schedule viewmodel or its flat readings.

The request is normalised (place defaults, timezone inference, options),
the five-day window is computed around the anchor moment and one day of it
is rendered. Nothing is cached between requests.
"""

from __future__ import annotations

import logging
from datetime import datetime, time as time_cls
from typing import Any, Dict, Optional, Tuple

from zoneinfo import ZoneInfo

from ...i18n.resolve import Lookup, clamp_lang, make_lookup
from ...schemas.schedule_viewmodel import (
    CalendarVM,
    DayScheduleViewModel,
    DaytimeVM,
    HeaderVM,
    LookupVM,
    PartitionVM,
    ScheduleEntryVM,
    SeasonsVM,
    SeasonVM,
)
from ..conversions import hhmmss, roman_time
from ..day_window import DayState, EphemerisProvider, ScheduleConfig, build_window, daytime_label, resolve_config
from ..readings import day_readings
from ..seasons import SeasonEstimate
from ..util.place_defaults import normalize_place


logger = logging.getLogger(__name__)


def _resolve_anchor(date_str: Optional[str], time_str: Optional[str], tz: ZoneInfo) -> datetime:
    if not date_str:
        now = datetime.now(tz).replace(microsecond=0)
        if not time_str:
            return now
        return datetime.combine(now.date(), time_cls.fromisoformat(time_str), tzinfo=tz)
    target = datetime.fromisoformat(date_str).date()
    clock = time_cls.fromisoformat(time_str) if time_str else time_cls(12, 0)
    return datetime.combine(target, clock, tzinfo=tz)


def _compute(
    date_str: Optional[str],
    time_str: Optional[str],
    place: Optional[Dict[str, Any]],
    options: Optional[Dict[str, Any]],
    provider: EphemerisProvider,
) -> Tuple[DayState, Dict[str, Any], Dict[str, Any], ScheduleConfig, Lookup, str]:
    options = dict(options or {})
    eff_place, flags = normalize_place(place)
    tz_name = eff_place["tz"]
    tz = ZoneInfo(tz_name)

    if flags["default_reason"]:
        logger.info(
            "schedule.place.defaults",
            extra={
                "reason": flags["default_reason"],
                "lat": eff_place["lat"],
                "lon": eff_place["lon"],
                "tz": tz_name,
            },
        )

    config = resolve_config(options)
    lang = clamp_lang(options.get("lang"))
    translate = make_lookup(lang)
    anchor = _resolve_anchor(date_str, time_str, tz)
    days = build_window(
        anchor,
        float(eff_place["lat"]),
        float(eff_place["lon"]),
        provider,
        config,
        translate,
        float(eff_place.get("elevation") or 0.0),
    )
    day = days[int(options.get("day_offset") or 0)]
    return day, eff_place, flags, config, translate, lang


def build_viewmodel(
    date_str: Optional[str],
    time_str: Optional[str],
    place: Optional[Dict[str, Any]],
    options: Optional[Dict[str, Any]],
    provider: EphemerisProvider,
) -> DayScheduleViewModel:
    day, eff_place, flags, config, translate, lang = _compute(date_str, time_str, place, options, provider)
    return _viewmodel(day, eff_place, flags, config, translate, lang)


def build_readings(
    date_str: Optional[str],
    time_str: Optional[str],
    place: Optional[Dict[str, Any]],
    options: Optional[Dict[str, Any]],
    provider: EphemerisProvider,
) -> Dict[str, Any]:
    day, _place, _flags, config, translate, _lang = _compute(date_str, time_str, place, options, provider)
    return day_readings(day, config, translate)


def _season_vm(estimate: Optional[SeasonEstimate], change: int, translate: Lookup) -> Optional[SeasonVM]:
    if estimate is None:
        return None
    return SeasonVM(
        key=estimate.name,
        index=estimate.index,
        display_name=translate(estimate.name),
        change=change,
    )


def _time_or_none(instant: Optional[float]) -> Optional[str]:
    return hhmmss(instant) if instant is not None else None


def _viewmodel(
    day: DayState,
    place: Dict[str, Any],
    flags: Dict[str, Any],
    config: ScheduleConfig,
    translate: Lookup,
    lang: str,
) -> DayScheduleViewModel:
    ctx = day.date
    header = HeaderVM(
        date_local=ctx.iso_date(),
        time_local=f"{ctx.hour:02d}:{ctx.minute:02d}:{ctx.second:02d}",
        tz=place["tz"],
        place_label=place["query"],
        lat=float(place["lat"]),
        lon=float(place["lon"]),
        lang=lang,
        day_offset=day.offset,
    )
    calendar_vm = CalendarVM(
        weekday=ctx.weekday,
        day_type=translate(day.day_type),
        day_description=day.description(translate),
        iso_week=ctx.iso_week,
        day_of_year=ctx.day_of_year,
        is_leap_year=ctx.is_leap_year,
        is_dst=ctx.is_dst,
        is_dst_noon=ctx.is_dst_noon,
        utc_offset=ctx.utc_offset_hours,
        month_progress=round(ctx.month_progress, 4),
        month_remaining_days=ctx.month_remaining_days,
        year_progress=round(ctx.year_progress, 4),
        year_remaining_days=ctx.year_remaining_days,
        time_roman=roman_time(ctx.hour, ctx.minute, ctx.second),
    )

    partition_vm = None
    part = day.partition
    if part is not None:
        partition_vm = PartitionVM(
            day_parts=part.day_parts,
            night_parts=part.night_parts,
            day_part_len=hhmmss(part.day_part_len),
            night_part_len=hhmmss(part.night_part_len),
            case=part.case.value,
            index=part.index,
            roman=part.roman,
            next_boundary=_time_or_none(part.next_boundary),
            boundaries={str(idx): hhmmss(part.next_occurrence.get(idx)) for idx in part.indices()},
        )

    daytime_vm = None
    if day.daytime is not None:
        daytime_vm = DaytimeVM(
            scheme=day.daytime.scheme,
            position=day.daytime.position,
            display_name=daytime_label(day.daytime, translate),
        )

    astro_season = None
    if day.astro is not None and day.astro.season is not None and day.astro.season_index is not None:
        astro_season = SeasonEstimate(day.astro.season, day.astro.season_index)
    seasons = SeasonsVM(
        astronomical=_season_vm(astro_season, day.changes["ObsSeason"], translate),
        meteorological=_season_vm(day.meteo, day.changes["SeasonMeteo"], translate),
        phenological=_season_vm(day.pheno, day.changes["SeasonPheno"], translate),
    )

    found = day.lookup
    lookup_vm = LookupVM(
        last=found.last,
        last_time=_time_or_none(found.last_time),
        next=found.next,
        next_time=_time_or_none(found.next_time),
        recent=found.recent,
        upcoming=found.upcoming,
    )

    return DayScheduleViewModel(
        header=header,
        calendar=calendar_vm,
        partition=partition_vm,
        daytime=daytime_vm,
        seasons=seasons,
        changes=dict(day.changes),
        schedule=[ScheduleEntryVM(time=hhmmss(t), labels=labels) for t, labels in day.schedule.items()],
        all_day=list(day.schedule.all_day),
        annual_events=[translate(season) for season in day.annual.seasons],
        lookup=lookup_vm,
        meta={
            "astro_available": day.astro is not None,
            "place_defaults_used": flags["place_defaults_used"],
            "tz_inferred": flags["tz_inferred"],
            "roman_day": config.roman_day,
            "roman_night": config.roman_night,
        },
    )
