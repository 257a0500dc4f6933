"""Flatten one day of the window into ``key -> value`` readings."""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..i18n.resolve import Lookup
from .constants import UNAVAILABLE, compass_point
from .conversions import hhmmss, roman_time
from .day_window import DayState, ScheduleConfig, daytime_label


def _or_unavailable(value: Any) -> Any:
    return UNAVAILABLE if value is None else value


def _compass(azimuth: Optional[float], altitude: Optional[float]) -> str:
    if azimuth is None or altitude is None or altitude < 0.0:
        return UNAVAILABLE
    return compass_point(azimuth)


def _joined(labels) -> str:
    return ", ".join(labels) if labels else UNAVAILABLE


def day_readings(day: DayState, config: ScheduleConfig, translate: Lookup) -> Dict[str, Any]:
    ctx = day.date
    r: Dict[str, Any] = {
        "ObsDate": ctx.iso_date(),
        "ObsTimeR": roman_time(ctx.hour, ctx.minute, ctx.second),
        "ObsIsDST": int(ctx.is_dst),
        "DayType": translate(day.day_type),
        "DayDesc": day.description(translate),
        "Weekofyear": ctx.iso_week,
        "YearIsLY": int(ctx.is_leap_year),
        "YearProgress": round(ctx.year_progress, 3),
        "YearRemainD": ctx.year_remaining_days,
        "MonthProgress": round(ctx.month_progress, 3),
        "MonthRemainD": ctx.month_remaining_days,
        "DaySeasonalHrsDay": config.day_parts,
        "DaySeasonalHrsNight": config.night_parts,
        "SeasonMeteo": translate(day.meteo.name),
        "SeasonMeteoN": day.meteo.index,
        "SeasonPheno": translate(day.pheno.name) if day.pheno else UNAVAILABLE,
        "SeasonPhenoN": day.pheno.index if day.pheno else UNAVAILABLE,
    }

    part = day.partition
    if part is not None:
        digits = len(str(max(part.day_parts, part.night_parts)))
        r.update(
            {
                "DaySeasonalHr": part.index,
                "DaySeasonalHrR": part.roman,
                "DaySeasonalHrLenDay": hhmmss(part.day_part_len),
                "DaySeasonalHrLenNight": hhmmss(part.night_part_len),
                "DaySeasonalHrNextT": hhmmss(part.next_boundary),
            }
        )
        for idx in part.indices():
            key = f"DaySeasonalHrT-{-idx:0{digits}d}" if idx < 0 else f"DaySeasonalHrT{idx:0{digits}d}"
            r[key] = hhmmss(part.next_occurrence.get(idx))
    else:
        for key in ("DaySeasonalHr", "DaySeasonalHrR", "DaySeasonalHrLenDay", "DaySeasonalHrLenNight", "DaySeasonalHrNextT"):
            r[key] = UNAVAILABLE

    if day.daytime is not None and day.daytime.known:
        r["Daytime"] = daytime_label(day.daytime, translate)
        r["DaytimeN"] = day.daytime.position
    else:
        r["Daytime"] = UNAVAILABLE
        r["DaytimeN"] = UNAVAILABLE

    changes = day.changes
    r.update(
        {
            "DayChangeSeason": changes["ObsSeason"],
            "DayChangeSeasonMeteo": changes["SeasonMeteo"],
            "DayChangeSeasonPheno": changes["SeasonPheno"] if day.pheno else UNAVAILABLE,
            "DayChangeSunSign": changes["SunSign"],
            "DayChangeMoonSign": changes["MoonSign"],
            "DayChangeMoonPhaseS": changes["MoonPhaseS"],
            "DayChangeIsDST": changes["ObsIsDST"],
        }
    )

    astro = day.astro
    r["SunCompass"] = _compass(astro.sun_az, astro.sun_alt) if astro else UNAVAILABLE
    r["MoonCompass"] = _compass(astro.moon_az, astro.moon_alt) if astro else UNAVAILABLE
    r["ObsSeason"] = translate(astro.season) if astro and astro.season else UNAVAILABLE

    if config.annual_events:
        r["AnnualEvent"] = _joined([translate(season) for season in day.annual.seasons])
        for slot, flag in day.annual.flags.items():
            r[f"AnnualEvent{slot}"] = flag

    found = day.lookup
    r.update(
        {
            "SchedLast": _or_unavailable(found.last),
            "SchedLastT": hhmmss(found.last_time),
            "SchedNext": _or_unavailable(found.next),
            "SchedNextT": hhmmss(found.next_time),
            "SchedRecent": _joined(found.recent),
            "SchedUpcoming": _joined(found.upcoming),
        }
    )
    return r
