"""The five-day schedule window around an anchor moment.

Offsets -2..+2 are each the anchor's wall-clock time shifted by whole local
days. Per-day state is built farthest-out first, then next-occurrence
boundaries, schedules, cross-day change indicators and finally the relative
lookups, each pass running only once the neighbours it reads exist. Every
call builds an independent window.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, FrozenSet, List, Optional, Protocol, Tuple

from ..i18n.resolve import Lookup, make_lookup
from .annual_events import AnnualEvents, annual_events
from .astro_snapshot import AstroSnapshot
from .changes import CHANGE_KINDS, CHANGE_NONE, CHANGE_TODAY, CHANGE_TOMORROW, Transition, detect_window
from .constants import DEFAULT_EARLYFALL, DEFAULT_EARLYSPRING, EVENT_FIELDS, SCHEDULE_KINDS
from .date_context import DateContext, build_date_context, shift_days
from .daytime import MODERN, DaytimeClass, classify_daytime
from .informative_days import informative_labels
from .schedule_map import ScheduleLookup, ScheduleMap, lookup
from .seasonal_hours import LOOKAHEAD_HOURS, SeasonalPartition, build_partition, resolve_next_occurrences
from .seasons import SeasonEstimate, meteorological_season, phenological_season


logger = logging.getLogger(__name__)

OFFSETS = (-2, -1, 0, 1, 2)
BUILD_ORDER = (2, -2, 1, -1, 0)


class EphemerisProvider(Protocol):
    def snapshot(
        self,
        moment: datetime,
        lat: float,
        lon: float,
        elevation: float = 0.0,
        horizon: Optional[float] = None,
    ) -> Optional[AstroSnapshot]:
        ...


@dataclass(frozen=True)
class ScheduleConfig:
    day_parts: int = 12
    night_parts: int = 12
    roman_day: bool = False
    roman_night: bool = False
    earlyspring: str = DEFAULT_EARLYSPRING
    earlyfall: str = DEFAULT_EARLYFALL
    schedule: FrozenSet[str] = frozenset(SCHEDULE_KINDS)
    informative_days: Tuple[str, ...] = ()
    annual_events: Tuple[str, ...] = ()
    horizon: Optional[float] = None


def resolve_config(options: Optional[Dict[str, Any]]) -> ScheduleConfig:
    """Turn validated request options into the engine configuration.

    ``seasonal_hours`` ("D" or "D:N") sets the part counts unless explicit
    ``day_parts``/``night_parts`` are given; the special value "4" means
    Roman hours: twelve horae by day and four vigiliae by night.
    """

    options = dict(options or {})
    day_parts: Optional[int] = options.get("day_parts")
    night_parts: Optional[int] = options.get("night_parts")
    roman_day = bool(options.get("roman_day", False))
    roman_night = bool(options.get("roman_night", False))

    hours_option = options.get("seasonal_hours")
    if hours_option:
        if hours_option.strip() == "4":
            counts = [12, 4]
            roman_day = roman_night = True
        else:
            counts = [int(p) for p in hours_option.split(":")]
        if day_parts is None:
            day_parts = counts[0]
        if night_parts is None:
            night_parts = counts[-1]

    if day_parts is None:
        day_parts = 12
    if night_parts is None:
        night_parts = day_parts
    for name, value in (("day_parts", day_parts), ("night_parts", night_parts)):
        if not 1 <= value <= 24:
            raise ValueError(f"{name} must be within 1..24")

    selected = options.get("schedule")
    return ScheduleConfig(
        day_parts=day_parts,
        night_parts=night_parts,
        roman_day=roman_day,
        roman_night=roman_night,
        earlyspring=options.get("earlyspring") or DEFAULT_EARLYSPRING,
        earlyfall=options.get("earlyfall") or DEFAULT_EARLYFALL,
        schedule=frozenset(SCHEDULE_KINDS if selected is None else selected),
        informative_days=tuple(options.get("informative_days") or ()),
        annual_events=tuple(options.get("annual_events") or ()),
        horizon=options.get("horizon"),
    )


@dataclass
class DayState:
    offset: int
    moment: datetime
    date: DateContext
    astro: Optional[AstroSnapshot]
    meteo: SeasonEstimate
    pheno: Optional[SeasonEstimate]
    partition: Optional[SeasonalPartition] = None
    daytime: Optional[DaytimeClass] = None
    changes: Dict[str, int] = field(default_factory=lambda: {k: CHANGE_NONE for k in CHANGE_KINDS})
    schedule: ScheduleMap = field(default_factory=ScheduleMap)
    lookup: ScheduleLookup = field(default_factory=ScheduleLookup)
    annual: AnnualEvents = field(default_factory=AnnualEvents)

    @property
    def now(self) -> float:
        return self.date.time_of_day + LOOKAHEAD_HOURS

    @property
    def day_type(self) -> str:
        return "weekend" if self.date.is_weekend else "workday"

    def description(self, translate: Lookup) -> str:
        if self.schedule.all_day:
            return "\n".join(self.schedule.all_day)
        return translate(self.day_type)

    def change_values(self) -> Dict[str, Optional[str]]:
        astro = self.astro
        return {
            "ObsSeason": astro.season if astro else None,
            "SeasonMeteo": self.meteo.name,
            "SeasonPheno": self.pheno.name if self.pheno else None,
            "SunSign": astro.sun_sign if astro else None,
            "MoonSign": astro.moon_sign if astro else None,
            "MoonPhaseS": astro.moon_phase if astro else None,
            "ObsIsDST": "1" if self.date.is_dst_noon else "0",
        }


def daytime_label(result: DaytimeClass, translate: Lookup) -> Optional[str]:
    if not result.known:
        return None
    return translate(result.key) if result.scheme == MODERN else result.key


def _build_day(
    offset: int,
    anchor: datetime,
    lat: float,
    lon: float,
    elevation: float,
    provider: EphemerisProvider,
    config: ScheduleConfig,
) -> DayState:
    moment = shift_days(anchor, offset)
    ctx = build_date_context(moment)
    astro = provider.snapshot(moment, lat, lon, elevation, config.horizon)
    if astro is None:
        logger.warning(
            "schedule.window.day_missing",
            extra={"offset": offset, "date": ctx.iso_date(), "lat": lat, "lon": lon},
        )

    day = DayState(
        offset=offset,
        moment=moment,
        date=ctx,
        astro=astro,
        meteo=meteorological_season(ctx.month, lat),
        pheno=phenological_season(ctx.date, lat, lon, config.earlyspring, config.earlyfall),
        annual=annual_events(ctx.date, config.annual_events),
    )
    if astro is not None:
        day.partition = build_partition(astro, ctx.time_of_day, config.day_parts, config.night_parts)
    if day.partition is not None:
        day.daytime = classify_daytime(
            day.partition.index,
            config.day_parts,
            config.night_parts,
            config.roman_day,
            config.roman_night,
        )
    return day


def populate_schedule(day: DayState, config: ScheduleConfig, translate: Lookup) -> None:
    """Insert the selected events and seasonal-hour boundaries of one day."""

    selected = config.schedule
    sched = day.schedule

    if "ObsDate" in selected:
        sched.add(0.0, f"ObsDate {day.date.iso_date()}")

    if day.astro is not None:
        for kind in EVENT_FIELDS:
            if kind in selected:
                sched.add(day.astro.event(kind), kind)

    part = day.partition
    if part is not None:
        for idx in part.indices():
            start = part.boundaries[idx]
            if "DaySeasonalHr" in selected:
                sched.add(start, f"DaySeasonalHr {idx}")
            if "Daytime" in selected:
                result = classify_daytime(
                    idx, config.day_parts, config.night_parts, config.roman_day, config.roman_night
                )
                label = daytime_label(result, translate)
                if label is not None:
                    sched.add(start, f"Daytime {label}")

    for key in informative_labels(day.date.date, config.informative_days):
        sched.add_all_day(translate(key))
    for key in day.annual.days:
        sched.add_all_day(translate(key))


def apply_changes(days: Dict[int, DayState], config: ScheduleConfig, translate: Lookup) -> List[Transition]:
    """Detect transitions between neighbours and record them on both days."""

    flags = {offset: day.changes for offset, day in days.items()}
    values = {offset: day.change_values() for offset, day in days.items()}

    def _apply(transition: Transition) -> None:
        days[transition.earlier].changes[transition.kind] = CHANGE_TOMORROW
        later = days[transition.later]
        later.changes[transition.kind] = CHANGE_TODAY
        if transition.kind in config.schedule:
            later.schedule.add(0.0, f"{transition.kind} {translate(transition.value)}")

    return detect_window(values, flags, _apply)


def build_window(
    anchor: datetime,
    lat: float,
    lon: float,
    provider: EphemerisProvider,
    config: Optional[ScheduleConfig] = None,
    translate: Optional[Lookup] = None,
    elevation: float = 0.0,
) -> Dict[int, DayState]:
    """Compute the full -2..+2 window around ``anchor``."""

    config = config or ScheduleConfig()
    translate = translate or make_lookup("en")

    days: Dict[int, DayState] = {}
    for offset in BUILD_ORDER:
        days[offset] = _build_day(offset, anchor, lat, lon, elevation, provider, config)

    for offset in OFFSETS:
        day = days[offset]
        if day.partition is None:
            continue
        tomorrow = days.get(offset + 1)
        day.partition.next_occurrence = resolve_next_occurrences(
            day.partition,
            tomorrow.partition if tomorrow is not None else None,
            day.date.time_of_day,
        )

    for offset in OFFSETS:
        populate_schedule(days[offset], config, translate)

    apply_changes(days, config, translate)

    for offset in OFFSETS:
        day = days[offset]
        yesterday = days.get(offset - 1)
        tomorrow = days.get(offset + 1)
        day.lookup = lookup(
            day.schedule,
            day.now,
            yesterday.schedule if yesterday is not None else None,
            tomorrow.schedule if tomorrow is not None else None,
        )

    logger.debug(
        "schedule.window.built",
        extra={"anchor": anchor.isoformat(), "missing": [o for o, d in days.items() if d.astro is None]},
    )
    return days
