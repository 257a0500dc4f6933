"""Annual social seasons (Advent, Carnival, Lent, Oktoberfest, ...).

Each rule maps a date to ``(season_key, day_key)`` when the date lies inside
the season; ``day_key`` names a special day within it and is ``None`` on
ordinary season days. Keys are label keys for the i18n tables.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from .informative_days import western_easter


Match = Optional[Tuple[str, Optional[str]]]

ANNUAL_EVENTS = [
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


def _days(n: int) -> timedelta:
    return timedelta(days=n)


def _sunday_before(day: date) -> date:
    return day - _days((day.weekday() + 1) % 7 or 7)


def _advent(day: date, early: bool) -> Match:
    christmas_eve = date(day.year, 12, 24)
    adv4 = _sunday_before(date(day.year, 12, 25))
    sundays = [adv4 - _days(7 * k) for k in (3, 2, 1, 0)]
    begin = date(day.year, 11, 27) if early else sundays[0]
    if not begin <= day < christmas_eve:
        return None
    if day in sundays:
        return "adventseason", f"advent{sundays.index(day) + 1}"
    return "adventseason", None


def _carnival(day: date, fasching: bool, long: bool) -> Match:
    prefix = "faschingseason" if fasching else "carnivalseason"
    first = western_easter(day.year) - _days(52)
    end = first + _days(5)
    if long:
        inside = date(day.year, 11, 11) <= day or day <= end
    else:
        inside = first - _days(11) <= day <= end
    if not inside:
        return None
    offset = (day - first).days
    if 0 <= offset <= 5:
        return prefix, f"{prefix}{offset + 1}"
    return prefix, None


def _christmas(day: date, long: bool) -> Match:
    eve = date(day.year, 12, 24)
    if long:
        inside = day >= eve or day <= date(day.year, 1, 6)
    else:
        inside = eve <= day <= date(day.year, 12, 26)
    if not inside:
        return None
    specials = {eve: "christmaseve", eve + _days(1): "christmas1", eve + _days(2): "christmas2"}
    return "christmasseason", specials.get(day)


def _easter(day: date, traditional: bool) -> Match:
    sunday = western_easter(day.year)
    if traditional:
        begin, end = sunday, sunday + _days(49)
    else:
        begin, end = sunday - _days(14), sunday + _days(7)
    if not begin <= day <= end:
        return None
    specials = {
        sunday: "eastersun",
        sunday + _days(1): "eastermon",
        sunday + _days(6): "eastersat",
        sunday + _days(7): "easterwhitesun",
    }
    return "easterseason", specials.get(day)


def _holy_week(day: date) -> Match:
    sunday = western_easter(day.year)
    if not sunday - _days(7) <= day < sunday:
        return None
    specials = {
        sunday - _days(7): "holyweekpalm",
        sunday - _days(3): "holyweekthu",
        sunday - _days(2): "holyweekfri",
        sunday - _days(1): "holyweeksat",
    }
    return "holyweek", specials.get(day)


def _lent(day: date) -> Match:
    sunday = western_easter(day.year)
    begin = sunday - _days(46)
    end = sunday - _days(1)
    if not begin <= day <= end:
        return None
    if day == begin:
        return "lentseason", "lentbegin"
    if day == end:
        return "lentseason", "lentend"
    before = (sunday - day).days
    if before > 42:
        return "lentseason", "lentw1"
    # Six Lent Sundays at Easter -42, -35, ... -7, each opening a week.
    week = 7 - (before - 1) // 7
    if before % 7 == 0:
        return "lentseason", f"lentsun{week - 1}"
    return "lentseason", f"lentw{week}"


def _strong_beer(day: date) -> Match:
    josef = date(day.year, 3, 19)
    begin = josef - _days((josef.weekday() + 1) % 7 + 2)
    if not begin <= day <= begin + _days(23):
        return None
    return "sbeerseason", "sbeerseasonbegin" if day == begin else None


def _turn_of_the_year(day: date) -> Match:
    if not (day >= date(day.year, 12, 27) or day <= date(day.year, 1, 6)):
        return None
    if day.month == 12 and day.day == 31:
        return "turnoftheyear", "newyearseve"
    if day.month == 1 and day.day == 1:
        return "turnoftheyear", "newyear"
    return "turnoftheyear", None


def _oktoberfest(day: date) -> Match:
    mid_sept = date(day.year, 9, 15)
    oct1 = date(day.year, 10, 1)
    # Begins on the Saturday after 15 September, ends on the first Sunday of
    # October but not before 3 October.
    sept_wday = (mid_sept.weekday() + 1) % 7
    begin = mid_sept + _days(7) if sept_wday == 6 else mid_sept + _days(6 - sept_wday)
    oct_wday = (oct1.weekday() + 1) % 7
    end = date(day.year, 10, 3) if oct_wday in (0, 6) else oct1 + _days(7 - oct_wday)
    if not begin <= day <= end:
        return None
    return "oktoberfestseason", "oktoberfestbegin" if day == begin else None


def _halloween(day: date) -> Match:
    if day.month != 10 or not 24 <= day.day <= 31:
        return None
    specials = {24: "halloweenbegin", 31: "halloween"}
    return "halloweenseason", specials.get(day.day)


RULES: Dict[str, Callable[[date], Match]] = {
    "Carnival": lambda d: _carnival(d, fasching=False, long=False),
    "CarnivalLong": lambda d: _carnival(d, fasching=False, long=True),
    "Fasching": lambda d: _carnival(d, fasching=True, long=False),
    "FaschingLong": lambda d: _carnival(d, fasching=True, long=True),
    "StrongBeerFestival": _strong_beer,
    "HolyWeek": _holy_week,
    "Easter": lambda d: _easter(d, traditional=False),
    "EasterTraditional": lambda d: _easter(d, traditional=True),
    "Lent": _lent,
    "Oktoberfest": _oktoberfest,
    "Halloween": _halloween,
    "Advent": lambda d: _advent(d, early=False),
    "AdventEarly": lambda d: _advent(d, early=True),
    "TurnOfTheYear": _turn_of_the_year,
    "Christmas": lambda d: _christmas(d, long=False),
    "ChristmasLong": lambda d: _christmas(d, long=True),
}


def reading_slot(name: str, selected: Iterable[str]) -> str:
    """Name of the ``AnnualEvent<slot>`` flag a selected season reports to."""

    selected = list(selected)
    if name in ("CarnivalLong", "Fasching", "FaschingLong"):
        return "Carnival"
    for variant, base in (("EasterTraditional", "Easter"), ("AdventEarly", "Advent"), ("ChristmasLong", "Christmas")):
        if name == variant and base not in selected:
            return base
    return name


@dataclass
class AnnualEvents:
    seasons: List[str] = field(default_factory=list)
    days: List[str] = field(default_factory=list)
    flags: Dict[str, int] = field(default_factory=dict)


def annual_events(day: date, selected: Iterable[str]) -> AnnualEvents:
    """Seasons, special days and per-slot flags of the selected annual events."""

    selected = list(selected)
    found = AnnualEvents()
    for name in selected:
        rule = RULES.get(name)
        if rule is None:
            continue
        slot = reading_slot(name, selected)
        found.flags.setdefault(slot, 0)
        match = rule(day)
        if match is None:
            continue
        season, special = match
        found.flags[slot] = 1
        if season not in found.seasons:
            found.seasons.append(season)
        if special is not None and special not in found.days:
            found.days.append(special)
    return found
