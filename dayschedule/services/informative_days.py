"""Informative (non-holiday) calendar days shown as all-day schedule entries."""

from __future__ import annotations

import calendar
from datetime import date, timedelta
from typing import Dict, Iterable, List, Tuple


WEEKDAYS = {"Mon": 0, "Tue": 1, "Wed": 2, "Thu": 3, "Fri": 4, "Sat": 5, "Sun": 6}

# Rule strings:
#   "1 MM-DD"             fixed date
#   "2 +N"                N days after (or before) Western Easter Sunday
#   "3 N Wkd MM"          N-th weekday of a month, negative counts from its end
#   "5 -N Wkd MM DD"      weekday in the N-th week before a reference date
INFORMATIVE_DAYS: Dict[str, List[Tuple[str, str]]] = {
    "ValentinesDay": [("1 02-14", "valentinesday")],
    "WalpurgisNight": [("1 04-30", "walpurgisnight")],
    "AshWednesday": [("2 -46", "ashwednesday")],
    "MothersDay": [("3 2 Sun 05", "mothersday")],
    "FathersDay": [("2 39", "fathersday")],
    "HarvestFestival": [("3 1 Sun 10", "harvestfestival")],
    "MartinSingEv": [("1 11-10", "martinising")],
    "Martinmas": [("1 11-11", "martinmas")],
    "RemembranceDay": [("5 -6 Sun 12 25", "remembranceday")],
    "LastSundayBeforeAdvent": [("5 -5 Sun 12 25", "lastsundaybeforeadvent")],
    "StNicholasDay": [("1 12-06", "stnicholasday")],
    "BiblicalMagi": [("1 01-06", "biblicalmagi")],
    "InternationalWomensDay": [("1 03-08", "internationalwomensday")],
    "StPatricksDay": [("1 03-17", "stpatricksday")],
    "LaborDay": [("1 05-01", "laborday")],
    "LiberationDay": [("1 05-08", "liberationday")],
    "Ascension": [("2 39", "ascension")],
    "Pentecost": [("2 49", "pentecostsun"), ("2 50", "pentecostmon")],
    "CorpusChristi": [("2 60", "corpuschristi")],
    "AssumptionDay": [("1 08-15", "assumptionday")],
    "WorldChildrensDay": [("1 09-20", "worldchildrensday")],
    "GermanUnificationDay": [("1 10-03", "germanunificationday")],
    "ReformationDay": [("1 10-31", "reformationday")],
    "AllSaintsDay": [("1 11-01", "allsaintsday")],
    "AllSoulsDay": [("1 11-02", "allsoulsday")],
    "DayOfPrayerandRepentance": [("5 -1 Wed 11 23", "dayofprayerandrepentance")],
}


def western_easter(year: int) -> date:
    """Gregorian Easter Sunday."""

    golden = year % 19
    century = year // 100
    epact = (century - century // 4 - (century * 8 + 13) // 25 + golden * 19 + 15) % 30
    interval = epact - (epact // 28) * (1 - (29 // (epact + 1)) * ((21 - golden) // 11))
    weekday = (year + year // 4 + interval + 2 - century + century // 4) % 7
    offset = interval - weekday
    month = 3 + (offset + 40) // 44
    day = offset + 28 - 31 * (month // 4)
    return date(year, month, day)


def matches_rule(rule: str, day: date) -> bool:
    """True when ``day`` satisfies an informative-day rule string."""

    parts = rule.split()
    kind = parts[0]

    if kind == "1":
        return parts[1] == day.strftime("%m-%d")

    if kind == "2":
        return western_easter(day.year) + timedelta(days=int(parts[1])) == day

    if kind == "3":
        nth = int(parts[1])
        weekday = WEEKDAYS[parts[2]]
        month = int(parts[3])
        if day.weekday() != weekday or day.month != month:
            return False
        if nth > 0:
            return 1 <= day.day - (nth - 1) * 7 <= 7
        month_days = calendar.monthrange(day.year, month)[1]
        shifted = day.day - (nth + 1) * 7
        return month_days - 6 <= shifted <= month_days

    if kind == "5":
        weeks = int(parts[1])
        weekday = WEEKDAYS[parts[2]]
        if day.weekday() != weekday:
            return False
        reference = date(day.year, int(parts[3]), int(parts[4]))
        if weeks < 0:
            start = reference + timedelta(weeks=weeks)
            return start <= day < start + timedelta(weeks=1)
        start = reference + timedelta(weeks=weeks - 1)
        return start < day <= start + timedelta(weeks=1)

    raise ValueError(f"unsupported informative day rule {rule!r}")


def informative_labels(day: date, selected: Iterable[str]) -> List[str]:
    """Label keys of the selected informative days falling on ``day``."""

    labels: List[str] = []
    for name in selected:
        for rule, key in INFORMATIVE_DAYS.get(name, []):
            if matches_rule(rule, day) and key not in labels:
                labels.append(key)
    return labels
