"""Small formatting helpers shared by the schedule builders."""

from __future__ import annotations

from typing import Optional

from .constants import UNAVAILABLE


_ROMAN = [
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
]


def to_roman(number: int) -> str:
    """Return the Roman numeral for a positive integer, ``N`` for zero."""

    if number < 0:
        raise ValueError("Roman numerals need a non-negative integer")
    if number == 0:
        return "N"
    out = []
    for value, glyph in _ROMAN:
        while number >= value:
            out.append(glyph)
            number -= value
    return "".join(out)


def hhmmss(hours: Optional[float]) -> str:
    """Render decimal hours as ``HH:MM:SS``.

    Instants that round up to midnight wrap to ``00:00:00``; a full 24 hour
    length stays ``24:00:00``.
    """

    if hours is None:
        return UNAVAILABLE
    total = int(round(hours * 3600.0))
    if hours < 24.0:
        total %= 86400
    h, rem = divmod(total, 3600)
    m, s = divmod(rem, 60)
    return f"{h:02d}:{m:02d}:{s:02d}"


def roman_time(hour: int, minute: int, second: int) -> str:
    return ":".join(to_roman(part) for part in (hour, minute, second))


def decimal_hours(hour: int, minute: int, second: float = 0.0) -> float:
    return hour + minute / 60.0 + second / 3600.0


def wrap_day(hours: float) -> float:
    """Fold a decimal-hour value into ``[0, 24)``."""

    while hours >= 24.0:
        hours -= 24.0
    while hours < 0.0:
        hours += 24.0
    return hours
