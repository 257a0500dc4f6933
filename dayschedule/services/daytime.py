"""Classify a seasonal-hour index into a named part of the day."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .constants import DAY_PHASES
from .conversions import to_roman


MODERN = "modern"
ROMAN = "roman"
UNKNOWN = "unknown"


@dataclass(frozen=True)
class DaytimeClass:
    scheme: str
    position: Optional[int]  # table position, None when unknown
    key: Optional[str]  # phase key for modern, "Hora I"/"Vigilia II" for roman

    @property
    def known(self) -> bool:
        return self.scheme != UNKNOWN


def classify_daytime(
    index: int,
    day_parts: int,
    night_parts: int,
    roman_day: bool = False,
    roman_night: bool = False,
) -> DaytimeClass:
    if index == 0:
        raise ValueError("seasonal hour index 0 does not exist")

    night = index < 0
    if (day_parts == 12 and not night and not roman_day) or (
        night_parts == 12 and night and not roman_night
    ):
        position = (12 if night else 11) + index
        return DaytimeClass(MODERN, position, DAY_PHASES[position])

    if (roman_night if night else roman_day) or (night and night_parts == 4):
        position = (4 if night else 3) + index
        if night:
            return DaytimeClass(ROMAN, position, f"Vigilia {to_roman(night_parts + 1 + index)}")
        return DaytimeClass(ROMAN, position, f"Hora {to_roman(index)}")

    return DaytimeClass(UNKNOWN, None, None)
