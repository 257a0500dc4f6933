"""Read-only astronomical facts for one day, as delivered by an ephemeris."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional

from .constants import EVENT_FIELDS, UNAVAILABLE


@dataclass(frozen=True)
class AstroSnapshot:
    latitude: float
    longitude: float
    sun_rise: Optional[float] = None
    sun_set: Optional[float] = None
    sun_transit: Optional[float] = None
    civil_twilight_morning: Optional[float] = None
    civil_twilight_evening: Optional[float] = None
    nautic_twilight_morning: Optional[float] = None
    nautic_twilight_evening: Optional[float] = None
    astro_twilight_morning: Optional[float] = None
    astro_twilight_evening: Optional[float] = None
    custom_twilight_morning: Optional[float] = None
    custom_twilight_evening: Optional[float] = None
    moon_rise: Optional[float] = None
    moon_set: Optional[float] = None
    moon_transit: Optional[float] = None
    sun_alt: Optional[float] = None
    sun_az: Optional[float] = None
    moon_alt: Optional[float] = None
    moon_az: Optional[float] = None
    sun_hrs_visible: Optional[float] = None
    sun_hrs_invisible: Optional[float] = None
    sun_sign: Optional[str] = None
    moon_sign: Optional[str] = None
    moon_phase: Optional[str] = None
    moon_phase_index: Optional[int] = None
    season: Optional[str] = None
    season_index: Optional[int] = None

    def event(self, kind: str) -> Optional[float]:
        """Return the instant of a single-event schedule kind, if it occurs."""

        attr = EVENT_FIELDS.get(kind)
        if attr is None:
            return None
        return getattr(self, attr)

    @property
    def has_durations(self) -> bool:
        return self.sun_hrs_visible is not None and self.sun_hrs_invisible is not None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "AstroSnapshot":
        """Build a snapshot from flat ``Astro``-style keys or attribute names.

        Instants may be decimal hours or ``HH:MM[:SS]`` strings; anything that
        does not parse (``---``, empty, garbage) means the event does not occur.
        """

        values: Dict[str, Any] = {}
        for f in fields(cls):
            raw = data.get(f.name)
            if raw is None:
                raw = data.get(_FLAT_KEYS.get(f.name, ""))
            if f.name in _TEXT_FIELDS:
                values[f.name] = _to_text(raw)
            elif f.name in _INT_FIELDS:
                number = _to_number(raw)
                values[f.name] = int(number) if number is not None else None
            elif f.name in _HOUR_FIELDS:
                values[f.name] = _to_hours(raw)
            else:
                values[f.name] = _to_number(raw)

        if values["latitude"] is None or values["longitude"] is None:
            raise ValueError("snapshot needs observer latitude and longitude")
        return cls(**values)


_FLAT_KEYS = {
    "latitude": "ObsLat",
    "longitude": "ObsLon",
    "sun_alt": "SunAlt",
    "sun_az": "SunAz",
    "moon_alt": "MoonAlt",
    "moon_az": "MoonAz",
    "sun_hrs_visible": "SunHrsVisible",
    "sun_hrs_invisible": "SunHrsInvisible",
    "sun_sign": "SunSign",
    "moon_sign": "MoonSign",
    "moon_phase": "MoonPhaseS",
    "moon_phase_index": "MoonPhaseI",
    "season": "ObsSeason",
    "season_index": "ObsSeasonN",
}
_FLAT_KEYS.update({attr: kind for kind, attr in EVENT_FIELDS.items()})

_TEXT_FIELDS = {"sun_sign", "moon_sign", "moon_phase", "season"}
_INT_FIELDS = {"moon_phase_index", "season_index"}
_HOUR_FIELDS = set(EVENT_FIELDS.values()) | {"sun_hrs_visible", "sun_hrs_invisible"}


def _to_number(raw: Any) -> Optional[float]:
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        number = float(raw)
    else:
        try:
            number = float(str(raw).strip())
        except ValueError:
            return None
    return number if math.isfinite(number) else None


def _to_hours(raw: Any) -> Optional[float]:
    """Decimal hours within one day; anything outside [0, 24] does not occur."""

    if isinstance(raw, str) and ":" in raw:
        parts = raw.strip().split(":")
        try:
            numbers = [float(p) for p in parts]
        except ValueError:
            return None
        if len(numbers) not in (2, 3):
            return None
        h, m = numbers[0], numbers[1]
        s = numbers[2] if len(numbers) == 3 else 0.0
        hours = h + m / 60.0 + s / 3600.0
    else:
        hours = _to_number(raw)
    if hours is None or not math.isfinite(hours) or not 0.0 <= hours <= 24.0:
        return None
    return hours


def _to_text(raw: Any) -> Optional[str]:
    if raw is None:
        return None
    text = str(raw).strip()
    if not text or text == UNAVAILABLE:
        return None
    return text
