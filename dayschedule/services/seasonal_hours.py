"""Seasonal (temporal) hour partitioning of a day.

Daylight is split into ``day_parts`` equal slots and the night into
``night_parts`` equal slots. Day slots are numbered ``1..D`` from sunrise,
night slots ``-N..-1`` from sunset, so ``-N`` is the first hour after sunset
and ``-1`` the last one before sunrise. Index ``0`` never exists.

Which formula locates "now" depends on which of sunrise and sunset occur on
the local day; :class:`SunCase` names those states explicitly.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from .astro_snapshot import AstroSnapshot
from .conversions import to_roman, wrap_day


# Lookahead applied to "now" so a boundary reached this second already counts.
LOOKAHEAD_HOURS = 1.0 / 3600.0


class SunCase(str, Enum):
    NORMAL = "normal"
    INVERTED = "inverted"
    ONLY_SUNRISE = "only_sunrise"
    ONLY_SUNSET = "only_sunset"
    NEITHER = "neither"


class PartitionInvariantError(RuntimeError):
    """Raised when the partition arithmetic produces an impossible state."""


@dataclass
class SeasonalPartition:
    day_parts: int
    night_parts: int
    day_part_len: float
    night_part_len: float
    case: SunCase
    index: int
    sun_rise: Optional[float]
    sun_set: Optional[float]
    boundaries: Dict[int, float]
    next_occurrence: Dict[int, Optional[float]] = field(default_factory=dict)
    next_boundary: Optional[float] = None
    merged_part_len: Optional[float] = None

    @property
    def position(self) -> int:
        """1-based position of the current index within its half."""
        return self.night_parts + 1 + self.index if self.index < 0 else self.index

    @property
    def roman(self) -> str:
        return to_roman(self.position)

    def indices(self) -> List[int]:
        """Every index in chronological order from sunset through the day."""
        return list(range(-self.night_parts, 0)) + list(range(1, self.day_parts + 1))


def classify_sun_case(sun_rise: Optional[float], sun_set: Optional[float]) -> SunCase:
    if sun_rise is None and sun_set is None:
        return SunCase.NEITHER
    if sun_set is None:
        return SunCase.ONLY_SUNRISE
    if sun_rise is None:
        return SunCase.ONLY_SUNSET
    if sun_set < sun_rise:
        return SunCase.INVERTED
    return SunCase.NORMAL


def _ceil_part(elapsed: float, part_len: float) -> int:
    if part_len <= 0.0:
        raise PartitionInvariantError(f"non-positive part length {part_len!r}")
    return math.ceil(elapsed / part_len)


def _day_index(elapsed: float, part_len: float, day_parts: int) -> int:
    return max(1, min(day_parts, _ceil_part(elapsed, part_len)))


def _night_index(elapsed: float, part_len: float, night_parts: int) -> int:
    slot = max(1, min(night_parts, _ceil_part(elapsed, part_len)))
    return -(night_parts + 1) + slot


def _merged_index(
    now: float,
    day_len: float,
    night_len: float,
    day_parts: int,
    night_parts: int,
    above_horizon: bool,
) -> int:
    # Only one of the lengths is non-zero on a true polar day or night.
    merged = day_len + night_len
    if above_horizon:
        return _day_index(now, merged, day_parts)
    return _night_index(now, merged, night_parts)


def uses_merged_length(case: SunCase, now: float, sun_rise: Optional[float], sun_set: Optional[float]) -> bool:
    """Whether ``now`` is located with the merged day+night part length."""

    if case is SunCase.NEITHER:
        return True
    if case is SunCase.ONLY_SUNRISE:
        return now >= sun_rise
    if case is SunCase.ONLY_SUNSET:
        return now >= sun_set
    return False


def partition_index(
    case: SunCase,
    now: float,
    sun_rise: Optional[float],
    sun_set: Optional[float],
    day_len: float,
    night_len: float,
    day_parts: int,
    night_parts: int,
    sun_alt: Optional[float],
) -> int:
    """Locate ``now`` (decimal hours, lookahead included) in the partition."""

    alt = sun_alt if sun_alt is not None else 0.0

    if case is SunCase.NEITHER:
        idx = _merged_index(now, day_len, night_len, day_parts, night_parts, alt > 0.0)
    elif case is SunCase.ONLY_SUNRISE and now < sun_rise:
        idx = _night_index(now, night_len, night_parts)
    elif case is SunCase.ONLY_SUNSET and now < sun_set:
        idx = _day_index(now, day_len, day_parts)
    elif case in (SunCase.ONLY_SUNRISE, SunCase.ONLY_SUNSET):
        idx = _merged_index(now, day_len, night_len, day_parts, night_parts, alt >= 0.0)
    elif case is SunCase.INVERTED:
        if now >= sun_rise:
            idx = _day_index(now - sun_rise, day_len, day_parts)
        elif now < sun_set:
            idx = _day_index(now + 24.0 - sun_rise, day_len, day_parts)
        else:
            idx = _night_index(now - sun_set, night_len, night_parts)
    elif now < sun_rise:
        idx = _night_index(now + 24.0 - sun_set, night_len, night_parts)
    elif now < sun_set:
        idx = _day_index(now - sun_rise, day_len, day_parts)
    else:
        idx = _night_index(now - sun_set, night_len, night_parts)

    if idx == 0:
        raise PartitionInvariantError("partition index computed as 0")
    return idx


def boundary_start(
    index: int,
    sun_rise: Optional[float],
    sun_set: Optional[float],
    day_len: float,
    night_len: float,
    night_parts: int,
) -> float:
    """Start instant of ``index`` measured from this day's sunrise or sunset."""

    if index > 0:
        value = (index - 1) * day_len + (sun_rise or 0.0)
    else:
        value = (night_parts + index) * night_len + (sun_set or 0.0)
    return wrap_day(value)


def boundary_table(
    sun_rise: Optional[float],
    sun_set: Optional[float],
    day_len: float,
    night_len: float,
    day_parts: int,
    night_parts: int,
) -> Dict[int, float]:
    table: Dict[int, float] = {}
    for idx in list(range(-night_parts, 0)) + list(range(1, day_parts + 1)):
        table[idx] = boundary_start(idx, sun_rise, sun_set, day_len, night_len, night_parts)
    return table


def next_boundary(partition: SeasonalPartition) -> float:
    """Instant at which the current seasonal hour ends."""

    idx = partition.index
    merged = partition.merged_part_len
    if merged is not None:
        # Merged slots are counted from midnight.
        slot = idx if idx > 0 else partition.night_parts + 1 + idx
        value = slot * merged
    elif idx > 0:
        value = idx * partition.day_part_len + (partition.sun_rise or 0.0)
    else:
        value = (partition.night_parts + 1 + idx) * partition.night_part_len + (partition.sun_set or 0.0)
    return wrap_day(value)


def build_partition(
    snapshot: AstroSnapshot,
    time_of_day: float,
    day_parts: int,
    night_parts: int,
) -> Optional[SeasonalPartition]:
    """Partition one day; ``None`` when the snapshot has no daylight durations."""

    if day_parts < 1 or night_parts < 1:
        raise PartitionInvariantError("part counts must be positive")
    if not snapshot.has_durations:
        return None

    day_len = snapshot.sun_hrs_visible / day_parts
    night_len = snapshot.sun_hrs_invisible / night_parts
    case = classify_sun_case(snapshot.sun_rise, snapshot.sun_set)
    now = time_of_day + LOOKAHEAD_HOURS
    idx = partition_index(
        case,
        now,
        snapshot.sun_rise,
        snapshot.sun_set,
        day_len,
        night_len,
        day_parts,
        night_parts,
        snapshot.sun_alt,
    )
    partition = SeasonalPartition(
        day_parts=day_parts,
        night_parts=night_parts,
        day_part_len=day_len,
        night_part_len=night_len,
        case=case,
        index=idx,
        sun_rise=snapshot.sun_rise,
        sun_set=snapshot.sun_set,
        boundaries=boundary_table(
            snapshot.sun_rise, snapshot.sun_set, day_len, night_len, day_parts, night_parts
        ),
    )
    if uses_merged_length(case, now, snapshot.sun_rise, snapshot.sun_set):
        partition.merged_part_len = day_len + night_len
    partition.next_boundary = next_boundary(partition)
    return partition


def resolve_next_occurrences(
    today: SeasonalPartition,
    tomorrow: Optional[SeasonalPartition],
    time_of_day: float,
) -> Dict[int, Optional[float]]:
    """For each index, the start of its next occurrence at or after ``time_of_day``.

    Boundaries already passed today are taken from tomorrow's partition;
    they are ``None`` when tomorrow is unavailable.
    """

    table: Dict[int, Optional[float]] = {}
    for idx, start in today.boundaries.items():
        if time_of_day < start:
            table[idx] = start
        elif tomorrow is not None:
            table[idx] = boundary_start(
                idx,
                tomorrow.sun_rise,
                tomorrow.sun_set,
                tomorrow.day_part_len,
                tomorrow.night_part_len,
                today.night_parts,
            )
        else:
            table[idx] = None
    return table
