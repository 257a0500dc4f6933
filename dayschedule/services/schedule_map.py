"""Time-ordered schedule of one day and its relative lookups."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple


class ScheduleMap:
    """Decimal-hour instant -> labels, plus entries that span the whole day.

    Labels keep insertion order per instant; a label already present at the
    same instant (compared case-insensitively) is not added twice.
    """

    def __init__(self) -> None:
        self._entries: Dict[float, List[str]] = {}
        self.all_day: List[str] = []

    def add(self, instant: Optional[float], label: str) -> bool:
        if instant is None:
            return False
        if instant == 24.0:
            instant = 0.0
        if not 0.0 <= instant < 24.0:
            raise ValueError(f"schedule instant {instant!r} outside [0, 24)")
        label = label.strip()
        labels = self._entries.setdefault(instant, [])
        if any(existing.lower() == label.lower() for existing in labels):
            return False
        labels.append(label)
        return True

    def add_all_day(self, label: str) -> bool:
        label = label.strip()
        if any(existing.lower() == label.lower() for existing in self.all_day):
            return False
        self.all_day.append(label)
        return True

    def items(self) -> Iterator[Tuple[float, List[str]]]:
        for instant in sorted(self._entries):
            yield instant, list(self._entries[instant])

    def labels_at(self, instant: float) -> List[str]:
        return list(self._entries.get(instant, []))

    def first(self) -> Optional[Tuple[float, List[str]]]:
        if not self._entries:
            return None
        instant = min(self._entries)
        return instant, list(self._entries[instant])

    def last(self) -> Optional[Tuple[float, List[str]]]:
        if not self._entries:
            return None
        instant = max(self._entries)
        return instant, list(self._entries[instant])

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, label: str) -> bool:
        wanted = label.lower()
        return any(wanted == existing.lower() for labels in self._entries.values() for existing in labels)


@dataclass
class ScheduleLookup:
    last: Optional[str] = None
    last_time: Optional[float] = None
    last_day_offset: int = 0
    next: Optional[str] = None
    next_time: Optional[float] = None
    next_day_offset: int = 0
    recent: List[str] = field(default_factory=list)
    upcoming: List[str] = field(default_factory=list)

    @property
    def available(self) -> bool:
        return self.last is not None or self.next is not None


def lookup(
    today: ScheduleMap,
    now: float,
    yesterday: Optional[ScheduleMap] = None,
    tomorrow: Optional[ScheduleMap] = None,
) -> ScheduleLookup:
    """Resolve last/next/recent/upcoming for ``now`` (decimal hours)."""

    result = ScheduleLookup()
    if len(today) == 0:
        return result

    for instant, labels in today.items():
        if instant <= now:
            result.last = ", ".join(labels)
            result.last_time = instant
            result.recent = list(reversed(labels)) + result.recent
        else:
            if result.next is None:
                result.next = ", ".join(labels)
                result.next_time = instant
            result.upcoming.extend(labels)

    if result.last is None and yesterday is not None:
        previous = yesterday.last()
        if previous is not None:
            result.last = ", ".join(previous[1])
            result.last_time = previous[0]
            result.last_day_offset = -1
            result.recent = list(reversed(previous[1]))

    following = tomorrow.first() if tomorrow is not None else None
    if following is not None:
        if result.next is None:
            result.next = ", ".join(following[1])
            result.next_time = following[0]
            result.next_day_offset = 1
        result.upcoming.extend(following[1])

    return result
