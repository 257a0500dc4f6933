"""Day-to-day change indicators across the schedule window.

A transition between two adjacent days sets the earlier day's flag to
``CHANGE_TOMORROW`` and the later day's flag to ``CHANGE_TODAY``. The
detector only reports transitions; applying them to both days is left to the
owner of the window.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Mapping, Optional, Sequence, Tuple


CHANGE_NONE = 0
CHANGE_TODAY = 1
CHANGE_TOMORROW = 2

CHANGE_KINDS = [
    "ObsSeason",
    "SeasonMeteo",
    "SeasonPheno",
    "SunSign",
    "MoonSign",
    "MoonPhaseS",
    "ObsIsDST",
]

# Neighbour pairs closest to today first, so today's flags are settled first.
PAIR_ORDER: Sequence[Tuple[int, int]] = ((0, 1), (-1, 0), (1, 2), (-2, -1))


@dataclass(frozen=True)
class Transition:
    kind: str
    earlier: int  # day offset whose value changes tomorrow
    later: int  # day offset holding the new value
    value: str


def detect(
    kind: str,
    earlier: int,
    later: int,
    earlier_value: Optional[str],
    later_value: Optional[str],
    earlier_flag: int,
    later_flag: int,
) -> Optional[Transition]:
    """Return the transition between two adjacent days, if one is due."""

    if earlier_value is None or later_value is None:
        return None
    if earlier_flag != CHANGE_NONE or later_flag != CHANGE_NONE:
        return None
    if earlier_value == later_value:
        return None
    return Transition(kind, earlier, later, later_value)


def detect_window(
    values: Mapping[int, Optional[Mapping[str, Optional[str]]]],
    flags: Dict[int, Dict[str, int]],
    apply: Callable[[Transition], None],
    kinds: Iterable[str] = CHANGE_KINDS,
) -> list:
    """Walk every neighbour pair and hand each transition to ``apply``.

    ``values`` maps a day offset to its comparable values (None when the day
    is unavailable); ``flags`` is read after each ``apply`` so a transition
    already recorded on a day blocks a second one for the same kind.
    """

    found = []
    for kind in kinds:
        for earlier, later in PAIR_ORDER:
            a = values.get(earlier)
            b = values.get(later)
            if a is None or b is None:
                continue
            transition = detect(
                kind,
                earlier,
                later,
                a.get(kind),
                b.get(kind),
                flags.get(earlier, {}).get(kind, CHANGE_NONE),
                flags.get(later, {}).get(kind, CHANGE_NONE),
            )
            if transition is not None:
                apply(transition)
                found.append(transition)
    return found
