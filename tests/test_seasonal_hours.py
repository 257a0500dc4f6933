import pytest

from dayschedule.services.astro_snapshot import AstroSnapshot
from dayschedule.services.seasonal_hours import (
    PartitionInvariantError,
    SunCase,
    build_partition,
    classify_sun_case,
    partition_index,
    resolve_next_occurrences,
)


def _snapshot(rise, set_, visible, invisible, alt=10.0):
    return AstroSnapshot(
        latitude=52.5,
        longitude=13.4,
        sun_rise=rise,
        sun_set=set_,
        sun_alt=alt,
        sun_hrs_visible=visible,
        sun_hrs_invisible=invisible,
    )


def test_classify_sun_case():
    assert classify_sun_case(6.0, 18.0) is SunCase.NORMAL
    assert classify_sun_case(23.0, 10.0) is SunCase.INVERTED
    assert classify_sun_case(3.0, None) is SunCase.ONLY_SUNRISE
    assert classify_sun_case(None, 21.0) is SunCase.ONLY_SUNSET
    assert classify_sun_case(None, None) is SunCase.NEITHER


@pytest.mark.parametrize(
    "time_of_day,expected",
    [(6.0, 1), (12.0, 7), (17.99, 12), (18.0, -12), (19.5, -11), (3.0, -3), (5.5, -1), (0.0, -6)],
)
def test_regular_day_indices(time_of_day, expected):
    part = build_partition(_snapshot(6.0, 18.0, 12.0, 12.0), time_of_day, 12, 12)
    assert part.case is SunCase.NORMAL
    assert part.index == expected


@pytest.mark.parametrize("day_parts,night_parts", [(1, 1), (4, 12), (10, 14), (12, 12), (24, 3)])
def test_regular_day_never_yields_zero(day_parts, night_parts):
    snap = _snapshot(6.25, 19.75, 13.5, 10.5)
    for step in range(0, 24 * 12):
        part = build_partition(snap, step / 12.0, day_parts, night_parts)
        assert part.index != 0
        if part.index > 0:
            assert 1 <= part.index <= day_parts
        else:
            assert -night_parts <= part.index <= -1


def test_part_lengths_sum_to_durations():
    part = build_partition(_snapshot(6.25, 19.75, 13.5, 10.5), 12.0, 10, 14)
    assert part.day_part_len * 10 == pytest.approx(13.5)
    assert part.night_part_len * 14 == pytest.approx(10.5)


def test_boundary_table_for_equal_halves():
    part = build_partition(_snapshot(6.0, 18.0, 12.0, 12.0), 12.0, 12, 12)
    assert part.boundaries[1] == 6.0
    assert part.boundaries[7] == 12.0
    assert part.boundaries[12] == 17.0
    assert part.boundaries[-12] == 18.0
    assert part.boundaries[-6] == 0.0
    assert part.boundaries[-1] == 5.0
    assert part.next_boundary == 13.0
    assert part.position == 7
    assert part.roman == "VII"


def test_boundary_tables_are_deterministic():
    snap = _snapshot(5.1, 20.3, 15.2, 8.8)
    first = build_partition(snap, 9.0, 12, 12)
    second = build_partition(snap, 9.0, 12, 12)
    assert first.boundaries == second.boundaries


def test_night_position_and_roman():
    part = build_partition(_snapshot(6.0, 18.0, 12.0, 12.0), 3.0, 12, 12)
    assert part.index == -3
    assert part.position == 10
    assert part.roman == "X"
    assert part.next_boundary == 3.0 + 1.0


def test_inverted_case_continues_the_previous_daylight():
    snap = _snapshot(23.0, 10.0, 11.0, 13.0)
    assert build_partition(snap, 5.0, 12, 12).index == 7
    assert build_partition(snap, 23.5, 12, 12).index == 1
    assert build_partition(snap, 15.0, 12, 12).index == -8


def test_only_sunrise():
    snap = _snapshot(3.0, None, 21.0, 3.0, alt=20.0)
    before = build_partition(snap, 1.0, 12, 12)
    assert before.case is SunCase.ONLY_SUNRISE
    assert -12 <= before.index <= -1
    assert build_partition(snap, 10.0, 12, 12).index == 6


def test_only_sunset_before_sunset_is_day():
    snap = _snapshot(None, 21.0, 21.0, 3.0, alt=-1.0)
    part = build_partition(snap, 10.5, 12, 12)
    assert part.case is SunCase.ONLY_SUNSET
    assert part.index == 7


def test_polar_day_uses_merged_partition():
    part = build_partition(_snapshot(None, None, 24.0, 0.0, alt=10.0), 12.0, 12, 12)
    assert part.case is SunCase.NEITHER
    assert part.index == 7


def test_polar_night_uses_merged_partition():
    part = build_partition(_snapshot(None, None, 0.0, 24.0, alt=-5.0), 12.0, 12, 12)
    assert part.index == -6


def test_next_boundary_follows_merged_slots():
    after_sunrise = build_partition(_snapshot(3.0, None, 21.0, 3.0, alt=20.0), 10.0, 12, 12)
    assert after_sunrise.merged_part_len == pytest.approx(2.0)
    assert after_sunrise.next_boundary == pytest.approx(12.0)

    polar_day = build_partition(_snapshot(None, None, 24.0, 0.0, alt=10.0), 12.0, 12, 12)
    assert polar_day.next_boundary == pytest.approx(14.0)

    polar_night = build_partition(_snapshot(None, None, 0.0, 24.0, alt=-5.0), 12.0, 12, 12)
    assert polar_night.next_boundary == pytest.approx(14.0)


def test_next_boundary_before_sunset_uses_day_length():
    part = build_partition(_snapshot(None, 21.0, 21.0, 3.0, alt=-1.0), 10.5, 12, 12)
    assert part.merged_part_len is None
    assert part.next_boundary == pytest.approx(12.25)


def test_missing_durations_give_no_partition():
    assert build_partition(AstroSnapshot(latitude=0.0, longitude=0.0), 12.0, 12, 12) is None


def test_non_positive_part_length_is_an_invariant_violation():
    with pytest.raises(PartitionInvariantError):
        partition_index(SunCase.NORMAL, 12.0, 6.0, 18.0, 0.0, 1.0, 12, 12, 10.0)


def test_next_occurrences_come_from_tomorrow_once_passed():
    today = build_partition(_snapshot(6.0, 18.0, 12.0, 12.0), 12.0, 12, 12)
    tomorrow = build_partition(_snapshot(5.5, 18.5, 13.0, 11.0), 12.0, 12, 12)
    table = resolve_next_occurrences(today, tomorrow, 12.0)
    assert table[1] == 5.5
    assert table[8] == 13.0
    assert table[-12] == 18.0

    alone = resolve_next_occurrences(today, None, 12.0)
    assert alone[1] is None
    assert alone[-12] == 18.0
