import logging
from datetime import date, datetime

import pytest
from zoneinfo import ZoneInfo

from dayschedule.i18n.resolve import identity_lookup, make_lookup
from dayschedule.services.astro_snapshot import AstroSnapshot
from dayschedule.services.changes import CHANGE_NONE, CHANGE_TODAY, CHANGE_TOMORROW
from dayschedule.services.day_window import apply_changes, build_window, resolve_config


BERLIN = ZoneInfo("Europe/Berlin")
LAT, LON = 52.52, 13.405


def _window(provider, anchor, options=None, translate=identity_lookup):
    return build_window(anchor, LAT, LON, provider, resolve_config(options), translate)


def test_resolve_config_defaults_and_counts():
    config = resolve_config({})
    assert (config.day_parts, config.night_parts) == (12, 12)
    assert not config.roman_day and not config.roman_night
    assert len(config.schedule) == 24

    assert (resolve_config({"day_parts": 10}).night_parts) == 10
    split = resolve_config({"seasonal_hours": "10:14"})
    assert (split.day_parts, split.night_parts) == (10, 14)


def test_resolve_config_roman_hours():
    config = resolve_config({"seasonal_hours": "4"})
    assert (config.day_parts, config.night_parts) == (12, 4)
    assert config.roman_day and config.roman_night


def test_resolve_config_rejects_out_of_range():
    with pytest.raises(ValueError):
        resolve_config({"day_parts": 30})


def test_window_builds_five_days_in_order(fixed_sun_provider):
    days = _window(fixed_sun_provider, datetime(2024, 3, 20, 12, 0, tzinfo=BERLIN))
    assert sorted(days) == [-2, -1, 0, 1, 2]
    assert [m.date().isoformat() for m in fixed_sun_provider.calls] == [
        "2024-03-22",
        "2024-03-18",
        "2024-03-21",
        "2024-03-19",
        "2024-03-20",
    ]
    assert all(m.hour == 12 for m in fixed_sun_provider.calls)


def test_today_partition_daytime_and_lookup(fixed_sun_provider):
    days = _window(fixed_sun_provider, datetime(2024, 3, 20, 12, 0, tzinfo=BERLIN))
    today = days[0]
    assert today.partition.index == 7
    assert today.daytime.key == "noon"
    assert today.meteo.name == "spring"
    assert today.pheno.index >= 1
    assert today.lookup.last == "SunTransit, DaySeasonalHr 7, Daytime noon"
    assert today.lookup.next == "DaySeasonalHr 8, Daytime earlyafternoon"
    assert today.lookup.next_time == 13.0
    assert today.schedule.labels_at(18.0) == ["SunSet", "DaySeasonalHr -12", "Daytime dusk"]
    assert "ObsDate 2024-03-20" in today.schedule


def test_sun_sign_change_is_flagged_on_both_days(fixed_sun_provider):
    days = _window(fixed_sun_provider, datetime(2024, 3, 20, 12, 0, tzinfo=BERLIN))
    assert days[-1].changes["SunSign"] == CHANGE_TOMORROW
    assert days[0].changes["SunSign"] == CHANGE_TODAY
    assert days[1].changes["SunSign"] == CHANGE_NONE
    assert "SunSign Aries" in days[0].schedule.labels_at(0.0)


def test_rerunning_change_detection_adds_no_entry(fixed_sun_provider):
    days = _window(fixed_sun_provider, datetime(2024, 2, 29, 12, 0, tzinfo=BERLIN))
    assert days[0].changes["SeasonMeteo"] == CHANGE_TOMORROW
    assert days[1].changes["SeasonMeteo"] == CHANGE_TODAY
    before = days[1].schedule.labels_at(0.0)
    assert "SeasonMeteo spring" in before

    assert apply_changes(days, resolve_config({}), identity_lookup) == []
    assert days[1].schedule.labels_at(0.0) == before


def test_unselected_kinds_stay_out_of_the_schedule(fixed_sun_provider):
    days = _window(
        fixed_sun_provider,
        datetime(2024, 3, 20, 12, 0, tzinfo=BERLIN),
        {"schedule": ["SunRise", "SunSet"]},
    )
    today = days[0]
    assert [labels for _, labels in today.schedule.items()] == [["SunRise"], ["SunSet"]]
    assert today.changes["SunSign"] == CHANGE_TODAY


def test_missing_day_degrades_gracefully(provider_factory, caplog):
    provider = provider_factory(missing={date(2024, 3, 21)})
    with caplog.at_level(logging.WARNING):
        days = _window(provider, datetime(2024, 3, 20, 12, 0, tzinfo=BERLIN))
    assert days[1].astro is None
    assert days[1].partition is None
    assert days[0].partition.next_occurrence[1] is None
    assert days[0].partition.next_occurrence[8] == 13.0
    assert days[0].changes["SunSign"] == CHANGE_TODAY
    assert any(r.getMessage() == "schedule.window.day_missing" for r in caplog.records)


def test_roman_hours_window(fixed_sun_provider):
    days = _window(
        fixed_sun_provider,
        datetime(2024, 3, 20, 12, 0, tzinfo=BERLIN),
        {"seasonal_hours": "4"},
    )
    today = days[0]
    assert today.partition.night_part_len == 3.0
    assert today.daytime.key == "Hora VII"
    assert "Daytime Vigilia I" in today.schedule.labels_at(18.0)
    assert "Daytime Vigilia IV" in today.schedule.labels_at(3.0)


def test_informative_days_become_all_day_entries(fixed_sun_provider):
    days = _window(
        fixed_sun_provider,
        datetime(2024, 5, 19, 12, 0, tzinfo=BERLIN),
        {"informative_days": ["Pentecost"]},
        translate=make_lookup("en"),
    )
    assert days[0].schedule.all_day == ["Pentecost Sunday"]
    assert days[0].description(make_lookup("en")) == "Pentecost Sunday"
    assert days[0].day_type == "weekend"
    assert days[1].schedule.all_day == ["Pentecost Monday"]
    assert days[2].description(make_lookup("de")) == "Arbeitstag"


def test_resolve_config_rejects_zero_counts():
    with pytest.raises(ValueError):
        resolve_config({"seasonal_hours": "0"})


class _MalformedProvider:
    def snapshot(self, moment, lat, lon, elevation=0.0, horizon=None):
        return AstroSnapshot.from_mapping(
            {
                "ObsLat": lat,
                "ObsLon": lon,
                "SunRise": "06:00",
                "SunSet": "18:00",
                "SunTransit": "24:30:00",
                "MoonRise": 25,
                "MoonSet": "nan",
                "CivilTwilightMorning": "inf",
                "SunHrsVisible": 12.0,
                "SunHrsInvisible": 12.0,
            }
        )


def test_malformed_instants_do_not_break_the_window():
    days = _window(_MalformedProvider(), datetime(2024, 3, 20, 12, 0, tzinfo=BERLIN))
    today = days[0]
    assert today.astro.sun_transit is None
    assert today.astro.moon_rise is None
    assert "SunRise" in today.schedule
    assert "SunTransit" not in today.schedule
    assert "MoonRise" not in today.schedule
    assert today.partition.index == 7


def test_dst_switch_is_flagged_on_both_days(fixed_sun_provider):
    days = _window(fixed_sun_provider, datetime(2024, 3, 30, 12, 0, tzinfo=BERLIN))
    assert days[0].changes["ObsIsDST"] == CHANGE_TOMORROW
    assert days[1].changes["ObsIsDST"] == CHANGE_TODAY
    assert days[2].changes["ObsIsDST"] == CHANGE_NONE
    assert "ObsIsDST 1" in days[1].schedule.labels_at(0.0)
    assert "ObsIsDST 1" not in days[0].schedule


def test_phenological_stage_change_is_flagged_on_both_days(fixed_sun_provider):
    days = _window(fixed_sun_provider, datetime(2023, 2, 21, 12, 0, tzinfo=BERLIN))
    assert days[0].pheno.name == "winter"
    assert days[1].pheno.name == "earlyspring"
    assert days[-1].changes["SeasonPheno"] == CHANGE_NONE
    assert days[0].changes["SeasonPheno"] == CHANGE_TOMORROW
    assert days[1].changes["SeasonPheno"] == CHANGE_TODAY
    assert "SeasonPheno earlyspring" in days[1].schedule.labels_at(0.0)


def test_annual_events_become_all_day_entries(fixed_sun_provider):
    days = _window(
        fixed_sun_provider,
        datetime(2024, 3, 31, 12, 0, tzinfo=BERLIN),
        {"annual_events": ["Easter", "HolyWeek", "Advent"]},
        translate=make_lookup("en"),
    )
    today = days[0]
    assert today.annual.seasons == ["easterseason"]
    assert today.annual.flags == {"Easter": 1, "HolyWeek": 0, "Advent": 0}
    assert today.schedule.all_day == ["Easter Sunday"]
    assert days[-1].annual.seasons == ["easterseason", "holyweek"]
    assert days[-1].schedule.all_day == ["Holy Saturday"]
    assert days[1].schedule.all_day == ["Easter Monday"]
