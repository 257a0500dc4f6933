from datetime import date

import pytest

from dayschedule.services.annual_events import RULES, annual_events, reading_slot


@pytest.mark.parametrize(
    "name,day,expected",
    [
        ("Advent", date(2024, 12, 1), ("adventseason", "advent1")),
        ("Advent", date(2024, 12, 22), ("adventseason", "advent4")),
        ("Advent", date(2024, 12, 23), ("adventseason", None)),
        ("Advent", date(2024, 12, 24), None),
        ("Advent", date(2024, 11, 30), None),
        ("AdventEarly", date(2024, 11, 30), ("adventseason", None)),
        ("Advent", date(2022, 11, 27), ("adventseason", "advent1")),
        ("Advent", date(2022, 12, 18), ("adventseason", "advent4")),
        ("Carnival", date(2024, 2, 8), ("carnivalseason", "carnivalseason1")),
        ("Carnival", date(2024, 2, 12), ("carnivalseason", "carnivalseason5")),
        ("Carnival", date(2024, 2, 13), ("carnivalseason", "carnivalseason6")),
        ("Carnival", date(2024, 2, 14), None),
        ("Carnival", date(2024, 1, 28), ("carnivalseason", None)),
        ("Carnival", date(2024, 1, 27), None),
        ("CarnivalLong", date(2024, 11, 11), ("carnivalseason", None)),
        ("CarnivalLong", date(2024, 11, 10), None),
        ("Fasching", date(2024, 2, 13), ("faschingseason", "faschingseason6")),
        ("Christmas", date(2024, 12, 24), ("christmasseason", "christmaseve")),
        ("Christmas", date(2024, 12, 26), ("christmasseason", "christmas2")),
        ("Christmas", date(2024, 12, 27), None),
        ("ChristmasLong", date(2024, 12, 27), ("christmasseason", None)),
        ("ChristmasLong", date(2025, 1, 6), ("christmasseason", None)),
        ("ChristmasLong", date(2025, 1, 7), None),
        ("Easter", date(2024, 3, 17), ("easterseason", None)),
        ("Easter", date(2024, 3, 16), None),
        ("Easter", date(2024, 4, 1), ("easterseason", "eastermon")),
        ("Easter", date(2024, 4, 7), ("easterseason", "easterwhitesun")),
        ("Easter", date(2024, 4, 8), None),
        ("EasterTraditional", date(2024, 5, 19), ("easterseason", None)),
        ("EasterTraditional", date(2024, 3, 30), None),
        ("HolyWeek", date(2024, 3, 24), ("holyweek", "holyweekpalm")),
        ("HolyWeek", date(2024, 3, 29), ("holyweek", "holyweekfri")),
        ("HolyWeek", date(2024, 3, 31), None),
        ("Lent", date(2024, 2, 14), ("lentseason", "lentbegin")),
        ("Lent", date(2024, 2, 15), ("lentseason", "lentw1")),
        ("Lent", date(2024, 2, 18), ("lentseason", "lentsun1")),
        ("Lent", date(2024, 2, 19), ("lentseason", "lentw2")),
        ("Lent", date(2024, 3, 24), ("lentseason", "lentsun6")),
        ("Lent", date(2024, 3, 25), ("lentseason", "lentw7")),
        ("Lent", date(2024, 3, 30), ("lentseason", "lentend")),
        ("Lent", date(2024, 3, 31), None),
        ("StrongBeerFestival", date(2024, 3, 15), ("sbeerseason", "sbeerseasonbegin")),
        ("StrongBeerFestival", date(2024, 4, 7), ("sbeerseason", None)),
        ("StrongBeerFestival", date(2024, 4, 8), None),
        ("Oktoberfest", date(2024, 9, 21), ("oktoberfestseason", "oktoberfestbegin")),
        ("Oktoberfest", date(2024, 10, 6), ("oktoberfestseason", None)),
        ("Oktoberfest", date(2024, 10, 7), None),
        ("Oktoberfest", date(2023, 9, 16), ("oktoberfestseason", "oktoberfestbegin")),
        ("Oktoberfest", date(2023, 10, 3), ("oktoberfestseason", None)),
        ("Oktoberfest", date(2023, 10, 4), None),
        ("Halloween", date(2024, 10, 24), ("halloweenseason", "halloweenbegin")),
        ("Halloween", date(2024, 10, 31), ("halloweenseason", "halloween")),
        ("Halloween", date(2024, 11, 1), None),
        ("TurnOfTheYear", date(2024, 12, 31), ("turnoftheyear", "newyearseve")),
        ("TurnOfTheYear", date(2025, 1, 1), ("turnoftheyear", "newyear")),
        ("TurnOfTheYear", date(2024, 12, 26), None),
    ],
)
def test_rules(name, day, expected):
    assert RULES[name](day) == expected


def test_reading_slots_fold_variants():
    assert reading_slot("Fasching", ["Fasching"]) == "Carnival"
    assert reading_slot("EasterTraditional", ["EasterTraditional"]) == "Easter"
    assert reading_slot("EasterTraditional", ["Easter", "EasterTraditional"]) == "EasterTraditional"
    assert reading_slot("ChristmasLong", ["ChristmasLong"]) == "Christmas"
    assert reading_slot("Lent", ["Lent"]) == "Lent"


def test_overlapping_seasons_are_all_reported():
    found = annual_events(date(2024, 12, 31), ["ChristmasLong", "TurnOfTheYear", "Halloween"])
    assert found.seasons == ["christmasseason", "turnoftheyear"]
    assert found.days == ["newyearseve"]
    assert found.flags == {"Christmas": 1, "TurnOfTheYear": 1, "Halloween": 0}


def test_nothing_selected_reports_nothing():
    found = annual_events(date(2024, 12, 24), [])
    assert found.seasons == []
    assert found.days == []
    assert found.flags == {}
