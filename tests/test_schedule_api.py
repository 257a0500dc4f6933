import pytest
from fastapi.testclient import TestClient

from dayschedule.app import app
from dayschedule.routers.schedule import get_provider


@pytest.fixture
def client(fixed_sun_provider):
    app.dependency_overrides[get_provider] = lambda: fixed_sun_provider
    yield TestClient(app)
    app.dependency_overrides.clear()


BERLIN = {"lat": 52.52, "lon": 13.405, "tz": "Europe/Berlin", "query": "Berlin"}


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_compute_shape(client):
    resp = client.post(
        "/v1/schedule/compute",
        json={"date": "2024-03-20", "time": "12:00", "place": BERLIN, "options": {}},
    )
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["header"]["date_local"] == "2024-03-20"
    assert data["header"]["place_label"] == "Berlin"
    assert data["calendar"]["day_type"] == "Workday"
    assert data["partition"]["index"] == 7
    assert data["partition"]["case"] == "normal"
    assert data["partition"]["boundaries"]["-12"] == "18:00:00"
    assert data["daytime"]["display_name"] == "Noon"
    assert data["seasons"]["meteorological"]["key"] == "spring"
    assert data["changes"]["SunSign"] == 1
    assert data["lookup"]["next_time"] == "13:00:00"
    assert data["meta"]["place_defaults_used"] is False


def test_compute_date_only_defaults_to_noon(client):
    resp = client.post("/v1/schedule/compute", json={"date": "2024-03-20", "place": BERLIN})
    assert resp.status_code == 200, resp.text
    assert resp.json()["header"]["time_local"] == "12:00:00"


def test_compute_day_offset_and_language(client):
    resp = client.post(
        "/v1/schedule/compute",
        json={
            "date": "2024-03-20",
            "time": "12:00",
            "place": BERLIN,
            "options": {"day_offset": -1, "lang": "de"},
        },
    )
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["header"]["date_local"] == "2024-03-19"
    assert data["changes"]["SunSign"] == 2
    assert data["daytime"]["display_name"] == "Mittag"


def test_compute_without_place_uses_defaults(client):
    resp = client.post("/v1/schedule/compute", json={"date": "2024-03-20"})
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["meta"]["place_defaults_used"] is True
    assert data["header"]["tz"] == "Europe/Berlin"


def test_compute_roman_hours(client):
    resp = client.post(
        "/v1/schedule/compute",
        json={"date": "2024-03-20", "time": "12:00", "place": BERLIN, "options": {"seasonal_hours": "4"}},
    )
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["partition"]["night_parts"] == 4
    assert data["daytime"]["display_name"] == "Hora VII"
    assert data["meta"]["roman_night"] is True


def test_invalid_timezone_is_a_bad_request(client):
    resp = client.post(
        "/v1/schedule/compute",
        json={"date": "2024-03-20", "place": {"lat": 52.52, "lon": 13.405, "tz": "Mars/Olympus"}},
    )
    assert resp.status_code == 400


@pytest.mark.parametrize(
    "options",
    [{"seasonal_hours": "0"}, {"seasonal_hours": "12:x"}, {"day_parts": 30}, {"earlyspring": "2-22"}],
)
def test_invalid_options_are_rejected(client, options):
    resp = client.post("/v1/schedule/compute", json={"date": "2024-03-20", "place": BERLIN, "options": options})
    assert resp.status_code == 422


def test_today_endpoint(client):
    resp = client.get("/v1/schedule/today", params={"lat": 52.52, "lon": 13.405, "tz": "Europe/Berlin"})
    assert resp.status_code == 200, resp.text
    assert resp.json()["header"]["tz"] == "Europe/Berlin"


def test_readings_endpoint(client):
    resp = client.get(
        "/v1/schedule/readings",
        params={
            "lat": 52.52,
            "lon": 13.405,
            "tz": "Europe/Berlin",
            "date": "2024-03-20",
            "time": "12:00",
            "schedule": ["SunRise", "SunSet", "SunTransit"],
        },
    )
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["DaySeasonalHr"] == 7
    assert data["SchedLast"] == "SunTransit"
    assert data["SchedNext"] == "SunSet"
    assert data["SchedUpcoming"] == "SunSet, SunRise"


def test_readings_accepts_calendar_options(client):
    resp = client.get(
        "/v1/schedule/readings",
        params={
            "lat": 52.52,
            "lon": 13.405,
            "tz": "Europe/Berlin",
            "date": "2024-03-31",
            "informative_days": ["Pentecost"],
            "annual_events": ["Easter", "Advent"],
            "horizon": -3.5,
        },
    )
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["DayDesc"] == "Easter Sunday"
    assert data["AnnualEvent"] == "Easter"
    assert data["AnnualEventEaster"] == 1
    assert data["AnnualEventAdvent"] == 0


def test_readings_informative_day_from_query(client):
    resp = client.get(
        "/v1/schedule/readings",
        params={"lat": 52.52, "lon": 13.405, "tz": "Europe/Berlin", "date": "2024-05-19", "informative_days": "Pentecost"},
    )
    assert resp.status_code == 200, resp.text
    assert resp.json()["DayDesc"] == "Pentecost Sunday"
    assert "AnnualEvent" not in resp.json()


def test_readings_phenological_origin_from_query(client):
    params = {"lat": 52.52, "lon": 13.405, "tz": "Europe/Berlin", "date": "2024-03-20"}
    default = client.get("/v1/schedule/readings", params=params).json()
    shifted = client.get("/v1/schedule/readings", params={**params, "earlyspring": "04-01"}).json()
    assert default["SeasonPhenoN"] >= 1
    assert shifted["SeasonPhenoN"] == 0


@pytest.mark.parametrize(
    "params",
    [{"earlyspring": "4-1"}, {"earlyfall": "13-01"}, {"horizon": 30}, {"informative_days": "Nope"}, {"annual_events": "Nope"}],
)
def test_today_rejects_invalid_query_options(client, params):
    resp = client.get("/v1/schedule/today", params={"lat": 52.52, "lon": 13.405, "tz": "Europe/Berlin", **params})
    assert resp.status_code == 422


def test_today_reports_annual_events(client):
    resp = client.get(
        "/v1/schedule/today",
        params={"lat": 52.52, "lon": 13.405, "tz": "Europe/Berlin", "annual_events": "Halloween", "lang": "de"},
    )
    assert resp.status_code == 200, resp.text
    assert isinstance(resp.json()["annual_events"], list)
