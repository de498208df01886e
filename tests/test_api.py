import pytest
from fastapi.testclient import TestClient

from index import app
from praytimes import TIME_NAMES

MECCA_QUERY = {"lat": 21.4225, "lng": 39.8262, "date": "2024-03-20", "timezoneOffset": 180}


@pytest.fixture
def client():
    return TestClient(app)


def test_root(client):
    rv = client.get("/")
    assert rv.status_code == 200
    assert rv.json()["status"] == "online"


def test_methods(client):
    data = client.get("/api/methods").json()
    assert data["MWL"]["params"]["fajr"] == 18
    assert data["Makkah"]["params"]["isha"] == "90 min"
    assert data["Turkey"]["tune"]["maghrib"] == 7


def test_times_for_gps(client):
    rv = client.get("/api/timesForGPS", params=MECCA_QUERY)
    assert rv.status_code == 200
    data = rv.json()
    assert data["method"] == "MWL"
    day = data["times"]["2024-03-20"]
    assert list(day) == list(TIME_NAMES)
    assert day["dhuhr"] in ("12:27", "12:28", "12:29")


def test_several_days(client):
    rv = client.get("/api/timesForGPS", params={**MECCA_QUERY, "date": "2024-02-28", "days": 3})
    assert list(rv.json()["times"]) == ["2024-02-28", "2024-02-29", "2024-03-01"]


def test_turkey_profile_applies_safety_margins(client):
    mwl = client.get("/api/timesForGPS", params={**MECCA_QUERY, "format": "Float"}).json()
    tr = client.get(
        "/api/timesForGPS",
        params={**MECCA_QUERY, "format": "Float", "calculationMethod": "Turkey"},
    ).json()
    a, b = mwl["times"]["2024-03-20"], tr["times"]["2024-03-20"]
    assert b["sunrise"] - a["sunrise"] == pytest.approx(-7 / 60)
    assert b["maghrib"] - a["maghrib"] == pytest.approx(7 / 60)
    assert b["fajr"] == a["fajr"]


def test_options(client):
    rv = client.get(
        "/api/timesForGPS",
        params={**MECCA_QUERY, "asr": "Hanafi", "highLats": "AngleBased", "format": "12h"},
    )
    assert rv.status_code == 200
    data = rv.json()
    assert data["settings"]["asr"] == "Hanafi"
    assert data["times"]["2024-03-20"]["asr"].endswith("pm")


@pytest.mark.parametrize(
    "extra",
    [
        {"date": "2024-13-01"},
        {"highLats": "Sometimes"},
        {"format": "iso"},
        {"lat": 95},
    ],
)
def test_bad_requests(client, extra):
    rv = client.get("/api/timesForGPS", params={**MECCA_QUERY, **extra})
    assert rv.status_code == 400
