# fishcast/tests/api/test_conditions_api.py
from datetime import datetime, timedelta, timezone

from fishcast.app.models.environmental_data import EnvironmentalData


def add_reading(db_session, lat, lng, age=timedelta(0), **overrides):
    values = dict(
        latitude=lat, longitude=lng, timestamp=datetime.now(timezone.utc) - age,
        sea_temperature=22.0, current_speed=0.8, current_direction=90, chlorophyll=0.2,
        wind_speed=10.0, wind_direction=180, wave_height=1.0,
    )
    values.update(overrides)
    db_session.add(EnvironmentalData(**values))
    db_session.commit()


def test_current_conditions_default_to_reference_point(client):
    response = client.get("/api/conditions/current")

    assert response.status_code == 200
    data = response.json()
    assert data["latitude"] == -34.25
    assert data["longitude"] == 173.25
    assert 18 <= data["sea_temperature"] <= 26
    assert 0 <= data["favorability"]["score"] <= 100
    assert data["favorability"]["rating"] in ("poor", "fair", "good", "excellent")
    assert data["last_updated"] == data["timestamp"]


def test_current_conditions_use_nearby_stored_reading(client, db_session):
    add_reading(db_session, -34.41, 173.04, age=timedelta(hours=2), sea_temperature=19.0)
    add_reading(db_session, -34.43, 173.06, age=timedelta(minutes=5))
    add_reading(db_session, -34.70, 173.05, sea_temperature=25.5) # Outside the ±0.1° box

    response = client.get("/api/conditions/current", params={"lat": -34.42, "lng": 173.05})

    data = response.json()
    assert data["latitude"] == -34.43 # Freshest one wins
    assert data["sea_temperature"] == 22.0
    assert data["favorability"]["score"] >= 90
    assert data["favorability"]["factors"]["temperature"] == "optimal"


def test_current_conditions_reject_out_of_range_latitude(client):
    assert client.get("/api/conditions/current", params={"lat": 123}).status_code == 400


def test_grid_requires_bounds(client):
    response = client.get("/api/conditions/grid")

    assert response.status_code == 400
    assert response.json()["detail"] == "Bounds parameter required"


def test_grid_rejects_malformed_bounds(client):
    assert client.get("/api/conditions/grid", params={"bounds": "1,2,3"}).status_code == 400
    assert client.get("/api/conditions/grid", params={"bounds": "a,b,c,d"}).status_code == 400
    assert client.get("/api/conditions/grid", params={"bounds": "0,0,inf,1"}).status_code == 400


def test_grid_rejects_oversized_box(client):
    response = client.get("/api/conditions/grid", params={"bounds": "-60,160,-20,180"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Bounding box too large"


def test_grid_simulates_cells_when_nothing_recent(client, db_session):
    add_reading(db_session, -34.29, 173.61, age=timedelta(hours=7)) # Too old to count

    response = client.get("/api/conditions/grid", params={"bounds": "-34.28,173.62,-34.30,173.60"})

    assert response.status_code == 200
    cells = response.json()
    assert len(cells) == 4
    assert {(c["latitude"], c["longitude"]) for c in cells} == {
        (-34.30, 173.60), (-34.30, 173.62), (-34.28, 173.60), (-34.28, 173.62),
    }


def test_grid_returns_recent_stored_readings(client, db_session):
    add_reading(db_session, -34.29, 173.61, age=timedelta(hours=1))
    add_reading(db_session, -35.00, 173.61) # Outside the box

    response = client.get("/api/conditions/grid", params={"bounds": "-34.30,173.60,-34.28,173.62"})

    cells = response.json()
    assert len(cells) == 1
    assert cells[0]["latitude"] == -34.29


def test_stored_reading_times_carry_utc_offset(client, db_session):
    add_reading(db_session, -34.42, 173.05, age=timedelta(minutes=10))

    data = client.get("/api/conditions/current", params={"lat": -34.42, "lng": 173.05}).json()

    assert data["latitude"] == -34.42
    assert data["last_updated"].endswith(("Z", "+00:00"))
    assert data["timestamp"] == data["last_updated"]
