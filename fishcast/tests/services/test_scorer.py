# fishcast/tests/services/test_scorer.py
import random
from datetime import datetime, timezone

import pytest

from fishcast.app.services.conditions.scorer import rating_for, score
from fishcast.app.services.conditions.sampler import EnvironmentalSampler
from fishcast.app.services.conditions.types import EnvironmentalReading

MIDDAY = 12 # Outside both prime-time windows


def make_reading(**overrides):
    values = {
        "latitude": -34.42,
        "longitude": 173.05,
        "timestamp": datetime(2026, 1, 15, 0, 0, tzinfo=timezone.utc),
        "sea_temperature": 22,
        "current_speed": 0.8,
        "current_direction": 90,
        "chlorophyll": 0.2,
        "wind_speed": 10,
        "wind_direction": 180,
        "wave_height": 1,
    }
    values.update(overrides)
    return EnvironmentalReading(**values)


def test_ideal_conditions_outside_prime_time():
    result = score(make_reading(), hour=MIDDAY)

    assert result.score == 90 # 25 + 20 + 20 + 15 + 10
    assert result.rating == "excellent"
    assert result.factors == {
        "temperature": "optimal",
        "current": "optimal",
        "chlorophyll": "optimal",
        "wind": "optimal",
        "waves": "optimal",
    }


def test_prime_time_bonus_is_clamped_to_100():
    result = score(make_reading(), hour=6)

    assert result.score == 100
    assert result.factors["time"] == "prime_time"


def test_good_ranges_score_partial_points():
    reading = make_reading(sea_temperature=19, current_speed=0.4, chlorophyll=0.07, wind_speed=18, wave_height=2.5)
    result = score(reading, hour=MIDDAY)

    assert result.score == 15 + 10 + 10 + 8 + 5
    assert result.rating == "fair"
    assert set(result.factors.values()) == {"good"}


def test_everything_out_of_range_is_poor():
    reading = make_reading(sea_temperature=30, current_speed=0.1, chlorophyll=0.01, wind_speed=30, wave_height=4)
    result = score(reading, hour=MIDDAY)

    assert result.score == 0
    assert result.rating == "poor"
    assert "time" not in result.factors
    assert set(result.factors.values()) == {"poor"}


@pytest.mark.parametrize("field,value,factor,label", [
    ("sea_temperature", 20, "temperature", "optimal"),
    ("sea_temperature", 24, "temperature", "optimal"),
    ("sea_temperature", 18, "temperature", "good"),
    ("sea_temperature", 26, "temperature", "good"),
    ("sea_temperature", 26.1, "temperature", "poor"),
    ("current_speed", 1.2, "current", "optimal"),
    ("current_speed", 0.3, "current", "good"),
    ("current_speed", 1.6, "current", "poor"),
    ("chlorophyll", 0.05, "chlorophyll", "good"),
    ("chlorophyll", 0.61, "chlorophyll", "poor"),
    ("wind_speed", 15, "wind", "optimal"),
    ("wind_speed", 20, "wind", "good"),
    ("wind_speed", 20.5, "wind", "poor"),
    ("wave_height", 2, "waves", "optimal"),
    ("wave_height", 3, "waves", "good"),
    ("wave_height", 3.5, "waves", "poor"),
])
def test_range_boundaries_are_inclusive(field, value, factor, label):
    result = score(make_reading(**{field: value}), hour=MIDDAY)
    assert result.factors[factor] == label


@pytest.mark.parametrize("hour,prime", [
    (4, False), (5, True), (8, True), (9, False), (16, False), (17, True), (19, True), (20, False),
])
def test_prime_time_windows(hour, prime):
    result = score(make_reading(), hour=hour)
    assert ("time" in result.factors) is prime


@pytest.mark.parametrize("value,rating", [
    (100, "excellent"), (80, "excellent"), (79, "good"), (60, "good"),
    (59, "fair"), (40, "fair"), (39, "poor"), (0, "poor"),
])
def test_rating_thresholds(value, rating):
    assert rating_for(value) == rating


def test_simulated_readings_always_score_in_range():
    sampler = EnvironmentalSampler(rng=random.Random(7))
    for hour in (3, 6, 12, 18):
        for _ in range(50):
            result = score(sampler.synthesize(-34.3, 173.6), hour=hour)
            assert 0 <= result.score <= 100
            assert result.rating == rating_for(result.score)


def test_uses_current_local_hour_by_default(monkeypatch):
    monkeypatch.setattr("fishcast.app.services.conditions.scorer.current_local_hour", lambda: 18)
    assert score(make_reading()).factors.get("time") == "prime_time"
