# fishcast/tests/services/test_sampler.py
import random
from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from fishcast.app.core.config import SIMULATION_RANGES
from fishcast.app.services.conditions.sampler import EnvironmentalSampler, grid_axis, grid_cell_count


def stored_row(**overrides):
    values = dict(
        latitude=-34.41, longitude=173.06, timestamp=datetime(2026, 10, 18, 6, 0, tzinfo=timezone.utc),
        sea_temperature=21.5, current_speed=0.7, current_direction=45, chlorophyll=0.3,
        wind_speed=12.0, wind_direction=270, wave_height=1.4,
    )
    values.update(overrides)
    return SimpleNamespace(**values)


def test_synthesized_fields_stay_within_realistic_ranges():
    sampler = EnvironmentalSampler(rng=random.Random(3))
    for _ in range(200):
        reading = sampler.synthesize(-34.3, 173.6)
        for field, (low, high) in SIMULATION_RANGES.items():
            assert low <= getattr(reading, field) <= high
        assert 0 <= reading.current_direction < 360
        assert 0 <= reading.wind_direction < 360
        assert reading.latitude == -34.3
        assert reading.longitude == 173.6


def test_seeded_samplers_are_reproducible():
    now = datetime(2026, 10, 18, 6, 0, tzinfo=timezone.utc)
    first = EnvironmentalSampler(rng=random.Random(42)).synthesize(-34.3, 173.6, now)
    second = EnvironmentalSampler(rng=random.Random(42)).synthesize(-34.3, 173.6, now)
    assert first == second


def test_sample_prefers_stored_reading():
    store = MagicMock()
    store.latest_near.return_value = stored_row()

    reading = EnvironmentalSampler(store, random.Random(1)).sample(-34.42, 173.05)

    store.latest_near.assert_called_once_with(-34.42, 173.05, 0.1)
    assert reading.sea_temperature == 21.5
    assert reading.wind_direction == 270


def test_sample_simulates_when_nothing_stored():
    store = MagicMock()
    store.latest_near.return_value = None

    reading = EnvironmentalSampler(store, random.Random(1)).sample(-34.42, 173.05)

    assert reading.latitude == -34.42
    assert 18 <= reading.sea_temperature <= 26
    store.add_many.assert_not_called() # Simulated readings are never persisted


def test_grid_cell_count_for_one_step_box():
    readings = EnvironmentalSampler(rng=random.Random(5)).sample_grid(-34.30, 173.60, -34.28, 173.62)

    assert len(readings) == 4
    assert grid_cell_count(-34.30, 173.60, -34.28, 173.62) == 4
    # Latitude is the outer loop
    assert [(r.latitude, r.longitude) for r in readings] == [
        (-34.30, 173.60), (-34.30, 173.62), (-34.28, 173.60), (-34.28, 173.62),
    ]


def test_grid_normalizes_reversed_corners():
    sampler = EnvironmentalSampler(rng=random.Random(5))
    forward = sampler.sample_grid(-34.30, 173.60, -34.20, 173.70)
    backward = sampler.sample_grid(-34.20, 173.70, -34.30, 173.60)

    assert len(forward) == len(backward) == 36
    assert [(r.latitude, r.longitude) for r in forward] == [(r.latitude, r.longitude) for r in backward]


@pytest.mark.parametrize("low,high,expected", [
    (0.0, 0.0, [0.0]),
    (173.60, 173.62, [173.60, 173.62]),
    (-34.30, -34.20, [-34.30, -34.28, -34.26, -34.24, -34.22, -34.20]),
    (0.0, 0.03, [0.0, 0.02]), # Upper bound not on the grid is not overshot
])
def test_grid_axis_includes_upper_bound(low, high, expected):
    assert grid_axis(low, high, 0.02) == pytest.approx(expected)


def test_grid_returns_recent_stored_readings_when_available():
    store = MagicMock()
    store.recent_in_bounds.return_value = [stored_row(), stored_row(latitude=-34.29)]

    readings = EnvironmentalSampler(store).sample_grid(-34.28, 173.0, -34.45, 173.1)

    assert len(readings) == 2
    lat_min, lat_max, lng_min, lng_max, since = store.recent_in_bounds.call_args[0]
    assert (lat_min, lat_max, lng_min, lng_max) == (-34.45, -34.28, 173.0, 173.1)
    assert since.tzinfo is not None
