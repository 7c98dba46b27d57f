# fishcast/app/services/conditions/sampler.py
import math
import random
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from fishcast.app.core.config import (
    GRID_FRESHNESS_HOURS,
    GRID_RESOLUTION,
    NEARBY_BOX_DEGREES,
    SIMULATION_RANGES,
)
from fishcast.app.services.conditions.types import EnvironmentalReading

# Absorbs floating-point drift so an upper bound that is a whole number of steps away is included
STEP_TOLERANCE = 1e-9


def axis_length(low: float, high: float, step: float) -> int:
    return int(math.floor((high - low) / step + STEP_TOLERANCE)) + 1


def grid_cell_count(lat1: float, lng1: float, lat2: float, lng2: float, step: float = GRID_RESOLUTION) -> int:
    return axis_length(min(lat1, lat2), max(lat1, lat2), step) * axis_length(min(lng1, lng2), max(lng1, lng2), step)


def grid_axis(low: float, high: float, step: float) -> List[float]:
    """Evenly spaced values from low up to and including high."""
    count = axis_length(low, high, step)
    return [round(low + i * step, 6) for i in range(count)]


class EnvironmentalSampler:
    """
    Produces conditions readings for a point or a bounding box.

    Stored readings are preferred; when none are available a reading is synthesized by
    drawing each field uniformly from its realistic range. Synthesized readings are
    never persisted here.
    """

    def __init__(self, store=None, rng: Optional[random.Random] = None):
        self.store = store # ConditionStore, or None to always simulate
        self.rng = rng or random.Random()

    def synthesize(self, lat: float, lng: float, now: Optional[datetime] = None) -> EnvironmentalReading:
        now = now or datetime.now(timezone.utc)
        values = {field: self.rng.uniform(low, high) for field, (low, high) in SIMULATION_RANGES.items()}
        return EnvironmentalReading(
            latitude=float(lat),
            longitude=float(lng),
            timestamp=now,
            current_direction=self.rng.randrange(360),
            wind_direction=self.rng.randrange(360),
            **values,
        )

    def sample(self, lat: float, lng: float) -> EnvironmentalReading:
        if self.store is not None:
            stored = self.store.latest_near(lat, lng, NEARBY_BOX_DEGREES)
            if stored is not None:
                return EnvironmentalReading.model_validate(stored)
        return self.synthesize(lat, lng)

    def sample_grid(
        self, lat1: float, lng1: float, lat2: float, lng2: float, resolution: float = GRID_RESOLUTION
    ) -> List[EnvironmentalReading]:
        """
        Readings covering the box spanned by the two corners.

        Returns stored readings from the last GRID_FRESHNESS_HOURS when any exist,
        otherwise one simulated reading per grid cell, latitude-major.
        """
        lat_min, lat_max = sorted((lat1, lat2))
        lng_min, lng_max = sorted((lng1, lng2))
        now = datetime.now(timezone.utc)

        if self.store is not None:
            since = now - timedelta(hours=GRID_FRESHNESS_HOURS)
            stored = self.store.recent_in_bounds(lat_min, lat_max, lng_min, lng_max, since)
            if stored:
                return [EnvironmentalReading.model_validate(row) for row in stored]

        return [
            self.synthesize(lat, lng, now)
            for lat in grid_axis(lat_min, lat_max, resolution)
            for lng in grid_axis(lng_min, lng_max, resolution)
        ]
