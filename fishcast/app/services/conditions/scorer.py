# fishcast/app/services/conditions/scorer.py
from datetime import datetime
from typing import Optional

import pytz

from fishcast.app.core.config import FISHING_TIMEZONE
from fishcast.app.services.conditions.types import EnvironmentalReading, FavorabilityResult

# (factor name, reading field, optimal range, optimal points, good range, good points)
# Ranges are inclusive; None as a lower bound means "anything up to".
SCORING_TABLE = [
    ("temperature", "sea_temperature", (20, 24), 25, (18, 26), 15),
    ("current", "current_speed", (0.5, 1.2), 20, (0.3, 1.5), 10),
    ("chlorophyll", "chlorophyll", (0.1, 0.4), 20, (0.05, 0.6), 10),
    ("wind", "wind_speed", (None, 15), 15, (None, 20), 8),
    ("waves", "wave_height", (None, 2), 10, (None, 3), 5),
]

PRIME_TIME_HOURS = set(range(5, 9)) | set(range(17, 20)) # dawn 05-08, dusk 17-19
PRIME_TIME_BONUS = 10


def _in_range(value: float, bounds) -> bool:
    low, high = bounds
    if low is not None and value < low:
        return False
    return value <= high


def rating_for(score: int) -> str:
    if score >= 80:
        return "excellent"
    if score >= 60:
        return "good"
    if score >= 40:
        return "fair"
    return "poor"


def current_local_hour() -> int:
    """Wall-clock hour at the fishing grounds."""
    return datetime.now(pytz.timezone(FISHING_TIMEZONE)).hour


def score(reading: EnvironmentalReading, hour: Optional[int] = None) -> FavorabilityResult:
    """
    Scores how favourable a reading is for fishing.

    Each factor contributes its optimal or good points independently, and a dawn/dusk
    bonus is added when `hour` (default: the current local hour) falls in a prime window.
    The sum is clamped to [0, 100].
    """
    total = 0
    factors = {}

    for name, field, optimal, optimal_points, good, good_points in SCORING_TABLE:
        value = getattr(reading, field)
        if _in_range(value, optimal):
            total += optimal_points
            factors[name] = "optimal"
        elif _in_range(value, good):
            total += good_points
            factors[name] = "good"
        else:
            factors[name] = "poor"

    if hour is None:
        hour = current_local_hour()
    if hour in PRIME_TIME_HOURS:
        total += PRIME_TIME_BONUS
        factors["time"] = "prime_time"

    total = min(100, max(0, total))
    return FavorabilityResult(score=total, rating=rating_for(total), factors=factors)
