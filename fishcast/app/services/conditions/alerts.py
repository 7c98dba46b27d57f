# fishcast/app/services/conditions/alerts.py
import random
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from fishcast.app.services.conditions.types import Alert, AlertLocation


class AlertGenerator:
    """Simulated advisory alerts; each template is included independently."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def generate(self, now: Optional[datetime] = None) -> List[Alert]:
        now = now or datetime.now(timezone.utc)
        alerts = []

        # 70% chance
        if self.rng.random() > 0.3:
            success = round(75 + self.rng.random() * 20)
            alerts.append(Alert(
                id=1,
                type="hotspot",
                priority="high",
                title="Prime Fishing Conditions Detected",
                message=f"Excellent conditions at North Cape - {success}% success probability for marlin",
                location=AlertLocation(lat=-34.42, lng=173.05),
                expires=now + timedelta(hours=6),
            ))

        # 60% chance
        if self.rng.random() > 0.4:
            alerts.append(Alert(
                id=2,
                type="environmental",
                priority="medium",
                title="Temperature Break Detected",
                message="Strong temperature gradient at King Bank - ideal for tuna aggregation",
                location=AlertLocation(lat=-34.15, lng=173.8),
                expires=now + timedelta(hours=4),
            ))

        # 50% chance
        if self.rng.random() > 0.5:
            hours = round(2 + self.rng.random() * 4)
            alerts.append(Alert(
                id=3,
                type="timing",
                priority="medium",
                title="Optimal Fishing Window",
                message=f"Best fishing conditions expected in {hours} hours during dawn period",
                expires=now + timedelta(hours=8),
            ))

        return alerts
