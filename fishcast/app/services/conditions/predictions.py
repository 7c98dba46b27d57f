# fishcast/app/services/conditions/predictions.py
import logging
from datetime import datetime, timezone
from typing import List, Optional

from fishcast.app.core.config import PREDICTION_LOCATIONS, TARGET_SPECIES
from fishcast.app.services.conditions import scorer
from fishcast.app.services.conditions.sampler import EnvironmentalSampler
from fishcast.app.services.conditions.types import EnvironmentalReading, PredictionResult

logger = logging.getLogger(__name__)

MARLIN_WARM_WATER_C = 22
MARLIN_WARM_WATER_BONUS = 10
TUNA_STRONG_CURRENT_MS = 0.8
TUNA_STRONG_CURRENT_BONUS = 8


def species_adjustment(species: str, reading: EnvironmentalReading) -> int:
    """Extra probability points a species earns from the conditions it prefers."""
    bonus = 0
    if "Marlin" in species and reading.sea_temperature > MARLIN_WARM_WATER_C:
        bonus += MARLIN_WARM_WATER_BONUS
    if "Tuna" in species and reading.current_speed > TUNA_STRONG_CURRENT_MS:
        bonus += TUNA_STRONG_CURRENT_BONUS
    return bonus


class PredictionGenerator:
    """
    Scores every (location, species) pair and ranks the results.

    Pure apart from sampling: nothing is persisted here, callers decide whether a batch
    is stored.
    """

    def __init__(self, sampler: EnvironmentalSampler, locations=None, species=None):
        self.sampler = sampler
        self.locations = locations if locations is not None else PREDICTION_LOCATIONS
        self.species = species if species is not None else TARGET_SPECIES

    def generate(self, hour: Optional[int] = None, now: Optional[datetime] = None) -> List[PredictionResult]:
        now = now or datetime.now(timezone.utc)
        if hour is None:
            hour = scorer.current_local_hour()

        predictions = []
        for location in self.locations:
            for fish in self.species:
                conditions = self.sampler.sample(location["lat"], location["lng"])
                favorability = scorer.score(conditions, hour=hour)

                probability = favorability.score + species_adjustment(fish, conditions)
                probability = round(min(100, max(0, probability)))

                predictions.append(PredictionResult(
                    location_name=location.get("name"),
                    latitude=location["lat"],
                    longitude=location["lng"],
                    timestamp=now,
                    species=fish,
                    probability=probability,
                    conditions=conditions,
                    factors=favorability.factors,
                ))

        # sorted() is stable, so ties keep location/species enumeration order
        predictions = sorted(predictions, key=lambda p: p.probability, reverse=True)
        logger.info("Generated %d predictions across %d locations", len(predictions), len(self.locations))
        return predictions
