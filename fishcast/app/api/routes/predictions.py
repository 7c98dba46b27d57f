# fishcast/app/api/routes/predictions.py
import logging
import random
from datetime import datetime, timedelta, timezone
from typing import List

from fastapi import APIRouter, Depends, Query

from fishcast.app.api.dependencies import get_condition_store, get_prediction_store, get_rng
from fishcast.app.api.schemas import PredictionOut
from fishcast.app.core.config import DEFAULT_PREDICTION_HOURS
from fishcast.app.services.conditions.predictions import PredictionGenerator
from fishcast.app.services.conditions.sampler import EnvironmentalSampler
from fishcast.app.stores.condition_store import ConditionStore
from fishcast.app.stores.prediction_store import PredictionStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/predictions", tags=["predictions"])

ALL_SPECIES = "all"


@router.get("", response_model=List[PredictionOut])
def list_predictions(
    species: str = Query(ALL_SPECIES),
    hours: float = Query(DEFAULT_PREDICTION_HOURS, gt=0, le=24 * 365),
    predictions: PredictionStore = Depends(get_prediction_store),
    conditions: ConditionStore = Depends(get_condition_store),
    rng: random.Random = Depends(get_rng),
):
    """
    Stored predictions from the last `hours` hours, best first.

    A fresh batch covering every location and species is generated and stored in one
    transaction only when nothing at all was stored inside the window. A species the
    stored batch does not cover gets an empty list.
    """
    species_filter = None if species == ALL_SPECIES else species
    since = datetime.now(timezone.utc) - timedelta(hours=hours)

    stored = predictions.recent(since, species_filter)
    if stored or predictions.exists_since(since):
        return stored

    batch = PredictionGenerator(EnvironmentalSampler(conditions, rng)).generate()
    records = predictions.add_batch(batch)
    logger.info("Stored a fresh batch of %d predictions", len(records))

    if species_filter is None:
        return records
    return [record for record in records if record.species == species_filter]
