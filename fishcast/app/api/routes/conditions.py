# fishcast/app/api/routes/conditions.py
# Current and gridded environmental conditions.
import math
import random
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from fishcast.app.api.dependencies import get_condition_store, get_rng
from fishcast.app.api.schemas import ConditionsResponse
from fishcast.app.core.config import DEFAULT_COORDS, MAX_GRID_CELLS
from fishcast.app.services.conditions import scorer
from fishcast.app.services.conditions.sampler import EnvironmentalSampler, grid_cell_count
from fishcast.app.services.conditions.types import EnvironmentalReading
from fishcast.app.stores.condition_store import ConditionStore

router = APIRouter(prefix="/conditions", tags=["conditions"])


def parse_bounds(bounds: Optional[str]):
    """'lat1,lng1,lat2,lng2' -> four floats. Raises HTTP 400 when missing or malformed."""
    if not bounds:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Bounds parameter required")
    try:
        values = [float(part) for part in bounds.split(",")]
    except ValueError:
        values = []
    if len(values) != 4 or not all(math.isfinite(v) for v in values):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Bounds must be four numbers: lat1,lng1,lat2,lng2",
        )
    if grid_cell_count(*values) > MAX_GRID_CELLS:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Bounding box too large")
    return values


@router.get("/current", response_model=ConditionsResponse)
def current_conditions(
    lat: float = Query(DEFAULT_COORDS["lat"], ge=-90, le=90),
    lng: float = Query(DEFAULT_COORDS["lng"], ge=-180, le=180),
    store: ConditionStore = Depends(get_condition_store),
    rng: random.Random = Depends(get_rng),
):
    reading = EnvironmentalSampler(store, rng).sample(lat, lng)
    return ConditionsResponse(
        **reading.model_dump(),
        favorability=scorer.score(reading),
        last_updated=reading.timestamp,
    )


@router.get("/grid", response_model=List[EnvironmentalReading])
def conditions_grid(
    bounds: Optional[str] = Query(None, description="lat1,lng1,lat2,lng2"),
    store: ConditionStore = Depends(get_condition_store),
    rng: random.Random = Depends(get_rng),
):
    lat1, lng1, lat2, lng2 = parse_bounds(bounds)
    return EnvironmentalSampler(store, rng).sample_grid(lat1, lng1, lat2, lng2)
