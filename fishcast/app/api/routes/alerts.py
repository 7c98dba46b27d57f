# fishcast/app/api/routes/alerts.py
import random
from typing import List

from fastapi import APIRouter, Depends

from fishcast.app.api.dependencies import get_rng
from fishcast.app.services.conditions.alerts import AlertGenerator
from fishcast.app.services.conditions.types import Alert

router = APIRouter(prefix="/alerts", tags=["alerts"])


@router.get("", response_model=List[Alert])
def current_alerts(rng: random.Random = Depends(get_rng)):
    return AlertGenerator(rng).generate()
