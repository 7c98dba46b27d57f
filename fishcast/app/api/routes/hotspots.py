# fishcast/app/api/routes/hotspots.py
# Fishing hotspots annotated with recent catch activity.
from datetime import datetime, timedelta, timezone
from typing import List

from fastapi import APIRouter, Depends

from fishcast.app.api.dependencies import get_hotspot_store
from fishcast.app.api.schemas import HotspotOut
from fishcast.app.core.config import HOTSPOT_BOX_DEGREES, HOTSPOT_RECENT_DAYS
from fishcast.app.stores.hotspot_store import HotspotStore

router = APIRouter(prefix="/hotspots", tags=["hotspots"])


@router.get("", response_model=List[HotspotOut])
def list_hotspots(hotspots: HotspotStore = Depends(get_hotspot_store)):
    since = datetime.now(timezone.utc) - timedelta(days=HOTSPOT_RECENT_DAYS)
    rows = hotspots.list_with_recent_activity(since, HOTSPOT_BOX_DEGREES)
    return [
        HotspotOut(
            id=hotspot.id,
            name=hotspot.name,
            latitude=hotspot.latitude,
            longitude=hotspot.longitude,
            description=hotspot.description,
            species_common=hotspot.species_common or [],
            best_months=hotspot.best_months or [],
            avg_success_rate=hotspot.avg_success_rate,
            recent_catches=recent_catches,
            avg_weight=avg_weight,
        )
        for hotspot, recent_catches, avg_weight in rows
    ]
