# fishcast/app/api/routes/stats.py
from datetime import datetime, timedelta, timezone
from typing import List

from fastapi import APIRouter, Depends, Query

from fishcast.app.api.dependencies import get_catch_store
from fishcast.app.api.schemas import CatchStats
from fishcast.app.stores.catch_store import CatchStore

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("", response_model=List[CatchStats])
def catch_stats(
    days: float = Query(30, gt=0, le=3650),
    catches: CatchStore = Depends(get_catch_store),
):
    """Per species and gear type totals over the trailing `days` days."""
    since = datetime.now(timezone.utc) - timedelta(days=days)
    return catches.stats(since)
