# fishcast/app/api/routes/catches.py
# Catch logging and listings.
import logging
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from fishcast.app.api.dependencies import get_catch_store, get_current_user
from fishcast.app.api.schemas import CatchCreate, CatchCreated, CatchOut, PublicCatchOut
from fishcast.app.models.user import User
from fishcast.app.services.anonymization import anonymize_catch
from fishcast.app.stores.catch_store import CatchStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/catches", tags=["catches"])


@router.post("", response_model=CatchCreated, status_code=status.HTTP_201_CREATED)
def log_catch(
    request: CatchCreate,
    user: User = Depends(get_current_user),
    catches: CatchStore = Depends(get_catch_store),
):
    record = catches.add(user.id, **request.model_dump())
    # Catches are not fed back into the prediction heuristic
    logger.info(
        "Catch %s logged by user %s: %s %.2fkg at (%.3f, %.3f)",
        record.id, user.id, record.species, record.weight, record.latitude, record.longitude,
    )
    return CatchCreated(message="Catch logged successfully", catchId=record.id)


@router.get("", response_model=List[CatchOut])
def my_catches(
    limit: int = Query(50, ge=1, le=500),
    offset: int = Query(0, ge=0),
    user: User = Depends(get_current_user),
    catches: CatchStore = Depends(get_catch_store),
):
    rows = catches.list_for_user(user.id, limit=limit, offset=offset)
    return [
        CatchOut.model_validate({**_columns(catch), "angler_name": angler_name})
        for catch, angler_name in rows
    ]


@router.get("/public", response_model=List[PublicCatchOut])
def public_catches(
    species: Optional[str] = Query(None),
    days: float = Query(7, gt=0, le=3650),
    limit: int = Query(100, ge=1, le=500),
    catches: CatchStore = Depends(get_catch_store),
):
    since = datetime.now(timezone.utc) - timedelta(days=days)
    rows = catches.recent_public(since, limit=limit, species=species)
    return [anonymize_catch(catch, angler_name) for catch, angler_name in rows]


def _columns(record) -> dict:
    return {column.name: getattr(record, column.name) for column in record.__table__.columns}
