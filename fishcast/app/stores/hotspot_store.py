# fishcast/app/stores/hotspot_store.py
import logging
from datetime import datetime
from typing import Iterable

from sqlalchemy import and_, func, select
from sqlalchemy.orm import Session

from fishcast.app.models.catch_log import CatchLog
from fishcast.app.models.hotspot import Hotspot

logger = logging.getLogger(__name__)


class HotspotStore:
    def __init__(self, db: Session):
        self.db = db

    def seed(self, hotspots: Iterable[dict]) -> int:
        """Inserts the hotspots whose names are not stored yet. Returns how many were added."""
        existing = set(self.db.scalars(select(Hotspot.name)))
        new_records = [Hotspot(**data) for data in hotspots if data["name"] not in existing]
        if new_records:
            self.db.add_all(new_records)
            self.db.commit()
            logger.info("Seeded %d hotspots", len(new_records))
        return len(new_records)

    def list_with_recent_activity(self, since: datetime, box: float):
        """
        (Hotspot, recent_catches, avg_weight) rows, best historical success rate first.
        A catch counts towards a hotspot when it lies within ±box degrees of it and was
        made after `since`.
        """
        nearby_recent = and_(
            func.abs(CatchLog.latitude - Hotspot.latitude) < box,
            func.abs(CatchLog.longitude - Hotspot.longitude) < box,
            CatchLog.time_caught > since,
        )
        stmt = (
            select(
                Hotspot,
                func.count(CatchLog.id).label("recent_catches"),
                func.avg(CatchLog.weight).label("avg_weight"),
            )
            .outerjoin(CatchLog, nearby_recent)
            .group_by(Hotspot.id)
            .order_by(Hotspot.avg_success_rate.desc(), Hotspot.id)
        )
        return self.db.execute(stmt).all()
