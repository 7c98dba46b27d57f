# fishcast/app/stores/catch_store.py
from datetime import datetime
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from fishcast.app.models.catch_log import CatchLog
from fishcast.app.models.user import User


class CatchStore:
    """Catch logs. Records are append-only; there is no update or delete path."""

    def __init__(self, db: Session):
        self.db = db

    def add(self, user_id: int, **fields) -> CatchLog:
        record = CatchLog(user_id=user_id, **fields)
        self.db.add(record)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(record)
        return record

    def list_for_user(self, user_id: int, limit: int, offset: int):
        """(CatchLog, angler_name) rows owned by the user, newest catch first."""
        stmt = (
            select(CatchLog, User.name.label("angler_name"))
            .join(User, CatchLog.user_id == User.id)
            .where(CatchLog.user_id == user_id)
            .order_by(CatchLog.time_caught.desc(), CatchLog.id.desc())
            .limit(limit)
            .offset(offset)
        )
        return self.db.execute(stmt).all()

    def recent_public(self, since: datetime, limit: int, species: Optional[str] = None):
        """(CatchLog, angler_name) rows from every angler caught after `since`."""
        stmt = (
            select(CatchLog, User.name.label("angler_name"))
            .join(User, CatchLog.user_id == User.id)
            .where(CatchLog.time_caught > since)
        )
        if species:
            stmt = stmt.where(CatchLog.species == species)
        stmt = stmt.order_by(CatchLog.time_caught.desc(), CatchLog.id.desc()).limit(limit)
        return self.db.execute(stmt).all()

    def stats(self, since: datetime) -> List[dict]:
        """Per species and gear aggregates over catches made after `since`."""
        total = func.count(CatchLog.id).label("total_catches")
        stmt = (
            select(
                CatchLog.species,
                CatchLog.gear_type,
                total,
                func.avg(CatchLog.weight).label("avg_weight"),
                func.max(CatchLog.weight).label("max_weight"),
                func.count(func.distinct(CatchLog.user_id)).label("unique_anglers"),
            )
            .where(CatchLog.time_caught > since)
            .group_by(CatchLog.species, CatchLog.gear_type)
            .order_by(total.desc(), CatchLog.species, CatchLog.gear_type)
        )
        return [dict(row._mapping) for row in self.db.execute(stmt)]
