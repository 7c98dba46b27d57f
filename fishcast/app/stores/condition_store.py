# fishcast/app/stores/condition_store.py
from datetime import datetime
from typing import Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from fishcast.app.models.environmental_data import EnvironmentalData
from fishcast.app.services.conditions.types import EnvironmentalReading


class ConditionStore:
    """Stored environmental readings."""

    def __init__(self, db: Session):
        self.db = db

    def latest_near(self, lat: float, lng: float, box: float) -> Optional[EnvironmentalData]:
        """Freshest reading strictly within ±box degrees of the point."""
        stmt = (
            select(EnvironmentalData)
            .where(EnvironmentalData.latitude > lat - box, EnvironmentalData.latitude < lat + box)
            .where(EnvironmentalData.longitude > lng - box, EnvironmentalData.longitude < lng + box)
            .order_by(EnvironmentalData.timestamp.desc(), EnvironmentalData.id.desc())
            .limit(1)
        )
        return self.db.scalars(stmt).first()

    def recent_in_bounds(
        self, lat_min: float, lat_max: float, lng_min: float, lng_max: float, since: datetime
    ) -> List[EnvironmentalData]:
        stmt = (
            select(EnvironmentalData)
            .where(EnvironmentalData.latitude.between(lat_min, lat_max))
            .where(EnvironmentalData.longitude.between(lng_min, lng_max))
            .where(EnvironmentalData.timestamp > since)
            .order_by(EnvironmentalData.timestamp.desc(), EnvironmentalData.id.desc())
        )
        return list(self.db.scalars(stmt))

    def add_many(self, readings: Iterable[EnvironmentalReading]) -> int:
        records = [EnvironmentalData(**reading.model_dump()) for reading in readings]
        if records:
            self.db.add_all(records)
            self.db.commit()
        return len(records)
