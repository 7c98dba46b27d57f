# fishcast/app/stores/prediction_store.py
from datetime import datetime
from typing import Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from fishcast.app.models.prediction import Prediction
from fishcast.app.services.conditions.types import PredictionResult


class PredictionStore:
    def __init__(self, db: Session):
        self.db = db

    def recent(self, since: datetime, species: Optional[str] = None) -> List[Prediction]:
        """Predictions newer than `since`, best first."""
        stmt = select(Prediction).where(Prediction.timestamp > since)
        if species is not None:
            stmt = stmt.where(Prediction.species == species)
        stmt = stmt.order_by(Prediction.probability.desc(), Prediction.timestamp.desc(), Prediction.id)
        return list(self.db.scalars(stmt))

    def exists_since(self, since: datetime) -> bool:
        """Whether any prediction, of any species, is newer than `since`."""
        stmt = select(Prediction.id).where(Prediction.timestamp > since).limit(1)
        return self.db.scalar(stmt) is not None

    def add_batch(self, predictions: Iterable[PredictionResult]) -> List[Prediction]:
        """Stores a whole generation batch in a single transaction."""
        records = [
            Prediction(
                location_name=p.location_name,
                latitude=p.latitude,
                longitude=p.longitude,
                timestamp=p.timestamp,
                species=p.species,
                probability=p.probability,
                conditions=p.conditions.model_dump(mode="json"),
                factors=dict(p.factors),
            )
            for p in predictions
        ]
        self.db.add_all(records)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        return records
