# fishcast/app/models/prediction.py
from sqlalchemy import Column, Integer, String, Float, JSON
from sqlalchemy.sql import func

from fishcast.app.db.session import Base
from fishcast.app.db.types import UtcDateTime

class Prediction(Base):
    __tablename__ = "predictions"

    id = Column(Integer, primary_key=True, index=True)
    location_name = Column(String(100), nullable=True) # e.g. 'North Cape'
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)

    # Generation time of the batch this row belongs to; drives the freshness window
    timestamp = Column(UtcDateTime, nullable=False, index=True)

    species = Column(String(100), nullable=False, index=True)
    probability = Column(Integer, nullable=False) # 0-100

    conditions = Column(JSON, nullable=True) # The reading the probability was scored from
    factors = Column(JSON, nullable=True) # Per-factor labels from the favorability score

    created_at = Column(UtcDateTime, server_default=func.now())

    def __repr__(self):
        return (
            f"<Prediction(id={self.id}, location='{self.location_name}', species='{self.species}', "
            f"probability={self.probability}, time={self.timestamp})>"
        )
