# fishcast/app/models/catch_log.py
from sqlalchemy import Column, Integer, String, Float, Text, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from fishcast.app.db.session import Base
from fishcast.app.db.types import UtcDateTime

class CatchLog(Base):
    __tablename__ = "catch_logs"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True) # Owning angler

    species = Column(String(100), nullable=False, index=True)
    weight = Column(Float, nullable=False) # kg
    length = Column(Float, nullable=True) # cm
    gear_type = Column(String(100), nullable=False) # e.g. 'trolling', 'live bait'

    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    depth = Column(Float, nullable=True) # meters
    water_temp = Column(Float, nullable=True) # °C

    time_caught = Column(UtcDateTime, nullable=False, index=True) # Stored in UTC
    notes = Column(Text, nullable=True)
    photo_url = Column(String(500), nullable=True)

    created_at = Column(UtcDateTime, server_default=func.now())

    # Many catch logs belong to one angler
    user = relationship("User", back_populates="catches")

    def __repr__(self):
        return (
            f"<CatchLog(id={self.id}, user_id={self.user_id}, species='{self.species}', "
            f"weight={self.weight}, time_caught={self.time_caught})>"
        )
