# fishcast/app/models/hotspot.py
from sqlalchemy import Column, Integer, String, Float, Text, JSON
from sqlalchemy.sql import func

from fishcast.app.db.session import Base
from fishcast.app.db.types import UtcDateTime

class Hotspot(Base):
    __tablename__ = "hotspots" # Static reference data, seeded at startup

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), unique=True, nullable=False)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    description = Column(Text, nullable=True)

    species_common = Column(JSON, nullable=True) # List of species names
    best_months = Column(JSON, nullable=True) # List of month numbers, 1-12
    avg_success_rate = Column(Float, nullable=True) # Historical success rate, percent

    created_at = Column(UtcDateTime, server_default=func.now())

    def __repr__(self):
        return f"<Hotspot(id={self.id}, name='{self.name}', lat={self.latitude}, lng={self.longitude})>"
