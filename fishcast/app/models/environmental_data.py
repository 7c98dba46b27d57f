# fishcast/app/models/environmental_data.py
from sqlalchemy import Column, Integer, Float
from sqlalchemy.sql import func

from fishcast.app.db.session import Base
from fishcast.app.db.types import UtcDateTime

class EnvironmentalData(Base):
    __tablename__ = "environmental_data"

    id = Column(Integer, primary_key=True, index=True)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)

    # When the conditions were observed (or synthesized by the refresh job)
    timestamp = Column(UtcDateTime, nullable=False, index=True)

    sea_temperature = Column(Float, nullable=False) # °C
    current_speed = Column(Float, nullable=False) # m/s
    current_direction = Column(Integer, nullable=False) # degrees, [0, 360)
    chlorophyll = Column(Float, nullable=False) # mg/m³
    wind_speed = Column(Float, nullable=False) # knots
    wind_direction = Column(Integer, nullable=False) # degrees
    wave_height = Column(Float, nullable=False) # meters

    # When this record was inserted into the DB
    created_at = Column(UtcDateTime, server_default=func.now())

    def __repr__(self):
        return (
            f"<EnvironmentalData(id={self.id}, lat={self.latitude}, lng={self.longitude}, "
            f"sst={self.sea_temperature}°C, time={self.timestamp})>"
        )
