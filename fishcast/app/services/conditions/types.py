# fishcast/app/services/conditions/types.py
from datetime import datetime
from typing import Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Rating = Literal["poor", "fair", "good", "excellent"]
FactorLabel = Literal["optimal", "good", "poor", "prime_time"]


# --- Pydantic Models for the conditions domain ---
# Readings are immutable once created, whether loaded from the DB or simulated.
class EnvironmentalReading(BaseModel):
    model_config = ConfigDict(frozen=True, from_attributes=True)

    latitude: float
    longitude: float
    timestamp: datetime
    sea_temperature: float # °C
    current_speed: float # m/s
    current_direction: int = Field(..., ge=0, lt=360) # degrees
    chlorophyll: float # mg/m³
    wind_speed: float # knots
    wind_direction: int = Field(..., ge=0, lt=360) # degrees
    wave_height: float # meters


class FavorabilityResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int = Field(..., ge=0, le=100)
    rating: Rating
    factors: Dict[str, FactorLabel]


class PredictionResult(BaseModel):
    location_name: Optional[str] = None
    latitude: float
    longitude: float
    timestamp: datetime
    species: str
    probability: int = Field(..., ge=0, le=100)
    conditions: EnvironmentalReading
    factors: Dict[str, FactorLabel]


class AlertLocation(BaseModel):
    lat: float
    lng: float


class Alert(BaseModel):
    id: int
    type: Literal["hotspot", "environmental", "timing"]
    priority: Literal["high", "medium"]
    title: str
    message: str
    location: Optional[AlertLocation] = None
    expires: datetime
