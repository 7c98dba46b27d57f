# fishcast/app/api/schemas.py
# Request and response schemas for the HTTP API.
from datetime import datetime, timezone
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from fishcast.app.services.conditions.types import EnvironmentalReading, FavorabilityResult


# ============================================================================
# Auth
# ============================================================================

class RegisterRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)
    name: str = Field(..., min_length=1, max_length=255)


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: str


class AuthResponse(BaseModel):
    message: str
    token: str
    user: UserOut


# ============================================================================
# Conditions & predictions
# ============================================================================

class ConditionsResponse(EnvironmentalReading):
    favorability: FavorabilityResult
    last_updated: datetime


class PredictionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    location_name: Optional[str] = None
    latitude: float
    longitude: float
    timestamp: datetime
    species: str
    probability: int
    conditions: Optional[dict] = None
    factors: Optional[Dict[str, str]] = None


# ============================================================================
# Catches
# ============================================================================

class CatchCreate(BaseModel):
    species: str = Field(..., min_length=1, max_length=100)
    weight: float = Field(..., gt=0) # kg
    length: Optional[float] = Field(None, gt=0) # cm
    gear_type: str = Field(..., min_length=1, max_length=100)
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    depth: Optional[float] = Field(None, ge=0)
    water_temp: Optional[float] = None
    time_caught: datetime
    notes: Optional[str] = None
    photo_url: Optional[str] = Field(None, max_length=500)

    @field_validator("time_caught")
    @classmethod
    def normalize_to_utc(cls, value: datetime) -> datetime:
        # Naive timestamps are taken to be UTC already
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class CatchCreated(BaseModel):
    message: str
    catchId: int


class CatchOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    species: str
    weight: float
    length: Optional[float] = None
    gear_type: str
    latitude: float
    longitude: float
    depth: Optional[float] = None
    water_temp: Optional[float] = None
    time_caught: datetime
    notes: Optional[str] = None
    photo_url: Optional[str] = None
    created_at: Optional[datetime] = None
    angler_name: str


class PublicCatchOut(BaseModel):
    species: str
    weight: float
    length: Optional[float] = None
    gear_type: str
    latitude: float
    longitude: float
    time_caught: datetime
    notes: Optional[str] = None
    angler_name: str


# ============================================================================
# Hotspots & stats
# ============================================================================

class HotspotOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    latitude: float
    longitude: float
    description: Optional[str] = None
    species_common: List[str] = []
    best_months: List[int] = []
    avg_success_rate: Optional[float] = None
    recent_catches: int = 0
    avg_weight: Optional[float] = None


class CatchStats(BaseModel):
    species: str
    gear_type: str
    total_catches: int
    avg_weight: float
    max_weight: float
    unique_anglers: int
