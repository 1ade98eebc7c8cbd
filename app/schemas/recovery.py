"""
Recovery API schemas.

``RecoveryInput`` is the calculator's input record; it carries no range
constraints because the calculator clamps instead of rejecting.
The request schema used by the endpoint does validate ranges.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field


class RecoveryInput(BaseModel):
    """Inputs of the recovery score calculator."""

    sleep_hours: Optional[float] = None
    sleep_quality: Optional[int] = None
    hrv_score: Optional[int] = None
    resting_hr: Optional[int] = None
    muscle_soreness: int = 3
    energy_level: int = 3


class RecoveryRecommendation(BaseModel):
    """Qualitative band for a recovery score."""

    status: str = Field(..., description="One of: excellent, good, moderate, low")
    color: str
    message: str


# Request schemas
class RecoveryCreate(BaseModel):
    """Subjective and cardiovascular inputs submitted from the recovery form."""

    date: Optional[datetime.date] = Field(None, description="Defaults to today")
    muscle_soreness: int = Field(3, ge=1, le=5, description="1 = none, 5 = very sore")
    energy_level: int = Field(3, ge=1, le=5, description="1 = very low, 5 = very high")
    hrv_score: Optional[int] = Field(None, ge=0, le=300, description="HRV (ms)")
    resting_hr: Optional[int] = Field(None, ge=20, le=200, description="Resting heart rate (bpm)")


# Response schemas
class RecoveryScoreResponse(BaseModel):
    id: int
    user_id: int
    date: datetime.date
    recovery_score: int
    sleep_score: Optional[int] = None
    hrv_score: Optional[int] = None
    muscle_soreness: int
    energy_level: int
    calculated_at: datetime.datetime

    class Config:
        from_attributes = True


class RecoveryHistoryItem(BaseModel):
    date: datetime.date
    recovery_score: int
    sleep_score: Optional[int] = None
    energy_level: int
    muscle_soreness: int

    class Config:
        from_attributes = True


class RecoverySaveResponse(BaseModel):
    success: bool = True
    id: int
    recovery_score: int
    recommendation: RecoveryRecommendation
