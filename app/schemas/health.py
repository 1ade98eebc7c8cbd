"""
Health tracking API schemas.

Body metrics, sleep and heart rate request/response models.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.recovery import RecoveryRecommendation, RecoveryHistoryItem, RecoveryScoreResponse


# ---------------------------------------------------------------------------
# Body metrics
# ---------------------------------------------------------------------------

class BodyMetricsCreate(BaseModel):
    """Schema for logging body measurements."""

    date: Optional[datetime.date] = Field(None, description="Defaults to today")
    weight_kg: Optional[float] = Field(None, gt=0, le=500)
    body_fat_percent: Optional[float] = Field(None, ge=0, le=100)
    chest_cm: Optional[float] = Field(None, gt=0, le=300)
    waist_cm: Optional[float] = Field(None, gt=0, le=300)
    hips_cm: Optional[float] = Field(None, gt=0, le=300)
    left_arm_cm: Optional[float] = Field(None, gt=0, le=100)
    right_arm_cm: Optional[float] = Field(None, gt=0, le=100)
    left_thigh_cm: Optional[float] = Field(None, gt=0, le=200)
    right_thigh_cm: Optional[float] = Field(None, gt=0, le=200)
    notes: Optional[str] = Field(None, max_length=1000)


class BodyMetricsResponse(BaseModel):
    id: int
    date: datetime.date
    weight_kg: Optional[float] = None
    body_fat_percent: Optional[float] = None
    chest_cm: Optional[float] = None
    waist_cm: Optional[float] = None
    hips_cm: Optional[float] = None
    left_arm_cm: Optional[float] = None
    right_arm_cm: Optional[float] = None
    left_thigh_cm: Optional[float] = None
    right_thigh_cm: Optional[float] = None
    notes: Optional[str] = None
    logged_at: datetime.datetime

    class Config:
        from_attributes = True


class BodyMetricsChange(BaseModel):
    """Difference between the latest and the previous entry."""
    weight: Optional[float] = None
    body_fat: Optional[float] = None


class BodyMetricsOverview(BaseModel):
    latest: Optional[BodyMetricsResponse] = None
    history: list[BodyMetricsResponse]
    changes: Optional[BodyMetricsChange] = None


# ---------------------------------------------------------------------------
# Sleep
# ---------------------------------------------------------------------------

class SleepLogCreate(BaseModel):
    """Schema for logging a night of sleep.

    ``hours_slept`` is derived from bedtime and wake time when omitted.
    """

    date: Optional[datetime.date] = Field(None, description="Defaults to today")
    bedtime: Optional[datetime.time] = Field(None, description="Time of going to bed (HH:MM)")
    wake_time: Optional[datetime.time] = Field(None, description="Time of waking up (HH:MM)")
    hours_slept: Optional[float] = Field(None, ge=0, le=24)
    quality_rating: Optional[int] = Field(None, ge=1, le=5)
    notes: Optional[str] = Field(None, max_length=1000)


class SleepLogResponse(BaseModel):
    id: int
    date: datetime.date
    bedtime: Optional[datetime.time] = None
    wake_time: Optional[datetime.time] = None
    hours_slept: Optional[float] = None
    quality_rating: Optional[int] = None
    notes: Optional[str] = None
    logged_at: datetime.datetime

    class Config:
        from_attributes = True


class SleepStats(BaseModel):
    avg_hours: float = 0.0
    avg_quality: float = 0.0
    total_logs: int = 0


class SleepOverview(BaseModel):
    latest: Optional[SleepLogResponse] = None
    history: list[SleepLogResponse]
    stats: SleepStats


# ---------------------------------------------------------------------------
# Heart rate
# ---------------------------------------------------------------------------

class HeartRateLogCreate(BaseModel):
    date: Optional[datetime.date] = Field(None, description="Defaults to today")
    resting_hr: Optional[int] = Field(None, ge=20, le=200)
    avg_hr: Optional[int] = Field(None, ge=20, le=250)
    max_hr: Optional[int] = Field(None, ge=20, le=250)


class HeartRateLogResponse(BaseModel):
    id: int
    date: datetime.date
    resting_hr: Optional[int] = None
    avg_hr: Optional[int] = None
    max_hr: Optional[int] = None
    measured_at: datetime.datetime

    class Config:
        from_attributes = True


class HeartRateStats(BaseModel):
    avg_resting_hr: Optional[float] = None
    min_resting_hr: Optional[int] = None
    max_resting_hr: Optional[int] = None
    total_logs: int = 0


class HeartRateOverview(BaseModel):
    latest: Optional[HeartRateLogResponse] = None
    history: list[HeartRateLogResponse]
    stats: HeartRateStats


# ---------------------------------------------------------------------------
# Recovery overview
# ---------------------------------------------------------------------------

class RecoveryOverview(BaseModel):
    """Everything the recovery panel shows for one date."""
    date: datetime.date
    recovery: Optional[RecoveryScoreResponse] = None
    recommendation: Optional[RecoveryRecommendation] = None
    sleep: Optional[SleepLogResponse] = None
    heart_rate: Optional[HeartRateLogResponse] = None
    history: list[RecoveryHistoryItem]


class SavedResponse(BaseModel):
    success: bool = True
    id: int
