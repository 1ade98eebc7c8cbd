"""
Workout API schemas.

Strength workouts (exercises with sets), set edits and cardio sessions.
"""

import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

WorkoutType = Literal["strength", "cardio"]
CardioType = Literal["running", "cycling", "rowing", "swimming", "walking", "elliptical", "other"]


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------

class ExerciseSetCreate(BaseModel):
    reps: int = Field(..., ge=0, le=1000)
    weight_kg: float = Field(0.0, ge=0, le=1000)
    rest_seconds: Optional[int] = Field(None, ge=0, le=3600)
    rpe: Optional[float] = Field(None, ge=1, le=10)


class ExerciseCreate(BaseModel):
    exercise_name: str = Field(..., min_length=1, max_length=255)
    muscle_group: Optional[str] = Field(None, max_length=50)
    target_sets: int = Field(3, ge=1, le=50)
    sets: list[ExerciseSetCreate] = Field(default_factory=list)


class WorkoutCreate(BaseModel):
    date: Optional[datetime.date] = Field(None, description="Defaults to today")
    workout_type: WorkoutType = "strength"
    title: str = Field("Workout", min_length=1, max_length=255)
    duration_minutes: Optional[int] = Field(None, ge=0, le=1440)
    notes: Optional[str] = Field(None, max_length=1000)
    exercises: list[ExerciseCreate] = Field(default_factory=list)


class ExerciseSetUpdate(BaseModel):
    """Partial set edit. At least one field must be provided."""
    reps: Optional[int] = Field(None, ge=0, le=1000)
    weight_kg: Optional[float] = Field(None, ge=0, le=1000)
    rpe: Optional[float] = Field(None, ge=1, le=10)


class CardioSessionCreate(BaseModel):
    date: Optional[datetime.date] = Field(None, description="Defaults to today")
    cardio_type: CardioType
    duration_minutes: int = Field(..., gt=0, le=1440)
    distance_km: Optional[float] = Field(None, ge=0, le=1000)
    avg_heart_rate: Optional[int] = Field(None, ge=20, le=250)
    calories_burned: Optional[int] = Field(None, ge=0, le=20000)
    notes: Optional[str] = Field(None, max_length=1000)


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------

class ExerciseSetResponse(BaseModel):
    id: int
    exercise_id: int
    set_number: int
    reps: int
    weight_kg: float
    rest_seconds: Optional[int] = None
    rpe: Optional[float] = None

    class Config:
        from_attributes = True


class ExerciseResponse(BaseModel):
    id: int
    exercise_name: str
    muscle_group: Optional[str] = None
    target_sets: int
    sets_completed: int
    weight_kg: Optional[float] = None
    notes: Optional[str] = None
    sets: list[ExerciseSetResponse] = Field(default_factory=list)


class WorkoutSummary(BaseModel):
    """Workout row as listed in history."""
    id: int
    date: datetime.date
    workout_type: str
    title: str
    duration_minutes: Optional[int] = None
    total_volume: Optional[float] = None
    notes: Optional[str] = None
    started_at: Optional[datetime.datetime] = None
    completed_at: Optional[datetime.datetime] = None
    exercise_count: int = 0


class WorkoutDetail(WorkoutSummary):
    exercises: list[ExerciseResponse]


class WorkoutListResponse(BaseModel):
    workouts: list[WorkoutSummary]


class WorkoutCreatedResponse(BaseModel):
    success: bool = True
    workout_id: int


class SetUpdatedResponse(BaseModel):
    success: bool = True
    set: ExerciseSetResponse


class CardioSessionResponse(BaseModel):
    id: int
    date: datetime.date
    cardio_type: str
    duration_minutes: int
    distance_km: Optional[float] = None
    avg_heart_rate: Optional[int] = None
    calories_burned: Optional[int] = None
    notes: Optional[str] = None
    logged_at: datetime.datetime

    class Config:
        from_attributes = True


class CardioListResponse(BaseModel):
    sessions: list[CardioSessionResponse]


class CardioCreatedResponse(BaseModel):
    success: bool = True
    session_id: int
