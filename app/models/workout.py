"""
Workout database models.

A strength workout holds exercises, each exercise holds numbered sets.
``total_volume`` (sum of weight x reps over all sets) is denormalised on
the workout and recomputed whenever a set changes.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class Workout(SQLModel, table=True):
    """A logged workout session."""
    __tablename__ = "workouts"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    date: datetime.date = Field(nullable=False, index=True)

    workout_type: str = Field(default="strength", nullable=False, max_length=20)
    title: str = Field(default="Workout", nullable=False, max_length=255)
    duration_minutes: Optional[int] = Field(default=None)
    total_volume: Optional[float] = Field(default=None)
    notes: Optional[str] = Field(default=None, max_length=1000)

    started_at: Optional[datetime.datetime] = Field(default=None)
    completed_at: Optional[datetime.datetime] = Field(default=None)


class Exercise(SQLModel, table=True):
    """An exercise performed within a workout."""
    __tablename__ = "exercises"

    id: Optional[int] = Field(default=None, primary_key=True)
    workout_id: int = Field(foreign_key="workouts.id", nullable=False, index=True)

    exercise_name: str = Field(nullable=False, max_length=255)
    muscle_group: Optional[str] = Field(default=None, max_length=50)
    target_sets: int = Field(default=3, nullable=False)
    sets_completed: int = Field(default=0, nullable=False)
    weight_kg: Optional[float] = Field(default=None)
    notes: Optional[str] = Field(default=None, max_length=1000)


class ExerciseSet(SQLModel, table=True):
    """A single set. ``set_number`` is 1-based and contiguous per exercise."""
    __tablename__ = "exercise_sets"

    id: Optional[int] = Field(default=None, primary_key=True)
    exercise_id: int = Field(foreign_key="exercises.id", nullable=False, index=True)

    set_number: int = Field(nullable=False)
    reps: int = Field(default=0, nullable=False)
    weight_kg: float = Field(default=0.0, nullable=False)
    rest_seconds: Optional[int] = Field(default=None)
    rpe: Optional[float] = Field(default=None)
