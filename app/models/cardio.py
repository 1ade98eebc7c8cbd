"""
Cardio session database model.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class CardioSession(SQLModel, table=True):
    """A logged cardio session (running, cycling, rowing, ...)."""
    __tablename__ = "cardio_sessions"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    date: datetime.date = Field(nullable=False, index=True)

    cardio_type: str = Field(nullable=False, max_length=20)
    duration_minutes: int = Field(nullable=False)
    distance_km: Optional[float] = Field(default=None)
    avg_heart_rate: Optional[int] = Field(default=None)
    calories_burned: Optional[int] = Field(default=None)
    notes: Optional[str] = Field(default=None, max_length=1000)

    logged_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
