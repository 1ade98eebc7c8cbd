"""
Body metrics database model.

Weight, body fat and tape measurements. Several entries per day are
allowed; the most recent one wins when reading a single date.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class BodyMetrics(SQLModel, table=True):
    """A body measurement entry."""
    __tablename__ = "body_metrics"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    date: datetime.date = Field(nullable=False, index=True)

    weight_kg: Optional[float] = Field(default=None)
    body_fat_percent: Optional[float] = Field(default=None)

    # Circumferences
    chest_cm: Optional[float] = Field(default=None)
    waist_cm: Optional[float] = Field(default=None)
    hips_cm: Optional[float] = Field(default=None)
    left_arm_cm: Optional[float] = Field(default=None)
    right_arm_cm: Optional[float] = Field(default=None)
    left_thigh_cm: Optional[float] = Field(default=None)
    right_thigh_cm: Optional[float] = Field(default=None)

    notes: Optional[str] = Field(default=None, max_length=1000)
    logged_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
