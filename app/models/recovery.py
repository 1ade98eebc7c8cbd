"""
Recovery score database model.

One computed recovery score per user per day.
"""

import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class RecoveryScore(SQLModel, table=True):
    """
    Daily recovery score.

    Upserted on ``(user_id, date)``; ``calculated_at`` is refreshed on
    every recompute. The application never deletes these rows.
    """
    __tablename__ = "recovery_scores"
    __table_args__ = (
        UniqueConstraint("user_id", "date", name="uq_recovery_user_date"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    date: datetime.date = Field(nullable=False, index=True)

    recovery_score: int = Field(nullable=False)
    sleep_score: Optional[int] = Field(default=None)
    hrv_score: Optional[int] = Field(default=None)
    muscle_soreness: int = Field(default=3, nullable=False)
    energy_level: int = Field(default=3, nullable=False)

    calculated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
