"""
Sleep log database model.
"""

import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class SleepLog(SQLModel, table=True):
    """Nightly sleep entry, one per user per day."""
    __tablename__ = "sleep_logs"
    __table_args__ = (
        UniqueConstraint("user_id", "date", name="uq_sleep_user_date"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    date: datetime.date = Field(nullable=False, index=True)

    bedtime: Optional[datetime.time] = Field(default=None)
    wake_time: Optional[datetime.time] = Field(default=None)
    hours_slept: Optional[float] = Field(default=None)
    quality_rating: Optional[int] = Field(default=None)
    notes: Optional[str] = Field(default=None, max_length=1000)

    logged_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
