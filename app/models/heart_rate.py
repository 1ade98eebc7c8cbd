"""
Heart rate log database model.
"""

import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class HeartRateLog(SQLModel, table=True):
    """Daily heart rate entry, one per user per day."""
    __tablename__ = "heart_rate_logs"
    __table_args__ = (
        UniqueConstraint("user_id", "date", name="uq_heart_rate_user_date"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    date: datetime.date = Field(nullable=False, index=True)

    resting_hr: Optional[int] = Field(default=None)
    avg_hr: Optional[int] = Field(default=None)
    max_hr: Optional[int] = Field(default=None)

    measured_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
