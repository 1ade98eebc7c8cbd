"""
Water intake database model.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class WaterLog(SQLModel, table=True):
    """A single water intake entry."""
    __tablename__ = "water_logs"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    date: datetime.date = Field(nullable=False, index=True)
    amount_ml: int = Field(nullable=False)

    logged_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
