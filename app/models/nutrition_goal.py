"""
Nutrition goal database model.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class NutritionGoal(SQLModel, table=True):
    """Daily nutrition targets, one row per user."""
    __tablename__ = "nutrition_goals"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, unique=True, index=True)

    daily_calories: int = Field(nullable=False)
    protein_g: int = Field(nullable=False)
    carbs_g: int = Field(nullable=False)
    fats_g: int = Field(nullable=False)
    water_ml: int = Field(nullable=False)

    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
