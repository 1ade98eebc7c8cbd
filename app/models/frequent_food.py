"""
Frequent food database model.

Per-user, per-meal-type aggregate of previously logged foods. Feeds the
quick-add list and is the match corpus of the fallback food parser.
"""

import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class FrequentFood(SQLModel, table=True):
    """
    A food the user has logged before.

    Nutrition values are for one ``unit``. ``use_count`` grows by one on
    every meal save containing the food.
    """
    __tablename__ = "frequent_foods"
    __table_args__ = (
        UniqueConstraint("user_id", "meal_type", "food_name", "unit", name="uq_frequent_food"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    meal_type: str = Field(nullable=False, max_length=20)

    food_name: str = Field(nullable=False, max_length=255)
    unit: str = Field(default="serving", nullable=False, max_length=50)

    calories: float = Field(default=0.0, nullable=False)
    protein_g: float = Field(default=0.0, nullable=False)
    carbs_g: float = Field(default=0.0, nullable=False)
    fats_g: float = Field(default=0.0, nullable=False)

    use_count: int = Field(default=1, nullable=False)
    last_used_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
