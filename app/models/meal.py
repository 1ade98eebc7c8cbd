"""
Meal and food item database models.

A meal groups the food items eaten together. Food item nutrition is
stored per unit: the item's contribution is ``value * quantity``.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class Meal(SQLModel, table=True):
    """A logged meal."""
    __tablename__ = "meals"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    date: datetime.date = Field(nullable=False, index=True)

    meal_type: str = Field(nullable=False, max_length=20)
    meal_name: Optional[str] = Field(default=None, max_length=255)
    notes: Optional[str] = Field(default=None, max_length=1000)

    logged_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)


class FoodItem(SQLModel, table=True):
    """A food eaten as part of a meal (per-unit nutrition)."""
    __tablename__ = "food_items"

    id: Optional[int] = Field(default=None, primary_key=True)
    meal_id: int = Field(foreign_key="meals.id", ondelete="CASCADE", nullable=False, index=True)

    food_name: str = Field(nullable=False, max_length=255)
    quantity: float = Field(default=1.0, nullable=False)
    unit: str = Field(default="serving", nullable=False, max_length=50)

    calories: float = Field(default=0.0, nullable=False)
    protein_g: float = Field(default=0.0, nullable=False)
    carbs_g: float = Field(default=0.0, nullable=False)
    fats_g: float = Field(default=0.0, nullable=False)
    fiber_g: Optional[float] = Field(default=None)
    sugar_g: Optional[float] = Field(default=None)
