"""
Meal repository.

Handles meals and their food items, plus the daily nutrition sums.
Food item nutrition is per unit, so every sum weights by ``quantity``.
"""

import datetime
from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from app.models.meal import FoodItem, Meal


class MealRepository:
    """Repository for Meal and FoodItem database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, meal: Meal, items: list[FoodItem]) -> Meal:
        """Insert a meal with its items in one transaction."""
        self.session.add(meal)
        self.session.flush()
        for item in items:
            item.meal_id = meal.id
            self.session.add(item)
        self.session.commit()
        self.session.refresh(meal)
        return meal

    def get_by_id(self, meal_id: int) -> Optional[Meal]:
        return self.session.get(Meal, meal_id)

    def get_by_user_and_date(self, user_id: int, date: datetime.date) -> list[Meal]:
        statement = (
            select(Meal)
            .where(Meal.user_id == user_id, Meal.date == date)
            .order_by(Meal.logged_at)
        )
        return list(self.session.exec(statement).all())

    def get_items(self, meal_id: int) -> list[FoodItem]:
        statement = select(FoodItem).where(FoodItem.meal_id == meal_id).order_by(FoodItem.id)
        return list(self.session.exec(statement).all())

    # ------------------------------------------------------------------
    # Aggregation
    # ------------------------------------------------------------------

    def sum_nutrition_by_date(self, user_id: int, date: datetime.date) -> dict[str, float]:
        """Sum ``value * quantity`` over every food item eaten on ``date``."""
        statement = (
            select(
                func.coalesce(func.sum(FoodItem.calories * FoodItem.quantity), 0.0),
                func.coalesce(func.sum(FoodItem.protein_g * FoodItem.quantity), 0.0),
                func.coalesce(func.sum(FoodItem.carbs_g * FoodItem.quantity), 0.0),
                func.coalesce(func.sum(FoodItem.fats_g * FoodItem.quantity), 0.0),
            )
            .select_from(Meal)
            .join(FoodItem, FoodItem.meal_id == Meal.id)
            .where(Meal.user_id == user_id, Meal.date == date)
        )
        row = self.session.exec(statement).first()
        if row is None:
            return { "calories": 0.0, "protein": 0.0, "carbs": 0.0, "fats": 0.0 }
        return { "calories": float(row[0]), "protein": float(row[1]), "carbs": float(row[2]),
                 "fats": float(row[3]), }

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def delete(self, meal: Meal) -> None:
        """Delete a meal and its food items."""
        for item in self.get_items(meal.id):
            self.session.delete(item)
        self.session.flush()
        self.session.delete(meal)
        self.session.commit()
