"""
Frequent food repository.

Ranked reads feed both the quick-add list and the fallback food parser.
"""

import datetime
from typing import Optional

from sqlmodel import Session, select

from app.models.frequent_food import FrequentFood


class FrequentFoodRepository:
    """Repository for FrequentFood database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_top(self, user_id: int, limit: int, meal_type: Optional[str] = None) -> list[FrequentFood]:
        """Most used foods first, ties broken by most recent use."""
        statement = select(FrequentFood).where(FrequentFood.user_id == user_id)
        if meal_type:
            statement = statement.where(FrequentFood.meal_type == meal_type)
        statement = (
            statement
            .order_by(FrequentFood.use_count.desc(), FrequentFood.last_used_at.desc())
            .limit(limit)
        )
        return list(self.session.exec(statement).all())

    def get_by_key(self, user_id: int, meal_type: str, food_name: str, unit: str) -> Optional[FrequentFood]:
        statement = select(FrequentFood).where(
            FrequentFood.user_id == user_id,
            FrequentFood.meal_type == meal_type,
            FrequentFood.food_name == food_name,
            FrequentFood.unit == unit,
        )
        return self.session.exec(statement).first()

    def record_use(
        self, user_id: int, meal_type: str, food_name: str, unit: str,
        calories: float, protein_g: float, carbs_g: float, fats_g: float,
        used_at: Optional[datetime.datetime] = None,
    ) -> FrequentFood:
        """Upsert on ``(user_id, meal_type, food_name, unit)``.

        Existing rows take the latest nutrition values and get their
        ``use_count`` bumped. The caller commits.
        """
        used_at = used_at or datetime.datetime.utcnow()
        entry = self.get_by_key(user_id, meal_type, food_name, unit)
        if entry is None:
            entry = FrequentFood(user_id=user_id, meal_type=meal_type, food_name=food_name, unit=unit,
                                 use_count=0)
        entry.calories = calories
        entry.protein_g = protein_g
        entry.carbs_g = carbs_g
        entry.fats_g = fats_g
        entry.use_count += 1
        entry.last_used_at = used_at
        self.session.add(entry)
        self.session.flush()
        return entry
