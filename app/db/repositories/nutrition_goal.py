"""
Nutrition goal repository.
"""

from typing import Optional

from sqlmodel import Session, select

from app.models.nutrition_goal import NutritionGoal


class NutritionGoalRepository:
    """Repository for NutritionGoal database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_user(self, user_id: int) -> Optional[NutritionGoal]:
        statement = select(NutritionGoal).where(NutritionGoal.user_id == user_id)
        return self.session.exec(statement).first()

    def save(self, goal: NutritionGoal) -> NutritionGoal:
        self.session.add(goal)
        self.session.commit()
        self.session.refresh(goal)
        return goal
