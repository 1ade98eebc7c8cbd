"""
Meal service.

Saving a meal also records every food item in the user's frequent-food
history for that meal type, which is what later feeds quick-add and the
fallback food parser.
"""

import datetime

from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.repositories.frequent_food import FrequentFoodRepository
from app.db.repositories.meal import MealRepository
from app.models.meal import FoodItem, Meal
from app.schemas.nutrition import FoodItemResponse, MacroTotals, MealCreate, MealResponse


class MealService:
    """Service for meal logging."""

    def __init__(self, session: Session):
        self.repository = MealRepository(session)
        self.frequent_foods = FrequentFoodRepository(session)

    def create(self, user_id: int, data: MealCreate) -> Meal:
        meal = Meal(user_id=user_id, date=data.date or datetime.date.today(), meal_type=data.meal_type,
                    meal_name=data.meal_name or None, notes=data.notes, )
        items = [FoodItem(**item.model_dump()) for item in data.food_items]

        now = datetime.datetime.utcnow()
        for item in data.food_items:
            self.frequent_foods.record_use(
                user_id=user_id, meal_type=data.meal_type, food_name=item.food_name, unit=item.unit,
                calories=item.calories, protein_g=item.protein_g, carbs_g=item.carbs_g, fats_g=item.fats_g,
                used_at=now,
            )

        # Commits the frequent-food upserts together with the meal.
        return self.repository.create(meal, items)

    def get_meals_for_date(self, user_id: int, date: datetime.date) -> list[MealResponse]:
        meals = self.repository.get_by_user_and_date(user_id, date)
        return [self._to_response(meal, self.repository.get_items(meal.id)) for meal in meals]

    def delete(self, user_id: int, meal_id: int) -> None:
        meal = self.repository.get_by_id(meal_id)
        if not meal or meal.user_id != user_id:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Meal not found")
        self.repository.delete(meal)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _to_response(meal: Meal, items: list[FoodItem]) -> MealResponse:
        totals = MacroTotals(
            calories=round(sum(i.calories * i.quantity for i in items), 1),
            protein=round(sum(i.protein_g * i.quantity for i in items), 1),
            carbs=round(sum(i.carbs_g * i.quantity for i in items), 1),
            fats=round(sum(i.fats_g * i.quantity for i in items), 1),
        )
        return MealResponse(id=meal.id, meal_type=meal.meal_type, meal_name=meal.meal_name, notes=meal.notes,
                            logged_at=meal.logged_at,
                            food_items=[FoodItemResponse.model_validate(i) for i in items], totals=totals, )
