"""
Nutrition service.

Daily summary (totals vs goals), goals, water intake and the frequent
foods quick-add list.
"""

import datetime
from typing import Optional

from sqlmodel import Session

from app.core.config import settings
from app.db.repositories.frequent_food import FrequentFoodRepository
from app.db.repositories.meal import MealRepository
from app.db.repositories.nutrition_goal import NutritionGoalRepository
from app.db.repositories.water import WaterRepository
from app.models.nutrition_goal import NutritionGoal
from app.models.water import WaterLog
from app.schemas.nutrition import (
    DailyNutritionResponse,
    DailyPercentages,
    DailyTotals,
    FrequentFoodResponse,
    NutritionGoals,
    WaterDayResponse,
    WaterLogCreate,
    WaterLogResponse,
)
from app.services.meal_service import MealService

FREQUENT_FOODS_MAX_LIMIT = 50


def default_goals() -> NutritionGoals:
    return NutritionGoals(
        daily_calories=settings.DEFAULT_DAILY_CALORIES,
        protein_g=settings.DEFAULT_PROTEIN_G,
        carbs_g=settings.DEFAULT_CARBS_G,
        fats_g=settings.DEFAULT_FATS_G,
        water_ml=settings.DEFAULT_WATER_ML,
    )


def percent_of(value: float, goal: float) -> int:
    """Rounded percentage of a goal; 0 when the goal is not set."""
    if not goal:
        return 0
    return int(round(value / goal * 100))


class NutritionService:
    """Service for nutrition summaries, goals and water."""

    def __init__(self, session: Session):
        self.meals = MealRepository(session)
        self.goals = NutritionGoalRepository(session)
        self.water = WaterRepository(session)
        self.frequent_foods = FrequentFoodRepository(session)
        self.meal_service = MealService(session)

    # ------------------------------------------------------------------
    # Goals
    # ------------------------------------------------------------------

    def get_goals(self, user_id: int) -> NutritionGoals:
        goal = self.goals.get_by_user(user_id)
        if goal is None:
            return default_goals()
        return NutritionGoals.model_validate(goal)

    def set_goals(self, user_id: int, data: NutritionGoals) -> NutritionGoals:
        goal = self.goals.get_by_user(user_id)
        if goal is None:
            goal = NutritionGoal(user_id=user_id, **data.model_dump())
        else:
            for key, value in data.model_dump().items():
                setattr(goal, key, value)
        goal.updated_at = datetime.datetime.utcnow()
        return NutritionGoals.model_validate(self.goals.save(goal))

    # ------------------------------------------------------------------
    # Daily summary
    # ------------------------------------------------------------------

    def daily(self, user_id: int, date: Optional[datetime.date] = None) -> DailyNutritionResponse:
        date = date or datetime.date.today()
        goals = self.get_goals(user_id)
        sums = self.meals.sum_nutrition_by_date(user_id, date)
        water_total = self.water.total_by_date(user_id, date)

        totals = DailyTotals(
            calories=round(sums["calories"], 1),
            protein=round(sums["protein"], 1),
            carbs=round(sums["carbs"], 1),
            fats=round(sums["fats"], 1),
            water=water_total,
        )
        percentages = DailyPercentages(
            calories=percent_of(totals.calories, goals.daily_calories),
            protein=percent_of(totals.protein, goals.protein_g),
            carbs=percent_of(totals.carbs, goals.carbs_g),
            fats=percent_of(totals.fats, goals.fats_g),
            water=percent_of(water_total, goals.water_ml),
        )
        return DailyNutritionResponse(
            date=date,
            totals=totals,
            goals=goals,
            percentages=percentages,
            meals=self.meal_service.get_meals_for_date(user_id, date),
        )

    # ------------------------------------------------------------------
    # Water
    # ------------------------------------------------------------------

    def water_for_date(self, user_id: int, date: Optional[datetime.date] = None) -> WaterDayResponse:
        date = date or datetime.date.today()
        logs = self.water.get_by_user_and_date(user_id, date)
        return WaterDayResponse(
            date=date,
            total=sum(log.amount_ml for log in logs),
            entries=len(logs),
            logs=[WaterLogResponse.model_validate(log) for log in logs],
        )

    def log_water(self, user_id: int, data: WaterLogCreate) -> tuple[WaterLog, int]:
        """Store an intake and return it with the new total for the day."""
        date = data.date or datetime.date.today()
        entry = self.water.create(WaterLog(user_id=user_id, date=date, amount_ml=data.amount_ml))
        return entry, self.water.total_by_date(user_id, date)

    # ------------------------------------------------------------------
    # Frequent foods
    # ------------------------------------------------------------------

    def frequent_foods_list(
        self, user_id: int, limit: int = 6, meal_type: Optional[str] = None,
    ) -> list[FrequentFoodResponse]:
        limit = min(limit, FREQUENT_FOODS_MAX_LIMIT)
        rows = self.frequent_foods.get_top(user_id, limit, meal_type)
        return [
            FrequentFoodResponse(name=row.food_name, unit=row.unit or "serving", calories=row.calories,
                                 protein=row.protein_g, carbs=row.carbs_g, fats=row.fats_g,
                                 use_count=row.use_count, last_used_at=row.last_used_at, )
            for row in rows
        ]
