"""
Service tests for meals, nutrition summaries and frequent foods.
"""

import datetime

import pytest
from fastapi import HTTPException

from app.db.repositories.frequent_food import FrequentFoodRepository
from app.db.repositories.meal import MealRepository
from app.db.repositories.user import UserRepository
from app.models.user import User
from app.schemas.nutrition import FoodItemCreate, MealCreate, NutritionGoals, WaterLogCreate
from app.services.meal_service import MealService
from app.services.nutrition_service import NutritionService, percent_of


# ======================================================================
# Helpers
# ======================================================================


def _make_meal(meal_type: str = "breakfast", date: datetime.date | None = None, **items) -> MealCreate:
    """Build a meal from ``name=(quantity, unit, calories, protein)`` pairs."""
    food_items = [
        FoodItemCreate(food_name=name, quantity=q, unit=unit, calories=cal, protein_g=protein)
        for name, (q, unit, cal, protein) in items.items()
    ]
    return MealCreate(date=date, meal_type=meal_type, food_items=food_items)


def _breakfast() -> MealCreate:
    return _make_meal(eggs=(2, "piece", 78, 6), toast=(1, "slice", 80, 3))


# ======================================================================
# MealService
# ======================================================================


class TestMealService:
    """Test meal creation, listing and deletion."""

    def test_create_stores_items(self, session, user):
        meal = MealService(session).create(user.id, _breakfast())
        items = MealRepository(session).get_items(meal.id)
        assert meal.date == datetime.date.today()
        assert [i.food_name for i in items] == ["eggs", "toast"]

    def test_create_records_frequent_foods(self, session, user):
        service = MealService(session)
        service.create(user.id, _breakfast())
        service.create(user.id, _make_meal(eggs=(3, "piece", 80, 6)))

        top = FrequentFoodRepository(session).get_top(user.id, 10)
        assert [(f.food_name, f.use_count) for f in top] == [("eggs", 2), ("toast", 1)]
        # Latest nutrition wins.
        assert top[0].calories == 80

    def test_frequent_foods_are_per_meal_type(self, session, user):
        service = MealService(session)
        service.create(user.id, _make_meal("breakfast", eggs=(2, "piece", 78, 6)))
        service.create(user.id, _make_meal("dinner", eggs=(2, "piece", 78, 6)))

        rows = FrequentFoodRepository(session).get_top(user.id, 10)
        assert sorted(r.meal_type for r in rows) == ["breakfast", "dinner"]
        assert all(r.use_count == 1 for r in rows)

    def test_meal_totals(self, session, user):
        service = MealService(session)
        service.create(user.id, _breakfast())
        meals = service.get_meals_for_date(user.id, datetime.date.today())
        assert len(meals) == 1
        assert meals[0].totals.calories == 236.0
        assert meals[0].totals.protein == 15.0

    def test_delete(self, session, user):
        service = MealService(session)
        meal = service.create(user.id, _breakfast())
        meal_id = meal.id
        service.delete(user.id, meal_id)
        assert MealRepository(session).get_by_id(meal_id) is None
        assert MealRepository(session).get_items(meal_id) == []

    def test_delete_other_users_meal(self, session, user):
        other = UserRepository(session).create(User(email="other@example.com"))
        meal = MealService(session).create(other.id, _breakfast())
        with pytest.raises(HTTPException) as exc:
            MealService(session).delete(user.id, meal.id)
        assert exc.value.status_code == 404

    def test_delete_missing(self, session, user):
        with pytest.raises(HTTPException) as exc:
            MealService(session).delete(user.id, 999)
        assert exc.value.status_code == 404


# ======================================================================
# NutritionService
# ======================================================================


class TestPercentOf:
    """Test percentage-of-goal rounding."""

    @pytest.mark.parametrize("value,goal,expected", [
        (950, 1900, 50),
        (236, 1900, 12),
        (0, 1900, 0),
        (2850, 1900, 150),
        (100, 0, 0),
    ])
    def test_percent(self, value, goal, expected):
        assert percent_of(value, goal) == expected


class TestNutritionService:
    """Test goals, daily summary, water and frequent foods."""

    def test_default_goals(self, session, user):
        goals = NutritionService(session).get_goals(user.id)
        assert goals == NutritionGoals(daily_calories=1900, protein_g=110, carbs_g=230, fats_g=60, water_ml=3000)

    def test_set_goals_overwrites(self, session, user):
        service = NutritionService(session)
        service.set_goals(user.id, NutritionGoals(daily_calories=2500, protein_g=150, carbs_g=300, fats_g=80,
                                                  water_ml=3500))
        service.set_goals(user.id, NutritionGoals(daily_calories=2000, protein_g=140, carbs_g=200, fats_g=70,
                                                  water_ml=3000))
        assert service.get_goals(user.id).daily_calories == 2000

    def test_daily_summary(self, session, user):
        MealService(session).create(user.id, _breakfast())
        service = NutritionService(session)
        service.log_water(user.id, WaterLogCreate(amount_ml=750))

        daily = service.daily(user.id)
        assert daily.totals.calories == 236.0
        assert daily.totals.protein == 15.0
        assert daily.totals.water == 750
        assert daily.percentages.calories == 12
        assert daily.percentages.water == 25
        assert len(daily.meals) == 1

    def test_daily_ignores_other_dates(self, session, user):
        yesterday = datetime.date.today() - datetime.timedelta(days=1)
        MealService(session).create(user.id, _make_meal(date=yesterday, eggs=(2, "piece", 78, 6)))
        daily = NutritionService(session).daily(user.id)
        assert daily.totals.calories == 0
        assert daily.meals == []

    def test_water_total(self, session, user):
        service = NutritionService(session)
        service.log_water(user.id, WaterLogCreate(amount_ml=250))
        _, total = service.log_water(user.id, WaterLogCreate(amount_ml=500))
        assert total == 750

        day = service.water_for_date(user.id)
        assert day.total == 750
        assert day.entries == 2

    def test_frequent_foods_list(self, session, user):
        meals = MealService(session)
        meals.create(user.id, _make_meal("lunch", rice=(1, "cup", 200, 4)))
        meals.create(user.id, _make_meal("lunch", rice=(1, "cup", 200, 4), salad=(1, "bowl", 50, 2)))
        meals.create(user.id, _make_meal("snack", apple=(1, "piece", 95, 0.5)))

        service = NutritionService(session)
        foods = service.frequent_foods_list(user.id, limit=6)
        assert foods[0].name == "rice"
        assert foods[0].use_count == 2

        lunch = service.frequent_foods_list(user.id, limit=6, meal_type="lunch")
        assert {f.name for f in lunch} == {"rice", "salad"}

        assert len(service.frequent_foods_list(user.id, limit=1)) == 1
