"""
Nutrition endpoints.

Food text parsing, meals, daily summary, goals, water and frequent foods.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.food_parse import FoodParseRequest, FoodParseResponse
from app.schemas.nutrition import (
    DailyNutritionResponse,
    FrequentFoodsResponse,
    MealCreate,
    MealCreatedResponse,
    MealType,
    NutritionGoals,
    NutritionGoalsResponse,
    WaterDayResponse,
    WaterLogCreate,
    WaterLoggedResponse,
)
from app.services.food_parse_service import FoodParseService
from app.services.meal_service import MealService
from app.services.nutrition_service import NutritionService

router = APIRouter()


@router.post("/parse", summary="Parse a free-text food description.", response_model=FoodParseResponse, )
def parse_food(data: FoodParseRequest, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    """
    Estimate foods and per-unit nutrition from text such as
    ``"2 eggs and toast"``. Uses Workers AI when configured, otherwise
    matches against previously logged foods. ``success`` is false when
    nothing was recognised.
    """
    service = FoodParseService(db)
    return service.parse(user.id, data.text)


@router.get("/daily", summary="Daily totals, goals and meals.", response_model=DailyNutritionResponse, )
def get_daily(date: Optional[datetime.date] = Query(None, description="Defaults to today"),
              db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = NutritionService(db)
    return service.daily(user.id, date)


@router.post("/meals", summary="Log a meal with its food items.", response_model=MealCreatedResponse,
             status_code=status.HTTP_201_CREATED, )
def create_meal(data: MealCreate, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = MealService(db)
    meal = service.create(user.id, data)
    return MealCreatedResponse(meal_id=meal.id)


@router.delete("/meals/{meal_id}", summary="Delete a meal and its food items.",
               status_code=status.HTTP_204_NO_CONTENT, )
def delete_meal(meal_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = MealService(db)
    service.delete(user.id, meal_id)


@router.get("/goals", summary="Get daily nutrition goals.", response_model=NutritionGoalsResponse, )
def get_goals(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = NutritionService(db)
    return NutritionGoalsResponse(goals=service.get_goals(user.id))


@router.put("/goals", summary="Replace daily nutrition goals.", response_model=NutritionGoalsResponse, )
def update_goals(data: NutritionGoals, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = NutritionService(db)
    return NutritionGoalsResponse(goals=service.set_goals(user.id, data))


@router.get("/water", summary="Water intake for a date.", response_model=WaterDayResponse, )
def get_water(date: Optional[datetime.date] = Query(None, description="Defaults to today"),
              db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = NutritionService(db)
    return service.water_for_date(user.id, date)


@router.post("/water", summary="Log water intake.", response_model=WaterLoggedResponse,
             status_code=status.HTTP_201_CREATED, )
def log_water(data: WaterLogCreate, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = NutritionService(db)
    entry, total = service.log_water(user.id, data)
    return WaterLoggedResponse(id=entry.id, total=total)


@router.get("/foods/frequent", summary="Most used foods for quick add.", response_model=FrequentFoodsResponse, )
def get_frequent_foods(limit: int = Query(6, ge=1, description="Max foods to return (capped at 50)"),
                       meal_type: Optional[MealType] = Query(None, description="Restrict to one meal type"),
                       db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = NutritionService(db)
    return FrequentFoodsResponse(foods=service.frequent_foods_list(user.id, limit, meal_type))
