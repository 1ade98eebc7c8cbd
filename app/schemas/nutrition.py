"""
Nutrition API schemas.

Meals, food items, daily summary, goals, water and frequent foods.
Food item nutrition is per unit throughout.
"""

import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

MealType = Literal["breakfast", "lunch", "dinner", "snack"]


# ---------------------------------------------------------------------------
# Meals
# ---------------------------------------------------------------------------

class FoodItemCreate(BaseModel):
    """A food in a meal; nutrition values are for one ``unit``."""

    food_name: str = Field(..., min_length=1, max_length=255)
    quantity: float = Field(1.0, gt=0)
    unit: str = Field("serving", min_length=1, max_length=50)
    calories: float = Field(0.0, ge=0)
    protein_g: float = Field(0.0, ge=0)
    carbs_g: float = Field(0.0, ge=0)
    fats_g: float = Field(0.0, ge=0)
    fiber_g: Optional[float] = Field(None, ge=0)
    sugar_g: Optional[float] = Field(None, ge=0)


class MealCreate(BaseModel):
    date: Optional[datetime.date] = Field(None, description="Defaults to today")
    meal_type: MealType
    meal_name: Optional[str] = Field(None, max_length=255)
    notes: Optional[str] = Field(None, max_length=1000)
    food_items: list[FoodItemCreate] = Field(default_factory=list)


class MealCreatedResponse(BaseModel):
    success: bool = True
    meal_id: int


class FoodItemResponse(BaseModel):
    id: int
    food_name: str
    quantity: float
    unit: str
    calories: float
    protein_g: float
    carbs_g: float
    fats_g: float
    fiber_g: Optional[float] = None
    sugar_g: Optional[float] = None

    class Config:
        from_attributes = True


class MacroTotals(BaseModel):
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fats: float = 0.0


class MealResponse(BaseModel):
    id: int
    meal_type: str
    meal_name: Optional[str] = None
    notes: Optional[str] = None
    logged_at: datetime.datetime
    food_items: list[FoodItemResponse]
    totals: MacroTotals


# ---------------------------------------------------------------------------
# Goals
# ---------------------------------------------------------------------------

class NutritionGoals(BaseModel):
    """Daily targets. All fields are required when updating."""

    daily_calories: int = Field(..., gt=0, le=20000)
    protein_g: int = Field(..., ge=0, le=1000)
    carbs_g: int = Field(..., ge=0, le=2000)
    fats_g: int = Field(..., ge=0, le=1000)
    water_ml: int = Field(..., ge=0, le=20000)

    class Config:
        from_attributes = True


class NutritionGoalsResponse(BaseModel):
    goals: NutritionGoals


# ---------------------------------------------------------------------------
# Daily summary
# ---------------------------------------------------------------------------

class DailyTotals(MacroTotals):
    water: int = 0


class DailyPercentages(BaseModel):
    calories: int = 0
    protein: int = 0
    carbs: int = 0
    fats: int = 0
    water: int = 0


class DailyNutritionResponse(BaseModel):
    date: datetime.date
    totals: DailyTotals
    goals: NutritionGoals
    percentages: DailyPercentages
    meals: list[MealResponse]


# ---------------------------------------------------------------------------
# Water
# ---------------------------------------------------------------------------

class WaterLogCreate(BaseModel):
    date: Optional[datetime.date] = Field(None, description="Defaults to today")
    amount_ml: int = Field(..., gt=0, le=5000, description="Amount drunk (ml)")


class WaterLogResponse(BaseModel):
    id: int
    amount_ml: int
    logged_at: datetime.datetime

    class Config:
        from_attributes = True


class WaterDayResponse(BaseModel):
    date: datetime.date
    total: int
    entries: int
    logs: list[WaterLogResponse]


class WaterLoggedResponse(BaseModel):
    success: bool = True
    id: int
    total: int


# ---------------------------------------------------------------------------
# Frequent foods
# ---------------------------------------------------------------------------

class FrequentFoodResponse(BaseModel):
    name: str
    unit: str
    calories: float
    protein: float
    carbs: float
    fats: float
    use_count: int
    last_used_at: datetime.datetime


class FrequentFoodsResponse(BaseModel):
    foods: list[FrequentFoodResponse]
