"""SQLModel database models."""

from app.models.user import User
from app.models.body_metrics import BodyMetrics
from app.models.sleep import SleepLog
from app.models.heart_rate import HeartRateLog
from app.models.recovery import RecoveryScore
from app.models.meal import FoodItem, Meal
from app.models.frequent_food import FrequentFood
from app.models.nutrition_goal import NutritionGoal
from app.models.water import WaterLog
from app.models.workout import Exercise, ExerciseSet, Workout
from app.models.cardio import CardioSession

__all__ = [
    "User",
    "BodyMetrics",
    "SleepLog",
    "HeartRateLog",
    "RecoveryScore",
    "Meal",
    "FoodItem",
    "FrequentFood",
    "NutritionGoal",
    "WaterLog",
    "Workout",
    "Exercise",
    "ExerciseSet",
    "CardioSession",
]
