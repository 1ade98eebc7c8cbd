"""Business logic services."""

from app.services.user_service import UserService
from app.services.body_metrics_service import BodyMetricsService
from app.services.sleep_service import SleepService
from app.services.heart_rate_service import HeartRateService
from app.services.recovery_service import RecoveryService
from app.services.meal_service import MealService
from app.services.nutrition_service import NutritionService
from app.services.food_parse_service import FoodParseService
from app.services.workout_service import WorkoutService
from app.services.cardio_service import CardioService

__all__ = [
    "UserService",
    "BodyMetricsService",
    "SleepService",
    "HeartRateService",
    "RecoveryService",
    "MealService",
    "NutritionService",
    "FoodParseService",
    "WorkoutService",
    "CardioService",
]
