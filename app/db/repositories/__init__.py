"""Database repositories."""

from app.db.repositories.user import UserRepository
from app.db.repositories.body_metrics import BodyMetricsRepository
from app.db.repositories.sleep import SleepRepository
from app.db.repositories.heart_rate import HeartRateRepository
from app.db.repositories.recovery import RecoveryRepository
from app.db.repositories.meal import MealRepository
from app.db.repositories.frequent_food import FrequentFoodRepository
from app.db.repositories.nutrition_goal import NutritionGoalRepository
from app.db.repositories.water import WaterRepository
from app.db.repositories.workout import WorkoutRepository
from app.db.repositories.cardio import CardioRepository

__all__ = [
    "UserRepository",
    "BodyMetricsRepository",
    "SleepRepository",
    "HeartRateRepository",
    "RecoveryRepository",
    "MealRepository",
    "FrequentFoodRepository",
    "NutritionGoalRepository",
    "WaterRepository",
    "WorkoutRepository",
    "CardioRepository",
]
