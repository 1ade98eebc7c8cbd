"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from app.models.user import User  # noqa: F401
from app.models.body_metrics import BodyMetrics  # noqa: F401
from app.models.sleep import SleepLog  # noqa: F401
from app.models.heart_rate import HeartRateLog  # noqa: F401
from app.models.recovery import RecoveryScore  # noqa: F401
from app.models.meal import FoodItem, Meal  # noqa: F401
from app.models.frequent_food import FrequentFood  # noqa: F401
from app.models.nutrition_goal import NutritionGoal  # noqa: F401
from app.models.water import WaterLog  # noqa: F401
from app.models.workout import Exercise, ExerciseSet, Workout  # noqa: F401
from app.models.cardio import CardioSession  # noqa: F401
