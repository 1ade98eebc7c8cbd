"""Pydantic schemas for request/response validation."""

from app.schemas.user import UserResponse
from app.schemas.recovery import (
    RecoveryInput,
    RecoveryRecommendation,
    RecoveryCreate,
    RecoveryScoreResponse,
    RecoveryHistoryItem,
    RecoverySaveResponse,
)
from app.schemas.food_parse import (
    ParsedFood,
    NutritionTotals,
    FoodParseResult,
    FoodParseRequest,
    FoodParseResponse,
)
from app.schemas.health import (
    BodyMetricsCreate,
    BodyMetricsResponse,
    BodyMetricsOverview,
    SleepLogCreate,
    SleepLogResponse,
    SleepOverview,
    HeartRateLogCreate,
    HeartRateLogResponse,
    HeartRateOverview,
    RecoveryOverview,
    SavedResponse,
)
from app.schemas.nutrition import (
    FoodItemCreate,
    MealCreate,
    MealResponse,
    NutritionGoals,
    DailyNutritionResponse,
    WaterLogCreate,
    WaterDayResponse,
    FrequentFoodResponse,
)
from app.schemas.workout import (
    ExerciseSetCreate,
    ExerciseCreate,
    WorkoutCreate,
    ExerciseSetUpdate,
    CardioSessionCreate,
    WorkoutSummary,
    WorkoutDetail,
    CardioSessionResponse,
)

__all__ = [
    "UserResponse",
    "RecoveryInput",
    "RecoveryRecommendation",
    "RecoveryCreate",
    "RecoveryScoreResponse",
    "RecoveryHistoryItem",
    "RecoverySaveResponse",
    "ParsedFood",
    "NutritionTotals",
    "FoodParseResult",
    "FoodParseRequest",
    "FoodParseResponse",
    "BodyMetricsCreate",
    "BodyMetricsResponse",
    "BodyMetricsOverview",
    "SleepLogCreate",
    "SleepLogResponse",
    "SleepOverview",
    "HeartRateLogCreate",
    "HeartRateLogResponse",
    "HeartRateOverview",
    "RecoveryOverview",
    "SavedResponse",
    "FoodItemCreate",
    "MealCreate",
    "MealResponse",
    "NutritionGoals",
    "DailyNutritionResponse",
    "WaterLogCreate",
    "WaterDayResponse",
    "FrequentFoodResponse",
    "ExerciseSetCreate",
    "ExerciseCreate",
    "WorkoutCreate",
    "ExerciseSetUpdate",
    "CardioSessionCreate",
    "WorkoutSummary",
    "WorkoutDetail",
    "CardioSessionResponse",
]
