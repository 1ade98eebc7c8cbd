"""FitTrack core algorithms: recovery scoring and food text parsing."""

from app.fittrack.recovery import calculate_recovery_score, get_recovery_recommendation
from app.fittrack.food_parser import parse_food_text

__all__ = ["calculate_recovery_score", "get_recovery_recommendation", "parse_food_text"]
