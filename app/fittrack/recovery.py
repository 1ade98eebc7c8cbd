"""
Recovery score calculator.

Maps last night's sleep, HRV, resting heart rate and the athlete's
subjective soreness and energy onto a single 0-100 readiness score.

Model
-----
Each input is normalised independently to a 0-100 sub-score, then the
sub-scores are combined with fixed weights:

    sleep        0.30   hours vs a 7-9 h band, blended with quality 1-5
    hrv          0.25   linear up to 70 ms
    resting_hr   0.20   inverse, 50 bpm = 100 .. 80 bpm = 0
    soreness     0.125  1 = 100 .. 5 = 0
    energy       0.125  1 = 0 .. 5 = 100

Missing sleep, HRV or heart-rate data scores a neutral 50 so that a
partially filled form neither rewards nor punishes the athlete.

Out-of-range inputs are clamped, never rejected: the calculator is
called from forms and must always produce a number.
"""

from __future__ import annotations

import math
from typing import Optional

from app.schemas.recovery import RecoveryInput, RecoveryRecommendation

# ======================================================================
# Configuration
# ======================================================================

_WEIGHTS: dict[str, float] = {
    "sleep": 0.30,
    "hrv": 0.25,
    "resting_hr": 0.20,
    "soreness": 0.125,
    "energy": 0.125,
}

NEUTRAL_SCORE = 50.0

_IDEAL_SLEEP_HOURS = (7.0, 9.0)
_SLEEP_PENALTY_PER_HOUR = 20.0

_HRV_CEILING_MS = 70.0

_RHR_BEST_BPM = 50.0
_RHR_WORST_BPM = 80.0

# (status, lower bound inclusive, color, message), highest band first.
_RECOMMENDATION_BANDS: list[tuple[str, int, str, str]] = [
    ("excellent", 80, "green",
     "You're fully recovered! Great day for high-intensity training."),
    ("good", 60, "blue",
     "Good recovery. You can proceed with your planned workout."),
    ("moderate", 40, "amber",
     "Moderate recovery. Consider a lighter workout or active recovery."),
    ("low", 0, "red",
     "Low recovery. Rest day recommended. Focus on sleep and nutrition."),
]


# ======================================================================
# Sub-scores
# ======================================================================


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _scale_1_to_5(value: int) -> float:
    """Map a 1-5 rating linearly onto 0-100."""
    return (_clamp(value, 1, 5) - 1) / 4 * 100


def sleep_component(
    sleep_hours: Optional[float], sleep_quality: Optional[int],
) -> float:
    """Sleep sub-score (0-100).

    Hours inside the ideal band score 100; every hour outside it costs
    ``_SLEEP_PENALTY_PER_HOUR`` points. Quality maps 1-5 onto 0-100.
    When both are known they are averaged.
    """
    parts: list[float] = []

    if sleep_hours is not None:
        hours = max(0.0, sleep_hours)
        low, high = _IDEAL_SLEEP_HOURS
        if hours < low:
            distance = low - hours
        elif hours > high:
            distance = hours - high
        else:
            distance = 0.0
        parts.append(max(0.0, 100.0 - distance * _SLEEP_PENALTY_PER_HOUR))

    if sleep_quality is not None:
        parts.append(_scale_1_to_5(sleep_quality))

    if not parts:
        return NEUTRAL_SCORE
    return sum(parts) / len(parts)


def hrv_component(hrv_score: Optional[int]) -> float:
    """HRV sub-score (0-100). Values at or above the ceiling score 100."""
    if hrv_score is None:
        return NEUTRAL_SCORE
    return _clamp(hrv_score / _HRV_CEILING_MS * 100, 0.0, 100.0)


def resting_hr_component(resting_hr: Optional[int]) -> float:
    """Resting heart rate sub-score (0-100). Lower is better."""
    if resting_hr is None:
        return NEUTRAL_SCORE
    span = _RHR_WORST_BPM - _RHR_BEST_BPM
    return _clamp((_RHR_WORST_BPM - resting_hr) / span * 100, 0.0, 100.0)


def soreness_component(muscle_soreness: int) -> float:
    """Soreness sub-score: 1 (none) = 100, 5 (very sore) = 0."""
    return 100.0 - _scale_1_to_5(muscle_soreness)


def energy_component(energy_level: int) -> float:
    """Energy sub-score: 1 = 0, 5 = 100."""
    return _scale_1_to_5(energy_level)


# ======================================================================
# Main entry points
# ======================================================================


def calculate_recovery_score(data: RecoveryInput) -> int:
    """Combine the weighted sub-scores into an integer in [0, 100].

    Rounds half up, matching how the score is displayed.
    """
    components = {
        "sleep": sleep_component(data.sleep_hours, data.sleep_quality),
        "hrv": hrv_component(data.hrv_score),
        "resting_hr": resting_hr_component(data.resting_hr),
        "soreness": soreness_component(data.muscle_soreness),
        "energy": energy_component(data.energy_level),
    }
    total = sum(components[name] * weight for name, weight in _WEIGHTS.items())
    return int(_clamp(math.floor(total + 0.5), 0, 100))


def get_recovery_recommendation(score: int) -> RecoveryRecommendation:
    """Look up the advisory band for a score."""
    for status, lower, color, message in _RECOMMENDATION_BANDS:
        if score >= lower:
            return RecoveryRecommendation(status=status, color=color, message=message)
    # Below zero.
    status, _, color, message = _RECOMMENDATION_BANDS[-1]
    return RecoveryRecommendation(status=status, color=color, message=message)
