"""
Recovery service.

Scores are computed server-side: the submitted subjective inputs are
combined with the date's sleep log and passed to the calculator, then
the row for ``(user_id, date)`` is created or overwritten.
"""

import datetime
from typing import Optional

from sqlmodel import Session

from app.db.repositories.recovery import RecoveryRepository
from app.fittrack.recovery import (
    calculate_recovery_score,
    get_recovery_recommendation,
    sleep_component,
)
from app.models.recovery import RecoveryScore
from app.schemas.health import HeartRateLogResponse, RecoveryOverview, SleepLogResponse
from app.schemas.recovery import (
    RecoveryCreate,
    RecoveryHistoryItem,
    RecoveryInput,
    RecoveryScoreResponse,
)
from app.services.heart_rate_service import HeartRateService
from app.services.sleep_service import SleepService


class RecoveryService:
    """Service for recovery scoring."""

    def __init__(self, session: Session):
        self.repository = RecoveryRepository(session)
        self.sleep_service = SleepService(session)
        self.heart_rate_service = HeartRateService(session)

    def save(self, user_id: int, data: RecoveryCreate) -> RecoveryScore:
        """Compute and upsert the recovery score for a date.

        A submitted resting heart rate is also stored on the date's heart
        rate log.  When it is omitted, a previously logged one is used.
        """
        date = data.date or datetime.date.today()

        resting_hr = data.resting_hr
        if resting_hr is not None:
            self.heart_rate_service.record_resting_hr(user_id, date, resting_hr)
        else:
            heart_rate = self.heart_rate_service.get_by_date(user_id, date)
            resting_hr = heart_rate.resting_hr if heart_rate else None

        sleep = self.sleep_service.get_by_date(user_id, date)
        sleep_hours = sleep.hours_slept if sleep else None
        sleep_quality = sleep.quality_rating if sleep else None

        score = calculate_recovery_score(RecoveryInput(
            sleep_hours=sleep_hours,
            sleep_quality=sleep_quality,
            hrv_score=data.hrv_score,
            resting_hr=resting_hr,
            muscle_soreness=data.muscle_soreness,
            energy_level=data.energy_level,
        ))
        sleep_score = None
        if sleep_hours is not None or sleep_quality is not None:
            sleep_score = round(sleep_component(sleep_hours, sleep_quality))

        entry = self.repository.get_by_user_and_date(user_id, date)
        if entry is None:
            entry = RecoveryScore(user_id=user_id, date=date, recovery_score=score)
        entry.recovery_score = score
        entry.sleep_score = sleep_score
        entry.hrv_score = data.hrv_score
        entry.muscle_soreness = data.muscle_soreness
        entry.energy_level = data.energy_level
        entry.calculated_at = datetime.datetime.utcnow()
        return self.repository.save(entry)

    def overview(self, user_id: int, date: Optional[datetime.date] = None, days: int = 7) -> RecoveryOverview:
        date = date or datetime.date.today()
        entry = self.repository.get_by_user_and_date(user_id, date)
        sleep = self.sleep_service.get_by_date(user_id, date)
        heart_rate = self.heart_rate_service.get_by_date(user_id, date)
        start = datetime.date.today() - datetime.timedelta(days=days)
        history = self.repository.get_since(user_id, start)

        return RecoveryOverview(
            date=date,
            recovery=RecoveryScoreResponse.model_validate(entry) if entry else None,
            recommendation=get_recovery_recommendation(entry.recovery_score) if entry else None,
            sleep=SleepLogResponse.model_validate(sleep) if sleep else None,
            heart_rate=HeartRateLogResponse.model_validate(heart_rate) if heart_rate else None,
            history=[RecoveryHistoryItem.model_validate(e) for e in history],
        )
