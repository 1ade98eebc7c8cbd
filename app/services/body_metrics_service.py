"""
Body metrics service.
"""

import datetime
from typing import Optional

from sqlmodel import Session

from app.db.repositories.body_metrics import BodyMetricsRepository
from app.models.body_metrics import BodyMetrics
from app.schemas.health import (
    BodyMetricsChange,
    BodyMetricsCreate,
    BodyMetricsOverview,
    BodyMetricsResponse,
)


class BodyMetricsService:
    """Service for body measurement logging."""

    def __init__(self, session: Session):
        self.repository = BodyMetricsRepository(session)

    def create(self, user_id: int, data: BodyMetricsCreate) -> BodyMetrics:
        entry = BodyMetrics(
            user_id=user_id,
            date=data.date or datetime.date.today(),
            **data.model_dump(exclude={"date"}),
        )
        return self.repository.create(entry)

    def overview(self, user_id: int, date: Optional[datetime.date] = None, days: int = 30) -> BodyMetricsOverview:
        """Latest entry, history (one date or the last ``days``) and change vs previous."""
        if date:
            entry = self.repository.get_by_user_and_date(user_id, date)
            history = [entry] if entry else []
        else:
            start = datetime.date.today() - datetime.timedelta(days=days)
            history = self.repository.get_since(user_id, start)

        recent = self.repository.get_latest_by_user(user_id, limit=2)
        latest = recent[0] if recent else None
        previous = recent[1] if len(recent) > 1 else None

        return BodyMetricsOverview(
            latest=BodyMetricsResponse.model_validate(latest) if latest else None,
            history=[BodyMetricsResponse.model_validate(e) for e in history],
            changes=self._changes(latest, previous),
        )

    @staticmethod
    def _changes(latest: Optional[BodyMetrics], previous: Optional[BodyMetrics]) -> Optional[BodyMetricsChange]:
        if latest is None or previous is None:
            return None

        def diff(a: Optional[float], b: Optional[float]) -> Optional[float]:
            if a is None or b is None:
                return None
            return round(a - b, 2)

        return BodyMetricsChange(
            weight=diff(latest.weight_kg, previous.weight_kg),
            body_fat=diff(latest.body_fat_percent, previous.body_fat_percent),
        )
