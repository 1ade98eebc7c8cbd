"""
Heart rate service.
"""

import datetime
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.repositories.heart_rate import HeartRateRepository
from app.models.heart_rate import HeartRateLog
from app.schemas.health import HeartRateLogCreate, HeartRateLogResponse, HeartRateOverview, HeartRateStats


class HeartRateService:
    """Service for heart rate logging (one entry per date)."""

    def __init__(self, session: Session):
        self.repository = HeartRateRepository(session)

    def upsert(self, user_id: int, data: HeartRateLogCreate) -> tuple[HeartRateLog, bool]:
        """Create or replace the entry for the date.

        Returns:
            Tuple of (entry, created).
        """
        date = data.date or datetime.date.today()
        existing = self.repository.get_by_user_and_date(user_id, date)
        if existing:
            existing.resting_hr = data.resting_hr
            existing.avg_hr = data.avg_hr
            existing.max_hr = data.max_hr
            existing.measured_at = datetime.datetime.utcnow()
            return self.repository.update(existing), False

        entry = HeartRateLog(user_id=user_id, date=date, resting_hr=data.resting_hr, avg_hr=data.avg_hr,
                             max_hr=data.max_hr, )
        return self.repository.create(entry), True

    def record_resting_hr(self, user_id: int, date: datetime.date, resting_hr: int) -> HeartRateLog:
        """Set only the resting heart rate of a date, keeping other readings."""
        existing = self.repository.get_by_user_and_date(user_id, date)
        if existing:
            existing.resting_hr = resting_hr
            existing.measured_at = datetime.datetime.utcnow()
            return self.repository.update(existing)
        return self.repository.create(HeartRateLog(user_id=user_id, date=date, resting_hr=resting_hr))

    def get_by_date(self, user_id: int, date: datetime.date) -> Optional[HeartRateLog]:
        return self.repository.get_by_user_and_date(user_id, date)

    def overview(self, user_id: int, date: Optional[datetime.date] = None, days: int = 7) -> HeartRateOverview:
        if date:
            latest = self.repository.get_by_user_and_date(user_id, date)
        else:
            latest = self.repository.get_latest_by_user(user_id)

        start = datetime.date.today() - datetime.timedelta(days=days)
        history = self.repository.get_since(user_id, start)
        stats = self.repository.stats_since(user_id, start)

        return HeartRateOverview(
            latest=HeartRateLogResponse.model_validate(latest) if latest else None,
            history=[HeartRateLogResponse.model_validate(e) for e in history],
            stats=HeartRateStats(**stats),
        )

    def delete_by_date(self, user_id: int, date: datetime.date) -> None:
        entry = self.repository.get_by_user_and_date(user_id, date)
        if not entry:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"No heart rate entry for {date}",
            )
        self.repository.delete(entry)
