"""
Sleep service.

Sleep entries are upserted per date. When hours are not given they are
derived from bedtime and wake time, wrapping across midnight.
"""

import datetime
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.repositories.sleep import SleepRepository
from app.models.sleep import SleepLog
from app.schemas.health import SleepLogCreate, SleepLogResponse, SleepOverview, SleepStats

STATS_WINDOW_DAYS = 7


def hours_between(bedtime: datetime.time, wake_time: datetime.time) -> float:
    """Hours from bedtime to wake time, rounded to 0.1 h.

    A wake time earlier than bedtime is taken to be on the next day.
    """
    bed_minutes = bedtime.hour * 60 + bedtime.minute
    wake_minutes = wake_time.hour * 60 + wake_time.minute
    if wake_minutes < bed_minutes:
        wake_minutes += 24 * 60
    return round((wake_minutes - bed_minutes) / 60, 1)


class SleepService:
    """Service for sleep logging."""

    def __init__(self, session: Session):
        self.repository = SleepRepository(session)

    def upsert(self, user_id: int, data: SleepLogCreate) -> tuple[SleepLog, bool]:
        """Create or replace the entry for the date.

        Returns:
            Tuple of (entry, created).
        """
        date = data.date or datetime.date.today()
        hours = data.hours_slept
        if hours is None and data.bedtime and data.wake_time:
            hours = hours_between(data.bedtime, data.wake_time)

        existing = self.repository.get_by_user_and_date(user_id, date)
        if existing:
            existing.bedtime = data.bedtime
            existing.wake_time = data.wake_time
            existing.hours_slept = hours
            existing.quality_rating = data.quality_rating
            existing.notes = data.notes
            existing.logged_at = datetime.datetime.utcnow()
            return self.repository.update(existing), False

        entry = SleepLog(user_id=user_id, date=date, bedtime=data.bedtime, wake_time=data.wake_time,
                         hours_slept=hours, quality_rating=data.quality_rating, notes=data.notes, )
        return self.repository.create(entry), True

    def get_by_date(self, user_id: int, date: datetime.date) -> Optional[SleepLog]:
        return self.repository.get_by_user_and_date(user_id, date)

    def overview(self, user_id: int, date: Optional[datetime.date] = None, days: int = 7) -> SleepOverview:
        if date:
            latest = self.repository.get_by_user_and_date(user_id, date)
        else:
            latest = self.repository.get_latest_by_user(user_id)

        today = datetime.date.today()
        history = self.repository.get_since(user_id, today - datetime.timedelta(days=days))
        stats = self.repository.stats_since(user_id, today - datetime.timedelta(days=STATS_WINDOW_DAYS))

        return SleepOverview(
            latest=SleepLogResponse.model_validate(latest) if latest else None,
            history=[SleepLogResponse.model_validate(e) for e in history],
            stats=SleepStats(**stats),
        )

    def delete_by_date(self, user_id: int, date: datetime.date) -> None:
        entry = self.repository.get_by_user_and_date(user_id, date)
        if not entry:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"No sleep entry for {date}",
            )
        self.repository.delete(entry)
