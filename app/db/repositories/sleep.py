"""
Sleep log repository.

Handles database operations for :class:`SleepLog`, including the
averages shown on the sleep dashboard.
"""

import datetime
from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from app.models.sleep import SleepLog


class SleepRepository:
    """Repository for SleepLog database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: SleepLog) -> SleepLog:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_user_and_date(self, user_id: int, date: datetime.date) -> Optional[SleepLog]:
        statement = select(SleepLog).where(SleepLog.user_id == user_id, SleepLog.date == date)
        return self.session.exec(statement).first()

    def get_latest_by_user(self, user_id: int) -> Optional[SleepLog]:
        statement = (
            select(SleepLog)
            .where(SleepLog.user_id == user_id)
            .order_by(SleepLog.date.desc(), SleepLog.logged_at.desc())
            .limit(1)
        )
        return self.session.exec(statement).first()

    def get_since(self, user_id: int, start: datetime.date) -> list[SleepLog]:
        """Entries dated on or after ``start``, most recent first."""
        statement = (
            select(SleepLog)
            .where(SleepLog.user_id == user_id, SleepLog.date >= start)
            .order_by(SleepLog.date.desc())
        )
        return list(self.session.exec(statement).all())

    def stats_since(self, user_id: int, start: datetime.date) -> dict[str, float]:
        """Average hours and quality since ``start``."""
        statement = select(
            func.avg(SleepLog.hours_slept),
            func.avg(SleepLog.quality_rating),
            func.count(SleepLog.id),
        ).where(SleepLog.user_id == user_id, SleepLog.date >= start)
        row = self.session.exec(statement).first()
        if row is None:
            return { "avg_hours": 0.0, "avg_quality": 0.0, "total_logs": 0 }
        return {
            "avg_hours": round(float(row[0] or 0.0), 1),
            "avg_quality": round(float(row[1] or 0.0), 1),
            "total_logs": int(row[2] or 0),
        }

    def update(self, entry: SleepLog) -> SleepLog:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def delete(self, entry: SleepLog) -> None:
        self.session.delete(entry)
        self.session.commit()
