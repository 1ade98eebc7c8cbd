"""
Heart rate log repository.
"""

import datetime
from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from app.models.heart_rate import HeartRateLog


class HeartRateRepository:
    """Repository for HeartRateLog database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: HeartRateLog) -> HeartRateLog:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_user_and_date(self, user_id: int, date: datetime.date) -> Optional[HeartRateLog]:
        statement = select(HeartRateLog).where(HeartRateLog.user_id == user_id, HeartRateLog.date == date)
        return self.session.exec(statement).first()

    def get_latest_by_user(self, user_id: int) -> Optional[HeartRateLog]:
        statement = (
            select(HeartRateLog)
            .where(HeartRateLog.user_id == user_id)
            .order_by(HeartRateLog.date.desc(), HeartRateLog.measured_at.desc())
            .limit(1)
        )
        return self.session.exec(statement).first()

    def get_since(self, user_id: int, start: datetime.date) -> list[HeartRateLog]:
        statement = (
            select(HeartRateLog)
            .where(HeartRateLog.user_id == user_id, HeartRateLog.date >= start)
            .order_by(HeartRateLog.date.desc())
        )
        return list(self.session.exec(statement).all())

    def stats_since(self, user_id: int, start: datetime.date) -> dict[str, Optional[float]]:
        """Average, minimum and maximum resting heart rate since ``start``."""
        statement = select(
            func.avg(HeartRateLog.resting_hr),
            func.min(HeartRateLog.resting_hr),
            func.max(HeartRateLog.resting_hr),
            func.count(HeartRateLog.id),
        ).where(HeartRateLog.user_id == user_id, HeartRateLog.date >= start)
        row = self.session.exec(statement).first()
        if row is None or not row[3]:
            return { "avg_resting_hr": None, "min_resting_hr": None, "max_resting_hr": None, "total_logs": 0 }
        return {
            "avg_resting_hr": round(float(row[0]), 1) if row[0] is not None else None,
            "min_resting_hr": row[1],
            "max_resting_hr": row[2],
            "total_logs": int(row[3]),
        }

    def update(self, entry: HeartRateLog) -> HeartRateLog:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def delete(self, entry: HeartRateLog) -> None:
        self.session.delete(entry)
        self.session.commit()
