"""
Body metrics repository.
"""

import datetime
from typing import Optional

from sqlmodel import Session, select

from app.models.body_metrics import BodyMetrics


class BodyMetricsRepository:
    """Repository for BodyMetrics database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: BodyMetrics) -> BodyMetrics:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_user_and_date(self, user_id: int, date: datetime.date) -> Optional[BodyMetrics]:
        """Most recent entry logged on ``date``."""
        statement = (
            select(BodyMetrics)
            .where(BodyMetrics.user_id == user_id, BodyMetrics.date == date)
            .order_by(BodyMetrics.logged_at.desc())
            .limit(1)
        )
        return self.session.exec(statement).first()

    def get_latest_by_user(self, user_id: int, limit: int = 2) -> list[BodyMetrics]:
        """Most recent entries, newest first."""
        statement = (
            select(BodyMetrics)
            .where(BodyMetrics.user_id == user_id)
            .order_by(BodyMetrics.date.desc(), BodyMetrics.logged_at.desc())
            .limit(limit)
        )
        return list(self.session.exec(statement).all())

    def get_since(self, user_id: int, start: datetime.date) -> list[BodyMetrics]:
        statement = (
            select(BodyMetrics)
            .where(BodyMetrics.user_id == user_id, BodyMetrics.date >= start)
            .order_by(BodyMetrics.date.desc(), BodyMetrics.logged_at.desc())
        )
        return list(self.session.exec(statement).all())
