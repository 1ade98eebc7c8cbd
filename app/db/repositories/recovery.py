"""
Recovery score repository.
"""

import datetime
from typing import Optional

from sqlmodel import Session, select

from app.models.recovery import RecoveryScore


class RecoveryRepository:
    """Repository for RecoveryScore database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_user_and_date(self, user_id: int, date: datetime.date) -> Optional[RecoveryScore]:
        statement = select(RecoveryScore).where(
            RecoveryScore.user_id == user_id,
            RecoveryScore.date == date,
        )
        return self.session.exec(statement).first()

    def get_since(self, user_id: int, start: datetime.date) -> list[RecoveryScore]:
        statement = (
            select(RecoveryScore)
            .where(RecoveryScore.user_id == user_id, RecoveryScore.date >= start)
            .order_by(RecoveryScore.date.desc())
        )
        return list(self.session.exec(statement).all())

    def save(self, entry: RecoveryScore) -> RecoveryScore:
        """Insert or update; the caller resolves the ``(user_id, date)`` key."""
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry
