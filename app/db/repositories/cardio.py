"""
Cardio session repository.
"""

import datetime

from sqlmodel import Session, select

from app.models.cardio import CardioSession


class CardioRepository:
    """Repository for CardioSession database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: CardioSession) -> CardioSession:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_user_and_date(self, user_id: int, date: datetime.date) -> list[CardioSession]:
        statement = (
            select(CardioSession)
            .where(CardioSession.user_id == user_id, CardioSession.date == date)
            .order_by(CardioSession.logged_at.desc())
        )
        return list(self.session.exec(statement).all())

    def get_recent_by_user(self, user_id: int, limit: int = 10) -> list[CardioSession]:
        statement = (
            select(CardioSession)
            .where(CardioSession.user_id == user_id)
            .order_by(CardioSession.date.desc(), CardioSession.logged_at.desc())
            .limit(limit)
        )
        return list(self.session.exec(statement).all())
