"""
Cardio session service.
"""

import datetime
from typing import Optional

from sqlmodel import Session

from app.db.repositories.cardio import CardioRepository
from app.models.cardio import CardioSession
from app.schemas.workout import CardioSessionCreate


class CardioService:
    """Service for cardio session logging."""

    def __init__(self, session: Session):
        self.repository = CardioRepository(session)

    def create(self, user_id: int, data: CardioSessionCreate) -> CardioSession:
        entry = CardioSession(
            user_id=user_id,
            date=data.date or datetime.date.today(),
            **data.model_dump(exclude={"date"}),
        )
        return self.repository.create(entry)

    def list_sessions(self, user_id: int, date: Optional[datetime.date] = None, limit: int = 10) -> list[CardioSession]:
        if date:
            return self.repository.get_by_user_and_date(user_id, date)
        return self.repository.get_recent_by_user(user_id, limit)
