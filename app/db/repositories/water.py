"""
Water log repository.
"""

import datetime

from sqlalchemy import func
from sqlmodel import Session, select

from app.models.water import WaterLog


class WaterRepository:
    """Repository for WaterLog database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: WaterLog) -> WaterLog:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_user_and_date(self, user_id: int, date: datetime.date) -> list[WaterLog]:
        statement = (
            select(WaterLog)
            .where(WaterLog.user_id == user_id, WaterLog.date == date)
            .order_by(WaterLog.logged_at.desc())
        )
        return list(self.session.exec(statement).all())

    def total_by_date(self, user_id: int, date: datetime.date) -> int:
        statement = select(func.coalesce(func.sum(WaterLog.amount_ml), 0)).where(
            WaterLog.user_id == user_id, WaterLog.date == date,
        )
        return int(self.session.exec(statement).first() or 0)
