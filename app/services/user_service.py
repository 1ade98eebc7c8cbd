"""
User service.

Resolves the owner of the tracked data.
"""

from typing import Optional

from sqlmodel import Session

from app.core.config import settings
from app.db.repositories.user import UserRepository
from app.models.user import User


class UserService:
    """Service for user-related business logic."""

    def __init__(self, session: Session):
        """
        Initialize service with database session.

        Args:
            session: SQLModel database session
        """
        self.repository = UserRepository(session)

    def get_or_create_owner(self) -> User:
        """
        Return the configured owner, creating the row on first use.

        Returns:
            The owner user
        """
        user = self.repository.get_by_email(settings.DEFAULT_USER_EMAIL)
        if user:
            return user
        user = User(email=settings.DEFAULT_USER_EMAIL, full_name=settings.DEFAULT_USER_NAME)
        return self.repository.create(user)

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        return self.repository.get_by_id(user_id)
