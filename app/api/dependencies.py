"""
Shared API dependencies.

Reusable FastAPI dependencies for identity and database access.
"""

from fastapi import Depends
from sqlmodel import Session

from app.db.session import get_db
from app.models.user import User
from app.services.user_service import UserService


def get_current_user(db: Session = Depends(get_db)) -> User:
    """Resolve the owner of the tracked data, creating it on first use."""
    return UserService(db).get_or_create_owner()
