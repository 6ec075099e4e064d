"""Read helpers for marketplace profiles."""
from __future__ import annotations

from typing import Sequence

from sqlalchemy.orm import Session

from friendlytime.models.user import User, UserRole

__all__ = [
    "get_friend",
    "list_friends",
]


def list_friends(db: Session) -> Sequence[User]:
    """Return every profile offering companionship."""
    return (
        db.query(User)
        .filter(User.role == UserRole.FRIEND.value)
        .order_by(User.id.asc())
        .all()
    )


def get_friend(db: Session, friend_id: int) -> User | None:
    """Return a friend profile, or None if absent or not a friend."""
    return (
        db.query(User)
        .filter(User.id == friend_id, User.role == UserRole.FRIEND.value)
        .first()
    )
