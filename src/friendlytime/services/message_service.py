"""Persistence helpers for chat messages."""
from __future__ import annotations

from typing import Sequence

from sqlalchemy import and_, or_
from sqlalchemy.orm import Session

from friendlytime.models.message import Message

__all__ = [
    "create_message",
    "get_history",
]


def create_message(db: Session, sender_id: int, receiver_id: int, content: str) -> Message:
    """Append a message to the log and return the committed row."""
    message = Message(sender_id=sender_id, receiver_id=receiver_id, content=content)
    db.add(message)
    db.commit()
    db.refresh(message)
    return message


def get_history(db: Session, user_id: int, other_id: int) -> Sequence[Message]:
    """Return every message exchanged between two users, oldest first.

    The pair is unordered: ``get_history(db, a, b)`` and
    ``get_history(db, b, a)`` yield the same rows.
    """
    return (
        db.query(Message)
        .filter(
            or_(
                and_(Message.sender_id == user_id, Message.receiver_id == other_id),
                and_(Message.sender_id == other_id, Message.receiver_id == user_id),
            )
        )
        .order_by(Message.created_at.asc(), Message.id.asc())
        .all()
    )
