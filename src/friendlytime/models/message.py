# src/friendlytime/models/message.py
"""Models describing chat messages between users."""

from datetime import datetime

from sqlalchemy import Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from friendlytime.db.session import Base
from friendlytime.db.time import utcnow


class Message(Base):
    """Chat message exchanged between two users.

    Rows are append-only. The autoincrement id doubles as the sequence number
    that breaks ties between messages sharing a timestamp.
    """

    __tablename__ = "messages"
    __table_args__ = (
        Index("ix_messages_pair", "sender_id", "receiver_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Not foreign keys: the relay stores whatever identities the client declares.
    sender_id: Mapped[int] = mapped_column(Integer, nullable=False)
    receiver_id: Mapped[int] = mapped_column(Integer, nullable=False)

    content: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(default=utcnow, nullable=False)
