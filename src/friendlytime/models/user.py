# src/friendlytime/models/user.py
"""SQLAlchemy models for marketplace users."""

from __future__ import annotations

from enum import Enum

from sqlalchemy import Boolean, CheckConstraint, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from friendlytime.db.session import Base


class UserRole(str, Enum):
    """Roles a marketplace account can hold."""

    CUSTOMER = "customer"
    FRIEND = "friend"


class User(Base):
    """Customer or friend profile.

    Identity (id, email, role) is fixed at signup; the profile columns are
    free-form text shown on the friend listing and profile pages.
    """

    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint("role IN ('customer', 'friend')", name="ck_users_role"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(String(320), unique=True, nullable=False)
    role: Mapped[str] = mapped_column(String(16), nullable=False)

    city: Mapped[str | None] = mapped_column(Text, nullable=True)
    age: Mapped[int | None] = mapped_column(Integer, nullable=True)
    # Comma-separated lists, rendered verbatim by clients.
    languages: Mapped[str | None] = mapped_column(Text, nullable=True)
    interests: Mapped[str | None] = mapped_column(Text, nullable=True)
    about: Mapped[str | None] = mapped_column(Text, nullable=True)

    hourly_rate: Mapped[int | None] = mapped_column(Integer, nullable=True)
    verified: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    rating: Mapped[float] = mapped_column(Float, nullable=False, default=5.0)

    @property
    def is_friend(self) -> bool:
        """Return True if this account offers companionship."""
        return self.role == UserRole.FRIEND.value
