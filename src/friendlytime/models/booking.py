# src/friendlytime/models/booking.py
"""Booking records created when a customer reserves a friend."""

from datetime import datetime
from enum import Enum

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from friendlytime.db.session import Base
from friendlytime.db.time import utcnow


class BookingStatus(str, Enum):
    """States a booking can be in. Bookings are created pending; there is no confirmation flow."""

    PENDING = "pending"


class Booking(Base):
    """Activity booked by a customer with a friend for a duration."""

    __tablename__ = "bookings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    customer_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), nullable=False)
    friend_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), nullable=False)

    activity: Mapped[str] = mapped_column(Text, nullable=False)
    # Human-readable label such as "Half Day (6 Hours)".
    duration: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(
        String(16), nullable=False, default=BookingStatus.PENDING.value
    )

    created_at: Mapped[datetime] = mapped_column(default=utcnow, nullable=False)
