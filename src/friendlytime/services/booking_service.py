"""Booking creation and cost estimation."""
from __future__ import annotations

from typing import Final

from sqlalchemy.orm import Session

from friendlytime.models.booking import Booking, BookingStatus
from friendlytime.schemas.booking import BookingCreate

__all__ = [
    "DEFAULT_DURATION",
    "DURATION_HOURS",
    "create_booking",
    "duration_hours",
    "estimate_cost",
    "get_booking",
]

DEFAULT_DURATION: Final[str] = "1 Hour"

DURATION_HOURS: Final[dict[str, int]] = {
    "1 Hour": 1,
    "3 Hours": 3,
    "Half Day (6 Hours)": 6,
    "Full Day (12 Hours)": 12,
}


def duration_hours(duration: str) -> int:
    """Return billable hours for a duration label; unknown labels bill one hour."""
    return DURATION_HOURS.get(duration, 1)


def estimate_cost(hourly_rate: int, duration: str) -> int:
    """Return the total price of booking ``duration`` at ``hourly_rate``."""
    return hourly_rate * duration_hours(duration)


def create_booking(db: Session, booking: BookingCreate) -> Booking:
    """Persist a new pending booking."""
    db_booking = Booking(
        customer_id=booking.customer_id,
        friend_id=booking.friend_id,
        activity=booking.activity,
        duration=booking.duration,
        status=BookingStatus.PENDING.value,
    )
    db.add(db_booking)
    db.commit()
    db.refresh(db_booking)
    return db_booking


def get_booking(db: Session, booking_id: int) -> Booking | None:
    """Return a single booking by primary key."""
    return db.query(Booking).filter(Booking.id == booking_id).first()
