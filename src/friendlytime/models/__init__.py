# src/friendlytime/models/__init__.py
"""SQLAlchemy models for the FriendlyTime application."""

from .booking import Booking, BookingStatus
from .message import Message
from .user import User, UserRole

__all__ = [
    "Booking", "BookingStatus",
    "Message",
    "User", "UserRole",
]
