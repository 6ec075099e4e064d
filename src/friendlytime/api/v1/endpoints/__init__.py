# src/friendlytime/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .bookings import router as bookings_router
from .chat import router as chat_router
from .friends import router as friends_router
from .messages import router as messages_router

__all__ = [
    "bookings_router",
    "chat_router",
    "friends_router",
    "messages_router",
]
