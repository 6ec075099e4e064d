# src/friendlytime/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import (
    bookings_router,
    chat_router,
    friends_router,
    messages_router,
)

__all__ = [
    "bookings_router",
    "chat_router",
    "friends_router",
    "messages_router",
]
