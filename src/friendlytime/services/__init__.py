# src/friendlytime/services/__init__.py
"""Business logic services for the FriendlyTime application."""

from .registry import ConnectionHandle, ConnectionRegistry, HandleClosedError, WebSocketHandle
from .relay import MessageRelay, RelayError

__all__ = [
    "ConnectionHandle",
    "ConnectionRegistry",
    "HandleClosedError",
    "MessageRelay",
    "RelayError",
    "WebSocketHandle",
]
