"""Shared API dependencies."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session
from starlette.requests import HTTPConnection

from friendlytime.db.session import get_db
from friendlytime.services.registry import ConnectionRegistry
from friendlytime.services.relay import MessageRelay

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_connection_registry(connection: HTTPConnection) -> ConnectionRegistry:
    """Return the registry owned by the running application.

    Works for both HTTP requests and WebSocket connections.
    """
    return connection.app.state.connection_registry


RegistryDep = Annotated[ConnectionRegistry, Depends(get_connection_registry)]


def get_message_relay(registry: RegistryDep) -> MessageRelay:
    """Return a relay bound to the application's registry."""
    return MessageRelay(registry)


RelayDep = Annotated[MessageRelay, Depends(get_message_relay)]
