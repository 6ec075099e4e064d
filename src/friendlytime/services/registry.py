"""Presence tracking for the real-time chat channel.

The registry maps a user id to the one connection currently able to receive
pushes for that user. It is owned by the application (see
``friendlytime.main.create_app``) and handed to request handlers through a
dependency, never imported as a global.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

from starlette.websockets import WebSocket, WebSocketDisconnect, WebSocketState

logger = logging.getLogger(__name__)


class HandleClosedError(RuntimeError):
    """Raised when a push is attempted on a connection that has gone away."""


@runtime_checkable
class ConnectionHandle(Protocol):
    """Anything the relay can push a JSON payload through."""

    @property
    def is_open(self) -> bool:
        """Return True while the underlying connection accepts sends."""
        ...

    async def send_json(self, payload: dict[str, Any]) -> None:
        """Send a payload, raising HandleClosedError if the peer is gone."""
        ...


class WebSocketHandle:
    """ConnectionHandle backed by a Starlette WebSocket."""

    def __init__(self, websocket: WebSocket) -> None:
        self.websocket = websocket

    @property
    def is_open(self) -> bool:
        return (
            self.websocket.client_state == WebSocketState.CONNECTED
            and self.websocket.application_state == WebSocketState.CONNECTED
        )

    async def send_json(self, payload: dict[str, Any]) -> None:
        try:
            await self.websocket.send_json(payload)
        except (WebSocketDisconnect, RuntimeError, OSError) as exc:
            raise HandleClosedError(str(exc) or "connection closed") from exc

    def __repr__(self) -> str:
        client = self.websocket.client
        return f"<WebSocketHandle {client.host}:{client.port}>" if client else "<WebSocketHandle>"


class ConnectionRegistry:
    """Mapping from user id to its live connection handle.

    At most one handle is kept per user; registering again replaces the
    previous handle (last writer wins). The registry never closes handles.
    """

    def __init__(self) -> None:
        self._handles: dict[int, ConnectionHandle] = {}

    def register(self, user_id: int, handle: ConnectionHandle) -> None:
        """Bind ``user_id`` to ``handle``, dropping any previous binding."""
        previous = self._handles.get(user_id)
        self._handles[user_id] = handle
        if previous is not None and previous is not handle:
            logger.info("User %s re-registered; previous connection superseded", user_id)
        else:
            logger.info("User %s registered for push delivery", user_id)

    def unregister(self, user_id: int, handle: ConnectionHandle | None = None) -> None:
        """Remove the binding for ``user_id`` if present.

        When ``handle`` is given the binding is only removed if it still points
        at that handle, so a superseded connection closing late cannot evict
        the connection that replaced it.
        """
        current = self._handles.get(user_id)
        if current is None:
            return
        if handle is not None and current is not handle:
            return
        del self._handles[user_id]
        logger.info("User %s unregistered", user_id)

    def lookup(self, user_id: int) -> ConnectionHandle | None:
        """Return the handle bound to ``user_id`` without checking liveness."""
        return self._handles.get(user_id)

    def online_user_ids(self) -> list[int]:
        """Return the ids that currently have a registered handle."""
        return sorted(self._handles)

    def __contains__(self, user_id: object) -> bool:
        return user_id in self._handles

    def __len__(self) -> int:
        return len(self._handles)
