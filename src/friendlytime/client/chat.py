"""Reconnecting chat client for the FriendlyTime WebSocket channel.

The client keeps a local view of one conversation. Sent messages are echoed
into the view immediately; the persisted history fetched after every
(re)connect is authoritative and replaces the view.
"""

from __future__ import annotations

import asyncio
import contextlib
import inspect
import json
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

import httpx
import websockets
from websockets.exceptions import WebSocketException

from friendlytime.core.settings import settings

logger = logging.getLogger(__name__)

MessageCallback = Callable[["ChatMessage"], Awaitable[None] | None]

# Network failures and unparseable history bodies; both end the session and retry.
_RECONNECT_ERRORS = (OSError, WebSocketException, httpx.HTTPError, KeyError, TypeError, ValueError)


class ChatClientError(RuntimeError):
    """Base exception raised by the chat client."""


class ChatNotConnectedError(ChatClientError):
    """Raised when sending while no connection is established."""


@dataclass
class ChatMessage:
    """One entry of the local conversation view."""

    sender_id: int
    receiver_id: int
    content: str
    created_at: str
    id: int | None = None
    local_echo: bool = False

    @classmethod
    def from_history(cls, row: dict[str, Any]) -> ChatMessage:
        """Build an entry from a history endpoint row."""
        return cls(
            id=row.get("id"),
            sender_id=int(row["sender_id"]),
            receiver_id=int(row["receiver_id"]),
            content=row["content"],
            created_at=row["created_at"],
        )

    @classmethod
    def from_push(cls, frame: dict[str, Any], receiver_id: int) -> ChatMessage:
        """Build an entry from a server push frame addressed to ``receiver_id``."""
        return cls(
            sender_id=int(frame["senderId"]),
            receiver_id=receiver_id,
            content=frame["content"],
            created_at=frame["createdAt"],
        )

    @property
    def key(self) -> tuple[int, int, str, str]:
        return (self.sender_id, self.receiver_id, self.content, self.created_at)


def websocket_url(base_url: str, ws_path: str) -> str:
    """Derive the WebSocket URL from the HTTP base URL."""
    base = base_url.rstrip("/")
    if base.startswith("https://"):
        return "wss://" + base[len("https://"):] + ws_path
    if base.startswith("http://"):
        return "ws://" + base[len("http://"):] + ws_path
    raise ValueError(f"Unsupported base URL: {base_url!r}")


class ChatClient:
    """Conversation between ``user_id`` and ``peer_id`` over the chat channel."""

    def __init__(
        self,
        base_url: str,
        user_id: int,
        peer_id: int,
        *,
        on_message: MessageCallback | None = None,
        api_prefix: str | None = None,
        ws_path: str | None = None,
        reconnect_initial: float | None = None,
        reconnect_max: float | None = None,
        http_client: httpx.AsyncClient | None = None,
        connect: Callable[[str], Any] | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.user_id = user_id
        self.peer_id = peer_id
        self.on_message = on_message
        self.api_prefix = api_prefix if api_prefix is not None else settings.api_prefix
        self.ws_url = websocket_url(self.base_url, ws_path or settings.ws_path)
        self.reconnect_initial = (
            settings.chat_reconnect_initial_seconds if reconnect_initial is None else reconnect_initial
        )
        self.reconnect_max = (
            settings.chat_reconnect_max_seconds if reconnect_max is None else reconnect_max
        )

        self.messages: list[ChatMessage] = []
        self.connected = asyncio.Event()

        self._connect = connect or websockets.connect
        self._http = http_client
        self._owns_http = http_client is None
        self._websocket: Any | None = None
        self._task: asyncio.Task[None] | None = None
        self._stopping = asyncio.Event()

    @property
    def is_connected(self) -> bool:
        return self._websocket is not None

    async def __aenter__(self) -> ChatClient:
        await self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.stop()

    async def start(self) -> None:
        """Start the background connection loop."""
        if self._task is None or self._task.done():
            self._stopping.clear()
            self._task = asyncio.create_task(self._run())

    async def stop(self) -> None:
        """Stop the connection loop and release network resources."""
        self._stopping.set()
        websocket = self._websocket
        if websocket is not None:
            with contextlib.suppress(OSError, WebSocketException):
                await websocket.close()

        if self._task is not None:
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._task
            self._task = None

        if self._owns_http and self._http is not None:
            await self._http.aclose()
            self._http = None

    async def send(self, content: str) -> ChatMessage | None:
        """Send a message to the peer and echo it into the local view.

        Blank content is ignored and ``None`` is returned.

        Raises:
            ChatNotConnectedError: If the channel is down.
        """
        if not content.strip():
            return None

        websocket = self._websocket
        if websocket is None:
            raise ChatNotConnectedError("Chat channel is not connected")

        frame = {
            "type": "chat",
            "senderId": self.user_id,
            "receiverId": self.peer_id,
            "content": content,
        }
        try:
            await websocket.send(json.dumps(frame))
        except (OSError, WebSocketException) as exc:
            raise ChatNotConnectedError("Chat channel is not connected") from exc

        echo = ChatMessage(
            sender_id=self.user_id,
            receiver_id=self.peer_id,
            content=content,
            created_at=datetime.now(UTC).isoformat(),
            local_echo=True,
        )
        self.messages.append(echo)
        return echo

    async def refresh_history(self) -> list[ChatMessage]:
        """Replace the local view with the persisted conversation."""
        client = self._ensure_http()
        response = await client.get(f"{self.api_prefix}/messages/{self.user_id}/{self.peer_id}")
        response.raise_for_status()
        self.messages = [ChatMessage.from_history(row) for row in response.json()]
        return self.messages

    def _ensure_http(self) -> httpx.AsyncClient:
        if self._http is None:
            self._http = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(settings.chat_http_timeout_seconds),
            )
        return self._http

    async def _run(self) -> None:
        delay = self.reconnect_initial

        while not self._stopping.is_set():
            try:
                async with self._connect(self.ws_url) as websocket:
                    await self._handshake(websocket)
                    delay = self.reconnect_initial
                    async for raw in websocket:
                        await self._handle_frame(raw)
            except _RECONNECT_ERRORS as exc:
                logger.warning("Chat connection for user %s failed: %s", self.user_id, exc)
            finally:
                self._websocket = None
                self.connected.clear()

            if self._stopping.is_set():
                break

            logger.warning("Chat channel for user %s closed; reconnecting in %.1fs", self.user_id, delay)
            await asyncio.sleep(delay)
            delay = min(delay * 2, self.reconnect_max)

    async def _handshake(self, websocket: Any) -> None:
        self._websocket = websocket
        await websocket.send(json.dumps({"type": "auth", "userId": self.user_id}))
        # Anything missed while disconnected is only recoverable from history.
        await self.refresh_history()
        self.connected.set()

    async def _handle_frame(self, raw: str | bytes) -> None:
        try:
            frame = json.loads(raw)
        except ValueError:
            logger.warning("Ignoring non-JSON frame for user %s", self.user_id)
            return
        if not isinstance(frame, dict):
            return

        frame_type = frame.get("type")
        if frame_type == "error":
            logger.warning("Server rejected a frame from user %s: %s", self.user_id, frame.get("detail"))
            return
        if frame_type != "chat" or frame.get("senderId") != self.peer_id:
            return

        try:
            message = ChatMessage.from_push(frame, receiver_id=self.user_id)
        except (KeyError, TypeError, ValueError):
            logger.warning("Ignoring malformed chat frame for user %s: %r", self.user_id, frame)
            return
        # The push may race the history fetch that already returned it.
        if any(existing.key == message.key for existing in self.messages):
            return
        self.messages.append(message)

        if self.on_message is None:
            return
        try:
            result = self.on_message(message)
            if inspect.isawaitable(result):
                await result
        except Exception:
            logger.exception("on_message callback failed for user %s", self.user_id)
