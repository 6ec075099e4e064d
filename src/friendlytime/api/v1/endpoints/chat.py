"""Real-time chat WebSocket endpoint."""

from __future__ import annotations

import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from pydantic import ValidationError
from starlette.types import Message

from friendlytime.core.settings import settings
from friendlytime.schemas.chat import (
    AuthFrame,
    ChatFrame,
    ErrorFrame,
    ReadyFrame,
    parse_client_frame,
)
from friendlytime.services.registry import HandleClosedError, WebSocketHandle
from friendlytime.services.relay import RelayError

from ..dependencies import RegistryDep, RelayDep, SessionDep

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])


def _frame_payload(message: Message) -> str | bytes | None:
    """Return the payload of a text or binary frame."""
    text = message.get("text")
    return text if text is not None else message.get("bytes")


def _describe_validation_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid frame"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "invalid value")
    return f"Invalid frame: {location}: {message}" if location else f"Invalid frame: {message}"


@router.websocket(settings.ws_path)
async def chat_socket(
    websocket: WebSocket,
    db: SessionDep,
    registry: RegistryDep,
    relay: RelayDep,
) -> None:
    """Bidirectional chat channel.

    A connection becomes reachable for pushes once it sends an ``auth``
    frame; ``chat`` frames are persisted and relayed to the recipient.
    """
    await websocket.accept()
    handle = WebSocketHandle(websocket)
    user_id: int | None = None

    async def reply(frame: ErrorFrame | ReadyFrame) -> None:
        try:
            await handle.send_json(frame.to_wire())
        except HandleClosedError:
            logger.debug("Could not reply on closed connection %r", handle)

    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                break
            raw = _frame_payload(message)
            if raw is None:
                continue

            try:
                frame = parse_client_frame(raw)
            except ValidationError as exc:
                logger.warning("Rejected frame from %r: %s", handle, exc.errors()[:1])
                await reply(ErrorFrame(detail=_describe_validation_error(exc)))
                continue

            if isinstance(frame, AuthFrame):
                if user_id is not None and user_id != frame.user_id:
                    registry.unregister(user_id, handle)
                user_id = frame.user_id
                registry.register(user_id, handle)
                await reply(ReadyFrame(user_id=user_id))
            elif isinstance(frame, ChatFrame):
                try:
                    await relay.relay(db, frame.sender_id, frame.receiver_id, frame.content)
                except RelayError as exc:
                    await reply(ErrorFrame(detail=str(exc)))
    except WebSocketDisconnect:
        pass
    finally:
        if user_id is not None:
            registry.unregister(user_id, handle)
