"""Persist-then-push relay for chat messages."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from friendlytime.models.message import Message
from friendlytime.schemas.chat import ChatPush
from friendlytime.services.message_service import create_message
from friendlytime.services.registry import ConnectionRegistry, HandleClosedError

logger = logging.getLogger(__name__)


class RelayError(RuntimeError):
    """Raised when a message could not be persisted.

    Nothing is pushed when this is raised.
    """


class MessageRelay:
    """Stores every chat message, then pushes it to the recipient if online."""

    def __init__(self, registry: ConnectionRegistry) -> None:
        self.registry = registry

    async def relay(
        self,
        db: Session,
        sender_id: int,
        receiver_id: int,
        content: str,
    ) -> Message:
        """Persist a message and attempt delivery to ``receiver_id``.

        Args:
            db: Session used for the append.
            sender_id: Declared author of the message.
            receiver_id: Intended recipient.
            content: Message text, already checked to be non-blank.

        Returns:
            The persisted message.

        Raises:
            RelayError: If the store write fails.

        Notes:
            Delivery is best effort. A recipient that is offline, or whose
            connection drops mid-send, recovers the message from history.
        """
        try:
            message = create_message(db, sender_id, receiver_id, content)
        except SQLAlchemyError as exc:
            db.rollback()
            logger.error(
                "Failed to persist message from %s to %s", sender_id, receiver_id, exc_info=True
            )
            raise RelayError("Message could not be saved") from exc

        await self._push(message)
        return message

    async def _push(self, message: Message) -> bool:
        handle = self.registry.lookup(message.receiver_id)
        if handle is None or not handle.is_open:
            logger.debug("User %s offline; message %s stored only", message.receiver_id, message.id)
            return False

        push = ChatPush(
            sender_id=message.sender_id,
            content=message.content,
            created_at=message.created_at,
        )
        try:
            await handle.send_json(push.to_wire())
        except HandleClosedError as exc:
            logger.info("Push of message %s to user %s failed: %s", message.id, message.receiver_id, exc)
            return False
        return True
