"""WebSocket frame schemas for the real-time chat channel.

Frames are JSON objects discriminated by their ``type`` key. Keys on the wire
are camelCase to match the browser client; Python attributes are snake_case.
"""

from datetime import datetime
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_serializer, field_validator

from friendlytime.db.time import ensure_utc


class _Frame(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        """Return the JSON-ready payload with camelCase keys."""
        return self.model_dump(by_alias=True, mode="json")


class AuthFrame(_Frame):
    """Client → server: bind this connection to a user identity."""

    type: Literal["auth"] = "auth"
    user_id: int = Field(..., alias="userId")


class ChatFrame(_Frame):
    """Client → server: send a chat message."""

    type: Literal["chat"] = "chat"
    sender_id: int = Field(..., alias="senderId")
    receiver_id: int = Field(..., alias="receiverId")
    content: str

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        """Reject blank messages; the text itself is stored untouched."""
        if not v.strip():
            raise ValueError("Message content must not be blank")
        return v


class ReadyFrame(_Frame):
    """Server → client: the auth frame was accepted."""

    type: Literal["ready"] = "ready"
    user_id: int = Field(..., alias="userId")


class ChatPush(_Frame):
    """Server → client: a message delivered to its online recipient."""

    type: Literal["chat"] = "chat"
    sender_id: int = Field(..., alias="senderId")
    content: str
    created_at: datetime = Field(..., alias="createdAt")

    @field_serializer("created_at")
    def serialize_created_at(self, value: datetime) -> str:
        """Render the persisted timestamp as an ISO-8601 UTC string."""
        return ensure_utc(value).isoformat()


class ErrorFrame(_Frame):
    """Server → client: the last frame could not be processed."""

    type: Literal["error"] = "error"
    detail: str


ClientFrame = Annotated[AuthFrame | ChatFrame, Field(discriminator="type")]

_CLIENT_FRAME_ADAPTER: TypeAdapter[AuthFrame | ChatFrame] = TypeAdapter(ClientFrame)


def parse_client_frame(raw: str | bytes) -> AuthFrame | ChatFrame:
    """Parse a raw client frame.

    Raises:
        pydantic.ValidationError: If the payload is not JSON, carries an unknown
            ``type`` or misses required fields.
    """
    return _CLIENT_FRAME_ADAPTER.validate_json(raw)
