"""Chat message Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_serializer

from friendlytime.db.time import ensure_utc


class MessageResponse(BaseModel):
    """Persisted chat message as returned by the history endpoint."""

    id: int
    sender_id: int
    receiver_id: int
    content: str
    created_at: datetime

    @field_serializer("created_at")
    def serialize_created_at(self, value: datetime) -> str:
        """Render the creation time as an ISO-8601 UTC string."""
        return ensure_utc(value).isoformat()

    model_config = ConfigDict(from_attributes=True)
