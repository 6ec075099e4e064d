"""Booking-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from friendlytime.db.time import ensure_utc


class BookingCreate(BaseModel):
    """Schema for creating a booking.

    Accepts the camelCase keys sent by the web client as well as snake_case.
    """

    customer_id: int = Field(..., alias="customerId")
    friend_id: int = Field(..., alias="friendId")
    activity: str = Field(..., min_length=1, description="Activity label, e.g. 'Movie Partner'")
    duration: str = Field(..., min_length=1, description="Duration label, e.g. '1 Hour'")

    model_config = ConfigDict(populate_by_name=True)


class BookingCreated(BaseModel):
    """Identifier assigned to a newly created booking."""

    id: int


class BookingResponse(BaseModel):
    """Schema for booking information returned by the API."""

    id: int
    customer_id: int
    friend_id: int
    activity: str
    duration: str
    status: str
    created_at: datetime

    @field_serializer("created_at")
    def serialize_created_at(self, value: datetime) -> str:
        """Render the creation time as an ISO-8601 UTC string."""
        return ensure_utc(value).isoformat()

    model_config = ConfigDict(from_attributes=True)
