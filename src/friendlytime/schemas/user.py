"""Profile-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field


class FriendResponse(BaseModel):
    """Public profile of a friend as shown on listing and profile pages."""

    id: int
    name: str
    email: str
    role: str
    city: str | None = None
    age: int | None = None
    languages: str | None = None
    interests: str | None = None
    about: str | None = None
    hourly_rate: int | None = None
    verified: bool
    rating: float

    model_config = ConfigDict(from_attributes=True)


class QuoteResponse(BaseModel):
    """Cost estimate for booking a friend for a given duration."""

    friend_id: int
    duration: str = Field(..., description="Duration label the quote was computed for")
    hours: int = Field(..., description="Billable hours derived from the duration label")
    hourly_rate: int
    total_cost: int
