"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .booking import BookingCreate, BookingCreated, BookingResponse
from .chat import AuthFrame, ChatFrame, ChatPush, ErrorFrame, ReadyFrame, parse_client_frame
from .message import MessageResponse
from .user import FriendResponse, QuoteResponse

__all__ = [
    "AuthFrame", "ChatFrame", "ChatPush", "ErrorFrame", "ReadyFrame", "parse_client_frame",
    "BookingCreate", "BookingCreated", "BookingResponse",
    "FriendResponse", "QuoteResponse",
    "MessageResponse",
]
