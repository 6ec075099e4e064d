"""Chat history endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from friendlytime.schemas.message import MessageResponse
from friendlytime.services.message_service import get_history

from ..dependencies import SessionDep

router = APIRouter(prefix="/messages", tags=["messages"])


@router.get("/{user_id}/{other_id}", response_model=list[MessageResponse])
async def get_conversation(user_id: int, other_id: int, db: SessionDep) -> list[MessageResponse]:
    """Return the full conversation between two users, oldest first."""
    return [MessageResponse.model_validate(message) for message in get_history(db, user_id, other_id)]
