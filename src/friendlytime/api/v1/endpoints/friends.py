"""Friend profile endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query, status

from friendlytime.schemas.user import FriendResponse, QuoteResponse
from friendlytime.services import booking_service, user_service

from ..dependencies import SessionDep

router = APIRouter(prefix="/friends", tags=["friends"])


@router.get("", response_model=list[FriendResponse])
async def list_friends(db: SessionDep) -> list[FriendResponse]:
    """List every friend profile."""
    return [FriendResponse.model_validate(friend) for friend in user_service.list_friends(db)]


@router.get("/{friend_id}", response_model=FriendResponse)
async def get_friend(friend_id: int, db: SessionDep) -> FriendResponse:
    """Return a single friend profile."""
    friend = user_service.get_friend(db, friend_id)
    if friend is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Friend not found",
        )
    return FriendResponse.model_validate(friend)


@router.get("/{friend_id}/quote", response_model=QuoteResponse)
async def quote_booking(
    friend_id: int,
    db: SessionDep,
    duration: str = Query(booking_service.DEFAULT_DURATION, min_length=1),
) -> QuoteResponse:
    """Estimate what booking this friend for ``duration`` would cost."""
    friend = user_service.get_friend(db, friend_id)
    if friend is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Friend not found",
        )

    hourly_rate = friend.hourly_rate or 0
    return QuoteResponse(
        friend_id=friend.id,
        duration=duration,
        hours=booking_service.duration_hours(duration),
        hourly_rate=hourly_rate,
        total_cost=booking_service.estimate_cost(hourly_rate, duration),
    )
