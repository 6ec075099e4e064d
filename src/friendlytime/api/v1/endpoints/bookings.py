"""Booking endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from friendlytime.schemas.booking import BookingCreate, BookingCreated, BookingResponse
from friendlytime.services import booking_service

from ..dependencies import SessionDep

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=BookingCreated)
async def create_booking(booking_data: BookingCreate, db: SessionDep) -> BookingCreated:
    """Create a pending booking."""
    booking = booking_service.create_booking(db, booking_data)
    logger.info(
        "Booking %s created: customer %s with friend %s",
        booking.id,
        booking.customer_id,
        booking.friend_id,
    )
    return BookingCreated(id=booking.id)


@router.get("/{booking_id}", response_model=BookingResponse)
async def get_booking(booking_id: int, db: SessionDep) -> BookingResponse:
    """Return a booking by id."""
    booking = booking_service.get_booking(db, booking_id)
    if booking is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Booking not found",
        )
    return BookingResponse.model_validate(booking)
