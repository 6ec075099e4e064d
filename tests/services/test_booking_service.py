"""Tests for booking persistence and cost estimation."""

import pytest

from friendlytime.models import BookingStatus
from friendlytime.schemas.booking import BookingCreate
from friendlytime.services.booking_service import (
    create_booking,
    duration_hours,
    estimate_cost,
    get_booking,
)


@pytest.mark.parametrize(
    ("duration", "hours"),
    [
        ("1 Hour", 1),
        ("3 Hours", 3),
        ("Half Day (6 Hours)", 6),
        ("Full Day (12 Hours)", 12),
        ("A fortnight", 1),
    ],
)
def test_duration_hours(duration, hours) -> None:
    assert duration_hours(duration) == hours


def test_estimate_cost() -> None:
    assert estimate_cost(1000, "3 Hours") == 3000
    assert estimate_cost(750, "Full Day (12 Hours)") == 9000


def test_create_and_get_booking(db_session) -> None:
    booking = create_booking(
        db_session,
        BookingCreate(customerId=1, friendId=2, activity="Wedding Companion", duration="Half Day (6 Hours)"),
    )

    stored = get_booking(db_session, booking.id)
    assert stored is not None
    assert stored.activity == "Wedding Companion"
    assert stored.duration == "Half Day (6 Hours)"
    assert stored.status == BookingStatus.PENDING.value


def test_get_missing_booking(db_session) -> None:
    assert get_booking(db_session, 12345) is None
