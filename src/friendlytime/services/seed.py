"""Demo data loaded into an empty database."""
from __future__ import annotations

import logging
from typing import Any, Final

from sqlalchemy import func
from sqlalchemy.orm import Session

from friendlytime.models.user import User, UserRole

logger = logging.getLogger(__name__)

DEMO_FRIENDS: Final[list[dict[str, Any]]] = [
    {
        "name": "Aarav",
        "email": "aarav@example.com",
        "city": "Mumbai",
        "age": 24,
        "languages": "Hindi, English",
        "interests": "Movies, Cricket",
        "about": "Love exploring new cafes and talking about cinema.",
        "hourly_rate": 800,
        "verified": True,
        "rating": 4.8,
    },
    {
        "name": "Ishani",
        "email": "ishani@example.com",
        "city": "Delhi",
        "age": 22,
        "languages": "Hindi, English, Punjabi",
        "interests": "Travel, Photography",
        "about": "Avid traveler looking for companions for city tours.",
        "hourly_rate": 1000,
        "verified": True,
        "rating": 4.9,
    },
    {
        "name": "Rohan",
        "email": "rohan@example.com",
        "city": "Bangalore",
        "age": 26,
        "languages": "Kannada, English",
        "interests": "Tech, Gaming",
        "about": "Let's grab a coffee and talk about the latest tech trends.",
        "hourly_rate": 750,
        "verified": True,
        "rating": 4.7,
    },
    {
        "name": "Priya",
        "email": "priya@example.com",
        "city": "Pune",
        "age": 23,
        "languages": "Marathi, Hindi, English",
        "interests": "Books, Art",
        "about": "Quiet companion for library visits or art galleries.",
        "hourly_rate": 900,
        "verified": True,
        "rating": 5.0,
    },
]


def seed_demo_friends(db: Session) -> int:
    """Insert the demo friend profiles if no users exist yet.

    Returns:
        Number of profiles inserted (0 when the table was not empty).
    """
    existing = db.query(func.count(User.id)).scalar() or 0
    if existing:
        return 0

    for profile in DEMO_FRIENDS:
        db.add(User(role=UserRole.FRIEND.value, **profile))
    db.commit()
    logger.info("Seeded %d demo friend profiles", len(DEMO_FRIENDS))
    return len(DEMO_FRIENDS)
