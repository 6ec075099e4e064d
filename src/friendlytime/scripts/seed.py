# src/friendlytime/scripts/seed.py
"""Create tables and load the demo friend profiles."""
from __future__ import annotations

import argparse

from friendlytime.db.session import SessionLocal, create_tables, drop_tables
from friendlytime.services.seed import seed_demo_friends


def main() -> None:
    parser = argparse.ArgumentParser(description="Initialize the FriendlyTime database")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Drop all tables before recreating and seeding them.",
    )
    args = parser.parse_args()

    if args.reset:
        drop_tables()
    create_tables()
    with SessionLocal() as db:
        inserted = seed_demo_friends(db)
    print(f"[seed] inserted {inserted} demo friend profiles")


if __name__ == "__main__":
    main()
