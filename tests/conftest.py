# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator
from itertools import count
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SEED_DEMO_DATA", "false")

from friendlytime.db.session import Base
from friendlytime.db.session import get_db as app_get_session
from friendlytime.main import create_app
from friendlytime.models import User, UserRole
from friendlytime.services.registry import ConnectionRegistry, HandleClosedError

TEST_DB_URL = "sqlite://"

_EMAIL_COUNTER = count(1)


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()

        # Ensure each test sees a clean database even if commits occurred.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture()
def app() -> FastAPI:
    # A fresh application per test so every test gets its own registry.
    return create_app()


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def registry(app: FastAPI) -> ConnectionRegistry:
    """Return the registry owned by the test application."""
    return app.state.connection_registry


def _make_user(db: Session, **overrides: Any) -> User:
    n = next(_EMAIL_COUNTER)
    fields: dict[str, Any] = {
        "name": f"User {n}",
        "email": f"user{n}@example.com",
        "role": UserRole.FRIEND.value,
        "city": "Mumbai",
        "age": 25,
        "languages": "Hindi, English",
        "interests": "Movies",
        "about": "Happy to help.",
        "hourly_rate": 800,
        "verified": True,
        "rating": 4.8,
    }
    fields.update(overrides)
    user = User(**fields)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture()
def make_user(db_session: Session) -> Callable[..., User]:
    """Return a factory persisting users with sensible profile defaults."""

    def factory(**overrides: Any) -> User:
        return _make_user(db_session, **overrides)

    return factory


@pytest.fixture()
def friend(make_user: Callable[..., User]) -> User:
    """Create and return a persisted friend profile."""
    return make_user(name="Aarav", hourly_rate=800)


@pytest.fixture()
def customer(make_user: Callable[..., User]) -> User:
    """Create and return a persisted customer."""
    return make_user(name="Meera", role=UserRole.CUSTOMER.value, hourly_rate=None)


class FakeHandle:
    """In-memory connection handle recording pushed payloads."""

    def __init__(self, *, is_open: bool = True, fail: bool = False) -> None:
        self.is_open = is_open
        self.fail = fail
        self.sent: list[dict[str, Any]] = []

    async def send_json(self, payload: dict[str, Any]) -> None:
        if self.fail:
            raise HandleClosedError("connection reset")
        self.sent.append(payload)


@pytest.fixture()
def make_handle() -> Callable[..., FakeHandle]:
    """Return a factory for fake connection handles."""
    return FakeHandle
