"""Shared fixtures for the Bookmatch test-suite."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

TEST_DB_PATH = Path(tempfile.gettempdir()) / "bookmatch_test_api.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"

from bookmatch.config import reset_settings_cache  # noqa: E402

reset_settings_cache()

import pytest  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402

from bookmatch.application.use_cases.notifications import NotificationDispatcher  # noqa: E402
from bookmatch.domain.entities import Book, Message, Notification, User  # noqa: E402
from bookmatch.infrastructure.database import (  # noqa: E402
    Base,
    build_engine,
    initialize_database,
)
from bookmatch.infrastructure.repositories import BookRepository, UserRepository  # noqa: E402


class RecordingPublisher:
    """Notification sink remembering what it was asked to push."""

    def __init__(self, live_sessions: int = 1, fail: bool = False) -> None:
        self.live_sessions = live_sessions
        self.fail = fail
        self.dispatched: list[Notification] = []

    def dispatch(self, notification: Notification) -> int:
        if self.fail:
            raise RuntimeError("websocket layer unavailable")
        self.dispatched.append(notification)
        return self.live_sessions

    def for_user(self, user_id: int) -> list[Notification]:
        return [n for n in self.dispatched if n.user_id == user_id]


class RecordingBroadcaster:
    """Room broadcaster remembering every relayed message."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.messages: list[Message] = []

    def broadcast_message(self, message: Message) -> int:
        if self.fail:
            raise RuntimeError("room unreachable")
        self.messages.append(message)
        return 1


@pytest.fixture()
def db_session() -> Session:
    """Yield a session bound to a fresh in-memory database."""

    engine = build_engine("sqlite://")
    initialize_database(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def publisher() -> RecordingPublisher:
    return RecordingPublisher()


@pytest.fixture()
def broadcaster() -> RecordingBroadcaster:
    return RecordingBroadcaster()


@pytest.fixture()
def dispatcher(db_session: Session, publisher: RecordingPublisher) -> NotificationDispatcher:
    return NotificationDispatcher(db_session, publisher)


@pytest.fixture()
def make_user(db_session: Session):
    """Return a factory inserting users without paying for password hashing."""

    def _make_user(username: str) -> User:
        return UserRepository(db_session).create(
            User(
                id=None,
                username=username,
                email=f"{username.lower()}@example.com",
                password="not-a-real-hash",
            )
        )

    return _make_user


@pytest.fixture()
def make_book(db_session: Session):
    """Return a factory inserting a book directly, bypassing match notifications."""

    def _make_book(owner: User, title: str, author: str, genre: str | None = None) -> Book:
        return BookRepository(db_session).create(
            Book(id=None, user_id=owner.id, title=title, author=author, genre=genre)
        )

    return _make_book
