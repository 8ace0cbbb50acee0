"""Use case for adding a book and announcing the matches it creates."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from sqlalchemy.orm import Session

from bookmatch.application.use_cases.notifications import (
    NotificationDispatcher,
    notify_new_match,
)
from bookmatch.domain.entities import Book, NotificationDelivery, UserSummary
from bookmatch.infrastructure.repositories import BookRepository, UserRepository
from bookmatch.utils import now_in_app_timezone

from .validators import clean_book_fields

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BookAddition:
    """Result of adding a book to a user's inventory."""

    book: Book
    new_matches: int
    notifications: list[NotificationDelivery] = field(default_factory=list)


def add_book(
    session: Session,
    *,
    owner_id: int,
    title: str | None,
    author: str | None,
    genre: str | None = None,
    dispatcher: NotificationDispatcher,
) -> BookAddition:
    """Store the book and notify every other owner of the same book.

    Raises :class:`~bookmatch.domain.exceptions.DuplicateBookError` when the
    owner already has this book, compared with the canonical identity.
    """

    title, author, genre = clean_book_fields(title, author, genre)
    books = BookRepository(session)
    book = books.create(
        Book(
            id=None,
            user_id=owner_id,
            title=title,
            author=author,
            genre=genre,
            created_at=now_in_app_timezone(),
        )
    )

    matched_users: dict[int, UserSummary] = {}
    for _, matched_user in books.list_copies_owned_by_others(book.key, exclude_user_id=owner_id):
        matched_users.setdefault(matched_user.id, matched_user)

    owner = UserRepository(session).get_summary(owner_id)
    deliveries: list[NotificationDelivery] = []
    for matched_user in matched_users.values():
        deliveries.extend(
            notify_new_match(dispatcher, book=book, owner=owner, matched_user=matched_user)
        )

    if matched_users:
        logger.info(
            "Book %s of user %s matched %s other user(s)", book.id, owner_id, len(matched_users)
        )
    return BookAddition(book=book, new_matches=len(matched_users), notifications=deliveries)


__all__ = ["BookAddition", "add_book"]
