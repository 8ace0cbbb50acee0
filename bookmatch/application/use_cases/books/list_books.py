"""Use case for listing a user's books."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from bookmatch.domain.entities import Book
from bookmatch.infrastructure.repositories import BookRepository


def list_books(session: Session, *, owner_id: int) -> Sequence[Book]:
    """Return the books of ``owner_id``, most recently added first."""

    return BookRepository(session).list_for_user(owner_id, newest_first=True)
