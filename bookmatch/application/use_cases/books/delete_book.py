"""Use case for removing a book from a user's inventory."""

from sqlalchemy.orm import Session

from bookmatch.domain.exceptions import NotFoundError
from bookmatch.infrastructure.repositories import BookRepository


def delete_book(session: Session, *, book_id: int, owner_id: int) -> None:
    """Delete the book when it belongs to ``owner_id``.

    Chat rooms keep existing; only their matched-book rows pointing at this
    copy disappear with it.
    """

    if not BookRepository(session).delete_for_owner(book_id, user_id=owner_id):
        raise NotFoundError("Book not found or not owned by you")
