"""Common validation helpers for book use cases."""

from bookmatch.domain.entities import BookKey
from bookmatch.domain.exceptions import InvalidRequestError

MAX_TITLE_LENGTH = 255
MAX_AUTHOR_LENGTH = 255
MAX_GENRE_LENGTH = 100


def clean_book_fields(
    title: str | None, author: str | None, genre: str | None
) -> tuple[str, str, str | None]:
    """Return stripped book fields or raise ``InvalidRequestError``."""

    title = (title or "").strip()
    author = (author or "").strip()
    genre = (genre or "").strip() or None

    if not title or not author:
        raise InvalidRequestError("Title and author are required")
    key = BookKey.of(title, author)
    if (
        max(len(title), len(key.title)) > MAX_TITLE_LENGTH
        or max(len(author), len(key.author)) > MAX_AUTHOR_LENGTH
    ):
        raise InvalidRequestError("Title and author must be at most 255 characters")
    if genre is not None and len(genre) > MAX_GENRE_LENGTH:
        raise InvalidRequestError("Genre must be at most 100 characters")
    return title, author, genre
