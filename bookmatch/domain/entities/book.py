"""Domain entity representing a book owned by a user."""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass
from datetime import datetime

_WHITESPACE = re.compile(r"\s+")


def normalize_book_field(value: str) -> str:
    """Return the canonical form of a title or author used for matching.

    Two books are the same book when both normalized fields are equal: the
    text is NFKC-normalized, whitespace runs collapse to a single space and
    the result is case-folded.
    """

    normalized = unicodedata.normalize("NFKC", value or "")
    normalized = _WHITESPACE.sub(" ", normalized).strip()
    return normalized.casefold()


@dataclass(frozen=True)
class BookKey:
    """Canonical identity of a book across owners."""

    title: str
    author: str

    @classmethod
    def of(cls, title: str, author: str) -> "BookKey":
        return cls(title=normalize_book_field(title), author=normalize_book_field(author))


@dataclass
class Book:
    """A copy of a book in a user's inventory."""

    id: int | None
    user_id: int
    title: str
    author: str
    genre: str | None = None
    created_at: datetime | None = None

    @property
    def key(self) -> BookKey:
        return BookKey.of(self.title, self.author)


@dataclass(frozen=True)
class CommonBook:
    """Title and author of a book two users share."""

    title: str
    author: str


__all__ = ["Book", "BookKey", "CommonBook", "normalize_book_field"]
