"""Domain entity describing a match between two book owners."""

from __future__ import annotations

from dataclasses import dataclass, field

from .book import CommonBook


@dataclass
class BookMatch:
    """Another user sharing at least one book with the querying user."""

    matched_user_id: int
    username: str
    email: str
    common_books: list[CommonBook] = field(default_factory=list)
    match_count: int = 0

    def add(self, book: CommonBook) -> None:
        self.common_books.append(book)
        self.match_count += 1


__all__ = ["BookMatch"]
