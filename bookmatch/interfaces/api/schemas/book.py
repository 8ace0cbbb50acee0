"""Pydantic models describing books."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .base import CamelModel


class BookCreate(CamelModel):
    """Payload used to add a book; blank fields are rejected by the use case."""

    title: str | None = None
    author: str | None = None
    genre: str | None = None


class BookRead(CamelModel):
    id: int
    user_id: int
    title: str
    author: str
    genre: str | None = None
    created_at: datetime | None = None


class BookListResponse(CamelModel):
    books: list[BookRead] = Field(default_factory=list)


class BookCreateResponse(CamelModel):
    message: str
    book: BookRead
    new_matches: int


__all__ = ["BookCreate", "BookCreateResponse", "BookListResponse", "BookRead"]
