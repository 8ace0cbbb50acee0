"""Persistence helpers for book entities."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from bookmatch.domain.entities import Book, BookKey, UserSummary
from bookmatch.domain.exceptions import DuplicateBookError
from bookmatch.infrastructure.models import BookModel
from bookmatch.utils import ensure_app_naive_datetime, ensure_app_timezone, now_in_app_timezone

from .user_repository import UserRepository


class BookRepository:
    """Provide CRUD and identity lookups for :class:`Book` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_user(self, user_id: int, *, newest_first: bool = False) -> Sequence[Book]:
        query = self.session.query(BookModel).filter(BookModel.user_id == user_id)
        if newest_first:
            query = query.order_by(BookModel.created_at.desc(), BookModel.id.desc())
        else:
            query = query.order_by(BookModel.created_at.asc(), BookModel.id.asc())
        return [self._to_entity(model) for model in query.all()]

    def list_copies_owned_by_others(
        self, key: BookKey, *, exclude_user_id: int
    ) -> list[tuple[Book, UserSummary]]:
        """Return other users' copies of the book identified by ``key``."""

        query = (
            self.session.query(BookModel)
            .filter(
                BookModel.title_key == key.title,
                BookModel.author_key == key.author,
                BookModel.user_id != exclude_user_id,
            )
            .order_by(BookModel.id.asc())
        )
        return [
            (self._to_entity(model), UserRepository.to_summary(model.user))
            for model in query.all()
        ]

    def create(self, book: Book) -> Book:
        key = book.key
        model = BookModel(
            user_id=book.user_id,
            title=book.title,
            author=book.author,
            genre=book.genre,
            title_key=key.title,
            author_key=key.author,
            created_at=ensure_app_naive_datetime(book.created_at or now_in_app_timezone()),
        )
        self.session.add(model)
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            raise DuplicateBookError("You have already added this book") from exc
        self.session.refresh(model)
        return self._to_entity(model)

    def delete_for_owner(self, book_id: int, *, user_id: int) -> bool:
        deleted = (
            self.session.query(BookModel)
            .filter(BookModel.id == book_id, BookModel.user_id == user_id)
            .delete(synchronize_session=False)
        )
        self.session.commit()
        return bool(deleted)

    @staticmethod
    def _to_entity(model: BookModel) -> Book:
        return Book(
            id=model.id,
            user_id=model.user_id,
            title=model.title,
            author=model.author,
            genre=model.genre,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["BookRepository"]
