"""Endpoints for managing the authenticated user's books."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from bookmatch.application.use_cases.books import add_book, delete_book, list_books
from bookmatch.application.use_cases.notifications import NotificationDispatcher
from bookmatch.domain.entities import User
from bookmatch.domain.exceptions import BookmatchError
from bookmatch.infrastructure.database import get_db
from bookmatch.interfaces.api.dependencies import get_current_user, get_notification_dispatcher
from bookmatch.interfaces.api.errors import to_http_exception
from bookmatch.interfaces.api.schemas import (
    BookCreate,
    BookCreateResponse,
    BookListResponse,
    BookRead,
    MessageResponse,
)

router = APIRouter(prefix="/books", tags=["books"])


@router.get("", response_model=BookListResponse)
def read_books(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> BookListResponse:
    books = list_books(db, owner_id=current_user.id)
    return BookListResponse(books=[BookRead.model_validate(book) for book in books])


@router.post("", response_model=BookCreateResponse, status_code=status.HTTP_201_CREATED)
def create_book(
    payload: BookCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
) -> BookCreateResponse:
    """Add a book and notify every reader who already owns it."""

    try:
        addition = add_book(
            db,
            owner_id=current_user.id,
            title=payload.title,
            author=payload.author,
            genre=payload.genre,
            dispatcher=dispatcher,
        )
    except BookmatchError as exc:
        raise to_http_exception(exc) from exc
    return BookCreateResponse(
        message="Book added successfully",
        book=BookRead.model_validate(addition.book),
        new_matches=addition.new_matches,
    )


@router.delete("/{book_id}", response_model=MessageResponse)
def remove_book(
    book_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MessageResponse:
    try:
        delete_book(db, book_id=book_id, owner_id=current_user.id)
    except BookmatchError as exc:
        raise to_http_exception(exc) from exc
    return MessageResponse(message="Book deleted successfully")
