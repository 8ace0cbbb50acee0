"""Endpoints for registering and authenticating readers."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from bookmatch.application.use_cases.books import list_books
from bookmatch.application.use_cases.users import (
    AuthenticationStatus,
    authenticate_user,
    register_user,
)
from bookmatch.domain.entities import User
from bookmatch.domain.exceptions import BookmatchError
from bookmatch.infrastructure.database import get_db
from bookmatch.infrastructure.security import create_access_token
from bookmatch.interfaces.api.dependencies import get_current_user
from bookmatch.interfaces.api.errors import to_http_exception
from bookmatch.interfaces.api.schemas import (
    AuthResponse,
    BookRead,
    CurrentUserResponse,
    LoginRequest,
    RegisterRequest,
    UserRead,
    UserWithBooksRead,
)

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)


def _invalid_credentials() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid email or password",
        headers={"WWW-Authenticate": "Bearer"},
    )


def _auth_response(user: User) -> AuthResponse:
    return AuthResponse(user=UserRead.model_validate(user), token=create_access_token(user.id))


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(payload: RegisterRequest, db: Session = Depends(get_db)) -> AuthResponse:
    """Create an account and return it together with a fresh token."""

    try:
        user = register_user(
            db,
            username=payload.username,
            email=payload.email,
            password=payload.password,
        )
    except BookmatchError as exc:
        raise to_http_exception(exc) from exc
    logger.info("Registered user %s", user.id)
    return _auth_response(user)


@router.post("/login", response_model=AuthResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)) -> AuthResponse:
    user, auth_status = authenticate_user(db, payload.email, payload.password)
    if auth_status is not AuthenticationStatus.SUCCESS or user is None:
        raise _invalid_credentials()
    return _auth_response(user)


# Form-encoded variant used by the interactive OpenAPI docs.
@router.post("/token")
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db),
) -> dict[str, str]:
    user, auth_status = authenticate_user(db, form_data.username, form_data.password)
    if auth_status is not AuthenticationStatus.SUCCESS or user is None:
        raise _invalid_credentials()
    return {"access_token": create_access_token(user.id), "token_type": "bearer"}


@router.get("/me", response_model=CurrentUserResponse)
def read_current_user(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> CurrentUserResponse:
    books = list_books(db, owner_id=current_user.id)
    return CurrentUserResponse(
        user=UserWithBooksRead(
            id=current_user.id,
            username=current_user.username,
            email=current_user.email,
            books=[BookRead.model_validate(book) for book in books],
        )
    )
