"""Use case for registering users."""

from sqlalchemy.orm import Session

from bookmatch.domain.entities import User
from bookmatch.domain.exceptions import DuplicateUserError, InvalidRequestError
from bookmatch.infrastructure.repositories import UserRepository
from bookmatch.infrastructure.security import get_password_hash
from bookmatch.utils import now_in_app_timezone

MIN_PASSWORD_LENGTH = 6


def register_user(session: Session, *, username: str, email: str, password: str) -> User:
    """Create a new user ensuring unique usernames and email addresses."""

    username = (username or "").strip()
    email = (email or "").strip().lower()
    if not username:
        raise InvalidRequestError("Username is required")
    if len(password or "") < MIN_PASSWORD_LENGTH:
        raise InvalidRequestError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
        )

    repository = UserRepository(session)
    if repository.exists_with_username_or_email(username=username, email=email):
        raise DuplicateUserError("Username or email is already in use")

    user = User(
        id=None,
        username=username,
        email=email,
        password=get_password_hash(password),
        created_at=now_in_app_timezone(),
    )
    return repository.create(user)
