"""FastAPI dependency utilities."""

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from bookmatch.application.use_cases.chat import MessageRelay
from bookmatch.application.use_cases.matching import MatchFinder, RoomResolver
from bookmatch.application.use_cases.notifications import NotificationDispatcher
from bookmatch.domain.entities import User
from bookmatch.infrastructure.database import get_db
from bookmatch.infrastructure.notifications import notification_publisher, room_event_publisher
from bookmatch.infrastructure.repositories import UserRepository
from bookmatch.infrastructure.security import user_id_from_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/auth/token")


def _credentials_exception(detail: str = "Invalid credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def resolve_current_user(token: str, db: Session) -> User:
    """Resolve the authenticated user for the provided token."""

    try:
        user_id = user_id_from_token(token)
    except ValueError as exc:
        raise _credentials_exception() from exc

    user = UserRepository(db).get(user_id)
    if user is None:
        raise _credentials_exception("User not found")
    return user


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Return the authenticated user from the provided token."""

    return resolve_current_user(token, db)


def get_notification_dispatcher(db: Session = Depends(get_db)) -> NotificationDispatcher:
    return NotificationDispatcher(db, notification_publisher)


def get_match_finder(db: Session = Depends(get_db)) -> MatchFinder:
    return MatchFinder(db)


def get_room_resolver(
    db: Session = Depends(get_db),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
) -> RoomResolver:
    return RoomResolver(db, dispatcher)


def build_message_relay(db: Session) -> MessageRelay:
    """Wire a :class:`MessageRelay` to the shared realtime publishers."""

    return MessageRelay(db, room_event_publisher, NotificationDispatcher(db, notification_publisher))
