"""Persistence layer for user data."""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from bookmatch.domain.entities import User, UserSummary
from bookmatch.domain.exceptions import DuplicateUserError
from bookmatch.infrastructure.models import UserModel
from bookmatch.utils import ensure_app_naive_datetime, ensure_app_timezone, now_in_app_timezone


class UserRepository:
    """Provide lookup and creation of :class:`User` entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> User | None:
        model = self.session.query(UserModel).filter(UserModel.email == email).first()
        return self._to_entity(model) if model else None

    def exists_with_username_or_email(self, *, username: str, email: str) -> bool:
        query = self.session.query(UserModel.id).filter(
            (UserModel.username == username) | (UserModel.email == email)
        )
        return query.first() is not None

    def get_summary(self, user_id: int) -> UserSummary | None:
        model = self.session.get(UserModel, user_id)
        return self.to_summary(model) if model else None

    def create(self, user: User) -> User:
        model = UserModel(
            username=user.username,
            email=user.email,
            password=user.password,
            created_at=ensure_app_naive_datetime(user.created_at or now_in_app_timezone()),
        )
        self.session.add(model)
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            raise DuplicateUserError("Username or email is already in use") from exc
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def to_summary(model: UserModel) -> UserSummary:
        return UserSummary(id=model.id, username=model.username, email=model.email)

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            username=model.username,
            email=model.email,
            password=model.password,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["UserRepository"]
