"""Use cases letting a user read and tidy up their notifications."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from bookmatch.domain.entities import Notification
from bookmatch.domain.exceptions import NotFoundError
from bookmatch.infrastructure.repositories import NotificationRepository


def list_notifications(
    session: Session, *, user_id: int, limit: int | None = 50
) -> tuple[Sequence[Notification], int]:
    """Return the latest notifications of ``user_id`` and their unread total."""

    repository = NotificationRepository(session)
    return repository.list_for_user(user_id, limit=limit), repository.count_unread(user_id)


def count_unread_notifications(session: Session, *, user_id: int) -> int:
    return NotificationRepository(session).count_unread(user_id)


def mark_notification_read(session: Session, *, notification_id: int, user_id: int) -> None:
    updated = NotificationRepository(session).mark_as_read([notification_id], user_id=user_id)
    if not updated:
        raise NotFoundError("Notification not found")


def mark_all_notifications_read(session: Session, *, user_id: int) -> int:
    return NotificationRepository(session).mark_all_as_read(user_id)


def delete_notification(session: Session, *, notification_id: int, user_id: int) -> None:
    if not NotificationRepository(session).delete(notification_id, user_id=user_id):
        raise NotFoundError("Notification not found")


def delete_read_notifications(session: Session, *, user_id: int) -> int:
    return NotificationRepository(session).delete_read(user_id)


__all__ = [
    "count_unread_notifications",
    "delete_notification",
    "delete_read_notifications",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
]
