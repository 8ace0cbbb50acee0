"""Persist notifications and push them to the recipient's live sessions."""

from __future__ import annotations

import logging
from typing import Protocol

from sqlalchemy.orm import Session

from bookmatch.domain.entities import NOTIFICATION_TYPES, Notification, NotificationDelivery
from bookmatch.domain.exceptions import InvalidRequestError
from bookmatch.infrastructure.repositories import NotificationRepository
from bookmatch.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


class NotificationSink(Protocol):
    """Anything able to push a stored notification to its recipient."""

    def dispatch(self, notification: Notification) -> int:
        """Return the number of live sessions the notification was sent to."""


class NotificationDispatcher:
    """Create notifications and deliver them on a best-effort basis.

    The row is committed before any push is attempted, so a recipient that is
    offline (or a push that fails) still sees the notification on its next
    fetch. Push failures are logged and never raised.
    """

    def __init__(self, session: Session, publisher: NotificationSink) -> None:
        self._repository = NotificationRepository(session)
        self._publisher = publisher

    def notify(
        self,
        recipient_id: int,
        notification_type: str,
        title: str,
        content: str,
        *,
        related_id: int | None = None,
        link: str | None = None,
    ) -> NotificationDelivery:
        if notification_type not in NOTIFICATION_TYPES:
            raise InvalidRequestError(f"Unknown notification type '{notification_type}'")

        saved = self._repository.create(
            Notification(
                id=None,
                user_id=recipient_id,
                type=notification_type,
                title=title,
                content=content,
                related_id=related_id,
                link=link,
                is_read=False,
                created_at=now_in_app_timezone(),
            )
        )

        try:
            delivered = self._publisher.dispatch(saved) > 0
        except Exception:
            logger.warning(
                "Live delivery of notification %s to user %s failed",
                saved.id,
                recipient_id,
                exc_info=True,
            )
            delivered = False

        if delivered:
            logger.info("Notification %s (%s) pushed to user %s", saved.id, saved.type, recipient_id)
        else:
            logger.debug("Notification %s stored for offline user %s", saved.id, recipient_id)
        return NotificationDelivery(notification=saved, delivered=delivered)


__all__ = ["NotificationDispatcher", "NotificationSink"]
