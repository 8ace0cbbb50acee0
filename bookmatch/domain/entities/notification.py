"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

NOTIFICATION_TYPE_NEW_MATCH = "new_match"
NOTIFICATION_TYPE_CHAT_OPENED = "chat_opened"
NOTIFICATION_TYPE_NEW_MESSAGE = "new_message"

NOTIFICATION_TYPES = frozenset(
    {
        NOTIFICATION_TYPE_NEW_MATCH,
        NOTIFICATION_TYPE_CHAT_OPENED,
        NOTIFICATION_TYPE_NEW_MESSAGE,
    }
)


@dataclass
class Notification:
    """Information message delivered to a specific user."""

    id: int | None
    user_id: int
    type: str
    title: str
    content: str
    related_id: int | None = None
    link: str | None = None
    is_read: bool = False
    created_at: datetime | None = None


@dataclass(frozen=True)
class NotificationDelivery:
    """Outcome of dispatching a notification.

    The stored row is the source of truth; ``delivered`` only reports whether
    a live push was handed to at least one open session of the recipient.
    """

    notification: Notification
    delivered: bool

    @property
    def persisted(self) -> bool:
        return self.notification.id is not None


__all__ = [
    "Notification",
    "NotificationDelivery",
    "NOTIFICATION_TYPE_NEW_MATCH",
    "NOTIFICATION_TYPE_CHAT_OPENED",
    "NOTIFICATION_TYPE_NEW_MESSAGE",
    "NOTIFICATION_TYPES",
]
