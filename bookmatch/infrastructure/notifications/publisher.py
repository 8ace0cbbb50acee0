"""Utility helpers to push notifications to websocket subscribers."""

from __future__ import annotations

from typing import Any

from bookmatch.domain.entities import Notification

from .manager import ConnectionManager, notification_manager, user_group

NEW_NOTIFICATION_EVENT = "new-notification"


class NotificationPublisher:
    """Serialize notifications and schedule their delivery."""

    def __init__(self, manager: ConnectionManager) -> None:
        self._manager = manager

    def dispatch(self, notification: Notification) -> int:
        """Schedule ``notification`` for every live session of its user.

        Returns the number of sessions targeted; zero means the recipient is
        offline and nothing was pushed.
        """

        group = user_group(notification.user_id)
        live_sessions = self._manager.connection_count(group)
        if not live_sessions:
            return 0
        message = {"type": NEW_NOTIFICATION_EVENT, "data": serialize_notification(notification)}
        self._manager.schedule_send(group, message)
        return live_sessions


def serialize_notification(notification: Notification) -> dict[str, Any]:
    """Return the websocket payload representation for ``notification``."""

    return {
        "id": notification.id,
        "userId": notification.user_id,
        "type": notification.type,
        "title": notification.title,
        "content": notification.content,
        "relatedId": notification.related_id,
        "link": notification.link,
        "isRead": notification.is_read,
        "createdAt": notification.created_at.isoformat()
        if notification.created_at
        else None,
    }


notification_publisher = NotificationPublisher(notification_manager)


__all__ = [
    "NEW_NOTIFICATION_EVENT",
    "NotificationPublisher",
    "notification_publisher",
    "serialize_notification",
]
