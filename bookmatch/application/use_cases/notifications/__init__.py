"""Public helpers for emitting and managing notifications."""

from .dispatcher import NotificationDispatcher, NotificationSink
from .events import (
    MESSAGE_PREVIEW_LENGTH,
    chat_link,
    message_preview,
    notify_chat_opened,
    notify_new_match,
    notify_new_message,
)
from .inbox import (
    count_unread_notifications,
    delete_notification,
    delete_read_notifications,
    list_notifications,
    mark_all_notifications_read,
    mark_notification_read,
)

__all__ = [
    "MESSAGE_PREVIEW_LENGTH",
    "NotificationDispatcher",
    "NotificationSink",
    "chat_link",
    "count_unread_notifications",
    "delete_notification",
    "delete_read_notifications",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
    "message_preview",
    "notify_chat_opened",
    "notify_new_match",
    "notify_new_message",
]
