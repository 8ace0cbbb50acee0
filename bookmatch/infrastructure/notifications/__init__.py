"""Realtime notification helpers for the infrastructure layer."""

from .manager import ConnectionManager, notification_manager, room_group, user_group
from .publisher import (
    NEW_NOTIFICATION_EVENT,
    NotificationPublisher,
    notification_publisher,
    serialize_notification,
)
from .realtime import (
    NEW_MESSAGE_EVENT,
    RoomEventPublisher,
    room_event_publisher,
    serialize_message,
)

__all__ = [
    "ConnectionManager",
    "notification_manager",
    "room_group",
    "user_group",
    "NEW_NOTIFICATION_EVENT",
    "NotificationPublisher",
    "notification_publisher",
    "serialize_notification",
    "NEW_MESSAGE_EVENT",
    "RoomEventPublisher",
    "room_event_publisher",
    "serialize_message",
]
