"""Helpers to broadcast chat events to the sessions joined to a room."""

from __future__ import annotations

from typing import Any

from bookmatch.domain.entities import Message

from .manager import ConnectionManager, notification_manager, room_group

NEW_MESSAGE_EVENT = "new-message"


class RoomEventPublisher:
    """Dispatch structured realtime events to every session in a room."""

    def __init__(self, manager: ConnectionManager) -> None:
        self._manager = manager

    def broadcast_message(self, message: Message) -> int:
        """Schedule a ``new-message`` event for the message's room."""

        payload = {
            "roomId": message.chat_room_id,
            "message": serialize_message(message),
        }
        return self.broadcast(message.chat_room_id, event_type=NEW_MESSAGE_EVENT, payload=payload)

    def broadcast(self, room_id: int, *, event_type: str, payload: Any) -> int:
        group = room_group(room_id)
        live_sessions = self._manager.connection_count(group)
        if not live_sessions:
            return 0
        self._manager.schedule_send(group, {"type": event_type, "data": payload})
        return live_sessions


def serialize_message(message: Message) -> dict[str, Any]:
    """Return a JSON-serializable representation of ``message``."""

    sender = message.sender
    return {
        "id": message.id,
        "chatRoomId": message.chat_room_id,
        "senderId": message.sender_id,
        "content": message.content,
        "createdAt": message.created_at.isoformat() if message.created_at else None,
        "sender": {"id": sender.id, "username": sender.username} if sender else None,
    }


room_event_publisher = RoomEventPublisher(notification_manager)


__all__ = [
    "NEW_MESSAGE_EVENT",
    "RoomEventPublisher",
    "room_event_publisher",
    "serialize_message",
]
