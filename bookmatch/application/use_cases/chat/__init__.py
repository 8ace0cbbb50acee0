"""Use cases for chatting inside a room."""

from .relay_message import MAX_MESSAGE_LENGTH, MessageBroadcaster, MessageRelay

__all__ = ["MAX_MESSAGE_LENGTH", "MessageBroadcaster", "MessageRelay"]
