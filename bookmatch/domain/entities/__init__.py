"""Domain entities exposed by the application."""

from .book import Book, BookKey, CommonBook, normalize_book_field
from .chat_room import ChatRoom, ChatRoomParticipant, pair_key
from .match import BookMatch
from .message import Message
from .notification import (
    NOTIFICATION_TYPE_CHAT_OPENED,
    NOTIFICATION_TYPE_NEW_MATCH,
    NOTIFICATION_TYPE_NEW_MESSAGE,
    NOTIFICATION_TYPES,
    Notification,
    NotificationDelivery,
)
from .user import UNKNOWN_USER_LABEL, User, UserSummary, display_name

__all__ = [
    "Book",
    "BookKey",
    "BookMatch",
    "ChatRoom",
    "ChatRoomParticipant",
    "CommonBook",
    "Message",
    "Notification",
    "NotificationDelivery",
    "NOTIFICATION_TYPE_CHAT_OPENED",
    "NOTIFICATION_TYPE_NEW_MATCH",
    "NOTIFICATION_TYPE_NEW_MESSAGE",
    "NOTIFICATION_TYPES",
    "UNKNOWN_USER_LABEL",
    "User",
    "UserSummary",
    "display_name",
    "normalize_book_field",
    "pair_key",
]
