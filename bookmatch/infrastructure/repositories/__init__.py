"""Repository implementations for infrastructure layer."""

from .book_repository import BookRepository
from .chat_room_repository import ChatRoomRepository, DuplicateRoomError
from .message_repository import MessageRepository
from .notification_repository import NotificationRepository
from .user_repository import UserRepository

__all__ = [
    "BookRepository",
    "ChatRoomRepository",
    "DuplicateRoomError",
    "MessageRepository",
    "NotificationRepository",
    "UserRepository",
]
