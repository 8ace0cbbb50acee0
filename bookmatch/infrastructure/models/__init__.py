"""ORM models used by the application infrastructure."""

from .book import BookModel
from .chat_room import ChatRoomMatchedBookModel, ChatRoomModel, ChatRoomParticipantModel
from .message import MessageModel
from .notification import NotificationModel
from .user import UserModel

__all__ = [
    "BookModel",
    "ChatRoomModel",
    "ChatRoomMatchedBookModel",
    "ChatRoomParticipantModel",
    "MessageModel",
    "NotificationModel",
    "UserModel",
]
