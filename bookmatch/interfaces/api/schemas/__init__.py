from .base import CamelModel, MessageResponse
from .book import BookCreate, BookCreateResponse, BookListResponse, BookRead
from .match import (
    ChatMessageRead,
    ChatRoomCreate,
    ChatRoomDetailResponse,
    ChatRoomListResponse,
    ChatRoomRead,
    ChatRoomResponse,
    ChatRoomSummaryRead,
    CommonBookRead,
    MatchListResponse,
    MatchRead,
)
from .notification import NotificationListResponse, NotificationRead, UnreadCountResponse
from .user import (
    AuthResponse,
    CurrentUserResponse,
    LoginRequest,
    RegisterRequest,
    UserRead,
    UserWithBooksRead,
)

__all__ = [
    "AuthResponse",
    "BookCreate",
    "BookCreateResponse",
    "BookListResponse",
    "BookRead",
    "CamelModel",
    "ChatMessageRead",
    "ChatRoomCreate",
    "ChatRoomDetailResponse",
    "ChatRoomListResponse",
    "ChatRoomRead",
    "ChatRoomResponse",
    "ChatRoomSummaryRead",
    "CommonBookRead",
    "CurrentUserResponse",
    "LoginRequest",
    "MatchListResponse",
    "MatchRead",
    "MessageResponse",
    "NotificationListResponse",
    "NotificationRead",
    "RegisterRequest",
    "UnreadCountResponse",
    "UserRead",
    "UserWithBooksRead",
]
