"""Endpoints for finding matches and opening chat rooms."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from bookmatch.application.use_cases.matching import (
    MatchFinder,
    RoomResolver,
    get_chat_room,
    list_chat_rooms,
)
from bookmatch.domain.entities import User
from bookmatch.domain.exceptions import BookmatchError
from bookmatch.infrastructure.database import get_db
from bookmatch.interfaces.api.dependencies import (
    get_current_user,
    get_match_finder,
    get_room_resolver,
)
from bookmatch.interfaces.api.errors import to_http_exception
from bookmatch.interfaces.api.schemas import (
    ChatRoomCreate,
    ChatRoomDetailResponse,
    ChatRoomListResponse,
    ChatRoomRead,
    ChatRoomResponse,
    ChatRoomSummaryRead,
    MatchListResponse,
    MatchRead,
)

router = APIRouter(prefix="/match", tags=["match"])


@router.get("/find", response_model=MatchListResponse)
def find_matches(
    current_user: User = Depends(get_current_user),
    finder: MatchFinder = Depends(get_match_finder),
) -> MatchListResponse:
    """Return every reader sharing at least one book, best matches first."""

    matches = finder.find(current_user.id)
    return MatchListResponse(matches=[MatchRead.model_validate(match) for match in matches])


@router.post("/chat-room", response_model=ChatRoomResponse)
def open_chat_room(
    payload: ChatRoomCreate,
    current_user: User = Depends(get_current_user),
    resolver: RoomResolver = Depends(get_room_resolver),
) -> ChatRoomResponse:
    """Return the room shared with the target user, creating it when needed."""

    try:
        resolution = resolver.resolve(current_user.id, payload.target_user_id)
    except BookmatchError as exc:
        raise to_http_exception(exc) from exc
    return ChatRoomResponse(
        message="Chat room created" if resolution.created else "Chat room already exists",
        created=resolution.created,
        chat_room=ChatRoomRead.model_validate(resolution.room),
    )


@router.get("/chat-room/{room_id}", response_model=ChatRoomDetailResponse)
def read_chat_room(
    room_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ChatRoomDetailResponse:
    try:
        room = get_chat_room(db, room_id=room_id, user_id=current_user.id)
    except BookmatchError as exc:
        raise to_http_exception(exc) from exc
    return ChatRoomDetailResponse(chat_room=ChatRoomRead.model_validate(room))


@router.get("/chat-rooms", response_model=ChatRoomListResponse)
def read_chat_rooms(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ChatRoomListResponse:
    rooms = list_chat_rooms(db, user_id=current_user.id)
    return ChatRoomListResponse(
        chat_rooms=[ChatRoomSummaryRead.model_validate(room) for room in rooms]
    )
