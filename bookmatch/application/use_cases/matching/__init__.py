"""Use cases for matching readers and opening chat rooms between them."""

from .chat_rooms import ensure_participant, get_chat_room, list_chat_rooms
from .find_matches import MatchFinder
from .resolve_room import RoomResolution, RoomResolver

__all__ = [
    "MatchFinder",
    "RoomResolution",
    "RoomResolver",
    "ensure_participant",
    "get_chat_room",
    "list_chat_rooms",
]
