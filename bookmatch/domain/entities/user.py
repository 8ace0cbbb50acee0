"""Domain entity representing a user."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

UNKNOWN_USER_LABEL = "a user"


@dataclass
class User:
    """Core attributes describing an application user."""

    id: int | None
    username: str
    email: str
    password: str
    created_at: datetime | None = None


@dataclass(frozen=True)
class UserSummary:
    """Public profile of a user, safe to share with other users."""

    id: int
    username: str
    email: str


def display_name(user: User | UserSummary | None) -> str:
    """Return the label used in notification texts for ``user``."""

    if user is None or not user.username:
        return UNKNOWN_USER_LABEL
    return user.username


__all__ = ["User", "UserSummary", "UNKNOWN_USER_LABEL", "display_name"]
