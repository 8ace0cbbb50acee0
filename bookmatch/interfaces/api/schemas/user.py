"""User and authentication schemas."""

from pydantic import EmailStr, Field

from .base import CamelModel
from .book import BookRead


class UserRead(CamelModel):
    id: int
    username: str
    email: str


class UserWithBooksRead(UserRead):
    books: list[BookRead] = Field(default_factory=list)


class RegisterRequest(CamelModel):
    username: str = Field(..., min_length=1, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=1)


class LoginRequest(CamelModel):
    email: EmailStr
    password: str


class AuthResponse(CamelModel):
    user: UserRead
    token: str


class CurrentUserResponse(CamelModel):
    user: UserWithBooksRead


__all__ = [
    "AuthResponse",
    "CurrentUserResponse",
    "LoginRequest",
    "RegisterRequest",
    "UserRead",
    "UserWithBooksRead",
]
