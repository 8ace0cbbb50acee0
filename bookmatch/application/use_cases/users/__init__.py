"""Use cases for managing users."""

from .authenticate_user import AuthenticationStatus, authenticate_user
from .register_user import MIN_PASSWORD_LENGTH, register_user

__all__ = [
    "AuthenticationStatus",
    "MIN_PASSWORD_LENGTH",
    "authenticate_user",
    "register_user",
]
