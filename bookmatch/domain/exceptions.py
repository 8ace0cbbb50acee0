"""Errors raised by the matching, chat and notification use cases."""

from __future__ import annotations


class BookmatchError(ValueError):
    """Base class for expected, request-scoped failures."""


class InvalidRequestError(BookmatchError):
    """The caller supplied missing or contradictory input."""


class NotFoundError(BookmatchError):
    """The referenced resource does not exist or is not visible to the caller."""


class PermissionDeniedError(BookmatchError):
    """The caller is not allowed to act on the referenced resource."""


class DuplicateBookError(BookmatchError):
    """The owner already registered a book with the same title and author."""


class DuplicateUserError(BookmatchError):
    """The username or email address is already taken."""


__all__ = [
    "BookmatchError",
    "InvalidRequestError",
    "NotFoundError",
    "PermissionDeniedError",
    "DuplicateBookError",
    "DuplicateUserError",
]
