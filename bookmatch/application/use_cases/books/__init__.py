"""Use cases for managing a user's books."""

from .add_book import BookAddition, add_book
from .delete_book import delete_book
from .list_books import list_books

__all__ = ["BookAddition", "add_book", "delete_book", "list_books"]
