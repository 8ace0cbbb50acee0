"""Find the other users who own at least one of the same books."""

from __future__ import annotations

from sqlalchemy.orm import Session

from bookmatch.domain.entities import BookMatch, CommonBook
from bookmatch.infrastructure.repositories import BookRepository


class MatchFinder:
    """Rank the users sharing books with a given user.

    Matching uses the canonical book identity (normalized title and author),
    so "Dune" by "Frank Herbert" matches "dune" by "frank  herbert".
    """

    def __init__(self, session: Session) -> None:
        self._books = BookRepository(session)

    def find(self, user_id: int) -> list[BookMatch]:
        owned_books = self._books.list_for_user(user_id)
        if not owned_books:
            return []

        matches: dict[int, BookMatch] = {}
        for owned in owned_books:
            copies = self._books.list_copies_owned_by_others(owned.key, exclude_user_id=user_id)
            for copy, owner in copies:
                match = matches.get(owner.id)
                if match is None:
                    match = BookMatch(
                        matched_user_id=owner.id,
                        username=owner.username,
                        email=owner.email,
                    )
                    matches[owner.id] = match
                match.add(CommonBook(title=copy.title, author=copy.author))

        # sorted() is stable: ties keep the order in which users were first seen.
        return sorted(matches.values(), key=lambda match: match.match_count, reverse=True)


__all__ = ["MatchFinder"]
