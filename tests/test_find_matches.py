"""Tests for ranking the users who share books."""

from __future__ import annotations

from bookmatch.application.use_cases.matching import MatchFinder


def test_user_without_books_has_no_matches(db_session, make_user):
    alice = make_user("alice")

    assert MatchFinder(db_session).find(alice.id) == []


def test_matches_are_symmetric(db_session, make_user, make_book):
    alice = make_user("alice")
    bob = make_user("bob")
    make_book(alice, "Dune", "Frank Herbert")
    make_book(bob, "Dune", "Frank Herbert")

    finder = MatchFinder(db_session)
    [alice_match] = finder.find(alice.id)
    [bob_match] = finder.find(bob.id)

    assert alice_match.matched_user_id == bob.id
    assert bob_match.matched_user_id == alice.id
    assert alice_match.match_count == bob_match.match_count == 1


def test_matches_aggregate_per_user_and_sort_by_count(db_session, make_user, make_book):
    alice = make_user("alice")
    bob = make_user("bob")
    carol = make_user("carol")
    make_book(alice, "Dune", "Frank Herbert")
    make_book(alice, "Emma", "Jane Austen")
    make_book(alice, "Ulysses", "James Joyce")
    make_book(bob, "dune", "frank herbert")
    make_book(carol, "Emma", "Jane Austen")
    make_book(carol, "Ulysses", "James Joyce")
    make_book(carol, "Beloved", "Toni Morrison")

    matches = MatchFinder(db_session).find(alice.id)

    assert [match.matched_user_id for match in matches] == [carol.id, bob.id]
    assert matches[0].match_count == 2
    assert {(book.title, book.author) for book in matches[0].common_books} == {
        ("Emma", "Jane Austen"),
        ("Ulysses", "James Joyce"),
    }
    assert matches[1].username == "bob"
    assert matches[1].email == "bob@example.com"
    # Titles are reported as the matched user spelled them.
    assert matches[1].common_books[0].title == "dune"


def test_ties_keep_first_seen_order(db_session, make_user, make_book):
    alice = make_user("alice")
    bob = make_user("bob")
    carol = make_user("carol")
    make_book(alice, "Dune", "Frank Herbert")
    make_book(alice, "Emma", "Jane Austen")
    make_book(carol, "Dune", "Frank Herbert")
    make_book(bob, "Emma", "Jane Austen")

    matches = MatchFinder(db_session).find(alice.id)

    assert [match.matched_user_id for match in matches] == [carol.id, bob.id]


def test_books_with_other_authors_do_not_match(db_session, make_user, make_book):
    alice = make_user("alice")
    bob = make_user("bob")
    make_book(alice, "Dune", "Frank Herbert")
    make_book(bob, "Dune", "Brian Herbert")

    assert MatchFinder(db_session).find(alice.id) == []
