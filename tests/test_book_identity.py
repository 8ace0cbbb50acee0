"""Tests for the canonical identity used to compare books."""

from __future__ import annotations

import pytest

from bookmatch.application.use_cases.books.validators import clean_book_fields
from bookmatch.domain.entities import BookKey, normalize_book_field
from bookmatch.domain.exceptions import InvalidRequestError


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Dune", "dune"),
        ("  The   Left Hand\tof Darkness ", "the left hand of darkness"),
        ("ＤＵＮＥ", "dune"),
        ("Straße", "strasse"),
        ("", ""),
    ],
)
def test_normalize_book_field(raw, expected):
    assert normalize_book_field(raw) == expected


def test_book_keys_ignore_case_and_spacing():
    assert BookKey.of("Dune", "Frank Herbert") == BookKey.of(" dune ", "FRANK  herbert")
    assert BookKey.of("Dune", "Frank Herbert") != BookKey.of("Dune", "Brian Herbert")


def test_clean_book_fields_strips_values_and_drops_blank_genre():
    assert clean_book_fields("  Dune ", " Frank Herbert", "   ") == ("Dune", "Frank Herbert", None)


@pytest.mark.parametrize(
    ("title", "author", "genre"),
    [
        (None, "Frank Herbert", None),
        ("Dune", "   ", None),
        ("x" * 256, "Frank Herbert", None),
        ("Dune", "Frank Herbert", "g" * 101),
        ("ß" * 200, "Frank Herbert", None),
        ("Dune", "ﬀ" * 200, None),
    ],
)
def test_clean_book_fields_rejects_invalid_values(title, author, genre):
    with pytest.raises(InvalidRequestError):
        clean_book_fields(title, author, genre)


def test_clean_book_fields_accepts_keys_at_the_column_limit():
    title = "ß" * 127

    assert clean_book_fields(title, "Frank Herbert", None)[0] == title
