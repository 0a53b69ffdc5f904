"""Unit tests for path id parsing."""

import pytest

from documents_api.domains.documents.entities import parse_document_id


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("1", 1),
        ("42", 42),
        ("007", 7),
        ("12abc", 12),
        ("  5", 5),
        ("-3", -3),
        ("+8", 8),
        ("3.9", 3),
    ],
)
def test_leading_integer_is_parsed(raw: str, expected: int) -> None:
    assert parse_document_id(raw) == expected


@pytest.mark.parametrize(
    "raw", ["", "abc", "NaN", "-", "x12", " ", "\u0661", "\u0663\u0664", "\uff11"]
)
def test_no_leading_integer_returns_none(raw: str) -> None:
    assert parse_document_id(raw) is None
