from __future__ import annotations

import pytest

from ferrite import Category, FailureKind, classify
from ferrite.classify import RULES
from ferrite.context import resolve


# Error at the `2`; nothing before it looks like a trailing comma.
_NEUTRAL = resolve("[1 2]", 1, 4)


def test_rule_order() -> None:
    assert [category for category, _ in RULES] == [
        Category.TRAILING_COMMA,
        Category.MISSING_COMMA,
        Category.KEY_MUST_BE_STRING,
        Category.MISSING_COLON,
        Category.CONTROL_CHARACTER,
        Category.INVALID_ESCAPE,
        Category.INVALID_NUMBER,
        Category.UNEXPECTED_EOF,
    ]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("expected comma or colon", Category.MISSING_COMMA),
        ("key must be a string, expected colon", Category.KEY_MUST_BE_STRING),
        ("Expected Colon after key", Category.MISSING_COLON),
        ("control character in escape", Category.CONTROL_CHARACTER),
        ("invalid escape in number", Category.INVALID_ESCAPE),
        ("number ended at EOF", Category.INVALID_NUMBER),
        ("unexpected EOF", Category.UNEXPECTED_EOF),
        ("trailing comma at line 1 column 4", Category.TRAILING_COMMA),
    ],
)
def test_overlapping_messages_take_first_rule(raw: str, expected: Category) -> None:
    category, help_text = classify(raw, FailureKind.SYNTAX, _NEUTRAL)
    assert category is expected
    assert help_text


def test_eof_kind_without_eof_in_message() -> None:
    category, help_text = classify("something odd", FailureKind.EOF, resolve("[[1", 1, 4))
    assert category is Category.UNEXPECTED_EOF
    assert help_text == "2 missing `]`"


@pytest.mark.parametrize("kind", [FailureKind.SYNTAX, FailureKind.DATA, FailureKind.IO])
def test_unmatched_message_falls_back(kind: FailureKind) -> None:
    assert classify("missing colon", kind, _NEUTRAL) == (Category.SYNTAX_ERROR, None)


def test_comma_before_error_beats_message() -> None:
    ctx = resolve("[1, x]", 1, 5)
    category, help_text = classify("expected comma or `]`", FailureKind.SYNTAX, ctx)
    assert category is Category.TRAILING_COMMA
    assert help_text == "remove the trailing comma"


def test_classification_is_repeatable() -> None:
    first = classify("expected comma or `]` at line 1 column 4", FailureKind.SYNTAX, _NEUTRAL)
    assert classify("expected comma or `]` at line 1 column 4", FailureKind.SYNTAX, _NEUTRAL) == first
