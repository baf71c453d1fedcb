"""Map a parser failure onto a diagnostic category and its repair hint.

Rules are tried in order and the first match wins. The trailing-comma rule
looks at the source text as well as the message because parser wording for
that mistake varies; it must stay first.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from . import hints
from .context import ErrorContext
from .errors import Category
from .scanner import FailureKind


logger = logging.getLogger(__name__)

Predicate = Callable[[str, FailureKind, ErrorContext], bool]


def _ends_with_comma(ctx: ErrorContext) -> bool:
    return ctx.before_column().rstrip().endswith(",")


RULES: tuple[tuple[Category, Predicate], ...] = (
    (
        Category.TRAILING_COMMA,
        lambda msg, kind, ctx: "trailing comma" in msg or _ends_with_comma(ctx),
    ),
    (Category.MISSING_COMMA, lambda msg, kind, ctx: "expected" in msg and "comma" in msg),
    (Category.KEY_MUST_BE_STRING, lambda msg, kind, ctx: "key must be a string" in msg),
    (Category.MISSING_COLON, lambda msg, kind, ctx: "expected" in msg and "colon" in msg),
    (Category.CONTROL_CHARACTER, lambda msg, kind, ctx: "control character" in msg),
    (Category.INVALID_ESCAPE, lambda msg, kind, ctx: "escape" in msg),
    (Category.INVALID_NUMBER, lambda msg, kind, ctx: "number" in msg),
    (Category.UNEXPECTED_EOF, lambda msg, kind, ctx: "eof" in msg or kind == FailureKind.EOF),
)

HINTS: dict[Category, Callable[[ErrorContext], str]] = {
    Category.TRAILING_COMMA: hints.trailing_comma_hint,
    Category.MISSING_COMMA: hints.missing_comma_hint,
    Category.KEY_MUST_BE_STRING: hints.key_hint,
    Category.MISSING_COLON: hints.missing_colon_hint,
    Category.CONTROL_CHARACTER: hints.control_character_hint,
    Category.INVALID_ESCAPE: hints.escape_hint,
    Category.INVALID_NUMBER: hints.number_hint,
    Category.UNEXPECTED_EOF: hints.eof_hint,
}


def classify(raw_message: str, kind: FailureKind, ctx: ErrorContext) -> tuple[Category, str | None]:
    """Pick the category for a failure; the fallback carries no help text."""
    lower = raw_message.lower()
    for category, matches in RULES:
        if matches(lower, kind, ctx):
            help_text = HINTS[category](ctx)
            logger.debug("classified %r as %s: %s", raw_message, category.value, help_text)
            return category, help_text
    logger.debug("no rule matched %r, falling back to %s", raw_message, Category.SYNTAX_ERROR.value)
    return Category.SYNTAX_ERROR, None
