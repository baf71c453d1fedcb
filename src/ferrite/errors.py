from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from .spans import Span


class Category(str, Enum):
    TRAILING_COMMA = "trailing_comma"
    MISSING_COMMA = "missing_comma"
    MISSING_COLON = "missing_colon"
    UNEXPECTED_EOF = "unexpected_eof"
    KEY_MUST_BE_STRING = "key_must_be_string"
    INVALID_ESCAPE = "invalid_escape"
    INVALID_NUMBER = "invalid_number"
    CONTROL_CHARACTER = "control_character"
    SYNTAX_ERROR = "syntax_error"


@dataclass(slots=True)
class JsonError(Exception):
    """Base of all diagnostics: a categorized first failure in a document.

    Subclasses fix `category`, `summary` and `label`; only the hinted ones
    carry a `help` field.
    """

    category: ClassVar[Category]
    summary: ClassVar[str]
    label: ClassVar[str]

    source: str
    span: Span

    @property
    def code(self) -> str:
        return f"ferrite::{self.category.value}"

    @property
    def message(self) -> str:
        return self.summary

    def __str__(self) -> str:
        return f"{self.span.format()}: {self.message}"

    def to_dict(self) -> dict[str, object]:
        return {
            "code": self.category.value,
            "message": self.message,
            "file": self.span.file,
            "line": self.span.start.line,
            "column": self.span.start.column,
            "offset": self.span.offset,
            "length": self.span.length,
            "label": self.label,
            "help": getattr(self, "help", None),
        }


@dataclass(slots=True)
class HintedError(JsonError):
    help: str

    def __str__(self) -> str:
        return f"{self.span.format()}: {self.message}\nhelp: {self.help}"


@dataclass(slots=True)
class TrailingComma(HintedError):
    category = Category.TRAILING_COMMA
    summary = "trailing comma"
    label = "remove this comma"


@dataclass(slots=True)
class MissingComma(HintedError):
    category = Category.MISSING_COMMA
    summary = "expected `,` between items"
    label = "add comma here"


@dataclass(slots=True)
class MissingColon(HintedError):
    category = Category.MISSING_COLON
    summary = "expected `:`"
    label = "add `:` here"


@dataclass(slots=True)
class UnexpectedEof(HintedError):
    category = Category.UNEXPECTED_EOF
    summary = "unexpected end of file"
    label = "file ended here"


@dataclass(slots=True)
class KeyMustBeString(HintedError):
    category = Category.KEY_MUST_BE_STRING
    summary = "expected quoted string as object key"
    label = "add quotes around this"


@dataclass(slots=True)
class InvalidEscape(HintedError):
    category = Category.INVALID_ESCAPE
    summary = "invalid escape sequence"
    label = "invalid escape"


@dataclass(slots=True)
class InvalidNumber(HintedError):
    category = Category.INVALID_NUMBER
    summary = "invalid number"
    label = "malformed number"


@dataclass(slots=True)
class InvalidControlCharacter(HintedError):
    category = Category.CONTROL_CHARACTER
    summary = "invalid character in string"
    label = "escape this character"


@dataclass(slots=True)
class JsonSyntaxError(JsonError):
    """Fallback: no heuristic matched, the parser's own message is shown."""

    category = Category.SYNTAX_ERROR
    summary = "syntax error"
    label = "error here"

    raw_message: str = ""

    @property
    def message(self) -> str:
        return self.raw_message


HINTED: dict[Category, type[HintedError]] = {
    cls.category: cls
    for cls in (
        TrailingComma,
        MissingComma,
        MissingColon,
        UnexpectedEof,
        KeyMustBeString,
        InvalidEscape,
        InvalidNumber,
        InvalidControlCharacter,
    )
}
