from __future__ import annotations

from .api import diagnose, diagnose_failure, validate_file, validate_json
from .classify import classify
from .context import ErrorContext, resolve
from .errors import (
    Category,
    HintedError,
    InvalidControlCharacter,
    InvalidEscape,
    InvalidNumber,
    JsonError,
    JsonSyntaxError,
    KeyMustBeString,
    MissingColon,
    MissingComma,
    TrailingComma,
    UnexpectedEof,
)
from .render import render_diagnostic
from .scanner import FailureKind, ParseFailure, failure_from_json_error, scan
from .spans import Position, Span

__all__ = [
    "Category",
    "ErrorContext",
    "FailureKind",
    "HintedError",
    "InvalidControlCharacter",
    "InvalidEscape",
    "InvalidNumber",
    "JsonError",
    "JsonSyntaxError",
    "KeyMustBeString",
    "MissingColon",
    "MissingComma",
    "ParseFailure",
    "Position",
    "Span",
    "TrailingComma",
    "UnexpectedEof",
    "classify",
    "diagnose",
    "diagnose_failure",
    "failure_from_json_error",
    "render_diagnostic",
    "resolve",
    "scan",
    "validate_file",
    "validate_json",
]
