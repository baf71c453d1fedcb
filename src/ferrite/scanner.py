"""Strict JSON recognizer reporting the first failure.

The scanner builds no value tree; it only walks the document far enough to
say where and why it stops being JSON. Messages use a fixed vocabulary that
`ferrite.classify` dispatches on, so changing a message here can move a
failure into a different category.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum


RECURSION_LIMIT = 128

_WHITESPACE = " \t\n\r"
_ESCAPES = '"\\/bfnrt'
_HEX = "0123456789abcdefABCDEF"
_DIGITS = frozenset("0123456789")
_LITERALS = {"t": "true", "f": "false", "n": "null"}
_BARE_STOP = _WHITESPACE + ':,{}[]"'


class FailureKind(str, Enum):
    EOF = "eof"
    SYNTAX = "syntax"
    DATA = "data"
    IO = "io"


@dataclass(frozen=True, slots=True)
class ParseFailure:
    """First failure reported by a JSON parser; line/column are 1-based characters."""

    line: int
    column: int
    message: str
    kind: FailureKind = FailureKind.SYNTAX

    def __str__(self) -> str:
        return f"{self.message} at line {self.line} column {self.column}"


class _Failed(Exception):
    def __init__(self, failure: ParseFailure) -> None:
        super().__init__(str(failure))
        self.failure = failure


@dataclass(slots=True)
class _Cursor:
    src: str
    i: int = 0
    line: int = 1
    col: int = 1

    def eof(self) -> bool:
        return self.i >= len(self.src)

    def peek(self, n: int = 0) -> str:
        j = self.i + n
        if j >= len(self.src):
            return ""
        return self.src[j]

    def advance(self, n: int = 1) -> None:
        for _ in range(n):
            if self.eof():
                return
            ch = self.src[self.i]
            self.i += 1
            if ch == "\n":
                self.line += 1
                self.col = 1
            else:
                self.col += 1

    def skip_whitespace(self) -> None:
        while not self.eof() and self.peek() in _WHITESPACE:
            self.advance()

    def fail(self, message: str, kind: FailureKind = FailureKind.SYNTAX) -> _Failed:
        return _Failed(ParseFailure(line=self.line, column=self.col, message=message, kind=kind))

    def fail_eof(self, what: str) -> _Failed:
        return self.fail(f"EOF while parsing {what}", FailureKind.EOF)


def scan(src: str) -> ParseFailure | None:
    """Return the first failure in `src`, or None when it is a JSON document."""
    cur = _Cursor(src=src)
    try:
        cur.skip_whitespace()
        _value(cur, depth=0)
        cur.skip_whitespace()
        if not cur.eof():
            raise cur.fail("trailing characters")
    except _Failed as e:
        return e.failure
    return None


def failure_from_json_error(err: json.JSONDecodeError) -> ParseFailure:
    """Adapt a stdlib decoder error to the failure record."""
    doc = err.doc or ""
    at_end = err.pos >= len(doc.rstrip())
    return ParseFailure(
        line=err.lineno,
        column=err.colno,
        message=err.msg,
        kind=FailureKind.EOF if at_end else FailureKind.SYNTAX,
    )


def _value(cur: _Cursor, *, depth: int) -> None:
    ch = cur.peek()
    if ch == "":
        raise cur.fail_eof("a value")
    if ch == "{":
        _object(cur, depth=depth + 1)
    elif ch == "[":
        _array(cur, depth=depth + 1)
    elif ch == '"':
        _string(cur)
    elif ch in _DIGITS or ch == "-":
        _number(cur)
    elif ch == "+" and cur.peek(1) in _DIGITS:
        raise cur.fail("invalid number")
    elif ch in _LITERALS:
        _literal(cur, _LITERALS[ch])
    else:
        raise cur.fail("expected value")


def _enter(cur: _Cursor, depth: int) -> None:
    if depth > RECURSION_LIMIT:
        raise cur.fail("recursion limit exceeded")
    cur.advance()
    cur.skip_whitespace()


def _array(cur: _Cursor, *, depth: int) -> None:
    _enter(cur, depth)
    if cur.peek() == "]":
        cur.advance()
        return
    while True:
        _value(cur, depth=depth)
        cur.skip_whitespace()
        ch = cur.peek()
        if ch == "":
            raise cur.fail_eof("a list")
        if ch == "]":
            cur.advance()
            return
        if ch != ",":
            raise cur.fail("expected comma or `]`")
        cur.advance()
        cur.skip_whitespace()
        if cur.peek() == "]":
            raise cur.fail("trailing comma")


def _object(cur: _Cursor, *, depth: int) -> None:
    _enter(cur, depth)
    if cur.peek() == "}":
        cur.advance()
        return
    while True:
        _key(cur)
        cur.skip_whitespace()
        ch = cur.peek()
        if ch == "":
            raise cur.fail_eof("an object")
        if ch != ":":
            raise cur.fail("expected colon")
        cur.advance()
        cur.skip_whitespace()
        _value(cur, depth=depth)
        cur.skip_whitespace()
        ch = cur.peek()
        if ch == "":
            raise cur.fail_eof("an object")
        if ch == "}":
            cur.advance()
            return
        if ch != ",":
            raise cur.fail("expected comma or `}`")
        cur.advance()
        cur.skip_whitespace()
        if cur.peek() == "}":
            raise cur.fail("trailing comma")


def _key(cur: _Cursor) -> None:
    ch = cur.peek()
    if ch == "":
        raise cur.fail_eof("an object")
    if ch == '"':
        _string(cur)
        return
    # Report just past the bare key so the whole word is on the failing line.
    while not cur.eof() and cur.peek() not in _BARE_STOP:
        cur.advance()
    raise cur.fail("key must be a string")


def _string(cur: _Cursor) -> None:
    cur.advance()
    while True:
        ch = cur.peek()
        if ch == "":
            raise cur.fail_eof("a string")
        if ch == '"':
            cur.advance()
            return
        if ch < " ":
            raise cur.fail("control character (\\u0000-\\u001F) found while parsing a string")
        if ch == "\\":
            cur.advance()
            _escape(cur)
            continue
        cur.advance()


def _escape(cur: _Cursor) -> None:
    ch = cur.peek()
    if ch == "":
        raise cur.fail_eof("a string")
    if ch in _ESCAPES:
        cur.advance()
        return
    if ch != "u":
        raise cur.fail("invalid escape")
    code = _hex4(cur)
    if 0xDC00 <= code <= 0xDFFF:
        raise cur.fail("lone surrogate in hex escape")
    if 0xD800 <= code <= 0xDBFF:
        if cur.peek() != "\\" or cur.peek(1) != "u":
            raise cur.fail("lone surrogate in hex escape")
        cur.advance()
        if not 0xDC00 <= _hex4(cur) <= 0xDFFF:
            raise cur.fail("lone surrogate in hex escape")


def _hex4(cur: _Cursor) -> int:
    """Consume `u` and four hex digits; the cursor must sit on the `u`."""
    cur.advance()
    digits = ""
    for _ in range(4):
        ch = cur.peek()
        if ch == "":
            raise cur.fail_eof("a string")
        if ch not in _HEX:
            raise cur.fail("invalid escape")
        digits += ch
        cur.advance()
    return int(digits, 16)


def _number(cur: _Cursor) -> None:
    start = cur.i
    if cur.peek() == "-":
        cur.advance()
    if cur.peek() == "0":
        cur.advance()
        if cur.peek() in _DIGITS:
            raise cur.fail("invalid number")
    else:
        _digits(cur)

    if cur.peek() == ".":
        cur.advance()
        _digits(cur)
    if cur.peek() in ("e", "E"):
        cur.advance()
        if cur.peek() in ("+", "-"):
            cur.advance()
        _digits(cur)

    if float(cur.src[start : cur.i]) in (float("inf"), float("-inf")):
        raise cur.fail("number out of range")


def _digits(cur: _Cursor) -> None:
    if cur.peek() not in _DIGITS:
        raise cur.fail("invalid number")
    while cur.peek() in _DIGITS:
        cur.advance()


def _literal(cur: _Cursor, word: str) -> None:
    for expected in word:
        ch = cur.peek()
        if ch == "":
            raise cur.fail_eof("a value")
        if ch != expected:
            raise cur.fail("expected ident")
        cur.advance()
