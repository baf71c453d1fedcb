from __future__ import annotations

import json

import pytest

from ferrite import FailureKind, InvalidEscape, TrailingComma, UnexpectedEof, diagnose_failure
from ferrite.scanner import ParseFailure, failure_from_json_error, scan


@pytest.mark.parametrize(
    ("src", "message", "line", "column"),
    [
        ("[1,]", "trailing comma", 1, 4),
        ("[1 2]", "expected comma or `]`", 1, 4),
        ('{"a": 1 "b": 2}', "expected comma or `}`", 1, 9),
        ('{"a" 1}', "expected colon", 1, 6),
        ("{abc: 1}", "key must be a string", 1, 5),
        ('"a\\qb"', "invalid escape", 1, 4),
        ('"\\u12g4"', "invalid escape", 1, 6),
        ('"\\ud800"', "lone surrogate in hex escape", 1, 8),
        ("01", "invalid number", 1, 2),
        ("1.", "invalid number", 1, 3),
        ("-", "invalid number", 1, 2),
        ("+1", "invalid number", 1, 1),
        ("1e400", "number out of range", 1, 6),
        ("trux", "expected ident", 1, 4),
        ("[1] x", "trailing characters", 1, 5),
        ('["a\tb"]', "control character (\\u0000-\\u001F) found while parsing a string", 1, 4),
        ('{\n  "a": 1,\n}', "trailing comma", 3, 1),
        ("[" * 129 + "]" * 129, "recursion limit exceeded", 1, 129),
    ],
)
def test_syntax_failures(src: str, message: str, line: int, column: int) -> None:
    failure = scan(src)
    assert failure == ParseFailure(line=line, column=column, message=message, kind=FailureKind.SYNTAX)


@pytest.mark.parametrize(
    ("src", "message", "line", "column"),
    [
        ("", "EOF while parsing a value", 1, 1),
        ("tru", "EOF while parsing a value", 1, 4),
        ('"abc', "EOF while parsing a string", 1, 5),
        ("[1, 2", "EOF while parsing a list", 1, 6),
        ('{"a": 1\n', "EOF while parsing an object", 2, 1),
    ],
)
def test_eof_failures(src: str, message: str, line: int, column: int) -> None:
    assert scan(src) == ParseFailure(line=line, column=column, message=message, kind=FailureKind.EOF)


@pytest.mark.parametrize(
    "src",
    [
        "0",
        "-0.5e+10",
        '"\\ud83d\\ude00 \\n \\u00e9"',
        ' {"a": [1, {"b": null}], "c": "日本"} \n',
        "[" * 128 + "]" * 128,
    ],
)
def test_valid_documents(src: str) -> None:
    assert scan(src) is None


def test_raw_message_includes_position() -> None:
    assert str(scan("[1,]")) == "trailing comma at line 1 column 4"


def _json_error(src: str) -> json.JSONDecodeError:
    with pytest.raises(json.JSONDecodeError) as e:
        json.loads(src)
    return e.value


def test_stdlib_error_at_end_is_eof() -> None:
    failure = failure_from_json_error(_json_error('{"a": 1'))
    assert failure.kind is FailureKind.EOF
    err = diagnose_failure('{"a": 1', failure)
    assert isinstance(err, UnexpectedEof)
    assert err.help == "1 missing `}`"


def test_stdlib_error_after_comma_is_trailing_comma() -> None:
    failure = failure_from_json_error(_json_error("[1,]"))
    assert isinstance(diagnose_failure("[1,]", failure), TrailingComma)


def test_stdlib_invalid_escape() -> None:
    src = '"C:\\docs"'
    failure = failure_from_json_error(_json_error(src))
    assert failure.kind is FailureKind.SYNTAX
    err = diagnose_failure(src, failure)
    assert isinstance(err, InvalidEscape)
    assert err.help == 'change `"C:\\docs"` to `"C:\\\\docs"`'
