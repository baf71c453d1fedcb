from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """A concrete source position.

    Offsets are 0-based byte offsets into the UTF-8 encoded source;
    line/column are 1-based and count characters, for user-facing messages.
    """

    offset: int
    line: int
    column: int


@dataclass(frozen=True, slots=True)
class Span:
    """A highlight of `length` bytes starting at `start` in a single file."""

    file: str
    start: Position
    length: int = 1

    @property
    def offset(self) -> int:
        return self.start.offset

    @property
    def end(self) -> int:
        return self.start.offset + self.length

    def format(self) -> str:
        return f"{self.file}:{self.start.line}:{self.start.column}"


def byte_index(text: str, column: int) -> int:
    """Byte index of the `column`-th character (1-based) of `text`.

    Column 0 maps to 0; columns past the last character map to the byte
    length of `text`.
    """
    if column <= 0:
        return 0
    return len(text[: column - 1].encode("utf-8"))


def locate(source: str, offset: int) -> Position:
    """Inverse of offset resolution: byte offset -> 1-based line/column."""
    data = source.encode("utf-8")
    offset = max(0, min(offset, len(data)))
    before = data[:offset]
    line_start = before.rfind(b"\n") + 1
    line = before.count(b"\n") + 1
    column = len(before[line_start:].decode("utf-8", errors="replace")) + 1
    return Position(offset=offset, line=line, column=column)
