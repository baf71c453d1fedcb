from __future__ import annotations

from dataclasses import dataclass

from .spans import Position, Span, byte_index


@dataclass(frozen=True, slots=True)
class ErrorContext:
    """Everything the hint synthesizers may look at for one failure.

    `line` and `column` are the parser-reported 1-based position, the column
    counted in characters. `span.offset` is the only byte-based quantity.
    """

    source: str
    line: int
    column: int
    lines: tuple[str, ...]
    span: Span

    def current_line(self) -> str:
        idx = self.line - 1
        if 0 <= idx < len(self.lines):
            return self.lines[idx]
        return ""

    def previous_line(self) -> str | None:
        idx = self.line - 2
        if 0 <= idx < len(self.lines):
            return self.lines[idx]
        return None

    def before_column(self) -> str:
        """The failing line up to, not including, the error character."""
        return self.current_line()[: max(self.column - 1, 0)]

    def through_column(self) -> str:
        """The failing line up to and including the error character."""
        return self.current_line()[: max(self.column, 0)]

    def window(self, before: int, after: int) -> str:
        """Characters around the error character, clamped to the line."""
        line = self.current_line()
        at = max(self.column - 1, 0)
        return line[max(at - before, 0) : at + after + 1]


def resolve(source: str, line: int, column: int, *, file: str = "<memory>") -> ErrorContext:
    lines = tuple(source.split("\n"))
    line = max(line, 1)
    column = max(column, 0)

    offset = 0
    for current in lines[: line - 1]:
        offset += len(current.encode("utf-8")) + 1
    if line <= len(lines):
        offset += byte_index(lines[line - 1], column)
    offset = min(offset, len(source.encode("utf-8")))

    start = Position(offset=offset, line=line, column=column)
    return ErrorContext(
        source=source,
        line=line,
        column=column,
        lines=lines,
        span=Span(file=file, start=start),
    )
