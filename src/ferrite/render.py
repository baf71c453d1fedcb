from __future__ import annotations

from .errors import JsonError


def render_diagnostic(err: JsonError, *, context_lines: int = 2) -> str:
    """Plain-text report: header, location, source excerpt with a caret, help."""
    pos = err.span.start
    lines = err.source.split("\n")
    target = min(max(pos.line, 1), len(lines))
    first = max(target - context_lines, 1)
    last = min(target + context_lines, len(lines))
    width = len(str(last))
    pad = " " * width

    out = [f"error[{err.code}]: {err.message}"]
    out.append(f"{pad}--> {err.span.format()}")
    out.append(f"{pad} |")
    for no in range(first, last + 1):
        text = lines[no - 1]
        out.append(f"{str(no).rjust(width)} | {text}".rstrip())
        if no == target:
            out.append(f"{pad} | {_caret_prefix(text, pos.column)}^ {err.label}")
    help_text = getattr(err, "help", None)
    if help_text:
        out.append(f"{pad} |")
        out.append(f"{pad} = help: {help_text}")
    return "\n".join(out)


def _caret_prefix(text: str, column: int) -> str:
    # Keep tabs so the caret lines up with the excerpt above it.
    before = text[: max(column - 1, 0)]
    return "".join(ch if ch == "\t" else " " for ch in before)
