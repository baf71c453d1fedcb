"""Repair hints, one synthesizer per diagnostic category.

Every synthesizer is total: when its heuristic does not apply it falls back
to a generic sentence instead of failing. All slicing is by character.
"""

from __future__ import annotations

import re

from .context import ErrorContext


_CLOSING_AFTER_COMMA_RE = re.compile(r"^(?P<prefix>.*),\s*(?P<bracket>[\]}])$")
_QUOTED_RE = re.compile(r'"([^"]*)"')
_NUMBER_CHARS = frozenset("0123456789-+.")

VALID_ESCAPES = '\\" \\\\ \\/ \\b \\f \\n \\r \\t \\uXXXX'


def trailing_comma_hint(ctx: ErrorContext) -> str:
    trimmed = ctx.current_line().rstrip()
    m = _CLOSING_AFTER_COMMA_RE.match(trimmed)
    if m:
        return f"change `{trimmed}` to `{m.group('prefix').rstrip()}{m.group('bracket')}`"
    if trimmed.endswith(","):
        return f"change `{trimmed}` to `{trimmed.rstrip(',')}`"
    return "remove the trailing comma"


def missing_comma_hint(ctx: ErrorContext) -> str:
    prev = ctx.previous_line()
    if prev is not None:
        trimmed = prev.rstrip()
        if trimmed and not trimmed.endswith((",", "[", "{")):
            return f"add `,` after `{trimmed.strip()[:32]}`"
    return "add comma between items"


def missing_colon_hint(ctx: ErrorContext) -> str:
    key = _last_quoted(ctx.before_column())
    if key is None:
        return "add `:` after the key"
    return f'change `"{key}"` to `"{key}": `'


def key_hint(ctx: ErrorContext) -> str:
    tokens = ctx.through_column().split()
    token = tokens[-1] if tokens else ""
    key = _strip_non_word(token.rstrip(":"))
    if not key:
        return "wrap the key in quotes"
    return f'change `{key}` to `"{key}": `'


def eof_hint(ctx: ErrorContext) -> str:
    src = ctx.source
    msgs: list[str] = []
    for opening, closing in (("{", "}"), ("[", "]")):
        missing = src.count(opening) - src.count(closing)
        if missing > 0:
            msgs.append(f"{missing} missing `{closing}`")
    if not msgs:
        return "add missing closing bracket"
    return ", ".join(msgs)


def escape_hint(ctx: ErrorContext) -> str:
    for value in _QUOTED_RE.findall(ctx.current_line()):
        if ":\\" in value:
            doubled = value.replace("\\", "\\\\")
            return f'change `"{value}"` to `"{doubled}"`'

    window = ctx.window(5, 5)
    if any(esc in window for esc in ("\\n", "\\t", "\\r")):
        return "this escape is already correct, check your quotes"
    if "\\" in window:
        return "escape the backslash as `\\\\`"
    return f"invalid escape - valid ones: {VALID_ESCAPES}"


def number_hint(ctx: ErrorContext) -> str:
    window = ctx.window(7, 9)
    # Index of the error character inside the window.
    at = min(max(ctx.column - 1, 0), 7)
    start = _number_run_start(window, at)
    token = ""
    for ch in window[start:]:
        if ch not in _NUMBER_CHARS:
            break
        token += ch

    if not token:
        return "fix number format"
    if len(token) > 1 and token[0] == "0" and token[1].isdigit():
        fixed = token.lstrip("0")
        if not fixed or fixed[0] == ".":
            fixed = "0" + fixed
        return f"change `{token}` to `{fixed}`"
    if token.endswith("."):
        return f"change `{token}` to `{token}0`"
    if token.startswith("+"):
        return f"change `{token}` to `{token[1:]}`"
    return "fix number format"


def control_character_hint(ctx: ErrorContext) -> str:
    return "replace tabs/newlines with `\\t` or `\\n`"


def _last_quoted(text: str) -> str | None:
    end = text.rfind('"')
    if end < 0:
        return None
    start = text.rfind('"', 0, end)
    if start < 0:
        return None
    return text[start + 1 : end]


def _strip_non_word(token: str) -> str:
    start, end = 0, len(token)
    while start < end and not _is_word(token[start]):
        start += 1
    while end > start and not _is_word(token[end - 1]):
        end -= 1
    return token[start:end]


def _is_word(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


def _number_run_start(window: str, at: int) -> int:
    """Start of the number-like run containing, or ending just before, `at`."""
    if at < len(window) and window[at] in _NUMBER_CHARS:
        end = at
    elif 0 < at <= len(window) and window[at - 1] in _NUMBER_CHARS:
        end = at - 1
    else:
        return 0
    while end > 0 and window[end - 1] in _NUMBER_CHARS:
        end -= 1
    return end
