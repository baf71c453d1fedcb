from __future__ import annotations

import logging
from pathlib import Path

from .classify import classify
from .context import resolve
from .errors import HINTED, Category, JsonError, JsonSyntaxError
from .scanner import ParseFailure, scan


logger = logging.getLogger(__name__)


def diagnose_failure(src: str, failure: ParseFailure, *, file: str = "<memory>") -> JsonError:
    """Turn a parser's first failure on `src` into a categorized diagnostic."""
    ctx = resolve(src, failure.line, failure.column, file=file)
    raw = str(failure)
    category, help_text = classify(raw, failure.kind, ctx)
    if category is Category.SYNTAX_ERROR:
        return JsonSyntaxError(source=src, span=ctx.span, raw_message=raw)
    if help_text is None:
        raise RuntimeError(f"category {category.value} produced no help text")
    return HINTED[category](source=src, span=ctx.span, help=help_text)


def diagnose(src: str, *, file: str = "<memory>") -> JsonError | None:
    failure = scan(src)
    if failure is None:
        return None
    return diagnose_failure(src, failure, file=file)


def validate_json(src: str, *, file: str = "<memory>") -> None:
    logger.debug("validating %s (%d chars)", file, len(src))
    err = diagnose(src, file=file)
    if err is not None:
        raise err


def validate_file(path: str | Path) -> None:
    p = Path(path).expanduser()
    src = p.read_text(encoding="utf-8")
    validate_json(src, file=str(p))
