"""Source adapter: parses QML or JavaScript text into a SyntaxNode tree."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from lark import Lark
from lark.exceptions import (
    LarkError,
    UnexpectedCharacters,
    UnexpectedEOF,
    UnexpectedInput,
    UnexpectedToken,
    VisitError,
)

from ..ast.nodes import SyntaxNode
from ..errors import QmlSyntaxError
from .builder import TreeBuilder

__all__ = ["MODES", "ParseResult", "parse_source", "mode_for_path"]

_GRAMMAR = Path(__file__).with_name("qml.lark")

MODES = {"qml": "ui_program", "javascript": "program"}
_SCRIPT_SUFFIXES = {".js", ".mjs"}


@dataclass(frozen=True, slots=True)
class ParseResult:
    root: Optional[SyntaxNode]
    error: Optional[str]
    source: str

    @property
    def ok(self) -> bool:
        return self.root is not None


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        _GRAMMAR.read_text(encoding="utf-8"),
        parser="lalr",
        lexer="contextual",
        start=list(MODES.values()),
        maybe_placeholders=True,
        propagate_positions=False,
        transformer=TreeBuilder(),
    )


def mode_for_path(path: Optional[str]) -> str:
    if path and Path(path).suffix.lower() in _SCRIPT_SUFFIXES:
        return "javascript"
    return "qml"


def _describe(exc: UnexpectedInput, text: str) -> str:
    line = getattr(exc, "line", -1)
    if isinstance(exc, UnexpectedEOF) or not isinstance(line, int) or line < 1:
        line, column = _line_column(text, len(text))
        return f"{line}:{column}: unexpected end of input"
    if isinstance(exc, UnexpectedToken):
        if exc.token.type == "$END":
            what = "unexpected end of input"
        else:
            what = f"unexpected token {str(exc.token)!r}"
    elif isinstance(exc, UnexpectedCharacters):
        what = f"unexpected character {exc.char!r}"
    else:
        what = "syntax error"
    return f"{exc.line}:{exc.column}: {what}"


def _line_column(text: str, offset: int) -> tuple:
    line = text.count("\n", 0, offset) + 1
    column = offset - (text.rfind("\n", 0, offset) + 1) + 1
    return line, column


def parse_source(text: str, mode: str = "qml") -> ParseResult:
    """Parse ``text``; on failure ``root`` is ``None`` and ``error`` says why."""
    try:
        start = MODES[mode]
    except KeyError:
        raise ValueError(f"unknown parse mode: {mode!r}") from None
    try:
        root = _parser().parse(text, start=start)
    except UnexpectedInput as exc:
        return ParseResult(None, _describe(exc, text), text)
    except (QmlSyntaxError, VisitError) as exc:
        inner = exc.orig_exc if isinstance(exc, VisitError) else exc
        if not isinstance(inner, QmlSyntaxError):
            raise
        offset = (inner.context or {}).get("offset", 0)
        line, column = _line_column(text, offset)
        return ParseResult(None, f"{line}:{column}: {inner.message}", text)
    except LarkError as exc:
        return ParseResult(None, f"1:1: {exc}", text)
    return ParseResult(root, None, text)
