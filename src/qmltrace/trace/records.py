from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from ..ast.nodes import Kind

__all__ = ["Event", "TraceRecord", "render"]


class Event(Enum):
    ENTER = "enter"
    EXIT = "exit"
    LITERAL = "literal"
    TRUNCATED = "truncated"


@dataclass(frozen=True, slots=True)
class TraceRecord:
    """One unit of trace output.

    Node events (``ENTER``, ``EXIT``, ``TRUNCATED``) carry ``kind``; literal
    events carry the source ``text`` and its ``offset``. The separator that
    joins qualified-id segments has no source position, so its ``offset`` is
    ``None``.
    """

    event: Event
    depth: int
    kind: Optional[Kind] = None
    text: Optional[str] = None
    offset: Optional[int] = None

    @classmethod
    def enter(cls, kind: Kind, depth: int) -> "TraceRecord":
        return cls(Event.ENTER, depth, kind=kind)

    @classmethod
    def exit(cls, kind: Kind, depth: int) -> "TraceRecord":
        return cls(Event.EXIT, depth, kind=kind)

    @classmethod
    def literal(
        cls, text: str, depth: int, offset: Optional[int] = None
    ) -> "TraceRecord":
        return cls(Event.LITERAL, depth, text=text, offset=offset)

    @classmethod
    def truncated(cls, kind: Kind, depth: int) -> "TraceRecord":
        return cls(Event.TRUNCATED, depth, kind=kind)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"event": self.event.value, "depth": self.depth}
        if self.kind is not None:
            out["kind"] = self.kind.display_name
        if self.event is Event.LITERAL:
            out["text"] = self.text
            out["offset"] = self.offset
        return out


def render(record: TraceRecord) -> str:
    """Reference one-line rendering of a record."""
    indent = "  " * record.depth
    if record.event is Event.ENTER:
        return f"{indent}+ {record.kind.display_name}"
    if record.event is Event.EXIT:
        return f"{indent}- {record.kind.display_name}"
    if record.event is Event.TRUNCATED:
        return f"{indent}! {record.kind.display_name} (truncated)"
    if record.offset is None:
        # synthetic text has no source span and prints bare
        return f"{indent}{record.text}"
    return f'{indent}"{record.text}"'
