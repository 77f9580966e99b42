"""Error definitions for qmltrace."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional

E_SOURCE_UNAVAILABLE = "E_SOURCE_UNAVAILABLE"
E_SYNTAX = "E_SYNTAX"
E_DEPTH_EXCEEDED = "E_DEPTH_EXCEEDED"
E_INTERNAL = "E_INTERNAL"


@dataclass
class TraceError(Exception):
    code: str
    message: str
    context: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.code}: {self.message}" + (
            f" | ctx={self.context}" if self.context else ""
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context or {},
        }


class SourceUnavailableError(TraceError):
    def __init__(
        self, message: str, context: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(E_SOURCE_UNAVAILABLE, message, context)


class QmlSyntaxError(TraceError):
    def __init__(
        self, message: str, context: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(E_SYNTAX, message, context)


def internal_error(
    message: str, context: Optional[Dict[str, Any]] = None
) -> TraceError:
    return TraceError(code=E_INTERNAL, message=message, context=context)


__all__ = [
    "TraceError",
    "SourceUnavailableError",
    "QmlSyntaxError",
    "internal_error",
    "E_SOURCE_UNAVAILABLE",
    "E_SYNTAX",
    "E_DEPTH_EXCEEDED",
    "E_INTERNAL",
]
