from __future__ import annotations

import sys
from typing import Any

from ..trace.records import TraceRecord, render
from .base import Reporter, get_verbosity


class PlainReporter(Reporter):
    """Reference trace lines on ``stream``; diagnostics on ``message_stream``."""

    def __init__(
        self, stream=None, message_stream=None, use_color: bool | None = None
    ):
        self.stream = stream or sys.stdout
        self.message_stream = message_stream or sys.stderr
        self.use_color = (
            use_color
            if use_color is not None
            else getattr(self.message_stream, "isatty", lambda: False)()
        )

    def _c(self, code: str, text: str):
        if not self.use_color:
            return text
        return f"\x1b[{code}m{text}\x1b[0m"

    def trace(self, record: TraceRecord) -> None:
        self.stream.write(render(record) + "\n")

    def status(self, message: str, **fields: Any) -> None:
        prefix = self._c("32", "INFO")
        self.message_stream.write(f"{prefix}: {message}\n")

    def verbose(self, message: str, *, level: int = 1, **fields: Any) -> None:
        if get_verbosity() < level:
            return
        prefix = self._c("36", f"VERB{level}")
        self.message_stream.write(f"{prefix}: {message}\n")

    def error(self, message: str, **fields: Any) -> None:
        prefix = self._c("31", "ERROR")
        self.message_stream.write(f"{prefix}: {message}\n")

    def warning(self, message: str, **fields: Any) -> None:
        prefix = self._c("33", "WARN")
        self.message_stream.write(f"{prefix}: {message}\n")

    def section(self, title: str) -> None:
        self.message_stream.write(f"\n[{title}]\n")

    def flush(self) -> None:
        self.stream.flush()
