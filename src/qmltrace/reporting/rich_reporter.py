from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from ..trace.records import Event, TraceRecord, render
from .base import Reporter, get_verbosity

_EVENT_STYLE = {
    Event.ENTER: "bold green",
    Event.EXIT: "dim green",
    Event.LITERAL: "yellow",
    Event.TRUNCATED: "bold red",
}


class RichReporter(Reporter):
    def __init__(
        self,
        console: Console | None = None,
        message_console: Console | None = None,
    ):
        self.console = console or Console(highlight=False, soft_wrap=True)
        self.message_console = message_console or Console(
            stderr=True, highlight=False, soft_wrap=False
        )

    # Trace --------------------------------------------------------------------
    def trace(self, record: TraceRecord) -> None:
        # Source text goes through Text, never through markup parsing.
        line = Text(render(record), style=_EVENT_STYLE.get(record.event, ""))
        self.console.print(line)

    # Messaging / sections ------------------------------------------------------
    def status(self, message: str, **fields: Any) -> None:
        self.message_console.print(f"[green]INFO[/]: {escape(message)}")

    def verbose(self, message: str, *, level: int = 1, **fields: Any) -> None:
        if get_verbosity() < level:
            return
        self.message_console.print(f"[cyan]VERB{level}[/]: {escape(message)}")

    def error(self, message: str, **fields: Any) -> None:
        self.message_console.print(f"[bold red]ERROR[/]: {escape(message)}")

    def warning(self, message: str, **fields: Any) -> None:
        self.message_console.print(f"[yellow]WARN[/]: {escape(message)}")

    def section(self, title: str) -> None:
        self.message_console.rule(f"{escape(title)}")

    def flush(self) -> None:
        self.console.file.flush()
