"""High-level API for qmltrace.

``run_trace`` is what the command line drives: load, parse, traverse, and
stream records to the active reporter. ``trace_source`` and ``trace_lines``
are the side-effect-free helpers used by tests and embedding code.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional

from .errors import E_DEPTH_EXCEEDED, E_SYNTAX
from .logging import get_logger, section
from .parser import ParseResult, mode_for_path, parse_source
from .reporting import get_reporter, get_verbosity
from .source import LoadedSource, load_source
from .trace import DEFAULT_MAX_DEPTH, Event, TraceRecord, render, traverse

__all__ = [
    "MAX_DEPTH_ENV",
    "TraceOptions",
    "TraceResult",
    "resolve_max_depth",
    "trace_source",
    "trace_lines",
    "run_trace",
]

MAX_DEPTH_ENV = "QMLTRACE_MAX_DEPTH"


@dataclass(slots=True)
class TraceOptions:
    path: Path | None = None
    # "auto" picks the mode from the file suffix
    mode: str = "auto"
    max_depth: int | None = None


@dataclass(slots=True)
class TraceResult:
    source: LoadedSource
    parse: ParseResult
    records: int = 0
    truncated: int = 0


def resolve_max_depth(explicit: Optional[int] = None) -> int:
    if explicit is not None:
        return explicit
    raw = os.getenv(MAX_DEPTH_ENV)
    if raw is None or not raw.strip():
        return DEFAULT_MAX_DEPTH
    try:
        value = int(raw)
    except ValueError:
        get_logger().warning(
            f"ignoring {MAX_DEPTH_ENV}={raw!r}: not an integer"
        )
        return DEFAULT_MAX_DEPTH
    if value < 1:
        get_logger().warning(f"ignoring {MAX_DEPTH_ENV}={raw!r}: must be >= 1")
        return DEFAULT_MAX_DEPTH
    return value


def trace_source(
    text: str, mode: str = "qml", *, max_depth: int = DEFAULT_MAX_DEPTH
) -> Iterator[TraceRecord]:
    result = parse_source(text, mode)
    return traverse(result.root, result.source, max_depth=max_depth)


def trace_lines(
    text: str, mode: str = "qml", *, max_depth: int = DEFAULT_MAX_DEPTH
) -> List[str]:
    return [render(r) for r in trace_source(text, mode, max_depth=max_depth)]


def run_trace(options: TraceOptions) -> TraceResult:
    logger = get_logger()
    rep = get_reporter()
    loaded = load_source(options.path)
    mode = options.mode
    if mode == "auto":
        mode = mode_for_path(str(options.path) if options.path else None)
    max_depth = resolve_max_depth(options.max_depth)
    logger.info(
        f"source: {loaded.path or '<default>'} "
        f"(mode={mode}, max_depth={max_depth})"
    )

    parsed = parse_source(loaded.text, mode)
    result = TraceResult(source=loaded, parse=parsed)
    if parsed.error is not None:
        logger.warning(f"{E_SYNTAX}: {parsed.error}")

    def _stream() -> None:
        for record in traverse(parsed.root, parsed.source, max_depth=max_depth):
            result.records += 1
            if record.event is Event.TRUNCATED:
                result.truncated += 1
            rep.trace(record)

    if get_verbosity() >= 1:
        with section("trace"):
            _stream()
    else:
        _stream()
    rep.flush()

    if result.truncated:
        logger.warning(
            f"{E_DEPTH_EXCEEDED}: {result.truncated} subtree(s) deeper than "
            f"{max_depth} were truncated"
        )
    logger.debug(f"emitted {result.records} record(s)")
    return result
