"""Syntax tree tracer for QML documents and their JavaScript sub-language."""

from .api import TraceOptions, TraceResult, run_trace, trace_lines, trace_source
from .errors import QmlSyntaxError, SourceUnavailableError, TraceError
from .parser import ParseResult, mode_for_path, parse_source
from .trace import DEFAULT_MAX_DEPTH, Event, TraceRecord, render, traverse

__version__ = "0.1.0"

__all__ = [
    "TraceOptions",
    "TraceResult",
    "run_trace",
    "trace_lines",
    "trace_source",
    "QmlSyntaxError",
    "SourceUnavailableError",
    "TraceError",
    "ParseResult",
    "mode_for_path",
    "parse_source",
    "DEFAULT_MAX_DEPTH",
    "Event",
    "TraceRecord",
    "render",
    "traverse",
]
