from .engine import DEFAULT_MAX_DEPTH, ORDER, traverse
from .records import Event, TraceRecord, render

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "ORDER",
    "traverse",
    "Event",
    "TraceRecord",
    "render",
]
