"""Source loading with the built-in default snippet as fallback."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .errors import SourceUnavailableError
from .logging import get_logger

__all__ = ["DEFAULT_SOURCE", "LoadedSource", "read_source", "load_source"]

DEFAULT_SOURCE = "import QtQuick 2.0\nItem { id: root }"


@dataclass(slots=True)
class LoadedSource:
    text: str
    path: Optional[Path] = None
    fallback: bool = False
    error: Optional[SourceUnavailableError] = None


def read_source(path: str | Path) -> str:
    p = Path(path)
    try:
        data = p.read_bytes()
    except OSError as exc:
        raise SourceUnavailableError(
            f"cannot open {p}: {exc.strerror or exc}",
            context={"path": str(p)},
        ) from exc
    # Invalid sequences become U+FFFD rather than aborting the run.
    return data.decode("utf-8", errors="replace")


def load_source(path: str | Path | None = None) -> LoadedSource:
    """Read ``path``; fall back to :data:`DEFAULT_SOURCE` when absent or unreadable."""
    if path is None:
        return LoadedSource(DEFAULT_SOURCE, fallback=True)
    try:
        return LoadedSource(read_source(path), path=Path(path))
    except SourceUnavailableError as exc:
        get_logger().warning(f"{exc.code}: {exc.message}; using default source")
        return LoadedSource(DEFAULT_SOURCE, path=Path(path), fallback=True, error=exc)
