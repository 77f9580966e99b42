"""Command line interface for qmltrace."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .api import MAX_DEPTH_ENV, TraceOptions, run_trace
from .logging import configure_logging
from .parser import MODES
from .reporting import (
    REPORTERS,
    set_reporter,
    PlainReporter,
    JsonLinesReporter,
    SilentReporter,
    RichReporter,
    set_verbosity,
)


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError("must be >= 1")
    return value


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="qmltrace",
        description="Print the syntax tree of a QML document as an indented trace",
    )
    p.add_argument(
        "file",
        nargs="?",
        type=Path,
        help="QML or JavaScript source (default: a built-in snippet)",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (repeatable)",
    )
    p.add_argument(
        "-r",
        "--reporter",
        choices=list(REPORTERS),
        default="plain",
        help="Select reporter backend: plain (default), rich, json (JSONL events), silent",
    )
    p.add_argument(
        "--mode",
        choices=["auto", *MODES],
        default="auto",
        help="Parse as a QML document or a JavaScript program (auto: by file suffix)",
    )
    p.add_argument(
        "--max-depth",
        type=_positive_int,
        dest="max_depth",
        help=f"Nesting depth at which subtrees are truncated (env {MAX_DEPTH_ENV}, default 512)",
    )
    return p


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    requested = args.reporter
    if requested == "json":
        set_reporter(JsonLinesReporter())
    elif requested == "silent":
        set_reporter(SilentReporter())
    elif requested == "rich":
        set_reporter(RichReporter())
    else:  # plain
        set_reporter(PlainReporter())
    set_verbosity(args.verbose)
    configure_logging(args.verbose)
    run_trace(
        TraceOptions(path=args.file, mode=args.mode, max_depth=args.max_depth)
    )
    # Missing files and syntax errors are reported, never fatal.
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
