from __future__ import annotations

import io
import json
import logging

import pytest
from rich.console import Console

from qmltrace.ast.nodes import Kind
from qmltrace.logging import configure_logging, get_logger
from qmltrace.reporting import (
    REPORTERS,
    JsonLinesReporter,
    PlainReporter,
    RichReporter,
    SilentReporter,
    get_reporter,
    set_reporter,
    set_verbosity,
)
from qmltrace.trace import TraceRecord


@pytest.fixture(autouse=True)
def _reset_globals():
    yield
    set_reporter(PlainReporter())
    set_verbosity(0)


def _records():
    return [
        TraceRecord.enter(Kind.UI_SCRIPT_BINDING, 0),
        TraceRecord.literal("[b]x[/b]", 1, 4),
        TraceRecord.literal(".", 1),
        TraceRecord.truncated(Kind.UI_QUALIFIED_ID, 1),
        TraceRecord.exit(Kind.UI_SCRIPT_BINDING, 0),
    ]


def test_plain_reporter_splits_trace_and_messages():
    out, msg = io.StringIO(), io.StringIO()
    rep = PlainReporter(stream=out, message_stream=msg, use_color=False)
    for record in _records():
        rep.trace(record)
    rep.warning("careful")
    rep.error("broken")
    rep.status("fine")
    assert out.getvalue().splitlines() == [
        "+ UiScriptBinding",
        '  "[b]x[/b]"',
        "  .",
        "  ! UiQualifiedId (truncated)",
        "- UiScriptBinding",
    ]
    assert msg.getvalue().splitlines() == [
        "WARN: careful",
        "ERROR: broken",
        "INFO: fine",
    ]


def test_plain_reporter_verbose_is_gated():
    msg = io.StringIO()
    rep = PlainReporter(stream=io.StringIO(), message_stream=msg, use_color=False)
    rep.verbose("hidden")
    set_verbosity(2)
    rep.verbose("shown", level=2)
    assert msg.getvalue() == "VERB2: shown\n"


def test_plain_reporter_colors_prefixes_when_asked():
    msg = io.StringIO()
    rep = PlainReporter(stream=io.StringIO(), message_stream=msg, use_color=True)
    rep.warning("w")
    assert msg.getvalue() == "\x1b[33mWARN\x1b[0m: w\n"


def test_json_reporter_records_and_messages():
    out = io.StringIO()
    rep = JsonLinesReporter(stream=out)
    for record in _records():
        rep.trace(record)
    rep.warning("careful", code="E_SYNTAX")
    events = [json.loads(line) for line in out.getvalue().splitlines()]
    assert events[1] == {
        "event": "literal",
        "depth": 1,
        "text": "[b]x[/b]",
        "offset": 4,
    }
    assert events[2]["offset"] is None
    assert events[3] == {"event": "truncated", "depth": 1, "kind": "UiQualifiedId"}
    assert events[-1] == {
        "event": "status",
        "message": "careful",
        "level": "warning",
        "code": "E_SYNTAX",
    }


def test_rich_reporter_prints_source_text_literally():
    out, msg = io.StringIO(), io.StringIO()
    rep = RichReporter(
        console=Console(file=out, width=200, color_system=None),
        message_console=Console(file=msg, width=200, color_system=None),
    )
    for record in _records():
        rep.trace(record)
    rep.warning("[red]not markup[/red]")
    lines = out.getvalue().splitlines()
    assert lines[1] == '  "[b]x[/b]"'
    assert lines[3] == "  ! UiQualifiedId (truncated)"
    assert msg.getvalue().strip() == "WARN: [red]not markup[/red]"


def test_silent_reporter_swallows_everything():
    rep = SilentReporter()
    for record in _records():
        rep.trace(record)
    rep.status("x")
    rep.warning("x")
    rep.error("x")
    rep.flush()


def test_reporter_registry_names():
    assert set(REPORTERS) == {"plain", "rich", "json", "silent"}


def test_logging_routes_through_active_reporter():
    msg = io.StringIO()
    set_reporter(
        PlainReporter(stream=io.StringIO(), message_stream=msg, use_color=False)
    )
    configure_logging(0)
    logger = get_logger()
    logger.info("quiet by default")
    logger.warning("loud")
    logger.error("louder")
    assert msg.getvalue().splitlines() == ["WARN: loud", "ERROR: louder"]
    assert logger.propagate is False


def test_logging_verbosity_levels():
    configure_logging(1)
    assert get_logger().level == logging.INFO
    configure_logging(3)
    assert get_logger().level == logging.DEBUG
    configure_logging(0)
    assert get_logger().level == logging.WARNING
    assert len(get_logger().handlers) == 1


def test_default_reporter_is_plain():
    set_reporter(None)
    assert isinstance(get_reporter(), PlainReporter)
