from __future__ import annotations

import io

import pytest

from qmltrace.api import MAX_DEPTH_ENV, TraceOptions, resolve_max_depth, run_trace
from qmltrace.errors import E_SOURCE_UNAVAILABLE, SourceUnavailableError
from qmltrace.logging import configure_logging
from qmltrace.reporting import PlainReporter, set_reporter
from qmltrace.source import DEFAULT_SOURCE, load_source, read_source
from qmltrace.trace import DEFAULT_MAX_DEPTH


@pytest.fixture()
def messages():
    msg = io.StringIO()
    set_reporter(
        PlainReporter(stream=io.StringIO(), message_stream=msg, use_color=False)
    )
    configure_logging(0)
    yield msg
    set_reporter(PlainReporter())


def test_load_source_without_path_uses_default():
    loaded = load_source()
    assert loaded.text == DEFAULT_SOURCE
    assert loaded.fallback
    assert loaded.error is None


def test_load_source_reads_file(tmp_path):
    path = tmp_path / "Main.qml"
    path.write_text("Item {}", encoding="utf-8")
    loaded = load_source(path)
    assert loaded.text == "Item {}"
    assert not loaded.fallback


def test_load_source_missing_file_falls_back(tmp_path, messages):
    loaded = load_source(tmp_path / "gone.qml")
    assert loaded.text == DEFAULT_SOURCE
    assert loaded.fallback
    assert loaded.error.code == E_SOURCE_UNAVAILABLE
    assert loaded.error.context == {"path": str(tmp_path / "gone.qml")}
    assert messages.getvalue().startswith("WARN: E_SOURCE_UNAVAILABLE: cannot open")


def test_read_source_directory_is_unavailable(tmp_path):
    with pytest.raises(SourceUnavailableError) as exc:
        read_source(tmp_path)
    assert exc.value.to_dict()["code"] == E_SOURCE_UNAVAILABLE


def test_read_source_replaces_invalid_utf8(tmp_path):
    path = tmp_path / "odd.qml"
    path.write_bytes(b"Item { x: '\xff' }")
    assert "\ufffd" in read_source(path)


def test_max_depth_explicit_wins(monkeypatch):
    monkeypatch.setenv(MAX_DEPTH_ENV, "7")
    assert resolve_max_depth(3) == 3


@pytest.mark.parametrize(
    "raw, expected",
    [("2", 2), (" 40 ", 40), ("", DEFAULT_MAX_DEPTH)],
)
def test_max_depth_from_environment(monkeypatch, raw, expected):
    monkeypatch.setenv(MAX_DEPTH_ENV, raw)
    assert resolve_max_depth() == expected


@pytest.mark.parametrize("raw", ["abc", "0", "-1"])
def test_invalid_max_depth_environment_is_ignored(monkeypatch, messages, raw):
    monkeypatch.setenv(MAX_DEPTH_ENV, raw)
    assert resolve_max_depth() == DEFAULT_MAX_DEPTH
    assert f"ignoring {MAX_DEPTH_ENV}" in messages.getvalue()


def test_max_depth_default(monkeypatch):
    monkeypatch.delenv(MAX_DEPTH_ENV, raising=False)
    assert resolve_max_depth() == DEFAULT_MAX_DEPTH


def test_run_trace_counts_records_and_truncations(messages):
    result = run_trace(TraceOptions(max_depth=3))
    assert result.source.fallback
    assert result.parse.ok
    # both UiQualifiedIds and the UiObjectInitializer sit at depth 3
    assert result.truncated == 3
    assert result.records > result.truncated
    assert "E_DEPTH_EXCEEDED: 3 subtree(s) deeper than 3" in messages.getvalue()


def test_run_trace_reports_syntax_errors(tmp_path, messages):
    bad = tmp_path / "Broken.qml"
    bad.write_text("Item { x: }", encoding="utf-8")
    result = run_trace(TraceOptions(path=bad))
    assert result.parse.root is None
    assert result.records == 0
    assert "E_SYNTAX: 1:" in messages.getvalue()
