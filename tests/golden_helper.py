from __future__ import annotations

"""Golden trace helpers for qmltrace tests.

Golden files live in tests/_golden/ as YAML documents with the keys
``source``, ``mode`` and ``trace`` (the rendered lines). When the variable
QMLTRACE_UPDATE_GOLDEN is truthy ("1", "true", "yes") the trace is rewritten
instead of compared.

Usage:
    from golden_helper import assert_matches_golden
    assert_matches_golden("scenario_import_item.yaml")
"""
import difflib
import os
from pathlib import Path
from typing import Any, Dict, List

import yaml

from qmltrace.api import trace_lines

_GOLDEN_DIR = Path(__file__).parent / "_golden"


def _is_truthy(val: str | None) -> bool:
    if val is None:
        return False
    return val.lower() in {"1", "true", "yes", "on", "update"}


def load_golden(name: str) -> Dict[str, Any]:
    return yaml.safe_load((_GOLDEN_DIR / name).read_text(encoding="utf-8"))


def golden_names() -> List[str]:
    return sorted(p.name for p in _GOLDEN_DIR.glob("*.yaml"))


def assert_matches_golden(name: str) -> None:
    """Trace the golden source and compare with its stored lines."""
    path = _GOLDEN_DIR / name
    doc = load_golden(name)
    actual = trace_lines(doc["source"], doc.get("mode", "qml"))
    if _is_truthy(os.getenv("QMLTRACE_UPDATE_GOLDEN")):
        doc["trace"] = actual
        path.write_text(
            yaml.safe_dump(doc, sort_keys=False, allow_unicode=True),
            encoding="utf-8",
        )
        return
    expected = doc["trace"]
    if actual != expected:
        diff = "\n".join(
            difflib.unified_diff(
                expected, actual, fromfile="expected", tofile="actual", lineterm=""
            )
        )
        raise AssertionError(f"Golden mismatch for {name}\n{diff}")
