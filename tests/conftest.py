"""Pytest configuration, shared fixtures & per-module summary hook.

Also ensures the repository root is on sys.path so both ``sortbench`` and the
``main`` entry module import without installation.
"""

from __future__ import annotations

import sys
from collections import Counter
from pathlib import Path

import pytest

_root = Path(__file__).resolve().parents[1]
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

SLOWEST_SHOWN = 3


@pytest.fixture
def scenario() -> list[int]:
    return [5, 3, 5, 1, 3]


def pytest_terminal_summary(
    terminalreporter: pytest.TerminalReporter,
    exitstatus: int,
    config: pytest.Config,
) -> None:  # noqa: D401
    """Print pass/fail counts per test module and the slowest test calls."""
    per_module: dict[str, Counter] = {}
    calls = []
    for outcome in ("passed", "failed", "error", "skipped"):
        for rep in terminalreporter.stats.get(outcome, []):
            module = rep.nodeid.split("::", 1)[0]
            per_module.setdefault(module, Counter())[outcome] += 1
            if getattr(rep, "when", None) == "call":
                calls.append((rep.duration, rep.nodeid))
    if not per_module:
        return

    terminalreporter.section("sortbench summary", sep="=")
    for module in sorted(per_module):
        c = per_module[module]
        terminalreporter.write_line(
            f"{module}: {c['passed']} passed, {c['failed']} failed, "
            f"{c['error']} errors, {c['skipped']} skipped"
        )
    for duration, nodeid in sorted(calls, reverse=True)[:SLOWEST_SHOWN]:
        terminalreporter.write_line(f"  slow: {duration * 1000:.0f} ms {nodeid}")
