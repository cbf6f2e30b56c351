"""Tests for the single comparison pass (run_comparison / save_report)."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

import sortbench.driver as driver
from sortbench.algorithms import ALGORITHMS
from sortbench.driver import (
    MATCH_MESSAGE,
    MISMATCH_MESSAGE,
    compare_algorithms,
    run_comparison,
    save_report,
)
from sortbench.errors import InvalidRangeError, InvalidSizeError


def test_run_comparison_prints_lines_in_fixed_order(capsys) -> None:
    report = run_comparison(n=300, seed=42)
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 5
    labels = [line.split(":")[0] for line in lines[:4]]
    assert labels == ["Selection Sort", "Merge Sort", "Heapsort", "Quicksort"]
    for line, run in zip(lines[:4], report.runs):
        assert line == f"{run.label}: {run.elapsed_ms} ms"
    assert lines[4] == MATCH_MESSAGE
    assert report.identical
    assert report.size == 300 and report.seed == 42
    assert all(run.elapsed_ms >= 0 for run in report.runs)
    assert report.runs[0].output == sorted(report.runs[0].output)


def test_run_comparison_subset_quiet(capsys) -> None:
    report = run_comparison(n=50, seed=1, algorithms=["Quicksort", "Merge Sort"], verbose=False)
    assert capsys.readouterr().out == ""
    assert [r.label for r in report.runs] == ["Quicksort", "Merge Sort"]
    assert set(report.timings()) == {"Quicksort", "Merge Sort"}


def test_run_comparison_errors() -> None:
    with pytest.raises(InvalidSizeError):
        run_comparison(n=0)
    with pytest.raises(InvalidRangeError):
        run_comparison(n=10, min_value=5, max_value=1)
    with pytest.raises(ValueError):
        run_comparison(n=10, algorithms=["Bogosort"])


def test_compare_empty_input_is_identical() -> None:
    runs, identical = compare_algorithms([], verbose=False)
    assert identical
    assert all(run.output == [] for run in runs)


def test_mismatch_detected(monkeypatch, capsys) -> None:
    broken = dict(ALGORITHMS)
    broken["Quicksort"] = lambda seq: list(reversed(sorted(seq)))
    monkeypatch.setattr(
        driver, "select_algorithms", lambda labels=None: list(broken.items())
    )
    report = run_comparison(n=20, seed=0)
    assert not report.identical
    assert capsys.readouterr().out.splitlines()[-1] == MISMATCH_MESSAGE


def test_save_report_writes_json_and_chart(tmp_path: Path) -> None:
    report = run_comparison(n=40, seed=8, verbose=False)
    json_path = save_report(report, str(tmp_path / "out"))
    assert json_path is not None
    data = json.loads(Path(json_path).read_text())
    for key in ("size", "seed", "identical", "timings_ms", "order", "timestamp"):
        assert key in data
    assert data["order"] == ["Selection Sort", "Merge Sort", "Heapsort", "Quicksort"]
    assert list((tmp_path / "out").glob("timings_n40_*.png"))


def test_save_report_logs_and_returns_none_when_folder_unwritable(tmp_path: Path, caplog) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    report = run_comparison(n=10, seed=2, verbose=False)
    with caplog.at_level(logging.WARNING, logger="sortbench.driver"):
        assert save_report(report, str(blocker / "results")) is None
    assert any("Failed to write results JSON" in r.message for r in caplog.records)
