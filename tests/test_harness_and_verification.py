"""Tests for the timing wrapper and the output verifier."""

from __future__ import annotations

import pytest

from sortbench.algorithms import quicksort
from sortbench.harness import measure
from sortbench.verification import all_equal, is_permutation, is_sorted


def test_measure_returns_output_and_non_negative_ms(capsys, scenario) -> None:
    out, elapsed = measure("Quicksort", scenario, quicksort)
    assert out == [1, 3, 3, 5, 5]
    assert isinstance(elapsed, int)
    assert elapsed >= 0
    assert capsys.readouterr().out == f"Quicksort: {elapsed} ms\n"


def test_measure_passes_independent_copy() -> None:
    original = [3, 1, 2]

    def destructive(seq):
        seq.sort()
        seq.append(99)
        return seq

    out, _ = measure("Destructive", original, destructive, verbose=False)
    assert original == [3, 1, 2]
    assert out == [1, 2, 3, 99]
    out2, _ = measure("Destructive", original, destructive, verbose=False)
    assert out2 == [1, 2, 3, 99]


def test_measure_quiet(capsys) -> None:
    measure("Quicksort", [2, 1], quicksort, verbose=False)
    assert capsys.readouterr().out == ""


def test_measure_propagates_errors() -> None:
    def broken(seq):
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        measure("Broken", [1], broken, verbose=False)


def test_all_equal() -> None:
    assert all_equal([])
    assert all_equal([[1, 2]])
    assert all_equal([[], [], []])
    assert all_equal([[1, 2, 3], [1, 2, 3], (1, 2, 3)])
    assert not all_equal([[1, 2, 3], [1, 2, 3], [1, 3, 2]])
    assert not all_equal([[1, 2], [1, 2, 2]])


def test_is_sorted_and_is_permutation() -> None:
    assert is_sorted([])
    assert is_sorted([1, 1, 2])
    assert not is_sorted([2, 1])
    assert is_sorted(["bb", "a", "ccc"], key=len) is False
    assert is_sorted(["a", "bb", "ccc"], key=len)
    assert is_permutation([3, 1, 3], [1, 3, 3])
    assert not is_permutation([3, 1], [1, 3, 3])
    assert not is_permutation([1, 1, 2], [1, 2, 2])
