"""Single comparison pass: generate, sort with every algorithm, verify.

This is the behaviour of the plain ``python main.py`` invocation. The
experiment batch in ``sortbench.experiments`` reuses ``compare_algorithms``
with report lines silenced.
"""
from __future__ import annotations

import json
import logging
import os
import random
from datetime import datetime
from typing import Iterable, List, Sequence

from sortbench.algorithms import select_algorithms
from sortbench.generator import generate_random_sequence
from sortbench.harness import measure
from sortbench.models import ComparisonReport, SortRun
from sortbench.verification import all_equal, is_permutation, is_sorted

logger = logging.getLogger("sortbench.driver")

MATCH_MESSAGE = "All algorithms produced identical sorted results."
MISMATCH_MESSAGE = "Mismatch detected in sorting results."


def compare_algorithms(
    data: Sequence[int],
    algorithms: Iterable[str] | None = None,
    verbose: bool = True,
) -> tuple[List[SortRun], bool]:
    """Time each selected algorithm on ``data`` and check the outputs agree.

    Returns:
        Tuple ``(runs, identical)`` with runs in execution order.

    Raises:
        ValueError: If an unknown algorithm label is requested.
    """
    runs: List[SortRun] = []
    for label, sort_fn in select_algorithms(algorithms):
        output, elapsed_ms = measure(label, data, sort_fn, verbose=verbose)
        runs.append(SortRun(label=label, elapsed_ms=elapsed_ms, output=output))
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "%s: sorted=%s permutation=%s",
                label,
                is_sorted(output),
                is_permutation(output, data),
            )
    identical = all_equal([run.output for run in runs])
    if not identical:
        reference = runs[0]
        diverging = [run.label for run in runs[1:] if run.output != reference.output]
        logger.warning("Outputs differing from %s: %s", reference.label, ", ".join(diverging))
    return runs, identical


def run_comparison(
    n: int,
    min_value: int = 1,
    max_value: int = 100000,
    seed: int | None = None,
    algorithms: Iterable[str] | None = None,
    rng: random.Random | None = None,
    verbose: bool = True,
) -> ComparisonReport:
    """Generate one input, run every algorithm on it and print the verdict.

    Raises:
        InvalidSizeError: If ``n`` is not positive.
        InvalidRangeError: If ``min_value > max_value``.
    """
    data = generate_random_sequence(n, min_value, max_value, seed=seed, rng=rng)
    logger.info("Generated %d values in [%d, %d] seed=%s", n, min_value, max_value, seed)
    runs, identical = compare_algorithms(data, algorithms, verbose=verbose)
    if verbose:
        print(MATCH_MESSAGE if identical else MISMATCH_MESSAGE)
    return ComparisonReport(
        size=n,
        min_value=min_value,
        max_value=max_value,
        seed=seed,
        runs=runs,
        identical=identical,
    )


def save_report(report: ComparisonReport, results_folder: str, chart: bool = True) -> str | None:
    """Write the report as JSON (and optionally a bar chart) under ``results_folder``.

    Returns the JSON path, or ``None`` when writing failed.
    """
    # imported lazily so the plain comparison never pays for matplotlib
    from sortbench.visualization import next_unique_path, save_timing_bar_chart

    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    try:
        os.makedirs(results_folder, exist_ok=True)
        json_path = next_unique_path(
            os.path.join(results_folder, f"comparison_n{report.size}_{stamp}.json")
        )
        payload = report.to_dict()
        payload["timestamp"] = stamp
        with open(json_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=2)
        logger.info("Saved comparison results JSON to %s", json_path)
    except OSError as e:
        logger.warning("Failed to write results JSON: %s", e)
        return None
    if chart:
        try:
            chart_path = next_unique_path(
                os.path.join(results_folder, f"timings_n{report.size}_{stamp}.png")
            )
            save_timing_bar_chart(report, chart_path)
            logger.info("Saved timing chart to %s", chart_path)
        except OSError as e:
            logger.warning("Failed to create timing chart: %s", e)
    return json_path
