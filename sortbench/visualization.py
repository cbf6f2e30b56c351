import os
from collections import defaultdict
from pathlib import Path
from typing import Iterable, Optional

import matplotlib

matplotlib.use("Agg")  # Must be set before importing pyplot
import matplotlib.pyplot as plt  # noqa: E402

from sortbench.models import CANONICAL_ORDER, ComparisonReport  # noqa: E402

ALGO_COLORS = {
    "Selection Sort": "#FF00CC",
    "Merge Sort": "#00B3B3",
    "Heapsort": "#7CB800",
    "Quicksort": "#FF8C00",
}


def _ensure_dir(path: str):
    if path:
        os.makedirs(path, exist_ok=True)


def save_timing_bar_chart(report: ComparisonReport, filepath: str) -> str:
    """Bar chart of elapsed milliseconds per algorithm for one comparison."""
    labels = [run.label for run in report.runs]
    values = [run.elapsed_ms for run in report.runs]
    fig, ax = plt.subplots(figsize=(8, 5), constrained_layout=True)
    bars = ax.bar(
        labels,
        values,
        color=[ALGO_COLORS.get(label, "#888888") for label in labels],
        edgecolor="black",
        linewidth=0.6,
    )
    for bar, value in zip(bars, values):
        ax.annotate(
            f"{value} ms",
            xy=(bar.get_x() + bar.get_width() / 2, bar.get_height()),
            xytext=(0, 4),
            textcoords="offset points",
            ha="center",
            fontsize=9,
        )
    verdict = "identical" if report.identical else "MISMATCH"
    ax.set_ylabel("Time [ms]", fontsize=12)
    ax.set_title(f"Sorting n = {report.size} ({verdict})", fontsize=14, fontweight="bold")
    ax.grid(True, alpha=0.25, axis="y", linestyle="--", linewidth=0.7)
    _ensure_dir(os.path.dirname(filepath))
    fig.savefig(filepath, dpi=180)
    plt.close(fig)
    return filepath


def save_timing_vs_size_plot(
    mean_rows: Iterable,
    filepath: str,
    log_scale: bool = True,
    title: Optional[str] = None,
) -> str:
    """Plot mean time against input size, one line per algorithm.

    ``mean_rows`` are objects with ``algorithm``, ``size``, ``mean_ms`` and
    ``stdev_ms`` attributes (see ``sortbench.experiments.aggregate.MeanRow``).
    Zero means are dropped on a log axis.
    """
    series = defaultdict(list)
    for row in mean_rows:
        series[row.algorithm].append((row.size, row.mean_ms, row.stdev_ms))
    ordered = [a for a in CANONICAL_ORDER if a in series] + sorted(
        a for a in series if a not in CANONICAL_ORDER
    )

    fig, ax = plt.subplots(figsize=(10, 6), constrained_layout=True)
    plotted = 0
    for algo in ordered:
        points = sorted(series[algo])
        if log_scale:
            points = [p for p in points if p[1] > 0]
        if not points:
            continue
        sizes = [p[0] for p in points]
        means = [p[1] for p in points]
        errs = [p[2] for p in points]
        ax.errorbar(
            sizes,
            means,
            yerr=errs,
            label=algo,
            linewidth=2,
            marker="o",
            markersize=4,
            markerfacecolor="white",
            markeredgewidth=1.0,
            capsize=3,
            color=ALGO_COLORS.get(algo),
        )
        plotted += 1
    if log_scale and plotted:
        ax.set_yscale("log")
    ax.set_xlabel("Input size n", fontsize=12)
    ax.set_ylabel("Mean time [ms]", fontsize=12)
    ax.set_title(title or "Sorting time vs input size", fontsize=14, fontweight="bold")
    ax.grid(True, alpha=0.25, linestyle="--", linewidth=0.7)
    if plotted:
        ax.legend(loc="upper left", frameon=False, fontsize=9)
    _ensure_dir(os.path.dirname(filepath))
    fig.savefig(filepath, dpi=180)
    plt.close(fig)
    return filepath


def next_unique_path(path: str | Path) -> str:
    """If the file exists, append _1, _2 ... until a free name is found."""
    p = Path(path)
    if not p.exists():
        return str(p)
    stem = p.stem
    suffix = p.suffix
    parent = p.parent
    counter = 1
    while True:
        candidate = parent / f"{stem}_{counter}{suffix}"
        if not candidate.exists():
            return str(candidate)
        counter += 1
