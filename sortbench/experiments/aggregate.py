from __future__ import annotations

import csv
import json
import logging
import math
from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List

from sortbench.models import CANONICAL_ORDER

logger = logging.getLogger("sortbench.experiments")

SUMMARY_COLUMNS = ["size", "seed", "algorithm", "elapsed_ms", "identical"]
MEAN_COLUMNS = ["algorithm", "size", "runs", "mean_ms", "stdev_ms"]


@dataclass(frozen=True)
class SummaryRow:
    size: int
    seed: int
    algorithm: str
    elapsed_ms: int
    identical: bool


@dataclass(frozen=True)
class MeanRow:
    algorithm: str
    size: int
    runs: int
    mean_ms: float
    stdev_ms: float


def mean(values: Iterable[float]) -> float:
    vals = list(values)
    if not vals:
        return float("nan")
    return sum(vals) / len(vals)


def stdev(values: Iterable[float]) -> float:
    vals = list(values)
    if len(vals) < 2:
        return 0.0
    m = sum(vals) / len(vals)
    var = sum((x - m) ** 2 for x in vals) / (len(vals) - 1)
    return math.sqrt(var)


def load_results_dir(timestamp_dir: Path) -> List[Dict[str, Any]]:
    """Load every per-run JSON file of a batch directory, skipping unreadable ones."""
    results: List[Dict[str, Any]] = []
    for file in sorted(timestamp_dir.glob("*.json")):
        try:
            with open(file, "r", encoding="utf-8") as f:
                results.append(json.load(f))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Failed to load %s: %s", file, e)
    return results


def _algo_rank(name: str) -> int:
    return CANONICAL_ORDER.index(name) if name in CANONICAL_ORDER else len(CANONICAL_ORDER)


def write_summary_csv(timestamp_dir: Path) -> Path:
    """One row per (run, algorithm), ordered by size, seed and run order."""
    out_path = timestamp_dir / "summary.csv"
    results = load_results_dir(timestamp_dir)
    results.sort(key=lambda r: (r["size"], r["seed"]))
    with open(out_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(SUMMARY_COLUMNS)
        for r in results:
            timings = r["timings_ms"]
            for algo in r.get("order", list(timings)):
                writer.writerow([r["size"], r["seed"], algo, timings[algo], r["identical"]])
    if not results:
        logger.warning("No result files found to summarize in %s", timestamp_dir)
    logger.info("Summary written: %s", out_path)
    return out_path


def read_summary_csv(path: Path) -> List[SummaryRow]:
    rows: List[SummaryRow] = []
    with path.open("r", newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        for r in reader:
            rows.append(
                SummaryRow(
                    size=int(r["size"]),
                    seed=int(r["seed"]),
                    algorithm=r["algorithm"],
                    elapsed_ms=int(r["elapsed_ms"]),
                    identical=r["identical"] == "True",
                )
            )
    return rows


def compute_means(rows: Iterable[SummaryRow]) -> List[MeanRow]:
    grouped: Dict[tuple, List[int]] = defaultdict(list)
    for row in rows:
        grouped[(row.algorithm, row.size)].append(row.elapsed_ms)
    out = [
        MeanRow(algorithm=algo, size=size, runs=len(vals), mean_ms=mean(vals), stdev_ms=stdev(vals))
        for (algo, size), vals in grouped.items()
    ]
    out.sort(key=lambda m: (_algo_rank(m.algorithm), m.algorithm, m.size))
    return out


def write_mean_table(timestamp_dir: Path, summary_path: Path | None = None) -> Path:
    """Mean and sample standard deviation of elapsed time per (algorithm, size)."""
    if summary_path is None:
        summary_path = timestamp_dir / "summary.csv"
    if not summary_path.exists():
        summary_path = write_summary_csv(timestamp_dir)
    means = compute_means(read_summary_csv(summary_path))
    out_path = timestamp_dir / "mean_summary.csv"
    with open(out_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(MEAN_COLUMNS)
        for m in means:
            writer.writerow([m.algorithm, m.size, m.runs, f"{m.mean_ms:.3f}", f"{m.stdev_ms:.3f}"])
    logger.info("Mean table written: %s", out_path)
    return out_path


def read_mean_table(path: Path) -> List[MeanRow]:
    rows: List[MeanRow] = []
    with path.open("r", newline="", encoding="utf-8") as f:
        for r in csv.DictReader(f):
            rows.append(
                MeanRow(
                    algorithm=r["algorithm"],
                    size=int(r["size"]),
                    runs=int(r["runs"]),
                    mean_ms=float(r["mean_ms"]),
                    stdev_ms=float(r["stdev_ms"]),
                )
            )
    return rows
