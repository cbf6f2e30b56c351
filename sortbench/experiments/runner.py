from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Sequence, Tuple

from sortbench.driver import compare_algorithms
from sortbench.generator import generate_random_sequence
from sortbench.models import ComparisonReport, SweepConfig

logger = logging.getLogger("sortbench.experiments")


@dataclass(frozen=True)
class RunConfig:
    """Configuration of a single benchmark run inside a sweep."""

    size: int
    seed: int
    min_value: int
    max_value: int
    algorithms: Tuple[str, ...]


def generate_plan(sweep: SweepConfig) -> List[RunConfig]:
    """One run per (size, repeat); repeat ``r`` uses seed ``base_seed + r``."""
    if sweep.repeats < 1:
        raise ValueError(f"repeats must be >= 1, got {sweep.repeats}")
    if not sweep.sizes:
        raise ValueError("sizes must be a non-empty list")
    configs: List[RunConfig] = []
    for size in sweep.sizes:
        for r in range(sweep.repeats):
            configs.append(
                RunConfig(
                    size=int(size),
                    seed=sweep.base_seed + r,
                    min_value=sweep.min_value,
                    max_value=sweep.max_value,
                    algorithms=tuple(sweep.algorithms),
                )
            )
    return configs


class ExperimentRunner:
    def __init__(self, base_results_dir: str = "results/experiments"):
        """Each batch gets its own timestamped directory; older batches are kept."""
        self.base_dir = Path(base_results_dir)
        stamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
        self.timestamp_dir: Path | None = self.base_dir / stamp
        counter = 1
        while self.timestamp_dir.exists():
            self.timestamp_dir = self.base_dir / f"{stamp}_{counter}"
            counter += 1
        try:
            self.timestamp_dir.mkdir(parents=True)
        except OSError as e:
            # runs still execute; only persistence is skipped
            logger.warning("Cannot create results directory %s: %s", self.timestamp_dir, e)
            self.timestamp_dir = None

    def run(self, configs: Sequence[RunConfig]) -> List[ComparisonReport]:
        reports: List[ComparisonReport] = []
        for idx, cfg in enumerate(configs, start=1):
            logger.info("(%d/%d) Running n=%d seed=%d", idx, len(configs), cfg.size, cfg.seed)
            report = self._run_single(cfg)
            reports.append(report)
            self._persist_result(cfg, report)
        return reports

    def _run_single(self, cfg: RunConfig) -> ComparisonReport:
        data = generate_random_sequence(cfg.size, cfg.min_value, cfg.max_value, seed=cfg.seed)
        runs, identical = compare_algorithms(data, cfg.algorithms, verbose=False)
        if not identical:
            logger.warning("Mismatch detected for n=%d seed=%d", cfg.size, cfg.seed)
        return ComparisonReport(
            size=cfg.size,
            min_value=cfg.min_value,
            max_value=cfg.max_value,
            seed=cfg.seed,
            runs=runs,
            identical=identical,
        )

    def _persist_result(self, cfg: RunConfig, report: ComparisonReport) -> Path | None:
        if self.timestamp_dir is None:
            return None
        path = self.timestamp_dir / f"n={cfg.size}_seed={cfg.seed}.json"
        payload = report.to_dict()
        payload["config"] = asdict(cfg)
        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2)
        except OSError as e:
            logger.warning("Failed to save %s: %s", path, e)
            return None
        logger.debug("Saved %s", path)
        return path
