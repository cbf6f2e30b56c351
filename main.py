#!/usr/bin/env python3
"""Benchmark entry point.

Without arguments runs one comparison of all four algorithms on 10000 random
integers (or whatever ``config.yaml`` says). ``experiment.enabled`` switches
to the size sweep.
"""

import argparse
import logging
import sys
from pathlib import Path

from sortbench.config import load_config, sweep_from_config
from sortbench.driver import run_comparison, save_report
from sortbench.errors import SortBenchError
from sortbench.experiments.aggregate import (
    read_mean_table,
    write_mean_table,
    write_summary_csv,
)
from sortbench.experiments.runner import ExperimentRunner, generate_plan
from sortbench.visualization import save_timing_vs_size_plot

logger = logging.getLogger("sortbench")


def run_experiments(config: dict) -> Path | None:
    """Execute the size sweep and write its CSV tables and chart.

    Artefact write failures are logged; the batch itself always completes.
    """
    sweep = sweep_from_config(config)
    exp_cfg = config["experiment"]
    plan = generate_plan(sweep)
    logger.info(
        "Experiment batch: sizes=%s repeats=%d algorithms=%s",
        list(sweep.sizes),
        sweep.repeats,
        ",".join(sweep.algorithms),
    )
    runner = ExperimentRunner(exp_cfg.get("results_dir", "results/experiments"))
    reports = runner.run(plan)
    batch_dir = runner.timestamp_dir
    if batch_dir is not None:
        try:
            summary_path = write_summary_csv(batch_dir)
            mean_path = write_mean_table(batch_dir, summary_path)
            save_timing_vs_size_plot(
                read_mean_table(mean_path),
                str(batch_dir / "timing_vs_size.png"),
            )
        except OSError as e:
            logger.warning("Failed to write batch summary: %s", e)
    mismatches = sum(1 for r in reports if not r.identical)
    print(f"Experiment batch completed: {len(reports)} runs, {mismatches} mismatches.")
    print(f"Results: {batch_dir}" if batch_dir is not None else "Results: not saved")
    return batch_dir


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Sorting algorithm benchmark")
    parser.add_argument("--config", default=None, help="Path to YAML config (default: config.yaml)")
    parser.add_argument("--n", type=int, default=None, help="Input size override")
    parser.add_argument("--seed", type=int, default=None, help="Seed override")
    args = parser.parse_args(argv)

    if args.config is not None:
        config = load_config(args.config, required=True)
    else:
        config = load_config()
    if args.n is not None:
        config["general"]["n"] = args.n
    if args.seed is not None:
        config["general"]["seed"] = args.seed

    log_level = config.get("log_level", "INFO")
    logging.basicConfig(
        level=getattr(logging, str(log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    general = config["general"]
    try:
        if config["experiment"].get("enabled"):
            if args.n is not None or args.seed is not None:
                logger.warning("--n and --seed apply to a single comparison; ignored by the sweep")
            run_experiments(config)
            return 0
        report = run_comparison(
            n=general["n"],
            min_value=general["min_value"],
            max_value=general["max_value"],
            seed=general.get("seed"),
            algorithms=general.get("algorithms") or None,
        )
    except SortBenchError as e:
        logger.error("%s: %s", type(e).__name__, e)
        return 2

    out_cfg = config["output"]
    if out_cfg.get("enabled"):
        save_report(
            report,
            out_cfg.get("results_folder", "results"),
            chart=bool(out_cfg.get("chart", True)),
        )
    return 0


if __name__ == "__main__":
    # Quicksort recursion depth is linear on adversarial input.
    try:
        sys.setrecursionlimit(max(sys.getrecursionlimit(), 100000))
    except (ValueError, RecursionError):
        pass
    raise SystemExit(main())
