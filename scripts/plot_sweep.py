"""Re-draw charts for an existing size-sweep batch.

Reads `results/experiments/<run_id>/summary.csv` (rebuilding `mean_summary.csv`
from it) and writes a timing-vs-size figure per scale into the batch folder.

Usage:
    python scripts/plot_sweep.py --run-id 20260101_120000
    python scripts/plot_sweep.py --run-id 20260101_120000 --linear --format pdf
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

_root = Path(__file__).resolve().parents[1]
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

from sortbench.experiments.aggregate import read_mean_table, write_mean_table  # noqa: E402
from sortbench.visualization import save_timing_vs_size_plot  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--run-id", required=True)
    parser.add_argument("--results-root", default="results/experiments")
    parser.add_argument("--linear", action="store_true", help="Linear instead of log y axis.")
    parser.add_argument("--format", default="png", choices=["png", "pdf"])
    args = parser.parse_args(argv)

    run_dir = Path(args.results_root) / args.run_id
    summary_path = run_dir / "summary.csv"
    if not summary_path.exists():
        raise SystemExit(f"Missing summary.csv: {summary_path}")

    means = read_mean_table(write_mean_table(run_dir, summary_path))
    scale = "linear" if args.linear else "log"
    out_path = run_dir / f"timing_vs_size_{scale}.{args.format}"
    save_timing_vs_size_plot(
        means,
        str(out_path),
        log_scale=not args.linear,
        title=f"Sorting time vs input size ({args.run_id})",
    )
    print(f"Wrote {out_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
