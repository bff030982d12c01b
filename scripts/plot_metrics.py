#!/usr/bin/env python3
"""Render per-operation benchmark CSV metrics into an SVG chart."""

from __future__ import annotations

import argparse
import csv
from collections import defaultdict
from pathlib import Path

import matplotlib.pyplot as plt

ROOT = Path(__file__).resolve().parents[1]

WIDTH_COLORS = {32: "#3b6ea5", 64: "#d08c2e"}

CHART_STYLE = {
    "axes.spines.top": False,
    "axes.spines.right": False,
    "axes.grid": True,
    "axes.grid.axis": "y",
    "grid.alpha": 0.4,
    "font.size": 10,
}


def _load_csv(path: Path) -> list[dict[str, str]]:
    with path.open("r", encoding="utf-8") as handle:
        return list(csv.DictReader(handle))


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Plot bit operation benchmark metrics")
    parser.add_argument(
        "--metrics-dir",
        default=str(ROOT / "docs" / "metrics"),
        help="Directory containing benchmark CSV files",
    )
    parser.add_argument(
        "--output",
        default=str(ROOT / "docs" / "visuals" / "op-throughput.svg"),
        help="Output SVG path",
    )
    return parser.parse_args()


def plot(rows: list[dict[str, str]], output: Path) -> None:
    by_width: dict[int, dict[str, int]] = defaultdict(dict)
    for row in rows:
        by_width[int(row["width"])][row["operation"]] = int(row["ops_per_sec"])

    operations = sorted({row["operation"] for row in rows})
    bar_width = 0.8 / max(len(by_width), 1)

    with plt.rc_context(CHART_STYLE):
        fig, ax = plt.subplots(figsize=(14, 5), dpi=120)
        ax.set_title("Calls per second by operation and width")

        for idx, (width, data) in enumerate(sorted(by_width.items())):
            positions = [i + idx * bar_width for i in range(len(operations))]
            values = [data.get(op, 0) for op in operations]
            ax.bar(positions, values, width=bar_width, color=WIDTH_COLORS.get(width), label=f"{width}-bit")

        ax.set_xticks([i + bar_width * (len(by_width) - 1) / 2 for i in range(len(operations))])
        ax.set_xticklabels(operations, rotation=45, ha="right")
        ax.set_ylabel("Calls/second")
        ax.legend(title="Width")

        output.parent.mkdir(parents=True, exist_ok=True)
        fig.tight_layout()
        fig.savefig(output, format="svg")
        plt.close(fig)


def main() -> None:
    args = parse_args()
    metrics_dir = Path(args.metrics_dir)
    output = Path(args.output)

    rows = _load_csv(metrics_dir / "op_metrics.csv")
    plot(rows, output)
    print(f"wrote {output}")


if __name__ == "__main__":
    main()
