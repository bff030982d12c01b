#!/usr/bin/env python3
"""Generate reproducible per-operation benchmark CSVs."""

from __future__ import annotations

import argparse
import csv
import logging
import random
from dataclasses import dataclass
from pathlib import Path
from time import perf_counter
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from twiddle.constants import WIDTHS
from twiddle.family import OPERATION_ARGS, bitops_for

logger = logging.getLogger("bench")


@dataclass(frozen=True)
class OperationCase:
    name: str
    width: int
    inputs: list[tuple[int, ...]]


def _arg_value(rng: random.Random, arg_name: str, width: int) -> int:
    if arg_name in ("i", "j"):
        return rng.randrange(width)
    if arg_name == "bit":
        return rng.randrange(2)
    if arg_name == "n":
        return rng.randrange(1, width // 2)
    if arg_name == "w":
        return rng.randrange(1, width + 1)
    return rng.getrandbits(width)


def build_cases(samples: int, seed: int) -> list[OperationCase]:
    rng = random.Random(seed)
    cases: list[OperationCase] = []
    for width in WIDTHS:
        for name, arg_names in OPERATION_ARGS.items():
            inputs = [tuple(_arg_value(rng, arg, width) for arg in arg_names) for _ in range(samples)]
            if name == "swap_field":
                # Keep the two fields disjoint: i + n <= j.
                inputs = [(x, 0, width // 2, n) for x, _, _, n in inputs]
            cases.append(OperationCase(name, width, inputs))
    return cases


def _write_csv(path: Path, fieldnames: list[str], rows: list[dict[str, object]]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=fieldnames)
        writer.writeheader()
        writer.writerows(rows)


def run_operation_bench(cases: list[OperationCase], repeats: int) -> list[dict[str, object]]:
    rows: list[dict[str, object]] = []
    for case in cases:
        fn = bitops_for(case.width).operation(case.name)
        start = perf_counter()
        for _ in range(repeats):
            for args in case.inputs:
                fn(*args)
        elapsed_ms = (perf_counter() - start) * 1000.0
        calls = repeats * len(case.inputs)
        ops_per_sec = int(calls / max(elapsed_ms / 1000.0, 1e-9))
        logger.debug("%s/%d: %d calls in %.3f ms", case.name, case.width, calls, elapsed_ms)
        rows.append(
            {
                "operation": case.name,
                "width": case.width,
                "calls": calls,
                "elapsed_ms": round(elapsed_ms, 3),
                "ops_per_sec": ops_per_sec,
            }
        )
    return rows


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate bit operation benchmark CSV files")
    parser.add_argument(
        "--metrics-dir",
        default=str(ROOT / "docs" / "metrics"),
        help="Output directory for CSV metrics",
    )
    parser.add_argument("--samples", type=int, default=1000, help="Random inputs per operation")
    parser.add_argument("--repeats", type=int, default=20, help="Passes over the inputs")
    parser.add_argument("--seed", type=int, default=2024, help="Input generator seed")
    parser.add_argument("--verbose", action="store_true", help="Log per-operation timings")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(name)s: %(message)s")
    metrics_dir = Path(args.metrics_dir)

    cases = build_cases(args.samples, args.seed)
    rows = run_operation_bench(cases, args.repeats)

    path = metrics_dir / "op_metrics.csv"
    _write_csv(
        path,
        fieldnames=["operation", "width", "calls", "elapsed_ms", "ops_per_sec"],
        rows=rows,
    )
    logger.info("wrote %s", path)


if __name__ == "__main__":
    main()
