"""Lightweight performance checks for return generation and accumulation.

Times the two hot paths on 100 000 points. Kept free of fixtures so it can
run in constrained CI environments.
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path

from finsim.mc.accumulate import accumulate
from finsim.mc.generator import generate
from finsim.schema.request import AccumulationSpec
from finsim.simulation.grid import resolve


def benchmark_generate(num_points: int = 100_000, repeats: int = 5) -> float:
    grid = resolve(num_points, total_duration=1_000_000.0)
    start = time.perf_counter()
    for _ in range(repeats):
        generate(grid, accumulate=False, yearly_mean=1.0, yearly_stddev=1.5)
    return (time.perf_counter() - start) * 1000 / repeats


def benchmark_accumulate(num_points: int = 100_000, repeats: int = 5) -> float:
    grid = resolve(num_points, total_duration=1_000_000.0)
    returns = generate(grid, accumulate=False, yearly_mean=1.0, yearly_stddev=1.5)
    spec = AccumulationSpec(start_value=100.0)
    start = time.perf_counter()
    for _ in range(repeats):
        accumulate(returns.copy(), spec)
    return (time.perf_counter() - start) * 1000 / repeats


def main() -> None:
    parser = argparse.ArgumentParser(description="Performance checks")
    parser.add_argument("--num-points", type=int, default=100_000)
    parser.add_argument("--out", type=Path, default=None, help="Optional file to write timings (JSON)")
    args = parser.parse_args()

    metrics = {
        "generate_ms": benchmark_generate(args.num_points),
        "accumulate_ms": benchmark_accumulate(args.num_points),
    }

    for key, value in metrics.items():
        print(f"{key}: {value:.2f} ms")

    if args.out:
        args.out.write_text(json.dumps(metrics, indent=2))


if __name__ == "__main__":
    main()
