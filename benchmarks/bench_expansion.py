"""
╔════════════════════════════════════════════════════════════════════════════╗
║  blockshuffle Benchmark Suite                                              ║
║                                                                            ║
║  Benchmarks:                                                               ║
║   1. Estimate accuracy vs actual expansion                                 ║
║   2. Expansion and optimization time per configuration                     ║
║   3. Estimated vs measured memory (deep size and process RSS)              ║
║   4. Depth growth across fan-out bounds                                    ║
╚════════════════════════════════════════════════════════════════════════════╝

Usage:
    python -m benchmarks.bench_expansion
"""

import gc
import os
import statistics
import sys
import time

import psutil

# Ensure blockshuffle is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from blockshuffle import (
    ResourceBudget,
    ShufflePipeline,
    TreeOptimizer,
    depth,
    estimate_count,
    expand,
)
from blockshuffle.utils.helpers import format_bytes, format_count, format_ns


# (length, min_block_size) pairs small enough to expand in full
CONFIGURATIONS = [
    (4, 1),
    (5, 1),
    (6, 1),
    (6, 2),
    (8, 2),
    (8, 4),
    (12, 3),
    (16, 8),
]

ROUNDS = 5


def time_expansion(length, min_block_size, rounds=ROUNDS):
    """Median wall time in ns of expanding ``range(length)``."""
    times = []
    for _ in range(rounds):
        gc.collect()
        start = time.perf_counter_ns()
        expand(range(length), length, min_block_size)
        times.append(time.perf_counter_ns() - start)
    return statistics.median(times)


def rss_bytes():
    return psutil.Process(os.getpid()).memory_info().rss


def run_benchmarks():
    print("=" * 80)
    print("  BLOCKSHUFFLE — EXPANSION BENCHMARK SUITE")
    print("=" * 80)
    print()

    # ─────────────────────────────────────────────────────────
    #  Benchmark 1 + 2: Estimate accuracy and expansion time
    # ─────────────────────────────────────────────────────────
    print("┌──────────────────────────────────────────────────────────────┐")
    print("│  BENCHMARK 1: Estimate Accuracy and Expansion Time          │")
    print("└──────────────────────────────────────────────────────────────┘")
    print(f"  {'len':>4} {'min':>4} {'estimated':>12} {'actual':>12} {'expand':>12}")
    print(f"  {'─' * 4} {'─' * 4} {'─' * 12} {'─' * 12} {'─' * 12}")

    budget = ResourceBudget(max_candidates=2_000_000)
    for length, min_block_size in CONFIGURATIONS:
        estimated = estimate_count(length, length, min_block_size)
        if estimated > budget.max_candidates:
            print(f"  {length:>4} {min_block_size:>4} {format_count(estimated):>12} {'skipped':>12}")
            continue
        result = ShufflePipeline(min_block_size=min_block_size, budget=budget).run(
            list(range(length))
        )
        elapsed = time_expansion(length, min_block_size)
        print(
            f"  {length:>4} {min_block_size:>4} {estimated:>12} "
            f"{result.stats.actual_count:>12} {format_ns(elapsed):>12}"
        )
    print()

    # ─────────────────────────────────────────────────────────
    #  Benchmark 3: Memory
    # ─────────────────────────────────────────────────────────
    print("┌──────────────────────────────────────────────────────────────┐")
    print("│  BENCHMARK 3: Estimated vs Measured Memory                  │")
    print("└──────────────────────────────────────────────────────────────┘")
    print(f"  {'len':>4} {'min':>4} {'estimated':>14} {'deep size':>14} {'RSS delta':>14}")
    print(f"  {'─' * 4} {'─' * 4} {'─' * 14} {'─' * 14} {'─' * 14}")

    for length, min_block_size in [(5, 1), (6, 1), (8, 2)]:
        gc.collect()
        before = rss_bytes()
        result = ShufflePipeline(min_block_size=min_block_size, budget=budget).run(
            list(range(length))
        )
        after = rss_bytes()
        print(
            f"  {length:>4} {min_block_size:>4} "
            f"{format_bytes(result.stats.estimated_memory_bytes):>14} "
            f"{format_bytes(result.stats.memory_bytes):>14} "
            f"{format_bytes(after - before):>14}"
        )
        del result
    print()

    # ─────────────────────────────────────────────────────────
    #  Benchmark 4: Depth vs fan-out bound
    # ─────────────────────────────────────────────────────────
    print("┌──────────────────────────────────────────────────────────────┐")
    print("│  BENCHMARK 4: Depth Growth Across Fan-out Bounds            │")
    print("└──────────────────────────────────────────────────────────────┘")
    print(f"  {'K':>4} {'depth':>8} {'passes':>8} {'optimize':>12}")
    print(f"  {'─' * 4} {'─' * 8} {'─' * 8} {'─' * 12}")

    for max_siblings in (2, 3, 4, 8, 16):
        forest = expand(range(6), 6, 1)
        optimizer = TreeOptimizer(max_siblings=max_siblings)
        start = time.perf_counter_ns()
        stats = optimizer.optimize(forest)
        elapsed = time.perf_counter_ns() - start
        print(
            f"  {max_siblings:>4} {depth(forest):>8} "
            f"{stats.grouping_passes:>8} {format_ns(elapsed):>12}"
        )
    print()


if __name__ == "__main__":
    run_benchmarks()
