"""Benchmark loop comparing the Fenwick tree against linear scans."""

from __future__ import annotations

from typing import Any

import numpy as np
from tqdm import tqdm

from fenwick_tree.benchmark.timing import time_queries, time_updates
from fenwick_tree.naive import NaiveSequence
from fenwick_tree.tree import FenwickTree
from fenwick_tree.utils.logging import ExperimentLogger


def make_workload(
    size: int,
    n_ops: int,
    rng: np.random.Generator,
    value_range: tuple[int, int] = (-100, 100),
) -> dict[str, Any]:
    """Random initial values, prefix-query indices and point updates."""
    if size <= 0:
        raise ValueError(f"Workload size must be positive, got: {size!r}")
    low, high = value_range
    values = rng.integers(low, high, size=size, endpoint=True).tolist()
    queries = rng.integers(0, size, size=n_ops).tolist()
    new_values = rng.integers(low, high, size=n_ops, endpoint=True).tolist()
    positions = rng.integers(0, size, size=n_ops).tolist()
    return {
        "values": values,
        "queries": queries,
        "updates": list(zip(new_values, positions)),
    }


def _speedup(baseline: float, candidate: float) -> float:
    # perf_counter can report 0.0 for tiny batches
    return baseline / max(candidate, 1e-9)


def run_benchmark(
    config: dict,
    logger: ExperimentLogger | None = None,
    rng: np.random.Generator | None = None,
) -> dict[int, dict[str, float]]:
    """Time both structures on identical workloads for every configured size.

    Steps per size: build → query → update, checking that both
    structures agree after each phase.

    Workloads are drawn from *rng*; without one, a generator seeded from
    ``config["seed"]`` is used.

    Returns:
        Mapping of size to metrics (seconds and speedup ratios).
    """
    bench_cfg = config["benchmark"]
    if rng is None:
        rng = np.random.default_rng(config.get("seed", 0))
    value_range = tuple(bench_cfg.get("value_range", (-100, 100)))

    if logger is not None:
        logger.log_params(config)

    results: dict[int, dict[str, float]] = {}
    progress = bench_cfg.get("progress", True)

    with tqdm(bench_cfg["sizes"], desc="Benchmark", disable=not progress) as pbar:
        for size in pbar:
            workload = make_workload(size, bench_cfg["n_ops"], rng, value_range)

            # ── build ─────────────────────────────────────────────────────
            fenwick = FenwickTree.from_values(workload["values"])
            naive = NaiveSequence(workload["values"])

            # ── queries ───────────────────────────────────────────────────
            fenwick_query_s, fenwick_sum = time_queries(fenwick, workload["queries"])
            naive_query_s, naive_sum = time_queries(naive, workload["queries"])
            if fenwick_sum != naive_sum:
                raise RuntimeError(
                    f"Query checksum mismatch at size {size}: {fenwick_sum} != {naive_sum}"
                )

            # ── updates ───────────────────────────────────────────────────
            fenwick_update_s = time_updates(fenwick, workload["updates"])
            naive_update_s = time_updates(naive, workload["updates"])
            if fenwick.total != naive.total:
                raise RuntimeError(
                    f"Total mismatch after updates at size {size}: "
                    f"{fenwick.total} != {naive.total}"
                )

            metrics = {
                "fenwick/query_s": fenwick_query_s,
                "naive/query_s": naive_query_s,
                "fenwick/update_s": fenwick_update_s,
                "naive/update_s": naive_update_s,
                "speedup/query": _speedup(naive_query_s, fenwick_query_s),
                "speedup/update": _speedup(naive_update_s, fenwick_update_s),
            }
            results[size] = metrics

            if logger is not None:
                logger.log_metrics(metrics, step=size)
            pbar.set_postfix(size=size, query_speedup=f"{metrics['speedup/query']:.1f}x")

    return results
