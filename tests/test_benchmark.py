"""Tests for the benchmark harness."""

from __future__ import annotations

from typing import Any

import numpy as np
import pytest

from fenwick_tree import FenwickTree, NaiveSequence
from fenwick_tree.benchmark.runner import make_workload, run_benchmark
from fenwick_tree.benchmark.timing import time_queries, time_updates
from fenwick_tree.utils.seeding import seed_everything


class _RecordingLogger:
    def __init__(self) -> None:
        self.params: dict[str, Any] = {}
        self.metrics: list[tuple[dict[str, float], int | None]] = []

    def log_params(self, params: dict[str, Any], prefix: str = "") -> None:
        self.params.update(params)

    def log_metrics(self, metrics: dict[str, float], step: int | None = None) -> None:
        self.metrics.append((metrics, step))


def _config(sizes: list[int]) -> dict:
    return {
        "seed": 3,
        "benchmark": {"sizes": sizes, "n_ops": 50, "value_range": [-5, 5], "progress": False},
    }


def test_make_workload_shapes(rng: np.random.Generator) -> None:
    workload = make_workload(size=10, n_ops=30, rng=rng, value_range=(-3, 3))
    assert len(workload["values"]) == 10
    assert all(-3 <= v <= 3 for v in workload["values"])
    assert len(workload["queries"]) == 30
    assert all(0 <= q < 10 for q in workload["queries"])
    assert len(workload["updates"]) == 30
    assert all(0 <= idx < 10 for _, idx in workload["updates"])


def test_time_queries_checksums_agree(reference_values: list[int]) -> None:
    queries = [0, 6, 10, 3]
    _, fenwick_sum = time_queries(FenwickTree.from_values(reference_values), queries)
    elapsed, naive_sum = time_queries(NaiveSequence(reference_values), queries)
    assert fenwick_sum == naive_sum == 3 + 16 + 31 + 10
    assert elapsed >= 0.0


def test_time_updates_applies_all(reference_values: list[int]) -> None:
    tree = FenwickTree.from_values(reference_values)
    time_updates(tree, [(9, 3), (0, 0), (1, 3)])
    assert tree.get(3) == 1
    assert tree.get(0) == 0


def test_run_benchmark_reports_every_size() -> None:
    results = run_benchmark(_config([8, 33]))
    assert sorted(results) == [8, 33]
    for metrics in results.values():
        assert set(metrics) == {
            "fenwick/query_s",
            "naive/query_s",
            "fenwick/update_s",
            "naive/update_s",
            "speedup/query",
            "speedup/update",
        }
        assert all(v >= 0.0 for v in metrics.values())


def test_run_benchmark_logs_to_logger() -> None:
    logger = _RecordingLogger()
    run_benchmark(_config([4, 16]), logger=logger)  # type: ignore[arg-type]
    assert logger.params["seed"] == 3
    assert [step for _, step in logger.metrics] == [4, 16]


def test_make_workload_rejects_empty_size(rng: np.random.Generator) -> None:
    with pytest.raises(ValueError):
        make_workload(size=0, n_ops=5, rng=rng)


def test_run_benchmark_rejects_empty_size() -> None:
    with pytest.raises(ValueError):
        run_benchmark(_config([4, 0]))


def test_run_benchmark_draws_from_given_generator() -> None:
    rng = np.random.default_rng(11)
    untouched = np.random.default_rng(11)
    run_benchmark(_config([6]), rng=rng)
    # The workload consumed the caller's generator
    assert rng.integers(0, 2**32) != untouched.integers(0, 2**32)


def test_seeded_generator_reproduces_workload() -> None:
    expected = make_workload(5, 50, np.random.default_rng(3), (-5, 5))
    seeded = seed_everything(3)
    assert make_workload(5, 50, seeded, (-5, 5)) == expected
