#!/usr/bin/env python3
"""Benchmark entry point: Fenwick tree vs linear-scan baseline."""

from __future__ import annotations

import argparse

from fenwick_tree.benchmark.runner import run_benchmark
from fenwick_tree.utils.config import load_config
from fenwick_tree.utils.logging import ExperimentLogger
from fenwick_tree.utils.seeding import seed_everything


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Time prefix sums and point updates against a naive list",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
examples:
  python scripts/benchmark.py
  python scripts/benchmark.py --override configs/benchmarks/large.yaml
  python scripts/benchmark.py --set benchmark.sizes=[50,500] --set mlflow.enabled=true
""",
    )
    parser.add_argument(
        "--config",
        default="configs/default.yaml",
        help="Path to base config (default: configs/default.yaml)",
    )
    parser.add_argument("--override", default=None, help="Path to config override")
    parser.add_argument(
        "--set",
        action="append",
        default=[],
        dest="overrides",
        metavar="KEY=VALUE",
        help="Override config values (e.g. --set benchmark.n_ops=500)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)

    config = load_config(
        default_path=args.config,
        override_path=args.override,
        overrides=args.overrides,
    )
    rng = seed_everything(config["seed"])
    print(f"Sizes: {config['benchmark']['sizes']}")
    print(f"Operations per size: {config['benchmark']['n_ops']}")

    logger = ExperimentLogger.from_config(config)
    try:
        results = run_benchmark(config, logger=logger, rng=rng)
    finally:
        if logger is not None:
            logger.end()

    for size, metrics in results.items():
        print(
            f"n={size:>8}: query {metrics['fenwick/query_s']:.4f}s "
            f"vs {metrics['naive/query_s']:.4f}s ({metrics['speedup/query']:.1f}x), "
            f"update {metrics['fenwick/update_s']:.4f}s "
            f"vs {metrics['naive/update_s']:.4f}s"
        )


if __name__ == "__main__":
    main()
