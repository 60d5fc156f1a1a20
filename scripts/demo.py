#!/usr/bin/env python3
"""Walk through construction, queries and an update on a small tree."""

from __future__ import annotations

import argparse

from fenwick_tree import FenwickTree
from fenwick_tree.utils.config import load_config


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fenwick tree demonstration")
    parser.add_argument("--config", default="configs/default.yaml", help="Base config")
    parser.add_argument(
        "--set", action="append", default=[], dest="overrides", metavar="KEY=VALUE"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    demo = load_config(default_path=args.config, overrides=args.overrides)["demo"]

    tree = FenwickTree(len(demo["values"]))
    tree.construct(demo["values"])
    print(tree)

    k = demo["prefix_index"]
    print(f"prefix_sum({k}) = {tree.prefix_sum(k)}")

    value, index = demo["update"]["value"], demo["update"]["index"]
    tree.update(value, index)
    print(f"update({value}, {index})")
    print(tree)

    start, end = demo["range"]
    print(f"range_sum({start}, {end}) = {tree.range_sum(start, end)}")


if __name__ == "__main__":
    main()
