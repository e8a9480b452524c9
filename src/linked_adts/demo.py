#!/usr/bin/env python3
"""Demonstration driver for LinkedList and Tree.

Builds the structures from a DemoConfig and prints each step.

Usage:
    python -m linked_adts all
    python -m linked_adts tree --config demo.toml --log-level DEBUG
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import DemoConfig, load_config, resolve_log_level
from .errors import ConfigError, MissingNodeError
from .linkedlist import LinkedList
from .tree import Tree

logger = logging.getLogger(__name__)


def _print_sizes(xs: LinkedList[int]) -> None:
    print(f"Size: {xs.size()}")
    print(f"SizeIterative: {xs.size_iterative()}")
    print(f"IsEmpty: {xs.is_empty()}")


def run_list_demo(cfg: DemoConfig) -> LinkedList[int]:
    """Walks through insertion, lookup, removal and copying on a list."""
    xs = LinkedList[int]()
    print(xs)
    _print_sizes(xs)

    for index, value in zip(cfg.list_indices, cfg.list_values):
        xs.add(index, value)
        print(xs)
    _print_sizes(xs)

    for value in cfg.list_values[-2:]:
        print(f"{value} is at: {xs.index_of(value)}")
        print(f"{value} is at: {xs.index_of_recursive(value)}")

    replacement = max(cfg.list_values, default=0) + 1
    if xs.size_iterative() >= 2:
        xs.remove(0)
        print(f"Removed at 0: {xs}")
        xs.add(0, replacement)
        print(xs)
        xs.remove(1)
        print(f"Removed at 1: {xs}")
    print(xs)
    print(xs.to_string_reverse())

    ys = LinkedList(xs)
    print(f"xs: {xs}")
    print(f"ys: {ys}")

    if xs.delete_first():
        print("Removed in xs at 0!")
        print(f"xs: {xs}")
        print(f"ys: {ys}")

    if ys.size_iterative() >= 2:
        ys.remove(1)
        print("Removed in ys at 1!")
        print(f"xs: {xs}")
        print(f"ys: {ys}")
    return xs


def run_tree_demo(cfg: DemoConfig) -> Tree[int]:
    """Applies the configured add_at_position calls and reads every position back."""
    positions = cfg.positions()
    tree = Tree[int]()
    for path_index, value in cfg.tree_inserts:
        pos = positions[path_index]
        modified = tree.add_at_position(pos, value)
        logger.info(f"add_at_position({pos}, {value}) -> {modified}")
    print(f"Tree: {tree}")
    print(f"Size: {tree.size()}")
    for pos in positions:
        try:
            print(f"Value at position {pos}: {tree.get(pos)}")
        except MissingNodeError as e:
            print(f"Value at position {pos}: {e}")
    return tree


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="linked-adts-demo", description="Print LinkedList and Tree walkthroughs"
    )
    p.add_argument(
        "command",
        nargs="?",
        choices=["list", "tree", "all"],
        default="all",
        help="Which demo to run (default: all)",
    )
    p.add_argument("--config", type=Path, help="TOML file with a [demo] table")
    p.add_argument(
        "--log-level",
        type=str,
        help="Logging level, overrides the config file (default: WARNING)",
    )
    return p


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        cfg = load_config(args.config) if args.config else DemoConfig()
        level = resolve_log_level(args.log_level or cfg.log_level)
    except ConfigError as e:
        print(f"Error loading config: {e}")
        return 2

    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(level)

    if args.command in ("list", "all"):
        run_list_demo(cfg)
    if args.command in ("tree", "all"):
        run_tree_demo(cfg)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
