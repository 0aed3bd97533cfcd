from __future__ import annotations

import argparse
import json
import logging
import random
import sys
from typing import Sequence

from .tour import TourResult, find_tour, random_start, render_tour_board


def _positive_int(value: str) -> int:
    parsed = int(value)
    if parsed < 1:
        raise argparse.ArgumentTypeError("Value must be >= 1.")
    return parsed


def _non_negative_int(value: str) -> int:
    parsed = int(value)
    if parsed < 0:
        raise argparse.ArgumentTypeError("Value must be >= 0.")
    return parsed


def _print_tour(result: TourResult) -> None:
    row, col = result.start
    print(f"Board size: {result.size}x{result.size}")
    print(f"Start: ({row}, {col})")
    print(f"Nodes visited: {result.stats.nodes_visited}")
    print(f"Backtracks: {result.stats.backtracks}")
    print(f"Boards cloned: {result.stats.boards_cloned}")
    print(f"Elapsed: {result.stats.elapsed_ms:.3f} ms")

    if result.status == "aborted":
        print("\nSearch aborted: node budget exhausted.")
        return
    if not result.solved:
        print("\nNo tour found from this square.")
        return
    print()
    print(render_tour_board(result.unwrap()))


def _resolve_start(args: argparse.Namespace) -> tuple[int, int]:
    if (args.row is None) != (args.col is None):
        raise ValueError("Provide both --row and --col, or neither for a random start.")
    if args.row is not None:
        return args.row, args.col
    return random_start(args.size, random.Random(args.seed))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="knights-tour",
        description="Knight's tour search: backtracking ordered by Warnsdorf's Rule.",
    )
    parser.add_argument("--verbose", "-v", action="store_true")
    subparsers = parser.add_subparsers(dest="command", required=True)

    solve = subparsers.add_parser("solve", help="Find a tour from one start square.")
    solve.add_argument("--size", "-n", type=_positive_int, default=8)
    solve.add_argument("--row", type=_non_negative_int)
    solve.add_argument("--col", type=_non_negative_int)
    solve.add_argument("--seed", type=int, help="Seed for the random start square.")
    solve.add_argument("--max-nodes", type=_positive_int)
    solve.add_argument("--json", action="store_true")

    benchmark = subparsers.add_parser(
        "benchmark", help="Search effort across board sizes from random starts."
    )
    benchmark.add_argument("--sizes", nargs="+", type=_positive_int, default=[6, 8])
    benchmark.add_argument("--seed", type=int, default=0)
    benchmark.add_argument("--max-nodes", type=_positive_int)
    benchmark.add_argument("--json", action="store_true")

    return parser


def _run_solve(args: argparse.Namespace) -> int:
    row, col = _resolve_start(args)
    result = find_tour(args.size, row, col, max_nodes=args.max_nodes)
    if args.json:
        print(json.dumps(result.to_dict(include_board=True), indent=2))
    else:
        _print_tour(result)
    return 0 if result.solved else 1


def _run_benchmark(args: argparse.Namespace) -> int:
    rng = random.Random(args.seed)
    rows: list[dict[str, object]] = []
    for size in args.sizes:
        row, col = random_start(size, rng)
        result = find_tour(size, row, col, max_nodes=args.max_nodes)
        rows.append(
            {
                "size": size,
                "start": [row, col],
                "status": result.status,
                "nodes_visited": result.stats.nodes_visited,
                "backtracks": result.stats.backtracks,
                "boards_cloned": result.stats.boards_cloned,
                "elapsed_ms": result.stats.elapsed_ms,
            }
        )

    if args.json:
        print(json.dumps(rows, indent=2))
    else:
        print("size  start     status       nodes     backtracks  elapsed_ms")
        for row in rows:
            start = "({}, {})".format(*row["start"])
            print(
                f"{row['size']:>4}  "
                f"{start:<8}  "
                f"{row['status']:<11}  "
                f"{row['nodes_visited']:>8}  "
                f"{row['backtracks']:>10}  "
                f"{row['elapsed_ms']:>10.3f}"
            )
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.command == "solve":
            return _run_solve(args)
        if args.command == "benchmark":
            return _run_benchmark(args)
    except (ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    print(f"Unknown command: {args.command}", file=sys.stderr)
    return 2
