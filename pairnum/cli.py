"""
pairnum CLI

    pairnum sum [FILE]              fold every line, print the final tree and magnitude
    pairnum max [FILE]              greatest magnitude of any two distinct lines
    pairnum reduce TEXT [TEXT ...]  add literals left to right (reduce a single one)
    pairnum magnitude TEXT          magnitude of one literal

FILE defaults to input.txt. --json switches to a JSON payload with a
schema tag; `reduce --trace` emits the reduction events as JSON lines.

Exit codes: 0 ok, 1 bad input, 2 usage.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from pairnum import config
from pairnum.arith import add, greatest_pair_magnitude, sum_trees
from pairnum.core.tree import PairTree
from pairnum.io import read_lines
from pairnum.parser import parse_tree, parse_trees
from pairnum.reduction import reduce_tree
from pairnum.trace import canon_event_json

logger = logging.getLogger("pairnum.cli")

SUM_SCHEMA = "pairnum-sum.v1"
MAX_SCHEMA = "pairnum-max.v1"
REDUCE_SCHEMA = "pairnum-reduce.v1"


def _emit(payload: Dict[str, Any], pretty: bool) -> None:
    if pretty:
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        print(json.dumps(payload, ensure_ascii=False))


def _load(path: str) -> List[PairTree]:
    trees = parse_trees(read_lines(path))
    logger.info("read %d trees from %s", len(trees), path)
    return trees


def _cmd_sum(args: argparse.Namespace) -> int:
    tree = sum_trees(_load(args.file))
    if args.json:
        _emit({"schema": SUM_SCHEMA, "tree": str(tree), "magnitude": tree.magnitude()}, args.pretty)
    else:
        print(f"Final tree is {tree}")
        print(f"Its magnitude is {tree.magnitude()}")
    return 0


def _cmd_max(args: argparse.Namespace) -> int:
    greatest = greatest_pair_magnitude(_load(args.file))
    if args.json:
        _emit({"schema": MAX_SCHEMA, "magnitude": greatest}, args.pretty)
    else:
        print(f"The greatest magnitude is {greatest}")
    return 0


def _cmd_reduce(args: argparse.Namespace) -> int:
    trees = [parse_tree(t) for t in args.trees]
    # an explicit --json wins over PAIRNUM_TRACE
    trace: Optional[List[Dict[str, Any]]] = [] if args.trace and not args.json else None

    if len(trees) == 1:
        tree = reduce_tree(trees[0], trace=trace)
    else:
        tree = trees[0]
        for other in trees[1:]:
            # keep only the last addition
            if trace is not None:
                trace.clear()
            tree = add(tree, other, trace=trace)

    if trace is not None:
        for ev in trace:
            print(canon_event_json(ev))
    elif args.json:
        _emit({"schema": REDUCE_SCHEMA, "tree": str(tree), "magnitude": tree.magnitude()}, args.pretty)
    else:
        print(tree)
    return 0


def _cmd_magnitude(args: argparse.Namespace) -> int:
    print(parse_tree(args.tree).magnitude())
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="pairnum", description="Pair-number arithmetic.")
    ap.add_argument("--debug", action="store_true", help="Enable debug logging.")
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("sum", help="Add every tree in FILE and print the result.")
    p.add_argument("file", nargs="?", default=config.DEFAULT_INPUT)
    p.add_argument("--json", action="store_true", help="Emit JSON.")
    p.add_argument("--pretty", action="store_true", help="Pretty-print JSON output.")
    p.set_defaults(func=_cmd_sum)

    p = sub.add_parser("max", help="Greatest magnitude of any two distinct trees in FILE.")
    p.add_argument("file", nargs="?", default=config.DEFAULT_INPUT)
    p.add_argument("--json", action="store_true", help="Emit JSON.")
    p.add_argument("--pretty", action="store_true", help="Pretty-print JSON output.")
    p.set_defaults(func=_cmd_max)

    p = sub.add_parser("reduce", help="Add literals left to right and print the reduced tree.")
    p.add_argument("trees", nargs="+", metavar="TEXT")
    out = p.add_mutually_exclusive_group()
    out.add_argument(
        "--trace",
        action=argparse.BooleanOptionalAction,
        default=config.TRACE_ENABLED,
        help="Emit reduction events of the last addition as JSON lines.",
    )
    out.add_argument("--json", action="store_true", help="Emit JSON.")
    p.add_argument("--pretty", action="store_true", help="Pretty-print JSON output.")
    p.set_defaults(func=_cmd_reduce)

    p = sub.add_parser("magnitude", help="Magnitude of a single literal.")
    p.add_argument("tree", metavar="TEXT")
    p.set_defaults(func=_cmd_magnitude)

    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    try:
        args = ap.parse_args(argv)
    except SystemExit as e:
        return int(e.code) if e.code is not None else 0

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    # MalformedInput is a ValueError; InvariantViolation is left to propagate.
    try:
        return args.func(args)
    except (ValueError, FileNotFoundError) as e:
        print(f"pairnum: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
