# pairnum/__init__.py
"""
pairnum public API surface.

    - Store: PairTree, NodeRef, Node, NodeKind, LeafIter
    - Text: parse_tree, parse_trees, to_text, pretty_tree
    - Rules: explode, split, step, reduce_tree
    - Arithmetic: join, add, sum_trees, greatest_pair_magnitude
    - Errors: PairNumError, MalformedInput, InvariantViolation,
              ReductionBudgetExceeded
"""

from __future__ import annotations

from .errors import (
    PairNumError,
    MalformedInput,
    InvariantViolation,
    ReductionBudgetExceeded,
)
from .core import Node, NodeKind, EMPTY, BRANCH, leaf, PairTree, NodeRef, LeafIter, neighbor_of
from .parser import parse_tree, parse_trees
from .pretty import to_text, pretty_tree
from .reduction import explode, split, step, reduce_tree, StepResult
from .arith import join, add, sum_trees, pair_magnitudes, greatest_pair_magnitude


__all__ = [
    # errors
    "PairNumError",
    "MalformedInput",
    "InvariantViolation",
    "ReductionBudgetExceeded",

    # store
    "Node",
    "NodeKind",
    "EMPTY",
    "BRANCH",
    "leaf",
    "PairTree",
    "NodeRef",
    "LeafIter",
    "neighbor_of",

    # text
    "parse_tree",
    "parse_trees",
    "to_text",
    "pretty_tree",

    # reduction
    "explode",
    "split",
    "step",
    "reduce_tree",
    "StepResult",

    # arithmetic
    "join",
    "add",
    "sum_trees",
    "pair_magnitudes",
    "greatest_pair_magnitude",
]
