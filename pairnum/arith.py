# pairnum/arith.py
"""
Pair-number arithmetic.

    join(a, b)                      [a,b] without reduction
    add(a, b)                       reduce_tree(join(a, b))
    sum_trees(trees)                left fold with add
    greatest_pair_magnitude(trees)  max |x + y| over distinct ordered pairs

Addition is not commutative, so both a + b and b + a are tried when
searching for the largest magnitude.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

from .core.node import BRANCH, EMPTY
from .core.tree import PairTree
from .reduction import reduce_tree


def join(a: PairTree, b: PairTree) -> PairTree:
    """New tree whose root has copies of `a` and `b` as its children."""
    height = 1 + max(a.height(), b.height())
    tree = PairTree([EMPTY] * (1 << height))
    tree.values[0] = BRANCH
    tree.insert_subtree(1, a.root())
    tree.insert_subtree(2, b.root())
    return tree


def add(
    a: PairTree,
    b: PairTree,
    *,
    trace: Optional[List[Dict[str, Any]]] = None,
) -> PairTree:
    """Reduced sum of `a` and `b`. Neither input is modified."""
    return reduce_tree(join(a, b), trace=trace)


def sum_trees(trees: Sequence[PairTree]) -> PairTree:
    it = iter(trees)
    try:
        total = next(it).copy()
    except StopIteration:
        raise ValueError("input did not contain any trees") from None
    for tree in it:
        total = add(total, tree)
    return total


def pair_magnitudes(trees: Sequence[PairTree]) -> Iterator[Tuple[int, int, int]]:
    """Yield (i, j, magnitude of trees[i] + trees[j]) for every i != j."""
    for i, a in enumerate(trees):
        for j in range(i + 1, len(trees)):
            b = trees[j]
            yield i, j, add(a, b).magnitude()
            yield j, i, add(b, a).magnitude()


def greatest_pair_magnitude(trees: Sequence[PairTree]) -> int:
    if len(trees) < 2:
        raise ValueError("need at least two trees to form a pair")
    return max(m for _, _, m in pair_magnitudes(trees))
