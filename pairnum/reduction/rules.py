# pairnum/reduction/rules.py
"""
The two rewrite rules of pair-number reduction.

    explode   the leftmost pair nested inside four pairs is removed; its
              left value is added to the nearest leaf on the left, its
              right value to the nearest leaf on the right, and the pair
              becomes Leaf(0).
    split     the leftmost leaf >= 10 becomes [v // 2, v - v // 2].

Each rule applies at most once per call and returns the slot it rewrote,
or None if it did not apply.
"""

from __future__ import annotations

from typing import Optional

from ..config import EXPLODE_HEIGHT, EXPLODE_RANK_END, EXPLODE_RANK_START, SPLIT_THRESHOLD
from ..core.node import leaf
from ..core.traversal import neighbor_of
from ..core.tree import PairTree, left_index, right_index
from ..errors import InvariantViolation


def explode(tree: PairTree) -> Optional[int]:
    height = tree.height()
    if height < EXPLODE_HEIGHT:
        return None
    if height > EXPLODE_HEIGHT:
        raise InvariantViolation(f"tree should never reach height {height}: {tree}")

    # Stop at the first branch on the explode rank
    for index in range(EXPLODE_RANK_START, EXPLODE_RANK_END):
        if tree.node_at(index).is_branch():
            explode_node(tree, index)
            return index
    return None


def explode_node(tree: PairTree, index: int) -> None:
    li, ri = left_index(index), right_index(index)
    left, right = tree.node_at(li), tree.node_at(ri)
    if not left.is_leaf():
        raise InvariantViolation(f"expected leaf as left child of exploding slot {index}, got {left!r}")
    if not right.is_leaf():
        raise InvariantViolation(f"expected leaf as right child of exploding slot {index}, got {right!r}")

    prev = neighbor_of(tree, li, reverse=True)
    if prev is not None:
        tree.increase_leaf(prev.index, left.value)
    nxt = neighbor_of(tree, ri)
    if nxt is not None:
        tree.increase_leaf(nxt.index, right.value)

    tree.delete_subtree(li)
    tree.delete_subtree(ri)
    tree.values[index] = leaf(0)


def split(tree: PairTree) -> Optional[int]:
    for ref in tree.leaves():
        if ref.value >= SPLIT_THRESHOLD:
            split_node(tree, ref.index)
            return ref.index
    return None


def split_node(tree: PairTree, index: int) -> None:
    node = tree.node_at(index)
    if not node.is_leaf():
        raise InvariantViolation(f"expected a leaf to split at slot {index}, got {node!r}")
    half = node.value // 2
    tree.insert_leaf(left_index(index), half)
    tree.insert_leaf(right_index(index), node.value - half)
