# pairnum/core/traversal.py
"""
Ordered leaf traversal.

Depth-first walk with an explicit stack of cursors; no recursion and no
parent pointers. Branches are expanded, only leaves are yielded.

    forward   left-to-right (push right, then left)
    reverse   right-to-left (push left, then right)

The in-order neighbour of a leaf is found by walking until the leaf itself
is produced and taking whatever comes next.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from ..errors import InvariantViolation

if TYPE_CHECKING:  # pragma: no cover
    from .tree import NodeRef, PairTree


class LeafIter:
    """Iterator over the leaf cursors of a (sub)tree."""

    def __init__(self, start: "NodeRef", reverse: bool = False) -> None:
        self.stack: List["NodeRef"] = [] if start.is_empty() else [start]
        self.reverse = reverse

    def reversed(self) -> "LeafIter":
        """Copy of this iterator walking the other way."""
        copy = LeafIter.__new__(LeafIter)
        copy.stack = list(self.stack)
        copy.reverse = not self.reverse
        return copy

    def __iter__(self) -> "LeafIter":
        return self

    def __next__(self) -> "NodeRef":
        while self.stack:
            ref = self.stack.pop()
            node = ref.node()
            if node.is_leaf():
                return ref
            if node.is_empty():
                raise InvariantViolation(
                    f"encountered empty slot {ref.index} while walking {ref.tree}"
                )
            left, right = ref.left(), ref.right()
            if left.is_empty() or right.is_empty():
                raise InvariantViolation(
                    f"branch at slot {ref.index} has an empty child in {ref.tree}"
                )
            if self.reverse:
                self.stack.append(left)
                self.stack.append(right)
            else:
                self.stack.append(right)
                self.stack.append(left)
        raise StopIteration


def neighbor_of(tree: "PairTree", index: int, reverse: bool = False) -> Optional["NodeRef"]:
    """
    Leaf that follows slot `index` in traversal order.

    reverse=False gives the in-order successor, reverse=True the
    predecessor. None if `index` is the last leaf in that direction.
    """
    walk = tree.leaves(reverse=reverse)
    for ref in walk:
        if ref.index == index:
            return next(walk, None)
    return None
