# pairnum/core/tree.py
"""
Flat tree store for pair numbers.

A pair number is a binary tree with values only at the leaves. It is kept
in one Python list addressed like a complete binary tree:

    root            index 0
    children(i)     2*i + 1, 2*i + 2
    parent(i)       (i - 1) // 2

The list length is always 0 or a power of two and grows by doubling.
Slots past the end read as Empty, so navigation never needs bounds checks.

Height is derived from the occupied extent on every call rather than
cached; the reduction engine mutates the tree between every step.
"""

from __future__ import annotations

from typing import Iterator, List, Optional

from ..errors import InvariantViolation
from .node import BRANCH, EMPTY, Node, NodeKind, leaf
from .traversal import LeafIter


def left_index(index: int) -> int:
    return index * 2 + 1


def right_index(index: int) -> int:
    return index * 2 + 2


def parent_index(index: int) -> int:
    if index <= 0:
        raise ValueError("root has no parent")
    return (index - 1) // 2


class NodeRef:
    """Read-only cursor into a PairTree."""

    __slots__ = ("tree", "index")

    def __init__(self, tree: "PairTree", index: int) -> None:
        self.tree = tree
        self.index = index

    def node(self) -> Node:
        return self.tree.node_at(self.index)

    @property
    def kind(self) -> NodeKind:
        return self.node().kind

    @property
    def value(self) -> int:
        node = self.node()
        if not node.is_leaf():
            raise InvariantViolation(f"slot {self.index} is {node!r}, not a leaf")
        return node.value

    def is_leaf(self) -> bool:
        return self.node().is_leaf()

    def is_branch(self) -> bool:
        return self.node().is_branch()

    def is_empty(self) -> bool:
        return self.node().is_empty()

    def left(self) -> Optional["NodeRef"]:
        if not self.is_branch():
            return None
        return NodeRef(self.tree, left_index(self.index))

    def right(self) -> Optional["NodeRef"]:
        if not self.is_branch():
            return None
        return NodeRef(self.tree, right_index(self.index))

    def magnitude(self) -> int:
        """3 * magnitude(left) + 2 * magnitude(right); a leaf is its value."""
        node = self.node()
        if node.is_leaf():
            return node.value
        if node.is_branch():
            return 3 * self.left().magnitude() + 2 * self.right().magnitude()
        raise InvariantViolation(
            f"cannot take magnitude of empty slot {self.index} in {self.tree}"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NodeRef):
            return NotImplemented
        return self.tree is other.tree and self.index == other.index

    def __hash__(self) -> int:
        return hash((id(self.tree), self.index))

    def __repr__(self) -> str:
        return f"NodeRef({self.index}, {self.node()!r})"


class PairTree:
    """A binary tree stored in a list, with values only at the leaf nodes."""

    def __init__(self, values: Optional[List[Node]] = None) -> None:
        self.values: List[Node] = list(values) if values is not None else []

    # ---------- size / shape ----------

    def logical_size(self) -> int:
        """Length with trailing Empty slots trimmed."""
        size = len(self.values)
        while size > 0 and self.values[size - 1].is_empty():
            size -= 1
        return size

    def height(self) -> int:
        return self.logical_size().bit_length()

    def ensure_capacity(self, index: int) -> None:
        """Double the backing list until `index` is addressable."""
        size = len(self.values)
        if index < size:
            return
        size = max(size, 1)
        while size <= index:
            size *= 2
        self.values.extend([EMPTY] * (size - len(self.values)))

    # ---------- navigation ----------

    def node_at(self, index: int) -> Node:
        if 0 <= index < len(self.values):
            return self.values[index]
        return EMPTY

    def ref(self, index: int) -> NodeRef:
        return NodeRef(self, index)

    def root(self) -> NodeRef:
        return NodeRef(self, 0)

    def leaves(self, reverse: bool = False) -> LeafIter:
        return LeafIter(self.root(), reverse=reverse)

    def magnitude(self) -> int:
        if not self.values:
            return 0
        return self.root().magnitude()

    # ---------- mutation ----------

    def insert_leaf(self, index: int, value: int) -> None:
        """
        Store Leaf(value) at `index` and force every ancestor to Branch.

        Parser and split rely on the ancestor walk to establish branch
        structure lazily. A Branch already at `index` loses its subtree.
        """
        self.ensure_capacity(index)
        if self.values[index].is_branch():
            self.delete_subtree(left_index(index))
            self.delete_subtree(right_index(index))
        self.values[index] = leaf(value)
        while index > 0:
            index = parent_index(index)
            self.values[index] = BRANCH

    def insert_subtree(self, index: int, source: NodeRef) -> None:
        """Copy the subtree under `source` (any tree) into `index`."""
        node = source.node()
        if node.is_empty():
            self.delete_subtree(index)
        elif node.is_leaf():
            self.insert_leaf(index, node.value)
        else:
            self.ensure_capacity(right_index(index))
            self.values[index] = BRANCH
            self.insert_subtree(left_index(index), source.left())
            self.insert_subtree(right_index(index), source.right())

    def delete_subtree(self, index: int) -> None:
        if index < len(self.values):
            self.delete_subtree(left_index(index))
            self.delete_subtree(right_index(index))
            self.values[index] = EMPTY

    def increase_leaf(self, index: int, amount: int) -> None:
        node = self.node_at(index)
        if not node.is_leaf():
            raise InvariantViolation(f"cannot increment non-leaf {node!r} at slot {index}")
        self.values[index] = leaf(node.value + amount)

    # ---------- misc ----------

    def copy(self) -> "PairTree":
        return PairTree(self.values)

    def __iter__(self) -> Iterator[NodeRef]:
        return iter(self.leaves())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PairTree):
            return NotImplemented
        return self.values[: self.logical_size()] == other.values[: other.logical_size()]

    __hash__ = None  # mutable

    def __str__(self) -> str:
        # Import lazily, at call time, to avoid circular imports.
        from pairnum.pretty import to_text

        return to_text(self)

    def __repr__(self) -> str:
        return f"PairTree({self})"
