"""
Slot values for the flat tree store.

A slot is one of:

    Leaf(v)   terminal scalar
    Branch    internal node, always with two non-empty children
    Empty     unallocated or deleted
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class NodeKind(Enum):
    EMPTY = auto()
    LEAF = auto()
    BRANCH = auto()


@dataclass(frozen=True)
class Node:
    kind: NodeKind
    value: int = 0

    def is_empty(self) -> bool:
        return self.kind is NodeKind.EMPTY

    def is_leaf(self) -> bool:
        return self.kind is NodeKind.LEAF

    def is_branch(self) -> bool:
        return self.kind is NodeKind.BRANCH

    def __repr__(self) -> str:
        if self.kind is NodeKind.LEAF:
            return f"Leaf({self.value})"
        if self.kind is NodeKind.BRANCH:
            return "Branch"
        return "Empty"


EMPTY = Node(NodeKind.EMPTY)
BRANCH = Node(NodeKind.BRANCH)


def leaf(value: int) -> Node:
    """Build a Leaf slot."""
    if value < 0:
        raise ValueError("leaf only supports value>=0")
    return Node(NodeKind.LEAF, value)
