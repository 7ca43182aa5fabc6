from .node import Node, NodeKind, EMPTY, BRANCH, leaf
from .tree import PairTree, NodeRef
from .traversal import LeafIter, neighbor_of

__all__ = [
    "Node",
    "NodeKind",
    "EMPTY",
    "BRANCH",
    "leaf",
    "PairTree",
    "NodeRef",
    "LeafIter",
    "neighbor_of",
]
