# pairnum/pretty.py
"""
Rendering helpers for PairTree.

    to_text(tree)       canonical bracketed literal, the inverse of parse_tree
    pretty_tree(tree)   indented one-node-per-line view for debugging

Usage:

    from pairnum import parse_tree
    from pairnum.pretty import pretty_tree

    print(pretty_tree(parse_tree("[[1,2],3]")))
"""

from __future__ import annotations

from typing import List, Union

from pairnum.core.tree import NodeRef, PairTree


def _as_ref(x: Union[PairTree, NodeRef]) -> NodeRef:
    if isinstance(x, PairTree):
        return x.root()
    if isinstance(x, NodeRef):
        return x
    raise TypeError(f"expected PairTree or NodeRef, got {type(x).__name__}")


def to_text(x: Union[PairTree, NodeRef]) -> str:
    """Serialize a tree (or subtree) to the bracketed notation."""

    def rec(ref: NodeRef) -> str:
        node = ref.node()
        if node.is_leaf():
            return str(node.value)
        if node.is_branch():
            return "[" + rec(ref.left()) + "," + rec(ref.right()) + "]"
        return ""

    return rec(_as_ref(x))


def pretty_tree(x: Union[PairTree, NodeRef], *, indent: str = "  ") -> str:
    """Render a tree with one node per line.

    Branches are shown as ``[]`` and leaves as ``value @slot`` so explode
    and split targets can be matched against trace events.
    """
    lines: List[str] = []

    def rec(ref: NodeRef, depth: int) -> None:
        node = ref.node()
        pad = indent * depth
        if node.is_leaf():
            lines.append(f"{pad}{node.value} @{ref.index}")
        elif node.is_branch():
            lines.append(f"{pad}[] @{ref.index}")
            rec(ref.left(), depth + 1)
            rec(ref.right(), depth + 1)
        else:
            lines.append(f"{pad}∅ @{ref.index}")

    rec(_as_ref(x), 0)
    return "\n".join(lines)
