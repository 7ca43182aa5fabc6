# pairnum/parser.py
"""
Parser for the bracketed pair-number notation.

Grammar (no whitespace, single-digit literals):

    Tree := digit | "[" Tree "," Tree "]"

The parser never builds an intermediate AST. It walks the text once and
keeps a single running slot index:

    "["    descend to the left child     index = 2*index + 1
    ","    move to the right sibling     index = index + 1
    "]"    ascend to the parent          index = (index - 1) // 2
    digit  insert_leaf(index, digit)

insert_leaf forces every ancestor to Branch, so no separate pass is needed
to create the internal nodes.
"""

from __future__ import annotations

from typing import Iterable, List

from .core.tree import PairTree, left_index, right_index
from .errors import MalformedInput

# Characters allowed immediately before each token ("" is start of input).
_OPENERS = ("", "[", ",")
_CLOSERS = tuple("0123456789]")


def parse_tree(text: str) -> PairTree:
    """
    Parse one pair-number literal into a PairTree.
    Raises MalformedInput on invalid syntax.
    """
    s = text.strip()
    if not s:
        raise MalformedInput("empty input")

    tree = PairTree()
    index = 0
    prev = ""
    for pos, ch in enumerate(s):
        if ch == "[":
            _expect_after(prev, _OPENERS, pos, ch)
            index = left_index(index)
        elif ch == "]":
            _expect_after(prev, _CLOSERS, pos, ch)
            if index == 0:
                raise MalformedInput(f"unbalanced ']' at pos {pos}", pos, ch)
            if index % 2 == 1:
                raise MalformedInput(f"pair closed before its second element at pos {pos}", pos, ch)
            index = (index - 1) // 2
        elif ch == ",":
            _expect_after(prev, _CLOSERS, pos, ch)
            if index % 2 == 0:
                raise MalformedInput(f"extra element in pair at pos {pos}", pos, ch)
            index += 1
        elif "0" <= ch <= "9":
            if prev.isdigit():
                raise MalformedInput(
                    f"multi-digit literal at pos {pos - 1}: {s[pos - 1 : pos + 1]!r}",
                    pos,
                    ch,
                )
            _expect_after(prev, _OPENERS, pos, ch)
            tree.insert_leaf(index, int(ch))
        else:
            raise MalformedInput(f"invalid character {ch!r} at pos {pos}", pos, ch)
        prev = ch

    if index != 0:
        raise MalformedInput(f"unterminated input: {s!r}", len(s))
    _check_pairs(tree, s)
    return tree


def parse_trees(lines: Iterable[str]) -> List[PairTree]:
    """Parse every non-blank line."""
    return [parse_tree(line) for line in lines if line.strip()]


def _expect_after(prev: str, allowed: tuple, pos: int, ch: str) -> None:
    if prev not in allowed:
        got = "start of input" if not prev else repr(prev)
        raise MalformedInput(f"unexpected {ch!r} after {got} at pos {pos}", pos, ch)


def _check_pairs(tree: PairTree, s: str) -> None:
    # Catches "[1]" and "[1,2,3]", which the index walk alone accepts.
    for index, node in enumerate(tree.values):
        if not node.is_branch():
            continue
        if tree.node_at(left_index(index)).is_empty() or tree.node_at(right_index(index)).is_empty():
            raise MalformedInput(f"pair at slot {index} does not have two elements: {s!r}")
