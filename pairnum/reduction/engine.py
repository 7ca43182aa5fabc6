# pairnum/reduction/engine.py
"""
Reduction fixpoint driver.

Each pass tries explode first and only falls back to split when nothing
exploded; at most one rewrite happens per pass. The loop stops at the
first pass where neither rule applies. This ordering defines the result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .. import config
from ..core.tree import PairTree
from ..errors import ReductionBudgetExceeded
from ..trace import EVENT_EXPLODE, EVENT_NORMAL, EVENT_SPLIT, make_event
from .rules import explode, split

logger = logging.getLogger(__name__)

EXPLODE = "explode"
SPLIT = "split"


@dataclass(frozen=True)
class StepResult:
    """Outcome of one reduction pass. rule is None once the tree is normal."""
    rule: Optional[str] = None
    index: Optional[int] = None

    @property
    def applied(self) -> bool:
        return self.rule is not None


def step(tree: PairTree) -> StepResult:
    """Apply at most one rewrite to `tree` in place."""
    index = explode(tree)
    if index is not None:
        return StepResult(EXPLODE, index)
    index = split(tree)
    if index is not None:
        return StepResult(SPLIT, index)
    return StepResult()


def reduce_tree(
    tree: PairTree,
    *,
    trace: Optional[List[Dict[str, Any]]] = None,
    max_steps: Optional[int] = None,
) -> PairTree:
    """
    Reduce `tree` in place until neither rule applies and return it.

    If `trace` is a list, one event per rewrite plus a closing
    "reduction.normal" event are appended to it.

    Raises:
        ReductionBudgetExceeded: more than `max_steps` rewrites
            (default config.MAX_REDUCTION_STEPS).
    """
    limit = max_steps if max_steps is not None else config.MAX_REDUCTION_STEPS
    steps = 0
    while True:
        result = step(tree)
        if not result.applied:
            break
        steps += 1
        if steps > limit:
            raise ReductionBudgetExceeded(
                f"reduction step limit exceeded ({limit} steps) for {tree}"
            )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s at slot %d -> %s", result.rule, result.index, tree)
        if trace is not None:
            typ = EVENT_EXPLODE if result.rule == EXPLODE else EVENT_SPLIT
            trace.append(make_event(typ, len(trace), str(tree), result.index, tree.height()))

    if trace is not None:
        trace.append(make_event(EVENT_NORMAL, len(trace), str(tree), height=tree.height()))
    return tree
