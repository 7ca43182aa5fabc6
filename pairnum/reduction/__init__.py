from .rules import explode, explode_node, split, split_node
from .engine import EXPLODE, SPLIT, StepResult, reduce_tree, step

__all__ = [
    "explode",
    "explode_node",
    "split",
    "split_node",
    "EXPLODE",
    "SPLIT",
    "StepResult",
    "reduce_tree",
    "step",
]
