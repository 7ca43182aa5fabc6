# pairnum/config.py
"""
Runtime configuration.

Environment knobs (read once at import):

    PAIRNUM_MAX_STEPS   upper bound on rewrite steps per reduction
    PAIRNUM_TRACE       "1" makes the CLI emit reduction traces by default
"""

from __future__ import annotations

import os

# Reduction step budget. Real inputs need a few hundred steps at most.
MAX_REDUCTION_STEPS = int(os.environ.get("PAIRNUM_MAX_STEPS", "100000"))

# Feature flag: set PAIRNUM_TRACE=1 to emit traces from the CLI
TRACE_ENABLED = os.environ.get("PAIRNUM_TRACE", "0") == "1"

# A pair nested inside four pairs sits at rank 4 (slots 15..30); its leaves
# sit at rank 5, which gives a tree height of 6.
EXPLODE_HEIGHT = 6
EXPLODE_RANK_START = 15
EXPLODE_RANK_END = 31

SPLIT_THRESHOLD = 10

DEFAULT_INPUT = "input.txt"
