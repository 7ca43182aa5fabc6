# pairnum/errors.py
"""
Exception hierarchy for pairnum.

Two tiers:

    - MalformedInput: bad text handed to the parser. Callers may report it
      and move on.
    - InvariantViolation: the tree structure is corrupt (a Branch with an
      Empty child, a tree deeper than the explode rank, ...). Never caught
      inside the package; continuing would yield wrong magnitudes.
"""

from __future__ import annotations

from typing import Optional


class PairNumError(Exception):
    """Base class for every pairnum error."""
    pass


class MalformedInput(PairNumError, ValueError):
    """Text that is not a valid pair-number literal."""

    def __init__(
        self,
        message: str,
        position: Optional[int] = None,
        char: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.position = position
        self.char = char


class InvariantViolation(PairNumError, RuntimeError):
    """Internal tree structure is corrupt."""
    pass


class ReductionBudgetExceeded(InvariantViolation):
    """Reduction ran for more steps than the configured budget."""
    pass
