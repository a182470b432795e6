"""Exceptions raised by the cavern collaborators.

The strategies never catch these: every call they make is guarded so that a
raised error always signals a bug in the caller, not a recoverable state.
"""

from __future__ import annotations

__all__ = [
    "CavernCollapsedError",
    "IllegalMoveError",
    "NoGoldError",
    "NoPathError",
]


class IllegalMoveError(ValueError):
    """Raised when moving to a node that is not adjacent to the current one."""


class NoGoldError(ValueError):
    """Raised when picking up gold on a node that carries none."""


class NoPathError(ValueError):
    """Raised when two nodes are not connected in the cavern."""


class CavernCollapsedError(RuntimeError):
    """Raised when a move costs more steps than remain in the budget."""
