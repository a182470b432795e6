"""Blind search for the orb.

The explorer only sees its current node, the neighbor ids and a
wall-agnostic distance for each of them.  It runs a depth-first search over the
nodes it discovers, trying the neighbors that look closest first and walking
back to the previous node whenever a branch is exhausted.  The walk is driven
by an explicit stack of frames, so deep caverns never hit the recursion limit.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from ..core.interfaces import HuntState
from ..core.models import HuntResult, NodeStatus

__all__ = ["Explorer"]

logger = logging.getLogger(__name__)


@dataclass
class _Frame:
    node_id: int
    pending: Iterator[NodeStatus]


class _Visited:
    """Insertion-ordered visited ids with constant-time membership."""

    def __init__(self) -> None:
        self._order: list[int] = []
        self._seen: set[int] = set()

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._seen

    def __len__(self) -> int:
        return len(self._order)

    def add(self, node_id: int) -> None:
        self._order.append(node_id)
        self._seen.add(node_id)

    def as_tuple(self) -> tuple[int, ...]:
        return tuple(self._order)


def _ordered(neighbors: Iterable[NodeStatus]) -> Iterator[NodeStatus]:
    return iter(sorted(neighbors, key=NodeStatus.sort_key))


class Explorer:
    """Depth-first hunt with closest-first neighbor ordering."""

    def explore(self, state: HuntState, *, visited: set[int] | None = None) -> HuntResult:
        """Walk until standing on the orb or until every reachable node is tried.

        ``visited`` pre-seeds ids that must not be entered; a start node that
        is already among them fails the run without moving.  Failure is a
        normal return with ``found`` set to False and the agent back on its
        start node.
        """

        seen = _Visited()
        for node_id in sorted(visited or ()):
            seen.add(node_id)
        preseeded = len(seen)
        moves = 0

        def result(found: bool) -> HuntResult:
            return HuntResult(found=found, visited=seen.as_tuple()[preseeded:], moves=moves)

        start = state.current_location()
        if start in seen:
            return result(False)
        seen.add(start)
        if state.distance_to_target() == 0:
            return result(True)

        stack = [_Frame(start, _ordered(state.neighbors()))]
        while stack:
            frame = stack[-1]
            step = next((status for status in frame.pending if status.id not in seen), None)
            if step is None:
                stack.pop()
                if stack:
                    # Dead end: walk back to the node this branch started from.
                    state.move_to(stack[-1].node_id)
                    moves += 1
                    logger.debug("Backtracking", extra={"from": frame.node_id, "to": stack[-1].node_id})
                continue

            state.move_to(step.id)
            moves += 1
            seen.add(step.id)
            if state.distance_to_target() == 0:
                logger.debug("Orb found", extra={"node": step.id, "moves": moves})
                return result(True)
            stack.append(_Frame(step.id, _ordered(state.neighbors())))

        logger.debug("Orb unreachable from start", extra={"start": start, "visited": len(seen)})
        return result(False)
