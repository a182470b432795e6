"""Live simulation sessions the strategies act upon.

A :class:`HuntSession` exposes only the local view (current id, neighbor ids
and a wall-agnostic distance to the orb).  A :class:`ScramSession` exposes the
whole cavern together with the collapsing step budget.  Both validate every
command and keep a record of the walk for later inspection.
"""

from __future__ import annotations

import logging

from ..core.errors import CavernCollapsedError, IllegalMoveError
from ..core.interfaces import HuntState, ScramState
from ..core.models import Node, NodeStatus
from .graph import Cavern
from .schemas import HuntOutcome, ScramOutcome

__all__ = ["HuntSession", "ScramSession", "manhattan"]

logger = logging.getLogger(__name__)


def manhattan(a: tuple[int, int], b: tuple[int, int]) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


class HuntSession(HuntState):
    def __init__(self, cavern: Cavern, start: int, target: int) -> None:
        self._cavern = cavern
        self._start = cavern.node(start)
        self._target = cavern.node(target)
        self._position = self._start
        self._steps = 0
        self._walk: list[int] = [self._start.id]

    def _distance(self, node: Node) -> int:
        if node == self._target:
            return 0
        if node.position is None or self._target.position is None:
            return 1
        # Distinct nodes never report zero, even if they share coordinates.
        return max(1, manhattan(node.position, self._target.position))

    @property
    def walk(self) -> tuple[int, ...]:
        return tuple(self._walk)

    @property
    def steps(self) -> int:
        return self._steps

    def current_location(self) -> int:
        return self._position.id

    def neighbors(self) -> list[NodeStatus]:
        return [NodeStatus(id=node.id, distance=self._distance(node)) for node in self._position.neighbors()]

    def distance_to_target(self) -> int:
        return self._distance(self._position)

    def move_to(self, node_id: int) -> None:
        destination = self._cavern.node(node_id)
        edge = self._position.edge_to(destination)
        if edge is None:
            raise IllegalMoveError(f"node {node_id} is not adjacent to node {self._position.id}")
        self._position = destination
        self._steps += edge.weight
        self._walk.append(node_id)

    def outcome(self) -> HuntOutcome:
        return HuntOutcome(
            start=self._start.id,
            target=self._target.id,
            position=self._position.id,
            found=self._position == self._target,
            steps=self._steps,
            moves=len(self._walk) - 1,
            walk=list(self._walk),
        )


class ScramSession(ScramState):
    def __init__(self, cavern: Cavern, start: int, exit_id: int, steps: int) -> None:
        if steps < 0:
            raise ValueError("step budget must be non-negative")
        self._cavern = cavern
        self._start = cavern.node(start)
        self._exit = cavern.node(exit_id)
        self._position = self._start
        self._budget = steps
        self._remaining = steps
        self._gold = 0
        self._collapsed = False
        self._walk: list[int] = [self._start.id]

    @property
    def walk(self) -> tuple[int, ...]:
        return tuple(self._walk)

    @property
    def gold(self) -> int:
        return self._gold

    def current_node(self) -> Node:
        return self._position

    def exit_node(self) -> Node:
        return self._exit

    def all_nodes(self) -> list[Node]:
        return self._cavern.nodes()

    def steps_remaining(self) -> int:
        return self._remaining

    def move_to(self, node: Node) -> None:
        destination = self._cavern.node(node.id)
        edge = self._position.edge_to(destination)
        if edge is None:
            raise IllegalMoveError(f"node {node.id} is not adjacent to node {self._position.id}")
        if edge.weight > self._remaining:
            self._collapsed = True
            raise CavernCollapsedError(
                f"moving {self._position.id}->{node.id} costs {edge.weight} but only {self._remaining} steps remain"
            )
        self._remaining -= edge.weight
        self._position = destination
        self._walk.append(destination.id)

    def pick_up_gold(self) -> None:
        amount = self._position.take_gold()
        self._gold += amount
        logger.debug("Gold collected", extra={"node": self._position.id, "amount": amount})

    def outcome(self) -> ScramOutcome:
        return ScramOutcome(
            start=self._start.id,
            exit_id=self._exit.id,
            position=self._position.id,
            escaped=self._position == self._exit and not self._collapsed,
            collapsed=self._collapsed,
            steps_taken=self._budget - self._remaining,
            steps_remaining=self._remaining,
            gold=self._gold,
            walk=list(self._walk),
        )
