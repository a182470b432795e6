from __future__ import annotations

from dataclasses import dataclass, field

from .errors import NoGoldError


@dataclass(eq=False)
class Node:
    """A cavern node: stable id, collectable gold and incident edges."""

    id: int
    gold: int = 0
    # Grid coordinates used for the wall-agnostic distance heuristic.
    position: tuple[int, int] | None = None
    _edges: dict[int, Edge] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        if self.gold < 0:
            raise ValueError(f"node {self.id} cannot carry negative gold ({self.gold})")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def edges(self) -> tuple[Edge, ...]:
        return tuple(self._edges[key] for key in sorted(self._edges))

    def neighbors(self) -> list[Node]:
        """Adjacent nodes in ascending id order."""

        return [edge.other(self) for edge in self.edges]

    def edge_to(self, other: Node) -> Edge | None:
        return self._edges.get(other.id)

    def is_adjacent(self, other: Node) -> bool:
        return other.id in self._edges

    def take_gold(self) -> int:
        """Remove and return all gold on this node."""

        if self.gold <= 0:
            raise NoGoldError(f"node {self.id} has no gold to pick up")
        amount = self.gold
        self.gold = 0
        return amount

    def _attach(self, edge: Edge) -> None:
        self._edges[edge.other(self).id] = edge


@dataclass(frozen=True)
class Edge:
    """Undirected weighted edge between two distinct nodes."""

    a: Node
    b: Node
    weight: int

    def __post_init__(self) -> None:
        if self.weight <= 0:
            raise ValueError(f"edge weight must be positive, got {self.weight}")
        if self.a == self.b:
            raise ValueError(f"self-loop on node {self.a.id} is not allowed")

    def other(self, node: Node) -> Node:
        if node == self.a:
            return self.b
        if node == self.b:
            return self.a
        raise ValueError(f"node {node.id} is not an endpoint of this edge")


@dataclass(frozen=True)
class NodeStatus:
    """What the agent can see of a neighbor while hunting."""

    id: int
    distance: int

    def sort_key(self) -> tuple[int, int]:
        return self.distance, self.id


@dataclass(frozen=True)
class HuntResult:
    """Outcome of one exploration run."""

    found: bool
    visited: tuple[int, ...]
    moves: int


@dataclass(frozen=True)
class Pickup:
    node_id: int
    amount: int


@dataclass(frozen=True)
class ScramResult:
    """Outcome of one scram run."""

    pickups: tuple[Pickup, ...]
    reached_exit: bool

    @property
    def gold(self) -> int:
        return sum(pickup.amount for pickup in self.pickups)
