from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Collection, Sequence

from .models import Node, NodeStatus


class HuntState(ABC):
    """Local view of the cavern while searching for the orb."""

    @abstractmethod
    def current_location(self) -> int: ...

    @abstractmethod
    def neighbors(self) -> Collection[NodeStatus]: ...

    @abstractmethod
    def distance_to_target(self) -> int:
        """Wall-agnostic distance to the orb; zero iff standing on it."""

    @abstractmethod
    def move_to(self, node_id: int) -> None: ...


class ScramState(ABC):
    """Full view of the cavern while escaping."""

    @abstractmethod
    def current_node(self) -> Node: ...

    @abstractmethod
    def exit_node(self) -> Node: ...

    @abstractmethod
    def all_nodes(self) -> Collection[Node]: ...

    @abstractmethod
    def steps_remaining(self) -> int: ...

    @abstractmethod
    def move_to(self, node: Node) -> None: ...

    @abstractmethod
    def pick_up_gold(self) -> None: ...


class PathOracle(ABC):
    """Shortest paths and their costs over the fully known cavern."""

    @abstractmethod
    def shortest_path(self, source: Node, destination: Node) -> list[Node]:
        """Minimum-cost path, both endpoints included."""

    @abstractmethod
    def path_cost(self, path: Sequence[Node]) -> int: ...

    def distance(self, source: Node, destination: Node) -> int:
        """Cost of the cheapest route; defaults to ``path_cost(shortest_path(...))``."""

        return self.path_cost(self.shortest_path(source, destination))
