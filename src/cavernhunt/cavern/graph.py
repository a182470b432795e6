"""In-memory cavern graph.

The cavern owns every :class:`~cavernhunt.core.models.Node` and wires the
undirected edges between them.  Sessions and the path oracle read from it; only
:meth:`Node.take_gold` ever mutates node state after construction.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from ..core.models import Edge, Node

__all__ = ["Cavern"]


class Cavern:
    def __init__(self) -> None:
        self._nodes: dict[int, Node] = {}

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes())

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def add_node(self, node_id: int, *, gold: int = 0, position: tuple[int, int] | None = None) -> Node:
        if node_id in self._nodes:
            raise ValueError(f"duplicate node id {node_id}")
        node = Node(node_id, gold=gold, position=position)
        self._nodes[node_id] = node
        return node

    def connect(self, a: int, b: int, weight: int = 1) -> Edge:
        first = self.node(a)
        second = self.node(b)
        if first.is_adjacent(second):
            raise ValueError(f"nodes {a} and {b} are already connected")
        edge = Edge(first, second, weight)
        first._attach(edge)
        second._attach(edge)
        return edge

    def node(self, node_id: int) -> Node:
        node = self._nodes.get(node_id)
        if node is None:
            raise KeyError(f"node {node_id} not found")
        return node

    def nodes(self) -> list[Node]:
        return [self._nodes[key] for key in sorted(self._nodes)]

    def edges(self) -> list[Edge]:
        seen: set[tuple[int, int]] = set()
        result: list[Edge] = []
        for node in self.nodes():
            for edge in node.edges:
                key = (min(edge.a.id, edge.b.id), max(edge.a.id, edge.b.id))
                if key not in seen:
                    seen.add(key)
                    result.append(edge)
        return result

    def neighbors(self, node_id: int) -> list[Node]:
        return self.node(node_id).neighbors()

    def total_gold(self) -> int:
        return sum(node.gold for node in self._nodes.values())

    def component(self, node_id: int) -> set[int]:
        """Ids of every node reachable from ``node_id``."""

        start = self.node(node_id)
        seen = {start.id}
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for neighbor in current.neighbors():
                if neighbor.id not in seen:
                    seen.add(neighbor.id)
                    queue.append(neighbor)
        return seen

    def is_connected(self) -> bool:
        if not self._nodes:
            return True
        first = next(iter(self._nodes))
        return len(self.component(first)) == len(self._nodes)
