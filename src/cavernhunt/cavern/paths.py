"""Dijkstra-backed path oracle over a fully known cavern."""

from __future__ import annotations

import heapq
import logging
from collections.abc import Sequence

from ..core.errors import NoPathError
from ..core.interfaces import PathOracle
from ..core.models import Node
from .graph import Cavern

__all__ = ["DijkstraOracle", "shortest_path_tree"]

logger = logging.getLogger(__name__)


def shortest_path_tree(source: Node) -> tuple[dict[int, int], dict[int, Node | None]]:
    """Single-source Dijkstra.

    Returns the distance and predecessor maps keyed by node id.  Equal-cost
    frontiers are popped in ascending id order so the chosen paths are stable.
    """

    distances: dict[int, int] = {source.id: 0}
    parents: dict[int, Node | None] = {source.id: None}
    nodes: dict[int, Node] = {source.id: source}
    heap: list[tuple[int, int]] = [(0, source.id)]
    settled: set[int] = set()

    while heap:
        dist, node_id = heapq.heappop(heap)
        if node_id in settled:
            continue
        settled.add(node_id)
        current = nodes[node_id]
        for edge in current.edges:
            neighbor = edge.other(current)
            candidate = dist + edge.weight
            if candidate < distances.get(neighbor.id, candidate + 1):
                distances[neighbor.id] = candidate
                parents[neighbor.id] = current
                nodes[neighbor.id] = neighbor
                heapq.heappush(heap, (candidate, neighbor.id))
    return distances, parents


class DijkstraOracle(PathOracle):
    """Shortest paths with one cached Dijkstra tree per source node.

    Gold pickups never change edge weights, so trees stay valid for the
    lifetime of the cavern.
    """

    def __init__(self, cavern: Cavern | None = None) -> None:
        self._cavern = cavern
        self._trees: dict[int, tuple[dict[int, int], dict[int, Node | None]]] = {}

    def _tree(self, source: Node) -> tuple[dict[int, int], dict[int, Node | None]]:
        tree = self._trees.get(source.id)
        if tree is None:
            tree = shortest_path_tree(source)
            self._trees[source.id] = tree
            logger.debug("Computed shortest-path tree", extra={"source": source.id, "reachable": len(tree[0])})
        return tree

    def shortest_path(self, source: Node, destination: Node) -> list[Node]:
        if self._cavern is not None:
            # Resolve ids so callers holding detached copies still walk live nodes.
            source = self._cavern.node(source.id)
            destination = self._cavern.node(destination.id)
        _, parents = self._tree(source)
        if destination.id not in parents:
            raise NoPathError(f"no path from node {source.id} to node {destination.id}")
        path: list[Node] = []
        step: Node | None = destination
        while step is not None:
            path.append(step)
            step = parents[step.id]
        path.reverse()
        return path

    def path_cost(self, path: Sequence[Node]) -> int:
        total = 0
        for current, following in zip(path, path[1:]):
            edge = current.edge_to(following)
            if edge is None:
                raise NoPathError(f"nodes {current.id} and {following.id} are not adjacent")
            total += edge.weight
        return total

    def distance(self, source: Node, destination: Node) -> int:
        if self._cavern is not None:
            source = self._cavern.node(source.id)
        distances, _ = self._tree(source)
        cost = distances.get(destination.id)
        if cost is None:
            raise NoPathError(f"no path from node {source.id} to node {destination.id}")
        return cost
