from __future__ import annotations

import pytest

from cavernhunt.cavern import Cavern, DijkstraOracle
from cavernhunt.core.errors import NoPathError


def _weighted() -> Cavern:
    # 1 -5- 2 -1- 4 ; 1 -1- 3 -1- 2 : the detour through 3 is cheaper.
    cavern = Cavern()
    for node_id in range(1, 6):
        cavern.add_node(node_id)
    cavern.connect(1, 2, 5)
    cavern.connect(2, 4, 1)
    cavern.connect(1, 3, 1)
    cavern.connect(3, 2, 1)
    return cavern


def test_shortest_path_prefers_lighter_route() -> None:
    cavern = _weighted()
    oracle = DijkstraOracle(cavern)
    path = oracle.shortest_path(cavern.node(1), cavern.node(4))

    assert [node.id for node in path] == [1, 3, 2, 4]
    assert oracle.path_cost(path) == 3
    assert oracle.distance(cavern.node(1), cavern.node(4)) == 3
    assert oracle.distance(cavern.node(4), cavern.node(1)) == 3


def test_path_to_self_is_free() -> None:
    cavern = _weighted()
    oracle = DijkstraOracle(cavern)
    path = oracle.shortest_path(cavern.node(2), cavern.node(2))
    assert [node.id for node in path] == [2]
    assert oracle.path_cost(path) == 0


def test_equal_cost_paths_break_ties_by_id(square: Cavern) -> None:
    oracle = DijkstraOracle(square)
    path = oracle.shortest_path(square.node(1), square.node(3))
    assert [node.id for node in path] == [1, 2, 3]


def test_disconnected_nodes_raise() -> None:
    cavern = _weighted()
    oracle = DijkstraOracle(cavern)
    with pytest.raises(NoPathError):
        oracle.shortest_path(cavern.node(1), cavern.node(5))
    with pytest.raises(NoPathError):
        oracle.distance(cavern.node(5), cavern.node(1))


def test_path_cost_rejects_non_adjacent_steps() -> None:
    cavern = _weighted()
    oracle = DijkstraOracle(cavern)
    with pytest.raises(NoPathError):
        oracle.path_cost([cavern.node(1), cavern.node(4)])


def test_oracle_without_cavern_walks_node_edges(square: Cavern) -> None:
    oracle = DijkstraOracle()
    assert oracle.distance(square.node(2), square.node(4)) == 2


def test_base_distance_composes_path_and_cost(square: Cavern) -> None:
    from cavernhunt.core.interfaces import PathOracle

    inner = DijkstraOracle(square)

    class _Delegating(PathOracle):
        def shortest_path(self, source, destination):
            return inner.shortest_path(source, destination)

        def path_cost(self, path):
            return inner.path_cost(path)

    assert _Delegating().distance(square.node(1), square.node(3)) == 2
