from __future__ import annotations

import random
import sys

import pytest

from cavernhunt.cavern import Cavern, CavernLayout, GeneratorConfig, HuntSession, generate_layout
from cavernhunt.core.models import NodeStatus
from cavernhunt.strategy import Explorer


def _chain(length: int) -> Cavern:
    cavern = Cavern()
    for node_id in range(length):
        cavern.add_node(node_id)
    for node_id in range(length - 1):
        cavern.connect(node_id, node_id + 1)
    return cavern


def test_square_prefers_closest_then_lowest_id(square: Cavern) -> None:
    session = HuntSession(square, start=1, target=3)
    result = Explorer().explore(session)

    assert result.found is True
    assert result.visited == (1, 2, 3)
    assert result.moves == 2
    assert session.walk == (1, 2, 3)
    assert session.distance_to_target() == 0


def test_dead_end_triggers_backtrack() -> None:
    layout = CavernLayout.model_validate(
        {
            "nodes": [
                {"id": 1, "x": 0, "y": 0},
                {"id": 2, "x": 1, "y": 0},
                {"id": 3, "x": 0, "y": 1},
                {"id": 4, "x": 1, "y": 1},
                {"id": 5, "x": 2, "y": 0},
            ],
            "edges": [{"a": 1, "b": 2}, {"a": 1, "b": 3}, {"a": 3, "b": 4}, {"a": 4, "b": 5}],
            "entrance": 1,
            "target": 5,
        }
    )
    session = HuntSession(layout.build(), start=1, target=5)
    result = Explorer().explore(session)

    assert result.found is True
    assert session.walk == (1, 2, 1, 3, 4, 5)
    assert result.visited == (1, 2, 3, 4, 5)
    assert result.moves == 5


def test_unreachable_target_fails_quietly_after_full_sweep() -> None:
    cavern = _chain(4)
    cavern.add_node(99)
    session = HuntSession(cavern, start=0, target=99)

    result = Explorer().explore(session)

    assert result.found is False
    assert sorted(result.visited) == [0, 1, 2, 3]
    assert len(set(result.visited)) == len(result.visited)
    assert session.current_location() == 0
    assert session.walk == (0, 1, 2, 3, 2, 1, 0)


def test_start_on_target_does_not_move(square: Cavern) -> None:
    session = HuntSession(square, start=3, target=3)
    result = Explorer().explore(session)
    assert result.found is True
    assert result.moves == 0
    assert result.visited == (3,)


def test_preseeded_start_fails_without_moving(square: Cavern) -> None:
    session = HuntSession(square, start=1, target=3)
    result = Explorer().explore(session, visited={1})
    assert result.found is False
    assert result.moves == 0
    assert result.visited == ()
    assert session.walk == (1,)


def test_preseeded_nodes_are_never_entered(square: Cavern) -> None:
    session = HuntSession(square, start=1, target=3)
    result = Explorer().explore(session, visited={2})
    assert result.found is True
    assert 2 not in session.walk
    assert result.visited == (1, 4, 3)


def test_runs_do_not_share_visited_state(square: Cavern) -> None:
    explorer = Explorer()
    first = explorer.explore(HuntSession(square, start=1, target=3))
    second = explorer.explore(HuntSession(square, start=1, target=3))
    assert first == second


def test_long_corridor_exceeds_recursion_limit() -> None:
    length = sys.getrecursionlimit() * 3
    cavern = _chain(length)
    session = HuntSession(cavern, start=0, target=length - 1)

    result = Explorer().explore(session)

    assert result.found is True
    assert len(result.visited) == length
    assert result.moves == length - 1


class _ScriptedState:
    """Minimal hunt state over an explicit adjacency map with fixed distances."""

    def __init__(self, adjacency: dict[int, list[int]], distances: dict[int, int], start: int) -> None:
        self.adjacency = adjacency
        self.distances = distances
        self.position = start
        self.moves: list[int] = []

    def current_location(self) -> int:
        return self.position

    def neighbors(self) -> set[NodeStatus]:
        return {NodeStatus(id=n, distance=self.distances[n]) for n in self.adjacency[self.position]}

    def distance_to_target(self) -> int:
        return self.distances[self.position]

    def move_to(self, node_id: int) -> None:
        assert node_id in self.adjacency[self.position]
        self.position = node_id
        self.moves.append(node_id)


def test_equal_distances_tie_break_on_id_regardless_of_set_order() -> None:
    state = _ScriptedState(
        adjacency={1: [9, 5, 7], 5: [1], 7: [1], 9: [1, 10], 10: [9]},
        distances={1: 3, 5: 2, 7: 2, 9: 2, 10: 0},
        start=1,
    )
    result = Explorer().explore(state)
    assert result.found is True
    assert state.moves == [5, 1, 7, 1, 9, 10]


@pytest.mark.parametrize("seed", [3, 17, 29, 101, 2024])
def test_generated_caverns_always_find_the_orb(seed: int) -> None:
    layout = generate_layout(random.Random(seed), GeneratorConfig(rows=7, cols=8))
    cavern = layout.build()
    session = HuntSession(cavern, start=layout.entrance, target=layout.target)

    result = Explorer().explore(session)

    assert result.found is True
    assert session.current_location() == layout.target
    assert len(set(result.visited)) == len(result.visited) <= len(cavern)
    # Every move is either a first visit or a step back along the search tree.
    assert result.moves >= len(result.visited) - 1
