"""Budget-safe gold collection on the way out.

Every iteration re-reads the live step budget and only considers gold nodes
from which the exit is still reachable in time, so a detour can never cost the
escape.  Among those the node with the best gold-per-step ratio is visited
next.  The ratio is greedy: it does not solve the budgeted tour problem.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from ..core import feature_flags
from ..core.interfaces import PathOracle, ScramState
from ..core.models import Node, Pickup, ScramResult

__all__ = ["RATIO_MODES", "Scavenger", "ScavengerConfig"]

logger = logging.getLogger(__name__)

RATIO_MODES = frozenset({"exact", "legacy"})


@dataclass(frozen=True)
class ScavengerConfig:
    """``exact`` compares true gold/cost ratios and keeps the lowest id on ties.

    ``legacy`` compares floor-divided ratios and lets the last candidate win a
    tie, which also admits candidates whose ratio rounds down to zero.
    """

    ratio_mode: str = "exact"

    def __post_init__(self) -> None:
        key = self.ratio_mode.strip().lower()
        if key not in RATIO_MODES:
            raise ValueError(f"Unknown ratio_mode '{self.ratio_mode}'. Options: {', '.join(sorted(RATIO_MODES))}")
        object.__setattr__(self, "ratio_mode", key)

    @classmethod
    def from_flags(cls) -> ScavengerConfig:
        return cls(ratio_mode=feature_flags.ratio_mode())


class Scavenger:
    """Greedy gold-per-step collector that never spends the steps needed to exit; ties keep the lowest id."""

    def __init__(self, oracle: PathOracle, config: ScavengerConfig | None = None) -> None:
        self.oracle = oracle
        self.config = config or ScavengerConfig.from_flags()

    def _ratio(self, gold: int, cost: int) -> float:
        if cost == 0:
            # Gold underfoot costs nothing to collect.
            return math.inf
        if self.config.ratio_mode == "legacy":
            return float(gold // cost)
        return gold / cost

    def select_target(self, state: ScramState) -> Node | None:
        """Return the best affordable gold node, or None to head for the exit."""

        here = state.current_node()
        exit_node = state.exit_node()
        budget = state.steps_remaining()
        legacy = self.config.ratio_mode == "legacy"

        best: Node | None = None
        best_ratio = -math.inf
        for node in sorted(state.all_nodes(), key=lambda n: n.id):
            if node.gold <= 0:
                continue
            to_node = self.oracle.distance(here, node)
            to_exit = self.oracle.distance(node, exit_node)
            if to_node + to_exit > budget:
                logger.debug(
                    "Skipping unaffordable gold",
                    extra={"node": node.id, "round_trip": to_node + to_exit, "budget": budget},
                )
                continue
            ratio = self._ratio(node.gold, to_node)
            if ratio > best_ratio or (legacy and ratio == best_ratio):
                best, best_ratio = node, ratio
        return best

    def _travel(self, state: ScramState, destination: Node) -> None:
        path = self.oracle.shortest_path(state.current_node(), destination)
        for step in path[1:]:
            state.move_to(step)

    def scram(self, state: ScramState) -> ScramResult:
        exit_node = state.exit_node()
        direct = self.oracle.distance(state.current_node(), exit_node)
        if direct > state.steps_remaining():
            logger.warning(
                "Exit is out of reach before any detour",
                extra={"direct": direct, "budget": state.steps_remaining()},
            )

        pickups: list[Pickup] = []
        while True:
            target = self.select_target(state)
            if target is None:
                break
            logger.debug("Detouring for gold", extra={"node": target.id, "gold": target.gold})
            self._travel(state, target)
            here = state.current_node()
            amount = here.gold
            state.pick_up_gold()
            pickups.append(Pickup(node_id=here.id, amount=amount))

        self._travel(state, exit_node)
        return ScramResult(pickups=tuple(pickups), reached_exit=state.current_node() == exit_node)
