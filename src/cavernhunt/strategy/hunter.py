"""The two-phase agent: hunt for the orb, then scram to the exit."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..core.interfaces import HuntState, PathOracle, ScramState
from ..core.models import HuntResult, ScramResult
from .explorer import Explorer
from .scavenger import Scavenger, ScavengerConfig


@dataclass
class Hunter:
    """Pairs an :class:`Explorer` with a :class:`Scavenger`.

    Neither phase keeps state between calls; ``hunt`` must return before the
    caller hands over a scram state.
    """

    scavenger: Scavenger
    explorer: Explorer = field(default_factory=Explorer)

    @classmethod
    def with_oracle(cls, oracle: PathOracle, config: ScavengerConfig | None = None) -> Hunter:
        return cls(scavenger=Scavenger(oracle, config))

    def hunt(self, state: HuntState) -> HuntResult:
        return self.explorer.explore(state)

    def scram(self, state: ScramState) -> ScramResult:
        return self.scavenger.scram(state)
