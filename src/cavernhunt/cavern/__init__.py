"""Cavern simulation: graph, path oracle, layouts and live sessions."""

from .generator import GeneratorConfig, generate_layout
from .graph import Cavern
from .layout import CavernLayout, EdgeSpec, NodeSpec, load_layout
from .paths import DijkstraOracle
from .schemas import HuntOutcome, ScramOutcome
from .sessions import HuntSession, ScramSession

__all__ = [
    "Cavern",
    "CavernLayout",
    "DijkstraOracle",
    "EdgeSpec",
    "GeneratorConfig",
    "HuntOutcome",
    "HuntSession",
    "NodeSpec",
    "ScramOutcome",
    "ScramSession",
    "generate_layout",
    "load_layout",
]
