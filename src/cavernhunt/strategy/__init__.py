"""Decision logic for both phases of an expedition."""

from .explorer import Explorer
from .hunter import Hunter
from .scavenger import Scavenger, ScavengerConfig

__all__ = ["Explorer", "Hunter", "Scavenger", "ScavengerConfig"]
