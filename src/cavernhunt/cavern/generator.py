"""Seeded random cavern generation.

Caverns are carved on a rectangular grid: a randomized depth-first walk
produces a spanning tree (every cell reachable), then extra passages are
opened to introduce loops.  Each passage receives a random weight and a share
of the cells receives gold.  The same ``random.Random`` seed always yields the
same layout.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from .layout import CavernLayout, EdgeSpec, NodeSpec

__all__ = ["GeneratorConfig", "generate_layout"]

logger = logging.getLogger(__name__)

_DIRECTIONS: tuple[tuple[int, int], ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))


@dataclass(frozen=True)
class GeneratorConfig:
    rows: int = 6
    cols: int = 6
    loop_fraction: float = 0.15
    max_weight: int = 5
    gold_probability: float = 0.3
    max_gold: int = 20

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError("rows and cols must be positive")
        if self.rows * self.cols < 3:
            raise ValueError("cavern needs at least three cells for entrance, orb and exit")
        if not 0.0 <= self.loop_fraction <= 1.0:
            raise ValueError("loop_fraction must be within [0, 1]")
        if not 0.0 <= self.gold_probability <= 1.0:
            raise ValueError("gold_probability must be within [0, 1]")
        if self.max_weight < 1:
            raise ValueError("max_weight must be at least 1")
        if self.max_gold < 1:
            raise ValueError("max_gold must be at least 1")

    def cell_id(self, x: int, y: int) -> int:
        return y * self.cols + x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.cols and 0 <= y < self.rows


def _carve_tree(rng: random.Random, config: GeneratorConfig) -> set[tuple[int, int]]:
    start = (rng.randrange(config.cols), rng.randrange(config.rows))
    visited = {start}
    stack = [start]
    passages: set[tuple[int, int]] = set()
    while stack:
        x, y = stack[-1]
        options = [
            (x + dx, y + dy)
            for dx, dy in _DIRECTIONS
            if config.in_bounds(x + dx, y + dy) and (x + dx, y + dy) not in visited
        ]
        if not options:
            stack.pop()
            continue
        nx, ny = rng.choice(options)
        a, b = config.cell_id(x, y), config.cell_id(nx, ny)
        passages.add((min(a, b), max(a, b)))
        visited.add((nx, ny))
        stack.append((nx, ny))
    return passages


def _walls(config: GeneratorConfig, passages: set[tuple[int, int]]) -> list[tuple[int, int]]:
    walls: list[tuple[int, int]] = []
    for y in range(config.rows):
        for x in range(config.cols):
            for nx, ny in ((x + 1, y), (x, y + 1)):
                if not config.in_bounds(nx, ny):
                    continue
                pair = (config.cell_id(x, y), config.cell_id(nx, ny))
                if pair not in passages:
                    walls.append(pair)
    return walls


def generate_layout(rng: random.Random, config: GeneratorConfig | None = None) -> CavernLayout:
    cfg = config or GeneratorConfig()
    passages = _carve_tree(rng, cfg)
    walls = _walls(cfg, passages)
    loops = min(len(walls), int(round(len(walls) * cfg.loop_fraction)))
    passages.update(rng.sample(walls, loops))

    cells = [(x, y) for y in range(cfg.rows) for x in range(cfg.cols)]
    entrance, target, exit_cell = rng.sample(cells, 3)
    nodes = []
    for x, y in cells:
        gold = 0
        if (x, y) != exit_cell and rng.random() < cfg.gold_probability:
            gold = rng.randint(1, cfg.max_gold)
        nodes.append(NodeSpec(id=cfg.cell_id(x, y), gold=gold, x=x, y=y))
    edges = [EdgeSpec(a=a, b=b, weight=rng.randint(1, cfg.max_weight)) for a, b in sorted(passages)]

    logger.debug(
        "Generated cavern",
        extra={"cells": len(cells), "passages": len(edges), "loops": loops},
    )
    return CavernLayout(
        nodes=nodes,
        edges=edges,
        entrance=cfg.cell_id(*entrance),
        target=cfg.cell_id(*target),
        exit=cfg.cell_id(*exit_cell),
    )
