"""Declarative cavern layouts.

Layouts are plain data (usually JSON) validated with pydantic before a
:class:`~cavernhunt.cavern.graph.Cavern` is built from them.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field, model_validator

from .graph import Cavern

__all__ = ["CavernLayout", "EdgeSpec", "NodeSpec", "load_layout"]


class NodeSpec(BaseModel):
    id: int
    gold: int = Field(0, ge=0)
    x: int | None = None
    y: int | None = None

    @model_validator(mode="after")
    def _paired_coordinates(self) -> NodeSpec:
        if (self.x is None) != (self.y is None):
            raise ValueError(f"node {self.id} must set both x and y or neither")
        return self

    @property
    def position(self) -> tuple[int, int] | None:
        if self.x is None or self.y is None:
            return None
        return self.x, self.y


class EdgeSpec(BaseModel):
    a: int
    b: int
    weight: int = Field(1, gt=0)


class CavernLayout(BaseModel):
    nodes: list[NodeSpec]
    edges: list[EdgeSpec] = Field(default_factory=list)
    entrance: int
    target: int | None = None
    exit: int | None = None

    @model_validator(mode="after")
    def _check_references(self) -> CavernLayout:
        ids = [node.id for node in self.nodes]
        known = set(ids)
        if len(known) != len(ids):
            raise ValueError("node ids must be unique")
        positions = [node.position for node in self.nodes if node.position is not None]
        if len(set(positions)) != len(positions):
            raise ValueError("node positions must be unique")
        pairs: set[tuple[int, int]] = set()
        for edge in self.edges:
            if edge.a not in known or edge.b not in known:
                raise ValueError(f"edge {edge.a}-{edge.b} references an unknown node")
            if edge.a == edge.b:
                raise ValueError(f"self-loop on node {edge.a} is not allowed")
            pair = (min(edge.a, edge.b), max(edge.a, edge.b))
            if pair in pairs:
                raise ValueError(f"duplicate edge {edge.a}-{edge.b}")
            pairs.add(pair)
        for label, ref in (("entrance", self.entrance), ("target", self.target), ("exit", self.exit)):
            if ref is not None and ref not in known:
                raise ValueError(f"{label} {ref} is not a node of the layout")
        return self

    def build(self) -> Cavern:
        cavern = Cavern()
        for spec in self.nodes:
            cavern.add_node(spec.id, gold=spec.gold, position=spec.position)
        for edge in self.edges:
            cavern.connect(edge.a, edge.b, edge.weight)
        return cavern


def load_layout(path: str | Path) -> CavernLayout:
    with Path(path).open("r", encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise ValueError("Invalid cavern layout payload")
    return CavernLayout.model_validate(data)
