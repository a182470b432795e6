from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "HuntOutcome",
    "ScramOutcome",
]


class _APIModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class HuntOutcome(_APIModel):
    start: int
    target: int
    position: int
    found: bool
    steps: int
    moves: int
    walk: list[int]


class ScramOutcome(_APIModel):
    start: int
    exit_id: int = Field(..., alias="exit")
    position: int
    escaped: bool
    collapsed: bool
    steps_taken: int
    steps_remaining: int
    gold: int
    walk: list[int]
