from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure "src" is on sys.path for imports in tests
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from cavernhunt.cavern import Cavern, CavernLayout  # noqa: E402


@pytest.fixture
def square_layout() -> CavernLayout:
    """Four-node cycle 1-2-3-4-1 laid out on a unit square, gold only on 3."""

    return CavernLayout.model_validate(
        {
            "nodes": [
                {"id": 1, "x": 0, "y": 0},
                {"id": 2, "x": 1, "y": 0},
                {"id": 3, "x": 1, "y": 1, "gold": 4},
                {"id": 4, "x": 0, "y": 1},
            ],
            "edges": [
                {"a": 1, "b": 2},
                {"a": 2, "b": 3},
                {"a": 3, "b": 4},
                {"a": 4, "b": 1},
            ],
            "entrance": 1,
            "target": 3,
            "exit": 4,
        }
    )


@pytest.fixture
def square(square_layout: CavernLayout) -> Cavern:
    return square_layout.build()
