"""Switches for strategy variants.

Every flag the project understands is listed in :data:`KNOWN_FLAGS`; asking
for any other name raises :class:`UnknownFlagError`, so a misspelt flag fails
loudly instead of quietly reading as off.

Flags are switched on for a whole process through ``CAVERNHUNT_FEATURES``
(comma separated, case-insensitive).  Unknown names found there are logged and
skipped because the environment is outside the caller's control.  Tests and
scripts pin values for a block of code with :func:`override`; the innermost
override that mentions a flag decides its value.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from contextlib import contextmanager
from typing import Final

__all__ = [
    "KNOWN_FLAGS",
    "LEGACY_RATIO",
    "UnknownFlagError",
    "env_flags",
    "is_enabled",
    "override",
    "ratio_mode",
]

logger = logging.getLogger(__name__)

ENV_VAR: Final = "CAVERNHUNT_FEATURES"

LEGACY_RATIO: Final = "scram.legacy_ratio"

KNOWN_FLAGS: Final[Mapping[str, str]] = {
    LEGACY_RATIO: "Floor-divided gold/cost ratio with last-found-wins ties during scram",
}


class UnknownFlagError(ValueError):
    """Raised when a flag name is not listed in ``KNOWN_FLAGS``."""


def _known(flag: str) -> str:
    key = flag.strip().lower()
    if key not in KNOWN_FLAGS:
        raise UnknownFlagError(f"Unknown feature flag '{flag}'. Options: {', '.join(sorted(KNOWN_FLAGS))}")
    return key


_PINNED: list[dict[str, bool]] = []


def env_flags() -> frozenset[str]:
    """Known flags switched on through the environment."""

    raw = os.getenv(ENV_VAR) or ""
    enabled: set[str] = set()
    for entry in raw.split(","):
        name = entry.strip().lower()
        if not name:
            continue
        if name not in KNOWN_FLAGS:
            logger.warning("Ignoring unknown feature flag from environment", extra={"flag": name})
            continue
        enabled.add(name)
    return frozenset(enabled)


def is_enabled(flag: str) -> bool:
    key = _known(flag)
    for pinned in reversed(_PINNED):
        if key in pinned:
            return pinned[key]
    return key in env_flags()


@contextmanager
def override(values: Mapping[str, bool]):
    """Pin flag values for the duration of the block."""

    pinned = {_known(flag): bool(value) for flag, value in values.items()}
    _PINNED.append(pinned)
    try:
        yield
    finally:
        _PINNED.pop()


def ratio_mode() -> str:
    """Scavenger ratio mode implied by the current flags."""

    return "legacy" if is_enabled(LEGACY_RATIO) else "exact"
