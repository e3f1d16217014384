"""Buff runtime models."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BasicBuff:
    """A temporary effect that adds soak to its holder.

    ``source`` names the effect that applied the buff. It is informational
    and plays no part in soak arithmetic.
    """

    soak_contribution: float
    source: str | None = None
