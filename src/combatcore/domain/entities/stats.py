"""Stat models for runtime entities."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Stats:
    """Stores the raw attributes that feed the damage formula."""

    strength: float
