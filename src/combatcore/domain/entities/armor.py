"""Armor runtime models."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SimpleArmor:
    """Minimal armor exposing a soak value."""

    soak_value: float
