"""Item definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ItemDef:
    """Equippable item definition."""

    id: str
    name: str
    slot: str
    base_damage: float
    damage_modifier: float
