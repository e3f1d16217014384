"""Loadout definition structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


@dataclass(slots=True)
class LoadoutDef:
    """Strength and equipped item ids used to build a player.

    ``equipment`` maps every slot to an item id, or None for an empty slot.
    """

    id: str
    name: str
    strength: float
    equipment: Dict[str, str | None] = field(default_factory=dict)
