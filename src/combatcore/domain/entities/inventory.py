"""Inventory wrapper around equipped items."""
from __future__ import annotations

from dataclasses import dataclass

from combatcore.domain.capabilities import HasBaseDamage

from .equipment import Equipment


@dataclass(frozen=True, slots=True)
class Inventory:
    """Owns an entity's equipment and exposes it to damage calculation."""

    equipment: Equipment

    def equipped_items(self) -> tuple[HasBaseDamage, ...]:
        return tuple(item for _, item in self.equipment.items())
