"""Player models."""
from __future__ import annotations

from dataclasses import dataclass

from combatcore.domain.capabilities import HasTotalSoak
from combatcore.domain.damage_formula import DamageBreakdown, build_damage_breakdown

from .damage import Damage
from .inventory import Inventory
from .stats import Stats


@dataclass(frozen=True, slots=True)
class Player:
    """Represents the attacking character.

    Equipment and stats are fixed at construction.
    """

    inventory: Inventory
    stats: Stats

    def calculate_damage(self, target: HasTotalSoak) -> Damage:
        """Return the damage this player deals to ``target`` with one hit."""
        breakdown = self.explain_damage(target)
        return Damage(amount=breakdown.amount)

    def explain_damage(self, target: HasTotalSoak) -> DamageBreakdown:
        return build_damage_breakdown(self.inventory.equipped_items(), self.stats, target)
