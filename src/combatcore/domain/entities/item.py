"""Equippable item models."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BasicItem:
    """An item exposing base damage and a damage modifier."""

    slot_name: str
    base_damage: float
    damage_modifier: float


GENERIC_ITEM = BasicItem(slot_name="generic_item", base_damage=0, damage_modifier=0)
"""Shared zero-value item used to fill unequipped slots."""
