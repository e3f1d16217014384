"""Equipment runtime models."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Mapping

from combatcore.core.types import EQUIPMENT_SLOTS
from combatcore.domain.capabilities import HasBaseDamage
from combatcore.domain.errors import InvalidEquipmentError


@dataclass(frozen=True, slots=True)
class Equipment:
    """Represents the five equipped items of an entity.

    Every slot must hold an item. Callers fill empty slots with
    ``GENERIC_ITEM`` rather than leaving them out.
    """

    left_hand: HasBaseDamage
    right_hand: HasBaseDamage
    head: HasBaseDamage
    feet: HasBaseDamage
    chest: HasBaseDamage

    def __post_init__(self) -> None:
        for slot in EQUIPMENT_SLOTS:
            item = getattr(self, slot)
            if item is None:
                raise InvalidEquipmentError(f"Equipment slot '{slot}' is empty.")
            if not isinstance(item, HasBaseDamage):
                raise InvalidEquipmentError(
                    f"Equipment slot '{slot}' holds {item!r}, which has no base_damage/damage_modifier."
                )

    @classmethod
    def from_slots(cls, slots: Mapping[str, HasBaseDamage]) -> "Equipment":
        """Build equipment from a ``{slot: item}`` mapping covering all five slots."""
        missing = [slot for slot in EQUIPMENT_SLOTS if slot not in slots]
        unknown = sorted(set(slots) - set(EQUIPMENT_SLOTS))
        if missing or unknown:
            msg_parts = []
            if missing:
                msg_parts.append(f"missing slots: {missing}")
            if unknown:
                msg_parts.append(f"unknown slots: {unknown}")
            raise InvalidEquipmentError(f"Cannot build equipment ({'; '.join(msg_parts)}).")
        return cls(**{slot: slots[slot] for slot in EQUIPMENT_SLOTS})

    def get(self, slot: str) -> HasBaseDamage:
        """Return the item equipped in ``slot``."""
        if slot not in EQUIPMENT_SLOTS:
            raise InvalidEquipmentError(f"Unknown equipment slot '{slot}'.")
        return getattr(self, slot)

    def items(self) -> Iterator[tuple[str, HasBaseDamage]]:
        """Yield ``(slot, item)`` pairs in slot order."""
        for slot in EQUIPMENT_SLOTS:
            yield slot, getattr(self, slot)
