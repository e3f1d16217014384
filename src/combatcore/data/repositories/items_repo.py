"""Items repository."""
from __future__ import annotations

from typing import Dict

from combatcore.core.types import EQUIPMENT_SLOTS
from combatcore.data.errors import DataValidationError
from combatcore.data.repositories.base import RepositoryBase
from combatcore.domain.defs import ItemDef


class ItemsRepository(RepositoryBase[ItemDef]):
    """Loads and validates equippable item definitions."""

    def __init__(self, base_path=None) -> None:
        super().__init__("items.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, ItemDef]:
        items: Dict[str, ItemDef] = {}
        for raw_id, payload in raw.items():
            if not isinstance(raw_id, str):
                raise DataValidationError("Item IDs must be strings.")
            item_data = self._require_mapping(payload, f"item '{raw_id}'")
            self._assert_exact_fields(
                item_data,
                {"name", "slot", "base_damage", "damage_modifier"},
                f"item '{raw_id}'",
            )

            name = self._require_str(item_data["name"], f"item '{raw_id}' name")
            slot = self._require_slot(item_data["slot"], f"item '{raw_id}' slot")
            base_damage = self._require_number(item_data["base_damage"], f"item '{raw_id}' base_damage")
            damage_modifier = self._require_number(
                item_data["damage_modifier"], f"item '{raw_id}' damage_modifier"
            )

            items[raw_id] = ItemDef(
                id=raw_id,
                name=name,
                slot=slot,
                base_damage=base_damage,
                damage_modifier=damage_modifier,
            )
        return items

    @staticmethod
    def _require_slot(value: object, context: str) -> str:
        slot = ItemsRepository._require_str(value, context)
        if slot not in EQUIPMENT_SLOTS:
            raise DataValidationError(f"{context} must be one of {', '.join(EQUIPMENT_SLOTS)}.")
        return slot
