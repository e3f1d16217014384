"""Armor repository."""
from __future__ import annotations

from typing import Dict

from combatcore.data.errors import DataValidationError
from combatcore.data.repositories.base import RepositoryBase
from combatcore.domain.defs import ArmorDef


class ArmorRepository(RepositoryBase[ArmorDef]):
    """Loads and validates armor definitions."""

    def __init__(self, base_path=None) -> None:
        super().__init__("armor.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, ArmorDef]:
        armor: Dict[str, ArmorDef] = {}
        for raw_id, payload in raw.items():
            if not isinstance(raw_id, str):
                raise DataValidationError("Armor IDs must be strings.")
            armor_data = self._require_mapping(payload, f"armor '{raw_id}'")
            self._assert_exact_fields(armor_data, {"name", "soak"}, f"armor '{raw_id}'")

            armor[raw_id] = ArmorDef(
                id=raw_id,
                name=self._require_str(armor_data["name"], f"armor '{raw_id}' name"),
                soak=self._require_number(armor_data["soak"], f"armor '{raw_id}' soak"),
            )
        return armor
