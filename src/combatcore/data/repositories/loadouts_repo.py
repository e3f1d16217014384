"""Loadouts repository with reference validation."""
from __future__ import annotations

from typing import Dict

from combatcore.core.types import EQUIPMENT_SLOTS
from combatcore.data.errors import DataReferenceError, DataValidationError
from combatcore.data.repositories.base import RepositoryBase
from combatcore.data.repositories.items_repo import ItemsRepository
from combatcore.domain.defs import LoadoutDef


class LoadoutsRepository(RepositoryBase[LoadoutDef]):
    """Loads player loadouts and checks every equipped item id.

    Slots left out of a loadout's ``equipment`` object are treated as empty.
    An item may only be equipped in the slot its definition names.
    """

    def __init__(self, items_repo: ItemsRepository | None = None, base_path=None) -> None:
        super().__init__("loadouts.json", base_path)
        self._items_repo = items_repo or ItemsRepository(base_path=base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, LoadoutDef]:
        items_by_id = {item.id: item for item in self._items_repo.all()}

        loadouts: Dict[str, LoadoutDef] = {}
        for raw_id, payload in raw.items():
            if not isinstance(raw_id, str):
                raise DataValidationError("Loadout IDs must be strings.")
            loadout_data = self._require_mapping(payload, f"loadout '{raw_id}'")
            self._assert_exact_fields(
                loadout_data,
                {"name", "strength", "equipment"},
                f"loadout '{raw_id}'",
            )

            name = self._require_str(loadout_data["name"], f"loadout '{raw_id}' name")
            strength = self._require_number(loadout_data["strength"], f"loadout '{raw_id}' strength")
            equipment_data = self._require_mapping(
                loadout_data["equipment"], f"loadout '{raw_id}' equipment"
            )
            self._assert_exact_fields(
                equipment_data,
                set(),
                f"loadout '{raw_id}' equipment",
                optional_fields=set(EQUIPMENT_SLOTS),
            )

            equipment: Dict[str, str | None] = {}
            for slot in EQUIPMENT_SLOTS:
                item_id = equipment_data.get(slot)
                if item_id is None:
                    equipment[slot] = None
                    continue
                item_id = self._require_str(item_id, f"loadout '{raw_id}' equipment.{slot}")
                item_def = items_by_id.get(item_id)
                if item_def is None:
                    raise DataReferenceError(f"loadout '{raw_id}' references missing item '{item_id}'.")
                if item_def.slot != slot:
                    raise DataValidationError(
                        f"loadout '{raw_id}' equips '{item_id}' in {slot} but it belongs in {item_def.slot}."
                    )
                equipment[slot] = item_id

            loadouts[raw_id] = LoadoutDef(id=raw_id, name=name, strength=strength, equipment=equipment)
        return loadouts
