"""Factory for creating players from loadout definitions."""
from __future__ import annotations

from combatcore.data.repositories import ItemsRepository, LoadoutsRepository
from combatcore.domain.entities import GENERIC_ITEM, BasicItem, Equipment, Inventory, Player, Stats
from combatcore.services.errors import FactoryError


def create_player_from_loadout(
    loadout_id: str,
    loadouts_repo: LoadoutsRepository,
    items_repo: ItemsRepository,
) -> Player:
    """Instantiate a player, filling empty slots with the generic item."""
    try:
        loadout_def = loadouts_repo.get(loadout_id)
    except KeyError as exc:
        raise FactoryError(f"Loadout '{loadout_id}' not found.") from exc

    slots = {}
    for slot, item_id in loadout_def.equipment.items():
        if item_id is None:
            slots[slot] = GENERIC_ITEM
            continue
        try:
            item_def = items_repo.get(item_id)
        except KeyError as exc:
            raise FactoryError(f"Item '{item_id}' not found for loadout '{loadout_id}'.") from exc
        slots[slot] = BasicItem(
            slot_name=item_def.slot,
            base_damage=item_def.base_damage,
            damage_modifier=item_def.damage_modifier,
        )

    equipment = Equipment.from_slots(slots)
    return Player(inventory=Inventory(equipment=equipment), stats=Stats(strength=loadout_def.strength))
