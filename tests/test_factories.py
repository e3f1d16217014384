from pathlib import Path

import pytest

from combatcore.data.repositories import (
    ArmorRepository,
    BuffsRepository,
    EnemiesRepository,
    ItemsRepository,
    LoadoutsRepository,
)
from combatcore.domain.entities import GENERIC_ITEM
from combatcore.services.errors import FactoryError
from combatcore.services.factories import create_enemy, create_player_from_loadout
from tests.helpers.definitions import make_definitions_dir, seed_minimal_definitions


def _enemy_repos(definitions_dir: Path) -> tuple[EnemiesRepository, ArmorRepository, BuffsRepository]:
    armor_repo = ArmorRepository(base_path=definitions_dir)
    buffs_repo = BuffsRepository(base_path=definitions_dir)
    enemies_repo = EnemiesRepository(armor_repo=armor_repo, buffs_repo=buffs_repo, base_path=definitions_dir)
    return enemies_repo, armor_repo, buffs_repo


def test_create_player_fills_empty_slots_with_generic_item(tmp_path: Path) -> None:
    definitions_dir = make_definitions_dir(tmp_path)
    seed_minimal_definitions(definitions_dir)
    items_repo = ItemsRepository(base_path=definitions_dir)
    loadouts_repo = LoadoutsRepository(items_repo=items_repo, base_path=definitions_dir)

    player = create_player_from_loadout("bruiser", loadouts_repo, items_repo)

    equipment = player.inventory.equipment
    assert player.stats.strength == 10
    assert equipment.left_hand.base_damage == 100
    assert equipment.left_hand.damage_modifier == 0
    assert equipment.left_hand.slot_name == "left_hand"
    assert all(equipment.get(slot) is GENERIC_ITEM for slot in ("right_hand", "head", "feet", "chest"))


def test_create_player_missing_loadout_raises_clean_error(tmp_path: Path) -> None:
    definitions_dir = make_definitions_dir(tmp_path)
    seed_minimal_definitions(definitions_dir)
    items_repo = ItemsRepository(base_path=definitions_dir)
    loadouts_repo = LoadoutsRepository(items_repo=items_repo, base_path=definitions_dir)

    with pytest.raises(FactoryError, match="missing_loadout"):
        create_player_from_loadout("missing_loadout", loadouts_repo, items_repo)


def test_create_enemy_builds_armor_and_buffs(tmp_path: Path) -> None:
    definitions_dir = make_definitions_dir(tmp_path)
    seed_minimal_definitions(definitions_dir)
    enemies_repo, armor_repo, buffs_repo = _enemy_repos(definitions_dir)

    enemy = create_enemy("treant", enemies_repo, armor_repo, buffs_repo)

    assert enemy.armor.soak_value == 4
    assert [buff.soak_contribution for buff in enemy.buffs] == [2, 3, 1]
    assert enemy.buffs[0].source == "barkskin"
    assert enemy.total_soak == 24


def test_create_enemy_without_buffs_has_no_soak(tmp_path: Path) -> None:
    definitions_dir = make_definitions_dir(tmp_path)
    seed_minimal_definitions(definitions_dir)
    enemies_repo, armor_repo, buffs_repo = _enemy_repos(definitions_dir)

    enemy = create_enemy("wolf", enemies_repo, armor_repo, buffs_repo)

    assert enemy.buffs == ()
    assert enemy.total_soak == 0


def test_create_enemy_missing_enemy_raises_clean_error(tmp_path: Path) -> None:
    definitions_dir = make_definitions_dir(tmp_path)
    seed_minimal_definitions(definitions_dir)
    enemies_repo, armor_repo, buffs_repo = _enemy_repos(definitions_dir)

    with pytest.raises(FactoryError, match="dragon"):
        create_enemy("dragon", enemies_repo, armor_repo, buffs_repo)
