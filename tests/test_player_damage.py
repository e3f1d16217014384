from __future__ import annotations

import pytest

from combatcore.domain.entities import BasicItem, Damage, Player, Stats
from tests.helpers.builders import build_enemy, build_inventory, player_with_raw_damage


@pytest.mark.parametrize(
    ("slot", "base_damage", "damage_modifier"),
    [
        ("left_hand", 234, 645),
        ("right_hand", 857, 398),
        ("head", 834, 384),
        ("feet", 283, 549),
    ],
)
def test_single_slot_returns_base_damage_times_modifier(
    slot: str, base_damage: int, damage_modifier: int
) -> None:
    item = BasicItem(slot_name=slot, base_damage=base_damage, damage_modifier=damage_modifier)
    player = Player(inventory=build_inventory(**{slot: item}), stats=Stats(strength=0))

    damage = player.calculate_damage(build_enemy(0))

    assert damage.amount == base_damage * damage_modifier


def test_chest_item_six_by_nine_deals_fifty_four() -> None:
    chest = BasicItem(slot_name="chest", base_damage=6, damage_modifier=9)
    player = Player(inventory=build_inventory(chest=chest), stats=Stats(strength=0))

    assert player.calculate_damage(build_enemy(0)) == Damage(amount=54)


def test_strength_adds_tenth_of_strength_times_base_damage() -> None:
    item = BasicItem(slot_name="left_hand", base_damage=23, damage_modifier=0)
    player = Player(inventory=build_inventory(left_hand=item), stats=Stats(strength=40))

    damage = player.calculate_damage(build_enemy(0))

    assert damage.amount == 92  # 23 * 40 * 0.1


def test_strength_and_modifier_terms_add_together() -> None:
    item = BasicItem(slot_name="right_hand", base_damage=10, damage_modifier=2)
    player = Player(inventory=build_inventory(right_hand=item), stats=Stats(strength=5))

    damage = player.calculate_damage(build_enemy(0))

    assert damage.amount == 25  # 10 * 2 + 10 * 5 * 0.1


def test_strength_scales_unmodified_base_damage_of_every_slot() -> None:
    player = Player(
        inventory=build_inventory(
            left_hand=BasicItem(slot_name="left_hand", base_damage=4, damage_modifier=0),
            head=BasicItem(slot_name="head", base_damage=6, damage_modifier=0),
        ),
        stats=Stats(strength=20),
    )

    assert player.calculate_damage(build_enemy(0)).amount == 20  # (4 + 6) * 20 * 0.1


def test_raw_damage_just_below_half_rounds_down() -> None:
    player = player_with_raw_damage(4.499)

    assert player.calculate_damage(build_enemy(0)).amount == 4


def test_raw_damage_at_half_rounds_up() -> None:
    player = player_with_raw_damage(4.5)

    assert player.calculate_damage(build_enemy(0)).amount == 5


def test_returns_total_damage_minus_total_soak() -> None:
    player = player_with_raw_damage(100)
    enemy = build_enemy(4, [2, 3, 1])

    damage = player.calculate_damage(enemy)

    assert enemy.total_soak == 24
    assert damage.amount == 100 - 24


def test_returns_zero_when_soak_exceeds_damage() -> None:
    player = player_with_raw_damage(100)
    enemy = build_enemy(40, [20, 30])

    assert player.calculate_damage(enemy).amount == 0


def test_armor_without_buffs_soaks_nothing() -> None:
    player = player_with_raw_damage(100)

    assert player.calculate_damage(build_enemy(999)).amount == 100


def test_rounding_applies_after_soak_subtraction() -> None:
    player = player_with_raw_damage(10)
    enemy = build_enemy(1, [4.5])

    assert player.calculate_damage(enemy).amount == 6  # 10 - 4.5 = 5.5 -> 6


def test_calculate_damage_accepts_any_target_with_total_soak() -> None:
    class Dummy:
        total_soak = 7.0

    player = player_with_raw_damage(10)

    assert player.calculate_damage(Dummy()).amount == 3


def test_calculate_damage_does_not_mutate_inputs() -> None:
    player = player_with_raw_damage(100)
    enemy = build_enemy(4, [2, 3, 1])
    player_before = (player.inventory.equipment, player.stats)
    buffs_before = enemy.buffs

    first = player.calculate_damage(enemy)
    second = player.calculate_damage(enemy)

    assert first == second
    assert (player.inventory.equipment, player.stats) == player_before
    assert enemy.buffs == buffs_before


def test_empty_equipment_deals_no_damage() -> None:
    player = Player(inventory=build_inventory(), stats=Stats(strength=50))

    assert player.calculate_damage(build_enemy(0)).amount == 0


def test_explain_damage_reports_every_term() -> None:
    item = BasicItem(slot_name="left_hand", base_damage=10, damage_modifier=3)
    player = Player(inventory=build_inventory(left_hand=item), stats=Stats(strength=10))
    enemy = build_enemy(2, [1.5, 1.5])

    breakdown = player.explain_damage(enemy)

    assert breakdown.gear_damage == 30
    assert breakdown.strength_bonus == pytest.approx(10)
    assert breakdown.raw_damage == pytest.approx(40)
    assert breakdown.total_soak == 6
    assert breakdown.after_soak == pytest.approx(34)
    assert breakdown.amount == 34
    assert not breakdown.fully_soaked
