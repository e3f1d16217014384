"""Factory for creating enemies from definitions."""
from __future__ import annotations

from combatcore.data.repositories import ArmorRepository, BuffsRepository, EnemiesRepository
from combatcore.domain.entities import BasicBuff, SimpleArmor, SimpleEnemy
from combatcore.services.errors import FactoryError


def create_enemy(
    enemy_id: str,
    enemies_repo: EnemiesRepository,
    armor_repo: ArmorRepository,
    buffs_repo: BuffsRepository,
) -> SimpleEnemy:
    """Instantiate an enemy with its armor and buffs in definition order."""
    try:
        enemy_def = enemies_repo.get(enemy_id)
    except KeyError as exc:
        raise FactoryError(f"Enemy '{enemy_id}' not found.") from exc

    try:
        armor_def = armor_repo.get(enemy_def.armor_id)
    except KeyError as exc:
        raise FactoryError(f"Armor '{enemy_def.armor_id}' not found for enemy '{enemy_id}'.") from exc

    buffs = []
    for buff_id in enemy_def.buff_ids:
        try:
            buff_def = buffs_repo.get(buff_id)
        except KeyError as exc:
            raise FactoryError(f"Buff '{buff_id}' not found for enemy '{enemy_id}'.") from exc
        buffs.append(BasicBuff(soak_contribution=buff_def.soak, source=buff_def.effect))

    return SimpleEnemy(armor=SimpleArmor(soak_value=armor_def.soak), buffs=tuple(buffs))
