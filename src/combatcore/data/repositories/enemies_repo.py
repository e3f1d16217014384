"""Enemies repository with reference validation."""
from __future__ import annotations

from typing import Dict

from combatcore.data.errors import DataReferenceError, DataValidationError
from combatcore.data.repositories.armor_repo import ArmorRepository
from combatcore.data.repositories.base import RepositoryBase
from combatcore.data.repositories.buffs_repo import BuffsRepository
from combatcore.domain.defs import EnemyDef


class EnemiesRepository(RepositoryBase[EnemyDef]):
    """Loads enemies and ensures referenced armor and buffs exist."""

    def __init__(
        self,
        armor_repo: ArmorRepository | None = None,
        buffs_repo: BuffsRepository | None = None,
        base_path=None,
    ) -> None:
        super().__init__("enemies.json", base_path)
        self._armor_repo = armor_repo or ArmorRepository(base_path=base_path)
        self._buffs_repo = buffs_repo or BuffsRepository(base_path=base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, EnemyDef]:
        armor_ids = self._armor_repo.ids()
        buff_ids = self._buffs_repo.ids()

        enemies: Dict[str, EnemyDef] = {}
        for raw_id, payload in raw.items():
            if not isinstance(raw_id, str):
                raise DataValidationError("Enemy IDs must be strings.")
            enemy_data = self._require_mapping(payload, f"enemy '{raw_id}'")
            self._assert_exact_fields(
                enemy_data,
                {"name", "armor_id"},
                f"enemy '{raw_id}'",
                optional_fields={"buff_ids"},
            )

            name = self._require_str(enemy_data["name"], f"enemy '{raw_id}' name")
            armor_id = self._require_str(enemy_data["armor_id"], f"enemy '{raw_id}' armor_id")
            enemy_buff_ids = self._require_str_list(
                enemy_data.get("buff_ids", []), f"enemy '{raw_id}' buff_ids"
            )

            if armor_id not in armor_ids:
                raise DataReferenceError(f"enemy '{raw_id}' references missing armor '{armor_id}'.")
            for buff_id in enemy_buff_ids:
                if buff_id not in buff_ids:
                    raise DataReferenceError(f"enemy '{raw_id}' references missing buff '{buff_id}'.")

            enemies[raw_id] = EnemyDef(
                id=raw_id,
                name=name,
                armor_id=armor_id,
                buff_ids=tuple(enemy_buff_ids),
            )
        return enemies
