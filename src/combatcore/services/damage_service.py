"""Damage forecasting between definition-backed players and enemies."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from combatcore.config import load_config
from combatcore.data.repositories import (
    ArmorRepository,
    BuffsRepository,
    EnemiesRepository,
    ItemsRepository,
    LoadoutsRepository,
)
from combatcore.domain.damage_formula import DamageBreakdown
from combatcore.domain.entities import Damage
from combatcore.services.factories import create_enemy, create_player_from_loadout

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DamageForecast:
    """Result of a single forecast hit."""

    loadout_id: str
    enemy_id: str
    damage: Damage
    breakdown: DamageBreakdown


class DamageService:
    """Builds players and enemies from definitions and resolves one hit."""

    def __init__(
        self,
        *,
        items_repo: ItemsRepository | None = None,
        loadouts_repo: LoadoutsRepository | None = None,
        armor_repo: ArmorRepository | None = None,
        buffs_repo: BuffsRepository | None = None,
        enemies_repo: EnemiesRepository | None = None,
        base_path: Path | str | None = None,
    ) -> None:
        self._items_repo = items_repo or ItemsRepository(base_path=base_path)
        self._loadouts_repo = loadouts_repo or LoadoutsRepository(
            items_repo=self._items_repo, base_path=base_path
        )
        self._armor_repo = armor_repo or ArmorRepository(base_path=base_path)
        self._buffs_repo = buffs_repo or BuffsRepository(base_path=base_path)
        self._enemies_repo = enemies_repo or EnemiesRepository(
            armor_repo=self._armor_repo,
            buffs_repo=self._buffs_repo,
            base_path=base_path,
        )

    @classmethod
    def from_config(cls, config_path: Path | None = None) -> "DamageService":
        """Build a service reading definitions from the configured directory."""
        config = load_config(config_path)
        return cls(base_path=config["definitions_path"])

    def forecast(self, loadout_id: str, enemy_id: str) -> DamageForecast:
        player = create_player_from_loadout(loadout_id, self._loadouts_repo, self._items_repo)
        enemy = create_enemy(enemy_id, self._enemies_repo, self._armor_repo, self._buffs_repo)
        breakdown = player.explain_damage(enemy)
        logger.info("Forecast %s -> %s: %d damage", loadout_id, enemy_id, breakdown.amount)
        return DamageForecast(
            loadout_id=loadout_id,
            enemy_id=enemy_id,
            damage=Damage(amount=breakdown.amount),
            breakdown=breakdown,
        )

    def forecast_all(self, loadout_id: str) -> list[DamageForecast]:
        """Forecast ``loadout_id`` against every defined enemy, sorted by enemy id."""
        return [self.forecast(loadout_id, enemy_def.id) for enemy_def in self._enemies_repo.all()]
