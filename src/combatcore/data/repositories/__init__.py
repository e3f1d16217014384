"""Repository exports."""

from .armor_repo import ArmorRepository
from .buffs_repo import BuffsRepository
from .enemies_repo import EnemiesRepository
from .items_repo import ItemsRepository
from .loadouts_repo import LoadoutsRepository

__all__ = [
    "ArmorRepository",
    "BuffsRepository",
    "EnemiesRepository",
    "ItemsRepository",
    "LoadoutsRepository",
]
