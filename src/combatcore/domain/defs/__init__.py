"""Domain definition exports."""

from .armor_def import ArmorDef
from .buff_def import BuffDef
from .enemy_def import EnemyDef
from .item_def import ItemDef
from .loadout_def import LoadoutDef

__all__ = [
    "ArmorDef",
    "BuffDef",
    "EnemyDef",
    "ItemDef",
    "LoadoutDef",
]
