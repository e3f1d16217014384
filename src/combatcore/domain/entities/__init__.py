"""Runtime entity exports."""

from .armor import SimpleArmor
from .buff import BasicBuff
from .damage import Damage
from .enemy import SimpleEnemy
from .equipment import Equipment
from .inventory import Inventory
from .item import GENERIC_ITEM, BasicItem
from .player import Player
from .stats import Stats

__all__ = [
    "BasicBuff",
    "BasicItem",
    "Damage",
    "Equipment",
    "GENERIC_ITEM",
    "Inventory",
    "Player",
    "SimpleArmor",
    "SimpleEnemy",
    "Stats",
]
