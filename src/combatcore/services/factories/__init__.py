"""Factory helpers for runtime entities."""

from .enemy_factory import create_enemy
from .player_factory import create_player_from_loadout

__all__ = [
    "create_enemy",
    "create_player_from_loadout",
]
