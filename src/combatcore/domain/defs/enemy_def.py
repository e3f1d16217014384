"""Enemy definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class EnemyDef:
    """Enemy definition referencing armor and buff ids."""

    id: str
    name: str
    armor_id: str
    buff_ids: tuple[str, ...] = ()
