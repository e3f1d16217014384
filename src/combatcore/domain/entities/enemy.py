"""Enemy runtime models."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from combatcore.domain.capabilities import HasSoak, HasSoakContribution


@dataclass(frozen=True, slots=True)
class SimpleEnemy:
    """A damage target composed of one armor piece and any number of buffs."""

    armor: HasSoak
    buffs: Sequence[HasSoakContribution] = ()

    def __post_init__(self) -> None:
        # Freeze the caller's list so later appends cannot change total_soak.
        object.__setattr__(self, "buffs", tuple(self.buffs))

    @property
    def buff_soak(self) -> float:
        return sum(buff.soak_contribution for buff in self.buffs)

    @property
    def total_soak(self) -> float:
        """Armor soak scales the cumulative buff soak; no buffs means no soak."""
        return self.armor.soak_value * self.buff_soak
