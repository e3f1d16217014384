"""Damage resolution helpers.

raw = sum(base_damage * damage_modifier) + sum(base_damage) * strength * 0.1
amount = round_half_up(max(0, raw - target.total_soak))

Rounding happens once, on the clamped post-soak value.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING, Iterable

from combatcore.domain.capabilities import HasBaseDamage, HasTotalSoak

if TYPE_CHECKING:
    from combatcore.domain.entities.stats import Stats

logger = logging.getLogger(__name__)

STRENGTH_BONUS_PER_POINT = 0.1


@dataclass(frozen=True, slots=True)
class DamageBreakdown:
    """Every intermediate term of a damage calculation.

    Attributes:
        gear_damage: Sum of base_damage * damage_modifier over all slots.
        strength_bonus: Sum of unmodified base damage scaled by strength.
        raw_damage: gear_damage + strength_bonus, unrounded.
        total_soak: The target's soak at the time of the hit.
        after_soak: raw_damage - total_soak, before clamping.
        amount: Final damage, clamped at zero and rounded half up.
    """

    gear_damage: float
    strength_bonus: float
    raw_damage: float
    total_soak: float
    after_soak: float
    amount: int

    @property
    def fully_soaked(self) -> bool:
        return self.after_soak <= 0


def round_half_up(value: float) -> int:
    """Round to the nearest integer with ties going up (4.5 -> 5)."""
    return int(Decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def compute_gear_damage(items: Iterable[HasBaseDamage]) -> float:
    return sum(item.base_damage * item.damage_modifier for item in items)


def compute_strength_bonus(items: Iterable[HasBaseDamage], strength: float) -> float:
    base_total = sum(item.base_damage for item in items)
    return base_total * strength * STRENGTH_BONUS_PER_POINT


def build_damage_breakdown(
    items: Iterable[HasBaseDamage],
    stats: Stats,
    target: HasTotalSoak,
) -> DamageBreakdown:
    """Resolve one hit from the given equipped items and stats against ``target``."""
    equipped = tuple(items)
    gear_damage = compute_gear_damage(equipped)
    strength_bonus = compute_strength_bonus(equipped, stats.strength)
    raw_damage = gear_damage + strength_bonus
    total_soak = target.total_soak
    after_soak = raw_damage - total_soak
    if after_soak < 0:
        logger.debug("Soak %.3f exceeds raw damage %.3f; clamping to zero.", total_soak, raw_damage)
    amount = round_half_up(max(0.0, after_soak))
    logger.debug(
        "Damage resolved: gear=%.3f strength=%.3f soak=%.3f -> %d",
        gear_damage,
        strength_bonus,
        total_soak,
        amount,
    )
    return DamageBreakdown(
        gear_damage=gear_damage,
        strength_bonus=strength_bonus,
        raw_damage=raw_damage,
        total_soak=total_soak,
        after_soak=after_soak,
        amount=amount,
    )
