"""Capability contracts the damage formula relies on."""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class HasBaseDamage(Protocol):
    """Anything that can sit in an equipment slot."""

    @property
    def base_damage(self) -> float:  # pragma: no cover - type contract
        ...

    @property
    def damage_modifier(self) -> float:  # pragma: no cover - type contract
        ...


@runtime_checkable
class HasSoak(Protocol):
    """Armor contract."""

    @property
    def soak_value(self) -> float:  # pragma: no cover - type contract
        ...


@runtime_checkable
class HasSoakContribution(Protocol):
    """Buff contract."""

    @property
    def soak_contribution(self) -> float:  # pragma: no cover - type contract
        ...


@runtime_checkable
class HasTotalSoak(Protocol):
    """Damage target contract.

    Player.calculate_damage only needs the target's aggregated soak, so any
    object exposing ``total_soak`` can be attacked.
    """

    @property
    def total_soak(self) -> float:  # pragma: no cover - type contract
        ...


__all__ = ["HasBaseDamage", "HasSoak", "HasSoakContribution", "HasTotalSoak"]
