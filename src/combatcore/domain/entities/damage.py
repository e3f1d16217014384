"""Damage value object."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Damage:
    """Final damage produced by a single attack."""

    amount: int
