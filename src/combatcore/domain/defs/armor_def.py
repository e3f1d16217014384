"""Armor definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ArmorDef:
    """Minimal armor definition."""

    id: str
    name: str
    soak: float
