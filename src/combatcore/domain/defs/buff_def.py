"""Buff definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class BuffDef:
    """Soak-granting buff definition."""

    id: str
    name: str
    soak: float
    effect: str | None = None
