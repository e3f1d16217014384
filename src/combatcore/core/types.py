"""Shared type aliases for the core and domain layers."""
from typing import Literal

SlotName = Literal["left_hand", "right_hand", "head", "feet", "chest"]

EQUIPMENT_SLOTS: tuple[SlotName, ...] = ("left_hand", "right_hand", "head", "feet", "chest")

__all__ = ["EQUIPMENT_SLOTS", "SlotName"]
