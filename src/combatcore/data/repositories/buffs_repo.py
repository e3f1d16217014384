"""Buffs repository."""
from __future__ import annotations

from typing import Dict

from combatcore.data.errors import DataValidationError
from combatcore.data.repositories.base import RepositoryBase
from combatcore.domain.defs import BuffDef


class BuffsRepository(RepositoryBase[BuffDef]):
    """Loads and validates soak buff definitions."""

    def __init__(self, base_path=None) -> None:
        super().__init__("buffs.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, BuffDef]:
        buffs: Dict[str, BuffDef] = {}
        for raw_id, payload in raw.items():
            if not isinstance(raw_id, str):
                raise DataValidationError("Buff IDs must be strings.")
            buff_data = self._require_mapping(payload, f"buff '{raw_id}'")
            self._assert_exact_fields(
                buff_data,
                {"name", "soak"},
                f"buff '{raw_id}'",
                optional_fields={"effect"},
            )

            effect = buff_data.get("effect")
            if effect is not None:
                effect = self._require_str(effect, f"buff '{raw_id}' effect")

            buffs[raw_id] = BuffDef(
                id=raw_id,
                name=self._require_str(buff_data["name"], f"buff '{raw_id}' name"),
                soak=self._require_number(buff_data["soak"], f"buff '{raw_id}' soak"),
                effect=effect,
            )
        return buffs
