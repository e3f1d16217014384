from __future__ import annotations

import json
from pathlib import Path


def write_json(path: Path, data: dict) -> None:
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")


def make_definitions_dir(tmp_path: Path) -> Path:
    definitions_dir = tmp_path / "definitions"
    definitions_dir.mkdir()
    return definitions_dir


def seed_minimal_definitions(definitions_dir: Path) -> None:
    write_json(
        definitions_dir / "items.json",
        {
            "oak_club": {"name": "Oak Club", "slot": "left_hand", "base_damage": 100, "damage_modifier": 0},
            "chain_vest": {"name": "Chain Vest", "slot": "chest", "base_damage": 6, "damage_modifier": 9},
        },
    )
    write_json(
        definitions_dir / "loadouts.json",
        {
            "bruiser": {"name": "Bruiser", "strength": 10, "equipment": {"left_hand": "oak_club"}},
            "guard": {"name": "Guard", "strength": 0, "equipment": {"chest": "chain_vest", "head": None}},
        },
    )
    write_json(
        definitions_dir / "armor.json",
        {
            "hide": {"name": "Hide", "soak": 4},
            "plate": {"name": "Plate", "soak": 40},
        },
    )
    write_json(
        definitions_dir / "buffs.json",
        {
            "bark": {"name": "Bark", "soak": 2, "effect": "barkskin"},
            "ward": {"name": "Ward", "soak": 3},
            "grit": {"name": "Grit", "soak": 1},
            "wall": {"name": "Wall", "soak": 20},
            "moat": {"name": "Moat", "soak": 30},
        },
    )
    write_json(
        definitions_dir / "enemies.json",
        {
            "wolf": {"name": "Wolf", "armor_id": "hide"},
            "treant": {"name": "Treant", "armor_id": "hide", "buff_ids": ["bark", "ward", "grit"]},
            "keep": {"name": "Keep", "armor_id": "plate", "buff_ids": ["wall", "moat"]},
        },
    )
