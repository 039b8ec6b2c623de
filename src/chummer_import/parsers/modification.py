"""
Weapon accessory and weapon mod parser.

Current files describe accessories with a mount point; legacy ``<mod>``
entries instead carry slots, an ammo bonus and sometimes a textual cost
such as ``Weapon Cost``. Those legacy columns have no dedicated catalog
field and are kept in a ``legacy`` block and in the import flags.
"""

from __future__ import annotations

from typing import Any

from ..constants import (
    MULTIPLE_MOUNT_POINTS,
    WEAPON_MOD_FALLBACK_CATEGORY,
    WEAPON_MOD_FOLDER,
    WEAPONS_DOMAIN,
)
from ..filing import translate_category
from ..models import FolderPath, ParsedRecord
from ..schemas import ModificationSystem
from ..tree import SourceNode, parse_number, read_number, read_text
from .base import Parser


def non_numeric_cost(node: SourceNode) -> str:
    """Cost text when it is not a number (``Weapon Cost``), else ``""``."""
    cost = read_text(node, "cost").strip()
    if cost and parse_number(cost, None) is None:
        return cost
    return ""


class WeaponModParser(Parser):
    parse_type = "modification"
    system_schema = ModificationSystem

    def build_system_fields(self, node: SourceNode) -> dict[str, Any]:
        system = self.base_system()

        mount = read_text(node, "mount")
        if mount:
            system["mount_point"] = mount.lower().split("/")[0]

        system["type"] = "weapon"
        system["rc"] = read_number(node, "rc", 0)
        system["accuracy"] = read_number(node, "accuracy", 0)

        system["legacy"] = {
            "slots": read_number(node, "slots", 0),
            "ammoBonus": read_number(node, "ammobonus", 0),
            "costRaw": non_numeric_cost(node),
            "categoryRaw": read_text(node, "category"),
        }
        return system

    def assign_import_flags(self, record: ParsedRecord, node: SourceNode) -> None:
        super().assign_import_flags(record, node)
        flags = record.import_flags

        # Accessories group by mount, mods by category
        flags["category"] = read_text(node, "mount") or read_text(node, "category") or WEAPON_MOD_FALLBACK_CATEGORY
        flags["slots"] = read_number(node, "slots", 0)
        flags["ammoBonus"] = read_number(node, "ammobonus", 0)

        cost_raw = non_numeric_cost(node)
        if cost_raw:
            flags["costRaw"] = cost_raw

    def resolve_folder(self, node: SourceNode, destination_key: str) -> FolderPath:
        folder = read_text(node, "mount") or read_text(node, "category") or "Other"
        folder = translate_category(self.context, WEAPONS_DOMAIN, folder)
        if "/" in folder:
            folder = MULTIPLE_MOUNT_POINTS
        return FolderPath(root=WEAPON_MOD_FOLDER, sub=folder)
