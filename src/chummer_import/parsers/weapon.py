"""
Weapon parser for both legacy and current ``weapons.xml`` entries.
"""

from __future__ import annotations

import copy
import logging
import re
from typing import Any

from shortuuid import random as shortuuid_random

from ..constants import (
    DEFAULT_MELEE_SKILL,
    DEFAULT_RANGED_SKILL,
    MAP_CATEGORY_TO_SKILL,
    RANGE_CATEGORIES,
    THROWING_WEAPONS,
    WEAPON_MOD_KEY,
    WEAPONS_DOMAIN,
)
from ..filing import translate_category
from ..identity import UNKNOWN_NAME
from ..models import DamageNotation, FolderPath, ParsedRecord, WeaponCategory
from ..notation import decode_ammo, decode_damage, parse_fire_modes
from ..schemas import WeaponSystem
from ..tree import Record, Scalar, SourceNode, WrappedText, parse_number, read_list, read_number, read_text
from .base import Parser

logger = logging.getLogger(__name__)

_SKILL_SEPARATORS_RE = re.compile(r"[\s\-]")


def weapon_category(node: SourceNode) -> WeaponCategory:
    """Melee beats thrown, thrown beats ranged."""
    if read_text(node, "type") == "Melee":
        return WeaponCategory.MELEE
    skill_category = read_text(node, "useskill") or read_text(node, "category")
    if skill_category == THROWING_WEAPONS:
        return WeaponCategory.THROWN
    return WeaponCategory.RANGE


def resolve_skill(node: SourceNode, category: WeaponCategory) -> str:
    """Active skill id used with the weapon."""
    override = read_text(node, "useskill")
    weapon_category_text = read_text(node, "category")

    if override in MAP_CATEGORY_TO_SKILL:
        return MAP_CATEGORY_TO_SKILL[override]
    if weapon_category_text in MAP_CATEGORY_TO_SKILL:
        return MAP_CATEGORY_TO_SKILL[weapon_category_text]

    skill_text = override or weapon_category_text
    if skill_text:
        return _SKILL_SEPARATORS_RE.sub("_", skill_text).lower()
    return DEFAULT_RANGED_SKILL if category is WeaponCategory.RANGE else DEFAULT_MELEE_SKILL


def damage_block(damage: DamageNotation) -> dict[str, Any]:
    element = damage.element.value if damage.element else ""
    block: dict[str, Any] = {
        "type": {"base": damage.kind.value, "value": damage.kind.value},
        "base": damage.base,
        "value": damage.base,
        "ap": {"base": damage.armor_piercing, "value": damage.armor_piercing, "mod": []},
        "element": {"base": element, "value": element},
    }
    if damage.linked_attribute:
        block["attribute"] = damage.linked_attribute
    return block


def accessory_name(accessory: SourceNode) -> str:
    """Accessory name from ``Stock``, ``{_TEXT: Stock}`` or ``{name: Stock}``."""
    if isinstance(accessory, Scalar):
        return str(accessory.value).strip()
    if isinstance(accessory, WrappedText):
        return accessory.text.strip()
    if isinstance(accessory, Record):
        return (accessory.text or read_text(accessory, "name")).strip()
    return ""


def accessory_rating(accessory: SourceNode) -> int | float | None:
    if not isinstance(accessory, Record):
        return None
    return parse_number(read_text(accessory, "rating"), None)


class WeaponParser(Parser):
    parse_type = "weapon"
    system_schema = WeaponSystem

    def build_system_fields(self, node: SourceNode) -> dict[str, Any]:
        system = self.base_system()
        action = system["action"]
        action["type"] = "varies"
        action["attribute"] = "agility"

        category = weapon_category(node)
        system["category"] = category.value
        system["subcategory"] = read_text(node, "category").lower()

        action["skill"] = resolve_skill(node, category)
        damage = decode_damage(read_text(node, "damage"), read_text(node, "ap"))
        action["damage"] = damage_block(damage)
        if damage.raw_text and not damage.is_recognized:
            system["importFlags"]["damageRaw"] = damage.raw_text

        # Accuracy only exists in current files
        accuracy = read_text(node, "accuracy")
        if accuracy:
            if "Physical" in accuracy:
                action["limit"]["attribute"] = "physical"
                accuracy = accuracy.replace("Physical", "").strip()
            action["limit"]["base"] = parse_number(accuracy, 0)

        system["technology"]["conceal"]["base"] = read_number(node, "conceal", 0)

        if category is WeaponCategory.RANGE:
            self._set_ranged_fields(system, node)

        return system

    def _set_ranged_fields(self, system: dict[str, Any], node: SourceNode) -> None:
        rc = read_number(node, "rc", 0)
        system["range"]["rc"] = {"base": rc, "value": rc}

        range_category = read_text(node, "range") or read_text(node, "category")
        bands = RANGE_CATEGORIES.get(range_category)
        if bands:
            key, short, medium, long, extreme = bands
            system["range"]["ranges"] = {
                "category": key,
                "attribute": "agility",
                "short": short,
                "medium": medium,
                "long": long,
                "extreme": extreme,
            }

        ammo = decode_ammo(read_text(node, "ammo"))
        system["ammo"]["current"] = {"value": ammo.capacity, "max": ammo.capacity}
        # One feed device is loaded, the rest are spares
        spares = max(0, ammo.feed_device_count - 1)
        system["ammo"]["spare_clips"] = {"value": spares, "max": spares}
        if ammo.clip_kind:
            system["ammo"]["clip_type"] = ammo.clip_kind.value
        if ammo.raw_text and (ammo.is_alternate_variant or ammo.is_external_feed or not ammo.clip_kind):
            system["importFlags"]["ammoRaw"] = ammo.raw_text

        system["range"]["modes"] = parse_fire_modes(read_text(node, "mode"))

    def assign_import_flags(self, record: ParsedRecord, node: SourceNode) -> None:
        super().assign_import_flags(record, node)
        if record.import_flags["category"] == "Gear":
            record.import_flags["category"] = record.name.split(":")[0].strip()

    def resolve_folder(self, node: SourceNode, destination_key: str) -> FolderPath:
        category = weapon_category(node)
        root = category.value.capitalize()
        if category is WeaponCategory.THROWN:
            return FolderPath(root=root)
        sub = translate_category(self.context, WEAPONS_DOMAIN, read_text(node, "category"))
        return FolderPath(root=root, sub=sub or None)

    async def build_embedded_items(self, node: SourceNode) -> list[dict[str, Any]]:
        """Attach previously imported accessories listed on the weapon.

        Every listed accessory becomes its own equipped copy, in source order,
        even when a name appears twice. Names with no catalog match are
        skipped with a warning.
        """
        accessories = read_list(node.get("accessories"), "accessory")
        names = [name for name in (accessory_name(a) for a in accessories) if name]
        if not names:
            return []

        found = await self.context.lookup.find_by_name(WEAPON_MOD_KEY, list(dict.fromkeys(names)))
        weapon_name = read_text(node, "name", UNKNOWN_NAME)

        items: list[dict[str, Any]] = []
        for accessory in accessories:
            name = accessory_name(accessory)
            if not name:
                continue

            match = found.get(name)
            if match is None:
                logger.warning(f"Accessory missing: weapon '{weapon_name}', accessory '{name}'")
                self.context.warn(f"Weapon '{weapon_name}': accessory '{name}' not found")
                continue

            item = copy.deepcopy(match)
            item.pop("name_english", None)
            item["_id"] = shortuuid_random(length=16)
            technology = item.setdefault("system", {}).setdefault("technology", {})
            technology["equipped"] = True

            rating = accessory_rating(accessory)
            if rating is not None:
                technology["rating"] = rating

            items.append(item)

        return items
