"""
Decoders for the compact notations used in Chummer weapon data.

Ammunition examples: ``10(c)``, ``2x50(d)``, ``External Source``,
``10(c) or 6(m)``. Damage examples: ``6P``, ``15S(e)``,
``({STR}+1)P(fire)`` (current files) and ``(STR/2+1)P`` (legacy files).

None of the decoders raise: unrecognized text degrades to the zero result.
"""

import logging
import re

from .models import AmmoNotation, ClipKind, DamageElement, DamageKind, DamageNotation
from .tree import BLANK_MARKERS

logger = logging.getLogger(__name__)


CLIP_SUFFIXES: dict[str, ClipKind] = {
    "c": ClipKind.REMOVABLE_CLIP,
    "m": ClipKind.INTERNAL_MAGAZINE,
    "b": ClipKind.BELT_FED,
    "d": ClipKind.DRUM,
}

DAMAGE_KINDS: dict[str, DamageKind] = {
    "P": DamageKind.PHYSICAL,
    "S": DamageKind.STUN,
    "M": DamageKind.MATRIX,
}

DAMAGE_ELEMENTS: dict[str, DamageElement] = {
    "(e)": DamageElement.ELECTRICITY,
    "(fire)": DamageElement.FIRE,
}

_AMMO_OR_RE = re.compile(r"\s+or\s+", re.IGNORECASE)
_AMMO_EXTERNAL_RE = re.compile(r"^external\s+source$", re.IGNORECASE)
_AMMO_MULTI_RE = re.compile(r"^(\d+)\s*x\s*(\d+)\s*\(([a-z])\)\s*$", re.IGNORECASE)
_AMMO_SINGLE_RE = re.compile(r"^(\d+)\s*\(([a-z])\)\s*$", re.IGNORECASE)

_DAMAGE_SIMPLE_RE = re.compile(r"^([0-9]+)([PSM])? ?(\([a-zA-Z]+\))?")
_DAMAGE_STRENGTH_RE = re.compile(r"^\(\{STR\}([+-]?[0-9]*)\)([PSM])? ?(\([a-zA-Z]+\))?")
_DAMAGE_LEGACY_STRENGTH_RE = re.compile(r"^\((STR)[^)]*\)([PSM])? ?(\([a-zA-Z]+\))?", re.IGNORECASE)


def decode_ammo(text: str | None) -> AmmoNotation:
    """Decode an ammunition notation.

    Only the first alternative of ``A or B`` is decoded. Unknown shapes keep
    their raw text so the caller can store it for manual follow-up.

    Args:
        text: Ammo column text, may be blank or None.

    Returns:
        AmmoNotation with capacity, feed device count and clip kind.
    """
    raw = (text or "").strip()
    if not raw:
        return AmmoNotation(raw_text=raw)

    is_alternate = bool(_AMMO_OR_RE.search(raw))
    primary = _AMMO_OR_RE.split(raw, maxsplit=1)[0].strip()

    if _AMMO_EXTERNAL_RE.match(primary):
        return AmmoNotation(raw_text=raw, is_alternate_variant=is_alternate, is_external_feed=True)

    match = _AMMO_MULTI_RE.match(primary)
    if match:
        return AmmoNotation(
            capacity=int(match.group(2)),
            feed_device_count=max(1, int(match.group(1))),
            clip_kind=CLIP_SUFFIXES.get(match.group(3).lower()),
            raw_text=raw,
            is_alternate_variant=is_alternate,
        )

    match = _AMMO_SINGLE_RE.match(primary)
    if match:
        return AmmoNotation(
            capacity=int(match.group(1)),
            clip_kind=CLIP_SUFFIXES.get(match.group(2).lower()),
            raw_text=raw,
            is_alternate_variant=is_alternate,
        )

    logger.debug(f"Unrecognized ammo notation '{raw}'")
    return AmmoNotation(raw_text=raw, is_alternate_variant=is_alternate)


def parse_damage_kind(letter: str | None) -> DamageKind:
    return DAMAGE_KINDS.get(letter or "", DamageKind.PHYSICAL)


def parse_damage_element(text: str | None) -> DamageElement | None:
    return DAMAGE_ELEMENTS.get((text or "").lower())


def parse_armor_piercing(text: str | None) -> int:
    """Armor piercing column: blank, ``-`` and em-dash mean 0."""
    raw = (text or "").strip()
    if raw in BLANK_MARKERS:
        return 0
    try:
        return int(float(raw))
    except ValueError:
        return 0


def decode_damage(text: str | None, armor_piercing_text: str | None = None) -> DamageNotation:
    """Decode a damage code and its armor piercing column.

    Three grammars are tried in order, first match wins:

    1. ``<digits>[PSM][(element)]`` such as ``15S(e)``
    2. ``({STR}[+-offset])[PSM][(element)]`` such as ``({STR}+1)P(fire)``
    3. ``(STR...)[PSM][(element)]`` such as ``(STR/2+1)P``. The formula is
       not evaluated; base stays 0 and only the strength link is recorded.

    Args:
        text: Damage column text.
        armor_piercing_text: AP column text.

    Returns:
        DamageNotation; physical with base 0 when nothing matches.
    """
    raw = (text or "").strip()
    ap = parse_armor_piercing(armor_piercing_text)

    match = _DAMAGE_SIMPLE_RE.match(raw)
    if match:
        return DamageNotation(
            base=int(match.group(1)),
            kind=parse_damage_kind(match.group(2)),
            element=parse_damage_element(match.group(3)),
            armor_piercing=ap,
            raw_text=raw,
            is_recognized=True,
        )

    match = _DAMAGE_STRENGTH_RE.match(raw)
    if match:
        try:
            offset = int(match.group(1))
        except ValueError:
            offset = 0
        return DamageNotation(
            base=max(0, offset),
            kind=parse_damage_kind(match.group(2)),
            element=parse_damage_element(match.group(3)),
            armor_piercing=ap,
            raw_text=raw,
            is_recognized=True,
            linked_attribute="strength",
        )

    match = _DAMAGE_LEGACY_STRENGTH_RE.match(raw)
    if match:
        return DamageNotation(
            base=0,
            kind=parse_damage_kind(match.group(2)),
            element=parse_damage_element(match.group(3)),
            armor_piercing=ap,
            raw_text=raw,
            is_recognized=True,
            linked_attribute="strength",
        )

    if raw:
        logger.debug(f"Unrecognized damage notation '{raw}'")
    return DamageNotation(armor_piercing=ap, raw_text=raw)


def parse_fire_modes(text: str | None) -> dict[str, bool]:
    """Firing modes listed in the mode column, e.g. ``SA/BF``."""
    modes = text or ""
    return {
        "single_shot": "SS" in modes,
        "semi_auto": "SA" in modes,
        "burst_fire": "BF" in modes,
        "full_auto": "FA" in modes,
    }
