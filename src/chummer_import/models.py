"""
Data models for imported catalog records and decoded notations.
"""

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, Field


class ClipKind(str, Enum):
    """Feed mechanism decoded from ammunition notation."""
    REMOVABLE_CLIP = "removable_clip"
    # Key spelling matches the destination system's clip type config
    INTERNAL_MAGAZINE = "internal_magazin"
    BELT_FED = "belt_fed"
    DRUM = "drum"


class DamageKind(str, Enum):
    """Damage track a weapon hits."""
    PHYSICAL = "physical"
    STUN = "stun"
    MATRIX = "matrix"


class DamageElement(str, Enum):
    """Elemental damage effect."""
    ELECTRICITY = "electricity"
    FIRE = "fire"


class WeaponCategory(str, Enum):
    """How a weapon is used; decides skill defaults and filing."""
    MELEE = "melee"
    THROWN = "thrown"
    RANGE = "range"


class QualityType(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"


class AmmoNotation(BaseModel):
    """Decoded ammunition text such as ``2x50(d)``."""
    capacity: int = Field(default=0, ge=0, description="Rounds per feed device")
    feed_device_count: int = Field(default=1, ge=1, description="Number of feed devices, 2 for 2x50(d)")
    clip_kind: ClipKind | None = Field(default=None, description="Feed mechanism, None when unknown")
    raw_text: str = Field(default="", description="Original notation text")
    is_alternate_variant: bool = Field(default=False, description="Text offered alternatives joined by 'or'")
    is_external_feed: bool = Field(default=False, description="Weapon is fed from an external source")


class DamageNotation(BaseModel):
    """Decoded damage code such as ``15S(e)``."""
    base: int = Field(default=0, ge=0, description="Base damage value or strength offset")
    kind: DamageKind = Field(default=DamageKind.PHYSICAL)
    element: DamageElement | None = Field(default=None)
    armor_piercing: int = Field(default=0)
    linked_attribute: Literal["strength"] | None = Field(
        default=None,
        description="Attribute added to base damage, set for strength based melee codes",
    )
    raw_text: str = Field(default="", description="Original damage text")
    is_recognized: bool = Field(default=False, description="True when one of the damage grammars matched")


class FolderPath(BaseModel):
    """Destination folder: a root name and an optional sub folder."""
    root: str
    sub: str | None = None

    def parts(self) -> list[str]:
        return [self.root] if not self.sub else [self.root, self.sub]


class ParsedRecord(BaseModel):
    """A catalog document ready for bulk creation."""
    id: str | None = Field(default=None, description="Identity forced by the import driver")
    name: str = Field(description="Display name, translated name preferred")
    type: str = Field(description="Destination document type discriminator")
    img: str | None = Field(default=None, description="Icon path picked for the record")
    folder: str | None = Field(default=None, description="Id of the destination folder")
    system: dict[str, Any] = Field(default_factory=dict, description="Type specific data block")
    flags: dict[str, Any] = Field(default_factory=dict, description="Module flags, embedded items live here")

    @property
    def import_flags(self) -> dict[str, Any]:
        return self.system.setdefault("importFlags", {})

    @property
    def embedded_items(self) -> list[dict[str, Any]]:
        return self.flags.get("sr4", {}).get("embeddedItems", [])
