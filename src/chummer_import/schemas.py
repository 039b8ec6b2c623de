"""
Destination schemas for the ``system`` block of imported documents.

Each document type (weapon, modification, quality) has a schema describing
the fields the catalog expects. Parsers start from the schema defaults,
fill in what the source provides, and the sanitizer validates the result
against the same schema.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


DamageTypeKey = Literal["physical", "stun", "matrix"]
DamageElementKey = Literal["", "electricity", "fire", "acid", "cold", "radiation"]
ClipTypeKey = Literal["", "removable_clip", "internal_magazin", "belt_fed", "drum", "break_action", "cylinder"]
MountPointKey = Literal["", "barrel", "under", "top", "stock", "side", "internal"]
WeaponCategoryKey = Literal["", "melee", "thrown", "range"]
QualityTypeKey = Literal["positive", "negative"]


class SystemBlock(BaseModel):
    """Base for schema blocks; keeps keys the schema does not declare."""
    model_config = ConfigDict(extra="allow")


class ImportFlags(SystemBlock):
    category: str = ""
    name: str = ""
    sourceid: str = ""
    isFreshImport: bool = False


class Description(SystemBlock):
    value: str = ""
    source: str = ""


class ValueField(SystemBlock):
    base: int = 0
    value: int = 0


class Conceal(SystemBlock):
    base: int = 0
    value: int = 0


class Technology(SystemBlock):
    availability: str = ""
    cost: float = 0
    rating: int = 0
    equipped: bool = False
    conceal: Conceal = Field(default_factory=Conceal)


class DamageTypeField(SystemBlock):
    base: DamageTypeKey = "physical"
    value: DamageTypeKey = "physical"


class DamageElementField(SystemBlock):
    base: DamageElementKey = ""
    value: DamageElementKey = ""


class ArmorPiercing(SystemBlock):
    base: int = 0
    value: int = 0
    mod: list = Field(default_factory=list)


class Damage(SystemBlock):
    type: DamageTypeField = Field(default_factory=DamageTypeField)
    base: int = 0
    value: int = 0
    ap: ArmorPiercing = Field(default_factory=ArmorPiercing)
    element: DamageElementField = Field(default_factory=DamageElementField)
    attribute: str = ""


class Limit(SystemBlock):
    base: int = 0
    attribute: str = ""


class Action(SystemBlock):
    type: str = ""
    attribute: str = ""
    skill: str = ""
    limit: Limit = Field(default_factory=Limit)
    damage: Damage = Field(default_factory=Damage)


class RangeBands(SystemBlock):
    category: str = ""
    attribute: str = ""
    short: int = 0
    medium: int = 0
    long: int = 0
    extreme: int = 0


class FireModes(SystemBlock):
    single_shot: bool = False
    semi_auto: bool = False
    burst_fire: bool = False
    full_auto: bool = False


class Range(SystemBlock):
    rc: ValueField = Field(default_factory=ValueField)
    ranges: RangeBands = Field(default_factory=RangeBands)
    modes: FireModes = Field(default_factory=FireModes)


class AmmoCount(SystemBlock):
    value: int = 0
    max: int = 0


class Ammo(SystemBlock):
    current: AmmoCount = Field(default_factory=AmmoCount)
    spare_clips: AmmoCount = Field(default_factory=AmmoCount)
    clip_type: ClipTypeKey = ""


class WeaponSystem(SystemBlock):
    category: WeaponCategoryKey = ""
    subcategory: str = ""
    action: Action = Field(default_factory=Action)
    technology: Technology = Field(default_factory=Technology)
    range: Range = Field(default_factory=Range)
    ammo: Ammo = Field(default_factory=Ammo)
    description: Description = Field(default_factory=Description)
    importFlags: ImportFlags = Field(default_factory=ImportFlags)


class LegacyModFields(SystemBlock):
    """Legacy weapon mod columns with no dedicated destination field."""
    slots: int = 0
    ammoBonus: int = 0
    costRaw: str = ""
    categoryRaw: str = ""


class ModificationSystem(SystemBlock):
    type: str = ""
    mount_point: MountPointKey = ""
    rc: int = 0
    accuracy: int = 0
    technology: Technology = Field(default_factory=Technology)
    legacy: LegacyModFields = Field(default_factory=LegacyModFields)
    description: Description = Field(default_factory=Description)
    importFlags: ImportFlags = Field(default_factory=ImportFlags)


class QualitySystem(SystemBlock):
    type: QualityTypeKey = "positive"
    karma: int = 0
    description: Description = Field(default_factory=Description)
    importFlags: ImportFlags = Field(default_factory=ImportFlags)
