"""
Chummer data constants and lookup tables.

These map Chummer categories and file names to catalog equivalents.
Category names cover both the legacy (SR4) and current (SR5) data files.
"""

# ---------------------------------------------------------------------------
# Destination collections
# ---------------------------------------------------------------------------

WEAPON_KEY = "Weapon"
WEAPON_MOD_KEY = "Weapon_Mod"
QUALITY_KEY = "Quality"

# ---------------------------------------------------------------------------
# Chummer data files
# ---------------------------------------------------------------------------

WEAPONS_FILE = "weapons.xml"
QUALITIES_FILE = "qualities.xml"

# ---------------------------------------------------------------------------
# Weapons
# ---------------------------------------------------------------------------

THROWING_WEAPONS = "Throwing Weapons"

# Chummer weapon category (or useskill) → active skill id
MAP_CATEGORY_TO_SKILL: dict[str, str] = {
    "Assault Cannons": "heavy_weapons",
    "Assault Rifles": "automatics",
    "Blades": "blades",
    "Bows": "archery",
    "Carbines": "automatics",
    "Clubs": "clubs",
    "Crossbows": "archery",
    "Exotic Melee Weapons": "exotic_melee",
    "Exotic Ranged Weapons": "exotic_range",
    "Flamethrowers": "exotic_range",
    "Grenade Launchers": "heavy_weapons",
    "Heavy Machine Guns": "heavy_weapons",
    "Heavy Pistols": "pistols",
    "Holdouts": "pistols",
    "Laser Weapons": "exotic_range",
    "Light Machine Guns": "heavy_weapons",
    "Light Pistols": "pistols",
    "Machine Pistols": "automatics",
    "Medium Machine Guns": "heavy_weapons",
    "Missile Launchers": "heavy_weapons",
    "Shotguns": "longarms",
    "Sniper Rifles": "longarms",
    "Sporting Rifles": "longarms",
    "Submachine Guns": "automatics",
    "Tasers": "pistols",
    "Throwing Weapons": "throwing_weapons",
    "Unarmed": "unarmed_combat",
    "Improvised Weapons": "exotic_melee",
    "Gunnery": "gunnery",
}

DEFAULT_RANGED_SKILL = "exotic_range"
DEFAULT_MELEE_SKILL = "exotic_melee"

# Chummer range/category name → (range category key, short, medium, long, extreme) in meters
RANGE_CATEGORIES: dict[str, tuple[str, int, int, int, int]] = {
    "Tasers": ("taser", 5, 10, 15, 20),
    "Holdouts": ("hold_out_pistol", 5, 15, 30, 50),
    "Light Pistols": ("light_pistol", 5, 15, 30, 50),
    "Heavy Pistols": ("heavy_pistol", 5, 20, 40, 60),
    "Machine Pistols": ("machine_pistol", 5, 15, 30, 50),
    "Submachine Guns": ("smg", 10, 40, 80, 150),
    "Carbines": ("smg", 10, 40, 80, 150),
    "Assault Rifles": ("assault_rifle", 25, 150, 350, 550),
    "Shotguns": ("shotgun_slug", 10, 40, 80, 150),
    "Shotguns (flechette)": ("shotgun_flechette", 15, 30, 45, 60),
    "Sporting Rifles": ("sporting_rifle", 50, 250, 500, 750),
    "Sniper Rifles": ("sniper_rifle", 50, 350, 800, 1500),
    "Light Machine Guns": ("light_machinegun", 25, 200, 400, 800),
    "Medium Machine Guns": ("medium_heavy_machinegun", 40, 250, 750, 1200),
    "Heavy Machine Guns": ("medium_heavy_machinegun", 40, 250, 750, 1200),
    "Assault Cannons": ("assault_cannon", 50, 300, 750, 1500),
    "Grenade Launchers": ("grenade_launcher", 5, 50, 100, 150),
    "Missile Launchers": ("missile_launcher", 20, 150, 450, 1500),
    "Light Crossbows": ("light_crossbow", 6, 24, 60, 120),
    "Medium Crossbows": ("medium_crossbow", 9, 36, 90, 150),
    "Heavy Crossbows": ("heavy_crossbow", 15, 45, 120, 180),
}

# ---------------------------------------------------------------------------
# Weapon modifications
# ---------------------------------------------------------------------------

WEAPON_MOD_FOLDER = "Weapon-Mod"
WEAPON_MOD_FALLBACK_CATEGORY = "Weapon Mod"
MULTIPLE_MOUNT_POINTS = "Multiple Points"

# ---------------------------------------------------------------------------
# Qualities
# ---------------------------------------------------------------------------

QUALITY_FOLDER = "Quality"
METAGENIC_SUFFIX = " (Metagenic)"
NEGATIVE_QUALITY_CATEGORY = "Negative"

# ---------------------------------------------------------------------------
# Localization domains
# ---------------------------------------------------------------------------

WEAPONS_DOMAIN = "weapons"
QUALITIES_DOMAIN = "qualities"
ITEM_TYPES_DOMAIN = "item_types"
