"""
Batch import of Chummer data files.

Currently supports:
- weapons.xml (weapon accessories, legacy weapon mods, weapons)
- qualities.xml
"""

from .base import ImportReport, ItemResult, ItemStatus
from .documents import (
    DataImporter,
    QualityImporter,
    WeaponImporter,
    WeaponModImporter,
    import_files,
)
from .driver import BatchConfig, import_batch

__all__ = [
    "BatchConfig",
    "DataImporter",
    "ImportReport",
    "ItemResult",
    "ItemStatus",
    "QualityImporter",
    "WeaponImporter",
    "WeaponModImporter",
    "import_batch",
    "import_files",
]
