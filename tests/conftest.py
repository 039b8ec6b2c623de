"""
Pytest configuration and fixtures for chummer-import tests.

The catalog, folders, localization, icons and bonus effects are external
services; the fakes below keep everything in memory.
"""

import copy
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pytest

# Add src directory to Python path to allow importing chummer_import
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from chummer_import.collaborators import ImportContext  # noqa: E402
from chummer_import.models import ParsedRecord  # noqa: E402
from chummer_import.settings import ImportSettings  # noqa: E402

FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ============================================================================
# Fake collaborators
# ============================================================================

@dataclass
class FakeFolder:
    id: str


class FakeCollection:
    """Destination collection keeping records by id."""

    def __init__(self) -> None:
        self.records: dict[str, ParsedRecord] = {}
        self.bulk_calls: list[tuple[str, list[str]]] = []

    def has(self, identity: str) -> bool:
        return identity in self.records

    async def bulk_create(self, records: list[ParsedRecord], destination_key: str) -> None:
        self.bulk_calls.append((destination_key, [r.id for r in records]))
        for record in records:
            self.records[record.id] = record


class FakeCatalog:
    """Collection resolver that also answers name lookups."""

    def __init__(self, unavailable: set[str] | None = None) -> None:
        self.collections: dict[str, FakeCollection] = {}
        self.unavailable = unavailable or set()
        self.resolve_calls: list[str] = []
        self.lookup_calls: list[tuple[str, list[str]]] = []

    async def get_collection(self, key: str) -> FakeCollection:
        self.resolve_calls.append(key)
        if key in self.unavailable:
            raise ConnectionError(f"pack {key} is locked")
        return self.collections.setdefault(key, FakeCollection())

    def add(self, key: str, record: ParsedRecord) -> None:
        """Seed a record as if an earlier run had imported it."""
        self.collections.setdefault(key, FakeCollection()).records[record.id] = record

    async def find_by_name(self, destination_type_key: str, names: list[str]) -> dict[str, dict[str, Any]]:
        self.lookup_calls.append((destination_type_key, list(names)))
        collection = self.collections.get(destination_type_key)
        if collection is None:
            return {}
        found: dict[str, dict[str, Any]] = {}
        for record in collection.records.values():
            english = record.system.get("importFlags", {}).get("name") or record.name
            if english in names:
                found[english] = {
                    "_id": record.id,
                    "name": record.name,
                    "name_english": english,
                    "type": record.type,
                    "system": copy.deepcopy(record.system),
                }
        return found


class FakeFolders:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str, str | None]] = []

    async def get_folder(self, destination_key: str, root: str, sub: str | None = None) -> FakeFolder:
        self.calls.append((destination_key, root, sub))
        parts = [destination_key, root] + ([sub] if sub else [])
        return FakeFolder(id="/".join(parts))


class FakeLocalizer:
    """Translations by (domain, category), or by (language, domain, category)."""

    def __init__(
        self,
        translations: dict[tuple[str, str], str] | None = None,
        by_language: dict[tuple[str, str, str], str] | None = None,
    ) -> None:
        self.translations = translations or {}
        self.by_language = by_language or {}
        self.languages: list[str] = []

    def translate_category(self, domain: str, raw_category: str, language: str) -> str:
        self.languages.append(language)
        if (language, domain, raw_category) in self.by_language:
            return self.by_language[(language, domain, raw_category)]
        return self.translations.get((domain, raw_category), raw_category)


class FirstIcon:
    def pick_icon(self, icon_set: list[str], record: ParsedRecord) -> str | None:
        return icon_set[0] if icon_set else None


class RecordingBonuses:
    def __init__(self) -> None:
        self.applied: list[str] = []

    async def apply_bonus(self, record: ParsedRecord, bonus) -> None:
        self.applied.append(record.name)
        record.system["bonusApplied"] = True


class RecordingProgress:
    def __init__(self) -> None:
        self.updates: list[tuple[float, str]] = []
        self.warnings: list[str] = []
        self.summaries: list[str] = []

    def update(self, pct: float, message: str) -> None:
        self.updates.append((pct, message))

    def warn(self, message: str) -> None:
        self.warnings.append(message)

    def summary(self, message: str) -> None:
        self.summaries.append(message)


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def catalog():
    return FakeCatalog()


@pytest.fixture
def folders():
    return FakeFolders()


@pytest.fixture
def progress():
    return RecordingProgress()


@pytest.fixture
def localizer():
    return FakeLocalizer({
        ("weapons", "Heavy Pistols"): "Schwere Pistolen",
        ("item_types", "Quality"): "Quality",
    })


@pytest.fixture
def bonuses():
    return RecordingBonuses()


@pytest.fixture
def context(catalog, folders, localizer, bonuses, progress):
    """Import context backed by in-memory fakes."""
    return ImportContext(
        catalog=catalog,
        folders=folders,
        lookup=catalog,
        localizer=localizer,
        icons=FirstIcon(),
        bonuses=bonuses,
        progress=progress,
        settings=ImportSettings(),
    )


@pytest.fixture
def load_fixture():
    """Read a file from tests/fixtures."""
    def _load(name: str) -> str:
        return (FIXTURES_DIR / name).read_text(encoding="utf-8")
    return _load
