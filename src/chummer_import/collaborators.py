"""
Contracts for the services the import pipeline depends on.

The catalog store, folder tree, localization, icon picking and bonus
effects live outside this package. They are described here as protocols and
bundled into an ``ImportContext`` that is passed explicitly to the driver
and to every parser.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from .models import ParsedRecord
from .settings import ImportSettings
from .tree import SourceNode

logger = logging.getLogger(__name__)


@runtime_checkable
class Collection(Protocol):
    """A destination catalog bucket (one per document type/pack)."""

    def has(self, identity: str) -> bool: ...

    async def bulk_create(self, records: list[ParsedRecord], destination_key: str) -> None:
        """Create all records, keeping the ids they carry."""
        ...


class CatalogResolver(Protocol):
    async def get_collection(self, key: str) -> Collection: ...


class FolderHandle(Protocol):
    id: str


class FolderResolver(Protocol):
    async def get_folder(self, destination_key: str, root: str, sub: str | None = None) -> FolderHandle: ...


class NameLookup(Protocol):
    async def find_by_name(self, destination_type_key: str, names: list[str]) -> dict[str, dict[str, Any]]:
        """Previously imported records keyed by their (English) name."""
        ...


class Localizer(Protocol):
    def translate_category(self, domain: str, raw_category: str, language: str) -> str: ...


class IconPicker(Protocol):
    def pick_icon(self, icon_set: list[str], record: ParsedRecord) -> str | None: ...


class BonusApplier(Protocol):
    async def apply_bonus(self, record: ParsedRecord, bonus: SourceNode) -> None: ...


class ProgressSink(Protocol):
    def update(self, pct: float, message: str) -> None: ...

    def warn(self, message: str) -> None: ...

    def summary(self, message: str) -> None: ...


class LoggingProgress:
    """Progress sink that only writes to the log."""

    def update(self, pct: float, message: str) -> None:
        logger.debug(f"[{pct:6.1%}] {message}")

    def warn(self, message: str) -> None:
        logger.warning(message)

    def summary(self, message: str) -> None:
        logger.info(message)


@dataclass
class ImportContext:
    """Collaborators, settings and shared state for an import run.

    ``identities`` maps destination key → item name → identity. It is filled
    in source order as items are processed, so later items (and later
    batches of the same run) see earlier assignments.
    """

    catalog: CatalogResolver
    folders: FolderResolver
    lookup: NameLookup
    localizer: Localizer
    icons: IconPicker | None = None
    bonuses: BonusApplier | None = None
    progress: ProgressSink = field(default_factory=LoggingProgress)
    settings: ImportSettings = field(default_factory=ImportSettings)
    identities: dict[str, dict[str, str]] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)

    def remember(self, destination_key: str, name: str, identity: str) -> None:
        self.identities.setdefault(destination_key, {})[name] = identity

    def identity_of(self, destination_key: str, name: str) -> str | None:
        return self.identities.get(destination_key, {}).get(name)

    def warn(self, message: str) -> None:
        """Record a user visible warning for this run."""
        self.warnings.append(message)
        self.progress.warn(message)
