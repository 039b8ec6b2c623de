"""
Importers for whole Chummer data files.

Each importer knows which data files it handles, where the elements live in
the parsed tree and which parser and destination collection they use.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, ClassVar

from ..collaborators import ImportContext
from ..constants import QUALITIES_FILE, QUALITY_KEY, WEAPON_KEY, WEAPON_MOD_KEY, WEAPONS_FILE
from ..markup import parse_markup_to_tree
from ..models import ParsedRecord
from ..parsers import QualityParser, WeaponModParser, WeaponParser
from ..tree import SourceNode, read_list
from .base import ImportReport
from .driver import BatchConfig, import_batch

logger = logging.getLogger(__name__)

PostParseHook = Callable[[ParsedRecord], None]


class DataImporter(ABC):
    """Base for importers handling one or more Chummer data files."""

    files: ClassVar[tuple[str, ...]]

    def __init__(self, context: ImportContext, post_parse: PostParseHook | None = None) -> None:
        """
        Args:
            context: Collaborators and settings for the run.
            post_parse: Optional hook applied to every parsed record, e.g. to
                add test/action metadata.
        """
        self.context = context
        self.post_parse = post_parse

    async def parse(self, xml: str | bytes) -> list[ImportReport]:
        """Parse an XML data file and import its elements."""
        return await self._parse(parse_markup_to_tree(xml))

    @abstractmethod
    async def _parse(self, tree: SourceNode) -> list[ImportReport]:
        """Import the elements of an already parsed data file."""


class WeaponModImporter(DataImporter):
    """Accessories (current files) and ``<mods>`` (legacy files) as weapon mods."""

    files = (WEAPONS_FILE,)

    async def _parse(self, tree: SourceNode) -> list[ImportReport]:
        reports = [
            await import_batch(
                read_list(tree.get("accessories"), "accessory"),
                BatchConfig(
                    document_type="Weapon Accessory",
                    destination_key=lambda node: WEAPON_MOD_KEY,
                    parser=WeaponModParser(self.context),
                    post_parse=self.post_parse,
                ),
                self.context,
            )
        ]

        mods = read_list(tree.get("mods"), "mod")
        if mods:
            reports.append(await import_batch(
                mods,
                BatchConfig(
                    document_type="Weapon Mod",
                    destination_key=lambda node: WEAPON_MOD_KEY,
                    parser=WeaponModParser(self.context),
                    post_parse=self.post_parse,
                ),
                self.context,
            ))
        return reports


class WeaponImporter(DataImporter):
    """Weapons; run after ``WeaponModImporter`` so accessories resolve."""

    files = (WEAPONS_FILE,)

    async def _parse(self, tree: SourceNode) -> list[ImportReport]:
        report = await import_batch(
            read_list(tree.get("weapons"), "weapon"),
            BatchConfig(
                document_type="Weapon",
                destination_key=lambda node: WEAPON_KEY,
                parser=WeaponParser(self.context),
                post_parse=self.post_parse,
            ),
            self.context,
        )
        return [report]


class QualityImporter(DataImporter):
    files = (QUALITIES_FILE,)

    async def _parse(self, tree: SourceNode) -> list[ImportReport]:
        report = await import_batch(
            read_list(tree.get("qualities"), "quality"),
            BatchConfig(
                document_type="Quality",
                destination_key=lambda node: QUALITY_KEY,
                parser=QualityParser(self.context),
                post_parse=self.post_parse,
            ),
            self.context,
        )
        return [report]


# Weapon mods must exist before weapons look up their accessories
IMPORTER_ORDER: tuple[type[DataImporter], ...] = (WeaponModImporter, WeaponImporter, QualityImporter)


async def import_files(
    context: ImportContext,
    files: dict[str, str | bytes],
    post_parse: PostParseHook | None = None,
) -> list[ImportReport]:
    """Run every importer whose data file is present.

    Args:
        context: Collaborators and settings for the run.
        files: Data file name (e.g. ``weapons.xml``) → XML content.
        post_parse: Optional hook passed to every importer.

    Returns:
        Reports of all batches, in import order.
    """
    reports: list[ImportReport] = []
    for importer_class in IMPORTER_ORDER:
        for filename in importer_class.files:
            if filename not in files:
                continue
            logger.info(f"Importing {filename} with {importer_class.__name__}")
            importer = importer_class(context, post_parse=post_parse)
            reports.extend(await importer.parse(files[filename]))
    return reports
