"""
Base parser turning one Chummer element into a catalog record.

Every document type implements the same small contract:

- ``build_system_fields``: type specific ``system`` block
- ``resolve_folder``: destination folder path
- ``assign_import_flags``: classification block used by the catalog
- ``build_embedded_items``: sub-records attached to the record

``Parser.parse`` runs them in a fixed order and adds the steps shared by all
types (name, sanitizing, technology, icon, bonus, source citation).
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar

from ..collaborators import ImportContext
from ..filing import resolve_folder_handle
from ..identity import UNKNOWN_NAME
from ..models import FolderPath, ParsedRecord
from ..sanitizer import log_corrections, sanitize
from ..schemas import SystemBlock
from ..tree import SourceNode, has_value, read_number, read_text

logger = logging.getLogger(__name__)


def record_name(node: SourceNode) -> str:
    """Translated name when the file carries one, else the source name."""
    return read_text(node, "translate") or read_text(node, "name") or UNKNOWN_NAME


def source_citation(node: SourceNode) -> str | None:
    """``"<source> <page>"`` when both are present, preferring ``altpage``."""
    if not (has_value(node, "source") and has_value(node, "page")):
        return None
    page = read_text(node, "altpage") or read_text(node, "page")
    return f"{read_text(node, 'source')} {page}".strip()


class Parser(ABC):
    """Contract shared by all document type parsers."""

    parse_type: ClassVar[str]
    system_schema: ClassVar[type[SystemBlock]]

    def __init__(self, context: ImportContext) -> None:
        self.context = context

    def base_system(self) -> dict[str, Any]:
        """Default ``system`` block for this document type."""
        return self.system_schema().model_dump()

    def build_system_fields(self, node: SourceNode) -> dict[str, Any]:
        return self.base_system()

    @abstractmethod
    def resolve_folder(self, node: SourceNode, destination_key: str) -> FolderPath:
        """Folder the record is filed under in ``destination_key``."""

    def assign_import_flags(self, record: ParsedRecord, node: SourceNode) -> None:
        record.import_flags.update({
            "category": read_text(node, "category"),
            "isFreshImport": True,
            "name": read_text(node, "name"),
            "sourceid": read_text(node, "id"),
        })

    async def build_embedded_items(self, node: SourceNode) -> list[dict[str, Any]]:
        return []

    async def parse(self, node: SourceNode, destination_key: str) -> ParsedRecord:
        """Build the catalog record for one source element.

        Args:
            node: Normalized source element.
            destination_key: Collection the record is going to.

        Returns:
            ParsedRecord without an id; the import driver assigns it.
        """
        name = record_name(node)

        system, corrections = sanitize(self.system_schema, self.build_system_fields(node))
        log_corrections(corrections, name, self.parse_type)

        folder = await resolve_folder_handle(
            self.context, destination_key, self.resolve_folder(node, destination_key)
        )

        record = ParsedRecord(name=name, type=self.parse_type, system=system, folder=folder.id)

        if "technology" in record.system:
            self.set_technology(record.system["technology"], node)

        self.assign_import_flags(record, node)

        icons = self.context.settings.icon_set
        if icons and self.context.icons is not None:
            record.img = self.context.icons.pick_icon(icons, record)

        if has_value(node, "bonus") and self.context.bonuses is not None:
            await self.context.bonuses.apply_bonus(record, node.get("bonus"))

        citation = source_citation(node)
        if citation is not None and "description" in record.system:
            record.system["description"]["source"] = citation

        record.flags = {"sr4": {"embeddedItems": await self.build_embedded_items(node)}}
        return record

    @staticmethod
    def set_technology(technology: dict[str, Any], node: SourceNode) -> None:
        technology["availability"] = read_text(node, "avail")
        technology["cost"] = read_number(node, "cost", 0)
        technology["rating"] = read_number(node, "rating", 0)
        if "conceal" in technology:
            technology["conceal"]["base"] = read_number(node, "conceal", 0)
