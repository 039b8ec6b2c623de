from __future__ import annotations

from typing import Any

from ..constants import (
    ITEM_TYPES_DOMAIN,
    METAGENIC_SUFFIX,
    NEGATIVE_QUALITY_CATEGORY,
    QUALITIES_DOMAIN,
    QUALITY_FOLDER,
)
from ..filing import translate_category
from ..models import FolderPath, QualityType
from ..schemas import QualitySystem
from ..tree import SourceNode, read_bool, read_number, read_text
from .base import Parser


class QualityParser(Parser):
    parse_type = "quality"
    system_schema = QualitySystem

    def build_system_fields(self, node: SourceNode) -> dict[str, Any]:
        system = self.base_system()

        # Anything that is not clearly negative stays positive
        is_negative = read_text(node, "category") == NEGATIVE_QUALITY_CATEGORY
        system["type"] = (QualityType.NEGATIVE if is_negative else QualityType.POSITIVE).value

        # Legacy files price qualities in build points
        system["karma"] = read_number(node, "karma", read_number(node, "bp", 0))
        return system

    def resolve_folder(self, node: SourceNode, destination_key: str) -> FolderPath:
        root = translate_category(self.context, ITEM_TYPES_DOMAIN, QUALITY_FOLDER)
        if read_bool(node, "metagenic"):
            root += METAGENIC_SUFFIX

        sub = translate_category(self.context, QUALITIES_DOMAIN, read_text(node, "category"))
        return FolderPath(root=root, sub=sub or None)
