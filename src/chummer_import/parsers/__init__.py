"""
Document type parsers.

Parsers are selected by their ``parse_type`` discriminator.
"""

from ..collaborators import ImportContext
from .base import Parser, record_name, source_citation
from .modification import WeaponModParser
from .quality import QualityParser
from .weapon import WeaponParser

PARSERS: dict[str, type[Parser]] = {
    WeaponParser.parse_type: WeaponParser,
    WeaponModParser.parse_type: WeaponModParser,
    QualityParser.parse_type: QualityParser,
}


def get_parser(parse_type: str, context: ImportContext) -> Parser:
    """Instantiate the parser for a document type.

    Raises:
        KeyError: If no parser handles ``parse_type``.
    """
    try:
        parser_class = PARSERS[parse_type]
    except KeyError:
        raise KeyError(f"No parser for document type '{parse_type}'") from None
    return parser_class(context)


__all__ = [
    "PARSERS",
    "Parser",
    "QualityParser",
    "WeaponModParser",
    "WeaponParser",
    "get_parser",
    "record_name",
    "source_citation",
]
