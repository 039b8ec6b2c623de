"""
chummer-import - converts Chummer character-builder data files into catalog records.
"""

from .collaborators import ImportContext, LoggingProgress
from .errors import CatalogUnavailableError, ImportFailure, MarkupError
from .identity import assign_identity
from .importers import BatchConfig, ImportReport, import_batch, import_files
from .markup import parse_markup_to_tree
from .models import AmmoNotation, DamageNotation, FolderPath, ParsedRecord
from .notation import decode_ammo, decode_damage
from .parsers import get_parser
from .settings import ImportSettings, load_settings
from .tree import normalize, read_list, read_number, read_text

try:
    from importlib.metadata import version as _get_version
    __version__ = _get_version("chummer-import")
except Exception:
    __version__ = "0.1.0"  # Fallback if metadata unavailable

__all__ = [
    "AmmoNotation",
    "BatchConfig",
    "CatalogUnavailableError",
    "DamageNotation",
    "FolderPath",
    "ImportContext",
    "ImportFailure",
    "ImportReport",
    "ImportSettings",
    "LoggingProgress",
    "MarkupError",
    "ParsedRecord",
    "assign_identity",
    "decode_ammo",
    "decode_damage",
    "get_parser",
    "import_batch",
    "import_files",
    "load_settings",
    "normalize",
    "parse_markup_to_tree",
    "read_list",
    "read_number",
    "read_text",
]
