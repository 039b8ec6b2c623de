"""
Folder filing for imported records.
"""

import logging

from .collaborators import FolderHandle, ImportContext
from .models import FolderPath

logger = logging.getLogger(__name__)


def translate_category(context: ImportContext, domain: str, raw_category: str) -> str:
    """Category name in the run's language, or the raw text when no translation exists."""
    if not raw_category:
        return ""
    translated = context.localizer.translate_category(domain, raw_category, context.settings.language)
    return translated or raw_category


async def resolve_folder_handle(context: ImportContext, destination_key: str, path: FolderPath) -> FolderHandle:
    """Get (or create) the folder for ``path`` in a destination collection."""
    logger.debug(f"Resolving folder {'/'.join(path.parts())} in {destination_key}")
    return await context.folders.get_folder(destination_key, path.root, path.sub or None)
