"""
Schema sanitizer for parsed ``system`` blocks.

Parsers write whatever the source provides. Before a record is handed to the
catalog, the block is validated against its destination schema; every field
that fails validation is reset to the schema default and reported as a
correction. Sanitizing never fails an import.
"""

from __future__ import annotations

import copy
import logging
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from .schemas import SystemBlock

logger = logging.getLogger(__name__)

_MISSING = object()


class Correction(BaseModel):
    """A single field the sanitizer had to replace."""

    path: str = Field(description="Dotted path of the corrected field")
    original: Any = Field(default=None, description="Value the parser produced")
    replacement: Any = Field(default=None, description="Value written instead")
    reason: str = Field(default="", description="Validation message")


def _get_path(data: Any, loc: tuple) -> Any:
    current = data
    for part in loc:
        if isinstance(current, dict) and part in current:
            current = current[part]
        elif isinstance(current, list) and isinstance(part, int) and 0 <= part < len(current):
            current = current[part]
        else:
            return _MISSING
    return current


def _set_path(data: Any, loc: tuple, value: Any) -> bool:
    parent = _get_path(data, loc[:-1])
    key = loc[-1]
    if isinstance(parent, dict):
        if value is _MISSING:
            parent.pop(key, None)
        else:
            parent[key] = value
        return True
    if isinstance(parent, list) and isinstance(key, int) and 0 <= key < len(parent):
        if value is _MISSING:
            del parent[key]
        else:
            parent[key] = value
        return True
    return False


def sanitize(schema: type[SystemBlock], system: dict[str, Any]) -> tuple[dict[str, Any], list[Correction]]:
    """Validate ``system`` against ``schema``, replacing invalid fields.

    Invalid leaves are reset to the schema default first. If that does not
    make the block valid, the offending top level keys are reset as a whole.

    Args:
        schema: Destination schema class.
        system: System block produced by a parser.

    Returns:
        Tuple of (sanitized_block, corrections).
    """
    defaults = schema().model_dump()
    working = copy.deepcopy(system)
    corrections: list[Correction] = []

    for top_level_only in (False, True):
        try:
            return schema.model_validate(working).model_dump(), corrections
        except ValidationError as e:
            for error in e.errors():
                loc = tuple(error["loc"])
                if not loc:
                    continue
                if top_level_only:
                    loc = loc[:1]
                original = _get_path(working, loc)
                replacement = copy.deepcopy(_get_path(defaults, loc))
                if not _set_path(working, loc, replacement):
                    loc = loc[:1]
                    original = _get_path(working, loc)
                    replacement = copy.deepcopy(_get_path(defaults, loc))
                    _set_path(working, loc, replacement)
                corrections.append(Correction(
                    path=".".join(str(part) for part in loc),
                    original=None if original is _MISSING else original,
                    replacement=None if replacement is _MISSING else replacement,
                    reason=error.get("msg", ""),
                ))

    try:
        return schema.model_validate(working).model_dump(), corrections
    except ValidationError as e:
        logger.warning(f"Could not repair {schema.__name__} block, using defaults: {e}")
        corrections.append(Correction(path="", original=system, replacement=defaults, reason=str(e)))
        return defaults, corrections


def log_corrections(corrections: list[Correction], name: str, parse_type: str) -> None:
    """Log the correction table for one sanitized document."""
    if not corrections:
        return
    logger.warning(
        f"Document sanitized on import: name={name!r} type={parse_type} "
        f"({len(corrections)} correction{'s' if len(corrections) != 1 else ''})"
    )
    for c in corrections:
        logger.warning(f"  {c.path}: {c.original!r} -> {c.replacement!r} ({c.reason})")
