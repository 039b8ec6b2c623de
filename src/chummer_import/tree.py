"""
Normalized view of parsed Chummer data trees.

Chummer exports come in two generations. Legacy files write most values as
bare element text (``<avail>4R</avail>``) while current files go through the
same XML parser but with attributes and nested children, so a single field may
arrive as a plain string, a ``{"_TEXT": ...}`` wrapper, a nested object or a
list of siblings. ``normalize`` turns any of those raw shapes into one of a
small, closed set of node variants, and the ``read_*`` accessors give every
parser the same lenient view of them.

Raw trees follow the xml2js conventions used by the data files:

- ``_TEXT`` holds element text
- ``$`` holds attributes
- ``None`` marks an element that exists but is empty
- lists only appear when more than one sibling shares a tag
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Iterator, Union

TEXT_KEY = "_TEXT"
ATTR_KEY = "$"

# Values the data files use for "no value" in numeric columns
BLANK_MARKERS = frozenset({"", "-", "—"})


@dataclass(frozen=True)
class Absent:
    """A field that does not exist on the source element."""

    def get(self, name: str) -> "SourceNode":
        return ABSENT

    def __bool__(self) -> bool:
        return False


@dataclass(frozen=True)
class Empty:
    """An element that exists but carries neither text nor children."""

    def get(self, name: str) -> "SourceNode":
        return ABSENT

    def __bool__(self) -> bool:
        return False


@dataclass(frozen=True)
class Scalar:
    """Bare text or number."""

    value: str | int | float | bool

    def get(self, name: str) -> "SourceNode":
        return ABSENT


@dataclass(frozen=True)
class WrappedText:
    """Element text with optional attributes and no child elements."""

    text: str
    attrs: dict[str, str] = field(default_factory=dict)

    def get(self, name: str) -> "SourceNode":
        return ABSENT


@dataclass(frozen=True)
class Record:
    """Element with child fields."""

    fields: dict[str, "SourceNode"] = field(default_factory=dict)
    text: str = ""
    attrs: dict[str, str] = field(default_factory=dict)

    def get(self, name: str) -> "SourceNode":
        return self.fields.get(name, ABSENT)

    def __contains__(self, name: object) -> bool:
        return name in self.fields

    def keys(self) -> Iterator[str]:
        return iter(self.fields)


@dataclass(frozen=True)
class Sequence:
    """Repeated sibling elements sharing one tag, in document order."""

    items: tuple["SourceNode", ...] = ()

    def get(self, name: str) -> "SourceNode":
        return ABSENT

    def __iter__(self) -> Iterator["SourceNode"]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


SourceNode = Union[Absent, Empty, Scalar, WrappedText, Record, Sequence]

ABSENT = Absent()
EMPTY = Empty()


def normalize(raw: Any) -> SourceNode:
    """Convert a raw parsed tree into a ``SourceNode``.

    Args:
        raw: Output of an xml2js-style parser: dicts, lists, strings,
            numbers or ``None``. Already normalized nodes pass through.

    Returns:
        The equivalent node variant. Never raises for plain data.
    """
    if isinstance(raw, (Absent, Empty, Scalar, WrappedText, Record, Sequence)):
        return raw
    if raw is None:
        return EMPTY
    if isinstance(raw, (str, int, float, bool)):
        return Scalar(raw)
    if isinstance(raw, (list, tuple)):
        return Sequence(tuple(normalize(item) for item in raw))
    if isinstance(raw, dict):
        text = raw.get(TEXT_KEY)
        text = "" if text is None else str(text)
        attrs = _normalize_attrs(raw.get(ATTR_KEY))
        children = {
            str(key): normalize(value)
            for key, value in raw.items()
            if key not in (TEXT_KEY, ATTR_KEY)
        }
        if not children:
            if not text and not attrs:
                return EMPTY
            return WrappedText(text=text, attrs=attrs)
        return Record(fields=children, text=text, attrs=attrs)
    return Scalar(str(raw))


def _normalize_attrs(raw: Any) -> dict[str, str]:
    if not isinstance(raw, dict):
        return {}
    return {str(k): "" if v is None else str(v) for k, v in raw.items()}


def text_of(node: SourceNode, fallback: str = "") -> str:
    """Text content of a node itself, whatever its shape."""
    if isinstance(node, Scalar):
        if isinstance(node.value, bool):
            return "true" if node.value else "false"
        return str(node.value)
    if isinstance(node, WrappedText):
        return node.text
    if isinstance(node, Record):
        return node.text or fallback
    if isinstance(node, Sequence):
        return text_of(node.items[0], fallback) if node.items else fallback
    return fallback


def read_text(node: SourceNode, name: str, fallback: str = "") -> str:
    """Read a field as text, ``fallback`` when missing or empty."""
    value = text_of(node.get(name), fallback)
    return value if value != "" else fallback


def parse_number(text: str, fallback: int | float = 0) -> int | float:
    """Parse numeric text leniently; integral values come back as ``int``."""
    stripped = (text or "").strip()
    if stripped in BLANK_MARKERS:
        return fallback
    try:
        number = float(stripped)
    except ValueError:
        return fallback
    if math.isnan(number) or math.isinf(number):
        return fallback
    return int(number) if number.is_integer() else number


def read_number(node: SourceNode, name: str, fallback: int | float = 0) -> int | float:
    """Read a field as a number, ``fallback`` when missing or non-numeric."""
    child = node.get(name)
    if isinstance(child, Scalar) and isinstance(child.value, (int, float)) and not isinstance(child.value, bool):
        return parse_number(str(child.value), fallback)
    return parse_number(text_of(child, ""), fallback)


def read_bool(node: SourceNode, name: str, fallback: bool = False) -> bool:
    """Read a field as a flag: ``true``, ``1`` and ``yes`` are truthy."""
    value = text_of(node.get(name), "").strip().lower()
    if not value:
        return fallback
    return value in ("true", "1", "yes")


def read_list(node: SourceNode, name: str) -> list[SourceNode]:
    """Read a repeated child as a list.

    A single child is promoted to a one element list, so a file with one
    ``<accessory>`` reads the same as a file with several.
    """
    return as_list(node.get(name))


def as_list(node: SourceNode) -> list[SourceNode]:
    if isinstance(node, Sequence):
        return [item for item in node.items if not isinstance(item, (Absent, Empty))]
    if isinstance(node, (Absent, Empty)):
        return []
    return [node]


def has_value(node: SourceNode, name: str) -> bool:
    """True when the field exists and is not an empty element."""
    return not isinstance(node.get(name), (Absent, Empty))


__all__ = [
    "ABSENT",
    "EMPTY",
    "Absent",
    "Empty",
    "Scalar",
    "WrappedText",
    "Record",
    "Sequence",
    "SourceNode",
    "normalize",
    "text_of",
    "read_text",
    "read_number",
    "read_bool",
    "read_list",
    "as_list",
    "has_value",
    "parse_number",
]
