"""
XML source parsing.

Turns a Chummer data file into the raw xml2js-style tree that
``tree.normalize`` understands:

- text is trimmed and stored under ``_TEXT``
- attributes are stored under ``$``
- empty elements become ``None`` instead of disappearing
- a list is only produced when several siblings share a tag
- the root element is not wrapped
"""

from __future__ import annotations

from typing import Any

from lxml import etree

from .errors import MarkupError
from .tree import ATTR_KEY, TEXT_KEY, SourceNode, normalize


def _make_parser() -> etree.XMLParser:
    return etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        load_dtd=False,
        huge_tree=False,
        remove_comments=True,
        remove_pis=True,
    )


def _local_name(element: etree._Element) -> str:
    return etree.QName(element).localname


def element_to_raw(element: etree._Element) -> Any:
    """Convert one element (recursively) into xml2js-style data."""
    raw: dict[str, Any] = {}

    if element.attrib:
        raw[ATTR_KEY] = {etree.QName(k).localname: v for k, v in element.attrib.items()}

    text = (element.text or "").strip()
    if text:
        raw[TEXT_KEY] = text

    for child in element:
        if not isinstance(child.tag, str):
            continue
        tag = _local_name(child)
        value = element_to_raw(child)
        if tag in raw:
            existing = raw[tag]
            if isinstance(existing, list):
                existing.append(value)
            else:
                raw[tag] = [existing, value]
        else:
            raw[tag] = value

    return raw or None


def parse_markup(text: str | bytes) -> Any:
    """Parse XML text into a raw xml2js-style tree (root not wrapped)."""
    data = text.encode("utf-8") if isinstance(text, str) else text
    try:
        root = etree.fromstring(data, parser=_make_parser())
    except etree.XMLSyntaxError as e:
        raise MarkupError(f"Invalid XML document: {e}") from e
    return element_to_raw(root)


def parse_markup_to_tree(text: str | bytes) -> SourceNode:
    """Parse XML text straight into a normalized ``SourceNode``."""
    return normalize(parse_markup(text))
