"""
Stable document identities for imported records.

Re-importing the same data must produce the same ids so existing catalog
entries are found instead of duplicated. Chummer GUIDs are used when the
element carries one; legacy files often do not, in which case the id is a
hash of name, source book and page.
"""

import hashlib
import re

from .tree import SourceNode, read_text

IDENTITY_LENGTH = 32
FALLBACK_DELIMITER = "|"
UNKNOWN_NAME = "Unknown"

_GUID_SEPARATORS_RE = re.compile(r"[^0-9a-zA-Z]")


def guid_to_id(guid: str) -> str:
    """Strip braces and dashes from a GUID: ``{A1B2-...}`` → ``a1b2...``."""
    return _GUID_SEPARATORS_RE.sub("", guid).lower()


def stable_string_to_id(key: str) -> str:
    """Deterministic id for an arbitrary string (SHA-256 prefix)."""
    return hashlib.sha256(key.encode("utf-8")).hexdigest()[:IDENTITY_LENGTH]


def fallback_key(node: SourceNode) -> str:
    """Composite ``name|source|page`` key for elements without a GUID."""
    return FALLBACK_DELIMITER.join([
        read_text(node, "name", UNKNOWN_NAME),
        read_text(node, "source", ""),
        read_text(node, "page", ""),
    ])


def assign_identity(node: SourceNode) -> str:
    """Derive the identity of a source element.

    The element's ``id`` (a Chummer GUID) wins whenever present; otherwise
    the fallback key is hashed.
    """
    guid = guid_to_id(read_text(node, "id", ""))
    if guid:
        return guid
    return stable_string_to_id(fallback_key(node))
