"""
Batch import driver.

Processes source elements strictly in order, one at a time: later elements
may rely on identities recorded for earlier ones. A broken element never
stops the batch; it is logged, reported as one warning and counted as
failed. Records are only written at the end, with one bulk create per
destination collection.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from ..collaborators import Collection, ImportContext
from ..errors import CatalogUnavailableError
from ..identity import UNKNOWN_NAME, assign_identity
from ..models import ParsedRecord
from ..parsers import Parser, record_name
from ..tree import SourceNode, normalize, read_text
from .base import ImportReport, ItemResult, ItemStatus

logger = logging.getLogger(__name__)


@dataclass
class BatchConfig:
    """How to import one list of source elements."""

    document_type: str
    destination_key: Callable[[SourceNode], str]
    parser: Parser
    filter: Callable[[SourceNode], bool] | None = None
    post_parse: Callable[[ParsedRecord], None] | None = None


def display_name(node: SourceNode) -> str:
    return record_name(node)


async def _collection_for(
    key: str, collections: dict[str, Collection], context: ImportContext
) -> Collection:
    """Resolve a destination collection once per key and batch."""
    if key not in collections:
        try:
            collections[key] = await context.catalog.get_collection(key)
        except CatalogUnavailableError:
            raise
        except Exception as e:
            raise CatalogUnavailableError(f"Cannot resolve destination collection '{key}': {e}") from e
    return collections[key]


def _apply_filter(node: SourceNode, config: BatchConfig) -> bool:
    if config.filter is None:
        return True
    try:
        return bool(config.filter(node))
    except Exception as e:
        logger.error(f"Filter failed for {config.document_type} '{display_name(node)}', excluding it: {e}\nData: {node!r}")
        return False


async def _import_item(
    node: SourceNode,
    config: BatchConfig,
    context: ImportContext,
    collections: dict[str, Collection],
    created: dict[str, set[str]],
    position: int,
    total: int,
) -> ItemResult:
    name = UNKNOWN_NAME
    try:
        name = display_name(node)
        context.progress.update(position / total, f"{config.document_type} ({position}/{total}) Parsing: {name}")

        identity = assign_identity(node)
        key = config.destination_key(node)
        collection = await _collection_for(key, collections, context)
        source_name = read_text(node, "name", UNKNOWN_NAME)

        # Earlier items of this batch are not persisted yet, so check them too
        exists = collection.has(identity) or identity in created.get(key, set())
        if not context.settings.override_documents and exists:
            context.remember(key, source_name, identity)
            return ItemResult(name=name, status=ItemStatus.SKIPPED_EXISTING, destination_key=key, identity=identity)

        record = await config.parser.parse(node, key)
        if config.post_parse is not None:
            config.post_parse(record)

        record.id = identity
        created.setdefault(key, set()).add(identity)
        context.remember(key, source_name, identity)
        return ItemResult(
            name=name, status=ItemStatus.CREATED, destination_key=key, identity=identity, record=record
        )
    except CatalogUnavailableError:
        raise
    except Exception as e:
        logger.error(f"Failed parsing {config.document_type} '{name}': {e}\nData: {node!r}", exc_info=True)
        context.warn(f"Failed parsing {config.document_type}: {name}")
        return ItemResult(name=name, status=ItemStatus.FAILED, error=str(e) or type(e).__name__)


async def import_batch(items: Iterable[Any], config: BatchConfig, context: ImportContext) -> ImportReport:
    """Import a list of source elements into their destination collections.

    Args:
        items: Raw or normalized source elements, in source order.
        config: Batch configuration (parser, destination, filter, hook).
        context: Collaborators, settings and the shared identity map.

    Returns:
        ImportReport with one ItemResult per element.

    Raises:
        CatalogUnavailableError: If a destination collection cannot be resolved.
    """
    warnings_start = len(context.warnings)
    nodes = [normalize(item) for item in items]
    selected = [_apply_filter(node, config) for node in nodes]

    results: list[ItemResult] = []
    collections: dict[str, Collection] = {}
    created: dict[str, set[str]] = {}
    groups: dict[str, list[ParsedRecord]] = {}
    total = sum(selected)
    position = 0

    for node, keep in zip(nodes, selected):
        if not keep:
            results.append(ItemResult(name=display_name(node), status=ItemStatus.FILTERED))
            continue
        position += 1
        result = await _import_item(node, config, context, collections, created, position, total)
        results.append(result)
        if result.status is ItemStatus.CREATED and result.record is not None:
            groups.setdefault(result.destination_key, []).append(result.record)

    for key, records in groups.items():
        logger.info(f"{config.document_type}: creating {len(records)} documents in {key}")
        await collections[key].bulk_create(records, key)

    report = ImportReport(
        document_type=config.document_type,
        items=results,
        warnings=context.warnings[warnings_start:],
    )
    context.progress.summary(report.summary_line())
    return report
