"""
Result models for the batch import system.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from ..models import ParsedRecord


class ItemStatus(str, Enum):
    """Outcome of one source element in a batch."""
    CREATED = "created"
    SKIPPED_EXISTING = "skipped_existing"
    FILTERED = "filtered"
    FAILED = "failed"


class ItemResult(BaseModel):
    """What happened to one source element."""

    name: str = Field(description="Display name of the element")
    status: ItemStatus = Field(description="Outcome of the element")
    destination_key: str | None = Field(default=None, description="Destination collection key")
    identity: str | None = Field(default=None, description="Identity assigned to the element")
    record: ParsedRecord | None = Field(default=None, description="Parsed record, set when created")
    error: str | None = Field(default=None, description="Failure message, set when failed")


class ImportReport(BaseModel):
    """Summary of one batch with per item results and warnings."""

    document_type: str = Field(description="Kind of document imported, e.g. 'Weapon Accessory'")
    items: list[ItemResult] = Field(default_factory=list, description="Per element results in source order")
    warnings: list[str] = Field(
        default_factory=list,
        description="User visible warnings raised during the batch",
    )

    def _count(self, status: ItemStatus) -> int:
        return sum(1 for item in self.items if item.status is status)

    @property
    def considered(self) -> int:
        return len(self.items)

    @property
    def filtered(self) -> int:
        return self._count(ItemStatus.FILTERED)

    @property
    def created(self) -> int:
        return self._count(ItemStatus.CREATED)

    @property
    def skipped_existing(self) -> int:
        return self._count(ItemStatus.SKIPPED_EXISTING)

    @property
    def failed(self) -> int:
        return self._count(ItemStatus.FAILED)

    @property
    def status(self) -> str:
        """``success``, ``success_with_warnings`` or ``failed``."""
        if self.failed and not (self.created or self.skipped_existing):
            return "failed"
        if self.failed or self.warnings:
            return "success_with_warnings"
        return "success"

    def summary_line(self) -> str:
        return (
            f"{self.document_type}: {self.created} created, "
            f"{self.skipped_existing} skipped, {self.failed} failed"
        )

    def format(self) -> str:
        """Format the report as a readable text block.

        Returns:
            Multi-line string with counts, failures and warnings.
        """
        lines: list[str] = []

        lines.append(f"Import Report - {self.document_type}")
        lines.append(f"Status: {self.status.upper().replace('_', ' ')}")
        lines.append(
            f"Considered: {self.considered}, filtered: {self.filtered}, "
            f"created: {self.created}, skipped (existing): {self.skipped_existing}, "
            f"failed: {self.failed}"
        )
        lines.append("")

        failures = [item for item in self.items if item.status is ItemStatus.FAILED]
        if failures:
            lines.append(f"Failed ({len(failures)}):")
            for item in failures:
                lines.append(f"  - {item.name}: {item.error}")
            lines.append("")

        if self.warnings:
            lines.append(f"Warnings ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  - {w}")
            lines.append("")

        return "\n".join(lines).rstrip()
