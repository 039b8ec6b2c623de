"""Tests for batch import reports."""

from chummer_import.importers import ImportReport, ItemResult, ItemStatus


def make_report(*statuses: ItemStatus, warnings: list[str] | None = None) -> ImportReport:
    items = [
        ItemResult(
            name=f"Item {i}",
            status=status,
            error="boom" if status is ItemStatus.FAILED else None,
        )
        for i, status in enumerate(statuses)
    ]
    return ImportReport(document_type="Weapon", items=items, warnings=warnings or [])


class TestCounts:
    def test_counts(self):
        report = make_report(
            ItemStatus.CREATED,
            ItemStatus.CREATED,
            ItemStatus.FILTERED,
            ItemStatus.SKIPPED_EXISTING,
            ItemStatus.FAILED,
        )
        assert report.considered == 5
        assert report.created == 2
        assert report.filtered == 1
        assert report.skipped_existing == 1
        assert report.failed == 1

    def test_summary_line(self):
        report = make_report(ItemStatus.CREATED, ItemStatus.SKIPPED_EXISTING)
        assert report.summary_line() == "Weapon: 1 created, 1 skipped, 0 failed"


class TestStatus:
    def test_success(self):
        assert make_report(ItemStatus.CREATED).status == "success"

    def test_empty_is_success(self):
        assert make_report().status == "success"

    def test_warnings_only(self):
        report = make_report(ItemStatus.CREATED, warnings=["accessory missing"])
        assert report.status == "success_with_warnings"

    def test_partial_failure(self):
        assert make_report(ItemStatus.CREATED, ItemStatus.FAILED).status == "success_with_warnings"

    def test_skipped_and_failed(self):
        assert make_report(ItemStatus.SKIPPED_EXISTING, ItemStatus.FAILED).status == "success_with_warnings"

    def test_everything_failed(self):
        assert make_report(ItemStatus.FAILED, ItemStatus.FILTERED).status == "failed"


class TestFormat:
    def test_clean_report(self):
        text = make_report(ItemStatus.CREATED).format()

        assert text.startswith("Import Report - Weapon")
        assert "Status: SUCCESS" in text
        assert "created: 1" in text
        assert "Failed" not in text
        assert "Warnings" not in text

    def test_failures_and_warnings_listed(self):
        report = make_report(ItemStatus.CREATED, ItemStatus.FAILED, warnings=["Failed parsing Weapon: Item 1"])
        text = report.format()

        assert "Status: SUCCESS WITH WARNINGS" in text
        assert "Failed (1):" in text
        assert "  - Item 1: boom" in text
        assert "Warnings (1):" in text
        assert "  - Failed parsing Weapon: Item 1" in text
        assert not text.endswith("\n")
