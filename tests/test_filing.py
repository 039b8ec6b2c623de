"""Tests for folder filing and the import context."""

import logging

import pytest

from chummer_import.collaborators import ImportContext, LoggingProgress
from chummer_import.filing import resolve_folder_handle, translate_category
from chummer_import.models import FolderPath
from chummer_import.parsers import WeaponParser
from chummer_import.settings import ImportSettings
from chummer_import.tree import normalize

from conftest import FakeLocalizer


class TestTranslateCategory:
    def test_translated(self, context):
        assert translate_category(context, "weapons", "Heavy Pistols") == "Schwere Pistolen"

    def test_untranslated_falls_back_to_raw(self, context):
        assert translate_category(context, "weapons", "Blades") == "Blades"

    def test_empty_translation_falls_back_to_raw(self, context):
        context.localizer = FakeLocalizer({("weapons", "Blades"): ""})
        assert translate_category(context, "weapons", "Blades") == "Blades"

    def test_empty_category(self, context):
        assert translate_category(context, "weapons", "") == ""

    def test_default_language_is_passed(self, context, localizer):
        translate_category(context, "weapons", "Blades")
        assert localizer.languages == ["en"]

    def test_configured_language_is_used(self, context):
        context.settings = ImportSettings(language="de")
        context.localizer = FakeLocalizer(by_language={
            ("de", "weapons", "Blades"): "Klingenwaffen",
            ("fr", "weapons", "Blades"): "Lames",
        })

        assert translate_category(context, "weapons", "Blades") == "Klingenwaffen"
        assert context.localizer.languages == ["de"]

    @pytest.mark.asyncio
    async def test_parsers_file_under_configured_language(self, context):
        context.settings = ImportSettings(language="fr")
        context.localizer = FakeLocalizer(by_language={("fr", "weapons", "Blades"): "Lames"})

        record = await WeaponParser(context).parse(normalize({"name": "Knife", "type": "Melee", "category": "Blades"}), "Weapon")

        assert record.folder == "Weapon/Melee/Lames"


class TestResolveFolderHandle:
    @pytest.mark.asyncio
    async def test_root_and_sub(self, context, folders):
        handle = await resolve_folder_handle(context, "Weapon", FolderPath(root="Melee", sub="Blades"))
        assert handle.id == "Weapon/Melee/Blades"
        assert folders.calls == [("Weapon", "Melee", "Blades")]

    @pytest.mark.asyncio
    async def test_root_only(self, context, folders):
        handle = await resolve_folder_handle(context, "Weapon", FolderPath(root="Thrown"))
        assert handle.id == "Weapon/Thrown"
        assert folders.calls == [("Weapon", "Thrown", None)]


class TestFolderPath:
    def test_parts(self):
        assert FolderPath(root="Quality", sub="Negative").parts() == ["Quality", "Negative"]
        assert FolderPath(root="Quality").parts() == ["Quality"]


class TestImportContext:
    def test_identity_map(self, context):
        context.remember("Weapon", "Knife", "abc")
        assert context.identity_of("Weapon", "Knife") == "abc"
        assert context.identity_of("Weapon", "Sword") is None
        assert context.identity_of("Quality", "Knife") is None

    def test_default_progress_logs_warnings(self, catalog, folders, caplog):
        context = ImportContext(catalog=catalog, folders=folders, lookup=catalog, localizer=FakeLocalizer())
        assert isinstance(context.progress, LoggingProgress)

        with caplog.at_level(logging.WARNING, logger="chummer_import.collaborators"):
            context.warn("accessory missing")

        assert context.warnings == ["accessory missing"]
        assert "accessory missing" in caplog.text
