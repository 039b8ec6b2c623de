"""Tests for import settings loading."""

import pytest

from chummer_import import settings as settings_module
from chummer_import.settings import ImportSettings, load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Isolate from the developer's environment and any .env file."""
    for name in (settings_module.ENV_OVERRIDE, settings_module.ENV_ICON_SET, settings_module.ENV_LANGUAGE):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(settings_module, "load_dotenv", lambda: False)


class TestImportSettings:
    def test_defaults(self):
        settings = ImportSettings()
        assert settings.override_documents is True
        assert settings.icon_set is None
        assert settings.language == "en"


class TestLoadSettings:
    def test_defaults_without_environment(self):
        assert load_settings() == ImportSettings()

    @pytest.mark.parametrize("value, expected", [
        ("false", False),
        ("0", False),
        ("no", False),
        ("true", True),
        ("YES", True),
        ("", True),
    ])
    def test_override_flag(self, monkeypatch, value, expected):
        monkeypatch.setenv("CHUMMER_IMPORT_OVERRIDE", value)
        assert load_settings().override_documents is expected

    def test_icon_set(self, monkeypatch):
        monkeypatch.setenv("CHUMMER_IMPORT_ICON_SET", "icons/a.svg, icons/b.svg,,")
        assert load_settings().icon_set == ["icons/a.svg", "icons/b.svg"]

    def test_blank_icon_set(self, monkeypatch):
        monkeypatch.setenv("CHUMMER_IMPORT_ICON_SET", " ")
        assert load_settings().icon_set is None

    def test_language(self, monkeypatch):
        monkeypatch.setenv("CHUMMER_IMPORT_LANGUAGE", "de")
        assert load_settings().language == "de"

    def test_dotenv_is_read(self, monkeypatch):
        calls = []

        def fake_load_dotenv():
            calls.append(True)
            return True

        monkeypatch.setattr(settings_module, "load_dotenv", fake_load_dotenv)
        load_settings()
        assert calls == [True]
