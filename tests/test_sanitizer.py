"""Tests for the schema sanitizer."""

import logging

from chummer_import.sanitizer import log_corrections, sanitize
from chummer_import.schemas import ModificationSystem, QualitySystem, WeaponSystem


class TestSanitize:
    def test_valid_block_has_no_corrections(self):
        system = WeaponSystem().model_dump()
        system["action"]["skill"] = "pistols"

        result, corrections = sanitize(WeaponSystem, system)

        assert corrections == []
        assert result["action"]["skill"] == "pistols"

    def test_invalid_leaf_is_reset_to_default(self):
        system = ModificationSystem().model_dump()
        system["mount_point"] = "underbarrel"
        system["rc"] = 2

        result, corrections = sanitize(ModificationSystem, system)

        assert result["mount_point"] == ""
        assert result["rc"] == 2
        assert [c.path for c in corrections] == ["mount_point"]
        assert corrections[0].original == "underbarrel"
        assert corrections[0].replacement == ""

    def test_nested_invalid_leaf(self):
        system = WeaponSystem().model_dump()
        system["action"]["damage"]["type"]["base"] = "acid"
        system["action"]["damage"]["base"] = 6

        result, corrections = sanitize(WeaponSystem, system)

        assert result["action"]["damage"]["type"]["base"] == "physical"
        assert result["action"]["damage"]["base"] == 6
        assert corrections[0].path == "action.damage.type.base"

    def test_fractional_int_is_corrected(self):
        system = QualitySystem().model_dump()
        system["karma"] = 2.5

        result, corrections = sanitize(QualitySystem, system)

        assert result["karma"] == 0
        assert len(corrections) == 1

    def test_wrong_container_type_is_replaced(self):
        system = WeaponSystem().model_dump()
        system["technology"] = "none"

        result, corrections = sanitize(WeaponSystem, system)

        assert result["technology"]["conceal"]["base"] == 0
        assert corrections

    def test_extra_keys_are_kept(self):
        system = WeaponSystem().model_dump()
        system["importFlags"]["ammoRaw"] = "External Source"

        result, _ = sanitize(WeaponSystem, system)

        assert result["importFlags"]["ammoRaw"] == "External Source"

    def test_input_is_not_mutated(self):
        system = ModificationSystem().model_dump()
        system["mount_point"] = "underbarrel"

        sanitize(ModificationSystem, system)

        assert system["mount_point"] == "underbarrel"


class TestLogCorrections:
    def test_corrections_are_logged(self, caplog):
        system = ModificationSystem().model_dump()
        system["mount_point"] = "underbarrel"
        _, corrections = sanitize(ModificationSystem, system)

        with caplog.at_level(logging.WARNING, logger="chummer_import.sanitizer"):
            log_corrections(corrections, "Bipod", "modification")

        assert "Bipod" in caplog.text
        assert "mount_point" in caplog.text

    def test_nothing_logged_without_corrections(self, caplog):
        with caplog.at_level(logging.WARNING, logger="chummer_import.sanitizer"):
            log_corrections([], "Bipod", "modification")
        assert caplog.text == ""
