# tests/unit/test_core/test_module.py

"""Tests for the KtaneModule dataclass and catalog loading."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from modfilters.core.attributes import (
    BossStatus,
    Difficulty,
    ModuleOrigin,
    ModuleType,
    MysteryModuleStatus,
    Quirks,
    RuleSeedSupport,
)
from modfilters.core.module import KtaneModule, load_catalog


class TestFromDict:
    """Tests for KtaneModule.from_dict()."""

    def test_full_entry(self) -> None:
        module = KtaneModule.from_dict(
            {
                "module_id": "ForgetMeNot",
                "name": "Forget Me Not",
                "type": "REGULAR",
                "origin": "MODS",
                "defuser_difficulty": "HARD",
                "expert_difficulty": "MEDIUM",
                "twitch_plays_score": 10,
                "rule_seed_support": "SUPPORTED",
                "mystery_module": "MUST_NOT_BE_HIDDEN",
                "boss_status": "FULL_BOSS",
                "quirks": ["SOLVES_AT_END", "NEEDS_OTHER_SOLVES"],
                "published": "2017-04-02",
            }
        )
        assert module.defuser_difficulty is Difficulty.HARD
        assert module.expert_difficulty is Difficulty.MEDIUM
        assert module.twitch_plays_score == 10.0
        assert module.rule_seed_support is RuleSeedSupport.SUPPORTED
        assert module.mystery_module is MysteryModuleStatus.MUST_NOT_BE_HIDDEN
        assert module.boss_status is BossStatus.FULL_BOSS
        assert module.quirks == Quirks.SOLVES_AT_END | Quirks.NEEDS_OTHER_SOLVES
        assert module.published == "2017-04-02"

    def test_defaults(self) -> None:
        module = KtaneModule.from_dict({"module_id": "x", "name": "X"})
        assert module.type is ModuleType.REGULAR
        assert module.origin is ModuleOrigin.MODS
        assert module.defuser_difficulty is None
        assert module.souvenir_status is None
        assert module.twitch_plays_score is None
        assert module.quirks == Quirks.NONE

    def test_quirks_as_string(self) -> None:
        module = KtaneModule.from_dict({"module_id": "x", "name": "X", "quirks": "PSEUDO_NEEDY, TIME_DEPENDENT"})
        assert module.quirks == Quirks.PSEUDO_NEEDY | Quirks.TIME_DEPENDENT

    def test_quirks_as_bitmask(self) -> None:
        module = KtaneModule.from_dict({"module_id": "x", "name": "X", "quirks": 5})
        assert module.quirks == Quirks.SOLVES_LATER | Quirks.SOLVES_BEFORE_SOME

    def test_unknown_quirk_bits_dropped(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="modfilters.module"):
            module = KtaneModule.from_dict({"module_id": "x", "name": "X", "quirks": 1024 | 8})
        assert module.quirks == Quirks.SOLVES_AT_END
        assert "0x400" in caplog.text

    def test_boolean_quirks_ignored(self) -> None:
        module = KtaneModule.from_dict({"module_id": "x", "name": "X", "quirks": True})
        assert module.quirks == Quirks.NONE

    def test_unknown_enum_name_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="modfilters.module"):
            module = KtaneModule.from_dict({"module_id": "x", "name": "X", "defuser_difficulty": "Impossible"})
        assert module.defuser_difficulty is None
        assert "Impossible" in caplog.text

    def test_missing_name_raises(self) -> None:
        with pytest.raises(KeyError):
            KtaneModule.from_dict({"module_id": "x"})


class TestLoadCatalog:
    """Tests for load_catalog()."""

    def test_list_file(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps([{"module_id": "a", "name": "A"}, {"module_id": "b", "name": "B"}]))
        assert [m.name for m in load_catalog(path)] == ["A", "B"]

    def test_object_file(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps({"modules": [{"module_id": "a", "name": "A"}]}))
        assert [m.module_id for m in load_catalog(path)] == ["a"]

    def test_malformed_entries_skipped(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps([{"module_id": "a"}, "junk", {"module_id": "b", "name": "B"}]))
        assert [m.name for m in load_catalog(path)] == ["B"]

    def test_bitmask_quirks_entry_kept(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps([{"module_id": "a", "name": "A", "quirks": 5}, {"module_id": "b", "name": "B"}]))
        modules = load_catalog(path)
        assert [m.name for m in modules] == ["A", "B"]
        assert modules[0].quirks == Quirks(5)

    def test_missing_file(self, tmp_path: Path) -> None:
        assert load_catalog(tmp_path / "nope.json") == []

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.json"
        path.write_text("{not json")
        assert load_catalog(path) == []
