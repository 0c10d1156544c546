# tests/unit/test_main.py

"""Tests for the command line entry point."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from modfilters import main as main_module
from modfilters.config import config
from modfilters.main import main


@pytest.fixture(autouse=True)
def _quiet_cli(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keeps CLI runs from attaching handlers and pins the UI language."""
    monkeypatch.setattr(main_module, "setup_logging", lambda *args, **kwargs: None)
    monkeypatch.setattr(config, "UI_LANGUAGE", "en")
    monkeypatch.setattr(config, "DEFAULT_LOCALE", "en")
    monkeypatch.setattr(config, "CATALOG_FILE", None)


@pytest.fixture
def catalog_file(tmp_path: Path) -> Path:
    path = tmp_path / "catalog.json"
    entries = [
        {"module_id": "wires", "name": "Wires", "origin": "VANILLA"},
        {"module_id": "knob", "name": "The Knob", "type": "NEEDY", "origin": "VANILLA"},
        {"module_id": "forget", "name": "Forget Me Not", "quirks": ["SOLVES_AT_END"]},
    ]
    path.write_text(json.dumps(entries), encoding="utf-8")
    return path


def _state_file(tmp_path: Path, state: dict) -> Path:
    path = tmp_path / "state.json"
    path.write_text(json.dumps(state), encoding="utf-8")
    return path


class TestUsage:
    """Tests for argument dispatch."""

    def test_no_arguments(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([]) == 1
        assert "Usage:" in capsys.readouterr().out

    def test_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--help"]) == 0
        assert "Usage:" in capsys.readouterr().out

    def test_unknown_command(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["frobnicate"]) == 1
        assert "Unknown command: frobnicate" in capsys.readouterr().out


class TestDescriptorsCommand:
    """Tests for ``descriptors``."""

    def test_prints_descriptor_array(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["descriptors"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("[{")
        assert '"id":"quirks"' in out
        assert "mod => mod.quirks" in out


class TestHtmlCommand:
    """Tests for ``html``."""

    def test_primary_default(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["html"]) == 0
        out = capsys.readouterr().out
        assert 'id="filter-defdiff"' in out
        assert 'id="filter-quirks-INSTANT_DEATH-y"' not in out

    def test_secondary_in_german(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["html", "--group", "secondary", "--lang", "de"]) == 0
        out = capsys.readouterr().out
        assert 'id="filter-quirks-INSTANT_DEATH-y"' in out
        assert "Besonderheiten" in out

    def test_configured_locale_is_default(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr(config, "DEFAULT_LOCALE", "de")
        assert main(["html"]) == 0
        assert "Entschärfer-Schwierigkeit" in capsys.readouterr().out

    def test_unknown_language(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["html", "--lang", "klingon"]) == 1
        assert "Unknown language: klingon" in capsys.readouterr().out

    def test_unknown_group(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["html", "--group", "tertiary"]) == 1
        assert "tertiary" in capsys.readouterr().out


class TestMatchCommand:
    """Tests for ``match``."""

    def test_prints_matching_names(
        self, tmp_path: Path, catalog_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        state = _state_file(tmp_path, {"origin": {"VANILLA": True}, "type": {"REGULAR": True}})
        assert main(["match", str(catalog_file), str(state)]) == 0
        assert capsys.readouterr().out.splitlines() == ["Wires"]

    def test_catalog_from_config(
        self,
        tmp_path: Path,
        catalog_file: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr(config, "CATALOG_FILE", catalog_file)
        state = _state_file(tmp_path, {"quirks": {"SOLVES_AT_END": "y"}})
        assert main(["match", str(state)]) == 0
        assert capsys.readouterr().out.splitlines() == ["Forget Me Not"]

    def test_invalid_state_keeps_everything(
        self, tmp_path: Path, catalog_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        state = tmp_path / "state.json"
        state.write_text("not json", encoding="utf-8")
        assert main(["match", str(catalog_file), str(state)]) == 0
        assert len(capsys.readouterr().out.splitlines()) == 3

    def test_missing_state_file(self, tmp_path: Path, catalog_file: Path) -> None:
        assert main(["match", str(catalog_file), str(tmp_path / "missing.json")]) == 1

    def test_missing_arguments(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["match"]) == 1
        assert "Usage:" in capsys.readouterr().out
