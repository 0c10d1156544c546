# tests/unit/test_utils/test_json_utils.py

"""Tests for JSON helpers."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from modfilters.utils.json_utils import RawJs, dumps_js, load_json


class TestDumpsJs:
    """Tests for dumps_js()."""

    def test_raw_fragment_unquoted(self) -> None:
        assert dumps_js({"fnc": RawJs("m => m.x")}) == '{"fnc":m => m.x}'

    def test_plain_values_are_json(self) -> None:
        value = {"id": "a\"b", "values": ["X", "Y"], "n": 1, "ok": True, "none": None}
        assert json.loads(dumps_js(value)) == value

    def test_tuple_as_array(self) -> None:
        assert dumps_js(("a", 1)) == '["a",1]'

    def test_non_ascii_kept(self) -> None:
        assert dumps_js("Entschärfer") == '"Entschärfer"'

    def test_unserializable(self) -> None:
        with pytest.raises(TypeError):
            dumps_js({"x": object()})

    def test_raw_is_str(self) -> None:
        raw = RawJs("m => 1")
        assert raw == "m => 1"
        assert repr(raw) == "RawJs('m => 1')"


class TestLoadJson:
    """Tests for load_json()."""

    def test_missing_file_default(self, tmp_path: Path) -> None:
        assert load_json(tmp_path / "nope.json") == {}
        assert load_json(tmp_path / "nope.json", default=[]) == []

    def test_invalid_json_default(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{", encoding="utf-8")
        assert load_json(path, default=[]) == []

    def test_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / "ok.json"
        path.write_text('{"a": 1}', encoding="utf-8")
        assert load_json(path) == {"a": 1}
