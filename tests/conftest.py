# tests/conftest.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from modfilters.core.attributes import Difficulty, ModuleOrigin, ModuleType, Quirks
from modfilters.core.module import KtaneModule
from modfilters.services.filter_registry import FilterRegistry, build_default_registry
from modfilters.utils.i18n import I18n, get_i18n


def make_module(module_id: str = "wires", name: str = "Wires", **kwargs: Any) -> KtaneModule:
    """Helper to create a KtaneModule with sensible defaults."""
    return KtaneModule(module_id=module_id, name=name, **kwargs)


@pytest.fixture
def i18n_en() -> I18n:
    """The bundled English localization context."""
    return get_i18n("en")


@pytest.fixture
def i18n_de() -> I18n:
    """The bundled German localization context."""
    return get_i18n("de")


@pytest.fixture
def registry() -> FilterRegistry:
    """The repository page's default filter registry."""
    return build_default_registry()


@pytest.fixture
def sample_modules() -> list[KtaneModule]:
    """A small, varied catalog for evaluation tests."""
    return [
        make_module(
            "wires",
            "Wires",
            origin=ModuleOrigin.VANILLA,
            defuser_difficulty=Difficulty.VERY_EASY,
            expert_difficulty=Difficulty.EASY,
            twitch_plays_score=1.0,
        ),
        make_module(
            "venn",
            "Complicated Wires",
            origin=ModuleOrigin.VANILLA,
            defuser_difficulty=Difficulty.MEDIUM,
            expert_difficulty=Difficulty.HARD,
        ),
        make_module(
            "forget",
            "Forget Me Not",
            defuser_difficulty=Difficulty.HARD,
            expert_difficulty=Difficulty.MEDIUM,
            quirks=Quirks.SOLVES_AT_END | Quirks.NEEDS_OTHER_SOLVES,
        ),
        make_module("knob", "The Knob", type=ModuleType.NEEDY, quirks=Quirks.TIME_DEPENDENT),
        make_module("serial", "Serial Number", type=ModuleType.WIDGET),
    ]


@pytest.fixture
def i18n_dir(tmp_path: Path) -> Path:
    """A minimal translation tree with en and fr locales."""
    root = tmp_path / "i18n"
    (root / "en").mkdir(parents=True)
    (root / "fr").mkdir()
    (root / "logs.json").write_text(json.dumps({"logs": {"hello": "shared {name}"}}), encoding="utf-8")
    (root / "en" / "filters.json").write_text(
        json.dumps({"filters": {"flags": {"yes": "yes", "no": "no"}}}), encoding="utf-8"
    )
    (root / "fr" / "filters.json").write_text(json.dumps({"filters": {"flags": {"yes": "oui"}}}), encoding="utf-8")
    return root
