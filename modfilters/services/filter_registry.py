# modfilters/services/filter_registry.py

"""Filter registry for the module repository page.

Holds the two fixed filter groups shown on the page, emits their client
descriptors, renders their HTML and evaluates a complete client filter state
against modules.
"""

from __future__ import annotations

import json
import logging
from collections import Counter
from functools import cached_property, lru_cache
from typing import TYPE_CHECKING, Any, Iterable, Sequence

from modfilters.core.attributes import (
    BossStatus,
    Difficulty,
    ModuleOrigin,
    ModuleType,
    MysteryModuleStatus,
    Quirks,
    RuleSeedSupport,
    SouvenirStatus,
    TwitchPlaysSupport,
)
from modfilters.filters import ModuleFilter, MultiChoiceFilter, MultiFlagFilter, RangeFilter
from modfilters.utils.html import render
from modfilters.utils.json_utils import dumps_js

if TYPE_CHECKING:
    from modfilters.core.module import KtaneModule
    from modfilters.utils.i18n import I18n

logger = logging.getLogger("modfilters.filter_registry")

__all__ = [
    "FilterRegistry",
    "build_default_registry",
    "parse_state",
]


class FilterRegistry:
    """Ordered, immutable collection of the page's filter declarations.

    Filter ids must be unique across both groups because each id is the
    namespace of its form fields and its key in the client state.
    """

    def __init__(self, primary: Sequence[ModuleFilter], secondary: Sequence[ModuleFilter] = ()) -> None:
        """Validates and stores the two filter groups.

        Args:
            primary: Filters shown in the main filter panel.
            secondary: Filters shown in the extended panel.

        Raises:
            ValueError: If two declarations share an id.
        """
        self._primary: tuple[ModuleFilter, ...] = tuple(primary)
        self._secondary: tuple[ModuleFilter, ...] = tuple(secondary)

        counts = Counter(f.id for f in self.all_filters)
        duplicates = sorted(fid for fid, count in counts.items() if count > 1)
        if duplicates:
            raise ValueError(f"Duplicate filter ids: {', '.join(duplicates)}")

        for declaration in self.all_filters:
            self._check_accelerators(declaration)

        self._by_id: dict[str, ModuleFilter] = {f.id: f for f in self.all_filters}

    @staticmethod
    def _check_accelerators(declaration: ModuleFilter) -> None:
        """Logs accelerators that clash inside one option group."""
        accels = Counter(opt.accel.lower() for opt in declaration.options if opt.accel)
        for accel, count in accels.items():
            if count > 1:
                logger.warning("Filter %s uses accelerator %r %d times", declaration.id, accel, count)

    @property
    def primary_filters(self) -> tuple[ModuleFilter, ...]:
        return self._primary

    @property
    def secondary_filters(self) -> tuple[ModuleFilter, ...]:
        return self._secondary

    @property
    def all_filters(self) -> tuple[ModuleFilter, ...]:
        """Both groups, primary first."""
        return self._primary + self._secondary

    def get(self, filter_id: str) -> ModuleFilter | None:
        """Returns the declaration with the given id, or None."""
        return self._by_id.get(filter_id)

    # ------------------------------------------------------------------
    # Render time
    # ------------------------------------------------------------------

    @cached_property
    def _descriptors(self) -> tuple[dict[str, Any], ...]:
        return tuple(f.to_descriptor() for f in self.all_filters)

    def descriptors(self) -> list[dict[str, Any]]:
        """Returns the client descriptors of all filters, in order.

        Returns:
            Fresh copies so callers cannot modify the cached structures.
        """
        return [{**d, "values": list(d["values"])} for d in self._descriptors]

    @cached_property
    def descriptor_js(self) -> str:
        """The descriptor array as JavaScript source, with raw ``fnc`` code."""
        return dumps_js(list(self._descriptors))

    def render_primary(self, i18n: I18n) -> str:
        """Renders the primary filter panel in the given language."""
        return render(f.to_html(i18n) for f in self._primary)

    def render_secondary(self, i18n: I18n) -> str:
        """Renders the secondary filter panel in the given language."""
        return render(f.to_html(i18n) for f in self._secondary)

    # ------------------------------------------------------------------
    # Evaluation time
    # ------------------------------------------------------------------

    def matches(self, module: KtaneModule, state: dict[str, Any]) -> bool:
        """Checks a module against a complete client filter state.

        Filters missing from the state impose no constraint; unknown ids in
        the state are ignored.

        Args:
            module: The module to check.
            state: Client state per filter id.

        Returns:
            True if the module passes every filter present in the state.
        """
        for filter_id, filter_state in state.items():
            declaration = self._by_id.get(filter_id)
            if declaration is None:
                continue
            if not declaration.matches(module, filter_state):
                return False
        return True

    def apply(self, modules: Iterable[KtaneModule], state: dict[str, Any]) -> list[KtaneModule]:
        """Returns the modules that pass the client filter state.

        Args:
            modules: The input modules.
            state: Client state per filter id.

        Returns:
            A new list containing only modules that pass all filters.
        """
        unknown = sorted(fid for fid in state if fid not in self._by_id)
        if unknown:
            logger.warning("Ignoring unknown filter ids: %s", ", ".join(unknown))
        return [m for m in modules if self.matches(m, state)]


def parse_state(text: str) -> dict[str, Any]:
    """Decodes a client filter state sent by the browser.

    Args:
        text: JSON text of an object keyed by filter id.

    Returns:
        The decoded object, or an empty dict if the text is not a JSON object.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.warning("Invalid filter state JSON: %s", exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("Filter state must be a JSON object, got %s", type(data).__name__)
        return {}
    return data


def _twitch_plays_support(module: KtaneModule) -> TwitchPlaysSupport:
    if module.twitch_plays_score is None:
        return TwitchPlaysSupport.NOT_SUPPORTED
    return TwitchPlaysSupport.SUPPORTED


@lru_cache(maxsize=1)
def build_default_registry() -> FilterRegistry:
    """Builds the repository page's filter registry once per process."""
    primary = [
        RangeFilter(
            "defdiff",
            "filters.names.defuser_difficulty",
            Difficulty,
            lambda m: m.defuser_difficulty,
            "mod => mod.defuser_difficulty",
        ),
        RangeFilter(
            "expdiff",
            "filters.names.expert_difficulty",
            Difficulty,
            lambda m: m.expert_difficulty,
            "mod => mod.expert_difficulty",
        ),
        MultiChoiceFilter("type", "filters.names.type", ModuleType, lambda m: m.type, "mod => mod.type"),
        MultiChoiceFilter("origin", "filters.names.origin", ModuleOrigin, lambda m: m.origin, "mod => mod.origin"),
    ]
    secondary = [
        MultiChoiceFilter(
            "twitchplays",
            "filters.names.twitch_plays",
            TwitchPlaysSupport,
            _twitch_plays_support,
            "mod => mod.twitch_plays_score != null ? 'SUPPORTED' : 'NOT_SUPPORTED'",
        ),
        MultiChoiceFilter(
            "ruleseed",
            "filters.names.rule_seed",
            RuleSeedSupport,
            lambda m: m.rule_seed_support,
            "mod => mod.rule_seed_support || 'NOT_SUPPORTED'",
        ),
        MultiChoiceFilter(
            "souvenir",
            "filters.names.souvenir",
            SouvenirStatus,
            lambda m: m.souvenir_status,
            "mod => mod.souvenir_status || null",
        ),
        MultiChoiceFilter(
            "mysterymodule",
            "filters.names.mystery_module",
            MysteryModuleStatus,
            lambda m: m.mystery_module,
            "mod => mod.mystery_module || 'NO_CONFLICT'",
        ),
        MultiChoiceFilter(
            "bossstatus",
            "filters.names.boss_status",
            BossStatus,
            lambda m: m.boss_status,
            "mod => mod.boss_status || null",
        ),
        MultiFlagFilter(
            "quirks",
            "filters.names.quirks",
            Quirks,
            lambda m: m.quirks,
            "mod => mod.quirks || []",
        ),
    ]
    registry = FilterRegistry(primary, secondary)
    logger.debug("Built filter registry with %d filters", len(registry.all_filters))
    return registry
