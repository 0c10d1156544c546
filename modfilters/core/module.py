# modfilters/core/module.py

"""Module dataclass and catalog loading for the module repository.

Defines the catalog item that every filter reads from, plus helpers that
build modules from the repository's JSON catalog.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, TypeVar

from modfilters.core.attributes import (
    BossStatus,
    Difficulty,
    ModuleOrigin,
    ModuleType,
    MysteryModuleStatus,
    Quirks,
    RuleSeedSupport,
    SouvenirStatus,
)
from modfilters.utils.json_utils import load_json

__all__ = ["KtaneModule", "load_catalog"]

logger = logging.getLogger("modfilters.module")

E = TypeVar("E", bound=Enum)

_ALL_QUIRK_BITS = sum(flag.value for flag in Quirks)


@dataclass
class KtaneModule:
    """A single module entry of the repository.

    Optional attributes are None when the catalog does not record them;
    filters treat such modules permissively.
    """

    module_id: str
    name: str
    type: ModuleType = ModuleType.REGULAR
    origin: ModuleOrigin = ModuleOrigin.MODS

    defuser_difficulty: Difficulty | None = None
    expert_difficulty: Difficulty | None = None

    # None when the module has no Twitch Plays support at all
    twitch_plays_score: float | None = None
    rule_seed_support: RuleSeedSupport = RuleSeedSupport.NOT_SUPPORTED
    souvenir_status: SouvenirStatus | None = None
    mystery_module: MysteryModuleStatus = MysteryModuleStatus.NO_CONFLICT
    boss_status: BossStatus | None = None
    quirks: Quirks = Quirks.NONE

    published: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> KtaneModule:
        """Builds a module from one catalog entry.

        Unknown enum names are logged and replaced by the field default.

        Args:
            data: A JSON object with snake_case keys; enum values are member names.

        Returns:
            The parsed module.

        Raises:
            KeyError: If ``module_id`` or ``name`` is missing.
        """
        module_id = data["module_id"]
        score = data.get("twitch_plays_score")
        return cls(
            module_id=module_id,
            name=data["name"],
            type=_parse_enum(ModuleType, data.get("type"), ModuleType.REGULAR, module_id),
            origin=_parse_enum(ModuleOrigin, data.get("origin"), ModuleOrigin.MODS, module_id),
            defuser_difficulty=_parse_enum(Difficulty, data.get("defuser_difficulty"), None, module_id),
            expert_difficulty=_parse_enum(Difficulty, data.get("expert_difficulty"), None, module_id),
            twitch_plays_score=float(score) if isinstance(score, (int, float)) else None,
            rule_seed_support=_parse_enum(
                RuleSeedSupport, data.get("rule_seed_support"), RuleSeedSupport.NOT_SUPPORTED, module_id
            ),
            souvenir_status=_parse_enum(SouvenirStatus, data.get("souvenir_status"), None, module_id),
            mystery_module=_parse_enum(
                MysteryModuleStatus, data.get("mystery_module"), MysteryModuleStatus.NO_CONFLICT, module_id
            ),
            boss_status=_parse_enum(BossStatus, data.get("boss_status"), None, module_id),
            quirks=_parse_quirks(data.get("quirks"), module_id),
            published=str(data.get("published", "")),
        )


def _parse_enum(enum_type: type[E], raw: Any, default: E | None, module_id: str) -> E | None:
    """Looks up an enum member by name, falling back to ``default``."""
    if raw is None:
        return default
    try:
        return enum_type[str(raw)]
    except KeyError:
        logger.warning("Module %s: unknown %s value %r", module_id, enum_type.__name__, raw)
        return default


def _parse_quirks(raw: Any, module_id: str) -> Quirks:
    """Parses quirks given as a bitmask, a list of flag names or a comma separated string."""
    if not raw:
        return Quirks.NONE
    if isinstance(raw, int) and not isinstance(raw, bool):
        unknown = raw & ~_ALL_QUIRK_BITS
        if unknown:
            logger.warning("Module %s: unknown quirk bits %#x", module_id, unknown)
        return Quirks(raw & _ALL_QUIRK_BITS)
    if isinstance(raw, str):
        names = raw.split(",")
    elif isinstance(raw, list):
        names = raw
    else:
        logger.warning("Module %s: unsupported quirks value %r", module_id, raw)
        return Quirks.NONE
    quirks = Quirks.NONE
    for name in names:
        flag = _parse_enum(Quirks, str(name).strip(), None, module_id)
        if flag is not None:
            quirks |= flag
    return quirks


def load_catalog(path: Path) -> list[KtaneModule]:
    """Loads the module catalog from a JSON file.

    The file holds either a list of entries or an object with a
    ``modules`` list. Malformed entries are skipped with a warning.

    Args:
        path: Path to the catalog file.

    Returns:
        The parsed modules in file order (empty if the file is unreadable).
    """
    data = load_json(path, default=[])
    entries = data.get("modules", []) if isinstance(data, dict) else data
    if not isinstance(entries, list):
        logger.error("Catalog %s has no module list", path)
        return []

    modules: list[KtaneModule] = []
    for entry in entries:
        try:
            modules.append(KtaneModule.from_dict(entry))
        except (KeyError, TypeError, AttributeError) as exc:
            logger.warning("Skipping malformed catalog entry in %s: %s", path, exc)
    logger.info("Loaded %d modules from %s", len(modules), path)
    return modules
