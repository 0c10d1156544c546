"""Filterable attribute enums of a repository module.

Each enum carries its filter table via ``@filter_options``: the label key,
the optional accelerator and the optional explanation of every member that
may be selected in a filter. Members without an entry stay valid attribute
values but never appear as filter options.
"""

from __future__ import annotations

from enum import IntEnum, IntFlag

from modfilters.filters.options import FilterMeta, filter_options

__all__ = [
    "BossStatus",
    "Difficulty",
    "ModuleOrigin",
    "ModuleType",
    "MysteryModuleStatus",
    "Quirks",
    "RuleSeedSupport",
    "SouvenirStatus",
    "TwitchPlaysSupport",
]

_OPT = "filters.options"


@filter_options(
    VERY_EASY=FilterMeta(f"{_OPT}.difficulty.very_easy"),
    EASY=FilterMeta(f"{_OPT}.difficulty.easy"),
    MEDIUM=FilterMeta(f"{_OPT}.difficulty.medium"),
    HARD=FilterMeta(f"{_OPT}.difficulty.hard"),
    VERY_HARD=FilterMeta(f"{_OPT}.difficulty.very_hard"),
)
class Difficulty(IntEnum):
    """Defuser or expert difficulty rating."""

    VERY_EASY = 0
    EASY = 1
    MEDIUM = 2
    HARD = 3
    VERY_HARD = 4


@filter_options(
    REGULAR=FilterMeta(f"{_OPT}.type.regular", accel="R"),
    NEEDY=FilterMeta(f"{_OPT}.type.needy", accel="N"),
    HOLDABLE=FilterMeta(f"{_OPT}.type.holdable", accel="H"),
)
class ModuleType(IntEnum):
    """Kind of bomb component. Widgets are listed but not filterable."""

    REGULAR = 0
    NEEDY = 1
    HOLDABLE = 2
    WIDGET = 3


@filter_options(
    VANILLA=FilterMeta(f"{_OPT}.origin.vanilla", accel="V"),
    MODS=FilterMeta(f"{_OPT}.origin.mods", accel="M"),
)
class ModuleOrigin(IntEnum):
    VANILLA = 0
    MODS = 1


@filter_options(
    NOT_SUPPORTED=FilterMeta(f"{_OPT}.support.not_supported", accel="O"),
    SUPPORTED=FilterMeta(f"{_OPT}.support.supported", accel="S"),
)
class TwitchPlaysSupport(IntEnum):
    NOT_SUPPORTED = 0
    SUPPORTED = 1


@filter_options(
    NOT_SUPPORTED=FilterMeta(f"{_OPT}.support.not_supported", accel="T"),
    SUPPORTED=FilterMeta(f"{_OPT}.support.supported", accel="U"),
)
class RuleSeedSupport(IntEnum):
    NOT_SUPPORTED = 0
    SUPPORTED = 1


@filter_options(
    UNEXAMINED=FilterMeta(f"{_OPT}.souvenir.unexamined", explain_key=f"{_OPT}.souvenir.unexamined_explain"),
    NOT_A_CANDIDATE=FilterMeta(
        f"{_OPT}.souvenir.not_a_candidate", explain_key=f"{_OPT}.souvenir.not_a_candidate_explain"
    ),
    CONSIDERED=FilterMeta(f"{_OPT}.souvenir.considered", explain_key=f"{_OPT}.souvenir.considered_explain"),
    SUPPORTED=FilterMeta(f"{_OPT}.souvenir.supported"),
)
class SouvenirStatus(IntEnum):
    """Whether the Souvenir module asks questions about a module."""

    UNEXAMINED = 0
    NOT_A_CANDIDATE = 1
    CONSIDERED = 2
    SUPPORTED = 3


@filter_options(
    NO_CONFLICT=FilterMeta(f"{_OPT}.mystery.no_conflict"),
    MUST_NOT_BE_HIDDEN=FilterMeta(f"{_OPT}.mystery.must_not_be_hidden"),
    MUST_NOT_BE_KEY=FilterMeta(f"{_OPT}.mystery.must_not_be_key"),
    MUST_NOT_BE_HIDDEN_OR_KEY=FilterMeta(f"{_OPT}.mystery.must_not_be_hidden_or_key"),
    REQUIRES_AUTO_SOLVE=FilterMeta(f"{_OPT}.mystery.requires_auto_solve"),
)
class MysteryModuleStatus(IntEnum):
    """Compatibility with Mystery Module hiding or keying this module."""

    NO_CONFLICT = 0
    MUST_NOT_BE_HIDDEN = 1
    MUST_NOT_BE_KEY = 2
    MUST_NOT_BE_HIDDEN_OR_KEY = 3
    REQUIRES_AUTO_SOLVE = 4


@filter_options(
    NOT_A_BOSS=FilterMeta(f"{_OPT}.boss.not_a_boss"),
    FULL_BOSS=FilterMeta(f"{_OPT}.boss.full_boss", explain_key=f"{_OPT}.boss.full_boss_explain"),
    SEMI_BOSS=FilterMeta(f"{_OPT}.boss.semi_boss", explain_key=f"{_OPT}.boss.semi_boss_explain"),
)
class BossStatus(IntEnum):
    NOT_A_BOSS = 0
    FULL_BOSS = 1
    SEMI_BOSS = 2


@filter_options(
    SOLVES_LATER=FilterMeta(f"{_OPT}.quirks.solves_later", explain_key=f"{_OPT}.quirks.solves_later_explain"),
    NEEDS_OTHER_SOLVES=FilterMeta(
        f"{_OPT}.quirks.needs_other_solves", explain_key=f"{_OPT}.quirks.needs_other_solves_explain"
    ),
    SOLVES_BEFORE_SOME=FilterMeta(
        f"{_OPT}.quirks.solves_before_some", explain_key=f"{_OPT}.quirks.solves_before_some_explain"
    ),
    SOLVES_AT_END=FilterMeta(f"{_OPT}.quirks.solves_at_end", explain_key=f"{_OPT}.quirks.solves_at_end_explain"),
    WILL_SOLVE_SUDDENLY=FilterMeta(
        f"{_OPT}.quirks.will_solve_suddenly", explain_key=f"{_OPT}.quirks.will_solve_suddenly_explain"
    ),
    PSEUDO_NEEDY=FilterMeta(f"{_OPT}.quirks.pseudo_needy", explain_key=f"{_OPT}.quirks.pseudo_needy_explain"),
    TIME_DEPENDENT=FilterMeta(f"{_OPT}.quirks.time_dependent", explain_key=f"{_OPT}.quirks.time_dependent_explain"),
    NEEDS_IMMEDIATE_ATTENTION=FilterMeta(
        f"{_OPT}.quirks.needs_immediate_attention",
        explain_key=f"{_OPT}.quirks.needs_immediate_attention_explain",
    ),
    INSTANT_DEATH=FilterMeta(f"{_OPT}.quirks.instant_death", explain_key=f"{_OPT}.quirks.instant_death_explain"),
)
class Quirks(IntFlag):
    """Special behaviours a module may exhibit, any number at once."""

    NONE = 0
    SOLVES_LATER = 1
    NEEDS_OTHER_SOLVES = 2
    SOLVES_BEFORE_SOME = 4
    SOLVES_AT_END = 8
    WILL_SOLVE_SUDDENLY = 16
    PSEUDO_NEEDY = 32
    TIME_DEPENDENT = 64
    NEEDS_IMMEDIATE_ATTENTION = 128
    INSTANT_DEATH = 256
