"""Filter options derived from attribute enums.

An attribute enum opts its members into filtering with the ``@filter_options``
decorator, which attaches a static table of label keys and accelerators next
to the enum definition. Members missing from the table stay valid attribute
values but are not selectable in any filter.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, NamedTuple, TypeVar

if TYPE_CHECKING:
    from modfilters.utils.i18n import I18n

__all__ = [
    "FilterMeta",
    "FilterOption",
    "extract_options",
    "filter_options",
]

logger = logging.getLogger("modfilters.filters.options")

E = TypeVar("E", bound=type[Enum])

# enum type -> {member name: FilterMeta}
_OPTION_TABLES: dict[type[Enum], dict[str, FilterMeta]] = {}


class FilterMeta(NamedTuple):
    """Filter metadata for one enum member.

    Attributes:
        label_key: i18n key of the option label.
        accel: Optional single-character keyboard accelerator.
        explain_key: Optional i18n key of an explanatory tooltip.
    """

    label_key: str
    accel: str | None = None
    explain_key: str | None = None


@dataclass(frozen=True)
class FilterOption:
    """One selectable value of a filter.

    Attributes:
        value: Integer value of the enum member (a single bit for flags).
        name: Enum member name, used as JSON key and DOM id fragment.
        label_key: i18n key of the label.
        explain_key: i18n key of the explanation, if any.
        accel: Keyboard accelerator, if any.
    """

    value: int
    name: str
    label_key: str
    explain_key: str | None = None
    accel: str | None = None

    def translate(self, i18n: I18n) -> str:
        """Resolves the option label in the given localization context."""
        return i18n.t(self.label_key)

    def translate_explain(self, i18n: I18n) -> str | None:
        """Resolves the explanation, or None when the option has none."""
        if self.explain_key is None:
            return None
        return i18n.t(self.explain_key)


def filter_options(**table: FilterMeta) -> Callable[[E], E]:
    """Class decorator declaring which enum members are filterable.

    Args:
        **table: FilterMeta per member name.

    Returns:
        A decorator registering the table for the decorated enum.

    Raises:
        ValueError: If the table names an unknown member or an accelerator is
            not a single character.
    """

    def decorate(enum_type: E) -> E:
        members = enum_type.__members__
        for name, meta in table.items():
            if name not in members:
                raise ValueError(f"{enum_type.__name__} has no member {name!r}")
            if meta.accel is not None and len(meta.accel) != 1:
                raise ValueError(f"Accelerator for {enum_type.__name__}.{name} must be one character: {meta.accel!r}")
        _OPTION_TABLES[enum_type] = dict(table)
        return enum_type

    return decorate


def extract_options(enum_type: type[Enum]) -> tuple[FilterOption, ...]:
    """Derives the ordered filter options of an attribute enum.

    Declaration order is preserved; aliases and members without filter
    metadata are skipped.

    Args:
        enum_type: An enum whose members have integer values.

    Returns:
        The filterable options, possibly empty.
    """
    table = _OPTION_TABLES.get(enum_type)
    if not table:
        logger.debug("%s declares no filterable members", enum_type.__name__)
        return ()

    options: list[FilterOption] = []
    for member in enum_type:
        meta = table.get(member.name)
        if meta is None:
            continue
        options.append(
            FilterOption(
                value=int(member.value),
                name=member.name,
                label_key=meta.label_key,
                explain_key=meta.explain_key,
                accel=meta.accel,
            )
        )
    return tuple(options)
