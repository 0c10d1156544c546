"""Concrete filter kinds: range slider, checkbox group and tri-state flags.

Each kind produces its descriptor type, its HTML controls and its match rule.
All match rules are permissive towards missing data: a module without a
value is never hidden by a range or checkbox filter, and missing keys in the
client state impose no constraint.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum, IntFlag
from typing import TYPE_CHECKING, Any

from modfilters.filters.base import ModuleFilter, ValueGetter
from modfilters.utils.html import TagFactory, accel_label
from modfilters.utils.json_utils import dumps_js

if TYPE_CHECKING:
    from bs4 import Tag

    from modfilters.core.module import KtaneModule
    from modfilters.utils.i18n import I18n

__all__ = [
    "FLAG_CHOICES",
    "MultiChoiceFilter",
    "MultiFlagFilter",
    "RangeFilter",
]

logger = logging.getLogger("modfilters.filters.kinds")

# Radio suffix -> i18n key, in display order
FLAG_CHOICES: tuple[tuple[str, str], ...] = (
    ("y", "filters.flags.yes"),
    ("n", "filters.flags.no"),
    ("e", "filters.flags.either"),
)


def _as_int(value: Any) -> int:
    """Strict integer conversion for JSON numbers.

    Raises:
        TypeError: For booleans, strings and other non-numbers.
        ValueError: For floats with a fractional part.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"expected an integer, got {value!r}")
    return int(value)


class RangeFilter(ModuleFilter):
    """Slider over an ordinal enum such as difficulty.

    Client state: ``{"min": int, "max": int}``, inclusive ordinal positions.
    """

    kind = "range"

    def _render_controls(self, factory: TagFactory, i18n: I18n) -> list[Tag]:
        labels = {opt.name: opt.translate(i18n) for opt in self.options}
        return [
            factory.tag(
                "div",
                id=self.dom_id(),
                class_="slider",
                data_values=dumps_js(self.option_names),
                data_labels=dumps_js(labels),
            ),
            factory.tag("div", id=f"filter-label-{self.id}", class_="slider-label"),
        ]

    def ordinal(self, value: Any) -> int:
        """Maps an attribute value to its position in the option sequence.

        Raises:
            ValueError: If the value is not one of the filterable options.
            TypeError: If the value is not an enum member or integer.
        """
        if isinstance(value, Enum):
            if not isinstance(value, self.enum_type):
                raise TypeError(f"{value!r} is not a {self.enum_type.__name__}")
            raw = int(value.value)
        else:
            raw = _as_int(value)
        for position, opt in enumerate(self.options):
            if opt.value == raw:
                return position
        raise ValueError(f"{value!r} is not a filterable {self.enum_type.__name__}")

    def matches(self, module: KtaneModule, state: Any) -> bool:
        value = self.get_value(module)
        if value is None:
            return True
        if not isinstance(state, Mapping):
            state = {}
        try:
            position = self.ordinal(value)
            low = state.get("min")
            high = state.get("max")
            if low is not None and position < _as_int(low):
                return False
            if high is not None and position > _as_int(high):
                return False
            return True
        except (TypeError, ValueError) as exc:
            logger.debug("Range filter %s rejects %r: %s", self.id, value, exc)
            return False


class MultiChoiceFilter(ModuleFilter):
    """Checkbox group over a single-valued enum attribute.

    Client state: ``{option_name: bool}`` naming the allowed values. When no
    value is checked the filter lets everything through.
    """

    kind = "multichoice"

    def _render_controls(self, factory: TagFactory, i18n: I18n) -> list[Tag]:
        rows: list[Tag] = []
        for opt in self.options:
            control_id = self.dom_id(opt.name)
            rows.append(
                factory.tag(
                    "div",
                    factory.tag("input", type="checkbox", class_="filter", id=control_id),
                    " ",
                    factory.tag(
                        "label",
                        *accel_label(factory, opt.translate(i18n), opt.accel),
                        for_=control_id,
                        accesskey=opt.accel.lower() if opt.accel else None,
                        title=opt.translate_explain(i18n),
                    ),
                )
            )
        return rows

    def matches(self, module: KtaneModule, state: Any) -> bool:
        value = self.get_value(module)
        if value is None:
            return True
        if not isinstance(state, Mapping):
            state = {}
        name = value.name if isinstance(value, Enum) else str(value)
        if state.get(name) is True:
            return True
        return not any(checked is True for checked in state.values())


class MultiFlagFilter(ModuleFilter):
    """Tri-state rows over a bit-flag enum attribute.

    Client state: ``{option_name: "y" | "n"}``. ``"y"`` requires the flag,
    ``"n"`` excludes it; anything else leaves the flag unconstrained.
    """

    kind = "flags"

    def __init__(
        self,
        filter_id: str,
        readable_key: str,
        enum_type: type[Enum],
        get_value: ValueGetter,
        client_expression: str,
    ) -> None:
        if isinstance(enum_type, type) and not issubclass(enum_type, IntFlag):
            raise TypeError(f"Flags filter {filter_id!r} needs an IntFlag, got {enum_type.__name__}")
        super().__init__(filter_id, readable_key, enum_type, get_value, client_expression)

    def _render_controls(self, factory: TagFactory, i18n: I18n) -> list[Tag]:
        rows: list[Tag] = []
        for opt in self.options:
            group = self.dom_id(opt.name)
            cells = [
                factory.tag(
                    "td",
                    factory.tag("input", type="radio", class_="filter", name=group, id=f"{group}-{suffix}"),
                    factory.tag("label", " ", i18n.t(label_key), for_=f"{group}-{suffix}"),
                )
                for suffix, label_key in FLAG_CHOICES
            ]
            rows.append(
                factory.tag(
                    "tr",
                    factory.tag("th", opt.translate(i18n), title=opt.translate_explain(i18n)),
                    *cells,
                )
            )
        return [factory.tag("table", *rows)]

    def matches(self, module: KtaneModule, state: Any) -> bool:
        flags = self.get_value(module)
        mask = 0 if flags is None else int(flags)
        if not isinstance(state, Mapping):
            return True
        for opt in self.options:
            has_flag = (mask & opt.value) != 0
            wanted = state.get(opt.name)
            if wanted == "y" and not has_flag:
                return False
            if wanted == "n" and has_flag:
                return False
        return True
