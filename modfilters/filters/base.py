"""Abstract filter declaration shared by all filter kinds.

A declaration binds one module attribute to a descriptor for the client
runtime, an HTML control and a match predicate. Concrete kinds live in
``modfilters.filters.kinds``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, ClassVar

from modfilters.filters.options import FilterOption, extract_options
from modfilters.utils.html import TagFactory
from modfilters.utils.json_utils import RawJs

if TYPE_CHECKING:
    from bs4 import Tag

    from modfilters.core.module import KtaneModule
    from modfilters.utils.i18n import I18n

__all__ = ["ModuleFilter", "ValueGetter"]

logger = logging.getLogger("modfilters.filters")

ValueGetter = Callable[["KtaneModule"], Any]


class ModuleFilter(ABC):
    """A named filter over one enum-typed module attribute.

    Attributes:
        id: Stable identifier; JSON key and DOM id namespace.
        readable_key: i18n key of the filter heading.
        client_expression: Client-side code that re-derives the attribute
            from a module record in the browser. Opaque to the server.
        enum_type: The attribute enum the options are derived from.
        get_value: Accessor returning the module's attribute value.
        options: Filterable options in enum declaration order.
    """

    kind: ClassVar[str]

    def __init__(
        self,
        filter_id: str,
        readable_key: str,
        enum_type: type[Enum],
        get_value: ValueGetter,
        client_expression: str,
    ) -> None:
        if not filter_id:
            raise ValueError("filter_id must be a non-empty string")
        if not isinstance(enum_type, type) or not issubclass(enum_type, Enum):
            raise TypeError(f"enum_type must be an Enum subclass, got {enum_type!r}")
        if not callable(get_value):
            raise TypeError(f"get_value for filter {filter_id!r} must be callable")
        if not client_expression:
            raise ValueError(f"Filter {filter_id!r} needs a client expression")

        self.id = filter_id
        self.readable_key = readable_key
        self.enum_type = enum_type
        self.get_value = get_value
        self.client_expression = RawJs(client_expression)
        self.options: tuple[FilterOption, ...] = extract_options(enum_type)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, enum={self.enum_type.__name__})"

    def readable_name(self, i18n: I18n) -> str:
        """The localized filter heading."""
        return i18n.t(self.readable_key)

    @property
    def option_names(self) -> list[str]:
        """Option names in declaration order."""
        return [opt.name for opt in self.options]

    def to_descriptor(self) -> dict[str, Any]:
        """Builds the descriptor consumed by the client runtime.

        Returns:
            A dict with ``id``, ``fnc`` (raw client code), ``type`` and ``values``.
        """
        return {
            "id": self.id,
            "fnc": self.client_expression,
            "type": self.kind,
            "values": self.option_names,
        }

    def to_html(self, i18n: I18n) -> Tag:
        """Renders the filter's option group.

        Args:
            i18n: Localization context used for every label.

        Returns:
            A detached ``div.option-group`` tag.
        """
        factory = TagFactory()
        return factory.tag(
            "div",
            factory.tag("h4", self.readable_name(i18n)),
            *self._render_controls(factory, i18n),
            class_="option-group",
        )

    def dom_id(self, *parts: str) -> str:
        """Returns the namespaced DOM id ``filter-{id}[-part...]``."""
        return "-".join(("filter", self.id, *parts))

    @abstractmethod
    def _render_controls(self, factory: TagFactory, i18n: I18n) -> list[Tag]:
        """Renders the controls placed below the heading."""

    @abstractmethod
    def matches(self, module: KtaneModule, state: Any) -> bool:
        """Checks whether a module passes this filter.

        Args:
            module: The module to check.
            state: This filter's client state, already decoded from JSON.

        Returns:
            True if the module should stay visible.
        """
