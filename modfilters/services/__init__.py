from __future__ import annotations

from modfilters.services.filter_registry import FilterRegistry, build_default_registry, parse_state

__all__: list[str] = [
    "FilterRegistry",
    "build_default_registry",
    "parse_state",
]
