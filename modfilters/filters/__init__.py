from __future__ import annotations

from modfilters.filters.base import ModuleFilter
from modfilters.filters.kinds import MultiChoiceFilter, MultiFlagFilter, RangeFilter
from modfilters.filters.options import FilterMeta, FilterOption, extract_options, filter_options

__all__: list[str] = [
    "FilterMeta",
    "FilterOption",
    "ModuleFilter",
    "MultiChoiceFilter",
    "MultiFlagFilter",
    "RangeFilter",
    "extract_options",
    "filter_options",
]
