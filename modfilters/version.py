"""
Central version management for the module repository filters.
"""

from __future__ import annotations

__all__ = ["__app_name__", "__version__", "__release_date__", "__author__", "__license__"]

__app_name__ = "Module Repository Filters"
__version__ = "0.3.0"
__release_date__ = "2026-10-19"
__author__ = "modfilters contributors"
__license__ = "MIT"
