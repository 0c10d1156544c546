"""Centralized JSON I/O with consistent error handling.

Provides load_json() for catalog and settings files, and dumps_js() which
serializes descriptor structures into JavaScript source. Values wrapped in
RawJs are written verbatim so client-side functions survive the round trip
as code rather than as quoted strings.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

__all__ = ["RawJs", "dumps_js", "load_json"]

logger = logging.getLogger("modfilters.json_utils")


class RawJs(str):
    """A fragment of client-side code, emitted without JSON quoting.

    The server stores and emits it but never parses or executes it.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"RawJs({str.__repr__(self)})"


def load_json(path: Path, default: Any = None) -> Any:
    """Load and parse a JSON file with unified error handling.

    Args:
        path: Path to the JSON file.
        default: Value to return if file doesn't exist or fails to parse.
            Defaults to empty dict if None.

    Returns:
        Parsed JSON data, or default value on failure.
    """
    if default is None:
        default = {}
    if not path.exists():
        return default
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Failed to load JSON from %s: %s", path, exc)
        return default


def dumps_js(value: Any) -> str:
    """Serialize a JSON-compatible structure, writing RawJs values verbatim.

    Args:
        value: Nested dicts, lists, tuples and scalars. Dict keys are
            converted with str().

    Returns:
        Compact JavaScript source text.

    Raises:
        TypeError: If a value is not JSON serializable.
    """
    if isinstance(value, RawJs):
        return str(value)
    if isinstance(value, dict):
        items = (f"{json.dumps(str(k), ensure_ascii=False)}:{dumps_js(v)}" for k, v in value.items())
        return "{" + ",".join(items) + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ",".join(dumps_js(v) for v in value) + "]"
    return json.dumps(value, ensure_ascii=False)
