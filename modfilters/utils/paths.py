"""Path resolution for bundled resources.

Locates the resources directory whether running from a source checkout or
from an installed wheel.
"""

from __future__ import annotations

import sys
from pathlib import Path

__all__ = ["get_resources_dir"]

_resources_dir: Path | None = None


def get_resources_dir() -> Path:
    """Get the path to the resources directory.

    Checks, in order:
    1. modfilters/resources/ next to the package sources (dev + pip install)
    2. resources/ at the repository root
    3. sys.prefix/resources (system-wide installs)

    Returns:
        Path to the resources directory.

    Raises:
        FileNotFoundError: If resources directory cannot be found.
    """
    global _resources_dir
    if _resources_dir is not None:
        return _resources_dir

    # paths.py is at modfilters/utils/paths.py -> parent.parent = modfilters/
    package_dir = Path(__file__).resolve().parent.parent
    for candidate in (
        package_dir / "resources",
        package_dir.parent / "resources",
        Path(sys.prefix) / "resources",
    ):
        if candidate.is_dir():
            _resources_dir = candidate
            return _resources_dir

    raise FileNotFoundError(
        "Could not locate resources directory. "
        "Searched: modfilters/resources/, project_root/resources/, sys.prefix/resources/"
    )
