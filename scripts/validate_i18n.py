#!/usr/bin/env python3
"""Validate i18n locale files and filter label coverage.

CI script. Checks JSON syntax, key parity between locale directories, empty
values, and that every label key referenced by the filter registry resolves
in every shipped locale.

Exit code 0 = all checks passed, 1 = at least one failure.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from modfilters.config import config  # noqa: E402
from modfilters.filters.kinds import FLAG_CHOICES  # noqa: E402
from modfilters.services.filter_registry import build_default_registry  # noqa: E402
from modfilters.utils.i18n import I18n  # noqa: E402

__all__: list[str] = []

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

I18N_DIR = config.I18N_DIR
LOCALE_DIRS = ["en", "de"]
SHARED_FILES = ["logs.json"]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def flatten(data: dict, prefix: str = "") -> dict[str, object]:
    """Recursively flatten a nested dict into dot-notation leaf keys.

    Args:
        data: Nested dictionary to flatten.
        prefix: Current key prefix for recursion.

    Returns:
        Mapping of dot-notation keys to leaf values.
    """
    leaves: dict[str, object] = {}
    for k, v in data.items():
        full_key = f"{prefix}.{k}" if prefix else k
        if isinstance(v, dict):
            leaves.update(flatten(v, full_key))
        else:
            leaves[full_key] = v
    return leaves


def load_locale(locale: str, errors: list[str]) -> dict[str, object]:
    """Loads and flattens every file of a locale, recording syntax errors."""
    leaves: dict[str, object] = {}
    locale_dir = I18N_DIR / locale
    if not locale_dir.is_dir():
        errors.append(f"  Missing locale directory: {locale_dir}")
        return leaves
    for json_file in sorted(locale_dir.glob("*.json")):
        try:
            leaves.update(flatten(json.loads(json_file.read_text(encoding="utf-8"))))
        except json.JSONDecodeError as exc:
            errors.append(f"  {locale}/{json_file.name}: {exc}")
    return leaves


def referenced_keys() -> set[str]:
    """Collects every i18n key the filter registry renders."""
    keys = {key for _, key in FLAG_CHOICES}
    for declaration in build_default_registry().all_filters:
        keys.add(declaration.readable_key)
        for opt in declaration.options:
            keys.add(opt.label_key)
            if opt.explain_key:
                keys.add(opt.explain_key)
    return keys


# ---------------------------------------------------------------------------
# Validation passes
# ---------------------------------------------------------------------------


def pass_locale_files() -> tuple[bool, list[str]]:
    """Pass 1: syntax, key parity and empty values across locales.

    Returns:
        Tuple of (success, list of status/error messages).
    """
    errors: list[str] = []
    per_locale = {locale: load_locale(locale, errors) for locale in LOCALE_DIRS}

    reference = LOCALE_DIRS[0]
    ref_keys = set(per_locale[reference])
    for locale in LOCALE_DIRS[1:]:
        other_keys = set(per_locale[locale])
        for key in sorted(ref_keys - other_keys):
            errors.append(f"    Missing in {locale}: {key}")
        for key in sorted(other_keys - ref_keys):
            errors.append(f"    Missing in {reference}: {key}")

    for locale, leaves in per_locale.items():
        for key, value in sorted(leaves.items()):
            if value == "":
                errors.append(f"  {locale}: empty value for '{key}'")

    if errors:
        return False, [f"[FAIL] Locale files: {len(errors)} issue(s)", *errors]
    return True, [f"[PASS] Locale files: {', '.join(LOCALE_DIRS)} are consistent"]


def pass_shared_files() -> tuple[bool, list[str]]:
    """Pass 2: shared files exist, parse and contain no empty values.

    Returns:
        Tuple of (success, list of status/error messages).
    """
    errors: list[str] = []
    for name in SHARED_FILES:
        path = I18N_DIR / name
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            errors.append(f"  {name}: {exc}")
            continue
        if not isinstance(data, dict) or not data:
            errors.append(f"  {name}: file is empty or not a dict")
            continue
        errors.extend(f"  {name}: empty value for '{key}'" for key, v in flatten(data).items() if v == "")

    if errors:
        return False, [f"[FAIL] Shared files: {len(errors)} issue(s)", *errors]
    return True, ["[PASS] Shared files valid"]


def pass_filter_labels() -> tuple[bool, list[str]]:
    """Pass 3: every filter label key resolves in every locale.

    Returns:
        Tuple of (success, list of status/error messages).
    """
    errors: list[str] = []
    keys = referenced_keys()
    for locale in LOCALE_DIRS:
        i18n = I18n(locale, i18n_root=I18N_DIR)
        errors.extend(f"  {locale}: unresolved filter key '{key}'" for key in sorted(keys) if not i18n.has(key))

    if errors:
        return False, [f"[FAIL] Filter labels: {len(errors)} missing", *errors]
    return True, [f"[PASS] Filter labels: {len(keys)} keys resolve in all locales"]


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------


def main() -> int:
    """Run all validation passes and report results.

    Returns:
        Exit code: 0 if all passes succeeded, 1 otherwise.
    """
    print("=== i18n Validation ===")  # noqa: T201

    total_errors = 0
    for run_pass in (pass_locale_files, pass_shared_files, pass_filter_labels):
        ok, messages = run_pass()
        for msg in messages:
            print(msg)  # noqa: T201
        if not ok:
            total_errors += 1

    print()  # noqa: T201
    if total_errors == 0:
        print("=== RESULT: PASS ===")  # noqa: T201
        return 0

    print(f"=== RESULT: FAIL ({total_errors} error{'s' if total_errors != 1 else ''}) ===")  # noqa: T201
    return 1


if __name__ == "__main__":
    sys.exit(main())
