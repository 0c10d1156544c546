#!/usr/bin/env python3
"""Module Repository Filters - command line entry point.

Usage:
    python -m modfilters.main descriptors
    python -m modfilters.main html [--lang CODE] [--group primary|secondary]
    python -m modfilters.main match [CATALOG.json] STATE.json
"""

from __future__ import annotations

import sys
from pathlib import Path

from modfilters.config import config
from modfilters.core.logging import logger, setup_logging
from modfilters.core.module import load_catalog
from modfilters.services.filter_registry import build_default_registry, parse_state
from modfilters.utils.i18n import LANGUAGE_NAMES, available_locales, get_i18n
from modfilters.version import __app_name__, __version__

__all__ = ["main"]


def _pop_option(args: list[str], name: str, default: str) -> str:
    """Removes ``name VALUE`` from args and returns VALUE (or the default)."""
    if name not in args:
        return default
    index = args.index(name)
    if index + 1 >= len(args):
        return default
    value = args[index + 1]
    del args[index : index + 2]
    return value


def _cmd_descriptors() -> int:
    print(build_default_registry().descriptor_js)
    return 0


def _cmd_html(args: list[str]) -> int:
    ui = get_i18n(config.UI_LANGUAGE)
    lang = _pop_option(args, "--lang", config.DEFAULT_LOCALE)
    group = _pop_option(args, "--group", "primary")

    if lang not in LANGUAGE_NAMES:
        print(ui.t("cli.unknown_language", lang=lang, available=", ".join(available_locales())))
        return 1

    registry = build_default_registry()
    i18n = get_i18n(lang)
    if group == "primary":
        print(registry.render_primary(i18n))
    elif group == "secondary":
        print(registry.render_secondary(i18n))
    else:
        print(ui.t("cli.unknown_group", group=group))
        return 1
    return 0


def _cmd_match(args: list[str]) -> int:
    ui = get_i18n(config.UI_LANGUAGE)
    if len(args) == 1 and config.CATALOG_FILE is not None:
        catalog_path, state_path = config.CATALOG_FILE, Path(args[0])
    elif len(args) == 2:
        catalog_path, state_path = Path(args[0]), Path(args[1])
    else:
        print(ui.t("cli.usage"))
        return 1

    try:
        state_text = state_path.read_text(encoding="utf-8")
    except OSError as exc:
        logger.error(ui.t("logs.main.state_read_error", path=state_path, error=exc))
        return 1

    modules = load_catalog(catalog_path)
    matched = build_default_registry().apply(modules, parse_state(state_text))
    for module in matched:
        print(module.name)
    logger.info(ui.t("logs.main.match_summary", matched=len(matched), total=len(modules)))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Dispatches a command line invocation.

    Args:
        argv: Arguments without the program name. Defaults to sys.argv[1:].

    Returns:
        Exit code (0 = success, 1 = failure).
    """
    args = list(sys.argv[1:] if argv is None else argv)
    setup_logging(config.LOG_LEVEL)
    logger.debug("%s %s", __app_name__, __version__)

    if not args or args[0] in ("-h", "--help"):
        print(get_i18n(config.UI_LANGUAGE).t("cli.usage"))
        return 0 if args else 1

    command, rest = args[0], args[1:]
    if command == "descriptors":
        return _cmd_descriptors()
    if command == "html":
        return _cmd_html(rest)
    if command == "match":
        return _cmd_match(rest)

    print(get_i18n(config.UI_LANGUAGE).t("cli.unknown_command", command=command))
    return 1


if __name__ == "__main__":
    sys.exit(main())
