"""Small helpers for building HTML fragments with BeautifulSoup."""

from __future__ import annotations

from typing import Iterable

from bs4 import BeautifulSoup, NavigableString, Tag

__all__ = ["TagFactory", "accel_label", "render"]


class TagFactory:
    """Creates detached tags that can be nested freely.

    One factory per render call; BeautifulSoup documents are not shared
    between threads.
    """

    def __init__(self) -> None:
        self._soup = BeautifulSoup("", "html.parser")

    def tag(self, name: str, *children: Tag | str | None, **attrs: str | None) -> Tag:
        """Creates a tag with attributes and children.

        Attribute names may carry a trailing underscore (``class_``, ``for_``)
        to avoid Python keywords. Attributes whose value is None are omitted.
        """
        element = self._soup.new_tag(name)
        for key, value in attrs.items():
            if value is None:
                continue
            element[key.rstrip("_").replace("_", "-")] = value
        for child in children:
            if child is None:
                continue
            element.append(NavigableString(child) if isinstance(child, str) else child)
        return element


def accel_label(factory: TagFactory, text: str, accel: str | None) -> list[Tag | str]:
    """Splits a label so its accelerator character is highlighted.

    The first case-insensitive occurrence of the accelerator is wrapped in
    ``<span class="accel">``. Labels that do not contain it are returned as is.
    """
    if not accel:
        return [text]
    index = text.lower().find(accel.lower())
    if index < 0:
        return [text]
    parts: list[Tag | str] = []
    if index:
        parts.append(text[:index])
    parts.append(factory.tag("span", text[index], class_="accel"))
    if index + 1 < len(text):
        parts.append(text[index + 1 :])
    return parts


def render(fragments: Iterable[Tag]) -> str:
    """Serializes tags into one HTML string."""
    return "".join(str(fragment) for fragment in fragments)
