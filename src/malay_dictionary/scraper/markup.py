"""Minimal markup-query layer over BeautifulSoup.

The extractor only needs three capabilities: find elements by tag, CSS class
or link target; read an element's text; read an attribute.  Wrapping
``bs4`` behind :class:`MarkupElement` keeps the extraction rules in
:mod:`malay_dictionary.scraper.extractor` free of parser specifics.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from bs4 import BeautifulSoup, Tag

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs to single spaces and trim."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def _build_selector(
    tag: str | None,
    classes: Iterable[str],
    href_contains: str | None,
) -> str:
    selector = tag or ""
    selector += "".join(f".{cls}" for cls in classes)
    if href_contains:
        escaped = href_contains.replace("\\", "\\\\").replace('"', '\\"')
        selector += f'[href*="{escaped}"]'
    return selector or "*"


class MarkupElement:
    """Read-only view of one element (or the whole document)."""

    __slots__ = ("_tag",)

    def __init__(self, tag: Tag) -> None:
        self._tag = tag

    def __repr__(self) -> str:
        return f"MarkupElement(<{self.name}>)"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, MarkupElement) and other._tag is self._tag

    def __hash__(self) -> int:
        return id(self._tag)

    @property
    def name(self) -> str:
        return self._tag.name

    @property
    def text(self) -> str:
        """Concatenated text of the element and all its descendants."""
        return self._tag.get_text()

    @property
    def clean_text(self) -> str:
        """:attr:`text` with whitespace collapsed and trimmed."""
        return normalize_whitespace(self.text)

    def attr(self, name: str) -> str | None:
        """Attribute value, or ``None`` when absent.  Multi-valued
        attributes (``class``) are joined with spaces."""
        value = self._tag.get(name)
        if value is None:
            return None
        if isinstance(value, list):
            return " ".join(value)
        return str(value)

    def has_classes(self, *classes: str) -> bool:
        own = self._tag.get("class") or []
        return all(cls in own for cls in classes)

    @property
    def parent(self) -> MarkupElement | None:
        parent = self._tag.parent
        if parent is None or not isinstance(parent, Tag):
            return None
        return MarkupElement(parent)

    def next_sibling(self, tag: str | None = None) -> MarkupElement | None:
        """The immediately following sibling element, if it matches ``tag``."""
        sibling = self._tag.find_next_sibling()
        if sibling is None or not isinstance(sibling, Tag):
            return None
        if tag is not None and sibling.name != tag:
            return None
        return MarkupElement(sibling)

    def select(self, selector: str) -> list[MarkupElement]:
        """Descendants matching a CSS selector, in document order."""
        return [MarkupElement(tag) for tag in self._tag.select(selector)]

    def find_all(
        self,
        tag: str | None = None,
        *,
        classes: Iterable[str] = (),
        href_contains: str | None = None,
    ) -> list[MarkupElement]:
        """Descendants by tag name, required classes and/or link target."""
        return self.select(_build_selector(tag, classes, href_contains))

    def find_containing(self, text: str, tag: str | None = None, *, classes: Iterable[str] = ()) -> list[MarkupElement]:
        """Descendants whose text contains ``text``."""
        return [el for el in self.find_all(tag, classes=classes) if text in el.text]


def parse_markup(html: str) -> MarkupElement:
    """Parse an HTML document and return its root element.

    Uses the stdlib-backed ``html.parser`` builder, which never raises on
    malformed input.
    """
    return MarkupElement(BeautifulSoup(html, "html.parser"))
