"""Extraction of structured records from a DBP PRPM search-result page.

The page is not built for machines: each dictionary source sits in its own
tab panel, the open-by-default tab repeats one of them, and definitions are
free text.  Four independent passes read it:

- :func:`extract_definitions`: always run.
- :func:`extract_related_services`: only with ``include_related``.
- :func:`extract_peribahasa`: only with ``include_peribahasa``.
- :func:`extract_tesaurus`: only with ``include_tesaurus``.

All passes are best effort: blocks that cannot be decomposed are skipped
and an unexpected page shape yields empty results, never an exception.
"""

from __future__ import annotations

import logging
import re
from urllib.parse import urljoin

from malay_dictionary.core.schemas.dictionary import (
    DictionaryEntry,
    Proverb,
    RelatedService,
    SearchOptions,
    SearchResult,
)
from malay_dictionary.scraper.config import (
    ACTIVE_TAB_CLASSES,
    BASE_URL,
    DEFINITION_MARKER,
    INFO_CLASS,
    NO_TESAURUS_TEXT,
    PROVERB_CLASS,
    PROVERB_MIN_ROWS,
    SERVICE_LINK_MARKER,
    SUMMARY_PANEL_CLASS,
    TAB_PANEL_CLASSES,
    TESAURUS_MARKER,
)
from malay_dictionary.scraper.definition_parser import parse_definition_text
from malay_dictionary.scraper.markup import MarkupElement, parse_markup

logger = logging.getLogger(__name__)

_COUNT_RE = re.compile(r"\((\d+)\)")


# ---------------------------------------------------------------------------
# Small helpers
# ---------------------------------------------------------------------------


def parse_count(text: str) -> int:
    """First parenthesized integer in ``text``, or ``0``."""
    match = _COUNT_RE.search(text)
    return int(match.group(1)) if match else 0


def absolute_url(href: str) -> str:
    """Resolve ``href`` against the service origin; absolute URLs pass through."""
    if href.startswith(("http://", "https://")):
        return href
    return urljoin(f"{BASE_URL}/", href)


# ---------------------------------------------------------------------------
# Definitions
# ---------------------------------------------------------------------------


def _definitions_from_blocks(blocks: list[MarkupElement]) -> list[DictionaryEntry]:
    entries: list[DictionaryEntry] = []
    for block in blocks:
        text = block.text.strip()
        if DEFINITION_MARKER not in text:
            continue
        entry = parse_definition_text(text)
        if entry is not None:
            entries.append(entry)
    return entries


def extract_definitions(document: MarkupElement) -> list[DictionaryEntry]:
    """Collect definitions from every dictionary-source tab.

    Steps:
    1. Every source tab (a tab panel other than the active one) containing
       ``Definisi :`` contributes one entry.
    2. The active tab, which repeats one of the source tabs, contributes
       only entries whose ``(malay_definition, source)`` pair is not
       already collected.
    3. If nothing was found, any ``<b>`` containing ``Definisi :`` is used
       instead, parsing its parent's text.

    Discovery order is preserved.
    """
    panels = document.find_all(classes=TAB_PANEL_CLASSES)
    source_tabs = [panel for panel in panels if not panel.has_classes(*ACTIVE_TAB_CLASSES)]
    entries = _definitions_from_blocks(source_tabs)

    seen = {entry.dedup_key for entry in entries}
    for entry in _definitions_from_blocks(document.find_all(classes=ACTIVE_TAB_CLASSES)):
        if entry.dedup_key in seen:
            continue
        seen.add(entry.dedup_key)
        entries.append(entry)

    if not entries:
        for bold in document.find_containing(DEFINITION_MARKER, "b"):
            parent = bold.parent
            if parent is None:
                continue
            text = parent.text.strip()
            if not text:
                continue
            entry = parse_definition_text(text)
            if entry is not None:
                entries.append(entry)
        if entries:
            logger.debug("extractor: %d definition(s) found via fallback", len(entries))

    return entries


# ---------------------------------------------------------------------------
# Related services
# ---------------------------------------------------------------------------


def extract_related_services(document: MarkupElement) -> list[RelatedService]:
    """Links to other DBP services listed in the summary panel.

    The result count sits in the ``<i>`` element right after each link,
    e.g. ``<a href="Cari1.aspx?...">Kamus Dewan</a> <i>(3)</i>``.
    """
    services: list[RelatedService] = []
    selector = f'.{SUMMARY_PANEL_CLASS} a[href*="{SERVICE_LINK_MARKER}"]'
    for anchor in document.select(selector):
        href = anchor.attr("href")
        name = anchor.text.strip()
        if not href or not name:
            continue
        counter = anchor.next_sibling("i")
        services.append(
            RelatedService(
                name=name,
                count=parse_count(counter.text) if counter is not None else 0,
                url=absolute_url(href),
            )
        )
    return services


# ---------------------------------------------------------------------------
# Peribahasa
# ---------------------------------------------------------------------------


def _row_text(row: MarkupElement) -> str:
    return "".join(cell.text for cell in row.find_all("td")).strip()


def extract_peribahasa(document: MarkupElement) -> list[Proverb]:
    """Proverb records from the ``infoPeribahasa`` blocks.

    Each block is a table whose rows 1-4 (after a header row) hold the
    identifier, Malay text, English text and explanation.  Blocks with
    fewer rows, or without an identifier or Malay text, are skipped.
    """
    proverbs: list[Proverb] = []
    for block in document.find_all(classes=(PROVERB_CLASS,)):
        rows = block.find_all("tr")
        if len(rows) < PROVERB_MIN_ROWS:
            continue

        proverb_id = _row_text(rows[1])
        malay_text = _row_text(rows[2])
        if not proverb_id or not malay_text:
            continue

        links = block.find_all("a", href_contains=SERVICE_LINK_MARKER)
        proverbs.append(
            Proverb(
                id=proverb_id,
                malay_text=malay_text,
                english_text=_row_text(rows[3]),
                explanation=_row_text(rows[4]),
                count=parse_count(links[-1].text) if links else 0,
            )
        )
    return proverbs


# ---------------------------------------------------------------------------
# Tesaurus
# ---------------------------------------------------------------------------


def extract_tesaurus(document: MarkupElement) -> str | None:
    """Thesaurus text, or ``None`` when missing or the "no information" placeholder."""
    matches = document.find_containing(TESAURUS_MARKER, classes=(INFO_CLASS,))
    text = "".join(element.text for element in matches).strip()
    if not text or NO_TESAURUS_TEXT in text:
        return None
    return text


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------


def parse_search_results(
    html: str,
    word: str,
    options: SearchOptions | None = None,
) -> SearchResult:
    """Build a :class:`SearchResult` from a raw search-result page.

    Args:
        html: Response body of the lookup page.
        word: The word as passed by the caller; stored unchanged.
        options: Which optional passes to run.  Passes that are not
            requested are skipped entirely and leave their field ``None``.

    Returns:
        The populated :class:`SearchResult`.
    """
    options = options or SearchOptions()
    document = parse_markup(html)

    definitions = extract_definitions(document)
    related = extract_related_services(document) if options.include_related else None
    peribahasa = extract_peribahasa(document) if options.include_peribahasa else None
    tesaurus = extract_tesaurus(document) if options.include_tesaurus else None

    logger.debug(
        "extractor: '%s' -> %d definition(s), related=%s, peribahasa=%s, tesaurus=%s",
        word,
        len(definitions),
        None if related is None else len(related),
        None if peribahasa is None else len(peribahasa),
        tesaurus is not None,
    )

    return SearchResult(
        word=word,
        definitions=tuple(definitions),
        related_services=tuple(related) if related is not None else None,
        peribahasa=tuple(peribahasa) if peribahasa is not None else None,
        tesaurus=tesaurus,
    )
