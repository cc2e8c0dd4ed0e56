"""Decomposition of one definition block's text into dictionary fields.

The block text is loosely structured, for example::

    hello Definisi : kata seru (sapaan) helo, hai (Kamus Inggeris-Melayu Dewan)

Parsing runs as a fixed sequence of stages.  Each stage takes the text left
over by the previous one and returns ``(value, remaining_text)``, so the
stages can be tested one at a time:

1. :func:`extract_word`: first alphabetic run (does not consume).
2. :func:`extract_definition_span`: text after ``Definisi :`` up to the
   ``(Kamus`` source label.
3. :func:`extract_part_of_speech`: leading lowercase tag plus an optional
   parenthetical right after it.
4. :func:`extract_context`: the first parenthetical left in the span.
5. :func:`extract_malay_definition`: whatever remains, minus any trailing
   ``(Kamus ...)`` suffix.

The source label is read from the full block text by :func:`extract_source`.
"""

from __future__ import annotations

import re

from malay_dictionary.core.schemas.dictionary import DictionaryEntry
from malay_dictionary.scraper.config import DEFAULT_SOURCE
from malay_dictionary.scraper.markup import normalize_whitespace

_WORD_RE = re.compile(r"[A-Za-z]+")
_SPAN_RE = re.compile(r"Definisi\s*:\s*(.*?)(?=\s*\(Kamus|$)", re.IGNORECASE)
_PART_OF_SPEECH_RE = re.compile(r"^([a-z]+)\s+(\(.*?\))?")
_PARENTHETICAL_RE = re.compile(r"\((.*?)\)")
_SOURCE_SUFFIX_RE = re.compile(r"(.*?)\s*\(Kamus.*$")
_SOURCE_RE = re.compile(r"\((Kamus.*?)\)")


# ---------------------------------------------------------------------------
# Stages
# ---------------------------------------------------------------------------


def extract_word(text: str) -> tuple[str, str]:
    """First contiguous ASCII-alphabetic run, or ``""``.  Consumes nothing."""
    match = _WORD_RE.search(text)
    return (match.group(0) if match else ""), text


def extract_definition_span(text: str) -> tuple[str | None, str]:
    """Text between ``Definisi :`` and the next ``(Kamus`` (or the end).

    Returns ``(None, text)`` when the block has no definition marker.
    """
    match = _SPAN_RE.search(text)
    if match is None:
        return None, text
    span = match.group(1).strip()
    return span, span


def extract_part_of_speech(span: str) -> tuple[str | None, str]:
    """Leading part-of-speech token and the parenthetical following it.

    ``"v (verb) meaning"`` gives ``("v", "meaning")``.  Only the token is
    returned; the parenthetical right after it is discarded with it.
    """
    match = _PART_OF_SPEECH_RE.match(span)
    if match is None:
        return None, span
    return match.group(1), span[match.end():].strip()


def extract_context(span: str) -> tuple[str | None, str]:
    """First parenthesized text in ``span``, removed from the remainder.

    ``"seru (sapaan) helo"`` gives ``("sapaan", "seru helo")``.
    """
    match = _PARENTHETICAL_RE.search(span)
    if match is None:
        return None, span
    remaining = span[: match.start()] + span[match.end():]
    return match.group(1), normalize_whitespace(remaining)


def extract_malay_definition(span: str) -> tuple[str, str]:
    """The remaining span without a trailing ``(Kamus ...)`` suffix.

    Consumes the whole span, so the remainder is always ``""``.
    """
    match = _SOURCE_SUFFIX_RE.match(span)
    definition = match.group(1) if match else span
    return definition.strip(), ""


def extract_source(text: str) -> str:
    """Parenthesized ``Kamus ...`` label in the block, or the default source."""
    match = _SOURCE_RE.search(text)
    return match.group(1) if match else DEFAULT_SOURCE


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------


def parse_definition_text(text: str) -> DictionaryEntry | None:
    """Decompose one block's text into a :class:`DictionaryEntry`.

    Args:
        text: Raw block text.  Whitespace is normalized before parsing and
            the normalized text is kept as ``raw_text``.

    Returns:
        The entry, or ``None`` when the block has no ``Definisi :`` marker
        or nothing is left of the definition after decomposition.
    """
    block = normalize_whitespace(text)

    word, _ = extract_word(block)
    span, remaining = extract_definition_span(block)
    if span is None:
        return None

    part_of_speech, remaining = extract_part_of_speech(remaining)
    context, remaining = extract_context(remaining)
    malay_definition, _ = extract_malay_definition(remaining)
    if not malay_definition:
        return None

    return DictionaryEntry(
        word=word,
        part_of_speech=part_of_speech,
        context=context,
        malay_definition=malay_definition,
        source=extract_source(block),
        raw_text=block,
    )
