"""Pydantic schemas for dictionary lookup results.

Every record here is immutable (``frozen=True``): the extractor builds them
once per search and hands them to the caller unchanged.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field


class DictionaryEntry(BaseModel):
    """One definition decomposed from a dictionary source tab.

    Attributes:
        word: Headword guessed from the block text (first alphabetic run).
            Best effort only; it is not guaranteed to equal the query.
        phonetic: Phonetic transcription, when the page provides one.
        jawi: Jawi-script spelling, when the page provides one.
        part_of_speech: Leading part-of-speech tag (e.g. ``"v"``, ``"kata"``).
        context: First parenthetical remaining in the definition span.
        malay_definition: The Malay meaning text.
        source: Dictionary label, e.g. ``"Kamus Inggeris-Melayu Dewan"``.
        raw_text: Whitespace-normalized block text the entry was parsed from.
    """

    model_config = ConfigDict(frozen=True)

    word: str = ""
    phonetic: Optional[str] = None
    jawi: Optional[str] = None
    part_of_speech: Optional[str] = None
    context: Optional[str] = None
    malay_definition: str = Field(..., min_length=1)
    source: str
    raw_text: str

    @property
    def dedup_key(self) -> tuple[str, str]:
        """Identity used to drop the active tab's duplicate of a source tab."""
        return (self.malay_definition, self.source)


class RelatedService(BaseModel):
    """Link to another DBP service that has results for the same keyword.

    Attributes:
        name: Anchor text, e.g. ``"Kamus Dewan"``.
        count: Result count shown next to the link; ``0`` when missing.
        url: Absolute URL of the service page.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    count: int = Field(default=0, ge=0)
    url: str


class Proverb(BaseModel):
    """A peribahasa (proverb) record with bilingual text."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    malay_text: str = Field(..., min_length=1)
    english_text: str = ""
    explanation: str = ""
    count: int = Field(default=0, ge=0)


class SearchOptions(BaseModel):
    """Per-call options for ``search`` and ``search_multiple``.

    Each ``include_*`` flag enables one optional extraction pass; a disabled
    pass is never run and its :class:`SearchResult` field stays ``None``.

    Attributes:
        include_related: Extract related-service links.
        include_peribahasa: Extract proverb blocks.
        include_tesaurus: Extract thesaurus text.
        delay: Milliseconds to wait between two words in ``search_multiple``.
    """

    model_config = ConfigDict(frozen=True)

    include_related: bool = False
    include_peribahasa: bool = False
    include_tesaurus: bool = False
    delay: int = Field(default=0, ge=0)


class SearchResult(BaseModel):
    """Everything extracted for one looked-up word.

    ``has_results`` is derived from ``definitions`` and cannot disagree with
    it.  Optional sections are ``None`` unless their pass was requested.
    """

    model_config = ConfigDict(frozen=True)

    word: str
    definitions: tuple[DictionaryEntry, ...] = ()
    related_services: Optional[tuple[RelatedService, ...]] = None
    peribahasa: Optional[tuple[Proverb, ...]] = None
    tesaurus: Optional[str] = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_results(self) -> bool:
        return len(self.definitions) > 0

    @classmethod
    def empty(cls, word: str) -> SearchResult:
        """Placeholder result for a word whose lookup failed."""
        return cls(word=word)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready dict with absent optional fields omitted."""
        return self.model_dump(mode="json", exclude_none=True)
