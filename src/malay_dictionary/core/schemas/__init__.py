"""Pydantic schemas for lookup results and transport configuration."""

from __future__ import annotations

from malay_dictionary.core.schemas.dictionary import (
    DictionaryEntry,
    Proverb,
    RelatedService,
    SearchOptions,
    SearchResult,
)
from malay_dictionary.core.schemas.transport import ProxyAuth, ProxyConfig, TransportConfig

__all__ = [
    "DictionaryEntry",
    "Proverb",
    "ProxyAuth",
    "ProxyConfig",
    "RelatedService",
    "SearchOptions",
    "SearchResult",
    "TransportConfig",
]
