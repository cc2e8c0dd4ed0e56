"""malay-dictionary: English-to-Malay lookups against the DBP PRPM dictionary.

Sub-packages and modules:
- ``config``:      environment-backed settings
- ``core``:        exceptions, logging configuration, pydantic schemas
- ``scraper``:     HTTP transport and HTML extraction
- ``dictionary``:  :class:`MalayDictionary`, the public facade
- ``cli``:         ``malay-dictionary`` command-line front end
"""

from __future__ import annotations

from malay_dictionary.core.exceptions import (
    HttpStatusError,
    MalayDictionaryError,
    NetworkError,
    RequestError,
    SearchError,
    TransportError,
    ValidationError,
)
from malay_dictionary.core.schemas import (
    DictionaryEntry,
    Proverb,
    ProxyAuth,
    ProxyConfig,
    RelatedService,
    SearchOptions,
    SearchResult,
    TransportConfig,
)
from malay_dictionary.dictionary import MalayDictionary

__version__ = "1.0.0"

__all__ = [
    "DictionaryEntry",
    "HttpStatusError",
    "MalayDictionary",
    "MalayDictionaryError",
    "NetworkError",
    "Proverb",
    "ProxyAuth",
    "ProxyConfig",
    "RelatedService",
    "RequestError",
    "SearchError",
    "SearchOptions",
    "SearchResult",
    "TransportConfig",
    "TransportError",
    "ValidationError",
]
