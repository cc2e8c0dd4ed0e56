"""Public facade: look up English words in the DBP PRPM bilingual dictionary.

One :class:`MalayDictionary` owns one :class:`~malay_dictionary.scraper.http_client.HttpClient`
for its whole lifetime, so transport options (timeout, delay, retries,
proxy, user-agent) are shared by every search it runs.

Usage::

    async with MalayDictionary(delay=2000) as dictionary:
        result = await dictionary.search("hello", SearchOptions(include_tesaurus=True))
        meaning = await dictionary.get_definition("computer")
        batch = await dictionary.search_multiple(["good", "bad"])

Searches are strictly sequential; :meth:`search_multiple` never fans out.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from types import TracebackType
from typing import Any
from urllib.parse import quote

import structlog

from malay_dictionary.core.exceptions import (
    MalayDictionaryError,
    SearchError,
    TransportError,
    ValidationError,
)
from malay_dictionary.core.logging_config import search_word_var
from malay_dictionary.core.schemas.dictionary import SearchOptions, SearchResult
from malay_dictionary.core.schemas.transport import TransportConfig
from malay_dictionary.scraper.config import BASE_URL, SEARCH_PATH
from malay_dictionary.scraper.extractor import parse_search_results
from malay_dictionary.scraper.http_client import HttpClient, SleepFunc

logger = structlog.get_logger(__name__)

# Characters ``encodeURIComponent`` leaves unescaped besides ``_.-~``.
_KEYWORD_SAFE_CHARS = "!*'()"


def build_search_url(word: str) -> str:
    """Lookup URL for ``word`` (trimmed and percent-encoded)."""
    keyword = quote(word.strip(), safe=_KEYWORD_SAFE_CHARS)
    return f"{BASE_URL}{SEARCH_PATH}?keyword={keyword}"


class MalayDictionary:
    """English-to-Malay dictionary client.

    Args:
        config: Transport options.  When ``None``, defaults are read from
            ``MALAY_DICT_*`` settings.
        http_client: Optional pre-built :class:`HttpClient` (for testing).
        sleep: Coroutine used for the batch delay in :meth:`search_multiple`.
        **options: Individual :class:`TransportConfig` fields (``timeout``,
            ``delay``, ``retries``, ``proxy``, ``user_agent``,
            ``follow_redirects``) overriding ``config``.
    """

    def __init__(
        self,
        config: TransportConfig | None = None,
        *,
        http_client: HttpClient | None = None,
        sleep: SleepFunc = asyncio.sleep,
        **options: Any,
    ) -> None:
        if config is None:
            config = TransportConfig.from_settings()
        if options:
            config = TransportConfig(**{**config.model_dump(), **options})
        self._sleep = sleep
        self._http = http_client if http_client is not None else HttpClient(config, sleep=sleep)

    @property
    def http_client(self) -> HttpClient:
        return self._http

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    async def search(self, word: str, options: SearchOptions | None = None) -> SearchResult:
        """Look up one word and extract everything requested by ``options``.

        A successful fetch never raises, even when nothing could be
        extracted; the result then has ``has_results=False``.

        Args:
            word: English word to look up.  Surrounding whitespace is
                ignored for the request; the result keeps ``word`` as given.
            options: Optional extraction passes to run.

        Returns:
            The :class:`SearchResult` for ``word``.

        Raises:
            ValidationError: ``word`` is empty or whitespace-only.  No
                request is made.
            SearchError: The page could not be fetched; the transport
                error is available as ``cause``.
        """
        if not word or not word.strip():
            raise ValidationError("Word cannot be empty")

        url = build_search_url(word)
        token = search_word_var.set(word.strip())
        try:
            # Referer set to the page itself, as on direct browser navigation.
            fetched = await self._http.get(url, referer=url)
            result = parse_search_results(fetched.text, word, options)
        except TransportError as exc:
            raise SearchError(word, exc) from exc
        except MalayDictionaryError:
            raise
        except Exception as exc:  # noqa: BLE001
            raise SearchError(word, exc) from exc
        finally:
            search_word_var.reset(token)

        logger.info(
            "search_completed",
            word=word,
            definitions=len(result.definitions),
            attempts=fetched.attempts,
        )
        return result

    async def get_definition(self, word: str) -> str | None:
        """First Malay definition of ``word``, or ``None``.

        Never raises: lookup failures are logged and reported as ``None``.
        """
        try:
            result = await self.search(word, SearchOptions())
        except Exception as exc:  # noqa: BLE001
            logger.warning("get_definition_failed", word=word, error=str(exc))
            return None

        if not result.definitions:
            return None
        return result.definitions[0].malay_definition

    async def search_multiple(
        self,
        words: Iterable[str],
        options: SearchOptions | None = None,
    ) -> dict[str, SearchResult]:
        """Look up several words one after another.

        A word whose lookup fails is logged and mapped to an empty result;
        the remaining words are still searched.  When ``options.delay`` is
        positive, that many milliseconds are slept between two lookups.

        Args:
            words: Words to look up, in order.
            options: Extraction passes and batch delay.

        Returns:
            Mapping of each input word to its result, in input order.
        """
        options = options or SearchOptions()
        word_list = list(words)
        results: dict[str, SearchResult] = {}

        for index, word in enumerate(word_list):
            try:
                results[word] = await self.search(word, options)
            except Exception as exc:  # noqa: BLE001
                logger.warning("search_multiple_word_failed", word=word, error=str(exc))
                results[word] = SearchResult.empty(word)

            if options.delay > 0 and index < len(word_list) - 1:
                await self._sleep(options.delay / 1000)

        logger.info(
            "search_multiple_completed",
            words=len(word_list),
            with_results=sum(1 for result in results.values() if result.has_results),
        )
        return results

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> MalayDictionary:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
