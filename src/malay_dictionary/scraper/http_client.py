"""Async HTTP client with courtesy delay, retry/backoff and error normalization.

Uses ``httpx`` for all HTTP requests.  Every failure is normalized into one of
the :class:`~malay_dictionary.core.exceptions.TransportError` subclasses:

- :class:`HttpStatusError`: the server answered with a 4xx/5xx status.
- :class:`NetworkError`: no response was received (connect failure,
  timeout, dropped connection, redirect loop, proxy failure).
- :class:`RequestError`: the request could not be built or sent at all.

A request is attempted up to ``retries`` times through a tenacity
``AsyncRetrying`` policy.  After attempt ``n`` fails the client sleeps ``2**n`` seconds (2 s, 4 s, 8 s, ...) before the next one.
Independently of that backoff, the configured courtesy ``delay`` is slept
before every attempt is sent.
"""

from __future__ import annotations

import asyncio
import logging
import random
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from types import TracebackType

import httpx
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from malay_dictionary.core.exceptions import (
    HttpStatusError,
    NetworkError,
    RequestError,
    TransportError,
)
from malay_dictionary.core.schemas.transport import TransportConfig
from malay_dictionary.scraper.config import (
    BACKOFF_MULTIPLIER_S,
    BROWSER_USER_AGENTS,
    DEFAULT_HEADERS,
    MAX_REDIRECTS,
)

logger = logging.getLogger(__name__)

#: Signature of the sleep coroutine (seconds); injectable for tests.
SleepFunc = Callable[[float], Awaitable[None]]


# ---------------------------------------------------------------------------
# Result dataclass
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FetchResult:
    """Successful response of :meth:`HttpClient.get`.

    Attributes:
        text: Decoded response body.
        status_code: HTTP status of the final response.
        final_url: URL after following redirects.
        attempts: Number of attempts it took (1 when the first one succeeded).
    """

    text: str
    status_code: int
    final_url: str
    attempts: int = 1


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def pick_user_agent() -> str:
    """Return a plausible desktop browser User-Agent string."""
    return random.choice(BROWSER_USER_AGENTS)


def _log_retry(retry_state: RetryCallState) -> None:
    """tenacity ``before_sleep`` hook: one line per failed, retried attempt."""
    exc = retry_state.outcome.exception() if retry_state.outcome else None
    url = getattr(exc, "url", None)
    wait = retry_state.next_action.sleep if retry_state.next_action else 0.0
    logger.info(
        "scraper: attempt %d for %s failed (%s); retrying in %.0fs",
        retry_state.attempt_number,
        url,
        exc,
        wait,
    )


# ---------------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------------


class HttpClient:
    """GET-only HTTP client used by :class:`~malay_dictionary.dictionary.MalayDictionary`.

    Header state set via :meth:`set_referer`, :meth:`set_user_agent` and
    :meth:`set_cookie` is sticky: it applies to every later request made by
    this instance.  Headers passed to :meth:`get` apply to that call only.

    Args:
        config: Transport options.  Defaults to :class:`TransportConfig`
            defaults.
        client: Optional injected :class:`httpx.AsyncClient` (for testing).
            An injected client is not closed by :meth:`aclose`.
        sleep: Coroutine used for the courtesy delay and backoff waits.
    """

    def __init__(
        self,
        config: TransportConfig | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        sleep: SleepFunc = asyncio.sleep,
    ) -> None:
        self._config = config or TransportConfig()
        self._sleep = sleep
        self._headers: dict[str, str] = {
            "User-Agent": self._config.user_agent or pick_user_agent(),
            **DEFAULT_HEADERS,
        }
        self._owns_client = client is None
        self._client = client if client is not None else self._build_http_client()

    @property
    def config(self) -> TransportConfig:
        return self._config

    @property
    def headers(self) -> dict[str, str]:
        """Copy of the sticky headers sent with every request."""
        return dict(self._headers)

    @property
    def user_agent(self) -> str:
        return self._headers["User-Agent"]

    # ------------------------------------------------------------------
    # Sticky header state
    # ------------------------------------------------------------------

    def set_user_agent(self, user_agent: str) -> None:
        self._headers["User-Agent"] = user_agent

    def set_referer(self, referer: str) -> None:
        self._headers["Referer"] = referer

    def set_cookie(self, cookie: str) -> None:
        self._headers["Cookie"] = cookie

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------

    async def get(
        self,
        url: str,
        *,
        referer: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> FetchResult:
        """GET ``url`` with retries and return the response body.

        Args:
            url: Absolute URL to fetch.
            referer: Referer for this request only; overrides the sticky one.
            headers: Extra headers for this request only.

        Returns:
            A :class:`FetchResult` for the first attempt that succeeded.

        Raises:
            HttpStatusError: The last attempt got a 4xx/5xx response.
            NetworkError: The last attempt received no response.
            RequestError: The last attempt could not be sent.
        """
        request_headers = dict(self._headers)
        if headers:
            request_headers.update(headers)
        if referer is not None:
            request_headers["Referer"] = referer

        retrying = AsyncRetrying(
            stop=stop_after_attempt(self._config.retries),
            wait=wait_exponential(multiplier=BACKOFF_MULTIPLIER_S, exp_base=2),
            retry=retry_if_exception_type(TransportError),
            before_sleep=_log_retry,
            sleep=self._sleep,
            reraise=True,
        )
        attempts = 0
        try:
            async for attempt in retrying:
                with attempt:
                    attempts = attempt.retry_state.attempt_number
                    response = await self._send(url, request_headers)
        except TransportError as exc:
            logger.warning(
                "scraper: giving up on %s after %d attempt(s): %s",
                url,
                attempts,
                exc,
            )
            raise

        return FetchResult(
            text=response.text,
            status_code=response.status_code,
            final_url=str(response.url),
            attempts=attempts,
        )

    async def _send(self, url: str, headers: dict[str, str]) -> httpx.Response:
        """Run one attempt: courtesy delay, GET, status check."""
        if self._config.delay > 0:
            await self._sleep(self._config.delay / 1000)

        try:
            response = await self._client.get(
                url,
                headers=headers,
                follow_redirects=self._config.follow_redirects,
                timeout=self._config.timeout / 1000,
            )
        except httpx.UnsupportedProtocol as exc:
            raise RequestError(str(exc), url=url) from exc
        except httpx.TimeoutException as exc:
            raise NetworkError(url, detail=f"timeout after {self._config.timeout}ms") from exc
        except (httpx.TransportError, httpx.TooManyRedirects) as exc:
            raise NetworkError(url, detail=str(exc) or type(exc).__name__) from exc
        except (httpx.RequestError, httpx.InvalidURL, ValueError) as exc:
            raise RequestError(str(exc), url=url) from exc

        # Injected clients carry their own max_redirects; enforce the cap here too.
        if len(response.history) > MAX_REDIRECTS:
            raise NetworkError(url, detail=f"Exceeded maximum allowed redirects ({MAX_REDIRECTS})")

        if response.status_code >= 400:
            raise HttpStatusError(response.status_code, url, reason=response.reason_phrase)

        logger.debug(
            "scraper: HTTP %d for %s (%d bytes)",
            response.status_code,
            url,
            len(response.content),
        )
        return response

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def _build_http_client(self) -> httpx.AsyncClient:
        """Create the owned :class:`httpx.AsyncClient` from the transport config."""
        proxy = self._config.proxy
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self._config.timeout / 1000),
            follow_redirects=self._config.follow_redirects,
            max_redirects=MAX_REDIRECTS,
            proxy=proxy.url if proxy is not None else None,
        )

    async def aclose(self) -> None:
        """Close the underlying client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> HttpClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
