"""Exception hierarchy for malay-dictionary.

All custom exceptions subclass ``MalayDictionaryError``, so callers can catch
everything the library raises with a single ``except`` clause.

Hierarchy::

    MalayDictionaryError
    ├── ValidationError          (empty or whitespace-only query)
    ├── TransportError           (url: str | None)
    │   ├── HttpStatusError      (status_code: int, url: str)
    │   ├── NetworkError         (url: str)
    │   └── RequestError         (request could not be built or sent)
    └── SearchError              (word: str, cause: Exception | None)
"""

from __future__ import annotations


class MalayDictionaryError(Exception):
    """Base class for all malay-dictionary exceptions."""


class ValidationError(MalayDictionaryError):
    """Raised when a search query is empty or whitespace-only.

    Raised before any network call is attempted.
    """


# ---------------------------------------------------------------------------
# Transport exceptions
# ---------------------------------------------------------------------------


class TransportError(MalayDictionaryError):
    """Base class for failures of a single HTTP request.

    Args:
        message: Human-readable description of the failure.
        url: The requested URL, when known.
    """

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class HttpStatusError(TransportError):
    """Raised when the server answers with a status outside 2xx/3xx.

    Args:
        status_code: Numeric HTTP status of the response.
        url: The requested URL.
        reason: Optional reason phrase (e.g. ``"Not Found"``).
    """

    def __init__(self, status_code: int, url: str, reason: str = "") -> None:
        message = f"HTTP {status_code}"
        if reason:
            message += f": {reason}"
        super().__init__(message, url=url)
        self.status_code = status_code


class NetworkError(TransportError):
    """Raised when a request never receives a response.

    Covers connection failures, timeouts, dropped connections and redirect
    loops.

    Args:
        url: The requested URL.
        detail: Optional low-level description from the HTTP library.
    """

    def __init__(self, url: str, detail: str = "") -> None:
        message = "Network error: No response received"
        if detail:
            message += f" ({detail})"
        super().__init__(message, url=url)


class RequestError(TransportError):
    """Raised for any other request failure (malformed URL, bad configuration).

    Args:
        message: Description of what went wrong.
        url: The requested URL, when known.
    """

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(f"Request error: {message}", url=url)


# ---------------------------------------------------------------------------
# Domain exceptions
# ---------------------------------------------------------------------------


class SearchError(MalayDictionaryError):
    """Raised by ``MalayDictionary.search`` when a lookup fails.

    Wraps the underlying transport (or unexpected) error together with the
    word that was being searched.

    Args:
        word: The word as passed to ``search``.
        cause: The original exception, also chained as ``__cause__``.
    """

    def __init__(self, word: str, cause: Exception | None = None) -> None:
        detail = str(cause) if cause is not None else "Unknown error"
        super().__init__(f'Failed to search for word "{word}": {detail}')
        self.word = word
        self.cause = cause

    @property
    def status_code(self) -> int | None:
        """HTTP status of the wrapped error, if it was a status error."""
        if isinstance(self.cause, HttpStatusError):
            return self.cause.status_code
        return None

    @property
    def url(self) -> str | None:
        """URL of the wrapped transport error, if any."""
        if isinstance(self.cause, TransportError):
            return self.cause.url
        return None
