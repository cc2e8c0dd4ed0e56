"""Application settings loaded from environment variables.

Uses Pydantic Settings v2 for validated, type-safe configuration.  Every
transport default (timeout, delay, retries, proxy) is read through this
module; library callers can still override any of them per
:class:`~malay_dictionary.dictionary.MalayDictionary` instance.

Usage::

    from malay_dictionary.config.settings import get_settings

    settings = get_settings()
    timeout_ms = settings.timeout_ms
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library-wide configuration backed by ``MALAY_DICT_*`` environment variables.

    All fields have defaults, so the library works without any environment
    set up.  An optional ``.env`` file in the working directory is read too.
    """

    model_config = SettingsConfigDict(
        env_prefix="MALAY_DICT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    timeout_ms: int = Field(default=30_000, gt=0)
    """Per-request timeout in milliseconds.  An in-flight request is aborted
    once it elapses and the attempt counts as a failure."""

    delay_ms: int = Field(default=1_000, ge=0)
    """Courtesy delay in milliseconds applied before every request is sent."""

    retries: int = Field(default=3, ge=1)
    """Total number of attempts per request (not additional retries)."""

    user_agent: Optional[str] = None
    """Fixed User-Agent string.  When unset a browser-like one is picked once
    per client instance."""

    follow_redirects: bool = True
    """Follow up to five HTTP redirects per request."""

    # ------------------------------------------------------------------
    # Proxy
    # ------------------------------------------------------------------

    proxy_host: Optional[str] = None
    """Forward proxy host.  Proxying is disabled unless both host and port are set."""

    proxy_port: Optional[int] = Field(default=None, gt=0, lt=65536)
    """Forward proxy port."""

    proxy_protocol: Literal["http", "https"] = "http"
    """Scheme used to reach the proxy itself."""

    proxy_username: Optional[str] = None
    """Basic-auth username for the proxy.  Ignored without a password."""

    proxy_password: Optional[str] = None
    """Basic-auth password for the proxy."""

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------

    log_level: str = "INFO"
    """Logging verbosity.  One of: DEBUG, INFO, WARNING, ERROR, CRITICAL."""


@lru_cache
def get_settings() -> Settings:
    """Return the cached :class:`Settings` instance.

    Call ``get_settings.cache_clear()`` after changing the environment (for
    example in tests) to force a re-read.
    """
    return Settings()
