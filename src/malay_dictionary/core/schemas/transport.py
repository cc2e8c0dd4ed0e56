"""Pydantic schemas for transport configuration (retry policy, proxy)."""

from __future__ import annotations

from typing import Literal, Optional
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field

from malay_dictionary.config.settings import Settings, get_settings


class ProxyAuth(BaseModel):
    """Basic credentials passed through to the forward proxy."""

    model_config = ConfigDict(frozen=True)

    username: str
    password: str


class ProxyConfig(BaseModel):
    """HTTP/HTTPS forward proxy descriptor.

    Attributes:
        host: Proxy hostname or IP.
        port: Proxy port.
        protocol: Scheme used to talk to the proxy.
        auth: Optional basic credentials.
    """

    model_config = ConfigDict(frozen=True)

    host: str = Field(..., min_length=1)
    port: int = Field(..., gt=0, lt=65536)
    protocol: Literal["http", "https"] = "http"
    auth: Optional[ProxyAuth] = None

    @property
    def url(self) -> str:
        """Proxy URL in the form httpx expects, credentials percent-encoded."""
        userinfo = ""
        if self.auth is not None:
            userinfo = (
                f"{quote(self.auth.username, safe='')}:"
                f"{quote(self.auth.password, safe='')}@"
            )
        return f"{self.protocol}://{userinfo}{self.host}:{self.port}"


class TransportConfig(BaseModel):
    """Options recognised by :class:`~malay_dictionary.scraper.http_client.HttpClient`.

    Durations are in milliseconds.

    Attributes:
        timeout: Per-request timeout.
        retries: Total attempts per request.
        delay: Courtesy delay applied before every attempt.
        proxy: Optional forward proxy.
        user_agent: Fixed User-Agent; a browser-like one is picked when ``None``.
        follow_redirects: Follow up to five redirects.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    timeout: int = Field(default=30_000, gt=0)
    retries: int = Field(default=3, ge=1)
    delay: int = Field(default=1_000, ge=0)
    proxy: Optional[ProxyConfig] = None
    user_agent: Optional[str] = None
    follow_redirects: bool = True

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> TransportConfig:
        """Build a config whose defaults come from ``MALAY_DICT_*`` settings."""
        settings = settings or get_settings()
        proxy: ProxyConfig | None = None
        if settings.proxy_host and settings.proxy_port:
            auth: ProxyAuth | None = None
            if settings.proxy_username and settings.proxy_password:
                auth = ProxyAuth(
                    username=settings.proxy_username,
                    password=settings.proxy_password,
                )
            proxy = ProxyConfig(
                host=settings.proxy_host,
                port=settings.proxy_port,
                protocol=settings.proxy_protocol,
                auth=auth,
            )
        return cls(
            timeout=settings.timeout_ms,
            retries=settings.retries,
            delay=settings.delay_ms,
            proxy=proxy,
            user_agent=settings.user_agent,
            follow_redirects=settings.follow_redirects,
        )
