"""Tests for environment-backed settings and transport configuration.

Covers:
- Settings defaults and ``MALAY_DICT_*`` overrides
- validation of out-of-range values
- TransportConfig.from_settings(), including proxy assembly
- ProxyConfig.url credential encoding
"""

from __future__ import annotations

import pydantic
import pytest

from malay_dictionary.config.settings import Settings, get_settings
from malay_dictionary.core.schemas.transport import (
    ProxyAuth,
    ProxyConfig,
    TransportConfig,
)


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)

        assert settings.timeout_ms == 30_000
        assert settings.delay_ms == 1_000
        assert settings.retries == 3
        assert settings.user_agent is None
        assert settings.follow_redirects is True
        assert settings.proxy_host is None
        assert settings.log_level == "INFO"

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MALAY_DICT_TIMEOUT_MS", "5000")
        monkeypatch.setenv("MALAY_DICT_FOLLOW_REDIRECTS", "false")

        settings = get_settings()

        assert settings.timeout_ms == 5000
        assert settings.follow_redirects is False

    def test_unprefixed_variables_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TIMEOUT_MS", "5000")

        assert Settings(_env_file=None).timeout_ms == 30_000

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()

    @pytest.mark.parametrize(
        ("name", "value"),
        [
            ("MALAY_DICT_RETRIES", "0"),
            ("MALAY_DICT_DELAY_MS", "-1"),
            ("MALAY_DICT_TIMEOUT_MS", "0"),
            ("MALAY_DICT_PROXY_PORT", "70000"),
            ("MALAY_DICT_PROXY_PROTOCOL", "socks5"),
        ],
    )
    def test_invalid_values_rejected(self, monkeypatch: pytest.MonkeyPatch, name: str, value: str) -> None:
        monkeypatch.setenv(name, value)

        with pytest.raises(pydantic.ValidationError):
            Settings(_env_file=None)


class TestTransportConfig:
    def test_defaults(self) -> None:
        config = TransportConfig()

        assert (config.timeout, config.retries, config.delay) == (30_000, 3, 1_000)
        assert config.proxy is None
        assert config.follow_redirects is True

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            TransportConfig(retires=5)  # type: ignore[call-arg]

    def test_retries_must_be_positive(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            TransportConfig(retries=0)

    def test_is_frozen(self) -> None:
        config = TransportConfig()

        with pytest.raises(pydantic.ValidationError):
            config.retries = 5  # type: ignore[misc]

    def test_from_settings_copies_transport_fields(self) -> None:
        settings = Settings(_env_file=None, timeout_ms=1234, delay_ms=0, retries=2, user_agent="UA/1")

        config = TransportConfig.from_settings(settings)

        assert config.timeout == 1234
        assert config.delay == 0
        assert config.retries == 2
        assert config.user_agent == "UA/1"
        assert config.proxy is None

    def test_from_settings_builds_proxy(self) -> None:
        settings = Settings(
            _env_file=None,
            proxy_host="proxy.example.com",
            proxy_port=3128,
            proxy_protocol="https",
            proxy_username="alice",
            proxy_password="s3cret",
        )

        proxy = TransportConfig.from_settings(settings).proxy

        assert proxy == ProxyConfig(
            host="proxy.example.com",
            port=3128,
            protocol="https",
            auth=ProxyAuth(username="alice", password="s3cret"),
        )

    def test_proxy_requires_host_and_port(self) -> None:
        settings = Settings(_env_file=None, proxy_host="proxy.example.com")

        assert TransportConfig.from_settings(settings).proxy is None

    def test_proxy_auth_requires_password(self) -> None:
        settings = Settings(_env_file=None, proxy_host="p", proxy_port=8080, proxy_username="alice")

        proxy = TransportConfig.from_settings(settings).proxy

        assert proxy is not None
        assert proxy.auth is None

    def test_from_settings_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MALAY_DICT_DELAY_MS", "250")

        assert TransportConfig.from_settings().delay == 250


class TestProxyUrl:
    def test_without_auth(self) -> None:
        assert ProxyConfig(host="10.0.0.1", port=8080).url == "http://10.0.0.1:8080"

    def test_with_auth(self) -> None:
        proxy = ProxyConfig(
            host="proxy.example.com",
            port=443,
            protocol="https",
            auth=ProxyAuth(username="bob", password="pw"),
        )

        assert proxy.url == "https://bob:pw@proxy.example.com:443"

    def test_credentials_are_percent_encoded(self) -> None:
        proxy = ProxyConfig(host="p", port=1, auth=ProxyAuth(username="a@b", password="p:w/d"))

        assert proxy.url == "http://a%40b:p%3Aw%2Fd@p:1"
