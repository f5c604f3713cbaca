"""Unit tests for gateway configuration and base URL resolution."""

import pytest
import pytest_check as check
from pydantic import ValidationError

from psti_chat.config import (
    LOCAL_DEFAULT_BASE_URL,
    ConfigurationError,
    GatewaySettings,
    ServerSettings,
    get_gateway_settings,
    resolve_base_url,
)


class TestResolveBaseUrl:
    """Tests for the local-vs-deployed base URL policy."""

    @pytest.mark.parametrize("host", ["localhost", "127.0.0.1", "::1", "LOCALHOST"])
    def test_local_host_uses_local_default(self, host: str) -> None:
        """Local hosts always talk to the local backend."""
        assert resolve_base_url(host, None) == LOCAL_DEFAULT_BASE_URL

    def test_local_host_ignores_override(self) -> None:
        """An override does not redirect a local dev session."""
        assert resolve_base_url("localhost", "https://api.example.com") == LOCAL_DEFAULT_BASE_URL

    def test_remote_host_uses_override(self) -> None:
        assert (
            resolve_base_url("chat.psti.ac.id", " https://api.psti.ac.id ")
            == "https://api.psti.ac.id"
        )

    @pytest.mark.parametrize("override", [None, "", "   "])
    def test_remote_host_without_override_fails(self, override: str | None) -> None:
        """A deployed client never silently falls back to a default backend."""
        with pytest.raises(ConfigurationError, match="CHAT_API_URL is required"):
            resolve_base_url("chat.psti.ac.id", override)


class TestGatewaySettings:
    """Tests for GatewaySettings validation."""

    def test_strips_trailing_slash(self) -> None:
        settings = GatewaySettings(base_url="https://api.psti.ac.id/")

        assert settings.base_url == "https://api.psti.ac.id"

    def test_rejects_non_http_url(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            GatewaySettings(base_url="ftp://api.psti.ac.id")

        assert "http://" in str(exc_info.value)

    def test_defaults(self) -> None:
        settings = GatewaySettings(base_url="http://localhost:3000", environment="development")

        check.equal(settings.user_id, "web-user")
        check.is_true(settings.is_development)


class TestGetGatewaySettings:
    """Tests for get_gateway_settings environment loading."""

    def test_local_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHAT_PUBLIC_HOST", "localhost")
        monkeypatch.setenv("APP_ENV", "development")
        monkeypatch.delenv("CHAT_API_URL", raising=False)

        settings = get_gateway_settings()

        check.equal(settings.base_url, LOCAL_DEFAULT_BASE_URL)
        check.equal(settings.environment, "development")

    def test_deployed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHAT_PUBLIC_HOST", "chat.psti.ac.id")
        monkeypatch.setenv("CHAT_API_URL", "https://api.psti.ac.id/")
        monkeypatch.setenv("APP_ENV", "production")

        settings = get_gateway_settings()

        check.equal(settings.base_url, "https://api.psti.ac.id")
        check.equal(settings.environment, "production")

    def test_user_id_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHAT_PUBLIC_HOST", "localhost")
        monkeypatch.setenv("CHAT_USER_ID", "kiosk-lab")

        assert get_gateway_settings().user_id == "kiosk-lab"

    def test_deployed_without_override_fails(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHAT_PUBLIC_HOST", "chat.psti.ac.id")
        monkeypatch.delenv("CHAT_API_URL", raising=False)

        with pytest.raises(ConfigurationError):
            get_gateway_settings()


class TestServerSettings:
    """Tests for ServerSettings environment loading."""

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "9000")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = ServerSettings()

        check.equal(settings.port, 9000)
        check.equal(settings.log_level, "DEBUG")

    def test_rejects_invalid_port(self) -> None:
        with pytest.raises(ValidationError):
            ServerSettings(port=70000)
