"""Unit tests for the entry point's run modes."""

import httpx
import pytest

from psti_chat import main as main_module
from psti_chat.config import GatewaySettings
from psti_chat.gateway import BackendGateway


def test_run_check_exit_code_on_unreachable_backend(gateway_settings: GatewaySettings) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    gateway = BackendGateway(gateway_settings, transport=httpx.MockTransport(handler))

    assert main_module.run_check(gateway) == 1


def test_main_check_mode_exits(monkeypatch: pytest.MonkeyPatch) -> None:
    """RUN_MODE=check runs the connection check and exits with its result."""
    monkeypatch.setenv("RUN_MODE", "check")
    monkeypatch.setenv("CHAT_PUBLIC_HOST", "localhost")
    monkeypatch.setattr(main_module, "run_check", lambda gateway: 0)

    with pytest.raises(SystemExit) as exc_info:
        main_module.main()

    assert exc_info.value.code == 0


def test_main_uses_configured_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Logging is configured from ServerSettings.log_level."""
    levels: list[str] = []
    monkeypatch.setenv("RUN_MODE", "check")
    monkeypatch.setenv("CHAT_PUBLIC_HOST", "localhost")
    monkeypatch.setenv("LOG_LEVEL", "warning")
    monkeypatch.setattr(main_module, "run_check", lambda gateway: 0)
    monkeypatch.setattr(
        main_module, "configure_logging", lambda server: levels.append(server.log_level)
    )

    with pytest.raises(SystemExit):
        main_module.main()

    assert levels == ["WARNING"]
