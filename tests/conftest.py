"""Pytest fixtures and shared test configuration.

Fixtures:
    - gateway_settings: Settings pointing at a fake backend host
    - fake_gateway: In-memory ChatGateway with a controllable outcome
    - fixed_clock: Deterministic clock for message timestamps
"""

from collections.abc import Callable
from datetime import datetime

import pytest

from psti_chat.config import GatewaySettings
from tests.fakes import FakeGateway

BACKEND_URL = "http://backend.test"


@pytest.fixture
def gateway_settings() -> GatewaySettings:
    """Return settings for a backend at a fixed test URL."""
    return GatewaySettings(base_url=BACKEND_URL, environment="test")


@pytest.fixture
def fake_gateway() -> FakeGateway:
    """Return a fresh fake gateway that succeeds by default."""
    return FakeGateway()


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """Return a clock frozen at 14:05."""
    return lambda: datetime(2026, 10, 19, 14, 5, 30)
