"""Gateway and server configuration with environment variable loading.

Pydantic-based settings resolved once at startup and passed explicitly into
the gateway, so request handling never reads ambient state.

Base URL policy:
    - Served from a local development host: always http://localhost:3000.
    - Anywhere else: CHAT_API_URL is required. A missing override raises
      ConfigurationError instead of silently pointing production at
      localhost.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

LOCAL_DEFAULT_BASE_URL = "http://localhost:3000"
LOCAL_HOSTS = frozenset({"localhost", "127.0.0.1", "::1"})
DEFAULT_USER_ID = "web-user"


class ConfigurationError(ValueError):
    """Raised when settings cannot be resolved for the current environment."""


def is_local_host(host: str) -> bool:
    """Return True if host is a recognized local development host."""
    return host.strip().lower() in LOCAL_HOSTS


def resolve_base_url(host: str, override: str | None) -> str:
    """Pick the backend base URL for the host the client is served from.

    Args:
        host: Public hostname of this deployment.
        override: Externally supplied backend URL (CHAT_API_URL).

    Returns:
        The backend base URL.

    Raises:
        ConfigurationError: If host is not local and no override is given.
    """
    if is_local_host(host):
        return LOCAL_DEFAULT_BASE_URL

    if not override or not override.strip():
        raise ConfigurationError(
            f"CHAT_API_URL is required when serving from '{host}'. "
            "Set it in the environment or .env"
        )
    return override.strip()


class GatewaySettings(BaseModel):
    """Configuration for the backend gateway.

    Attributes:
        base_url: Backend root URL, without trailing slash.
        environment: Deployment environment name (development, production...).
        user_id: Identifier sent with every chat request.
    """

    base_url: str = Field(..., description="Backend root URL")
    environment: str = Field(
        default_factory=lambda: os.getenv("APP_ENV", "development"),
        description="Deployment environment name",
    )
    user_id: str = Field(
        default_factory=lambda: os.getenv("CHAT_USER_ID", DEFAULT_USER_ID),
        min_length=1,
        description="Identifier sent with every chat request",
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an http(s) URL and drop any trailing slash."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"base_url must start with http:// or https://, got '{v}'")
        return v.rstrip("/")

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"


class ServerSettings(BaseModel):
    """Configuration for the NiceGUI web server."""

    host: str = Field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = Field(default_factory=lambda: int(os.getenv("PORT", "8080")), ge=1, le=65535)
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    title: str = "Chatbot PSTI"


def get_gateway_settings() -> GatewaySettings:
    """Create gateway settings from environment.

    Reads CHAT_PUBLIC_HOST (default localhost), CHAT_API_URL, APP_ENV and
    CHAT_USER_ID.

    Returns:
        Configured GatewaySettings instance.

    Raises:
        ConfigurationError: If no backend URL can be resolved.
    """
    host = os.getenv("CHAT_PUBLIC_HOST", "localhost")
    base_url = resolve_base_url(host, os.getenv("CHAT_API_URL"))
    return GatewaySettings(base_url=base_url)


def get_server_settings() -> ServerSettings:
    """Create server settings from environment."""
    return ServerSettings()
