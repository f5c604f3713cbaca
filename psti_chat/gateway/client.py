"""HTTP gateway to the PSTI chatbot backend.

Performs a single exchange per call, normalizes the backend's reply shape
and classifies every failure into the GatewayError taxonomy.

Design notes:

1. **Stateless and reentrant** - Each call opens its own httpx.AsyncClient.
   Single-flight is enforced by the conversation, not here.

2. **Extraction policy** - The backend has shipped its answer under
   `response`, `text`, `message` and `reply` over time. The first truthy
   field in that order wins so old and new payloads both work.

3. **No retry** - A failure is classified once and raised. httpx's default
   timeout is the only timeout.
"""

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from psti_chat.config import DEFAULT_USER_ID, GatewaySettings
from psti_chat.gateway.errors import (
    CorsBlockedError,
    EndpointNotFoundError,
    GatewayError,
    HttpStatusError,
    NetworkUnreachableError,
    UnknownGatewayError,
)
from psti_chat.models.schemas import ChatPayload, GatewayInfo, GatewayResult, HealthStatus

logger = logging.getLogger(__name__)

CHAT_ENDPOINT = "/chat"
HEALTH_ENDPOINT = "/health"
NO_RESPONSE_TEXT = "Maaf, tidak ada respons dari server."

# Reply fields in priority order
RESPONSE_FIELDS = ("response", "text", "message", "reply")

NETWORK_FAILURE_PATTERNS = (
    "Failed to fetch",
    "Network request failed",
    "ECONNREFUSED",
    "Connection refused",
)

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


def extract_response_text(data: Any) -> str:
    """Extract the canonical reply text from an arbitrary JSON value.

    Args:
        data: Decoded JSON body of the backend reply.

    Returns:
        The first truthy of response/text/message/reply, the body itself if
        it is a string, or a fixed placeholder.
    """
    if isinstance(data, Mapping):
        for field in RESPONSE_FIELDS:
            value = data.get(field)
            if value:
                return value if isinstance(value, str) else str(value)

    if isinstance(data, str):
        return data

    return NO_RESPONSE_TEXT


def normalize_reply(data: Any) -> GatewayResult:
    """Build a GatewayResult from a decoded backend reply.

    Only the extracted text decides the reply. Metadata of an unexpected
    shape is dropped rather than rejected.
    """
    fields = data if isinstance(data, Mapping) else {}

    return GatewayResult(
        text=extract_response_text(data),
        source=_scalar_str(fields.get("from")) or "unknown",
        intent=_scalar_str(fields.get("intent")),
        confidence=_optional_float(fields.get("confidence")),
    )


def classify_failure(exc: BaseException, base_url: str) -> GatewayError:
    """Map any failure raised during an exchange onto the error taxonomy.

    Args:
        exc: The exception raised while talking to the backend.
        base_url: Backend root URL, quoted in remediation hints.

    Returns:
        A GatewayError. GatewayError instances are returned unchanged.
    """
    if isinstance(exc, GatewayError):
        return exc

    message = str(exc) or type(exc).__name__

    if isinstance(exc, httpx.ConnectError | httpx.ConnectTimeout) or any(
        pattern in message for pattern in NETWORK_FAILURE_PATTERNS
    ):
        return NetworkUnreachableError(base_url)

    if "CORS" in message:
        return CorsBlockedError()

    return UnknownGatewayError(message)


class BackendGateway:
    """Client for the chatbot backend's /chat and /health endpoints.

    Wraps httpx with:
    - Reply normalization into GatewayResult
    - Failure classification into GatewayError subclasses
    - Debug logging of each exchange
    """

    def __init__(
        self,
        settings: GatewaySettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the gateway.

        Args:
            settings: Resolved gateway settings (base URL, environment).
            transport: Optional httpx transport, used by tests to stub the backend.
        """
        self._settings = settings
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._settings.base_url

    @property
    def chat_url(self) -> str:
        return f"{self.base_url}{CHAT_ENDPOINT}"

    @property
    def health_url(self) -> str:
        return f"{self.base_url}{HEALTH_ENDPOINT}"

    @property
    def settings(self) -> GatewaySettings:
        return self._settings

    def _debug_log(self, label: str, data: Any) -> None:
        """Log exchange details, in development only."""
        if self._settings.is_development:
            logger.debug(f"[API {label}] {data}")

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self._transport)

    async def send(self, text: str, user_id: str = DEFAULT_USER_ID) -> GatewayResult:
        """Send a user message and return the normalized reply.

        Args:
            text: The user's message.
            user_id: Identifier of the chatting user.

        Returns:
            Normalized GatewayResult.

        Raises:
            EndpointNotFoundError: Backend answered 404.
            HttpStatusError: Backend answered another non-2xx status.
            NetworkUnreachableError: Backend could not be reached.
            CorsBlockedError: Request was blocked by a CORS policy.
            UnknownGatewayError: Any other failure.
        """
        try:
            payload = ChatPayload(message=text, user_id=user_id).model_dump(by_alias=True)
            self._debug_log(f"Chat request to {self.chat_url}", payload)

            async with self._client() as client:
                response = await client.post(self.chat_url, json=payload, headers=JSON_HEADERS)

            self._debug_log("Chat HTTP status", response.status_code)

            if not response.is_success:
                self._debug_log("Chat error response", response.text)
                if response.status_code == 404:
                    raise EndpointNotFoundError(self.base_url)
                raise HttpStatusError(response.status_code)

            data = response.json()
            self._debug_log("Chat response data", data)
        except GatewayError as e:
            logger.error(f"Chat request failed ({e.kind}): {e.hint}")
            raise
        except Exception as e:
            error = classify_failure(e, self.base_url)
            logger.error(f"Chat request failed ({error.kind}): {e}")
            raise error from e

        return normalize_reply(data)

    async def check_health(self) -> HealthStatus:
        """Probe the backend's health endpoint. Never raises.

        Returns:
            HealthStatus with available=False and an error message on failure.
        """
        try:
            async with self._client() as client:
                response = await client.get(
                    self.health_url, headers={"Accept": "application/json"}
                )

            if not response.is_success:
                return HealthStatus(available=False)

            data = response.json()
            self._debug_log("Health check", data)
            fields = data if isinstance(data, Mapping) else {}

            return HealthStatus(
                available=True,
                status=_optional_str(fields.get("status")),
                model=_optional_str(fields.get("model")),
                timestamp=_optional_str(fields.get("time")),
            )

        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Health check failed: {e}")
            return HealthStatus(available=False, error=str(e) or type(e).__name__)

    def get_config(self) -> GatewayInfo:
        """Describe where this gateway sends requests."""
        return GatewayInfo(
            base_url=self.base_url,
            chat_endpoint=CHAT_ENDPOINT,
            health_endpoint=HEALTH_ENDPOINT,
            full_chat_url=self.chat_url,
            full_health_url=self.health_url,
            environment=self._settings.environment,
        )


def _optional_str(value: Any) -> str | None:
    return None if value is None else str(value)


def _scalar_str(value: Any) -> str | None:
    """Return a non-empty string for scalar values, None for anything else."""
    if isinstance(value, str):
        return value or None
    if isinstance(value, int | float) and not isinstance(value, bool) and value:
        return str(value)
    return None


def _optional_float(value: Any) -> float | None:
    """Return a non-zero number as float, None for anything else."""
    if isinstance(value, int | float) and not isinstance(value, bool) and value:
        return float(value)
    return None
