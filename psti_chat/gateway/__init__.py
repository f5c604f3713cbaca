"""HTTP gateway to the remote chatbot backend.

Responsibilities:
    - One POST /chat exchange per user message
    - Normalizing heterogeneous reply payloads into GatewayResult
    - Classifying failures into the GatewayError taxonomy
    - Health probing and configuration introspection

Has no knowledge of the conversation state machine.
"""

from psti_chat.gateway.client import (
    BackendGateway,
    classify_failure,
    extract_response_text,
    normalize_reply,
)
from psti_chat.gateway.diagnostics import run_connection_check
from psti_chat.gateway.errors import (
    CorsBlockedError,
    EndpointNotFoundError,
    GatewayError,
    HttpStatusError,
    NetworkUnreachableError,
    UnknownGatewayError,
)

__all__ = [
    "BackendGateway",
    "CorsBlockedError",
    "EndpointNotFoundError",
    "GatewayError",
    "HttpStatusError",
    "NetworkUnreachableError",
    "UnknownGatewayError",
    "classify_failure",
    "extract_response_text",
    "normalize_reply",
    "run_connection_check",
]
