"""Pydantic models shared by the gateway, conversation and UI layers.

Models:
    - Message: A single immutable chat bubble
    - ConversationSnapshot: Read-only view of the conversation
    - ChatPayload: Outbound /chat request body
    - GatewayResult: Normalized backend reply
    - HealthStatus: Outcome of a /health probe
    - GatewayInfo: Gateway configuration introspection
"""

from psti_chat.models.schemas import (
    ChatPayload,
    ConversationPhase,
    ConversationSnapshot,
    GatewayInfo,
    GatewayResult,
    HealthStatus,
    Message,
    Sender,
)

__all__ = [
    "ChatPayload",
    "ConversationPhase",
    "ConversationSnapshot",
    "GatewayInfo",
    "GatewayResult",
    "HealthStatus",
    "Message",
    "Sender",
]
