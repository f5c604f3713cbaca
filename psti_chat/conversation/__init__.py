"""Conversation state for one chat session.

Responsibilities:
    - Ordered, append-only message log seeded with a greeting
    - Idle/Awaiting state machine enforcing one request in flight
    - Turning gateway results and errors into bot messages
    - Notifying views of every change

Depends only on the gateway's result/error contract, not on its transport.
"""

from psti_chat.conversation.state import (
    FALLBACK_REPLY,
    GREETING,
    ChatGateway,
    ConversationState,
    InvalidTransitionError,
    QuickReply,
)

__all__ = [
    "FALLBACK_REPLY",
    "GREETING",
    "ChatGateway",
    "ConversationState",
    "InvalidTransitionError",
    "QuickReply",
]
