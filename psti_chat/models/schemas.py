from datetime import UTC, datetime
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Display-only clock format (hour:minute, 24h)
TIMESTAMP_FORMAT = "%H:%M"


class Sender(str, Enum):
    """Who produced a message. Only affects rendering side and avatar."""

    USER = "user"
    BOT = "bot"


class ConversationPhase(str, Enum):
    """States of the single-flight conversation machine."""

    IDLE = "idle"
    AWAITING = "awaiting"


class Message(BaseModel):
    """A single chat bubble. Immutable once created.

    Attributes:
        sender: Message author (user or bot).
        text: Stripped, non-empty message text.
        timestamp: Wall-clock time of creation formatted as HH:MM.
    """

    model_config = ConfigDict(frozen=True)

    sender: Sender
    text: str = Field(..., min_length=1)
    timestamp: str

    @field_validator("text", mode="before")
    @classmethod
    def strip_text(cls, v: str) -> str:
        """Strip whitespace from text before validation."""
        if isinstance(v, str):
            return v.strip()
        return v

    @classmethod
    def create(cls, sender: Sender, text: str, now: datetime | None = None) -> "Message":
        """Build a message stamped with the current (or given) time."""
        moment = now or datetime.now()
        return cls(sender=sender, text=text, timestamp=moment.strftime(TIMESTAMP_FORMAT))


class ConversationSnapshot(BaseModel):
    """Read-only view of the conversation handed to listeners.

    Attributes:
        messages: Ordered message log, oldest first.
        phase: Current state of the conversation machine.
    """

    model_config = ConfigDict(frozen=True)

    messages: tuple[Message, ...]
    phase: ConversationPhase

    @property
    def pending(self) -> bool:
        return self.phase is ConversationPhase.AWAITING


class ChatPayload(BaseModel):
    """Request body for POST /chat."""

    model_config = ConfigDict(populate_by_name=True)

    message: str = Field(..., min_length=1)
    user_id: str = Field("web-user", alias="userId")


class GatewayResult(BaseModel):
    """Normalized reply from the chatbot backend.

    Attributes:
        text: Canonical reply text after extraction.
        source: Backend subsystem that answered (knowledge, ml, memory...).
        intent: Detected intent, if the backend reported one.
        confidence: Intent confidence, if the backend reported one.
        received_at: UTC time the reply was normalized.
        success: Always True; failures are raised as GatewayError.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    source: str = "unknown"
    intent: str | None = None
    confidence: float | None = None
    received_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    success: Literal[True] = True


class HealthStatus(BaseModel):
    """Outcome of a backend health probe.

    Attributes:
        available: Whether the backend answered the probe successfully.
        status: Status string reported by the backend.
        model: Model identifier reported by the backend.
        timestamp: Server time reported by the backend.
        error: Failure description when the probe could not complete.
    """

    available: bool
    status: str | None = None
    model: str | None = None
    timestamp: str | None = None
    error: str | None = None


class GatewayInfo(BaseModel):
    """Read-only description of where the gateway sends requests."""

    base_url: str
    chat_endpoint: str
    health_endpoint: str
    full_chat_url: str
    full_health_url: str
    environment: str
