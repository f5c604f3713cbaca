"""Conversation state machine.

Owns the ordered message log and the Idle/Awaiting phase. At most one
request is in flight: submit() is rejected while awaiting a reply, and
every outstanding send resolves to exactly one bot message, whether the
gateway succeeded or failed.
"""

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime
from enum import Enum
from typing import Protocol

from psti_chat.config import DEFAULT_USER_ID
from psti_chat.gateway.errors import GatewayError, UnknownGatewayError
from psti_chat.models.schemas import (
    ConversationPhase,
    ConversationSnapshot,
    GatewayResult,
    Message,
    Sender,
)

logger = logging.getLogger(__name__)

GREETING = "Halo! Saya Chatbot PSTI 👋 Silakan tanyakan apa saja tentang Lab PSTI!"
FALLBACK_REPLY = "Maaf, saya tidak mengerti."

Listener = Callable[[ConversationSnapshot], None]


class ChatGateway(Protocol):
    """The part of the gateway contract the conversation depends on."""

    async def send(self, text: str, user_id: str = DEFAULT_USER_ID) -> GatewayResult: ...


class QuickReply(str, Enum):
    """Predefined topic shortcuts, submitted as if typed by the user."""

    ABOUT_LAB = "Tentang Lab PSTI"
    PROJECTS = "Project PSTI"
    FACILITIES = "Fasilitas Lab"
    OPERATING_HOURS = "Jam Operasional"

    @property
    def caption(self) -> str:
        """Button caption shown in the UI."""
        return _CAPTIONS[self]


_CAPTIONS = {
    QuickReply.ABOUT_LAB: "📚 Tentang Lab",
    QuickReply.PROJECTS: "🚀 Project",
    QuickReply.FACILITIES: "🔧 Fasilitas",
    QuickReply.OPERATING_HOURS: "⏰ Jam Buka",
}


class InvalidTransitionError(RuntimeError):
    """Raised when a completion arrives while no request is outstanding."""


class ConversationState:
    """Message log plus single-flight Idle/Awaiting state machine.

    Only this class mutates the log and the phase. Views read snapshots
    delivered to subscribed listeners.
    """

    def __init__(
        self,
        gateway: ChatGateway,
        user_id: str = DEFAULT_USER_ID,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize with a single bot greeting.

        Args:
            gateway: Backend gateway used to send user messages.
            user_id: Identifier sent with every request.
            clock: Source of wall-clock time for message timestamps.
        """
        self._gateway = gateway
        self._user_id = user_id
        self._clock = clock
        self._phase = ConversationPhase.IDLE
        self._listeners: list[Listener] = []
        self._messages: list[Message] = [Message.create(Sender.BOT, GREETING, clock())]

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    @property
    def phase(self) -> ConversationPhase:
        return self._phase

    @property
    def pending(self) -> bool:
        return self._phase is ConversationPhase.AWAITING

    @property
    def is_fresh(self) -> bool:
        """True while only the greeting has been exchanged."""
        return len(self._messages) == 1

    def snapshot(self) -> ConversationSnapshot:
        return ConversationSnapshot(messages=self.messages, phase=self._phase)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called with a snapshot after every change.

        Returns:
            A callable that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def submit(self, raw_text: str) -> None:
        """Append a user message and wait for the bot's reply.

        No-op for blank text or while a reply is pending.

        Args:
            raw_text: Text as typed by the user.
        """
        text = raw_text.strip() if raw_text else ""
        if not text:
            return
        if self.pending:
            logger.debug("Submit ignored: a reply is still pending")
            return

        self._messages.append(Message.create(Sender.USER, text, self._clock()))
        self._phase = ConversationPhase.AWAITING
        self._notify()

        try:
            result = await self._gateway.send(text, self._user_id)
        except GatewayError as e:
            self.on_error(e)
        except Exception as e:
            logger.exception("Gateway raised an unclassified failure")
            self.on_error(UnknownGatewayError(str(e) or type(e).__name__))
        except asyncio.CancelledError:
            self.on_error(UnknownGatewayError("permintaan dibatalkan"))
            raise
        else:
            self.on_result(result)

    async def quick_reply(self, label: QuickReply | str) -> None:
        """Submit one of the predefined topic shortcuts.

        Raises:
            ValueError: If label is not a known quick reply.
        """
        reply = QuickReply(label)
        if self.pending:
            return
        await self.submit(reply.value)

    def on_result(self, result: GatewayResult) -> None:
        """Complete the outstanding request with the backend's reply."""
        self._require_awaiting("on_result")
        self._complete(result.text.strip() or FALLBACK_REPLY)

    def on_error(self, error: GatewayError) -> None:
        """Complete the outstanding request with the error's remediation hint."""
        self._require_awaiting("on_error")
        logger.warning(f"Reply failed ({error.kind}), showing hint to user")
        self._complete(error.hint)

    def _require_awaiting(self, operation: str) -> None:
        if not self.pending:
            raise InvalidTransitionError(f"{operation} called with no request outstanding")

    def _complete(self, text: str) -> None:
        self._phase = ConversationPhase.IDLE
        self._messages.append(Message.create(Sender.BOT, text, self._clock()))
        self._notify()

    def _notify(self) -> None:
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Conversation listener failed")
