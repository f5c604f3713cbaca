"""In-memory test doubles."""

import asyncio

from psti_chat.config import DEFAULT_USER_ID
from psti_chat.models.schemas import GatewayResult


class FakeGateway:
    """ChatGateway double that records calls and returns a preset outcome.

    Set `release` to an asyncio.Event to hold send() until the event is set.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []
        self.outcome: GatewayResult | BaseException = GatewayResult(text="Siap membantu!")
        self.release: asyncio.Event | None = None

    async def send(self, text: str, user_id: str = DEFAULT_USER_ID) -> GatewayResult:
        self.calls.append((text, user_id))
        if self.release is not None:
            await self.release.wait()
        if isinstance(self.outcome, BaseException):
            raise self.outcome
        return self.outcome
