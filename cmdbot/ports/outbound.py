"""Outbound ports — interfaces for external system adapters."""

from typing import Any, Optional, Protocol, runtime_checkable

from cmdbot.domain.models import EmbedSpec, MentionPolicy


@runtime_checkable
class TransportPort(Protocol):
    """Interface for the chat transport that performs network I/O."""

    async def send_message(
        self,
        channel: Any,
        content: Optional[str] = None,
        embed: Optional[EmbedSpec] = None,
        mentions: Optional[MentionPolicy] = None,
    ) -> Any: ...

    async def add_reaction(self, message: Any, emoji: str) -> None: ...
