"""Inbound port — handoff from the event router to the command dispatcher."""

from typing import Any, Protocol, runtime_checkable

from cmdbot.domain.invocation import Invocation


@runtime_checkable
class CommandDispatcherPort(Protocol):
    """Interface for the dispatcher that resolves and runs command handlers."""

    def on_load(self, client: Any) -> None: ...

    async def dispatch(self, invocation: Invocation) -> None: ...
