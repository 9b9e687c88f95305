"""Discord event router — turns discord.Message events into Invocations.

CommandRouter is a thin discord.Client subclass: it builds one Invocation
per inbound message and hands it to the command dispatcher.
"""

import sys
from typing import Any

import discord

from cmdbot.domain.delivery import DeliveryEngine
from cmdbot.domain.invocation import Invocation
from cmdbot.domain.models import DirectOrigin, SharedChannelOrigin
from cmdbot.ports.inbound import CommandDispatcherPort


def _log(msg: str):
    print(msg, file=sys.stderr)


def build_invocation(
    message: discord.Message,
    delivery: DeliveryEngine,
    client: Any = None,
) -> Invocation:
    """Convert a discord message into an origin-agnostic Invocation."""
    if message.guild is None:
        origin = DirectOrigin(channel=message.channel, event=message)
    else:
        origin = SharedChannelOrigin(
            channel=message.channel,
            guild=message.guild,
            member=message.author,
            event=message,
        )
    return Invocation(origin, message.content, delivery, client=client)


class CommandRouter(discord.Client):
    """Routes guild and direct messages to a command dispatcher."""

    def __init__(
        self,
        dispatcher: CommandDispatcherPort,
        delivery: DeliveryEngine,
        **discord_kwargs,
    ):
        intents = discord.Intents.default()
        intents.message_content = True
        intents.dm_messages = True
        super().__init__(intents=intents, **discord_kwargs)
        self._dispatcher = dispatcher
        self._delivery = delivery

    @property
    def delivery(self) -> DeliveryEngine:
        return self._delivery

    async def on_ready(self):
        _log(f"[router] logged in as {self.user}")
        self._dispatcher.on_load(self)

    async def on_message(self, message: discord.Message):
        # Guard: self.user can be None before on_ready fires
        if not self.user or message.author == self.user:
            return
        if not message.content or not message.content.strip():
            return

        invocation = build_invocation(message, self._delivery, client=self)
        try:
            await self._dispatcher.dispatch(invocation)
        except Exception as e:
            _log(f"[router] dispatch of {invocation.command!r} failed: {e!r}")

