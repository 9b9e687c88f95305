"""Launcher — wires transport, delivery engine and router together."""

import sys
from typing import Optional

from cmdbot.config import BotConfig
from cmdbot.domain.delivery import DeliveryEngine
from cmdbot.adapters.discord.router import CommandRouter
from cmdbot.adapters.discord.transport import DiscordTransport
from cmdbot.ports.inbound import CommandDispatcherPort


def _log(msg: str):
    print(msg, file=sys.stderr)


def create_router(
    dispatcher: CommandDispatcherPort,
    config: Optional[BotConfig] = None,
) -> CommandRouter:
    """Build a CommandRouter backed by the Discord transport."""
    config = config or BotConfig.from_env()
    delivery = DeliveryEngine(DiscordTransport(), config.delivery)
    return CommandRouter(dispatcher, delivery)


def run(dispatcher: CommandDispatcherPort, config: Optional[BotConfig] = None) -> None:
    """Connect to the gateway and block until the client closes."""
    config = config or BotConfig.from_env()
    if not config.token:
        raise ValueError("DISCORD_TOKEN is not set")
    router = create_router(dispatcher, config)
    _log(f"starting router (message limit {config.delivery.message_limit})")
    router.run(config.token)
