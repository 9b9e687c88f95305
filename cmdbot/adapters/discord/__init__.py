"""Discord adapters built on discord.py."""

from cmdbot.adapters.discord.transport import DiscordTransport
from cmdbot.adapters.discord.router import CommandRouter, build_invocation

__all__ = ["DiscordTransport", "CommandRouter", "build_invocation"]
