"""Configuration and shared state."""

__version__ = "0.1.0"

import os
import sys
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from dotenv import load_dotenv

from cmdbot.domain.models import ReactionKind

load_dotenv()

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)

DEFAULT_MESSAGE_LIMIT = 2000

DISCORD_TOKEN = os.getenv("DISCORD_TOKEN", "")

_raw_limit = os.getenv("BOT_MESSAGE_LIMIT", str(DEFAULT_MESSAGE_LIMIT)).strip()
try:
    MESSAGE_LIMIT = int(_raw_limit)
except ValueError:
    MESSAGE_LIMIT = 0
if MESSAGE_LIMIT <= 0:
    _stderr_print(
        f"Unsupported BOT_MESSAGE_LIMIT={_raw_limit!r}, falling back to {DEFAULT_MESSAGE_LIMIT}"
    )
    MESSAGE_LIMIT = DEFAULT_MESSAGE_LIMIT

DEFAULT_REACTIONS = {
    ReactionKind.SUCCESS: "✅",
    ReactionKind.WARNING: "❓",
    ReactionKind.FAILURE: "❌",
}

# Read once at startup; never mutated afterwards
REACTIONS: Mapping[ReactionKind, str] = MappingProxyType({
    ReactionKind.SUCCESS: os.getenv("BOT_REACTION_SUCCESS", "").strip()
    or DEFAULT_REACTIONS[ReactionKind.SUCCESS],
    ReactionKind.WARNING: os.getenv("BOT_REACTION_WARNING", "").strip()
    or DEFAULT_REACTIONS[ReactionKind.WARNING],
    ReactionKind.FAILURE: os.getenv("BOT_REACTION_FAILURE", "").strip()
    or DEFAULT_REACTIONS[ReactionKind.FAILURE],
})


# ── Typed config ────────────────────────────────────────────


@dataclass
class DeliveryConfig:
    message_limit: int = DEFAULT_MESSAGE_LIMIT
    reactions: Mapping[ReactionKind, str] = field(
        default_factory=lambda: MappingProxyType(dict(DEFAULT_REACTIONS))
    )

    def __post_init__(self):
        if self.message_limit <= 0:
            raise ValueError(f"message_limit must be positive, got {self.message_limit}")
        missing = [kind.name for kind in ReactionKind if kind not in self.reactions]
        if missing:
            raise ValueError(f"no reaction configured for: {', '.join(missing)}")

    def reaction_for(self, kind: ReactionKind) -> str:
        return self.reactions[kind]


@dataclass
class BotConfig:
    """Typed configuration for the bot process."""

    token: str = ""
    delivery: DeliveryConfig = field(default_factory=DeliveryConfig)

    @classmethod
    def from_env(cls) -> "BotConfig":
        """Create BotConfig from environment variables."""
        return cls(
            token=DISCORD_TOKEN,
            delivery=DeliveryConfig(
                message_limit=MESSAGE_LIMIT,
                reactions=REACTIONS,
            ),
        )
