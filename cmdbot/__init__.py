"""cmdbot — command invocation and reply delivery for a Discord bot."""

from cmdbot.config import __version__, BotConfig, DeliveryConfig
from cmdbot.domain import (
    Delivery,
    DeliveryEngine,
    DeliveryResult,
    EmbedField,
    EmbedSpec,
    Invocation,
    InvocationStateError,
    MentionPolicy,
    ReactionKind,
)

__all__ = [
    "__version__",
    "BotConfig",
    "DeliveryConfig",
    "Delivery",
    "DeliveryEngine",
    "DeliveryResult",
    "EmbedField",
    "EmbedSpec",
    "Invocation",
    "InvocationStateError",
    "MentionPolicy",
    "ReactionKind",
]
