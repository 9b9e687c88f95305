"""Domain layer — invocation, tokenization and delivery."""

from cmdbot.domain.models import (
    DeliveryResult,
    DirectOrigin,
    EmbedField,
    EmbedSpec,
    MentionPolicy,
    OutboundChunk,
    ParsedCommand,
    ReactionKind,
    SharedChannelOrigin,
)
from cmdbot.domain.formatting import normalize_reaction, sanitise_mentions, split_message
from cmdbot.domain.tokenizer import tokenize
from cmdbot.domain.delivery import Delivery, DeliveryEngine
from cmdbot.domain.invocation import Invocation, InvocationStateError

__all__ = [
    "DeliveryResult",
    "DirectOrigin",
    "EmbedField",
    "EmbedSpec",
    "MentionPolicy",
    "OutboundChunk",
    "ParsedCommand",
    "ReactionKind",
    "SharedChannelOrigin",
    "normalize_reaction",
    "sanitise_mentions",
    "split_message",
    "tokenize",
    "Delivery",
    "DeliveryEngine",
    "Invocation",
    "InvocationStateError",
]
