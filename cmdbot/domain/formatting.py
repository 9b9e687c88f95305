"""Outbound text shaping: mention sanitization, splitting, reaction refs.

Pure Python, no framework dependencies.
"""

from __future__ import annotations

import re
from typing import List, Optional

from cmdbot.domain.models import OutboundChunk

# Cyrillic "е" (U+0435) keeps the text readable but stops the broadcast ping
_MENTION_SUBSTITUTIONS = (
    ("@everyone", "@\u0435veryone"),
    ("@here", "@h\u0435re"),
)

# <:name:id> and <a:name:id> -> name:id
CUSTOM_EMOJI_RE = re.compile(r"<a?:(.+):(\d+)>")


def sanitise_mentions(text: str) -> str:
    """Defuse @everyone / @here and trim surrounding whitespace."""
    for mention, replacement in _MENTION_SUBSTITUTIONS:
        text = text.replace(mention, replacement)
    return text.strip()


def _split_text(text: str, limit: int) -> List[str]:
    pieces: List[str] = []
    while len(text) > limit:
        # Never search further back than the slack to the next multiple of limit
        leeway = limit - (len(text) % limit)
        index = text.rfind("\n", 0, limit + 1)
        if index < leeway:
            index = text.rfind(" ", 0, limit + 1)
        if index < leeway:
            index = limit
        head = text[:index].strip()
        if head:
            pieces.append(head)
        text = text[index:].strip()
    if text:
        pieces.append(text)
    return pieces


def split_message(text: Optional[str], limit: int = 2000) -> List[OutboundChunk]:
    """Sanitize ``text`` and split it into chunks of at most ``limit`` chars.

    Boundaries prefer the last newline, then the last space, before the
    limit; a hard cut happens only when neither lies within the leeway
    window. Empty or whitespace-only input yields no chunks.
    """
    if limit <= 0:
        raise ValueError(f"limit must be positive, got {limit}")
    if text is None:
        return []
    pieces = _split_text(sanitise_mentions(text), limit)
    return [
        OutboundChunk(index=i, total=len(pieces), text=piece)
        for i, piece in enumerate(pieces)
    ]


def normalize_reaction(reaction: str) -> str:
    """Turn custom emote markup into the ``name:id`` form the API expects."""
    return CUSTOM_EMOJI_RE.sub(r"\1:\2", reaction)
