"""Command tokenization — slug, arguments and raw argument tail."""

import re

from cmdbot.domain.models import ParsedCommand

_WHITESPACE_RE = re.compile(r"\s+")


def tokenize(text: str) -> ParsedCommand:
    """Split ``text`` on whitespace into a :class:`ParsedCommand`.

    ``argument_tail`` is the original text after the slug and the whitespace
    run that follows it, so internal spacing and newlines survive.

    Raises:
        ValueError: if ``text`` contains no token at all.
    """
    if not text or not text.strip():
        raise ValueError("cannot tokenize empty command text")

    tokens = text.split()
    parts = _WHITESPACE_RE.split(text.lstrip(), maxsplit=1)
    tail = parts[1] if len(parts) == 2 else ""
    return ParsedCommand(
        command=tokens[0],
        arguments=tuple(tokens[1:]),
        argument_tail=tail,
    )
