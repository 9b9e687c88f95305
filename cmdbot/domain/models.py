"""Domain data models — pure Python dataclasses."""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Sequence, Tuple, Union


class ReactionKind(IntEnum):
    """Canned reactions, addressable by ordinal."""

    SUCCESS = 0
    WARNING = 1
    FAILURE = 2


@dataclass(frozen=True)
class SharedChannelOrigin:
    """A message posted in a guild text channel."""

    channel: Any
    guild: Any
    member: Any
    event: Any  # the inbound message

    @property
    def author(self) -> Any:
        return self.event.author


@dataclass(frozen=True)
class DirectOrigin:
    """A message received in a direct-message channel."""

    channel: Any
    event: Any

    @property
    def author(self) -> Any:
        return self.event.author


Origin = Union[SharedChannelOrigin, DirectOrigin]


@dataclass(frozen=True)
class ParsedCommand:
    """Whitespace tokenization of a command message."""

    command: str
    arguments: Tuple[str, ...]
    argument_tail: str


@dataclass(frozen=True)
class OutboundChunk:
    """One bounded slice of a reply that exceeds the message limit."""

    index: int
    total: int
    text: str

    @property
    def is_last(self) -> bool:
        return self.index == self.total - 1


@dataclass
class DeliveryResult:
    """Messages sent for one logical reply, in chunk order."""

    messages: Sequence[Any] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.messages)

    def __iter__(self):
        return iter(self.messages)


@dataclass(frozen=True)
class EmbedField:
    name: str
    value: str
    inline: bool = True


@dataclass(frozen=True)
class EmbedSpec:
    """Transport-neutral description of a rich embed."""

    title: str = ""
    description: str = ""
    colour: int = 0
    fields: Tuple[EmbedField, ...] = ()


@dataclass(frozen=True)
class MentionPolicy:
    """Which mentions an outbound message may ping.

    Each attribute is either a flag or an explicit list of mentionables.
    """

    everyone: bool = False
    users: Union[bool, Sequence[Any]] = True
    roles: Union[bool, Sequence[Any]] = False
