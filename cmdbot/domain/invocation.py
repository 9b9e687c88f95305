"""Invocation — one command request, whatever channel it came from."""

from datetime import datetime
from typing import Any, Callable, Iterable, Optional, Tuple

from cmdbot.domain.delivery import Delivery, DeliveryEngine, FailureCallback, SuccessCallback
from cmdbot.domain.models import (
    DeliveryResult,
    DirectOrigin,
    EmbedField,
    EmbedSpec,
    MentionPolicy,
    Origin,
    ReactionKind,
    SharedChannelOrigin,
)
from cmdbot.domain.tokenizer import tokenize


class InvocationStateError(RuntimeError):
    """Raised when an accessor does not apply to the invocation's origin."""


class Invocation:
    """A command invoked from a guild channel or a direct message.

    Guild-only accessors raise :class:`InvocationStateError` on a direct
    message and direct-only accessors raise it on a guild message.
    Everything else works the same for both origins.
    """

    def __init__(
        self,
        origin: Origin,
        raw_text: str,
        delivery: DeliveryEngine,
        client: Any = None,
    ):
        if not isinstance(origin, (SharedChannelOrigin, DirectOrigin)):
            raise TypeError(f"unsupported origin: {type(origin).__name__}")
        parsed = tokenize(raw_text)
        self._origin = origin
        self._raw_text = raw_text
        self._command = parsed.command
        self._arguments = parsed.arguments
        self._argument_tail = parsed.argument_tail
        self._delivery = delivery
        self._client = client
        self._self_member: Any = None

    # -- Origin-independent --

    @property
    def origin(self) -> Origin:
        return self._origin

    @property
    def is_shared(self) -> bool:
        """True if invoked from a guild channel."""
        return isinstance(self._origin, SharedChannelOrigin)

    @property
    def channel(self) -> Any:
        return self._origin.channel

    @property
    def message(self) -> Any:
        return self._origin.event

    @property
    def message_id(self) -> int:
        return self._origin.event.id

    @property
    def author(self) -> Any:
        return self._origin.author

    @property
    def user(self) -> Any:
        return self.author

    @property
    def client(self) -> Any:
        return self._client

    @property
    def raw_text(self) -> str:
        return self._raw_text

    @property
    def command(self) -> str:
        return self._command

    @property
    def arguments(self) -> Tuple[str, ...]:
        return self._arguments

    @property
    def argument_tail(self) -> str:
        return self._argument_tail

    # -- Guild only --

    def _shared(self) -> SharedChannelOrigin:
        if not isinstance(self._origin, SharedChannelOrigin):
            raise InvocationStateError("Not invoked from a guild channel.")
        return self._origin

    @property
    def guild(self) -> Any:
        return self._shared().guild

    @property
    def member(self) -> Any:
        return self._shared().member

    @property
    def text_channel(self) -> Any:
        return self._shared().channel

    @property
    def shared_event(self) -> Any:
        return self._shared().event

    @property
    def self_member(self) -> Any:
        """The bot's own membership in the invoking guild."""
        guild = self._shared().guild
        if self._self_member is None:
            self._self_member = guild.me
        return self._self_member

    # -- Direct only --

    def _direct(self) -> DirectOrigin:
        if not isinstance(self._origin, DirectOrigin):
            raise InvocationStateError("Not invoked from a direct message.")
        return self._origin

    @property
    def direct_channel(self) -> Any:
        return self._direct().channel

    @property
    def direct_event(self) -> Any:
        return self._direct().event

    # -- Replies --

    def reply(
        self,
        text: str,
        on_success: Optional[Callable[[DeliveryResult], None]] = None,
        on_failure: Optional[FailureCallback] = None,
        mentions: Optional[MentionPolicy] = None,
    ) -> Delivery:
        """Reply with ``text``, split into several messages if too long."""
        return self._delivery.send_split(
            self.channel, text, on_success, on_failure, mentions=mentions
        )

    def reply_single(
        self,
        text: str,
        on_success: Optional[SuccessCallback] = None,
        on_failure: Optional[FailureCallback] = None,
        mentions: Optional[MentionPolicy] = None,
    ) -> Delivery:
        """Reply with ``text`` as one message; it is never split."""
        return self._delivery.send_single(
            self.channel, text, on_success, on_failure, mentions=mentions
        )

    def reply_embed(
        self,
        embed: EmbedSpec,
        on_success: Optional[SuccessCallback] = None,
        on_failure: Optional[FailureCallback] = None,
    ) -> Delivery:
        return self._delivery.send_embed(self.channel, embed, on_success, on_failure)

    def reply_with_embed(
        self,
        text: str,
        embed: EmbedSpec,
        on_success: Optional[SuccessCallback] = None,
        on_failure: Optional[FailureCallback] = None,
        mentions: Optional[MentionPolicy] = None,
    ) -> Delivery:
        return self._delivery.send_text_with_embed(
            self.channel, text, embed, on_success, on_failure, mentions=mentions
        )

    def send_embed(
        self,
        title: str,
        description: str,
        colour: int,
        fields: Iterable[EmbedField] = (),
        on_success: Optional[SuccessCallback] = None,
        on_failure: Optional[FailureCallback] = None,
    ) -> Delivery:
        """Build an embed from its parts and send it to the origin channel."""
        embed = EmbedSpec(
            title=title,
            description=description,
            colour=colour,
            fields=tuple(fields),
        )
        return self._delivery.send_embed(self.channel, embed, on_success, on_failure)

    # -- Reactions --

    def react(self, reaction: Optional[str]) -> None:
        """React to the invoking message with a unicode or custom emoji."""
        self._delivery.react(self.message, reaction)

    def react_success(self) -> None:
        self._delivery.react_kind(self.message, ReactionKind.SUCCESS)

    def react_warning(self) -> None:
        self._delivery.react_kind(self.message, ReactionKind.WARNING)

    def react_failure(self) -> None:
        self._delivery.react_kind(self.message, ReactionKind.FAILURE)

    def __str__(self) -> str:
        issued_at = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        return f"{self.author} issued command `{self._raw_text}` at {issued_at}."

    def __repr__(self) -> str:
        kind = "shared" if self.is_shared else "direct"
        return f"<Invocation {kind} command={self._command!r} args={len(self._arguments)}>"
