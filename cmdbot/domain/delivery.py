"""Delivery engine — ordered, chunked sends and reactions over a transport.

Every send is scheduled as an asyncio task as soon as it is requested, so
callers never block. Completion is reported through optional callbacks
attached to those tasks, or by awaiting the returned :class:`Delivery`.
"""

from __future__ import annotations

import asyncio
import sys
import threading
from typing import TYPE_CHECKING, Any, Awaitable, Callable, List, Optional, Sequence

from cmdbot.domain.formatting import normalize_reaction, split_message
from cmdbot.domain.models import (
    DeliveryResult,
    EmbedSpec,
    MentionPolicy,
    OutboundChunk,
    ReactionKind,
)

if TYPE_CHECKING:
    from cmdbot.config import DeliveryConfig
    from cmdbot.ports.outbound import TransportPort

SuccessCallback = Callable[[Any], None]
FailureCallback = Callable[[BaseException], None]


def _log(msg: str):
    print(msg, file=sys.stderr)


class Delivery:
    """Handle for the sends issued for one logical reply.

    Awaiting it yields a :class:`DeliveryResult` with the sent messages in
    chunk order, or raises the first send failure.
    """

    def __init__(self, tasks: Sequence[asyncio.Future]):
        self.tasks: List[asyncio.Future] = list(tasks)

    def done(self) -> bool:
        return all(task.done() for task in self.tasks)

    async def _collect(self) -> DeliveryResult:
        if not self.tasks:
            return DeliveryResult([])
        messages = await asyncio.gather(*self.tasks)
        return DeliveryResult(list(messages))

    def __await__(self):
        return self._collect().__await__()


_FAILED = object()


class _ChunkTracker:
    """Buffers chunk outcomes by index until every chunk has completed.

    The aggregate success callback fires once all chunks are done, provided
    the last chunk was sent; it receives the sent messages in chunk order.
    """

    def __init__(self, total: int, on_success: Optional[Callable[[DeliveryResult], None]]):
        self._results: List[Any] = [None] * total
        self._remaining = total
        self._last_sent = False
        self._on_success = on_success
        self._lock = threading.Lock()

    def record(self, chunk: OutboundChunk, message: Any) -> None:
        self._complete(chunk, message)

    def record_failure(self, chunk: OutboundChunk) -> None:
        self._complete(chunk, _FAILED)

    def _complete(self, chunk: OutboundChunk, outcome: Any) -> None:
        with self._lock:
            self._results[chunk.index] = outcome
            if chunk.is_last and outcome is not _FAILED:
                self._last_sent = True
            self._remaining -= 1
            fire = self._remaining == 0 and self._last_sent
            sent = [r for r in self._results if r is not _FAILED] if fire else None
        if fire and self._on_success is not None:
            self._on_success(DeliveryResult(sent))


def _task_error(task: asyncio.Future) -> Optional[BaseException]:
    if task.cancelled():
        return asyncio.CancelledError()
    return task.exception()


class DeliveryEngine:
    """Turns replies into transport sends, preserving chunk order."""

    def __init__(self, transport: "TransportPort", config: "DeliveryConfig"):
        self._transport = transport
        self._config = config
        self._in_flight: set = set()  # strong refs so pending sends are not collected

    @property
    def message_limit(self) -> int:
        return self._config.message_limit

    def split(self, text: Optional[str]) -> List[OutboundChunk]:
        return split_message(text, self._config.message_limit)

    # -- Sending --

    def send_split(
        self,
        channel: Any,
        text: Optional[str],
        on_success: Optional[Callable[[DeliveryResult], None]] = None,
        on_failure: Optional[FailureCallback] = None,
        mentions: Optional[MentionPolicy] = None,
    ) -> Delivery:
        """Send ``text`` as as many messages as the limit requires.

        ``on_success`` fires once, after every chunk has completed, if the
        last chunk was sent; it gets the sent messages in chunk order.
        ``on_failure`` fires for each failed chunk without affecting the rest.
        """
        chunks = self.split(text)
        tracker = _ChunkTracker(len(chunks), on_success)
        tasks = []
        for chunk in chunks:
            task = self._schedule(
                self._transport.send_message(channel, content=chunk.text, mentions=mentions)
            )
            task.add_done_callback(
                self._chunk_done(tracker, chunk, on_failure)
            )
            tasks.append(task)
        return Delivery(tasks)

    def send_single(
        self,
        channel: Any,
        text: str,
        on_success: Optional[SuccessCallback] = None,
        on_failure: Optional[FailureCallback] = None,
        mentions: Optional[MentionPolicy] = None,
    ) -> Delivery:
        """Send ``text`` as one message, without splitting or sanitizing."""
        return self._send_one(
            self._transport.send_message(channel, content=text, mentions=mentions),
            on_success,
            on_failure,
        )

    def send_embed(
        self,
        channel: Any,
        embed: EmbedSpec,
        on_success: Optional[SuccessCallback] = None,
        on_failure: Optional[FailureCallback] = None,
    ) -> Delivery:
        return self._send_one(
            self._transport.send_message(channel, embed=embed),
            on_success,
            on_failure,
        )

    def send_text_with_embed(
        self,
        channel: Any,
        text: str,
        embed: EmbedSpec,
        on_success: Optional[SuccessCallback] = None,
        on_failure: Optional[FailureCallback] = None,
        mentions: Optional[MentionPolicy] = None,
    ) -> Delivery:
        """Send ``text`` and ``embed`` together in a single message."""
        return self._send_one(
            self._transport.send_message(channel, content=text, embed=embed, mentions=mentions),
            on_success,
            on_failure,
        )

    # -- Reactions --

    def react(self, message: Any, reaction: Optional[str]) -> None:
        """Add ``reaction`` to ``message``; empty input is ignored."""
        if not reaction:
            return
        emoji = normalize_reaction(reaction)
        task = self._schedule(self._transport.add_reaction(message, emoji))
        task.add_done_callback(self._reaction_done(emoji))

    def react_kind(self, message: Any, kind: ReactionKind) -> None:
        self.react(message, self._config.reaction_for(ReactionKind(kind)))

    # -- Internals --

    @property
    def in_flight(self) -> int:
        return len(self._in_flight)

    def _schedule(self, coro: Awaitable[Any]) -> asyncio.Future:
        task = asyncio.ensure_future(coro)
        self._in_flight.add(task)
        task.add_done_callback(self._in_flight.discard)
        return task

    def _send_one(
        self,
        coro: Awaitable[Any],
        on_success: Optional[SuccessCallback],
        on_failure: Optional[FailureCallback],
    ) -> Delivery:
        task = self._schedule(coro)

        def _done(t: asyncio.Future):
            error = _task_error(t)
            if error is not None:
                self._report_failure(error, on_failure, "send")
            elif on_success is not None:
                on_success(t.result())

        task.add_done_callback(_done)
        return Delivery([task])

    def _chunk_done(
        self,
        tracker: _ChunkTracker,
        chunk: OutboundChunk,
        on_failure: Optional[FailureCallback],
    ) -> Callable[[asyncio.Future], None]:
        def _done(task: asyncio.Future):
            error = _task_error(task)
            if error is not None:
                tracker.record_failure(chunk)
                self._report_failure(
                    error, on_failure, f"chunk {chunk.index + 1}/{chunk.total}"
                )
                return
            tracker.record(chunk, task.result())

        return _done

    @staticmethod
    def _reaction_done(emoji: str) -> Callable[[asyncio.Future], None]:
        def _done(task: asyncio.Future):
            error = _task_error(task)
            if error is not None:
                _log(f"[delivery] reaction {emoji!r} failed: {error!r}")

        return _done

    @staticmethod
    def _report_failure(
        error: BaseException, on_failure: Optional[FailureCallback], what: str
    ) -> None:
        if on_failure is not None:
            on_failure(error)
        else:
            _log(f"[delivery] {what} failed: {error!r}")
