"""Unbounded multi-producer, single-consumer event channel.

Senders never block and may live on any thread (the proxy backend runs on
its own loop); the single receiver is awaited by the UI main loop. Events
from one producer are delivered in the order they were sent.
"""

import asyncio
import threading
from collections import deque
from collections.abc import AsyncIterator

from pxt.errors import ChannelClosed, SendError
from pxt.events import AppEvent


class _Channel:
    def __init__(self) -> None:
        self.queue: deque[AppEvent] = deque()
        self.lock = threading.Lock()
        self.closed = False
        self.waiter: asyncio.Future[None] | None = None


def _wake(waiter: asyncio.Future[None]) -> None:
    if not waiter.done():
        waiter.set_result(None)


class EventSender:
    """Producer handle. Cheap to clone; all clones feed the same receiver."""

    def __init__(self, channel: _Channel) -> None:
        self._channel = channel

    def send(self, event: AppEvent) -> None:
        """Enqueue *event* without waiting.

        Raises SendError if the receiver has been closed.
        """
        channel = self._channel
        with channel.lock:
            if channel.closed:
                raise SendError(event)
            channel.queue.append(event)
            waiter, channel.waiter = channel.waiter, None
        if waiter is not None and not waiter.done():
            waiter.get_loop().call_soon_threadsafe(_wake, waiter)

    def clone(self) -> "EventSender":
        return EventSender(self._channel)

    @property
    def is_closed(self) -> bool:
        return self._channel.closed


class EventReceiver:
    """Consumer handle owned by the main loop."""

    def __init__(self, channel: _Channel) -> None:
        self._channel = channel

    async def recv(self) -> AppEvent:
        """Wait for the next event.

        Raises ChannelClosed once the receiver is closed and nothing is left.
        """
        channel = self._channel
        while True:
            with channel.lock:
                if channel.queue:
                    return channel.queue.popleft()
                if channel.closed:
                    raise ChannelClosed("event channel closed")
                waiter = asyncio.get_running_loop().create_future()
                channel.waiter = waiter
            await waiter

    def try_recv(self) -> AppEvent | None:
        """Return the next event if one is queued, otherwise None."""
        with self._channel.lock:
            if self._channel.queue:
                return self._channel.queue.popleft()
            return None

    def drain(self) -> list[AppEvent]:
        """Remove and return every queued event."""
        with self._channel.lock:
            events = list(self._channel.queue)
            self._channel.queue.clear()
        return events

    def close(self) -> None:
        """Tear down the consumer side; later sends raise SendError."""
        with self._channel.lock:
            self._channel.closed = True
            waiter, self._channel.waiter = self._channel.waiter, None
        if waiter is not None and not waiter.done():
            waiter.get_loop().call_soon_threadsafe(_wake, waiter)

    async def __aiter__(self) -> AsyncIterator[AppEvent]:
        while True:
            try:
                yield await self.recv()
            except ChannelClosed:
                return


def channel() -> tuple[EventSender, EventReceiver]:
    """Create a connected sender/receiver pair."""
    shared = _Channel()
    return EventSender(shared), EventReceiver(shared)
