"""Bounded multi-producer / single-consumer hand-off between tasks."""

from __future__ import annotations

import asyncio
from collections import deque
from typing import AsyncIterator, Deque, Generic, TypeVar

T = TypeVar("T")


class ChannelClosed(Exception):
    """The other side of the channel is gone."""


class BoundedChannel(Generic[T]):
    """Fixed capacity queue whose closed state follows its sender handles.

    Sends block while ``capacity`` items are buffered. The channel is closed
    for the receiver once every handle returned by :meth:`sender` (and their
    clones) has been released and the buffer is empty.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self.capacity = capacity
        self._items: Deque[T] = deque()
        self._senders = 0
        self._receiver_closed = False
        lock = asyncio.Lock()
        self._not_empty = asyncio.Condition(lock)
        self._not_full = asyncio.Condition(lock)

    @property
    def pending(self) -> int:
        return len(self._items)

    @property
    def open_senders(self) -> int:
        return self._senders

    def sender(self) -> "Sender[T]":
        if self._receiver_closed:
            raise ChannelClosed("receiver closed")
        self._senders += 1
        return Sender(self)

    async def recv(self) -> T:
        async with self._not_empty:
            await self._not_empty.wait_for(lambda: self._items or self._senders == 0)
            if not self._items:
                raise ChannelClosed("all senders released")
            item = self._items.popleft()
            # One slot freed, one blocked sender can use it.
            self._not_full.notify(1)
            return item

    async def close_receiver(self) -> None:
        """Stop receiving; blocked and future sends fail with ChannelClosed."""

        async with self._not_full:
            self._receiver_closed = True
            self._items.clear()
            self._not_full.notify_all()

    def __aiter__(self) -> AsyncIterator[T]:
        return self._iterate()

    async def _iterate(self) -> AsyncIterator[T]:
        while True:
            try:
                yield await self.recv()
            except ChannelClosed:
                return

    # ------------------------------------------------------------------
    async def _send(self, item: T) -> None:
        async with self._not_full:
            await self._not_full.wait_for(
                lambda: self._receiver_closed or len(self._items) < self.capacity
            )
            if self._receiver_closed:
                raise ChannelClosed("receiver closed")
            self._items.append(item)
            self._not_empty.notify(1)

    async def _release(self) -> None:
        # Count drops before the lock so a cancelled release still closes.
        self._senders -= 1
        async with self._not_empty:
            self._not_empty.notify_all()


class Sender(Generic[T]):
    """Producer handle; the channel stays open while any handle is held."""

    def __init__(self, channel: BoundedChannel[T]) -> None:
        self._channel = channel
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def clone(self) -> "Sender[T]":
        if self._closed:
            raise ChannelClosed("sender already released")
        return self._channel.sender()

    async def send(self, item: T) -> None:
        if self._closed:
            raise ChannelClosed("sender already released")
        await self._channel._send(item)

    async def aclose(self) -> None:
        if self._closed:
            return
        self._closed = True
        await self._channel._release()

    async def __aenter__(self) -> "Sender[T]":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


__all__ = ["BoundedChannel", "ChannelClosed", "Sender"]
