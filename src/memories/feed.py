"""In-process change-feed for submissions.

Every confirmed create or delete is published here; subscribers (the live wall,
streaming clients) each get their own bounded queue. A subscriber that falls
behind loses its backlog and receives a single RESYNC instead.
"""

import asyncio
import contextlib
import logging
from collections.abc import AsyncIterator

from src.memories.dtos import SubmissionChange

logger = logging.getLogger(__name__)

DEFAULT_QUEUE_SIZE = 1000


class Subscription:
    def __init__(self, maxsize: int) -> None:
        self._queue: asyncio.Queue[SubmissionChange | None] = asyncio.Queue(maxsize=maxsize)
        self.closed = False

    def push(self, change: SubmissionChange | None) -> None:
        try:
            self._queue.put_nowait(change)
        except asyncio.QueueFull:
            logger.warning("Change-feed subscriber lagging, dropping backlog")
            while not self._queue.empty():
                self._queue.get_nowait()
            self._queue.put_nowait(SubmissionChange.resync() if change is not None else None)

    def close(self) -> None:
        self.closed = True
        self.push(None)

    def __aiter__(self) -> "Subscription":
        return self

    async def __anext__(self) -> SubmissionChange:
        change = await self._queue.get()
        if change is None:
            raise StopAsyncIteration
        return change


class SubmissionFeed:
    def __init__(self, queue_size: int = DEFAULT_QUEUE_SIZE) -> None:
        self._queue_size = queue_size
        self._subscriptions: set[Subscription] = set()

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    def publish(self, change: SubmissionChange) -> None:
        logger.debug(f"Publishing {change.type.value} for submission {change.submission_id}")
        for subscription in list(self._subscriptions):
            subscription.push(change)

    @contextlib.asynccontextmanager
    async def subscribe(self) -> AsyncIterator[Subscription]:
        subscription = Subscription(maxsize=self._queue_size)
        self._subscriptions.add(subscription)
        try:
            yield subscription
        finally:
            self._subscriptions.discard(subscription)

    def close(self) -> None:
        """End every open subscription."""
        for subscription in list(self._subscriptions):
            subscription.close()
