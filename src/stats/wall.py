"""
Live view of the blessing wall: the submission collection and its stats.

The collection and its stats are always swapped together under one lock, so a
reader never sees one updated without the other. Incremental updates are a
cache over the authoritative full recompute; anything ambiguous (a remote
delete, a feed resync) falls back to recomputing or reloading.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from uuid import UUID

from src.errors import UpstreamServiceError
from src.memories.dtos import ChangeType, SubmissionChange, SubmissionDTO
from src.memories.feed import SubmissionFeed
from src.stats.aggregation import add_submission, compute_submission_stats, remove_submission
from src.stats.dtos import SubmissionStats

logger = logging.getLogger(__name__)

SubmissionFetcher = Callable[[], Awaitable[list[SubmissionDTO]]]


@dataclass(frozen=True)
class WallSnapshot:
    submissions: list[SubmissionDTO]
    stats: SubmissionStats
    # every table represented in the unfiltered collection
    tables: list[int]


class WallView:
    def __init__(self, fetch: SubmissionFetcher, table_filter: int | None = None) -> None:
        self._fetch = fetch
        self.table_filter = table_filter
        self._lock = asyncio.Lock()
        self._submissions: list[SubmissionDTO] = []
        self._ids: set[UUID] = set()
        self._stats = SubmissionStats()
        self.loaded = False

    def _accepts(self, submission: SubmissionDTO) -> bool:
        return self.table_filter is None or submission.table_number == self.table_filter

    def _replace(self, submissions: list[SubmissionDTO]) -> None:
        kept = [s for s in submissions if self._accepts(s)]
        kept.sort(key=lambda s: s.created_at, reverse=True)
        self._submissions = kept
        self._ids = {s.id for s in kept}
        self._stats = compute_submission_stats(kept)

    def _snapshot(self, table: int | None = None) -> WallSnapshot:
        if table is None:
            return WallSnapshot(
                submissions=list(self._submissions),
                stats=self._stats,
                tables=self._stats.tables,
            )
        filtered = [s for s in self._submissions if s.table_number == table]
        return WallSnapshot(
            submissions=filtered,
            stats=compute_submission_stats(filtered),
            tables=self._stats.tables,
        )

    async def load(self) -> WallSnapshot:
        """Fetch the full collection and recompute. On failure the old state stays."""
        try:
            submissions = await self._fetch()
        except UpstreamServiceError:
            logger.warning("Wall reload failed, keeping previous state")
            raise
        except Exception as e:
            logger.warning(f"Wall reload failed, keeping previous state: {e}")
            raise UpstreamServiceError("Failed to load submissions", details=str(e)) from e

        async with self._lock:
            self._replace(submissions)
            self.loaded = True
            return self._snapshot()

    async def snapshot(self, table: int | None = None) -> WallSnapshot:
        async with self._lock:
            return self._snapshot(table)

    async def apply_insert(self, submission: SubmissionDTO) -> bool:
        """Add a new submission. Returns False if it was filtered out or already known."""
        async with self._lock:
            if not self._accepts(submission) or submission.id in self._ids:
                return False
            index = len(self._submissions)
            for i, existing in enumerate(self._submissions):
                if existing.created_at < submission.created_at:
                    index = i
                    break
            self._submissions.insert(index, submission)
            self._ids.add(submission.id)
            self._stats = add_submission(self._stats, submission)
            return True

    async def apply_local_delete(self, submission: SubmissionDTO) -> bool:
        """Apply a delete this process confirmed with the store."""
        async with self._lock:
            removed = self._remove(submission.id)
            if removed is None:
                return False
            self._stats = remove_submission(self._stats, removed)
            return True

    async def apply_remote_delete(self, submission_id: UUID) -> bool:
        """Apply a delete seen on the change-feed. Stats are fully recomputed."""
        async with self._lock:
            removed = self._remove(submission_id)
            self._stats = compute_submission_stats(self._submissions)
            return removed is not None

    def _remove(self, submission_id: UUID) -> SubmissionDTO | None:
        if submission_id not in self._ids:
            return None
        self._ids.discard(submission_id)
        for i, existing in enumerate(self._submissions):
            if existing.id == submission_id:
                return self._submissions.pop(i)
        return None

    async def reconcile(self) -> WallSnapshot:
        """Recompute stats from the in-memory collection."""
        async with self._lock:
            authoritative = compute_submission_stats(self._submissions)
            if authoritative != self._stats:
                logger.warning(
                    f"Wall stats drifted: cached={self._stats} recomputed={authoritative}"
                )
            self._stats = authoritative
            return self._snapshot()

    async def apply_change(self, change: SubmissionChange) -> None:
        if change.type == ChangeType.INSERT:
            if change.submission is not None:
                await self.apply_insert(change.submission)
        elif change.type == ChangeType.DELETE:
            if change.submission_id is not None:
                await self.apply_remote_delete(change.submission_id)
        elif change.type == ChangeType.RESYNC:
            await self.load()
        else:
            raise ValueError(f"Unhandled change type: {change.type!r}")

    async def follow(self, feed: SubmissionFeed) -> None:
        """
        Track the change-feed until it closes.

        Subscribes once and reloads right after subscribing; a RESYNC on the
        feed triggers another reload. Returns when the feed is closed.
        """
        async with feed.subscribe() as subscription:
            try:
                await self.load()
            except UpstreamServiceError:
                logger.exception("Initial wall load failed, following the feed anyway")
            async for change in subscription:
                try:
                    await self.apply_change(change)
                except UpstreamServiceError:
                    logger.exception(f"Could not apply {change.type.value} from the change-feed")
