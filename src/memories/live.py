"""Process-wide change-feed and live wall, wired to the SQL read model."""

import asyncio
import logging

from src.memories.feed import SubmissionFeed
from src.memories.repository.read_models import SqlSubmissionReadModel
from src.stats.wall import WallView

logger = logging.getLogger(__name__)

submission_feed = SubmissionFeed()
wall_view = WallView(fetch=SqlSubmissionReadModel().list_submissions)


def get_submission_feed() -> SubmissionFeed:
    """Dependency for the change-feed. Override in tests."""
    return submission_feed


def get_wall_view() -> WallView:
    """Dependency for the live wall. Override in tests."""
    return wall_view


def log_follower_exit(task: asyncio.Task) -> None:
    """Done-callback for the task running `WallView.follow`."""
    if task.cancelled():
        return
    error = task.exception()
    if error is not None:
        logger.error("Live wall stopped following the change-feed", exc_info=error)
    else:
        logger.info("Live wall stopped following the change-feed")
