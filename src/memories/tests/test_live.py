import asyncio
import logging

import pytest

from src.memories.feed import SubmissionFeed
from src.memories.live import log_follower_exit
from src.stats.wall import WallView


@pytest.mark.asyncio
async def test_follower_crash_is_logged_when_it_happens(caplog):
    async def broken_fetch():
        raise KeyError("boom")

    wall = WallView(fetch=broken_fetch)
    feed = SubmissionFeed()

    async def crash_after_load():
        await wall.follow(feed)
        raise RuntimeError("follower crashed")

    task = asyncio.create_task(crash_after_load())
    task.add_done_callback(log_follower_exit)
    while feed.subscriber_count == 0:
        await asyncio.sleep(0)
    feed.close()
    with caplog.at_level(logging.ERROR, logger="src.memories.live"):
        await asyncio.gather(task, return_exceptions=True)
        await asyncio.sleep(0)

    assert "Live wall stopped following the change-feed" in caplog.text
    assert "follower crashed" in caplog.text


@pytest.mark.asyncio
async def test_cancelled_follower_is_not_reported(caplog):
    task = asyncio.create_task(asyncio.sleep(60))
    task.add_done_callback(log_follower_exit)
    task.cancel()
    with caplog.at_level(logging.INFO, logger="src.memories.live"):
        await asyncio.gather(task, return_exceptions=True)
        await asyncio.sleep(0)

    assert "Live wall stopped" not in caplog.text
