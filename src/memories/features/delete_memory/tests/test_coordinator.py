from uuid import uuid4

import pytest

from src.errors import NotFoundError, UpstreamServiceError
from src.memories.dtos import ChangeType
from src.memories.feed import SubmissionFeed
from src.memories.features.delete_memory.coordinator import SubmissionDeleter
from src.memories.tests.inmemory_models import (
    InMemoryImageStore,
    InMemorySubmissionStore,
    make_submission,
)
from src.stats.aggregation import compute_submission_stats
from src.stats.wall import WallView


async def build(image_store=None, submissions=None):
    store = InMemorySubmissionStore(submissions)
    wall = WallView(fetch=store.list_submissions)
    await wall.load()
    feed = SubmissionFeed()
    deleter = SubmissionDeleter(
        read_model=store,
        write_model=store,
        image_store=image_store or InMemoryImageStore(),
        wall=wall,
        feed=feed,
    )
    return deleter, store, wall, feed


@pytest.mark.asyncio
async def test_delete_removes_photo_row_and_updates_wall():
    target = make_submission(table_number=3)
    other = make_submission(table_number=3)
    images = InMemoryImageStore()
    deleter, store, wall, feed = await build(images, [target, other])

    async with feed.subscribe() as subscription:
        await deleter.delete(target.id)
        change = await anext(subscription)

    assert images.deleted == [target.photo_url]
    assert target.id not in store.rows
    snapshot = await wall.snapshot()
    assert [s.id for s in snapshot.submissions] == [other.id]
    assert snapshot.stats.by_table == {3: 1}
    assert change.type == ChangeType.DELETE
    assert change.submission_id == target.id


@pytest.mark.parametrize(
    "images",
    [InMemoryImageStore(missing=True), InMemoryImageStore(fail_deletes=True)],
    ids=["photo-already-gone", "storage-error"],
)
@pytest.mark.asyncio
async def test_row_is_deleted_even_when_photo_delete_fails(images):
    """Scenario: the photo no longer exists in storage."""
    target = make_submission(table_number=9)
    deleter, store, wall, _ = await build(images, [target])

    await deleter.delete(target.id)

    assert store.rows == {}
    snapshot = await wall.snapshot()
    assert snapshot.stats.total == 0
    assert snapshot.stats.by_table == {}


@pytest.mark.asyncio
async def test_failed_row_delete_leaves_wall_untouched():
    target = make_submission(table_number=1)
    deleter, store, wall, _ = await build(submissions=[target])
    before = await wall.snapshot()
    store.fail_deletes = True

    with pytest.raises(UpstreamServiceError):
        await deleter.delete(target.id)

    assert await wall.snapshot() == before
    assert target.id in store.rows


@pytest.mark.asyncio
async def test_delete_unknown_submission():
    deleter, _, wall, _ = await build(submissions=[make_submission()])

    with pytest.raises(NotFoundError):
        await deleter.delete(uuid4())

    assert (await wall.snapshot()).stats.total == 1


@pytest.mark.asyncio
async def test_wall_matches_recompute_after_each_confirmed_delete():
    submissions = [make_submission(minutes=i, table_number=i % 4 or None) for i in range(10)]
    deleter, _, wall, _ = await build(submissions=submissions)

    for submission in submissions[::2]:
        await deleter.delete(submission.id)
        snapshot = await wall.snapshot()
        assert snapshot.stats == compute_submission_stats(snapshot.submissions)

    assert (await wall.snapshot()).stats.total == 5
