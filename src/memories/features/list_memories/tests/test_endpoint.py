import pytest

from src.memories.features.list_memories.router import SUBMISSIONS_URL
from src.memories.live import get_wall_view
from src.memories.tests.inmemory_models import InMemorySubmissionStore, make_submission
from src.stats.wall import WallView


@pytest.mark.asyncio
async def test_list_wall(client_factory):
    older = make_submission(minutes=1, table_number=2, guest_name="Ana")
    newer = make_submission(minutes=2, table_number=5)
    untabled = make_submission(minutes=0)
    wall = WallView(fetch=InMemorySubmissionStore([older, newer, untabled]).list_submissions)

    async with client_factory({get_wall_view: lambda: wall}) as client:
        response = await client.get(SUBMISSIONS_URL)

    assert response.status_code == 200
    data = response.json()
    assert [s["id"] for s in data["submissions"]] == [str(newer.id), str(older.id), str(untabled.id)]
    assert data["stats"] == {"total": 3, "byTable": {"2": 1, "5": 1}}
    assert data["tables"] == [2, 5]


@pytest.mark.asyncio
async def test_list_wall_for_one_table(client_factory):
    store = InMemorySubmissionStore(
        [make_submission(table_number=2), make_submission(table_number=5)]
    )
    wall = WallView(fetch=store.list_submissions)

    async with client_factory({get_wall_view: lambda: wall}) as client:
        response = await client.get(SUBMISSIONS_URL, params={"table": "5"})

    data = response.json()
    assert [s["table_number"] for s in data["submissions"]] == [5]
    assert data["stats"] == {"total": 1, "byTable": {"5": 1}}
    assert data["tables"] == [2, 5]


@pytest.mark.asyncio
async def test_list_reflects_rows_added_behind_the_walls_back(client_factory):
    store = InMemorySubmissionStore([make_submission(table_number=1)])
    wall = WallView(fetch=store.list_submissions)
    await wall.load()
    late = make_submission(minutes=10, table_number=1)
    store.rows[late.id] = late

    async with client_factory({get_wall_view: lambda: wall}) as client:
        response = await client.get(SUBMISSIONS_URL)

    assert response.json()["stats"] == {"total": 2, "byTable": {"1": 2}}


@pytest.mark.asyncio
async def test_list_store_failure(client_factory):
    store = InMemorySubmissionStore([make_submission()])
    store.fail_reads = True
    wall = WallView(fetch=store.list_submissions)

    async with client_factory({get_wall_view: lambda: wall}) as client:
        response = await client.get(SUBMISSIONS_URL)

    assert response.status_code == 500
    assert response.json()["error"] == "Failed to fetch submissions"


@pytest.mark.asyncio
async def test_list_wall_store_failure_hides_upstream_detail(client_factory):
    store = InMemorySubmissionStore([make_submission()])
    store.fail_reads = True
    wall = WallView(fetch=store.list_submissions)

    async with client_factory({get_wall_view: lambda: wall}) as client:
        response = await client.get(SUBMISSIONS_URL)

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch submissions"}
    assert "details" not in response.json()
