import pytest

from src.memories.feed import SubmissionFeed
from src.memories.live import get_submission_feed, get_wall_view
from src.memories.tests.inmemory_models import InMemorySubmissionStore, make_submission
from src.stats.wall import WallView


@pytest.mark.asyncio
async def test_health_check(client):
    """Test the health check endpoint returns healthy status."""
    response = await client.get("/healthz/")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["version"] == "0.1.0"


@pytest.mark.asyncio
async def test_health_check_reports_live_wall(client_factory):
    wall = WallView(fetch=InMemorySubmissionStore([make_submission()]).list_submissions)
    await wall.load()
    feed = SubmissionFeed()
    overrides = {get_wall_view: lambda: wall, get_submission_feed: lambda: feed}

    async with feed.subscribe():
        async with client_factory(overrides) as client:
            response = await client.get("/healthz/")

    data = response.json()
    assert data["wall_loaded"] is True
    assert data["live_subscribers"] == 1


@pytest.mark.asyncio
async def test_root_endpoint(client):
    """Test the root endpoint returns welcome message."""
    response = await client.get("/")

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Welcome to the Wedding Memories API"
