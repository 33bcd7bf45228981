import contextlib
from types import SimpleNamespace

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from src.admin.auth import AdminGate, get_admin_gate
from src.main import app
from src.memories.repository.orm_models import Submission  # noqa: F401
from src.models.base import BaseModel
from src.music.repository.orm_models import Setting  # noqa: F401
from src.rsvp.repository.orm_models import RSVP  # noqa: F401

ADMIN_PASSWORD = "let-me-in"

TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture
def admin_gate() -> AdminGate:
    return AdminGate(config=SimpleNamespace(admin_password=ADMIN_PASSWORD))


@pytest.fixture
def client_factory(admin_gate):
    """Build a test client with dependency overrides; the admin gate is always overridden."""

    @contextlib.asynccontextmanager
    async def factory(overrides: dict | None = None):
        app.dependency_overrides[get_admin_gate] = lambda: admin_gate
        app.dependency_overrides.update(overrides or {})
        transport = ASGITransport(app=app)
        try:
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                yield client
        finally:
            app.dependency_overrides.clear()

    return factory


@pytest.fixture
async def client(client_factory):
    async with client_factory() as ac:
        yield ac


@pytest.fixture
async def db_session():
    """A session on a fresh in-memory database, for SQL read/write model tests."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session

    await engine.dispose()
