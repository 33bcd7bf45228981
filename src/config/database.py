import contextlib
from collections.abc import AsyncIterator

from alembic import command, config
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from src.config.settings import settings


def create_engine(url: str):
    connect_args = {}
    if url.startswith("sqlite"):
        connect_args = {"timeout": 15}
    return create_async_engine(
        url,
        echo=settings.LOG_DB,
        pool_pre_ping=not url.startswith("sqlite"),
        connect_args=connect_args,
    )


engine = create_engine(settings.database_url)

async_session_maker = async_sessionmaker(engine, expire_on_commit=False)


def _upgrade_to_head(connection, cfg: config.Config) -> None:
    cfg.attributes["connection"] = connection
    command.upgrade(cfg, "head")


async def init_db() -> None:
    """Bring the schema up to the latest migration on the app's own engine."""
    async with engine.begin() as conn:
        await conn.run_sync(_upgrade_to_head, config.Config("alembic.ini"))


@contextlib.asynccontextmanager
async def async_session_manager(
    auto_commit=True, session_overwrite: AsyncSession | None = None
) -> AsyncIterator[AsyncSession]:
    """
    Yield a session that commits on success and rolls back on error.
    With `session_overwrite` the caller's session is used as is and left open.
    """
    if session_overwrite:
        yield session_overwrite
        return

    async with async_session_maker() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        if auto_commit:
            await session.commit()
