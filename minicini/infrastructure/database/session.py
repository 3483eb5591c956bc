"""SQLAlchemy engine, connection pool and per-request session lifecycle."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from minicini.infrastructure.database.base import Base


def _get_async_url(url: str) -> str:
    """Convert a sync SQLAlchemy URL to an async one."""
    if url.startswith("sqlite:///"):
        return url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if url.startswith("mysql://"):
        return url.replace("mysql://", "mysql+aiomysql://", 1)
    return url


class Database:
    """Owns the async engine and its connection pool.

    Built once at startup and disposed at shutdown by the application
    lifespan; request handlers reach it through ``get_database`` so tests can
    point the app at a different store.
    """

    def __init__(self, url: str, *, echo: bool = False, pool_size: int = 10):
        async_url = _get_async_url(url)

        engine_kwargs: dict = {}
        if not async_url.startswith("sqlite"):
            # Bounded pool; callers queue for a free connection with no ceiling.
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=0,
                pool_timeout=None,
                pool_pre_ping=True,
            )

        self.engine = create_async_engine(async_url, echo=echo, future=True, **engine_kwargs)
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def create_tables(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def ping(self) -> bool:
        """Trivial liveness probe. Store errors propagate to the caller."""
        async with self.engine.connect() as conn:
            result = await conn.execute(text("SELECT 1 AS ok"))
            return result.scalar_one() == 1

    async def dispose(self) -> None:
        await self.engine.dispose()


def get_database(request: Request) -> Database:
    """FastAPI dependency — the Database attached to the app at startup."""
    return request.app.state.database


async def get_db_session(
    database: Database = Depends(get_database),
) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency — yields an async DB session per request."""
    async with database.session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
