"""Database base configuration and session management."""
from typing import Any, AsyncGenerator, Dict

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool

from core.config import Settings, settings


class Base(DeclarativeBase):
    """Base class for all database models."""
    pass


def engine_options(config: Settings) -> Dict[str, Any]:
    """Build create_async_engine() keyword arguments for the given settings."""
    options: Dict[str, Any] = {"echo": config.debug}
    if config.debug:
        options["poolclass"] = NullPool
    elif not config.is_sqlite:
        # SQLite drivers do not take queue pool sizing
        options["pool_size"] = config.database_pool_size
        options["max_overflow"] = config.database_max_overflow
    return options


def build_engine(config: Settings) -> AsyncEngine:
    """Create async engine from settings."""
    return create_async_engine(config.database_url, **engine_options(config))


# Create async engine
engine = build_engine(settings)

# Create async session factory
async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency for getting async database session."""
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


class DBSession:
    """Context manager wrapper for get_db()."""

    def __init__(self):
        self._gen = None
        self._session = None

    async def __aenter__(self) -> AsyncSession:
        self._gen = get_db()
        self._session = await self._gen.__anext__()
        return self._session

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if not self._gen:
            return False
        if exc_type is not None:
            # Let get_db() roll back, then re-raise the original error
            try:
                await self._gen.athrow(exc_val)
            except exc_type:
                pass
            return False
        try:
            await self._gen.__anext__()
        except StopAsyncIteration:
            pass
        return False


async def init_db():
    """Initialize database - create all tables."""
    # Register models on Base.metadata
    import database.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db():
    """Close database connections."""
    await engine.dispose()
