"""
Async database setup with SQLAlchemy and aiosqlite.
"""
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy import text

from app.config import DATABASE_URL, ensure_directories
from app.models import Base


# Create async engine
engine = create_async_engine(
    DATABASE_URL,
    echo=False,
    future=True,
)


# Session factory
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


def is_sqlite() -> bool:
    return engine.dialect.name == 'sqlite'


async def enable_wal_mode():
    """Enable WAL mode for SQLite concurrent read/write access."""
    async with engine.begin() as conn:
        await conn.execute(text('PRAGMA journal_mode=WAL'))
        await conn.execute(text('PRAGMA synchronous=NORMAL'))


async def init_db():
    """Initialize database - create tables if they don't exist."""
    if is_sqlite():
        ensure_directories()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # Enable WAL mode after tables are created
    if is_sqlite():
        await enable_wal_mode()


async def ping_db(session: AsyncSession) -> bool:
    """Return True if the database answers a trivial query."""
    result = await session.execute(text('SELECT 1'))
    return result.scalar() == 1


async def close_db():
    """Close database connections."""
    await engine.dispose()


async def get_db():
    """
    Dependency that provides an async database session.

    The session commits when the request handler returns and rolls back
    if it raises, so a rejected request leaves no writes behind. Action
    routes receive it through get_job_service().
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
