"""
Pytest fixtures for testing.
"""
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker

from app.auth import CurrentUser
from app.models import Base
from app.database import get_db
from app.services.job_service import JobService
from app.services.job_store import JobStore


@pytest.fixture(scope='function')
def test_db_url(tmp_path):
    """Generate a fresh test database URL per test."""
    return f'sqlite+aiosqlite:///{tmp_path / "test.db"}'


@pytest_asyncio.fixture(scope='function')
async def test_engine(test_db_url):
    """Create a test database engine."""
    engine = create_async_engine(test_db_url, echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    """Session factory bound to the test engine."""
    return async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest_asyncio.fixture(scope='function')
async def test_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def job_store(test_session):
    return JobStore(test_session)


@pytest.fixture
def job_service(job_store):
    return JobService(job_store)


@pytest.fixture
def alice():
    return CurrentUser(id='user-alice')


@pytest.fixture
def bob():
    return CurrentUser(id='user-bob')


@pytest.fixture
def alice_headers(alice):
    return {'X-User-Id': alice.id}


@pytest.fixture
def bob_headers(bob):
    return {'X-User-Id': bob.id}


@pytest_asyncio.fixture
async def client(session_factory):
    """Create a test client with the database dependency pointed at the test engine."""
    from server import app

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url='http://test') as client:
        yield client

    app.dependency_overrides.clear()
