from datetime import datetime

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import src.domain  # noqa: F401
from src.depends import get_session, get_clock
from tests.fixtures.clock import FixedClock


@pytest_asyncio.fixture(scope="function")
async def engine(tmp_path):
    """Create test database engine on a throwaway SQLite file"""
    test_db_url = f"sqlite+aiosqlite:///{tmp_path / 'billing_test.db'}"

    engine = create_async_engine(test_db_url, echo=False, future=True)

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    """Create a new database session for each test"""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def clock():
    """Clock frozen at Monday 2024-03-04 09:00 UTC"""
    return FixedClock(datetime(2024, 3, 4, 9, 0, 0))


@pytest_asyncio.fixture
async def client(db_session, clock):
    """Create test client with database session and clock overrides"""
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_clock] = lambda: clock

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
