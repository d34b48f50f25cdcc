"""Integration test fixtures for database and HTTP client operations.

Each test gets a fresh SQLite database file, so tests never see each other's
rows. Uses polyfactory for type-safe test data generation.
"""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import NullPool

from src.hirehub.api.dependencies import get_db_session
from src.hirehub.core.db import create_tables, get_session
from src.hirehub.main import create_app
from src.hirehub.models import Company, User
from tests.factories import CompanyFactory, UserFactory
from tests.helpers import auth_headers


@pytest.fixture
async def engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine]:
    """Create a test database engine with all tables."""
    test_engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'hirehub.db'}", poolclass=NullPool
    )
    await create_tables(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Provide an async session for database operations.

    Tests must explicitly call `await session.commit()` to make rows visible
    to requests, which run in their own sessions.
    """
    async with get_session(engine) as session:
        yield session


@pytest.fixture
async def client(engine: AsyncEngine) -> AsyncGenerator[AsyncClient]:
    """Async HTTP client against the app, with sessions bound to the test database."""
    app = create_app()

    async def _get_test_session() -> AsyncGenerator[AsyncSession]:
        async with get_session(engine) as session:
            yield session

    app.dependency_overrides[get_db_session] = _get_test_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


@pytest.fixture
async def test_company(db_session: AsyncSession) -> Company:
    company = CompanyFactory.build()
    db_session.add(company)
    await db_session.commit()
    await db_session.refresh(company)
    return company


@pytest.fixture
async def other_company(db_session: AsyncSession) -> Company:
    company = CompanyFactory.build()
    db_session.add(company)
    await db_session.commit()
    await db_session.refresh(company)
    return company


@pytest.fixture
async def test_user(db_session: AsyncSession) -> User:
    user = UserFactory.build()
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest.fixture
def company_headers(test_company: Company) -> dict[str, str]:
    return auth_headers(test_company)


@pytest.fixture
def user_headers(test_user: User) -> dict[str, str]:
    return auth_headers(test_user)
