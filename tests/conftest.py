"""
Pytest configuration and fixtures.
Provides test app client and async DB session replacement.
"""

import pytest
from dependency_injector import providers
from httpx import ASGITransport, AsyncClient
from sqlalchemy.pool import StaticPool

from dronefleet.main import app
from dronefleet.db.base import Base
from dronefleet.db.session import Database
from dronefleet.deps.di_container import Container
from dronefleet.models import Address


# Test database URL (in-memory SQLite for testing)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture(scope="function")
async def test_database():
    """
    Create a test database.
    Uses in-memory SQLite for fast tests.
    """
    database = Database(
        TEST_DATABASE_URL,
        engine_options={
            "connect_args": {"check_same_thread": False},
            "poolclass": StaticPool,
        },
    )
    database.connect()

    # Create tables
    async with database.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield database

    # Cleanup
    async with database.engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await database.dispose()


@pytest.fixture(scope="function")
async def test_db_session(test_database):
    """Create a test database session."""
    async with test_database.session() as session:
        yield session


@pytest.fixture(scope="function")
async def test_client(test_database):
    """
    Create a test HTTP client bound to the test database.
    """
    container = Container()
    container.database.override(providers.Object(test_database))
    app.state.container = container

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    container.database.reset_override()


@pytest.fixture(scope="function")
async def addresses(test_database):
    """Two stored addresses, ids 1 and 2."""
    async with test_database.session() as session:
        rows = [
            Address(street="221 Harbor Way", city="Oakland", zip="94607"),
            Address(street="1450 Mission St", city="San Francisco", zip="94103"),
        ]
        session.add_all(rows)
        await session.commit()
        return [row.id for row in rows]
