"""
Unexpected error handling tests.
"""

import pytest
from dependency_injector import providers
from httpx import ASGITransport, AsyncClient
from sqlalchemy import text

from dronefleet.main import app
from dronefleet.deps.di_container import Container


@pytest.fixture(scope="function")
async def lenient_client(test_database):
    """Client that returns server errors instead of re-raising them."""
    container = Container()
    container.database.override(providers.Object(test_database))
    app.state.container = container

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    container.database.reset_override()


@pytest.mark.asyncio
async def test_database_failure_returns_500_with_raw_message(lenient_client, test_database):
    async with test_database.engine.begin() as conn:
        await conn.execute(text("DROP TABLE drone"))

    response = await lenient_client.get("/drones")

    assert response.status_code == 500
    body = response.json()
    assert list(body) == ["error"]
    assert "no such table" in body["error"]
