"""
Address endpoint tests.
"""

import pytest

from dronefleet.db.init_db import DEMO_ADDRESSES, seed_initial_data


@pytest.mark.asyncio
async def test_list_addresses(test_client, addresses):
    response = await test_client.get("/addresses")
    
    assert response.status_code == 200
    assert response.json() == [
        {"id": addresses[0], "street": "221 Harbor Way", "city": "Oakland", "zip": "94607"},
        {"id": addresses[1], "street": "1450 Mission St", "city": "San Francisco", "zip": "94103"},
    ]


@pytest.mark.asyncio
async def test_addresses_are_read_only(test_client):
    response = await test_client.post("/addresses", json={"street": "x", "city": "y", "zip": "z"})
    
    assert response.status_code == 405


@pytest.mark.asyncio
async def test_seed_only_fills_empty_table(test_client, test_database):
    await seed_initial_data(test_database)
    await seed_initial_data(test_database)
    
    response = await test_client.get("/addresses")
    
    assert len(response.json()) == len(DEMO_ADDRESSES)
