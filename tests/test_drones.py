"""
Drone endpoint tests.
"""

import pytest


DRONE_PAYLOAD = {
    "model": "SkyHawk X4",
    "maxloadkg": 5.5,
    "batterycapacity": 5200,
    "status": "Available",
    "battery": 92,
}


async def _create_drone(client, **overrides):
    response = await client.post("/drones", json={**DRONE_PAYLOAD, **overrides})
    assert response.status_code == 201
    return response.json()


@pytest.mark.asyncio
async def test_create_drone_then_list(test_client):
    created = await _create_drone(test_client)
    
    assert created["droneid"] >= 1
    
    response = await test_client.get("/drones")
    assert response.status_code == 200
    drones = response.json()
    assert len(drones) == 1
    drone = drones[0]
    for field, value in DRONE_PAYLOAD.items():
        assert drone[field] == value


@pytest.mark.asyncio
async def test_list_drones_ordered_by_id(test_client):
    first = await _create_drone(test_client, model="Alpha")
    second = await _create_drone(test_client, model="Bravo")
    
    response = await test_client.get("/drones")
    
    assert [d["droneid"] for d in response.json()] == [first["droneid"], second["droneid"]]


@pytest.mark.asyncio
@pytest.mark.parametrize("missing", ["model", "maxloadkg", "batterycapacity", "status", "battery"])
async def test_create_drone_requires_all_fields(test_client, missing):
    payload = {k: v for k, v in DRONE_PAYLOAD.items() if k != missing}
    
    response = await test_client.post("/drones", json=payload)
    
    assert response.status_code == 400
    assert response.json()["error"] == "All fields are required."
    assert (await test_client.get("/drones")).json() == []


@pytest.mark.asyncio
async def test_create_drone_rejects_unknown_status(test_client):
    response = await test_client.post("/drones", json={**DRONE_PAYLOAD, "status": "Flying"})
    
    assert response.status_code == 400
    assert "error" in response.json()


@pytest.mark.asyncio
async def test_battery_is_not_range_checked(test_client):
    created = await _create_drone(test_client, battery=150)
    
    assert created["battery"] == 150


@pytest.mark.asyncio
async def test_update_drone_status_and_battery(test_client):
    created = await _create_drone(test_client, status="Charging", battery=20)
    
    response = await test_client.put(
        f"/drones/{created['droneid']}",
        json={"status": "Available", "battery": 87},
    )
    
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "Available"
    assert data["battery"] == 87
    assert data["model"] == DRONE_PAYLOAD["model"]


@pytest.mark.asyncio
async def test_update_drone_ignores_other_fields(test_client):
    created = await _create_drone(test_client)
    
    response = await test_client.put(
        f"/drones/{created['droneid']}",
        json={"status": "In-Transit", "model": "Renamed", "maxloadkg": 99},
    )
    
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "In-Transit"
    assert data["battery"] == DRONE_PAYLOAD["battery"]
    assert data["model"] == DRONE_PAYLOAD["model"]
    assert data["maxloadkg"] == DRONE_PAYLOAD["maxloadkg"]


@pytest.mark.asyncio
async def test_update_missing_drone_returns_404(test_client):
    response = await test_client.put("/drones/999", json={"status": "Available", "battery": 87})
    
    assert response.status_code == 404
    assert response.json() == {"error": "Drone not found."}


@pytest.mark.asyncio
async def test_delete_drone(test_client):
    created = await _create_drone(test_client)
    
    response = await test_client.delete(f"/drones/{created['droneid']}")
    
    assert response.status_code == 200
    assert response.json() == {"message": f"Drone {created['droneid']} deleted successfully"}
    assert (await test_client.get("/drones")).json() == []


@pytest.mark.asyncio
async def test_delete_missing_drone_still_succeeds(test_client):
    response = await test_client.delete("/drones/404")
    
    assert response.status_code == 200
    assert response.json() == {"message": "Drone 404 deleted successfully"}


@pytest.mark.asyncio
async def test_non_numeric_drone_id_is_bad_request(test_client):
    response = await test_client.put("/drones/abc", json={"status": "Available"})
    
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_out_of_range_drone_id_is_bad_request(test_client):
    response = await test_client.put("/drones/99999999999999999999", json={"status": "Available"})
    assert response.status_code == 400
    
    response = await test_client.delete("/drones/99999999999999999999")
    assert response.status_code == 400
