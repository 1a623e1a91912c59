"""
Delivery endpoint tests.
"""

import pytest
from sqlalchemy import func, insert, select

from dronefleet.models import delivery_package


DELIVERY_PAYLOAD = {
    "droneid": 1,
    "operatorid": 2,
    "starttime": "2024-05-01T09:30:00",
    "deliverystatus": "Scheduled",
}


async def _create_delivery(client, **overrides):
    response = await client.post("/deliveries", json={**DELIVERY_PAYLOAD, **overrides})
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
async def test_create_delivery_returns_raw_row(test_client):
    created = await _create_delivery(test_client)
    
    assert set(created) == {
        "deliveryid", "droneid", "operatorid", "starttime", "endtime", "deliverystatus",
    }
    assert created["droneid"] == 1
    assert created["operatorid"] == 2
    assert created["starttime"].startswith("2024-05-01T09:30:00")
    assert created["endtime"] is None
    assert created["deliverystatus"] == "Scheduled"


@pytest.mark.asyncio
async def test_delivery_status_defaults_to_scheduled(test_client):
    payload = {k: v for k, v in DELIVERY_PAYLOAD.items() if k != "deliverystatus"}
    
    response = await test_client.post("/deliveries", json=payload)
    
    assert response.json()["deliverystatus"] == "Scheduled"


@pytest.mark.asyncio
@pytest.mark.parametrize("missing", ["droneid", "operatorid", "starttime"])
async def test_create_delivery_requires_mandatory_fields(test_client, missing):
    payload = {k: v for k, v in DELIVERY_PAYLOAD.items() if k != missing}
    
    response = await test_client.post("/deliveries", json=payload)
    
    assert response.status_code == 400
    assert response.json() == {"error": "droneid, operatorid, and starttime are required"}
    assert (await test_client.get("/deliveries")).json() == []


@pytest.mark.asyncio
async def test_list_deliveries_newest_first(test_client):
    first = await _create_delivery(test_client)
    second = await _create_delivery(test_client, deliverystatus="In-Progress")
    
    response = await test_client.get("/deliveries")
    
    assert [d["deliveryid"] for d in response.json()] == [second["deliveryid"], first["deliveryid"]]


@pytest.mark.asyncio
async def test_list_deliveries_filters_by_status(test_client):
    await _create_delivery(test_client)
    in_progress = await _create_delivery(test_client, deliverystatus="In-Progress")
    
    response = await test_client.get("/deliveries", params={"status": "In-Progress"})
    
    assert [d["deliveryid"] for d in response.json()] == [in_progress["deliveryid"]]


@pytest.mark.asyncio
async def test_update_delivery_status(test_client):
    created = await _create_delivery(test_client)
    
    response = await test_client.put(f"/deliveries/{created['deliveryid']}", json={"status": "Completed"})
    
    assert response.status_code == 200
    assert response.json()["deliverystatus"] == "Completed"
    assert response.json()["droneid"] == created["droneid"]


@pytest.mark.asyncio
async def test_update_delivery_accepts_column_name(test_client):
    created = await _create_delivery(test_client)
    
    response = await test_client.put(
        f"/deliveries/{created['deliveryid']}",
        json={**created, "deliverystatus": "Failed"},
    )
    
    assert response.status_code == 200
    assert response.json()["deliverystatus"] == "Failed"


@pytest.mark.asyncio
async def test_update_missing_delivery_returns_404(test_client):
    response = await test_client.put("/deliveries/999", json={"status": "Completed"})
    
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_delivery_by_display_id(test_client):
    created = await _create_delivery(test_client)
    
    response = await test_client.delete(f"/deliveries/DEL-2024-{created['deliveryid']:03d}")
    
    assert response.status_code == 200
    assert response.json() == {"message": "Delivery deleted successfully"}
    assert (await test_client.get("/deliveries")).json() == []


@pytest.mark.asyncio
async def test_delete_delivery_by_number(test_client):
    created = await _create_delivery(test_client)
    
    response = await test_client.delete(f"/deliveries/{created['deliveryid']}")
    
    assert response.status_code == 200
    assert (await test_client.get("/deliveries")).json() == []


@pytest.mark.asyncio
async def test_delete_missing_delivery_still_succeeds(test_client):
    response = await test_client.delete("/deliveries/777")
    
    assert response.status_code == 200
    assert response.json() == {"message": "Delivery deleted successfully"}


@pytest.mark.asyncio
async def test_delete_malformed_delivery_id_returns_400(test_client):
    response = await test_client.delete("/deliveries/DEL-2024-XXX")
    
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_delete_removes_join_rows_first(test_client, test_db_session):
    created = await _create_delivery(test_client)
    await test_db_session.execute(
        insert(delivery_package).values(deliveryid=created["deliveryid"], packageid=1)
    )
    await test_db_session.commit()
    
    await test_client.delete(f"/deliveries/{created['deliveryid']}")
    
    remaining = await test_db_session.scalar(
        select(func.count())
        .select_from(delivery_package)
        .where(delivery_package.c.deliveryid == created["deliveryid"])
    )
    assert remaining == 0
    assert (await test_client.get("/deliveries")).json() == []


@pytest.mark.asyncio
async def test_delete_clears_join_rows_for_unknown_delivery(test_client, test_db_session):
    # Orphaned links left behind by an interrupted delete
    await test_db_session.execute(insert(delivery_package).values(deliveryid=55, packageid=3))
    await test_db_session.commit()
    
    response = await test_client.delete("/deliveries/55")
    
    assert response.status_code == 200
    remaining = await test_db_session.scalar(
        select(func.count()).select_from(delivery_package).where(delivery_package.c.deliveryid == 55)
    )
    assert remaining == 0


@pytest.mark.asyncio
@pytest.mark.parametrize("delivery_id", ["DEL-2024-99999999999999999999", "99999999999999999999", "0"])
async def test_delete_out_of_range_delivery_id_returns_400(test_client, delivery_id):
    response = await test_client.delete(f"/deliveries/{delivery_id}")
    
    assert response.status_code == 400
    assert "Invalid delivery id" in response.json()["error"]


@pytest.mark.asyncio
async def test_update_out_of_range_delivery_id_returns_400(test_client):
    response = await test_client.put("/deliveries/99999999999999999999", json={"status": "Completed"})
    
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_create_delivery_rejects_out_of_range_drone_id(test_client):
    response = await test_client.post("/deliveries", json={**DELIVERY_PAYLOAD, "droneid": 2**40})
    
    assert response.status_code == 400
    assert (await test_client.get("/deliveries")).json() == []
