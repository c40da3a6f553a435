import pytest
from httpx import ASGITransport, AsyncClient

from ptfms.main import app


@pytest.mark.asyncio
async def test_get_vehicles_returns_seeded_fleet():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/v1/vehicles")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "success"
    assert isinstance(body["data"], list)
    numbers = {v["vehicle_number"] for v in body["data"]}
    assert {"BUS001", "LRT001", "BUS002"} <= numbers


@pytest.mark.asyncio
async def test_get_vehicles_item_format():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/v1/vehicles", params={"search": "LRT001"})

    vehicle = response.json()["data"][0]
    assert vehicle["vin"] == "JH4TB2H26CC000000"
    assert vehicle["vehicle_type"] == "Electric Light Rail"
    assert vehicle["fuel_type"] == "Electric"
    assert vehicle["status"] == "Active"
    assert vehicle["current_route"] == "Blue Line"


@pytest.mark.asyncio
async def test_filter_vehicles_by_status():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/v1/vehicles", params={"status": "Active"})

    assert all(v["status"] == "Active" for v in response.json()["data"])


@pytest.mark.asyncio
async def test_get_vehicle_not_found():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/v1/vehicles/9999")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_create_vehicle():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post("/api/v1/vehicles", json={
            "vin": "5YJSA1E26HF000001",
            "vehicle_number": "EBUS100",
            "vehicle_type": "Electric Bus",
            "make": "BYD",
            "model": "K9",
            "year": 2023,
        })

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Vehicle registered"
    assert body["data"]["fuel_type"] == "Electric"
    assert body["data"]["status"] == "Available"
    assert isinstance(body["data"]["id"], int)


@pytest.mark.asyncio
async def test_create_duplicate_vehicle_conflict():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post("/api/v1/vehicles", json={
            "vin": "1HGCM82633A004352",
            "vehicle_number": "BUS777",
            "vehicle_type": "Diesel Bus",
        })

    assert response.status_code == 409
    body = response.json()
    assert body["status"] == "error"
    assert "1HGCM82633A004352" in body["message"]


@pytest.mark.asyncio
async def test_create_vehicle_invalid_payload():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post("/api/v1/vehicles", json={
            "vin": "TOO-SHORT",
            "vehicle_number": "BUS778",
            "vehicle_type": "Diesel Bus",
        })

    assert response.status_code == 422
    body = response.json()
    assert body["status"] == "error"
    assert body["data"][0]["field"] == "vin"


@pytest.mark.asyncio
async def test_update_vehicle_status():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        created = await client.post("/api/v1/vehicles", json={
            "vin": "2FMDK3GC4BBA00002",
            "vehicle_number": "VAN200",
            "vehicle_type": "Van",
        })
        vehicle_id = created.json()["data"]["id"]

        response = await client.put(f"/api/v1/vehicles/{vehicle_id}/status", json={"status": "Maintenance"})
        assert response.status_code == 200
        assert response.json()["data"]["status"] == "Maintenance"

        response = await client.put(f"/api/v1/vehicles/{vehicle_id}/status", json={"status": "Scrapped"})
        assert response.status_code == 422


@pytest.mark.asyncio
async def test_update_and_delete_vehicle():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        created = await client.post("/api/v1/vehicles", json={
            "vin": "3VWFE21C04M000003",
            "vehicle_number": "BUS300",
            "vehicle_type": "Diesel Bus",
        })
        vehicle_id = created.json()["data"]["id"]

        response = await client.put(f"/api/v1/vehicles/{vehicle_id}", json={"current_route": "Route 300"})
        assert response.json()["data"]["current_route"] == "Route 300"

        response = await client.delete(f"/api/v1/vehicles/{vehicle_id}")
        assert response.status_code == 200

        response = await client.get(f"/api/v1/vehicles/{vehicle_id}")
        assert response.status_code == 404


@pytest.mark.asyncio
async def test_maintenance_forecast():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/v1/vehicles/1/maintenance-forecast")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["vehicle_id"] == 1
    assert data["last_service_date"] == "2025-08-05"
    assert data["interval_days"] > 0


@pytest.mark.asyncio
async def test_status_counts():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/v1/vehicles/status-counts")

    data = response.json()["data"]
    assert set(data) >= {"Active", "Maintenance", "Available"}
    assert data["Active"] >= 2
