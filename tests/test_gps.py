import pytest
from httpx import ASGITransport, AsyncClient

from ptfms.main import app


@pytest.mark.asyncio
async def test_record_position_and_latest():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post("/api/v1/gps", json={
            "vehicle_id": 1,
            "latitude": 45.4215,
            "longitude": -75.6972,
            "timestamp": "2025-08-01T08:00:00",
            "speed": 38.5,
        })
        assert response.status_code == 201
        assert response.json()["data"]["event_type"] == "LOCATION"

        response = await client.post("/api/v1/gps/station-events", json={
            "vehicle_id": 1,
            "station_id": "ST-101",
            "event_type": "ARRIVAL",
            "latitude": 45.4231,
            "longitude": -75.6990,
            "operator_id": 2,
        })
        assert response.status_code == 201

        response = await client.get("/api/v1/gps/vehicles/1/latest")
        assert response.json()["data"]["station_id"] == "ST-101"

        response = await client.get("/api/v1/gps/vehicles/1/station-events", params={"station_id": "ST-101"})
        assert len(response.json()["data"]) >= 1


@pytest.mark.asyncio
async def test_position_out_of_range():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post("/api/v1/gps", json={"vehicle_id": 1, "latitude": 123.0, "longitude": 0.0})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_position_for_unknown_vehicle():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post("/api/v1/gps", json={"vehicle_id": 9999, "latitude": 45.0, "longitude": -75.0})

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_latest_without_data():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/v1/gps/vehicles/3/latest")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_purge_old_entries():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        await client.post("/api/v1/gps", json={
            "vehicle_id": 2, "latitude": 45.0, "longitude": -75.0, "timestamp": "2020-01-01T00:00:00",
        })
        response = await client.delete("/api/v1/gps/purge", params={"days": 365})

    assert response.status_code == 200
    assert response.json()["data"]["removed"] >= 1
