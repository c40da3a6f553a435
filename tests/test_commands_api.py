import pytest
from httpx import ASGITransport, AsyncClient

from ptfms.dependencies import get_command_history
from ptfms.main import app
from ptfms.services.commands import CommandHistory


@pytest.fixture
def history():
    history = CommandHistory()
    app.dependency_overrides[get_command_history] = lambda: history
    yield history
    app.dependency_overrides.pop(get_command_history, None)


@pytest.mark.asyncio
async def test_undo_with_empty_history(history):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post("/api/v1/commands/undo")

    assert response.status_code == 409
    assert response.json()["message"] == "Nothing to undo"


@pytest.mark.asyncio
async def test_undo_vehicle_registration(history):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        created = await client.post("/api/v1/vehicles", json={
            "vin": "4T1BF1FK5CU000004",
            "vehicle_number": "BUS400",
            "vehicle_type": "Diesel Bus",
        })
        vehicle_id = created.json()["data"]["id"]

        response = await client.get("/api/v1/commands/history")
        assert response.json()["data"] == [f"add vehicle {vehicle_id}"]

        response = await client.post("/api/v1/commands/undo")
        assert response.status_code == 200
        assert response.json()["data"] == {"result": "succeeded", "remaining": 0}

        response = await client.get(f"/api/v1/vehicles/{vehicle_id}")
        assert response.status_code == 404


@pytest.mark.asyncio
async def test_undo_after_vehicle_deleted_directly(history):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        created = await client.post("/api/v1/vehicles", json={
            "vin": "4T1BF1FK5CU000005",
            "vehicle_number": "BUS401",
            "vehicle_type": "Diesel Bus",
        })
        vehicle_id = created.json()["data"]["id"]
        response = await client.delete(f"/api/v1/vehicles/{vehicle_id}")
        assert response.status_code == 200

        response = await client.post("/api/v1/commands/undo")
        assert response.status_code == 409
        assert response.json()["message"] == "Record was already removed; history entry discarded"

        response = await client.post("/api/v1/commands/undo")
        assert response.json()["message"] == "Nothing to undo"
    assert len(history) == 0
