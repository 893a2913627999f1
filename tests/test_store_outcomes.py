import pytest
from httpx import ASGITransport, AsyncClient

from concessionaria.main import app
from concessionaria.services.store_results import NotFound, StoreFailure

CIVIC = {"modelo": "Civic", "marca": "Honda", "ano": 2022, "preco": 95000}


class RecordingStore:
    """Store double that records calls and returns a fixed outcome."""

    def __init__(self, outcome):
        self.outcome = outcome
        self.calls = []

    async def list_all(self):
        self.calls.append(("list_all",))
        return self.outcome

    async def get_by_key(self, vehicle_id):
        self.calls.append(("get_by_key", vehicle_id))
        return self.outcome

    async def insert(self, fields):
        self.calls.append(("insert", fields))
        return self.outcome

    async def update_by_key(self, vehicle_id, fields):
        self.calls.append(("update_by_key", vehicle_id, fields))
        return self.outcome

    async def delete_by_key(self, vehicle_id):
        self.calls.append(("delete_by_key", vehicle_id))
        return self.outcome


@pytest.mark.asyncio
async def test_list_store_failure(override_store):
    override_store(RecordingStore(StoreFailure("connection refused")))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/veiculos")

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "message": "Erro ao buscar veículos",
        "error": "connection refused",
    }


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method,path,json",
    [
        ("GET", "/api/veiculos/1", None),
        ("POST", "/api/veiculos", CIVIC),
        ("PUT", "/api/veiculos/1", CIVIC),
        ("DELETE", "/api/veiculos/1", None),
    ],
)
async def test_store_failure_message_passes_through(override_store, method, path, json):
    override_store(RecordingStore(StoreFailure("boom")))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.request(method, path, json=json)

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "boom"}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method,path,json",
    [
        ("GET", "/api/veiculos/abc", None),
        ("PUT", "/api/veiculos/abc", CIVIC),
        ("DELETE", "/api/veiculos/abc", None),
        ("POST", "/api/veiculos", {"modelo": "Civic"}),
        ("PUT", "/api/veiculos/1", {"modelo": "Civic", "marca": "Honda", "ano": 2022}),
    ],
)
async def test_client_errors_never_reach_the_store(override_store, method, path, json):
    store = override_store(RecordingStore(NotFound()))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.request(method, path, json=json)

    assert response.status_code == 400
    assert response.json()["success"] is False
    assert store.calls == []


@pytest.mark.asyncio
async def test_update_passes_parsed_id_and_normalized_fields(override_store):
    store = override_store(RecordingStore(NotFound()))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.put("/api/veiculos/5", json={**CIVIC, "modelo": " Civic ", "id": 9})

    assert response.status_code == 404
    [(name, vehicle_id, fields)] = store.calls
    assert name == "update_by_key"
    assert vehicle_id == 5
    assert fields["modelo"] == "Civic"
    assert "id" not in fields
    assert fields["updated_at"] is not None


@pytest.mark.asyncio
@pytest.mark.parametrize("raw,key", [("1e2", 1), ("3.9", 3)])
async def test_member_id_uses_leading_integer(override_store, raw, key):
    store = override_store(RecordingStore(NotFound()))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get(f"/api/veiculos/{raw}")

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Veículo não encontrado"}
    assert store.calls == [("get_by_key", key)]
