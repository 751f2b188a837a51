# tests/integration/test_api_estoque.py
from __future__ import annotations

from fastapi.testclient import TestClient

Headers = dict[str, str]


def _criar(client: TestClient, auth: Headers, station_id: str, **kw: object) -> dict:
    payload = {
        "gas_station_id": station_id, "product_type": "p13", "quantity": 10,
        "min_quantity": 5, "max_quantity": 50, "unit_price": "110.00",
    }
    payload.update(kw)
    response = client.post("/api/inventory", headers=auth, json=payload)
    assert response.status_code == 201, response.text
    return response.json()["data"]


def test_cria_e_consulta(client: TestClient, auth: Headers, station_id: str) -> None:
    item = _criar(client, auth, station_id)
    assert item["status"] == "in_stock"
    assert item["status_text"] == "Em Estoque"
    assert item["total_value"] == "1100.00"
    assert item["stock_percentage"] == 20

    lido = client.get(f"/api/inventory/{item['id']}", headers=auth).json()
    assert lido["product_name"] == "Botijao P13 (13kg)"


def test_produto_duplicado(client: TestClient, auth: Headers, station_id: str) -> None:
    _criar(client, auth, station_id)
    response = client.post("/api/inventory", headers=auth, json={
        "gas_station_id": station_id, "product_type": "p13",
    })
    assert response.status_code == 409


def test_movimentos(client: TestClient, auth: Headers, station_id: str) -> None:
    item = _criar(client, auth, station_id)
    base = f"/api/inventory/{item['id']}"

    adicionado = client.post(f"{base}/add", headers=auth, json={"quantity": 5}).json()["data"]
    assert adicionado["quantity"] == 15
    assert adicionado["last_restock_date"] is not None

    response = client.post(f"{base}/remove", headers=auth, json={"quantity": 16})
    assert response.status_code == 422
    assert response.json()["detail"] == ["Quantidade insuficiente em estoque"]

    removido = client.post(f"{base}/remove", headers=auth, json={"quantity": 15}).json()["data"]
    assert removido["status"] == "out_of_stock"
    assert [i["id"] for i in client.get(f"/api/stations/{station_id}/inventory/out-of-stock", headers=auth).json()] == [item["id"]]


def test_update_e_delete(client: TestClient, auth: Headers, station_id: str) -> None:
    item = _criar(client, auth, station_id)
    response = client.put(f"/api/inventory/{item['id']}", headers=auth, json={"quantity": 3})
    assert response.json()["data"]["status"] == "low_stock"
    assert len(client.get(f"/api/stations/{station_id}/inventory/low-stock", headers=auth).json()) == 1

    response = client.put(f"/api/inventory/{item['id']}", headers=auth, json={"min_quantity": 99})
    assert response.status_code == 422

    assert client.delete(f"/api/inventory/{item['id']}", headers=auth).status_code == 200
    assert client.get(f"/api/inventory/{item['id']}", headers=auth).status_code == 404


def test_stats(client: TestClient, auth: Headers, station_id: str) -> None:
    _criar(client, auth, station_id, product_type="p13", quantity=0)
    _criar(client, auth, station_id, product_type="p45", quantity=60, unit_price="300")
    stats = client.get(f"/api/stations/{station_id}/inventory/stats", headers=auth).json()
    assert stats["total_items"] == 2
    assert stats["out_of_stock"] == 1
    assert stats["overstocked"] == 1
    assert stats["needs_restock"] == 1


def test_disponibilidade(client: TestClient, auth: Headers, station_id: str) -> None:
    _criar(client, auth, station_id, quantity=2)
    response = client.post(f"/api/stations/{station_id}/inventory/availability", headers=auth, json=[
        {"product": "Botijao P13", "quantity": 2},
        {"product": "Botijao P90", "quantity": 1},
    ])
    data = response.json()
    assert data["has_stock"] is False
    assert data["available_items"][0]["product_type"] == "p13"
    assert data["unavailable_items"][0]["reason"] == "Produto nao cadastrado no estoque"
