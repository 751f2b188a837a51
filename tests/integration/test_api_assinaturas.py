# tests/integration/test_api_assinaturas.py
from __future__ import annotations

from fastapi.testclient import TestClient

Headers = dict[str, str]


def _plano(client: TestClient, nome: str) -> dict:
    return next(p for p in client.get("/api/subscriptions/plans").json() if p["name"] == nome)


def test_planos_publicos(client: TestClient) -> None:
    planos = client.get("/api/subscriptions/plans").json()
    assert [p["name"] for p in planos] == ["Basico", "Profissional"]
    assert planos[0]["formatted_price"] == "R$ 49,90"
    assert planos[1]["has_trial"] is True


def test_ciclo_de_assinatura(client: TestClient, auth: Headers) -> None:
    assert client.get("/api/subscriptions/current", headers=auth).json() is None
    assert client.get("/api/subscriptions/active", headers=auth).json() == {"active": False}

    pro = _plano(client, "Profissional")
    criada = client.post("/api/subscriptions", headers=auth, json={"plan_id": pro["id"]})
    assert criada.status_code == 201
    assert criada.json()["data"]["status"] == "trial"
    assert criada.json()["data"]["days_remaining"] == 7

    repetida = client.post("/api/subscriptions", headers=auth, json={"plan_id": pro["id"]})
    assert repetida.status_code == 409

    basico = _plano(client, "Basico")
    trocada = client.put("/api/subscriptions", headers=auth, json={"plan_id": basico["id"]}).json()["data"]
    assert trocada["status"] == "active"
    assert trocada["plan"]["name"] == "Basico"

    historico = client.get("/api/subscriptions/history", headers=auth).json()
    assert sorted(a["status"] for a in historico) == ["active", "cancelled"]

    assert client.delete("/api/subscriptions", headers=auth).status_code == 200
    assert client.get("/api/subscriptions/active", headers=auth).json() == {"active": False}

    response = client.delete("/api/subscriptions", headers=auth)
    assert response.status_code == 404
    assert response.json()["detail"] == "Nenhuma assinatura ativa encontrada"


def test_plano_inexistente(client: TestClient, auth: Headers) -> None:
    response = client.post("/api/subscriptions", headers=auth, json={"plan_id": "999"})
    assert response.status_code == 404
    assert response.json()["detail"] == "Plano nao encontrado"
