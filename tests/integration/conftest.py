# tests/integration/conftest.py
from __future__ import annotations

import os
import random
import uuid
from collections.abc import Callable, Generator
from decimal import Decimal

import duckdb
import pytest
from fastapi.testclient import TestClient

from botijao.domain.assinatura.entities import SubscriptionPlan
from botijao.domain.shared.cnpj import calculate_check_digits
from botijao.infrastructure.duckdb_connection import apply_schema
from botijao.infrastructure.repositories.duckdb_subscription_repo import DuckDBSubscriptionPlanRepo

# Desabilitar rate limit em testes
os.environ["API_RATE_LIMIT_PER_MINUTE"] = "0"

Headers = dict[str, str]


@pytest.fixture(scope="session")
def test_db() -> Generator[duckdb.DuckDBPyConnection, None, None]:
    """DuckDB in-memory com schema e os dois planos de assinatura."""
    conn = duckdb.connect(":memory:")
    apply_schema(conn)

    planos = DuckDBSubscriptionPlanRepo(conn)
    planos.create(SubscriptionPlan(
        name="Basico", price=Decimal("49.90"), features=("1 ponto de venda", "Controle de estoque"),
    ))
    planos.create(SubscriptionPlan(
        name="Profissional", price=Decimal("99.90"), trial_days=7,
        features=("Pontos de venda ilimitados", "Notas fiscais", "Relatorios"),
    ))

    yield conn
    conn.close()


@pytest.fixture(scope="session")
def client(test_db: duckdb.DuckDBPyConnection) -> Generator[TestClient, None, None]:
    """TestClient do FastAPI com DuckDB in-memory injetado."""
    # Limpar cache de settings para pegar API_RATE_LIMIT_PER_MINUTE=0
    from botijao.infrastructure.config import get_settings
    get_settings.cache_clear()

    from botijao.interfaces.api.main import app
    app.state.db = test_db
    with TestClient(app) as c:
        yield c


def _novo_email() -> str:
    return f"user-{uuid.uuid4().hex[:10]}@gas.com"


@pytest.fixture()
def novo_email() -> Callable[[], str]:
    return _novo_email


@pytest.fixture()
def novo_cnpj() -> Callable[[], str]:
    """CNPJ aleatorio com digitos verificadores corretos."""

    def _novo_cnpj() -> str:
        base = f"{random.randint(10_000_000, 99_999_999)}0001"
        return base + calculate_check_digits(base)

    return _novo_cnpj


@pytest.fixture()
def novo_cpf() -> Callable[[], str]:
    return lambda: f"{random.randint(10**10, 10**11 - 1)}"


@pytest.fixture()
def cadastrar(client: TestClient) -> Callable[..., Headers]:
    """Cadastra um usuario novo e devolve o header Authorization."""

    def _cadastrar(**extra: str) -> Headers:
        payload = {
            "email": _novo_email(),
            "password": "segredo1",
            "confirm_password": "segredo1",
            "first_name": "Ana",
            "last_name": "Lima",
        }
        payload.update(extra)
        response = client.post("/api/auth/sign-up", json=payload)
        assert response.status_code == 201, response.text
        return {"Authorization": f"Bearer {response.json()['data']['access_token']}"}

    return _cadastrar


@pytest.fixture()
def auth(cadastrar: Callable[..., Headers]) -> Headers:
    return cadastrar()


@pytest.fixture()
def station_id(client: TestClient, auth: Headers) -> str:
    response = client.post("/api/stations", headers=auth, json={
        "name": "Posto Central",
        "address": "Av. Brasil, 100",
        "city": "Campinas",
        "state": "SP",
        "services": ["delivery"],
        "payment_methods": ["pix"],
    })
    assert response.status_code == 201, response.text
    return response.json()["data"]["id"]
