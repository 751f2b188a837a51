# botijao/interfaces/api/dependencies.py
#
# Fabrica de services por request. A conexao do processo fica em
# app.state.db; cada request recebe um cursor proprio, fechado ao final.
from __future__ import annotations

from collections.abc import Iterator

import duckdb
from fastapi import Depends, Header, HTTPException, Request

from botijao.application.services.auth_service import MSG_CREDENCIAIS_INVALIDAS, AuthService
from botijao.application.services.company_service import CompanyService
from botijao.application.services.delivery_service import DeliveryService
from botijao.application.services.deliveryman_service import DeliverymanService
from botijao.application.services.gas_station_service import GasStationService
from botijao.application.services.inventory_service import InventoryService
from botijao.application.services.subscription_service import SubscriptionService
from botijao.domain.usuario.entities import User
from botijao.infrastructure.config import get_settings
from botijao.infrastructure.repositories.duckdb_auth_repo import DuckDBAuthRepo
from botijao.infrastructure.repositories.duckdb_company_repo import DuckDBCompanyRepo
from botijao.infrastructure.repositories.duckdb_delivery_repo import DuckDBDeliveryRepo
from botijao.infrastructure.repositories.duckdb_deliveryman_repo import DuckDBDeliverymanRepo
from botijao.infrastructure.repositories.duckdb_gas_station_repo import DuckDBGasStationRepo
from botijao.infrastructure.repositories.duckdb_inventory_repo import DuckDBInventoryRepo
from botijao.infrastructure.repositories.duckdb_subscription_repo import (
    DuckDBSubscriptionPlanRepo,
    DuckDBUserSubscriptionRepo,
)
from botijao.infrastructure.repositories.duckdb_user_repo import DuckDBUserRepo


def get_db(request: Request) -> Iterator[duckdb.DuckDBPyConnection]:
    cursor = request.app.state.db.cursor()
    try:
        yield cursor
    finally:
        cursor.close()


def get_auth_repo(
    request: Request,
    conn: duckdb.DuckDBPyConnection = Depends(get_db),  # noqa: B008
) -> DuckDBAuthRepo:
    return DuckDBAuthRepo(conn, get_settings(), request.app.state.auth_events)


def get_auth_service(
    conn: duckdb.DuckDBPyConnection = Depends(get_db),  # noqa: B008
    auth_repo: DuckDBAuthRepo = Depends(get_auth_repo),  # noqa: B008
) -> AuthService:
    return AuthService(
        auth_repo=auth_repo,
        user_repo=DuckDBUserRepo(conn),
        company_repo=DuckDBCompanyRepo(conn),
    )


def get_bearer_token(authorization: str | None = Header(default=None)) -> str:
    esquema, _, token = (authorization or "").partition(" ")
    if esquema.lower() != "bearer" or not token.strip():
        raise HTTPException(status_code=401, detail=MSG_CREDENCIAIS_INVALIDAS)
    return token.strip()


def get_current_user(
    token: str = Depends(get_bearer_token),  # noqa: B008
    service: AuthService = Depends(get_auth_service),  # noqa: B008
) -> User:
    sessao = service.current_session(token)
    if sessao is None or sessao.user is None:
        raise HTTPException(status_code=401, detail=MSG_CREDENCIAIS_INVALIDAS)
    return sessao.user


def get_inventory_service(
    conn: duckdb.DuckDBPyConnection = Depends(get_db),  # noqa: B008
) -> InventoryService:
    return InventoryService(DuckDBInventoryRepo(conn))


def get_delivery_service(
    conn: duckdb.DuckDBPyConnection = Depends(get_db),  # noqa: B008
    inventory_service: InventoryService = Depends(get_inventory_service),  # noqa: B008
) -> DeliveryService:
    return DeliveryService(DuckDBDeliveryRepo(conn), inventory_service=inventory_service)


def get_deliveryman_service(
    conn: duckdb.DuckDBPyConnection = Depends(get_db),  # noqa: B008
) -> DeliverymanService:
    return DeliverymanService(DuckDBDeliverymanRepo(conn))


def get_gas_station_service(
    conn: duckdb.DuckDBPyConnection = Depends(get_db),  # noqa: B008
) -> GasStationService:
    return GasStationService(DuckDBGasStationRepo(conn))


def get_company_service(
    conn: duckdb.DuckDBPyConnection = Depends(get_db),  # noqa: B008
) -> CompanyService:
    return CompanyService(DuckDBCompanyRepo(conn))


def get_subscription_service(
    conn: duckdb.DuckDBPyConnection = Depends(get_db),  # noqa: B008
) -> SubscriptionService:
    return SubscriptionService(DuckDBSubscriptionPlanRepo(conn), DuckDBUserSubscriptionRepo(conn))
