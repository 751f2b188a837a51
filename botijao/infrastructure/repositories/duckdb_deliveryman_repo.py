# botijao/infrastructure/repositories/duckdb_deliveryman_repo.py
from __future__ import annotations

import duckdb

from botijao.domain.entregador.entities import Deliveryman
from botijao.domain.entregador.value_objects import normalizar_permissoes
from botijao.domain.shared.errors import NotFoundError
from botijao.infrastructure.duckdb_connection import next_id

from ._sql import dumps, executar_delete, executar_update, loads

_COLUNAS = (
    "id, name, phone, email, cpf, active, permissions, gas_station_id, created_at, updated_at"
)


class DuckDBDeliverymanRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def find_all(self) -> list[Deliveryman]:
        rows = self._conn.execute(
            f"SELECT {_COLUNAS} FROM deliverymen ORDER BY name",  # noqa: S608
        ).fetchall()
        return [self._hidratar(r) for r in rows]

    def find_by_id(self, deliveryman_id: str) -> Deliveryman | None:
        return self._um("id = ?", deliveryman_id)

    def find_by_gas_station_id(self, gas_station_id: str) -> list[Deliveryman]:
        rows = self._conn.execute(
            f"SELECT {_COLUNAS} FROM deliverymen WHERE gas_station_id = ? ORDER BY name",  # noqa: S608
            [gas_station_id],
        ).fetchall()
        return [self._hidratar(r) for r in rows]

    def find_by_email(self, email: str) -> Deliveryman | None:
        return self._um("lower(email) = lower(?)", email.strip())

    def find_by_cpf(self, cpf: str) -> Deliveryman | None:
        return self._um("cpf = ?", cpf)

    def create(self, deliveryman: Deliveryman) -> Deliveryman:
        novo_id = next_id(self._conn, "seq_deliverymen")
        self._conn.execute(
            f"INSERT INTO deliverymen ({_COLUNAS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",  # noqa: S608
            [
                novo_id,
                deliveryman.name,
                deliveryman.phone,
                deliveryman.email,
                deliveryman.cpf,
                deliveryman.active,
                dumps(sorted(deliveryman.permissions)),
                deliveryman.gas_station_id,
                deliveryman.created_at,
                deliveryman.updated_at,
            ],
        )
        return self._obrigatorio(novo_id)

    def update(self, deliveryman_id: str, deliveryman: Deliveryman) -> Deliveryman:
        existia = executar_update(
            self._conn,
            "deliverymen",
            deliveryman_id,
            {
                "name": deliveryman.name,
                "phone": deliveryman.phone,
                "email": deliveryman.email,
                "cpf": deliveryman.cpf,
                "active": deliveryman.active,
                "permissions": dumps(sorted(deliveryman.permissions)),
                "gas_station_id": deliveryman.gas_station_id,
                "updated_at": deliveryman.updated_at,
            },
            ("name", "phone", "email", "cpf", "active", "permissions", "gas_station_id", "updated_at"),
        )
        if not existia:
            raise NotFoundError("Entregador")
        return self._obrigatorio(deliveryman_id)

    def delete(self, deliveryman_id: str) -> bool:
        return executar_delete(self._conn, "deliverymen", deliveryman_id)

    def _um(self, where: str, valor: str) -> Deliveryman | None:
        row = self._conn.execute(
            f"SELECT {_COLUNAS} FROM deliverymen WHERE {where} LIMIT 1",  # noqa: S608
            [valor],
        ).fetchone()
        return self._hidratar(row) if row else None

    def _obrigatorio(self, deliveryman_id: str) -> Deliveryman:
        entregador = self.find_by_id(deliveryman_id)
        if entregador is None:
            raise NotFoundError("Entregador")
        return entregador

    def _hidratar(self, row: tuple) -> Deliveryman:  # type: ignore[type-arg]
        """Colunas: id(0), name(1), phone(2), email(3), cpf(4), active(5),
        permissions(6, JSON), gas_station_id(7), created_at(8), updated_at(9)"""
        return Deliveryman(
            id=str(row[0]),
            name=str(row[1]),
            phone=str(row[2]),
            email=str(row[3]),
            cpf=str(row[4]),
            active=bool(row[5]),
            permissions=normalizar_permissoes(loads(row[6], [])),
            gas_station_id=str(row[7]) if row[7] else None,
            created_at=row[8],
            updated_at=row[9],
        )
