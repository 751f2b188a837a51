# botijao/infrastructure/repositories/duckdb_delivery_repo.py
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any

import duckdb

from botijao.domain.entrega.entities import Delivery
from botijao.domain.entrega.repository import DeliveryFilters
from botijao.domain.entrega.value_objects import DeliveryAddress, DeliveryItem
from botijao.domain.shared.errors import NotFoundError
from botijao.infrastructure.duckdb_connection import next_id

from ._sql import dumps, executar_delete, executar_update, loads

_COLUNAS = (
    "id, gas_station_id, customer_name, customer_phone, customer_email, delivery_address, "
    "items, total_amount, status, priority, estimated_delivery, order_date, delivered_at, "
    "invoice_number, invoice_generated_at, notes, created_at, updated_at"
)

_EXTRAS_STATUS = ("estimated_delivery", "delivered_at", "notes", "priority")


def _endereco_para_json(endereco: DeliveryAddress | None) -> str | None:
    if endereco is None:
        return None
    return dumps({
        "street": endereco.street,
        "neighborhood": endereco.neighborhood,
        "city": endereco.city,
        "state": endereco.state,
        "zip_code": endereco.zip_code,
    })


def _itens_para_json(itens: tuple[DeliveryItem, ...]) -> str:
    return dumps([
        {"product_name": i.product_name, "quantity": i.quantity, "price": str(i.price)}
        for i in itens
    ])


class DuckDBDeliveryRepo:
    """Update de linha burro: nenhuma checagem de transicao aqui."""

    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def get_by_gas_station(self, gas_station_id: str, filters: DeliveryFilters) -> list[Delivery]:
        where = ["gas_station_id = ?"]
        params: list[Any] = [gas_station_id]
        if filters.status:
            where.append("status = ?")
            params.append(filters.status)
        if filters.priority:
            where.append("priority = ?")
            params.append(filters.priority)
        if filters.date_from:
            where.append("created_at >= ?")
            params.append(filters.date_from)
        if filters.date_to:
            where.append("created_at <= ?")
            params.append(filters.date_to)
        rows = self._conn.execute(
            f"SELECT {_COLUNAS} FROM deliveries WHERE {' AND '.join(where)} "  # noqa: S608
            "ORDER BY created_at DESC, id DESC",
            params,
        ).fetchall()
        return [self._hidratar(r) for r in rows]

    def get_by_id(self, delivery_id: str) -> Delivery | None:
        row = self._conn.execute(
            f"SELECT {_COLUNAS} FROM deliveries WHERE id = ?",  # noqa: S608
            [delivery_id],
        ).fetchone()
        return self._hidratar(row) if row else None

    def create(self, delivery: Delivery) -> Delivery:
        novo_id = next_id(self._conn, "seq_deliveries")
        self._conn.execute(
            f"INSERT INTO deliveries ({_COLUNAS}) "  # noqa: S608
            "VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",
            [
                novo_id,
                delivery.gas_station_id,
                delivery.customer_name,
                delivery.customer_phone,
                delivery.customer_email,
                _endereco_para_json(delivery.delivery_address),
                _itens_para_json(delivery.items),
                delivery.total_amount,
                str(delivery.status),
                str(delivery.priority),
                delivery.estimated_delivery,
                delivery.order_date,
                delivery.delivered_at,
                delivery.invoice_number,
                delivery.invoice_generated_at,
                delivery.notes,
                delivery.created_at,
                delivery.updated_at,
            ],
        )
        return self._obrigatorio(novo_id)

    def update_status(
        self, delivery_id: str, status: str, extra: dict[str, Any] | None = None,
    ) -> Delivery:
        campos: dict[str, Any] = {"status": str(status), **(extra or {})}
        campos.setdefault("updated_at", datetime.now())
        if not executar_update(
            self._conn, "deliveries", delivery_id, campos, ("status", "updated_at", *_EXTRAS_STATUS),
        ):
            raise NotFoundError("Entrega", feminino=True)
        return self._obrigatorio(delivery_id)

    def update_invoice(self, delivery_id: str, invoice_number: str, generated_at: datetime) -> Delivery:
        if not executar_update(
            self._conn,
            "deliveries",
            delivery_id,
            {
                "invoice_number": invoice_number,
                "invoice_generated_at": generated_at,
                "updated_at": generated_at,
            },
            ("invoice_number", "invoice_generated_at", "updated_at"),
        ):
            raise NotFoundError("Entrega", feminino=True)
        return self._obrigatorio(delivery_id)

    def delete(self, delivery_id: str) -> bool:
        return executar_delete(self._conn, "deliveries", delivery_id)

    def list_status_and_priority(
        self, gas_station_id: str, date_from: datetime | None, date_to: datetime | None,
    ) -> list[tuple[str, str]]:
        where = ["gas_station_id = ?"]
        params: list[Any] = [gas_station_id]
        if date_from:
            where.append("created_at >= ?")
            params.append(date_from)
        if date_to:
            where.append("created_at <= ?")
            params.append(date_to)
        rows = self._conn.execute(
            f"SELECT status, priority FROM deliveries WHERE {' AND '.join(where)}",  # noqa: S608
            params,
        ).fetchall()
        return [(r[0], r[1]) for r in rows]

    def _obrigatorio(self, delivery_id: str) -> Delivery:
        entrega = self.get_by_id(delivery_id)
        if entrega is None:
            raise NotFoundError("Entrega", feminino=True)
        return entrega

    def _hidratar(self, row: tuple) -> Delivery:  # type: ignore[type-arg]
        """Colunas: id(0), gas_station_id(1), customer_name(2), customer_phone(3),
        customer_email(4), delivery_address(5, JSON), items(6, JSON),
        total_amount(7), status(8), priority(9), estimated_delivery(10),
        order_date(11), delivered_at(12), invoice_number(13),
        invoice_generated_at(14), notes(15), created_at(16), updated_at(17)"""
        endereco = loads(row[5], None)
        return Delivery(
            id=str(row[0]),
            gas_station_id=str(row[1]),
            customer_name=str(row[2]),
            customer_phone=str(row[3]),
            customer_email=row[4],
            delivery_address=DeliveryAddress(
                street=str(endereco.get("street", "")),
                neighborhood=str(endereco.get("neighborhood", "")),
                city=str(endereco.get("city", "")),
                state=str(endereco.get("state", "")),
                zip_code=str(endereco.get("zip_code", "")),
            ) if endereco else None,
            items=tuple(
                DeliveryItem(
                    product_name=str(i.get("product_name", "")),
                    quantity=int(i.get("quantity", 0)),
                    price=Decimal(str(i.get("price", "0"))),
                )
                for i in loads(row[6], [])
            ),
            total_amount=Decimal(str(row[7])),
            status=str(row[8]),
            priority=str(row[9]),
            estimated_delivery=row[10],
            order_date=row[11],
            delivered_at=row[12],
            invoice_number=row[13],
            invoice_generated_at=row[14],
            notes=row[15],
            created_at=row[16],
            updated_at=row[17],
        )
