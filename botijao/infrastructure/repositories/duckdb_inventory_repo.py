# botijao/infrastructure/repositories/duckdb_inventory_repo.py
from __future__ import annotations

from decimal import Decimal
from typing import Any

import duckdb

from botijao.domain.estoque.entities import InventoryItem
from botijao.domain.estoque.enums import StockStatus
from botijao.domain.estoque.status import compute_stock_status
from botijao.domain.shared.errors import NotFoundError
from botijao.infrastructure.duckdb_connection import next_id

from ._sql import executar_delete, executar_update

_COLUNAS = (
    "id, gas_station_id, product_type, quantity, min_quantity, max_quantity, unit_price, "
    "supplier, last_restock_date, next_restock_date, notes, created_at, updated_at"
)

_ATUALIZAVEIS = (
    "product_type", "quantity", "min_quantity", "max_quantity", "unit_price", "supplier",
    "last_restock_date", "next_restock_date", "notes", "updated_at", "status",
)


class DuckDBInventoryRepo:
    """A coluna status e gravada a cada escrita a partir de compute_stock_status,
    apenas para permitir filtros no SQL. Na leitura ela e ignorada."""

    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def get_by_gas_station_id(self, gas_station_id: str) -> list[InventoryItem]:
        return self._lista("gas_station_id = ?", [gas_station_id])

    def get_by_id(self, inventory_id: str) -> InventoryItem | None:
        itens = self._lista("id = ?", [inventory_id])
        return itens[0] if itens else None

    def get_by_product_type(self, gas_station_id: str, product_type: str) -> InventoryItem | None:
        itens = self._lista("gas_station_id = ? AND product_type = ?", [gas_station_id, product_type])
        return itens[0] if itens else None

    def get_low_stock_items(self, gas_station_id: str) -> list[InventoryItem]:
        return self._lista(
            "gas_station_id = ? AND status = ?", [gas_station_id, StockStatus.LOW_STOCK.value],
        )

    def get_out_of_stock_items(self, gas_station_id: str) -> list[InventoryItem]:
        return self._lista(
            "gas_station_id = ? AND status = ?", [gas_station_id, StockStatus.OUT_OF_STOCK.value],
        )

    def create(self, item: InventoryItem) -> InventoryItem:
        novo_id = next_id(self._conn, "seq_inventory")
        self._conn.execute(
            f"INSERT INTO inventory ({_COLUNAS}, status) "  # noqa: S608
            "VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",
            [
                novo_id,
                item.gas_station_id,
                item.product_type,
                item.quantity,
                item.min_quantity,
                item.max_quantity,
                item.unit_price,
                item.supplier,
                item.last_restock_date,
                item.next_restock_date,
                item.notes,
                item.created_at,
                item.updated_at,
                item.status.value,
            ],
        )
        return self._obrigatorio(novo_id)

    def update(self, inventory_id: str, campos: dict[str, Any]) -> InventoryItem:
        atual = self._obrigatorio(inventory_id)
        campos = dict(campos)
        campos["status"] = compute_stock_status(
            int(campos.get("quantity", atual.quantity)),
            int(campos.get("min_quantity", atual.min_quantity)),
            int(campos.get("max_quantity", atual.max_quantity)),
        ).value
        executar_update(self._conn, "inventory", inventory_id, campos, _ATUALIZAVEIS)
        return self._obrigatorio(inventory_id)

    def delete(self, inventory_id: str) -> bool:
        return executar_delete(self._conn, "inventory", inventory_id)

    def _lista(self, where: str, params: list[Any]) -> list[InventoryItem]:
        rows = self._conn.execute(
            f"SELECT {_COLUNAS} FROM inventory WHERE {where} ORDER BY product_type",  # noqa: S608
            params,
        ).fetchall()
        return [self._hidratar(r) for r in rows]

    def _obrigatorio(self, inventory_id: str) -> InventoryItem:
        item = self.get_by_id(inventory_id)
        if item is None:
            raise NotFoundError("Item de estoque")
        return item

    def _hidratar(self, row: tuple) -> InventoryItem:  # type: ignore[type-arg]
        """Colunas: id(0), gas_station_id(1), product_type(2), quantity(3),
        min_quantity(4), max_quantity(5), unit_price(6), supplier(7),
        last_restock_date(8), next_restock_date(9), notes(10), created_at(11),
        updated_at(12)"""
        return InventoryItem(
            id=str(row[0]),
            gas_station_id=str(row[1]),
            product_type=str(row[2]),
            quantity=int(row[3]),
            min_quantity=int(row[4]),
            max_quantity=int(row[5]),
            unit_price=Decimal(str(row[6])) if row[6] is not None else Decimal("0"),
            supplier=row[7],
            last_restock_date=row[8],
            next_restock_date=row[9],
            notes=row[10],
            created_at=row[11],
            updated_at=row[12],
        )
