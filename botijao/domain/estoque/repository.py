# botijao/domain/estoque/repository.py
from __future__ import annotations

from typing import Any, Protocol

from .entities import InventoryItem


class InventoryRepository(Protocol):
    def get_by_gas_station_id(self, gas_station_id: str) -> list[InventoryItem]: ...
    def get_by_id(self, inventory_id: str) -> InventoryItem | None: ...
    def get_by_product_type(self, gas_station_id: str, product_type: str) -> InventoryItem | None: ...
    def get_low_stock_items(self, gas_station_id: str) -> list[InventoryItem]: ...
    def get_out_of_stock_items(self, gas_station_id: str) -> list[InventoryItem]: ...
    def create(self, item: InventoryItem) -> InventoryItem: ...
    def update(self, inventory_id: str, campos: dict[str, Any]) -> InventoryItem: ...
    def delete(self, inventory_id: str) -> bool: ...
