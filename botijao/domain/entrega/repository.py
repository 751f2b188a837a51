# botijao/domain/entrega/repository.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Protocol

from .entities import Delivery


@dataclass(frozen=True)
class DeliveryFilters:
    status: str | None = None
    priority: str | None = None
    date_from: datetime | None = None
    date_to: datetime | None = None


class DeliveryRepository(Protocol):
    def get_by_gas_station(self, gas_station_id: str, filters: DeliveryFilters) -> list[Delivery]: ...
    def get_by_id(self, delivery_id: str) -> Delivery | None: ...
    def create(self, delivery: Delivery) -> Delivery: ...
    def update_status(self, delivery_id: str, status: str, extra: dict[str, Any] | None = None) -> Delivery: ...
    def update_invoice(self, delivery_id: str, invoice_number: str, generated_at: datetime) -> Delivery: ...
    def delete(self, delivery_id: str) -> bool: ...
    def list_status_and_priority(
        self, gas_station_id: str, date_from: datetime | None, date_to: datetime | None,
    ) -> list[tuple[str, str]]: ...
