# botijao/domain/entregador/repository.py
from __future__ import annotations

from typing import Protocol

from .entities import Deliveryman


class DeliverymanRepository(Protocol):
    def find_all(self) -> list[Deliveryman]: ...
    def find_by_id(self, deliveryman_id: str) -> Deliveryman | None: ...
    def find_by_gas_station_id(self, gas_station_id: str) -> list[Deliveryman]: ...
    def find_by_email(self, email: str) -> Deliveryman | None: ...
    def find_by_cpf(self, cpf: str) -> Deliveryman | None: ...
    def create(self, deliveryman: Deliveryman) -> Deliveryman: ...
    def update(self, deliveryman_id: str, deliveryman: Deliveryman) -> Deliveryman: ...
    def delete(self, deliveryman_id: str) -> bool: ...
