# botijao/domain/posto/repository.py
from __future__ import annotations

from typing import Any, Protocol

from .entities import GasStation


class GasStationRepository(Protocol):
    def get_by_id(self, gas_station_id: str) -> GasStation | None: ...
    def get_by_user_id(self, user_id: str) -> list[GasStation]: ...
    def get_active_by_user_id(self, user_id: str) -> list[GasStation]: ...
    def search_by_location(self, city: str, state: str) -> list[GasStation]: ...
    def create(self, gas_station: GasStation) -> GasStation: ...
    def update(self, gas_station_id: str, campos: dict[str, Any]) -> GasStation: ...
    def delete(self, gas_station_id: str) -> bool: ...
