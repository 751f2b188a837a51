# botijao/infrastructure/repositories/duckdb_gas_station_repo.py
from __future__ import annotations

from typing import Any

import duckdb

from botijao.domain.posto.entities import Coordinates, GasStation
from botijao.domain.shared.errors import NotFoundError
from botijao.infrastructure.duckdb_connection import next_id

from ._sql import dumps, executar_delete, executar_update, loads

_COLUNAS = (
    "id, user_id, name, cnpj, address, city, state, zip_code, phone, email, contact_person, "
    "capacity_liters, storage_type, license_number, license_expiry, operating_hours, services, "
    "payment_methods, lat, lng, is_active, notes, created_at, updated_at"
)

_ESCALARES = (
    "name", "cnpj", "address", "city", "state", "zip_code", "phone", "email", "contact_person",
    "capacity_liters", "storage_type", "license_number", "license_expiry", "is_active", "notes",
    "updated_at",
)
_JSON = ("operating_hours", "services", "payment_methods")


class DuckDBGasStationRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def get_by_id(self, gas_station_id: str) -> GasStation | None:
        postos = self._lista("id = ?", [gas_station_id])
        return postos[0] if postos else None

    def get_by_user_id(self, user_id: str) -> list[GasStation]:
        return self._lista("user_id = ?", [user_id])

    def get_active_by_user_id(self, user_id: str) -> list[GasStation]:
        return self._lista("user_id = ? AND is_active", [user_id])

    def search_by_location(self, city: str, state: str) -> list[GasStation]:
        return self._lista(
            "city ILIKE ? AND upper(state) = upper(?) AND is_active", [f"%{city}%", state],
        )

    def create(self, gas_station: GasStation) -> GasStation:
        novo_id = next_id(self._conn, "seq_gas_stations")
        placeholders = ", ".join(["?"] * 24)
        self._conn.execute(
            f"INSERT INTO gas_stations ({_COLUNAS}) VALUES ({placeholders})",  # noqa: S608
            [
                novo_id,
                gas_station.user_id,
                gas_station.name,
                gas_station.cnpj,
                gas_station.address,
                gas_station.city,
                gas_station.state,
                gas_station.zip_code,
                gas_station.phone,
                gas_station.email,
                gas_station.contact_person,
                gas_station.capacity_liters,
                gas_station.storage_type,
                gas_station.license_number,
                gas_station.license_expiry,
                dumps(gas_station.operating_hours),
                dumps(list(gas_station.services)),
                dumps(list(gas_station.payment_methods)),
                gas_station.coordinates.lat,
                gas_station.coordinates.lng,
                gas_station.is_active,
                gas_station.notes,
                gas_station.created_at,
                gas_station.updated_at,
            ],
        )
        return self._obrigatorio(novo_id)

    def update(self, gas_station_id: str, campos: dict[str, Any]) -> GasStation:
        linha: dict[str, Any] = {}
        for chave, valor in campos.items():
            if chave in _JSON:
                linha[chave] = dumps(list(valor) if isinstance(valor, tuple) else valor)
            elif chave == "coordinates":
                linha["lat"] = valor.lat if valor else None
                linha["lng"] = valor.lng if valor else None
            else:
                linha[chave] = valor
        if not executar_update(
            self._conn, "gas_stations", gas_station_id, linha, (*_ESCALARES, *_JSON, "lat", "lng"),
        ):
            raise NotFoundError("Posto")
        return self._obrigatorio(gas_station_id)

    def delete(self, gas_station_id: str) -> bool:
        return executar_delete(self._conn, "gas_stations", gas_station_id)

    def _lista(self, where: str, params: list[Any]) -> list[GasStation]:
        rows = self._conn.execute(
            f"SELECT {_COLUNAS} FROM gas_stations WHERE {where} ORDER BY name",  # noqa: S608
            params,
        ).fetchall()
        return [self._hidratar(r) for r in rows]

    def _obrigatorio(self, gas_station_id: str) -> GasStation:
        posto = self.get_by_id(gas_station_id)
        if posto is None:
            raise NotFoundError("Posto")
        return posto

    def _hidratar(self, row: tuple) -> GasStation:  # type: ignore[type-arg]
        """Colunas na ordem de _COLUNAS; 15-17 sao JSON, 18-19 lat/lng."""
        return GasStation(
            id=str(row[0]),
            user_id=str(row[1]),
            name=str(row[2]),
            cnpj=row[3],
            address=str(row[4]),
            city=str(row[5]),
            state=str(row[6]),
            zip_code=row[7],
            phone=row[8],
            email=row[9],
            contact_person=row[10],
            capacity_liters=int(row[11]) if row[11] is not None else None,
            storage_type=row[12],
            license_number=row[13],
            license_expiry=row[14],
            operating_hours=loads(row[15], {}),
            services=tuple(loads(row[16], [])),
            payment_methods=tuple(loads(row[17], [])),
            coordinates=Coordinates(lat=row[18], lng=row[19]),
            is_active=bool(row[20]),
            notes=row[21],
            created_at=row[22],
            updated_at=row[23],
        )
