# botijao/application/services/gas_station_service.py
from __future__ import annotations

import dataclasses
from collections.abc import Callable
from datetime import datetime
from typing import Any

from botijao.domain.posto.entities import Coordinates, GasStation
from botijao.domain.posto.repository import GasStationRepository
from botijao.domain.shared.cnpj import only_digits
from botijao.domain.shared.errors import NotFoundError, ValidationError
from botijao.infrastructure.log import log

from ..dtos.common_dto import OperationResultDTO
from ..dtos.posto_dto import GasStationDTO

_EDITAVEIS = frozenset({
    "name", "address", "city", "state", "zip_code", "cnpj", "phone", "email",
    "contact_person", "capacity_liters", "storage_type", "license_number", "license_expiry",
    "operating_hours", "services", "payment_methods", "notes",
})


class GasStationService:
    def __init__(
        self,
        repo: GasStationRepository,
        relogio: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._repo = repo
        self._relogio = relogio

    def create(self, user_id: str, dados: dict[str, Any]) -> OperationResultDTO:
        agora = self._relogio()
        campos = {k: v for k, v in dados.items() if k in _EDITAVEIS and v is not None}
        posto = GasStation(
            user_id=user_id,
            name=(campos.pop("name", "") or "").strip(),
            address=(campos.pop("address", "") or "").strip(),
            city=(campos.pop("city", "") or "").strip(),
            state=(campos.pop("state", "") or "").strip().upper(),
            coordinates=Coordinates(lat=dados.get("lat"), lng=dados.get("lng")),
            created_at=agora,
            updated_at=agora,
            **_normalizar(campos),
        )
        erros = posto.validate()
        if erros:
            raise ValidationError(erros)

        criado = self._repo.create(posto)
        log(f"posto {criado.id} criado para usuario {user_id}")
        return OperationResultDTO(
            success=True, message="Posto criado com sucesso", data=self._dto(criado),
        )

    def update(self, gas_station_id: str, dados: dict[str, Any]) -> OperationResultDTO:
        atual = self._obter(gas_station_id)
        mudancas = _normalizar({k: v for k, v in dados.items() if k in _EDITAVEIS and v is not None})
        mudancas["updated_at"] = self._relogio()
        erros = dataclasses.replace(atual, **mudancas).validate()
        if erros:
            raise ValidationError(erros)

        salvo = self._repo.update(gas_station_id, mudancas)
        log(f"posto {gas_station_id} atualizado")
        return OperationResultDTO(success=True, message="Posto atualizado com sucesso", data=self._dto(salvo))

    def delete(self, gas_station_id: str) -> OperationResultDTO:
        self._obter(gas_station_id)
        self._repo.delete(gas_station_id)
        log(f"posto {gas_station_id} removido")
        return OperationResultDTO(success=True, message="Posto removido com sucesso")

    def get(self, gas_station_id: str) -> GasStationDTO:
        return self._dto(self._obter(gas_station_id))

    def list_by_user(self, user_id: str) -> list[GasStationDTO]:
        return [self._dto(p) for p in self._repo.get_by_user_id(user_id)]

    def list_active_by_user(self, user_id: str) -> list[GasStationDTO]:
        return [self._dto(p) for p in self._repo.get_active_by_user_id(user_id)]

    def search_by_location(self, city: str | None, state: str | None) -> list[GasStationDTO]:
        if not city or not state:
            raise ValidationError("Cidade e estado sao obrigatorios para a busca")
        return [self._dto(p) for p in self._repo.search_by_location(city.strip(), state.strip())]

    def toggle_active(self, gas_station_id: str) -> OperationResultDTO:
        atual = self._obter(gas_station_id)
        salvo = self._repo.update(
            gas_station_id, {"is_active": not atual.is_active, "updated_at": self._relogio()},
        )
        log(f"posto {gas_station_id}: ativo={salvo.is_active}")
        estado = "ativado" if salvo.is_active else "desativado"
        return OperationResultDTO(success=True, message=f"Posto {estado} com sucesso", data=self._dto(salvo))

    def owned_by(self, gas_station_id: str, user_id: str) -> bool:
        posto = self._repo.get_by_id(gas_station_id)
        return posto is not None and posto.user_id == user_id

    def _dto(self, posto: GasStation) -> GasStationDTO:
        return GasStationDTO.from_domain(posto, self._relogio().date())

    def _obter(self, gas_station_id: str) -> GasStation:
        posto = self._repo.get_by_id(gas_station_id)
        if posto is None:
            raise NotFoundError("Posto")
        return posto


def _normalizar(campos: dict[str, Any]) -> dict[str, Any]:
    campos = dict(campos)
    if campos.get("cnpj"):
        campos["cnpj"] = only_digits(campos["cnpj"])
    for chave in ("services", "payment_methods"):
        if chave in campos:
            campos[chave] = tuple(campos[chave])
    return campos
