# botijao/application/dtos/entregador_dto.py
from __future__ import annotations

from pydantic import BaseModel

from botijao.domain.entregador.entities import Deliveryman
from botijao.domain.entregador.value_objects import AVAILABLE_PERMISSIONS


class DeliverymanCreateDTO(BaseModel):
    name: str
    phone: str
    email: str
    cpf: str
    gas_station_id: str | None = None
    active: bool = True
    permissions: list[str] = []


class DeliverymanUpdateDTO(BaseModel):
    name: str | None = None
    phone: str | None = None
    email: str | None = None
    cpf: str | None = None
    gas_station_id: str | None = None


class PermissionsUpdateDTO(BaseModel):
    permissions: list[str]


class PermissionDTO(BaseModel):
    id: str
    label: str


class DeliverymanDTO(BaseModel):
    id: str | None
    name: str
    phone: str
    email: str
    cpf: str  # sempre mascarado
    gas_station_id: str | None
    active: bool
    permissions: list[PermissionDTO]

    @classmethod
    def from_domain(cls, d: Deliveryman) -> DeliverymanDTO:
        return cls(
            id=d.id,
            name=d.name,
            phone=d.phone,
            email=d.email,
            cpf=d.cpf_mascarado,
            gas_station_id=d.gas_station_id,
            active=d.active,
            permissions=[
                PermissionDTO(id=p, label=AVAILABLE_PERMISSIONS.get(p, p))
                for p in sorted(d.permissions)
            ],
        )
