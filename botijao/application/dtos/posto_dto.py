# botijao/application/dtos/posto_dto.py
from __future__ import annotations

from datetime import date

from pydantic import BaseModel

from botijao.domain.posto.entities import GasStation


class GasStationCreateDTO(BaseModel):
    name: str
    address: str
    city: str
    state: str
    zip_code: str | None = None
    cnpj: str | None = None
    phone: str | None = None
    email: str | None = None
    contact_person: str | None = None
    capacity_liters: int | None = None
    storage_type: str | None = None
    license_number: str | None = None
    license_expiry: date | None = None
    operating_hours: dict[str, dict[str, str]] = {}
    services: list[str] = []
    payment_methods: list[str] = []
    lat: float | None = None
    lng: float | None = None
    notes: str | None = None


class GasStationUpdateDTO(BaseModel):
    name: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    cnpj: str | None = None
    phone: str | None = None
    email: str | None = None
    contact_person: str | None = None
    capacity_liters: int | None = None
    storage_type: str | None = None
    license_number: str | None = None
    license_expiry: date | None = None
    operating_hours: dict[str, dict[str, str]] | None = None
    services: list[str] | None = None
    payment_methods: list[str] | None = None
    notes: str | None = None


class GasStationDTO(BaseModel):
    id: str | None
    user_id: str
    name: str
    cnpj: str | None
    full_address: str
    city: str
    state: str
    phone: str | None
    email: str | None
    is_active: bool
    has_coordinates: bool
    license_number: str | None
    license_expiry: str | None
    license_expired: bool
    license_expiring_soon: bool
    operating_hours: str
    services: str
    payment_methods: str

    @classmethod
    def from_domain(cls, posto: GasStation, referencia: date) -> GasStationDTO:
        return cls(
            id=posto.id,
            user_id=posto.user_id,
            name=posto.name,
            cnpj=posto.cnpj,
            full_address=posto.full_address,
            city=posto.city,
            state=posto.state,
            phone=posto.phone,
            email=posto.email,
            is_active=posto.is_active,
            has_coordinates=posto.has_coordinates,
            license_number=posto.license_number,
            license_expiry=posto.license_expiry.isoformat() if posto.license_expiry else None,
            license_expired=posto.is_license_expired(referencia),
            license_expiring_soon=posto.is_license_expiring_soon(referencia),
            operating_hours=posto.operating_hours_formatted,
            services=posto.services_formatted,
            payment_methods=posto.payment_methods_formatted,
        )
