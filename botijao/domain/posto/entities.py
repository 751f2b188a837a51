# botijao/domain/posto/entities.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta

from botijao.domain.shared.validators import (
    collect,
    validate_cnpj,
    validate_email,
    validate_phone,
)

JANELA_VENCIMENTO_LICENCA = timedelta(days=30)

DIAS_SEMANA = (
    ("monday", "Segunda"),
    ("tuesday", "Terca"),
    ("wednesday", "Quarta"),
    ("thursday", "Quinta"),
    ("friday", "Sexta"),
    ("saturday", "Sabado"),
    ("sunday", "Domingo"),
)

SERVICE_LABELS = {
    "delivery": "Entrega",
    "pickup": "Retirada",
    "emergency": "Emergencia",
    "bulk": "Atacado",
}

PAYMENT_METHOD_LABELS = {
    "cash": "Dinheiro",
    "credit": "Cartao de Credito",
    "debit": "Cartao de Debito",
    "pix": "PIX",
    "transfer": "Transferencia",
}


@dataclass(frozen=True)
class Coordinates:
    lat: float | None = None
    lng: float | None = None


@dataclass(frozen=True)
class GasStation:
    """Ponto de venda. Dono do estoque e destino das entregas."""

    user_id: str
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
    storage_type: str | None = None  # underground, above_ground, mobile
    license_number: str | None = None
    license_expiry: date | None = None
    operating_hours: dict[str, dict[str, str]] = field(default_factory=dict)
    services: tuple[str, ...] = ()
    payment_methods: tuple[str, ...] = ()
    coordinates: Coordinates = field(default_factory=Coordinates)
    is_active: bool = True
    notes: str | None = None
    id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def validate(self) -> list[str]:
        erros: list[str] = []
        if not all(v and v.strip() for v in (self.name, self.address, self.city, self.state)):
            erros.append("Nome, endereco, cidade e estado sao obrigatorios")
        erros.extend(collect(
            validate_cnpj(self.cnpj) if self.cnpj else None,
            validate_email(self.email) if self.email else None,
            validate_phone(self.phone),
        ))
        return erros

    @property
    def full_address(self) -> str:
        return f"{self.address}, {self.city} - {self.state}, {self.zip_code or ''}".rstrip(", ")

    @property
    def has_coordinates(self) -> bool:
        return bool(self.coordinates.lat and self.coordinates.lng)

    def is_license_expired(self, referencia: date) -> bool:
        if self.license_expiry is None:
            return False
        return referencia > self.license_expiry

    def is_license_expiring_soon(self, referencia: date) -> bool:
        if self.license_expiry is None:
            return False
        return referencia < self.license_expiry <= referencia + JANELA_VENCIMENTO_LICENCA

    @property
    def operating_hours_formatted(self) -> str:
        if not self.operating_hours:
            return "Nao informado"
        return ", ".join(
            f"{nome}: {self.operating_hours[dia]['open']} - {self.operating_hours[dia]['close']}"
            for dia, nome in DIAS_SEMANA
            if dia in self.operating_hours
        )

    @property
    def services_formatted(self) -> str:
        if not self.services:
            return "Nenhum servico informado"
        return ", ".join(SERVICE_LABELS.get(s, s) for s in self.services)

    @property
    def payment_methods_formatted(self) -> str:
        if not self.payment_methods:
            return "Nenhum metodo informado"
        return ", ".join(PAYMENT_METHOD_LABELS.get(m, m) for m in self.payment_methods)
