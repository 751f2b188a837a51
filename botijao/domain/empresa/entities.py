# botijao/domain/empresa/entities.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from botijao.domain.shared.cnpj import format_cnpj, only_digits
from botijao.domain.shared.validators import (
    collect,
    validate_cnpj,
    validate_email,
    validate_name,
    validate_phone,
)


@dataclass(frozen=True)
class Company:
    """Perfil da empresa (usuario pessoa juridica). CNPJ guardado so com digitos."""

    name: str
    cnpj: str
    email: str
    user_id: str | None = None
    phone: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def validate(self) -> list[str]:
        return collect(
            validate_name(self.name, "Nome da empresa"),
            validate_cnpj(self.cnpj),
            validate_email(self.email),
            validate_phone(self.phone),
        )

    @property
    def cnpj_digitos(self) -> str:
        return only_digits(self.cnpj)

    @property
    def formatted_cnpj(self) -> str:
        return format_cnpj(self.cnpj) if self.cnpj else ""

    @property
    def is_complete(self) -> bool:
        return bool(self.name and self.email and self.cnpj)
