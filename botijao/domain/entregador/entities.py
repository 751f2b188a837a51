# botijao/domain/entregador/entities.py
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import datetime

from botijao.domain.shared.cnpj import only_digits
from botijao.domain.shared.validators import collect

from .value_objects import mascarar_cpf


@dataclass(frozen=True)
class Deliveryman:
    """Entregador vinculado a um posto. Imutavel: ciclo de vida (ativar,
    desativar, permissoes) devolve uma nova instancia."""

    name: str
    phone: str
    email: str
    cpf: str
    gas_station_id: str | None = None
    active: bool = True
    permissions: frozenset[str] = field(default_factory=frozenset)
    id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def validate(self) -> list[str]:
        """Todas as violacoes, na ordem dos campos. Lista vazia = valido."""
        return collect(
            None if self.name and len(self.name.strip()) >= 2
            else "Nome deve ter pelo menos 2 caracteres",
            None if len(only_digits(self.phone)) >= 10
            else "Telefone deve ter pelo menos 10 digitos",
            None if self.email and "@" in self.email
            else "E-mail deve ser valido",
            None if len(only_digits(self.cpf)) == 11
            else "CPF deve ter 11 digitos",
            None if self.gas_station_id
            else "Posto e obrigatorio",
        )

    def has_permission(self, permission: str) -> bool:
        return permission in self.permissions

    def with_permission(self, permission: str) -> Deliveryman:
        return dataclasses.replace(self, permissions=self.permissions | {permission})

    def without_permission(self, permission: str) -> Deliveryman:
        return dataclasses.replace(self, permissions=self.permissions - {permission})

    def activate(self, agora: datetime) -> Deliveryman:
        return dataclasses.replace(self, active=True, updated_at=agora)

    def deactivate(self, agora: datetime) -> Deliveryman:
        return dataclasses.replace(self, active=False, updated_at=agora)

    @property
    def cpf_mascarado(self) -> str:
        return mascarar_cpf(self.cpf)

    def __repr__(self) -> str:
        # CPF fora do repr (LGPD)
        return (
            f"Deliveryman(id={self.id!r}, name={self.name!r}, "
            f"cpf={self.cpf_mascarado!r}, active={self.active})"
        )
