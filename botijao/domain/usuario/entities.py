# botijao/domain/usuario/entities.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from botijao.domain.shared.validators import (
    collect,
    validate_cnpj,
    validate_confirm_password,
    validate_email,
    validate_name,
    validate_password,
    validate_phone,
)

from .enums import UserType


@dataclass(frozen=True)
class User:
    id: str
    email: str
    name: str | None = None
    phone: str | None = None
    avatar_url: str | None = None
    user_type: str = UserType.INDIVIDUAL
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_metadata(
        cls,
        user_id: str,
        email: str,
        metadata: dict[str, Any],
        created_at: datetime | None = None,
    ) -> User:
        """Nome: full_name > first_name + last_name > name > parte local do e-mail."""
        if not email:
            raise ValueError("E-mail do usuario e obrigatorio")
        primeiro = metadata.get("first_name")
        ultimo = metadata.get("last_name")
        nome = (
            metadata.get("full_name")
            or (f"{primeiro} {ultimo}".strip() if primeiro and ultimo else None)
            or metadata.get("name")
            or email.split("@")[0]
        )
        return cls(
            id=user_id,
            email=email,
            name=nome,
            phone=metadata.get("phone") or None,
            avatar_url=metadata.get("avatar_url"),
            user_type=metadata.get("user_type") or UserType.INDIVIDUAL,
            created_at=created_at,
        )


@dataclass(frozen=True)
class AuthSession:
    """Sessao emitida pelo backend de autenticacao.

    Validade e funcao pura de (sessao, agora); o relogio e injetado.
    """

    access_token: str
    refresh_token: str
    user: User | None
    expires_at: datetime | None = None

    def is_valid(self, agora: datetime) -> bool:
        if not self.access_token or self.user is None:
            return False
        return not (self.expires_at is not None and agora >= self.expires_at)

    def is_expired(self, agora: datetime) -> bool:
        return not self.is_valid(agora)


@dataclass(frozen=True)
class SignUpData:
    email: str
    password: str
    confirm_password: str
    first_name: str
    last_name: str
    user_type: str = UserType.INDIVIDUAL
    phone: str | None = None
    company_name: str | None = None
    cnpj: str | None = None

    @property
    def is_company(self) -> bool:
        return self.user_type == UserType.COMPANY

    def validate(self) -> list[str]:
        erros = collect(
            validate_email(self.email),
            validate_password(self.password),
            validate_confirm_password(self.password, self.confirm_password),
            validate_name(self.first_name, "Nome"),
            validate_name(self.last_name, "Sobrenome"),
            validate_phone(self.phone),
            None if self.user_type in {t.value for t in UserType}
            else "Tipo de usuario invalido",
        )
        if self.is_company:
            erros.extend(collect(
                validate_name(self.company_name, "Nome da empresa"),
                validate_cnpj(self.cnpj),
            ))
        return erros

    def metadata(self) -> dict[str, Any]:
        return {
            "user_type": self.user_type,
            "first_name": self.first_name.strip(),
            "last_name": self.last_name.strip(),
            "phone": self.phone,
        }
