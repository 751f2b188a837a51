# botijao/application/dtos/auth_dto.py
from __future__ import annotations

from pydantic import BaseModel

from botijao.domain.usuario.entities import AuthSession, SignUpData, User
from botijao.domain.usuario.enums import UserType, user_type_label


class SignInRequestDTO(BaseModel):
    email: str
    password: str


class SignUpRequestDTO(BaseModel):
    email: str
    password: str
    confirm_password: str
    first_name: str
    last_name: str
    user_type: str = UserType.INDIVIDUAL.value
    phone: str | None = None
    company_name: str | None = None
    cnpj: str | None = None

    def to_domain(self) -> SignUpData:
        return SignUpData(**self.model_dump())


class ResetPasswordRequestDTO(BaseModel):
    email: str


class UserDTO(BaseModel):
    id: str
    email: str
    name: str | None
    phone: str | None
    avatar_url: str | None
    user_type: str
    user_type_label: str

    @classmethod
    def from_domain(cls, user: User) -> UserDTO:
        return cls(
            id=user.id,
            email=user.email,
            name=user.name,
            phone=user.phone,
            avatar_url=user.avatar_url,
            user_type=user.user_type,
            user_type_label=user_type_label(user.user_type),
        )


class SessionDTO(BaseModel):
    access_token: str
    refresh_token: str
    expires_at: str | None
    user: UserDTO | None

    @classmethod
    def from_domain(cls, sessao: AuthSession) -> SessionDTO:
        return cls(
            access_token=sessao.access_token,
            refresh_token=sessao.refresh_token,
            expires_at=sessao.expires_at.isoformat() if sessao.expires_at else None,
            user=UserDTO.from_domain(sessao.user) if sessao.user else None,
        )
