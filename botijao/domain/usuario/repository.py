# botijao/domain/usuario/repository.py
from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol

from .entities import AuthSession, User

AuthListener = Callable[[str, AuthSession | None], None]


class AuthRepository(Protocol):
    """Backend de autenticacao/sessao. Erros chegam como excecoes cuja
    mensagem segue o texto do backend (ex: "Invalid login credentials")."""

    def sign_in(self, email: str, password: str) -> AuthSession: ...
    def sign_up(self, email: str, password: str, metadata: dict[str, Any]) -> AuthSession: ...
    def sign_out(self, access_token: str) -> None: ...
    def reset_password(self, email: str) -> None: ...
    def get_session(self, access_token: str) -> AuthSession | None: ...
    def on_auth_state_change(self, callback: AuthListener) -> Callable[[], None]: ...


class UserRepository(Protocol):
    def get_by_id(self, user_id: str) -> User | None: ...
    def get_by_email(self, email: str) -> User | None: ...
