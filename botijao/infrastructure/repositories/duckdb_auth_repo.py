# botijao/infrastructure/repositories/duckdb_auth_repo.py
#
# Backend de autenticacao sobre o proprio DuckDB.
#
#   - Senha: PBKDF2-SHA256 (100k iteracoes) com salt global (PASSWORD_SALT)
#     + salt por usuario, gravado como "salt$hash".
#   - Tokens: secrets.token_urlsafe, sem significado; a sessao vive na tabela
#     auth_sessions e expira apos SESSION_TTL_SECONDS.
#   - Erros saem como BackendError com o texto do backend em ingles; a traducao
#     para o usuario final e do AuthService.
from __future__ import annotations

import hashlib
import hmac
import secrets
import uuid
from collections.abc import Callable
from datetime import datetime, timedelta
from typing import Any

import duckdb

from botijao.domain.shared.errors import BackendError
from botijao.domain.usuario.entities import AuthSession, User
from botijao.domain.usuario.repository import AuthListener
from botijao.infrastructure.auth_events import (
    PASSWORD_RECOVERY,
    SIGNED_IN,
    SIGNED_OUT,
    AuthStateBroadcaster,
)
from botijao.infrastructure.config import Settings

from ._sql import dumps
from .duckdb_user_repo import DuckDBUserRepo, hidratar_usuario

ITERACOES = 100_000
SENHA_MINIMA = 6

MSG_CREDENCIAIS = "Invalid login credentials"
MSG_NAO_CONFIRMADO = "Email not confirmed"
MSG_JA_CADASTRADO = "User already registered"
MSG_SENHA_CURTA = f"Password should be at least {SENHA_MINIMA} characters"
MSG_EMAIL_INVALIDO = "Unable to validate email address"


def hash_password(password: str, pepper: str, salt: str | None = None) -> str:
    salt = salt or secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac(
        "sha256", (pepper + password).encode("utf-8"), salt.encode("utf-8"), ITERACOES,
    )
    return f"{salt}${digest.hex()}"


def verify_password(password: str, pepper: str, stored: str) -> bool:
    salt, _, _ = stored.partition("$")
    return hmac.compare_digest(hash_password(password, pepper, salt), stored)


class DuckDBAuthRepo:
    def __init__(
        self,
        conn: duckdb.DuckDBPyConnection,
        settings: Settings,
        broadcaster: AuthStateBroadcaster,
        relogio: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._conn = conn
        self._settings = settings
        self._broadcaster = broadcaster
        self._relogio = relogio
        self._users = DuckDBUserRepo(conn)

    def sign_in(self, email: str, password: str) -> AuthSession:
        row = self._conn.execute(
            "SELECT id, email, metadata, created_at, updated_at, password_hash, email_confirmed "
            "FROM users WHERE lower(email) = lower(?) LIMIT 1",
            [email.strip()],
        ).fetchone()
        if row is None or not verify_password(password, self._settings.password_salt, row[5]):
            raise BackendError(MSG_CREDENCIAIS)
        if self._settings.require_email_confirmation and not row[6]:
            raise BackendError(MSG_NAO_CONFIRMADO)
        sessao = self._abrir_sessao(hidratar_usuario(row[:5]))
        self._broadcaster.emit(SIGNED_IN, sessao)
        return sessao

    def sign_up(self, email: str, password: str, metadata: dict[str, Any]) -> AuthSession:
        """Cria o usuario. Com confirmacao de e-mail exigida, devolve uma sessao
        sem token (is_valid False) ate o e-mail ser confirmado."""
        email = email.strip().lower()
        if "@" not in email:
            raise BackendError(MSG_EMAIL_INVALIDO)
        if len(password) < SENHA_MINIMA:
            raise BackendError(MSG_SENHA_CURTA)
        if self._users.get_by_email(email) is not None:
            raise BackendError(MSG_JA_CADASTRADO)

        agora = self._relogio()
        user_id = uuid.uuid4().hex
        confirmado = not self._settings.require_email_confirmation
        self._conn.execute(
            "INSERT INTO users (id, email, password_hash, metadata, email_confirmed, created_at) "
            "VALUES (?, ?, ?, ?, ?, ?)",
            [
                user_id,
                email,
                hash_password(password, self._settings.password_salt),
                dumps(metadata),
                confirmado,
                agora,
            ],
        )
        usuario = User.from_metadata(user_id, email, metadata, agora)
        if not confirmado:
            return AuthSession(access_token="", refresh_token="", user=usuario)
        sessao = self._abrir_sessao(usuario)
        self._broadcaster.emit(SIGNED_IN, sessao)
        return sessao

    def sign_out(self, access_token: str) -> None:
        sessao = self.get_session(access_token)
        self._conn.execute(
            "UPDATE auth_sessions SET revoked = TRUE WHERE access_token = ?", [access_token],
        )
        if sessao is not None:
            self._broadcaster.emit(SIGNED_OUT, None)

    def reset_password(self, email: str) -> None:
        usuario = self._users.get_by_email(email)
        if usuario is None:
            raise BackendError(MSG_EMAIL_INVALIDO)
        self._conn.execute(
            "INSERT INTO password_resets (token, user_id, created_at) VALUES (?, ?, ?)",
            [secrets.token_urlsafe(32), usuario.id, self._relogio()],
        )
        self._broadcaster.emit(PASSWORD_RECOVERY, None)

    def get_session(self, access_token: str) -> AuthSession | None:
        if not access_token:
            return None
        row = self._conn.execute(
            "SELECT s.access_token, s.refresh_token, s.expires_at, s.user_id "
            "FROM auth_sessions s WHERE s.access_token = ? AND NOT s.revoked",
            [access_token],
        ).fetchone()
        if row is None:
            return None
        sessao = AuthSession(
            access_token=str(row[0]),
            refresh_token=str(row[1]),
            user=self._users.get_by_id(str(row[3])),
            expires_at=row[2],
        )
        return sessao if sessao.is_valid(self._relogio()) else None

    def on_auth_state_change(self, callback: AuthListener) -> Callable[[], None]:
        return self._broadcaster.subscribe(callback)

    def _abrir_sessao(self, usuario: User) -> AuthSession:
        agora = self._relogio()
        sessao = AuthSession(
            access_token=secrets.token_urlsafe(32),
            refresh_token=secrets.token_urlsafe(32),
            user=usuario,
            expires_at=agora + timedelta(seconds=self._settings.session_ttl_seconds),
        )
        self._conn.execute(
            "INSERT INTO auth_sessions (access_token, refresh_token, user_id, expires_at, created_at) "
            "VALUES (?, ?, ?, ?, ?)",
            [sessao.access_token, sessao.refresh_token, usuario.id, sessao.expires_at, agora],
        )
        return sessao
