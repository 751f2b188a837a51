# botijao/infrastructure/repositories/duckdb_user_repo.py
from __future__ import annotations

import duckdb

from botijao.domain.usuario.entities import User

from ._sql import loads

_COLUNAS = "id, email, metadata, created_at, updated_at"


class DuckDBUserRepo:
    """Leitura de usuarios. Escrita e exclusiva do DuckDBAuthRepo."""

    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def get_by_id(self, user_id: str) -> User | None:
        row = self._conn.execute(
            f"SELECT {_COLUNAS} FROM users WHERE id = ?",  # noqa: S608
            [user_id],
        ).fetchone()
        return hidratar_usuario(row) if row else None

    def get_by_email(self, email: str) -> User | None:
        row = self._conn.execute(
            f"SELECT {_COLUNAS} FROM users WHERE lower(email) = lower(?) LIMIT 1",  # noqa: S608
            [email.strip()],
        ).fetchone()
        return hidratar_usuario(row) if row else None


def hidratar_usuario(row: tuple) -> User:  # type: ignore[type-arg]
    """row = (id, email, metadata JSON, created_at, updated_at)."""
    usuario = User.from_metadata(str(row[0]), str(row[1]), loads(row[2], {}), row[3])
    if row[4] is None:
        return usuario
    return User(
        id=usuario.id,
        email=usuario.email,
        name=usuario.name,
        phone=usuario.phone,
        avatar_url=usuario.avatar_url,
        user_type=usuario.user_type,
        created_at=usuario.created_at,
        updated_at=row[4],
    )
