# botijao/infrastructure/repositories/_sql.py
from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from typing import Any

import duckdb

from botijao.domain.shared.errors import BackendError


def montar_set(campos: Mapping[str, Any], permitidas: Iterable[str]) -> tuple[str, list[Any]]:
    """SET col = ?, ... apenas com colunas conhecidas. Coluna fora da lista e erro."""
    permitidas = frozenset(permitidas)
    desconhecidas = set(campos) - permitidas
    if desconhecidas:
        raise BackendError(f"Colunas desconhecidas: {', '.join(sorted(desconhecidas))}")
    if not campos:
        raise BackendError("Nenhum campo para atualizar")
    clausula = ", ".join(f"{coluna} = ?" for coluna in campos)
    return clausula, list(campos.values())


def dumps(valor: Any) -> str:
    return json.dumps(valor, ensure_ascii=False, default=str)


def loads(texto: str | None, padrao: Any) -> Any:
    if not texto:
        return padrao
    return json.loads(texto)


def executar_update(
    conn: duckdb.DuckDBPyConnection,
    tabela: str,
    registro_id: str,
    campos: Mapping[str, Any],
    permitidas: Iterable[str],
) -> bool:
    """UPDATE ... WHERE id = ?. True se a linha existia."""
    clausula, params = montar_set(campos, permitidas)
    row = conn.execute(
        f"UPDATE {tabela} SET {clausula} WHERE id = ? RETURNING id",  # noqa: S608
        [*params, registro_id],
    ).fetchone()
    return row is not None


def executar_delete(conn: duckdb.DuckDBPyConnection, tabela: str, registro_id: str) -> bool:
    row = conn.execute(
        f"DELETE FROM {tabela} WHERE id = ? RETURNING id",  # noqa: S608
        [registro_id],
    ).fetchone()
    return row is not None
