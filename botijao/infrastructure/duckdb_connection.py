# botijao/infrastructure/duckdb_connection.py
#
# Conexao com o store.
#
#   - Sem singleton de modulo: create_connection() devolve uma conexao nova,
#     que o app guarda em app.state.db pelo tempo de vida do processo.
#   - Cada request usa conn.cursor() (conexao filha sobre o mesmo banco),
#     pois uma conexao DuckDB nao deve ser compartilhada entre threads.
#   - O schema e idempotente (CREATE ... IF NOT EXISTS) e aplicado na abertura.
from __future__ import annotations

from pathlib import Path

import duckdb

from .config import Settings

SCHEMA_PATH = Path(__file__).parent / "schema.sql"


def create_connection(settings: Settings) -> duckdb.DuckDBPyConnection:
    conn = duckdb.connect(settings.duckdb_path)
    apply_schema(conn)
    return conn


def apply_schema(conn: duckdb.DuckDBPyConnection) -> None:
    conn.execute(SCHEMA_PATH.read_text(encoding="utf-8"))


def next_id(conn: duckdb.DuckDBPyConnection, sequence: str) -> str:
    """IDs sequenciais como string (o numero da nota fiscal deriva deles)."""
    row = conn.execute(f"SELECT nextval('{sequence}')").fetchone()
    if row is None:
        raise RuntimeError(f"Sequence {sequence} nao retornou valor")
    return str(row[0])
