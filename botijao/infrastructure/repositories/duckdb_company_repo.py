# botijao/infrastructure/repositories/duckdb_company_repo.py
from __future__ import annotations

from typing import Any

import duckdb

from botijao.domain.empresa.entities import Company
from botijao.domain.shared.cnpj import only_digits
from botijao.domain.shared.errors import NotFoundError
from botijao.infrastructure.duckdb_connection import next_id

from ._sql import executar_update

_COLUNAS = (
    "id, user_id, name, cnpj, email, phone, address, city, state, zip_code, created_at, updated_at"
)
_ATUALIZAVEIS = (
    "name", "cnpj", "email", "phone", "address", "city", "state", "zip_code", "updated_at",
)


class DuckDBCompanyRepo:
    """CNPJ gravado apenas com digitos; a formatacao e da camada de apresentacao."""

    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def get_by_id(self, company_id: str) -> Company | None:
        return self._um("id = ?", company_id)

    def get_by_user_id(self, user_id: str) -> Company | None:
        return self._um("user_id = ?", user_id)

    def get_by_cnpj(self, cnpj: str) -> Company | None:
        return self._um("cnpj = ?", only_digits(cnpj))

    def create(self, company: Company) -> Company:
        novo_id = next_id(self._conn, "seq_companies")
        self._conn.execute(
            f"INSERT INTO companies ({_COLUNAS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",  # noqa: S608
            [
                novo_id,
                company.user_id,
                company.name.strip(),
                company.cnpj_digitos,
                company.email.strip().lower(),
                company.phone,
                company.address,
                company.city,
                company.state,
                company.zip_code,
                company.created_at,
                company.updated_at,
            ],
        )
        return self._obrigatorio(novo_id)

    def update(self, company_id: str, campos: dict[str, Any]) -> Company:
        campos = dict(campos)
        if "cnpj" in campos:
            campos["cnpj"] = only_digits(campos["cnpj"])
        if not executar_update(self._conn, "companies", company_id, campos, _ATUALIZAVEIS):
            raise NotFoundError("Empresa", feminino=True)
        return self._obrigatorio(company_id)

    def _um(self, where: str, valor: str) -> Company | None:
        row = self._conn.execute(
            f"SELECT {_COLUNAS} FROM companies WHERE {where} LIMIT 1",  # noqa: S608
            [valor],
        ).fetchone()
        return self._hidratar(row) if row else None

    def _obrigatorio(self, company_id: str) -> Company:
        empresa = self.get_by_id(company_id)
        if empresa is None:
            raise NotFoundError("Empresa", feminino=True)
        return empresa

    def _hidratar(self, row: tuple) -> Company:  # type: ignore[type-arg]
        return Company(
            id=str(row[0]),
            user_id=row[1],
            name=str(row[2]),
            cnpj=str(row[3]),
            email=str(row[4]),
            phone=row[5],
            address=row[6],
            city=row[7],
            state=row[8],
            zip_code=row[9],
            created_at=row[10],
            updated_at=row[11],
        )
