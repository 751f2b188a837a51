# botijao/domain/empresa/repository.py
from __future__ import annotations

from typing import Any, Protocol

from .entities import Company


class CompanyRepository(Protocol):
    def get_by_id(self, company_id: str) -> Company | None: ...
    def get_by_user_id(self, user_id: str) -> Company | None: ...
    def get_by_cnpj(self, cnpj: str) -> Company | None: ...
    def create(self, company: Company) -> Company: ...
    def update(self, company_id: str, campos: dict[str, Any]) -> Company: ...
