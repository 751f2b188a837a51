# botijao/application/services/company_service.py
from __future__ import annotations

import dataclasses
from collections.abc import Callable
from datetime import datetime
from typing import Any

from botijao.domain.empresa.entities import Company
from botijao.domain.empresa.repository import CompanyRepository
from botijao.domain.shared.cnpj import only_digits
from botijao.domain.shared.errors import ConflictError, NotFoundError, ValidationError
from botijao.infrastructure.log import log

from ..dtos.common_dto import OperationResultDTO
from ..dtos.empresa_dto import CompanyDTO

_EDITAVEIS = frozenset({"name", "cnpj", "email", "phone", "address", "city", "state", "zip_code"})


class CompanyService:
    def __init__(
        self,
        repo: CompanyRepository,
        relogio: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._repo = repo
        self._relogio = relogio

    def get_by_user(self, user_id: str) -> CompanyDTO:
        return CompanyDTO.from_domain(self._obter(user_id))

    def update(self, user_id: str, dados: dict[str, Any]) -> OperationResultDTO:
        atual = self._obter(user_id)
        mudancas = {k: v for k, v in dados.items() if k in _EDITAVEIS and v is not None}
        if "cnpj" in mudancas:
            mudancas["cnpj"] = only_digits(mudancas["cnpj"])
        if "email" in mudancas:
            mudancas["email"] = mudancas["email"].strip().lower()

        mesclada = dataclasses.replace(atual, **mudancas)
        erros = mesclada.validate()
        if erros:
            raise ValidationError(erros)
        if "cnpj" in mudancas and mudancas["cnpj"] != atual.cnpj_digitos:
            dono = self._repo.get_by_cnpj(mudancas["cnpj"])
            if dono is not None and dono.id != atual.id:
                raise ConflictError("Este CNPJ ja esta cadastrado")

        mudancas["updated_at"] = self._relogio()
        salva = self._repo.update(atual.id or "", mudancas)
        log(f"empresa {salva.id} atualizada")
        return OperationResultDTO(
            success=True, message="Dados da empresa atualizados com sucesso", data=CompanyDTO.from_domain(salva),
        )

    def _obter(self, user_id: str) -> Company:
        empresa = self._repo.get_by_user_id(user_id)
        if empresa is None:
            raise NotFoundError("Empresa", feminino=True)
        return empresa
