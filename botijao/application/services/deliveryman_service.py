# botijao/application/services/deliveryman_service.py
from __future__ import annotations

import dataclasses
from collections.abc import Callable
from datetime import datetime
from typing import Any

from botijao.domain.entregador.entities import Deliveryman
from botijao.domain.entregador.repository import DeliverymanRepository
from botijao.domain.entregador.value_objects import AVAILABLE_PERMISSIONS, normalizar_permissoes
from botijao.domain.shared.cnpj import only_digits
from botijao.domain.shared.errors import ConflictError, NotFoundError, ValidationError
from botijao.infrastructure.log import log

from ..dtos.common_dto import OperationResultDTO
from ..dtos.entregador_dto import DeliverymanDTO, PermissionDTO

MSG_EMAIL_EM_USO = "E-mail ja esta em uso por outro entregador"
MSG_CPF_EM_USO = "CPF ja esta cadastrado"

_EDITAVEIS = frozenset({"name", "phone", "email", "cpf", "gas_station_id", "active", "permissions"})


class DeliverymanService:
    def __init__(
        self,
        repo: DeliverymanRepository,
        relogio: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._repo = repo
        self._relogio = relogio

    def list_all(self) -> list[DeliverymanDTO]:
        return [DeliverymanDTO.from_domain(d) for d in self._repo.find_all()]

    def list_by_gas_station(self, gas_station_id: str) -> list[DeliverymanDTO]:
        return [DeliverymanDTO.from_domain(d) for d in self._repo.find_by_gas_station_id(gas_station_id)]

    def get(self, deliveryman_id: str) -> DeliverymanDTO:
        return DeliverymanDTO.from_domain(self._obter(deliveryman_id))

    def create(self, dados: dict[str, Any]) -> OperationResultDTO:
        agora = self._relogio()
        entregador = Deliveryman(
            name=(dados.get("name") or "").strip(),
            phone=dados.get("phone") or "",
            email=(dados.get("email") or "").strip().lower(),
            cpf=only_digits(dados.get("cpf")),
            gas_station_id=dados.get("gas_station_id"),
            active=dados.get("active", True),
            permissions=normalizar_permissoes(dados.get("permissions")),
            created_at=agora,
            updated_at=agora,
        )
        erros = entregador.validate()
        if erros:
            raise ValidationError(erros)
        self._checar_unicidade(entregador, ignorar_id=None)

        criado = self._repo.create(entregador)
        log(f"entregador {criado.id} criado (cpf {criado.cpf_mascarado})")
        return OperationResultDTO(
            success=True, message="Entregador criado com sucesso", data=DeliverymanDTO.from_domain(criado),
        )

    def update(self, deliveryman_id: str, dados: dict[str, Any]) -> OperationResultDTO:
        atual = self._obter(deliveryman_id)
        mudancas = {k: v for k, v in dados.items() if k in _EDITAVEIS and v is not None}
        if "cpf" in mudancas:
            mudancas["cpf"] = only_digits(mudancas["cpf"])
        if "email" in mudancas:
            mudancas["email"] = mudancas["email"].strip().lower()
        if "permissions" in mudancas:
            mudancas["permissions"] = normalizar_permissoes(mudancas["permissions"])
        mesclado = dataclasses.replace(atual, **mudancas, updated_at=self._relogio())

        erros = mesclado.validate()
        if erros:
            raise ValidationError(erros)
        self._checar_unicidade(mesclado, ignorar_id=deliveryman_id)

        salvo = self._repo.update(deliveryman_id, mesclado)
        log(f"entregador {deliveryman_id} atualizado")
        return OperationResultDTO(
            success=True, message="Entregador atualizado com sucesso", data=DeliverymanDTO.from_domain(salvo),
        )

    def delete(self, deliveryman_id: str) -> OperationResultDTO:
        if not self._repo.delete(deliveryman_id):
            raise NotFoundError("Entregador")
        log(f"entregador {deliveryman_id} removido")
        return OperationResultDTO(success=True, message="Entregador removido com sucesso")

    def activate(self, deliveryman_id: str) -> OperationResultDTO:
        salvo = self._repo.update(deliveryman_id, self._obter(deliveryman_id).activate(self._relogio()))
        log(f"entregador {deliveryman_id} ativado")
        return OperationResultDTO(
            success=True, message="Entregador ativado com sucesso", data=DeliverymanDTO.from_domain(salvo),
        )

    def deactivate(self, deliveryman_id: str) -> OperationResultDTO:
        salvo = self._repo.update(deliveryman_id, self._obter(deliveryman_id).deactivate(self._relogio()))
        log(f"entregador {deliveryman_id} desativado")
        return OperationResultDTO(
            success=True, message="Entregador desativado com sucesso", data=DeliverymanDTO.from_domain(salvo),
        )

    def update_permissions(self, deliveryman_id: str, permissions: list[str]) -> OperationResultDTO:
        atual = self._obter(deliveryman_id)
        novo = dataclasses.replace(
            atual, permissions=normalizar_permissoes(permissions), updated_at=self._relogio(),
        )
        salvo = self._repo.update(deliveryman_id, novo)
        log(f"entregador {deliveryman_id}: permissoes {sorted(salvo.permissions)}")
        return OperationResultDTO(
            success=True, message="Permissoes atualizadas com sucesso", data=DeliverymanDTO.from_domain(salvo),
        )

    @staticmethod
    def available_permissions() -> list[PermissionDTO]:
        return [PermissionDTO(id=k, label=v) for k, v in AVAILABLE_PERMISSIONS.items()]

    def _obter(self, deliveryman_id: str) -> Deliveryman:
        entregador = self._repo.find_by_id(deliveryman_id)
        if entregador is None:
            raise NotFoundError("Entregador")
        return entregador

    def _checar_unicidade(self, entregador: Deliveryman, ignorar_id: str | None) -> None:
        por_email = self._repo.find_by_email(entregador.email)
        if por_email is not None and por_email.id != ignorar_id:
            raise ConflictError(MSG_EMAIL_EM_USO)
        por_cpf = self._repo.find_by_cpf(entregador.cpf)
        if por_cpf is not None and por_cpf.id != ignorar_id:
            raise ConflictError(MSG_CPF_EM_USO)
