# botijao/application/services/subscription_service.py
from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta

from botijao.domain.assinatura.entities import SubscriptionPlan, UserSubscription
from botijao.domain.assinatura.enums import PaymentStatus, SubscriptionStatus
from botijao.domain.assinatura.repository import (
    SubscriptionPlanRepository,
    UserSubscriptionRepository,
)
from botijao.domain.shared.errors import ConflictError, NotFoundError
from botijao.infrastructure.log import log

from ..dtos.assinatura_dto import PlanDTO, SubscriptionDTO
from ..dtos.common_dto import OperationResultDTO

# Duracao de um ciclo por periodo de cobranca.
DURACAO_PERIODO = {
    "monthly": timedelta(days=30),
    "yearly": timedelta(days=365),
}

MSG_SEM_ASSINATURA = "Nenhuma assinatura ativa encontrada"


def nova_assinatura(user_id: str, plano: SubscriptionPlan, agora: datetime) -> UserSubscription:
    """Plano com dias de teste comeca em trial; o ciclo pago comeca ao fim do teste."""
    inicio = agora + timedelta(days=plano.trial_days) if plano.has_trial else agora
    return UserSubscription(
        user_id=user_id,
        plan_id=plano.id or "",
        status=SubscriptionStatus.TRIAL if plano.has_trial else SubscriptionStatus.ACTIVE,
        payment_status=PaymentStatus.PENDING,
        trial_start_date=agora if plano.has_trial else None,
        trial_end_date=inicio if plano.has_trial else None,
        subscription_start_date=inicio,
        subscription_end_date=inicio + DURACAO_PERIODO.get(plano.billing_period, timedelta(days=30)),
        created_at=agora,
        updated_at=agora,
    )


class SubscriptionService:
    def __init__(
        self,
        plan_repo: SubscriptionPlanRepository,
        subscription_repo: UserSubscriptionRepository,
        relogio: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._plan_repo = plan_repo
        self._subscription_repo = subscription_repo
        self._relogio = relogio

    def list_plans(self) -> list[PlanDTO]:
        return [PlanDTO.from_domain(p) for p in self._plan_repo.get_all_active()]

    def create(self, user_id: str, plan_id: str) -> OperationResultDTO:
        plano = self._plano(plan_id)
        if self._subscription_repo.get_active_by_user_id(user_id) is not None:
            raise ConflictError("Usuario ja possui uma assinatura ativa")

        agora = self._relogio()
        criada = self._subscription_repo.create(nova_assinatura(user_id, plano, agora))
        log(f"assinatura {criada.id}: usuario {user_id} no plano {plan_id} ({criada.status})")
        return OperationResultDTO(
            success=True, message="Assinatura criada com sucesso", data=SubscriptionDTO.from_domain(criada, agora),
        )

    def change(self, user_id: str, new_plan_id: str) -> OperationResultDTO:
        plano = self._plano(new_plan_id)
        atual = self._ativa(user_id)

        self._subscription_repo.update_status(atual.id or "", SubscriptionStatus.CANCELLED)
        agora = self._relogio()
        criada = self._subscription_repo.create(nova_assinatura(user_id, plano, agora))
        log(f"assinatura {atual.id} trocada por {criada.id} (plano {new_plan_id})")
        return OperationResultDTO(
            success=True, message="Plano alterado com sucesso", data=SubscriptionDTO.from_domain(criada, agora),
        )

    def cancel(self, user_id: str) -> OperationResultDTO:
        atual = self._ativa(user_id)
        self._subscription_repo.update_status(atual.id or "", SubscriptionStatus.CANCELLED)
        log(f"assinatura {atual.id} cancelada")
        return OperationResultDTO(success=True, message="Assinatura cancelada com sucesso")

    def current(self, user_id: str) -> SubscriptionDTO | None:
        assinatura = self._subscription_repo.get_active_by_user_id(user_id)
        if assinatura is None:
            return None
        return SubscriptionDTO.from_domain(assinatura, self._relogio())

    def history(self, user_id: str) -> list[SubscriptionDTO]:
        agora = self._relogio()
        return [SubscriptionDTO.from_domain(a, agora) for a in self._subscription_repo.get_by_user_id(user_id)]

    def has_active(self, user_id: str) -> bool:
        assinatura = self._subscription_repo.get_active_by_user_id(user_id)
        return assinatura is not None and not assinatura.is_expired(self._relogio())

    def _plano(self, plan_id: str) -> SubscriptionPlan:
        plano = self._plan_repo.get_by_id(plan_id)
        if plano is None:
            raise NotFoundError("Plano")
        return plano

    def _ativa(self, user_id: str) -> UserSubscription:
        assinatura = self._subscription_repo.get_active_by_user_id(user_id)
        if assinatura is None:
            raise NotFoundError("Assinatura", mensagem=MSG_SEM_ASSINATURA)
        return assinatura
