# botijao/application/dtos/assinatura_dto.py
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from botijao.domain.assinatura.entities import SubscriptionPlan, UserSubscription


class SubscriptionCreateDTO(BaseModel):
    plan_id: str


class PlanDTO(BaseModel):
    id: str | None
    name: str
    description: str | None
    price: str
    formatted_price: str
    billing_period: str
    trial_days: int
    has_trial: bool
    features: list[str]

    @classmethod
    def from_domain(cls, plano: SubscriptionPlan) -> PlanDTO:
        return cls(
            id=plano.id,
            name=plano.name,
            description=plano.description,
            price=str(plano.price),
            formatted_price=plano.formatted_price,
            billing_period=plano.billing_period,
            trial_days=plano.trial_days,
            has_trial=plano.has_trial,
            features=list(plano.features),
        )


class SubscriptionDTO(BaseModel):
    id: str | None
    plan_id: str
    plan: PlanDTO | None
    status: str
    payment_status: str
    is_active: bool
    is_trial: bool
    is_expired: bool
    days_remaining: int

    @classmethod
    def from_domain(cls, assinatura: UserSubscription, agora: datetime) -> SubscriptionDTO:
        return cls(
            id=assinatura.id,
            plan_id=assinatura.plan_id,
            plan=PlanDTO.from_domain(assinatura.plan) if assinatura.plan else None,
            status=assinatura.status,
            payment_status=assinatura.payment_status,
            is_active=assinatura.is_active,
            is_trial=assinatura.is_trial,
            is_expired=assinatura.is_expired(agora),
            days_remaining=assinatura.days_remaining(agora),
        )
