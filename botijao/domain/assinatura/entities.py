# botijao/domain/assinatura/entities.py
from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from botijao.domain.entrega.value_objects import format_brl

from .enums import PaymentStatus, SubscriptionStatus


@dataclass(frozen=True)
class SubscriptionPlan:
    name: str
    price: Decimal
    description: str | None = None
    currency: str = "BRL"
    billing_period: str = "monthly"
    trial_days: int = 0
    features: tuple[str, ...] = ()
    is_active: bool = True
    id: str | None = None

    @property
    def has_trial(self) -> bool:
        return self.trial_days > 0

    @property
    def formatted_price(self) -> str:
        if self.currency == "BRL":
            return format_brl(self.price)
        return f"{self.currency} {self.price:.2f}"


@dataclass(frozen=True)
class UserSubscription:
    """Assinatura de um usuario. Datas de expiracao sao avaliadas contra um
    `agora` recebido por parametro."""

    user_id: str
    plan_id: str
    status: str = SubscriptionStatus.ACTIVE
    payment_status: str = PaymentStatus.PENDING
    trial_start_date: datetime | None = None
    trial_end_date: datetime | None = None
    subscription_start_date: datetime | None = None
    subscription_end_date: datetime | None = None
    plan: SubscriptionPlan | None = None
    id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_active(self) -> bool:
        return self.status in (SubscriptionStatus.ACTIVE, SubscriptionStatus.TRIAL)

    @property
    def is_trial(self) -> bool:
        return self.status == SubscriptionStatus.TRIAL

    def _fim(self) -> datetime | None:
        if self.is_trial and self.trial_end_date is not None:
            return self.trial_end_date
        return self.subscription_end_date

    def is_expired(self, agora: datetime) -> bool:
        fim = self._fim()
        return fim is not None and agora > fim

    def days_remaining(self, agora: datetime) -> int:
        """Dias inteiros restantes, arredondados para cima. Nunca negativo."""
        fim = self._fim()
        if fim is None:
            return 0
        dias = math.ceil((fim - agora).total_seconds() / 86400)
        return max(0, dias)
