# botijao/domain/assinatura/repository.py
from __future__ import annotations

from typing import Protocol

from .entities import SubscriptionPlan, UserSubscription


class SubscriptionPlanRepository(Protocol):
    def get_all_active(self) -> list[SubscriptionPlan]: ...
    def get_by_id(self, plan_id: str) -> SubscriptionPlan | None: ...


class UserSubscriptionRepository(Protocol):
    def get_active_by_user_id(self, user_id: str) -> UserSubscription | None: ...
    def get_by_user_id(self, user_id: str) -> list[UserSubscription]: ...
    def create(self, subscription: UserSubscription) -> UserSubscription: ...
    def update_status(self, subscription_id: str, status: str) -> UserSubscription: ...
