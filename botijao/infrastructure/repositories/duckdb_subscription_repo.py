# botijao/infrastructure/repositories/duckdb_subscription_repo.py
from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import duckdb

from botijao.domain.assinatura.entities import SubscriptionPlan, UserSubscription
from botijao.domain.assinatura.enums import SubscriptionStatus
from botijao.domain.shared.errors import NotFoundError
from botijao.infrastructure.duckdb_connection import next_id

from ._sql import dumps, executar_update, loads

_COLUNAS_PLANO = (
    "id, name, description, price, currency, billing_period, trial_days, features, is_active"
)
_COLUNAS_ASSINATURA = (
    "id, user_id, plan_id, status, payment_status, trial_start_date, trial_end_date, "
    "subscription_start_date, subscription_end_date, created_at, updated_at"
)


class DuckDBSubscriptionPlanRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def get_all_active(self) -> list[SubscriptionPlan]:
        rows = self._conn.execute(
            f"SELECT {_COLUNAS_PLANO} FROM subscription_plans WHERE is_active ORDER BY price",  # noqa: S608
        ).fetchall()
        return [self._hidratar(r) for r in rows]

    def get_by_id(self, plan_id: str) -> SubscriptionPlan | None:
        row = self._conn.execute(
            f"SELECT {_COLUNAS_PLANO} FROM subscription_plans WHERE id = ?",  # noqa: S608
            [plan_id],
        ).fetchone()
        return self._hidratar(row) if row else None

    def create(self, plan: SubscriptionPlan) -> SubscriptionPlan:
        """Usado no seed de planos; nao ha orquestrador de escrita para planos."""
        novo_id = next_id(self._conn, "seq_subscription_plans")
        self._conn.execute(
            f"INSERT INTO subscription_plans ({_COLUNAS_PLANO}) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)",  # noqa: S608
            [
                novo_id, plan.name, plan.description, plan.price, plan.currency,
                plan.billing_period, plan.trial_days, dumps(list(plan.features)), plan.is_active,
            ],
        )
        criado = self.get_by_id(novo_id)
        if criado is None:
            raise NotFoundError("Plano")
        return criado

    def _hidratar(self, row: tuple) -> SubscriptionPlan:  # type: ignore[type-arg]
        return SubscriptionPlan(
            id=str(row[0]),
            name=str(row[1]),
            description=row[2],
            price=Decimal(str(row[3])),
            currency=str(row[4]),
            billing_period=str(row[5]),
            trial_days=int(row[6]),
            features=tuple(loads(row[7], [])),
            is_active=bool(row[8]),
        )


class DuckDBUserSubscriptionRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn
        self._planos = DuckDBSubscriptionPlanRepo(conn)

    def get_active_by_user_id(self, user_id: str) -> UserSubscription | None:
        row = self._conn.execute(
            f"SELECT {_COLUNAS_ASSINATURA} FROM user_subscriptions "  # noqa: S608
            "WHERE user_id = ? AND status IN (?, ?) ORDER BY created_at DESC LIMIT 1",
            [user_id, SubscriptionStatus.ACTIVE.value, SubscriptionStatus.TRIAL.value],
        ).fetchone()
        return self._hidratar(row) if row else None

    def get_by_user_id(self, user_id: str) -> list[UserSubscription]:
        rows = self._conn.execute(
            f"SELECT {_COLUNAS_ASSINATURA} FROM user_subscriptions "  # noqa: S608
            "WHERE user_id = ? ORDER BY created_at DESC",
            [user_id],
        ).fetchall()
        return [self._hidratar(r) for r in rows]

    def create(self, subscription: UserSubscription) -> UserSubscription:
        novo_id = next_id(self._conn, "seq_user_subscriptions")
        self._conn.execute(
            f"INSERT INTO user_subscriptions ({_COLUNAS_ASSINATURA}) "  # noqa: S608
            "VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",
            [
                novo_id,
                subscription.user_id,
                subscription.plan_id,
                str(subscription.status),
                str(subscription.payment_status),
                subscription.trial_start_date,
                subscription.trial_end_date,
                subscription.subscription_start_date,
                subscription.subscription_end_date,
                subscription.created_at,
                subscription.updated_at,
            ],
        )
        return self._obrigatorio(novo_id)

    def update_status(self, subscription_id: str, status: str) -> UserSubscription:
        if not executar_update(
            self._conn,
            "user_subscriptions",
            subscription_id,
            {"status": str(status), "updated_at": datetime.now()},
            ("status", "updated_at"),
        ):
            raise NotFoundError("Assinatura", feminino=True)
        return self._obrigatorio(subscription_id)

    def _obrigatorio(self, subscription_id: str) -> UserSubscription:
        row = self._conn.execute(
            f"SELECT {_COLUNAS_ASSINATURA} FROM user_subscriptions WHERE id = ?",  # noqa: S608
            [subscription_id],
        ).fetchone()
        if row is None:
            raise NotFoundError("Assinatura", feminino=True)
        return self._hidratar(row)

    def _hidratar(self, row: tuple) -> UserSubscription:  # type: ignore[type-arg]
        return UserSubscription(
            id=str(row[0]),
            user_id=str(row[1]),
            plan_id=str(row[2]),
            status=str(row[3]),
            payment_status=str(row[4]),
            trial_start_date=row[5],
            trial_end_date=row[6],
            subscription_start_date=row[7],
            subscription_end_date=row[8],
            created_at=row[9],
            updated_at=row[10],
            plan=self._planos.get_by_id(str(row[2])),
        )
