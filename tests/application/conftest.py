# tests/application/conftest.py
"""Repositorios em memoria para testar os orquestradores sem DuckDB."""
from __future__ import annotations

import dataclasses
import itertools
from collections.abc import Callable
from datetime import datetime
from decimal import Decimal
from typing import Any

import pytest

from botijao.domain.assinatura.entities import SubscriptionPlan, UserSubscription
from botijao.domain.empresa.entities import Company
from botijao.domain.entrega.entities import Delivery
from botijao.domain.entrega.repository import DeliveryFilters
from botijao.domain.entregador.entities import Deliveryman
from botijao.domain.estoque.entities import InventoryItem
from botijao.domain.posto.entities import GasStation
from botijao.domain.shared.cnpj import only_digits
from botijao.domain.shared.errors import NotFoundError
from botijao.domain.usuario.entities import AuthSession, User

AGORA = datetime(2026, 3, 1, 12, 0)


class _Base:
    def __init__(self) -> None:
        self.linhas: dict[str, Any] = {}
        self._ids = itertools.count(1)

    def _novo_id(self) -> str:
        return str(next(self._ids))


class FakeDeliverymanRepo(_Base):
    def find_all(self) -> list[Deliveryman]:
        return list(self.linhas.values())

    def find_by_id(self, deliveryman_id: str) -> Deliveryman | None:
        return self.linhas.get(deliveryman_id)

    def find_by_gas_station_id(self, gas_station_id: str) -> list[Deliveryman]:
        return [d for d in self.linhas.values() if d.gas_station_id == gas_station_id]

    def find_by_email(self, email: str) -> Deliveryman | None:
        return next((d for d in self.linhas.values() if d.email.lower() == email.lower()), None)

    def find_by_cpf(self, cpf: str) -> Deliveryman | None:
        return next((d for d in self.linhas.values() if d.cpf == cpf), None)

    def create(self, deliveryman: Deliveryman) -> Deliveryman:
        novo = dataclasses.replace(deliveryman, id=self._novo_id())
        self.linhas[novo.id] = novo
        return novo

    def update(self, deliveryman_id: str, deliveryman: Deliveryman) -> Deliveryman:
        if deliveryman_id not in self.linhas:
            raise NotFoundError("Entregador")
        self.linhas[deliveryman_id] = dataclasses.replace(deliveryman, id=deliveryman_id)
        return self.linhas[deliveryman_id]

    def delete(self, deliveryman_id: str) -> bool:
        return self.linhas.pop(deliveryman_id, None) is not None


class FakeInventoryRepo(_Base):
    def __init__(self) -> None:
        super().__init__()
        self.falhar_update: Exception | None = None

    def get_by_gas_station_id(self, gas_station_id: str) -> list[InventoryItem]:
        return [i for i in self.linhas.values() if i.gas_station_id == gas_station_id]

    def get_by_id(self, inventory_id: str) -> InventoryItem | None:
        return self.linhas.get(inventory_id)

    def get_by_product_type(self, gas_station_id: str, product_type: str) -> InventoryItem | None:
        return next(
            (i for i in self.get_by_gas_station_id(gas_station_id) if i.product_type == product_type),
            None,
        )

    def get_low_stock_items(self, gas_station_id: str) -> list[InventoryItem]:
        return [i for i in self.get_by_gas_station_id(gas_station_id) if i.status == "low_stock"]

    def get_out_of_stock_items(self, gas_station_id: str) -> list[InventoryItem]:
        return [i for i in self.get_by_gas_station_id(gas_station_id) if i.status == "out_of_stock"]

    def create(self, item: InventoryItem) -> InventoryItem:
        novo = dataclasses.replace(item, id=self._novo_id())
        self.linhas[novo.id] = novo
        return novo

    def update(self, inventory_id: str, campos: dict[str, Any]) -> InventoryItem:
        if self.falhar_update is not None:
            raise self.falhar_update
        self.linhas[inventory_id] = dataclasses.replace(self.linhas[inventory_id], **campos)
        return self.linhas[inventory_id]

    def delete(self, inventory_id: str) -> bool:
        return self.linhas.pop(inventory_id, None) is not None


class FakeDeliveryRepo(_Base):
    def get_by_gas_station(self, gas_station_id: str, filters: DeliveryFilters) -> list[Delivery]:
        return [
            d for d in self.linhas.values()
            if d.gas_station_id == gas_station_id
            and (filters.status is None or d.status == filters.status)
            and (filters.priority is None or d.priority == filters.priority)
        ]

    def get_by_id(self, delivery_id: str) -> Delivery | None:
        return self.linhas.get(delivery_id)

    def create(self, delivery: Delivery) -> Delivery:
        nova = dataclasses.replace(delivery, id=self._novo_id())
        self.linhas[nova.id] = nova
        return nova

    def update_status(self, delivery_id: str, status: str, extra: dict[str, Any] | None = None) -> Delivery:
        self.linhas[delivery_id] = dataclasses.replace(
            self.linhas[delivery_id], status=status, **(extra or {}),
        )
        return self.linhas[delivery_id]

    def update_invoice(self, delivery_id: str, invoice_number: str, generated_at: datetime) -> Delivery:
        self.linhas[delivery_id] = dataclasses.replace(
            self.linhas[delivery_id], invoice_number=invoice_number, invoice_generated_at=generated_at,
        )
        return self.linhas[delivery_id]

    def delete(self, delivery_id: str) -> bool:
        return self.linhas.pop(delivery_id, None) is not None

    def list_status_and_priority(self, gas_station_id, date_from, date_to) -> list[tuple[str, str]]:
        return [(d.status, d.priority) for d in self.linhas.values() if d.gas_station_id == gas_station_id]


class FakeGasStationRepo(_Base):
    def get_by_id(self, gas_station_id: str) -> GasStation | None:
        return self.linhas.get(gas_station_id)

    def get_by_user_id(self, user_id: str) -> list[GasStation]:
        return [p for p in self.linhas.values() if p.user_id == user_id]

    def get_active_by_user_id(self, user_id: str) -> list[GasStation]:
        return [p for p in self.get_by_user_id(user_id) if p.is_active]

    def search_by_location(self, city: str, state: str) -> list[GasStation]:
        return [
            p for p in self.linhas.values()
            if city.lower() in p.city.lower() and p.state.upper() == state.upper() and p.is_active
        ]

    def create(self, gas_station: GasStation) -> GasStation:
        novo = dataclasses.replace(gas_station, id=self._novo_id())
        self.linhas[novo.id] = novo
        return novo

    def update(self, gas_station_id: str, campos: dict[str, Any]) -> GasStation:
        self.linhas[gas_station_id] = dataclasses.replace(self.linhas[gas_station_id], **campos)
        return self.linhas[gas_station_id]

    def delete(self, gas_station_id: str) -> bool:
        return self.linhas.pop(gas_station_id, None) is not None


class FakeCompanyRepo(_Base):
    def get_by_id(self, company_id: str) -> Company | None:
        return self.linhas.get(company_id)

    def get_by_user_id(self, user_id: str) -> Company | None:
        return next((c for c in self.linhas.values() if c.user_id == user_id), None)

    def get_by_cnpj(self, cnpj: str) -> Company | None:
        return next((c for c in self.linhas.values() if c.cnpj_digitos == only_digits(cnpj)), None)

    def create(self, company: Company) -> Company:
        nova = dataclasses.replace(company, id=self._novo_id(), cnpj=only_digits(company.cnpj))
        self.linhas[nova.id] = nova
        return nova

    def update(self, company_id: str, campos: dict[str, Any]) -> Company:
        self.linhas[company_id] = dataclasses.replace(self.linhas[company_id], **campos)
        return self.linhas[company_id]


class FakeUserRepo(_Base):
    def get_by_id(self, user_id: str) -> User | None:
        return self.linhas.get(user_id)

    def get_by_email(self, email: str) -> User | None:
        return next((u for u in self.linhas.values() if u.email == email.lower()), None)


class FakeAuthRepo:
    """Backend de auth programavel: `erro` e levantado pela proxima chamada."""

    def __init__(self, users: FakeUserRepo) -> None:
        self.users = users
        self.erro: Exception | None = None
        self.sessoes: dict[str, AuthSession] = {}
        self.ouvintes: list[Callable[[str, AuthSession | None], None]] = []
        self.sem_token = False

    def _falhar(self) -> None:
        if self.erro is not None:
            raise self.erro

    def sign_in(self, email: str, password: str) -> AuthSession:
        self._falhar()
        usuario = self.users.get_by_email(email) or User(id="u-x", email=email)
        return self._sessao(usuario)

    def sign_up(self, email: str, password: str, metadata: dict[str, Any]) -> AuthSession:
        self._falhar()
        usuario = User.from_metadata(f"u{len(self.users.linhas) + 1}", email, metadata)
        self.users.linhas[usuario.id] = usuario
        if self.sem_token:
            return AuthSession("", "", usuario)
        return self._sessao(usuario)

    def sign_out(self, access_token: str) -> None:
        self.sessoes.pop(access_token, None)

    def reset_password(self, email: str) -> None:
        self._falhar()

    def get_session(self, access_token: str) -> AuthSession | None:
        return self.sessoes.get(access_token)

    def on_auth_state_change(self, callback):
        self.ouvintes.append(callback)
        return lambda: self.ouvintes.remove(callback)

    def _sessao(self, usuario: User) -> AuthSession:
        sessao = AuthSession(f"tok-{usuario.id}", "ref", usuario, expires_at=datetime(2026, 3, 1, 13, 0))
        self.sessoes[sessao.access_token] = sessao
        return sessao


class FakePlanRepo(_Base):
    def get_all_active(self) -> list[SubscriptionPlan]:
        return [p for p in self.linhas.values() if p.is_active]

    def get_by_id(self, plan_id: str) -> SubscriptionPlan | None:
        return self.linhas.get(plan_id)

    def add(self, plan: SubscriptionPlan) -> SubscriptionPlan:
        novo = dataclasses.replace(plan, id=self._novo_id())
        self.linhas[novo.id] = novo
        return novo


class FakeSubscriptionRepo(_Base):
    def get_active_by_user_id(self, user_id: str) -> UserSubscription | None:
        return next(
            (a for a in self.linhas.values() if a.user_id == user_id and a.is_active), None,
        )

    def get_by_user_id(self, user_id: str) -> list[UserSubscription]:
        return [a for a in self.linhas.values() if a.user_id == user_id]

    def create(self, subscription: UserSubscription) -> UserSubscription:
        nova = dataclasses.replace(subscription, id=self._novo_id())
        self.linhas[nova.id] = nova
        return nova

    def update_status(self, subscription_id: str, status: str) -> UserSubscription:
        self.linhas[subscription_id] = dataclasses.replace(self.linhas[subscription_id], status=status)
        return self.linhas[subscription_id]


@pytest.fixture()
def relogio() -> Callable[[], datetime]:
    return lambda: AGORA


@pytest.fixture()
def deliveryman_repo() -> FakeDeliverymanRepo:
    return FakeDeliverymanRepo()


@pytest.fixture()
def inventory_repo() -> FakeInventoryRepo:
    return FakeInventoryRepo()


@pytest.fixture()
def delivery_repo() -> FakeDeliveryRepo:
    return FakeDeliveryRepo()


@pytest.fixture()
def gas_station_repo() -> FakeGasStationRepo:
    return FakeGasStationRepo()


@pytest.fixture()
def company_repo() -> FakeCompanyRepo:
    return FakeCompanyRepo()


@pytest.fixture()
def user_repo() -> FakeUserRepo:
    return FakeUserRepo()


@pytest.fixture()
def auth_repo(user_repo: FakeUserRepo) -> FakeAuthRepo:
    return FakeAuthRepo(user_repo)


@pytest.fixture()
def plan_repo() -> FakePlanRepo:
    repo = FakePlanRepo()
    repo.add(SubscriptionPlan(name="Basico", price=Decimal("49.90")))
    repo.add(SubscriptionPlan(name="Pro", price=Decimal("99.90"), trial_days=7))
    return repo


@pytest.fixture()
def subscription_repo() -> FakeSubscriptionRepo:
    return FakeSubscriptionRepo()
