# tests/application/test_subscription_service.py
from datetime import datetime, timedelta

import pytest

from botijao.application.services.subscription_service import SubscriptionService, nova_assinatura
from botijao.domain.assinatura.entities import SubscriptionPlan
from botijao.domain.shared.errors import ConflictError, NotFoundError

AGORA = datetime(2026, 3, 1, 12, 0)


@pytest.fixture()
def service(plan_repo, subscription_repo, relogio) -> SubscriptionService:
    return SubscriptionService(plan_repo, subscription_repo, relogio=relogio)


def test_nova_assinatura_sem_teste():
    plano = SubscriptionPlan(name="Basico", price=1, id="1")
    assinatura = nova_assinatura("u1", plano, AGORA)
    assert assinatura.status == "active"
    assert assinatura.trial_end_date is None
    assert assinatura.subscription_end_date == AGORA + timedelta(days=30)


def test_nova_assinatura_com_teste_anual():
    plano = SubscriptionPlan(name="Pro", price=1, id="2", trial_days=7, billing_period="yearly")
    assinatura = nova_assinatura("u1", plano, AGORA)
    assert assinatura.status == "trial"
    assert assinatura.trial_end_date == AGORA + timedelta(days=7)
    assert assinatura.subscription_start_date == assinatura.trial_end_date
    assert assinatura.subscription_end_date == AGORA + timedelta(days=7 + 365)


def test_list_plans(service):
    planos = service.list_plans()
    assert [p.name for p in planos] == ["Basico", "Pro"]
    assert planos[0].formatted_price == "R$ 49,90"


def test_create_em_teste(service):
    assinatura = service.create("u1", "2").data
    assert assinatura.is_trial
    assert assinatura.days_remaining == 7
    assert service.has_active("u1")


def test_create_duplicada(service):
    service.create("u1", "1")
    with pytest.raises(ConflictError, match="Usuario ja possui uma assinatura ativa"):
        service.create("u1", "2")


def test_create_plano_inexistente(service):
    with pytest.raises(NotFoundError, match="Plano nao encontrado"):
        service.create("u1", "99")


def test_change_cancela_a_anterior(service):
    primeira = service.create("u1", "1").data
    nova = service.change("u1", "2").data
    assert nova.plan_id == "2"
    historico = {a.id: a.status for a in service.history("u1")}
    assert historico == {primeira.id: "cancelled", nova.id: "trial"}
    assert service.current("u1").id == nova.id


def test_cancel(service):
    service.create("u1", "1")
    assert service.cancel("u1").success
    assert service.current("u1") is None
    assert not service.has_active("u1")
    with pytest.raises(NotFoundError, match="Nenhuma assinatura ativa encontrada"):
        service.cancel("u1")


def test_assinatura_vencida_nao_conta_como_ativa(plan_repo, subscription_repo):
    SubscriptionService(plan_repo, subscription_repo, relogio=lambda: AGORA).create("u1", "1")
    depois = SubscriptionService(plan_repo, subscription_repo, relogio=lambda: AGORA + timedelta(days=31))
    assert not depois.has_active("u1")
    assert depois.current("u1").is_expired
