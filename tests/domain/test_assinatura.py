# tests/domain/test_assinatura.py
from datetime import datetime
from decimal import Decimal

from botijao.domain.assinatura.entities import SubscriptionPlan, UserSubscription

AGORA = datetime(2026, 3, 1, 12, 0)


def test_plano_trial_e_preco():
    plano = SubscriptionPlan(name="Pro", price=Decimal("1499.9"), trial_days=7)
    assert plano.has_trial
    assert plano.formatted_price == "R$ 1.499,90"
    assert not SubscriptionPlan(name="Basico", price=Decimal("10")).has_trial


def test_preco_em_outra_moeda():
    assert SubscriptionPlan(name="X", price=Decimal("9.5"), currency="USD").formatted_price == "USD 9.50"


def test_ativa_inclui_trial():
    assert UserSubscription("u", "p", status="trial").is_active
    assert UserSubscription("u", "p", status="active").is_active
    assert not UserSubscription("u", "p", status="cancelled").is_active


def test_expiracao_usa_fim_do_trial_quando_em_trial():
    a = UserSubscription(
        "u", "p", status="trial",
        trial_end_date=datetime(2026, 3, 5), subscription_end_date=datetime(2026, 4, 5),
    )
    assert not a.is_expired(AGORA)
    assert a.is_expired(datetime(2026, 3, 6))
    assert a.days_remaining(AGORA) == 4  # 3.5 dias arredonda para cima


def test_dias_restantes_nunca_negativo():
    a = UserSubscription("u", "p", subscription_end_date=datetime(2026, 2, 1))
    assert a.is_expired(AGORA)
    assert a.days_remaining(AGORA) == 0


def test_sem_data_fim_nao_expira():
    a = UserSubscription("u", "p")
    assert not a.is_expired(AGORA)
    assert a.days_remaining(AGORA) == 0
