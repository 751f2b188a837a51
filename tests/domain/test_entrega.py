# tests/domain/test_entrega.py
from datetime import date
from decimal import Decimal

from botijao.domain.entrega.entities import (
    Delivery,
    build_invoice,
    generate_invoice_number,
)
from botijao.domain.entrega.enums import DeliveryStatus
from botijao.domain.entrega.stats import compute_delivery_stats
from botijao.domain.entrega.value_objects import DeliveryAddress, DeliveryItem, format_brl

ENDERECO = DeliveryAddress("Rua A, 10", "Centro", "Campinas", "SP", "13000-000")


def _entrega(**kw) -> Delivery:
    base = dict(
        gas_station_id="1",
        customer_name="Ana",
        customer_phone="11999998888",
        delivery_address=ENDERECO,
        items=(DeliveryItem("Botijao P13", 2, Decimal("110.00")),),
        total_amount=Decimal("220.00"),
    )
    base.update(kw)
    return Delivery(**base)


def test_entrega_valida():
    assert _entrega().validate() == []
    assert _entrega().is_valid()


def test_validate_nao_para_no_primeiro_erro():
    erros = _entrega(
        gas_station_id="", customer_name=" ", customer_phone="",
        delivery_address=None, items=(), total_amount=Decimal("0"),
    ).validate()
    assert erros == [
        "Posto e obrigatorio",
        "Nome do cliente e obrigatorio",
        "Telefone do cliente e obrigatorio",
        "Endereco de entrega e obrigatorio",
        "Pedido deve ter pelo menos um item",
        "Valor total deve ser maior que zero",
    ]


def test_so_pendente_pode_ser_aceita_ou_rejeitada():
    for status in DeliveryStatus:
        e = _entrega(status=status)
        assert e.can_be_accepted() is (status == DeliveryStatus.PENDING)
        assert e.can_be_rejected() is (status == DeliveryStatus.PENDING)


def test_predicados_de_ciclo():
    assert _entrega(status="accepted").can_start()
    assert not _entrega(status="pending").can_start()
    assert _entrega(status="in_progress").can_complete()
    assert not _entrega(status="accepted").can_complete()


def test_nota_so_uma_vez_e_so_aceita():
    assert _entrega(status="accepted").can_generate_invoice()
    assert not _entrega(status="accepted", invoice_number="NF-000001-2026").can_generate_invoice()
    assert not _entrega(status="pending").can_generate_invoice()


def test_labels():
    e = _entrega(status="in_progress", priority="high")
    assert e.status_text == "Em Andamento"
    assert e.priority_text == "Alta"
    assert _entrega(status="xyz").status_text == "xyz"


def test_formatacao():
    assert format_brl(Decimal("1234.5")) == "R$ 1.234,50"
    assert _entrega().formatted_total == "R$ 220,00"
    assert _entrega().formatted_address == "Rua A, 10, Centro - Campinas/SP - CEP: 13000-000"


def test_numero_da_nota():
    assert generate_invoice_number("42", date(2026, 3, 1)) == "NF-000042-2026"


def test_nota_com_impostos_e_vencimento():
    nota = build_invoice(_entrega(), "NF-000001-2026", date(2026, 3, 1))
    assert nota.taxes == Decimal("39.60")
    assert nota.net_total == Decimal("259.60")
    assert nota.due_date == date(2026, 3, 31)


def test_subtotal_do_item():
    assert DeliveryItem("P45", 3, Decimal("400.00")).subtotal == Decimal("1200.00")


def test_estatisticas():
    stats = compute_delivery_stats([
        ("pending", "high"), ("pending", "low"), ("delivered", "high"), (None, None),
    ])
    assert stats.total == 4
    assert stats.by_status == {"pending": 2, "delivered": 1}
    assert stats.by_priority == {"high": 2, "low": 1}
