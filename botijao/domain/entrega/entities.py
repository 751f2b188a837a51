# botijao/domain/entrega/entities.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from decimal import Decimal

from .enums import PRIORITY_LABELS, STATUS_LABELS, DeliveryPriority, DeliveryStatus
from .value_objects import DeliveryAddress, DeliveryItem, format_brl

# Percentual fixo de impostos na nota.
TAXA_IMPOSTOS = Decimal("0.18")
PRAZO_VENCIMENTO_DIAS = 30


@dataclass(frozen=True)
class Delivery:
    """Pedido de entrega de botijoes.

    O store nao valida transicoes (e um update de linha burro): toda regra de
    transicao vive nos predicados can_* abaixo, consultados pelo orquestrador
    antes de qualquer escrita.
    """

    gas_station_id: str
    customer_name: str
    customer_phone: str
    delivery_address: DeliveryAddress | None
    items: tuple[DeliveryItem, ...]
    total_amount: Decimal
    customer_email: str | None = None
    status: str = DeliveryStatus.PENDING
    priority: str = DeliveryPriority.MEDIUM
    estimated_delivery: datetime | None = None
    order_date: datetime | None = None
    delivered_at: datetime | None = None
    invoice_number: str | None = None
    invoice_generated_at: datetime | None = None
    notes: str | None = None
    id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def validate(self) -> list[str]:
        erros: list[str] = []
        if not self.gas_station_id:
            erros.append("Posto e obrigatorio")
        if not self.customer_name or not self.customer_name.strip():
            erros.append("Nome do cliente e obrigatorio")
        if not self.customer_phone or not self.customer_phone.strip():
            erros.append("Telefone do cliente e obrigatorio")
        if self.delivery_address is None:
            erros.append("Endereco de entrega e obrigatorio")
        if not self.items:
            erros.append("Pedido deve ter pelo menos um item")
        if self.total_amount <= 0:
            erros.append("Valor total deve ser maior que zero")
        return erros

    def is_valid(self) -> bool:
        return not self.validate()

    def can_be_accepted(self) -> bool:
        return self.status == DeliveryStatus.PENDING

    def can_be_rejected(self) -> bool:
        return self.status == DeliveryStatus.PENDING

    def can_start(self) -> bool:
        return self.status == DeliveryStatus.ACCEPTED

    def can_complete(self) -> bool:
        return self.status == DeliveryStatus.IN_PROGRESS

    def can_generate_invoice(self) -> bool:
        """Nota emitida uma unica vez, so para entregas aceitas."""
        return self.status == DeliveryStatus.ACCEPTED and not self.invoice_number

    @property
    def status_text(self) -> str:
        return STATUS_LABELS.get(self.status, self.status)

    @property
    def priority_text(self) -> str:
        return PRIORITY_LABELS.get(self.priority, self.priority)

    @property
    def formatted_total(self) -> str:
        return format_brl(self.total_amount)

    @property
    def formatted_address(self) -> str:
        return self.delivery_address.formatado if self.delivery_address else ""


@dataclass(frozen=True)
class Invoice:
    """Dados da nota gerada. Derivados da entrega; nada e persistido alem do numero."""

    invoice_number: str
    issue_date: date
    due_date: date
    customer_name: str
    customer_phone: str
    customer_email: str | None
    address: DeliveryAddress | None
    items: tuple[DeliveryItem, ...]
    total: Decimal
    taxes: Decimal
    net_total: Decimal


def generate_invoice_number(delivery_id: str, referencia: date) -> str:
    """NF-000042-2026"""
    return f"NF-{str(delivery_id).zfill(6)}-{referencia.year}"


def build_invoice(delivery: Delivery, invoice_number: str, referencia: date) -> Invoice:
    taxes = (delivery.total_amount * TAXA_IMPOSTOS).quantize(Decimal("0.01"))
    return Invoice(
        invoice_number=invoice_number,
        issue_date=referencia,
        due_date=referencia + timedelta(days=PRAZO_VENCIMENTO_DIAS),
        customer_name=delivery.customer_name,
        customer_phone=delivery.customer_phone,
        customer_email=delivery.customer_email,
        address=delivery.delivery_address,
        items=delivery.items,
        total=delivery.total_amount,
        taxes=taxes,
        net_total=delivery.total_amount + taxes,
    )
