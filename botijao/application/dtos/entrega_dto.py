# botijao/application/dtos/entrega_dto.py
from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from botijao.domain.entrega.entities import Delivery, Invoice
from botijao.domain.entrega.enums import DeliveryPriority
from botijao.domain.entrega.stats import DeliveryStats
from botijao.domain.entrega.value_objects import DeliveryAddress, DeliveryItem


class AddressDTO(BaseModel):
    street: str
    neighborhood: str
    city: str
    state: str
    zip_code: str

    def to_domain(self) -> DeliveryAddress:
        return DeliveryAddress(**self.model_dump())


class ItemDTO(BaseModel):
    product_name: str
    quantity: int = Field(gt=0)
    price: Decimal

    def to_domain(self) -> DeliveryItem:
        return DeliveryItem(self.product_name, self.quantity, self.price)


class DeliveryCreateDTO(BaseModel):
    gas_station_id: str
    customer_name: str
    customer_phone: str
    customer_email: str | None = None
    delivery_address: AddressDTO | None = None
    items: list[ItemDTO] = []
    total_amount: Decimal
    priority: str = DeliveryPriority.MEDIUM.value
    estimated_delivery: datetime | None = None
    notes: str | None = None


class RejectDTO(BaseModel):
    reason: str | None = None


class DeliveryItemOutDTO(BaseModel):
    product_name: str
    quantity: int
    price: str  # Decimal serializado como string
    subtotal: str


class DeliveryDTO(BaseModel):
    id: str | None
    gas_station_id: str
    customer_name: str
    customer_phone: str
    customer_email: str | None
    delivery_address: AddressDTO | None
    formatted_address: str
    items: list[DeliveryItemOutDTO]
    total_amount: str
    formatted_total: str
    status: str
    status_text: str
    priority: str
    priority_text: str
    order_date: str | None
    estimated_delivery: str | None
    delivered_at: str | None
    invoice_number: str | None
    notes: str | None

    @classmethod
    def from_domain(cls, d: Delivery) -> DeliveryDTO:
        endereco = d.delivery_address
        return cls(
            id=d.id,
            gas_station_id=d.gas_station_id,
            customer_name=d.customer_name,
            customer_phone=d.customer_phone,
            customer_email=d.customer_email,
            delivery_address=AddressDTO(**vars(endereco)) if endereco else None,
            formatted_address=d.formatted_address,
            items=[
                DeliveryItemOutDTO(
                    product_name=i.product_name,
                    quantity=i.quantity,
                    price=str(i.price),
                    subtotal=str(i.subtotal),
                )
                for i in d.items
            ],
            total_amount=str(d.total_amount),
            formatted_total=d.formatted_total,
            status=d.status,
            status_text=d.status_text,
            priority=d.priority,
            priority_text=d.priority_text,
            order_date=_iso(d.order_date),
            estimated_delivery=_iso(d.estimated_delivery),
            delivered_at=_iso(d.delivered_at),
            invoice_number=d.invoice_number,
            notes=d.notes,
        )


class InvoiceDTO(BaseModel):
    invoice_number: str
    issue_date: str
    due_date: str
    customer_name: str
    customer_phone: str
    customer_email: str | None
    address: str
    items: list[DeliveryItemOutDTO]
    total: str
    taxes: str
    net_total: str

    @classmethod
    def from_domain(cls, nota: Invoice) -> InvoiceDTO:
        return cls(
            invoice_number=nota.invoice_number,
            issue_date=nota.issue_date.isoformat(),
            due_date=nota.due_date.isoformat(),
            customer_name=nota.customer_name,
            customer_phone=nota.customer_phone,
            customer_email=nota.customer_email,
            address=nota.address.formatado if nota.address else "",
            items=[
                DeliveryItemOutDTO(
                    product_name=i.product_name,
                    quantity=i.quantity,
                    price=str(i.price),
                    subtotal=str(i.subtotal),
                )
                for i in nota.items
            ],
            total=str(nota.total),
            taxes=str(nota.taxes),
            net_total=str(nota.net_total),
        )


class DeliveryStatsDTO(BaseModel):
    total: int
    by_status: dict[str, int]
    by_priority: dict[str, int]

    @classmethod
    def from_domain(cls, stats: DeliveryStats) -> DeliveryStatsDTO:
        return cls(total=stats.total, by_status=stats.by_status, by_priority=stats.by_priority)


def _iso(valor: datetime | None) -> str | None:
    return valor.isoformat() if valor else None
