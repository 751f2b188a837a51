# botijao/domain/entrega/value_objects.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class DeliveryAddress:
    street: str
    neighborhood: str
    city: str
    state: str
    zip_code: str

    @property
    def formatado(self) -> str:
        return (
            f"{self.street}, {self.neighborhood} - {self.city}/{self.state}"
            f" - CEP: {self.zip_code}"
        )


@dataclass(frozen=True)
class DeliveryItem:
    """Valor monetario em Decimal. Nunca float."""

    product_name: str
    quantity: int
    price: Decimal

    @property
    def subtotal(self) -> Decimal:
        return self.price * self.quantity


def format_brl(valor: Decimal) -> str:
    """R$ 1.234,56"""
    inteiro, _, centavos = f"{valor.quantize(Decimal('0.01')):,.2f}".partition(".")
    return f"R$ {inteiro.replace(',', '.')},{centavos}"
