# botijao/domain/estoque/entities.py
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

from .enums import ProductType, StockStatus
from .status import compute_stock_status, product_name, status_display

_TIPOS_VALIDOS = frozenset(t.value for t in ProductType)


@dataclass(frozen=True)
class InventoryItem:
    """Linha de estoque de um tipo de botijao em um posto.

    Invariante: `status` nunca e armazenado por fora, e sempre derivado de
    quantity/min_quantity/max_quantity por compute_stock_status.
    """

    gas_station_id: str
    product_type: str
    quantity: int = 0
    min_quantity: int = 0
    max_quantity: int = 0
    unit_price: Decimal = Decimal("0")
    supplier: str | None = None
    last_restock_date: datetime | None = None
    next_restock_date: datetime | None = None
    notes: str | None = None
    id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def status(self) -> StockStatus:
        return compute_stock_status(self.quantity, self.min_quantity, self.max_quantity)

    @property
    def status_text(self) -> str:
        return status_display(self.status).label

    @property
    def status_color(self) -> str:
        return status_display(self.status).color

    @property
    def product_name(self) -> str:
        return product_name(self.product_type)

    @property
    def needs_restock(self) -> bool:
        return self.quantity <= self.min_quantity

    @property
    def is_overstocked(self) -> bool:
        return self.quantity > self.max_quantity

    @property
    def stock_percentage(self) -> int:
        if self.max_quantity == 0:
            return 0
        pct = Decimal(self.quantity * 100) / Decimal(self.max_quantity)
        return int(pct.quantize(Decimal("1"), rounding=ROUND_HALF_UP))

    @property
    def total_value(self) -> Decimal:
        return self.unit_price * self.quantity

    def is_restock_due(self, referencia: datetime) -> bool:
        """Puro: recebe o instante de referencia, nunca chama datetime.now()."""
        if self.next_restock_date is None:
            return False
        return referencia >= self.next_restock_date

    def validate(self) -> list[str]:
        erros: list[str] = []
        if not self.gas_station_id:
            erros.append("ID do ponto de venda e obrigatorio")
        if not self.product_type:
            erros.append("Tipo de produto e obrigatorio")
        elif self.product_type not in _TIPOS_VALIDOS:
            erros.append("Tipo de produto invalido. Use: p13, p20, p45 ou p90")
        if self.quantity < 0:
            erros.append("Quantidade nao pode ser negativa")
        if self.min_quantity < 0:
            erros.append("Quantidade minima nao pode ser negativa")
        if self.max_quantity < 0:
            erros.append("Quantidade maxima nao pode ser negativa")
        if self.min_quantity > self.max_quantity:
            erros.append("Quantidade minima nao pode ser maior que a maxima")
        if self.unit_price < 0:
            erros.append("Preco unitario nao pode ser negativo")
        return erros

    def add_stock(self, quantidade: int, agora: datetime) -> InventoryItem:
        return dataclasses.replace(
            self,
            quantity=self.quantity + quantidade,
            last_restock_date=agora,
            updated_at=agora,
        )

    def remove_stock(self, quantidade: int, agora: datetime) -> InventoryItem:
        return dataclasses.replace(
            self,
            quantity=max(0, self.quantity - quantidade),
            updated_at=agora,
        )
