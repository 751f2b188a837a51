# botijao/application/dtos/estoque_dto.py
from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from botijao.domain.estoque.entities import InventoryItem


class InventoryCreateDTO(BaseModel):
    gas_station_id: str
    product_type: str
    quantity: int = 0
    min_quantity: int = 0
    max_quantity: int = 0
    unit_price: Decimal = Decimal("0")
    supplier: str | None = None
    next_restock_date: datetime | None = None
    notes: str | None = None


class InventoryUpdateDTO(BaseModel):
    quantity: int | None = None
    min_quantity: int | None = None
    max_quantity: int | None = None
    unit_price: Decimal | None = None
    supplier: str | None = None
    next_restock_date: datetime | None = None
    notes: str | None = None


class StockMovementDTO(BaseModel):
    quantity: int


class OrderItemDTO(BaseModel):
    product: str
    quantity: int = Field(gt=0)


class InventoryItemDTO(BaseModel):
    id: str | None
    gas_station_id: str
    product_type: str
    product_name: str
    quantity: int
    min_quantity: int
    max_quantity: int
    unit_price: str  # Decimal serializado como string
    total_value: str
    status: str
    status_text: str
    status_color: str
    stock_percentage: int
    needs_restock: bool
    supplier: str | None
    last_restock_date: str | None
    next_restock_date: str | None
    notes: str | None

    @classmethod
    def from_domain(cls, item: InventoryItem) -> InventoryItemDTO:
        return cls(
            id=item.id,
            gas_station_id=item.gas_station_id,
            product_type=item.product_type,
            product_name=item.product_name,
            quantity=item.quantity,
            min_quantity=item.min_quantity,
            max_quantity=item.max_quantity,
            unit_price=str(item.unit_price),
            total_value=str(item.total_value),
            status=item.status,
            status_text=item.status_text,
            status_color=item.status_color,
            stock_percentage=item.stock_percentage,
            needs_restock=item.needs_restock,
            supplier=item.supplier,
            last_restock_date=(
                item.last_restock_date.isoformat() if item.last_restock_date else None
            ),
            next_restock_date=(
                item.next_restock_date.isoformat() if item.next_restock_date else None
            ),
            notes=item.notes,
        )


class InventoryStatsDTO(BaseModel):
    total_items: int
    total_value: str
    in_stock: int
    low_stock: int
    out_of_stock: int
    overstocked: int
    needs_restock: int


class StockCheckItemDTO(BaseModel):
    product: str
    requested: int
    available: int
    product_type: str | None = None
    inventory_id: str | None = None
    reason: str | None = None


class StockAvailabilityDTO(BaseModel):
    has_stock: bool
    available_items: list[StockCheckItemDTO]
    unavailable_items: list[StockCheckItemDTO]
