# botijao/domain/estoque/status.py
from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType

from .enums import ProductType, StockStatus


@dataclass(frozen=True)
class StatusDisplay:
    label: str
    color: str


# ADR: tabela de exibicao como constante de modulo. Novo status = nova linha,
# nenhum call site muda.
STOCK_STATUS_DISPLAY: MappingProxyType[str, StatusDisplay] = MappingProxyType({
    StockStatus.IN_STOCK: StatusDisplay("Em Estoque", "green"),
    StockStatus.LOW_STOCK: StatusDisplay("Estoque Baixo", "yellow"),
    StockStatus.OUT_OF_STOCK: StatusDisplay("Sem Estoque", "red"),
    StockStatus.OVERSTOCKED: StatusDisplay("Excesso de Estoque", "orange"),
})

PRODUCT_NAMES: MappingProxyType[str, str] = MappingProxyType({
    ProductType.P13: "Botijao P13 (13kg)",
    ProductType.P20: "Botijao P20 (20kg)",
    ProductType.P45: "Botijao P45 (45kg)",
    ProductType.P90: "Botijao P90 (90kg)",
})


def compute_stock_status(quantity: int, min_quantity: int, max_quantity: int) -> StockStatus:
    """Puro. quantity == 0 e sempre out_of_stock, independente dos limites."""
    if quantity == 0:
        return StockStatus.OUT_OF_STOCK
    if quantity <= min_quantity:
        return StockStatus.LOW_STOCK
    if quantity <= max_quantity:
        return StockStatus.IN_STOCK
    return StockStatus.OVERSTOCKED


def status_display(status: str) -> StatusDisplay:
    """Status desconhecido: cinza, label = codigo cru."""
    return STOCK_STATUS_DISPLAY.get(status, StatusDisplay(str(status), "gray"))


def product_name(product_type: str) -> str:
    return PRODUCT_NAMES.get(product_type, product_type)


def map_product_name_to_type(nome: str | None) -> ProductType | None:
    """"Botijao P13", "gas 13kg", "13 kg" -> p13. None se nao reconhecido."""
    if not nome:
        return None
    normalizado = nome.lower()
    for tipo in ProductType:
        kg = tipo.value[1:]
        if re.search(rf"{tipo.value}|{kg}\s?kg", normalizado):
            return tipo
    return None
