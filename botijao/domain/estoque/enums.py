# botijao/domain/estoque/enums.py
from enum import StrEnum


class ProductType(StrEnum):
    P13 = "p13"
    P20 = "p20"
    P45 = "p45"
    P90 = "p90"


class StockStatus(StrEnum):
    OUT_OF_STOCK = "out_of_stock"
    LOW_STOCK = "low_stock"
    IN_STOCK = "in_stock"
    OVERSTOCKED = "overstocked"
