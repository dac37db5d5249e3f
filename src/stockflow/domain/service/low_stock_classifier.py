"""Low-stock classification over a catalog snapshot."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from stockflow.domain.model.product import Product


class StockStatus(Enum):
    OUT_OF_STOCK = "OUT_OF_STOCK"
    LOW_STOCK = "LOW_STOCK"


@dataclass(frozen=True)
class LowStockEntry:
    product: Product
    status: StockStatus


def stock_status(product: Product) -> StockStatus | None:
    """Status of a single product, or None when it is comfortably stocked."""
    if product.stock == 0:
        return StockStatus.OUT_OF_STOCK
    if product.stock <= product.low_inventory_factor:
        return StockStatus.LOW_STOCK
    return None


def classify(products: Iterable[Product]) -> list[LowStockEntry]:
    """Products at or below their reorder threshold, in input order."""
    entries: list[LowStockEntry] = []
    for product in products:
        status = stock_status(product)
        if status is not None:
            entries.append(LowStockEntry(product=product, status=status))
    return entries
