"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  Money is pre-formatted
for display (e.g. "₹100.00").
"""

from __future__ import annotations

from dataclasses import dataclass

from stockflow.domain.model.cart import Cart
from stockflow.domain.model.product import Product
from stockflow.domain.model.sale import SaleReceipt
from stockflow.domain.service.low_stock_classifier import LowStockEntry


@dataclass(frozen=True)
class ProductDTO:
    id: str
    barcode: str
    ean: str
    name: str
    description: str
    mrp: str
    cost_price_code: str
    stock: int
    low_inventory_factor: int


@dataclass(frozen=True)
class CartLineDTO:
    product_id: str
    product_name: str
    quantity: int
    sale_price: str
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    items: list[CartLineDTO]
    total: str


@dataclass(frozen=True)
class LineOutcomeDTO:
    product_id: str
    product_name: str
    quantity: int
    applied: bool
    remaining_stock: int | None
    error: str | None


@dataclass(frozen=True)
class SaleReceiptDTO:
    total: str
    outcomes: list[LineOutcomeDTO]
    fully_applied: bool
    completed_at: str


@dataclass(frozen=True)
class LowStockLineDTO:
    product_id: str
    product_name: str
    stock: int
    threshold: int
    status: str


# ---------------------------------------------------------------------------
# Mapping
# ---------------------------------------------------------------------------


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        barcode=product.barcode,
        ean=product.ean,
        name=product.name,
        description=product.description,
        mrp=str(product.mrp),
        cost_price_code=product.cost_price_code,
        stock=product.stock,
        low_inventory_factor=product.low_inventory_factor,
    )


def cart_to_dto(cart: Cart) -> CartDTO:
    return CartDTO(
        items=[
            CartLineDTO(
                product_id=item.product_id,
                product_name=item.product.name,
                quantity=item.quantity.value,
                sale_price=str(item.sale_price),
                line_total=str(item.line_total),
            )
            for item in cart.items
        ],
        total=str(cart.total),
    )


def receipt_to_dto(receipt: SaleReceipt) -> SaleReceiptDTO:
    return SaleReceiptDTO(
        total=str(receipt.total),
        outcomes=[
            LineOutcomeDTO(
                product_id=o.product_id,
                product_name=o.product_name,
                quantity=o.quantity,
                applied=o.applied,
                remaining_stock=o.remaining_stock,
                error=o.error,
            )
            for o in receipt.outcomes
        ],
        fully_applied=receipt.fully_applied,
        completed_at=receipt.completed_at.strftime("%Y-%m-%d %H:%M UTC"),
    )


def low_stock_to_dto(entry: LowStockEntry) -> LowStockLineDTO:
    return LowStockLineDTO(
        product_id=entry.product.id,
        product_name=entry.product.name,
        stock=entry.product.stock,
        threshold=entry.product.low_inventory_factor,
        status=entry.status.value,
    )
