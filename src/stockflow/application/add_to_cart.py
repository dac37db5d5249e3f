"""Application service: Add To Cart use case.

Resolves a barcode to a product and adds it to the caller's cart.  The
product is re-read from the catalog first so the stock check runs
against the live figure, not whatever was on screen.
"""

from __future__ import annotations

from stockflow.domain.exceptions import EntityNotFoundError
from stockflow.domain.model.cart import Cart, CartLineItem
from stockflow.domain.model.product import Product
from stockflow.domain.model.value_objects import Money
from stockflow.domain.repository.product_catalog import ProductCatalog


class AddToCartHandler:

    def __init__(self, catalog: ProductCatalog) -> None:
        self._catalog = catalog

    def handle(
        self,
        cart: Cart,
        barcode: str,
        quantity: int = 1,
        sale_price: str | None = None,
    ) -> CartLineItem:
        product = self._resolve(barcode)
        price = Money.of(sale_price) if sale_price is not None else None
        return cart.add(product, quantity, price)

    def handle_scan(self, cart: Cart, code: str) -> CartLineItem:
        """A scan always adds one unit at MRP."""
        return self.handle(cart, code, quantity=1)

    def _resolve(self, barcode: str) -> Product:
        known = self._catalog.find_by_barcode(barcode)
        if known is None:
            raise EntityNotFoundError(f"No product with barcode {barcode} found")

        live = self._catalog.get_by_id(known.id)
        if live is None:
            raise EntityNotFoundError(
                f"Product '{known.name}' is no longer in the catalog"
            )
        return live
