"""Domain service: Sale Commit.

Turns a cart into stock decrements on the catalog.  The catalog offers
no multi-product transaction, so each line is applied on its own:

  - the product is re-read from the catalog (the cart's snapshot may be
    stale if another register sold the same item meanwhile)
  - a line whose live stock is now short is refused rather than driving
    stock negative
  - a failing line does not stop the others

Whatever happens, the cart is empty afterwards.
"""

from __future__ import annotations

import logging

from stockflow.domain.exceptions import (
    DomainException,
    EmptyCartError,
    EntityNotFoundError,
    InsufficientStockError,
)
from stockflow.domain.model.cart import Cart, CartLineItem
from stockflow.domain.model.sale import LineOutcome, SaleReceipt
from stockflow.domain.repository.product_catalog import ProductCatalog

logger = logging.getLogger(__name__)


class SaleCommitService:

    def __init__(self, catalog: ProductCatalog) -> None:
        self._catalog = catalog

    def commit(self, cart: Cart) -> SaleReceipt:
        """Apply every line of *cart* to the catalog and empty the cart.

        Raises EmptyCartError (cart untouched) if there is nothing to
        sell.  Per-line failures are reported in the receipt, never
        raised.
        """
        if cart.is_empty:
            raise EmptyCartError("Cart is empty — add products to complete a sale")

        total = cart.total
        outcomes: list[LineOutcome] = []
        try:
            for line in cart.items:
                outcomes.append(self._apply_line(line))
        finally:
            cart.clear()

        receipt = SaleReceipt(total=total, outcomes=outcomes)
        logger.info(
            "Sale committed: total=%s lines=%d failed=%d",
            receipt.total,
            len(outcomes),
            len(receipt.failed),
        )
        return receipt

    def _apply_line(self, line: CartLineItem) -> LineOutcome:
        qty = line.quantity.value
        try:
            current = self._catalog.get_by_id(line.product_id)
            if current is None:
                raise EntityNotFoundError(
                    f"Product '{line.product.name}' is no longer in the catalog"
                )
            if qty > current.stock:
                raise InsufficientStockError(
                    f"Not enough stock for {current.name} "
                    f"(selling {qty}, {current.stock} in stock)"
                )
            updated = self._catalog.update(current.id, {"stock": current.stock - qty})
        except DomainException as exc:
            logger.warning("Stock update failed for %s: %s", line.product_id, exc)
            return LineOutcome.failure(line, str(exc))

        logger.debug("Stock for %s is now %d", updated.id, updated.stock)
        return LineOutcome.success(line, updated.stock)
