"""Cart aggregate — the in-progress, never-persisted side of a sale.

The Cart owns its line items.  Stock availability is checked on every
add against the product handed in, which callers must read fresh from
the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from stockflow.domain.exceptions import InsufficientStockError
from stockflow.domain.model.product import Product
from stockflow.domain.model.value_objects import Money, Quantity


@dataclass
class CartLineItem:
    """One row of a sale.

    ``product`` is a display snapshot taken on first add.  It is never
    used for stock decisions at commit time.
    """

    product: Product
    quantity: Quantity
    sale_price: Money  # locked on first add

    @property
    def product_id(self) -> str:
        return self.product.id

    @property
    def line_total(self) -> Money:
        return self.sale_price * self.quantity.value


@dataclass
class Cart:
    """Ordered line items, at most one per product id."""

    items: list[CartLineItem] = field(default_factory=list)

    # --- Mutation -------------------------------------------------------------

    def add(
        self,
        product: Product,
        quantity: int,
        sale_price: Money | None = None,
    ) -> CartLineItem:
        """Add *quantity* of *product*, merging with an existing line.

        The requested total (existing + new) is checked against
        ``product.stock`` before anything changes, so a rejected add
        leaves the cart exactly as it was.  When merging, the price set
        by the first add is kept.
        """
        qty = Quantity(quantity)
        existing = self.find(product.id)
        already_in_cart = existing.quantity.value if existing else 0
        requested = already_in_cart + qty.value

        if requested > product.stock:
            raise InsufficientStockError(
                f"Not enough stock for {product.name} "
                f"(requested {requested}, {product.stock} in stock)"
            )

        if existing is not None:
            existing.quantity = existing.quantity + qty
            return existing

        line = CartLineItem(
            product=replace(product),
            quantity=qty,
            sale_price=sale_price if sale_price is not None else product.mrp,
        )
        self.items.append(line)
        return line

    def remove_line(self, product_id: str) -> None:
        """Drop the line for *product_id*; silently ignores unknown ids."""
        self.items = [item for item in self.items if item.product_id != product_id]

    def clear(self) -> None:
        self.items = []

    def cancel(self) -> None:
        """Abandon the sale."""
        self.clear()

    # --- Queries --------------------------------------------------------------

    def find(self, product_id: str) -> CartLineItem | None:
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def total(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result
