"""Sale receipt — what a committed cart leaves behind.

Commit is best-effort per line, so the receipt records one outcome per
line item instead of a single success flag.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from stockflow.domain.model.cart import CartLineItem
from stockflow.domain.model.value_objects import Money


@dataclass(frozen=True)
class LineOutcome:
    product_id: str
    product_name: str
    quantity: int
    applied: bool
    remaining_stock: int | None = None
    error: str | None = None

    @staticmethod
    def success(line: CartLineItem, remaining_stock: int) -> LineOutcome:
        return LineOutcome(
            product_id=line.product_id,
            product_name=line.product.name,
            quantity=line.quantity.value,
            applied=True,
            remaining_stock=remaining_stock,
        )

    @staticmethod
    def failure(line: CartLineItem, error: str) -> LineOutcome:
        return LineOutcome(
            product_id=line.product_id,
            product_name=line.product.name,
            quantity=line.quantity.value,
            applied=False,
            error=error,
        )


@dataclass(frozen=True)
class SaleReceipt:
    total: Money
    outcomes: list[LineOutcome]
    completed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def fully_applied(self) -> bool:
        return all(outcome.applied for outcome in self.outcomes)

    @property
    def failed(self) -> list[LineOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.applied]
