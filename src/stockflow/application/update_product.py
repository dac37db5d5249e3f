"""Application service: Update Product use case."""

from __future__ import annotations

from typing import Any

from stockflow.domain.exceptions import ValidationError
from stockflow.domain.model.product import Product
from stockflow.domain.model.value_objects import Money
from stockflow.domain.repository.product_catalog import ProductCatalog


class UpdateProductHandler:

    def __init__(self, catalog: ProductCatalog) -> None:
        self._catalog = catalog

    def handle(
        self,
        product_id: str,
        name: str | None = None,
        description: str | None = None,
        mrp: str | None = None,
        cost_price_code: str | None = None,
        stock: int | None = None,
        low_inventory_factor: int | None = None,
    ) -> Product:
        """Edit the given fields of a product; ``None`` means unchanged.

        Cart lines already holding this product are not affected — they
        captured a price snapshot when added.
        """
        fields: dict[str, Any] = {}
        if name is not None:
            fields["name"] = name
        if description is not None:
            fields["description"] = description
        if mrp is not None:
            fields["mrp"] = Money.of(mrp)
        if cost_price_code is not None:
            fields["cost_price_code"] = cost_price_code
        if stock is not None:
            fields["stock"] = stock
        if low_inventory_factor is not None:
            fields["low_inventory_factor"] = low_inventory_factor

        if not fields:
            raise ValidationError("Nothing to update")

        return self._catalog.update(product_id, fields)
