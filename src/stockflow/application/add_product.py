"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from stockflow.domain.exceptions import DuplicateProductError
from stockflow.domain.model.product import Product
from stockflow.domain.model.value_objects import Money
from stockflow.domain.repository.product_catalog import ProductCatalog

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, catalog: ProductCatalog) -> None:
        self._catalog = catalog

    def handle(
        self,
        barcode: str,
        name: str,
        mrp: str,
        stock: int,
        low_inventory_factor: int = 0,
        description: str = "",
        cost_price_code: str = "",
        ean: str | None = None,
    ) -> Product:
        """Add a new product to the catalog, keyed by its barcode."""
        product = Product.create(
            barcode=barcode,
            name=name,
            mrp=Money.of(mrp),
            stock=stock,
            low_inventory_factor=low_inventory_factor,
            description=description,
            cost_price_code=cost_price_code,
            ean=ean,
        )

        # Early check against the last snapshot; the catalog's own
        # uniqueness check in create() is authoritative.
        if self._catalog.find_by_barcode(product.barcode) is not None:
            raise DuplicateProductError(
                f"A product with barcode '{product.barcode}' already exists"
            )

        self._catalog.create(product)
        logger.info("Added product %s (%s)", product.id, product.name)
        return product
