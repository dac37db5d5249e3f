"""Application service: Prefill Product Details use case.

Looks a scanned barcode up in an external product database so the
add-product form can start with a name and description.
"""

from __future__ import annotations

import logging

from stockflow.domain.exceptions import DuplicateProductError, ValidationError
from stockflow.domain.gateway.product_lookup import ProductDetails, ProductLookup
from stockflow.domain.repository.product_catalog import ProductCatalog

logger = logging.getLogger(__name__)


class PrefillProductDetailsHandler:

    def __init__(self, catalog: ProductCatalog, lookup: ProductLookup) -> None:
        self._catalog = catalog
        self._lookup = lookup

    def handle(self, barcode: str) -> ProductDetails:
        """Fetch details for *barcode*.

        Raises DuplicateProductError without calling the lookup when the
        barcode is already in the catalog.  AdapterUnavailableError from
        the lookup propagates so the caller can fall back to manual entry.
        """
        if not barcode or not barcode.strip():
            raise ValidationError("Please enter a barcode first")
        barcode = barcode.strip()

        if self._catalog.find_by_barcode(barcode) is not None:
            raise DuplicateProductError(
                f"A product with barcode '{barcode}' already exists"
            )

        details = self._lookup.lookup(barcode)
        if details.is_empty:
            logger.info("No details found for barcode %s", barcode)
        return details
