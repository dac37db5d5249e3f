"""Application service: Search Products use case (query)."""

from __future__ import annotations

from stockflow.application.dto import ProductDTO, product_to_dto
from stockflow.domain.repository.product_catalog import ProductCatalog

MAX_RESULTS = 5


class SearchProductsHandler:

    def __init__(self, catalog: ProductCatalog) -> None:
        self._catalog = catalog

    def handle(self, query: str, limit: int = MAX_RESULTS) -> list[ProductDTO]:
        """Match *query* against product names (any case) or barcodes."""
        query = query.strip()
        if not query:
            return []

        needle = query.lower()
        matches = [
            p
            for p in self._catalog.snapshot()
            if needle in p.name.lower() or query in p.barcode
        ]
        return [product_to_dto(p) for p in matches[:limit]]
