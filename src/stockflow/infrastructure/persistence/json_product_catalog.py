"""JSON-file-backed implementation of ProductCatalog.

One flat record per product, keyed by ``id``.  Every read goes to the
file, so a second register writing the same file is seen on the next
read.  A missing file reads as an empty catalog; the file and its
directory are created on the first write.
"""

from __future__ import annotations

import json
import logging
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

from stockflow.domain.exceptions import (
    AdapterUnavailableError,
    DuplicateProductError,
    EntityNotFoundError,
    ValidationError,
)
from stockflow.domain.model.product import Product
from stockflow.domain.model.value_objects import Money
from stockflow.domain.repository.product_catalog import ProductCatalog

logger = logging.getLogger(__name__)


class JsonProductCatalog(ProductCatalog):

    def __init__(self, file_path: Path) -> None:
        super().__init__()
        self._file_path = file_path

    # --- ProductCatalog interface ---------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def create(self, product: Product) -> None:
        products = self._load()
        if product.id in products:
            raise DuplicateProductError(
                f"A product with barcode '{product.id}' already exists"
            )
        products[product.id] = product
        self._persist(products)
        logger.info("Created product %s", product.id)
        self.refresh()

    def update(self, product_id: str, fields: dict[str, Any]) -> Product:
        products = self._load()
        product = products.get(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        product.apply_changes(fields)
        self._persist(products)
        logger.info("Updated product %s: %s", product_id, ", ".join(sorted(fields)))
        self.refresh()
        return product

    # --- Serialization helpers ------------------------------------------------

    @staticmethod
    def _to_raw(p: Product) -> dict:
        return {
            "id": p.id,
            "barcode": p.barcode,
            "ean": p.ean,
            "name": p.name,
            "description": p.description,
            "mrp": str(p.mrp.amount),
            "currency": p.mrp.currency,
            "cost_price_code": p.cost_price_code,
            "stock": p.stock,
            "low_inventory_factor": p.low_inventory_factor,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            barcode=raw.get("barcode", raw["id"]),
            ean=raw.get("ean") or raw.get("barcode", raw["id"]),
            name=raw["name"],
            description=raw.get("description", ""),
            mrp=Money(Decimal(raw["mrp"]), raw.get("currency", "INR")),
            cost_price_code=raw.get("cost_price_code", ""),
            stock=int(raw["stock"]),
            low_inventory_factor=int(raw.get("low_inventory_factor", 0)),
        )

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> dict[str, Product]:
        try:
            if not self._file_path.is_file():
                return {}
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            return {item["id"]: self._to_domain(item) for item in raw}
        except OSError as exc:
            raise AdapterUnavailableError(
                f"Cannot read catalog file {self._file_path}: {exc}"
            ) from exc
        except (ValueError, KeyError, TypeError, InvalidOperation, ValidationError) as exc:
            raise AdapterUnavailableError(
                f"Catalog file {self._file_path} is corrupt: {exc}"
            ) from exc

    def _persist(self, products: dict[str, Product]) -> None:
        raw = [self._to_raw(p) for p in products.values()]
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(
                json.dumps(raw, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise AdapterUnavailableError(
                f"Cannot write catalog file {self._file_path}: {exc}"
            ) from exc

