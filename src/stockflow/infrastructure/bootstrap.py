"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from stockflow.infrastructure.config import Settings, load_settings
from stockflow.infrastructure.lookup.open_food_facts import OpenFoodFactsLookup
from stockflow.infrastructure.persistence.json_product_catalog import (
    JsonProductCatalog,
)


def settings() -> Settings:
    return load_settings()


def product_catalog() -> JsonProductCatalog:
    return JsonProductCatalog(settings().data_dir / "products.json")


def product_lookup() -> OpenFoodFactsLookup:
    cfg = settings()
    return OpenFoodFactsLookup(base_url=cfg.lookup_url, timeout=cfg.lookup_timeout)
