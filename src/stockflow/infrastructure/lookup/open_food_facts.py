"""Product details from the Open Food Facts public database."""

from __future__ import annotations

import logging

import requests

from stockflow.domain.exceptions import AdapterUnavailableError
from stockflow.domain.gateway.product_lookup import ProductDetails, ProductLookup
from stockflow.infrastructure.config import DEFAULT_LOOKUP_URL

logger = logging.getLogger(__name__)


class OpenFoodFactsLookup(ProductLookup):

    def __init__(
        self,
        base_url: str = DEFAULT_LOOKUP_URL,
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()

    def lookup(self, barcode: str) -> ProductDetails:
        url = f"{self._base_url}/{barcode}.json"
        try:
            resp = self._session.get(url, timeout=self._timeout)
            resp.raise_for_status()
            data = resp.json()
        except requests.RequestException as exc:
            logger.warning("Lookup failed for barcode %s: %s", barcode, exc)
            raise AdapterUnavailableError(
                f"Failed to fetch product info for barcode {barcode}"
            ) from exc
        except ValueError as exc:
            logger.warning("Lookup returned invalid JSON for %s: %s", barcode, exc)
            raise AdapterUnavailableError(
                f"Failed to fetch product info for barcode {barcode}"
            ) from exc

        if not isinstance(data, dict) or data.get("status") == 0:
            return ProductDetails()
        product = data.get("product")
        if not isinstance(product, dict):
            return ProductDetails()

        return ProductDetails(
            name=(product.get("product_name") or "").strip(),
            description=(
                product.get("generic_name_en") or product.get("categories") or ""
            ).strip(),
        )
