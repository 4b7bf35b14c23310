from __future__ import annotations

from typing import Any, List, Optional

import requests

from ...config import get_config
from ...logging import get_logger
from ..interface import ProductNotFoundError, ProductSource, ProductSourceAuthError, ProductSourceError
from ..models import NewStockEntry, Product, StringList
from ..normalize import parse_products

logger = get_logger(__name__)


class HttpProductSource(ProductSource):
    """
    Products API backed implementation.
    - GET  {base_url}/api/products                  -> product collection
    - POST {base_url}/api/products/{id}/batches     -> persist a stock entry
    The collection is fetched at construction and on refresh().
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        config = get_config()
        base_url = base_url or config.api_base_url
        if not base_url:
            raise ValueError("API_BASE_URL must be set to use the http product source")
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout if timeout is not None else config.api_timeout_seconds
        self.session = session or requests.Session()
        self._setup_session(token if token is not None else config.api_token)
        self._products: List[Product] = self._fetch_products()

    def _setup_session(self, token: Optional[str]) -> None:
        self.session.headers.update({
            "User-Agent": "inventory-metrics-dashboard",
            "Content-Type": "application/json",
            "Accept": "application/json",
        })
        if token:
            self.session.headers["Authorization"] = f"Bearer {token}"

    def _request(self, method: str, path: str, not_found: Optional[str] = None, **kwargs) -> Any:
        """Send a request and decode the JSON body.

        A 404 raises ProductNotFoundError(not_found) only when ``not_found`` is
        given; otherwise it is reported like any other failed status.
        """
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            logger.error(f"{method} {url} failed: {e}")
            raise ProductSourceError(f"Failed to reach products API: {e}") from e

        if response.status_code == 401:
            logger.warning(f"{method} {url} returned 401")
            raise ProductSourceAuthError("Please log in to view products")
        if response.status_code == 404 and not_found is not None:
            logger.error(f"{method} {url} returned 404")
            raise ProductNotFoundError(not_found)
        if not response.ok:
            logger.error(f"{method} {url} returned {response.status_code}")
            raise ProductSourceError(f"Failed to fetch products: {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            raise ProductSourceError(f"Products API returned invalid JSON: {e}") from e

    def _fetch_products(self) -> List[Product]:
        logger.info(f"Fetching products from {self.base_url}/api/products")
        products = parse_products(self._request("GET", "/api/products"))
        logger.info(f"Received {len(products)} products")
        return products

    # ---------- interface implementation ----------

    def refresh(self) -> None:
        self._products = self._fetch_products()

    def list_products(self) -> List[Product]:
        return list(self._products)

    def list_product_categories(self) -> StringList:
        categories = {p.category for p in self._products if p.category}
        return StringList(values=sorted(categories))

    def add_stock(self, entry: NewStockEntry) -> Product:
        body = entry.to_batch().model_dump(mode="json", by_alias=True, exclude_none=True)
        if entry.supplier:
            body["supplier"] = entry.supplier
        payload = self._request(
            "POST",
            f"/api/products/{entry.product_id}/batches",
            not_found=f"Product not found: {entry.product_id}",
            json=body,
        )

        # the response may be the single product or the whole collection
        product = next((p for p in parse_products(payload) if p.id == entry.product_id), None)
        if product is None:
            logger.error(f"Products API response did not include product {entry.product_id}")
            raise ProductSourceError(f"Products API returned no product for {entry.product_id}")
        self._products = [product if p.id == product.id else p for p in self._products]
        logger.info(f"Added {entry.quantity} units (batch {entry.batch_number}) to product {product.id}")
        return product
