from __future__ import annotations

from typing import Any, List

from pydantic import ValidationError

from ..logging import get_logger
from .models import Product

logger = get_logger(__name__)


def normalize_product_payload(payload: Any) -> List[Any]:
    """Accept the three shapes the products API returns and always give back a list.

    - a list of records
    - an object wrapping the list under ``products``
    - a single record
    Anything else becomes an empty list.
    """
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        wrapped = payload.get("products")
        if isinstance(wrapped, list):
            return wrapped
        return [payload]
    return []


def parse_products(payload: Any) -> List[Product]:
    """Normalize ``payload`` and validate each record, skipping the invalid ones."""
    products: List[Product] = []
    for index, record in enumerate(normalize_product_payload(payload)):
        try:
            products.append(Product.model_validate(record))
        except ValidationError as e:
            logger.warning(f"Skipping invalid product record at index {index}: {e.error_count()} error(s)")
    return products
