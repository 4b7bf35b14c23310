from __future__ import annotations

from ..data.models import Product, StockStatus
from .thresholds import CategoryThresholds

OVER_STOCK_MULTIPLIER = 3


def total_stock(product: Product) -> int:
    """Variation stock plus batch quantity.

    Both sources are always added together, so a product tracking stock in
    variations and batches at once is counted twice.
    """
    stock = 0
    if product.variations:
        stock += sum(variation.stock for variation in product.variations)
    if product.batches:
        stock += sum(batch.quantity for batch in product.batches)
    return stock


def stock_status(product: Product, thresholds: CategoryThresholds) -> StockStatus:
    """Classify a product; the order of the checks is significant."""
    current = total_stock(product)
    minimum = thresholds.min_stock_level(product.category)

    if current == 0:
        return StockStatus.OUT_OF_STOCK
    if current <= minimum:
        return StockStatus.LOW_STOCK
    if current >= minimum * OVER_STOCK_MULTIPLIER:
        return StockStatus.OVER_STOCK
    return StockStatus.IN_STOCK


def stock_value(product: Product) -> float:
    return total_stock(product) * product.base_cost_price


def selling_value(product: Product) -> float:
    return total_stock(product) * product.base_price


def stock_percentage(product: Product, thresholds: CategoryThresholds) -> float:
    """Fill level against the over-stock line, capped at 100."""
    ceiling = thresholds.min_stock_level(product.category) * OVER_STOCK_MULTIPLIER
    return min(total_stock(product) / ceiling * 100, 100.0)
