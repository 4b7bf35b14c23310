from __future__ import annotations

from typing import Iterable, List, Optional, Protocol

from ..data.models import ALL_CATEGORIES, InventoryFilters, InventoryTab, Product, StockStatus
from .stock import selling_value, stock_status
from .thresholds import CategoryThresholds

DEFAULT_BEST_SELLER_VALUE = 10000.0


class BestSellerPredicate(Protocol):
    """Decides which products appear under the Best Sellers tab."""

    def __call__(self, product: Product) -> bool:
        ...


class StockValueBestSeller:
    """Stand-in for sales velocity: products whose stock is worth more than ``threshold`` at selling price."""

    def __init__(self, threshold: float = DEFAULT_BEST_SELLER_VALUE) -> None:
        self.threshold = threshold

    def __call__(self, product: Product) -> bool:
        return selling_value(product) > self.threshold


def matches_search(product: Product, search_term: str) -> bool:
    if not search_term:
        return True
    needle = search_term.lower()
    hsn_code = product.gst_details.hsn_code if product.gst_details else None
    haystack = (product.name, product.category, product.brand, hsn_code)
    return any(field and needle in field.lower() for field in haystack)


def matches_category(product: Product, category_filter: str) -> bool:
    return category_filter == ALL_CATEGORIES or product.category == category_filter


def matches_tab(
    product: Product,
    active_tab: int,
    thresholds: CategoryThresholds,
    best_seller: Optional[BestSellerPredicate] = None,
) -> bool:
    if active_tab == InventoryTab.LOW_STOCK:
        return stock_status(product, thresholds) == StockStatus.LOW_STOCK
    if active_tab == InventoryTab.OUT_OF_STOCK:
        return stock_status(product, thresholds) == StockStatus.OUT_OF_STOCK
    if active_tab == InventoryTab.BEST_SELLERS:
        return (best_seller or StockValueBestSeller())(product)
    # ALL, and any tab index the table does not know about
    return True


def matches(
    product: Product,
    search_term: str,
    category_filter: str,
    active_tab: int,
    thresholds: CategoryThresholds,
    best_seller: Optional[BestSellerPredicate] = None,
) -> bool:
    """True when the product passes the search, category and tab filters."""
    return (
        matches_search(product, search_term)
        and matches_category(product, category_filter)
        and matches_tab(product, active_tab, thresholds, best_seller)
    )


def filter_products(
    products: Iterable[Product],
    filters: InventoryFilters,
    thresholds: CategoryThresholds,
    best_seller: Optional[BestSellerPredicate] = None,
) -> List[Product]:
    """Apply ``matches`` to every product, keeping input order."""
    return [
        p for p in products
        if matches(p, filters.search_term, filters.category, filters.active_tab, thresholds, best_seller)
    ]
