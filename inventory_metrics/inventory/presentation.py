"""Display tokens for stock statuses and categories.

Nothing here feeds back into classification; the dashboard looks values up
after the engine has decided a status.
"""
from __future__ import annotations

from typing import Dict, Iterable, NamedTuple, Optional

from ..data.models import Product, StockStatus


class StatusPresentation(NamedTuple):
    color: str
    icon: str
    label: str


STATUS_PRESENTATION: Dict[StockStatus, StatusPresentation] = {
    StockStatus.IN_STOCK: StatusPresentation("success", "check_circle", "In Stock"),
    StockStatus.LOW_STOCK: StatusPresentation("warning", "warning", "Low Stock"),
    StockStatus.OUT_OF_STOCK: StatusPresentation("error", "error", "Out of Stock"),
    StockStatus.OVER_STOCK: StatusPresentation("info", "local_shipping", "Over Stock"),
}

FALLBACK_PRESENTATION = StatusPresentation("text_secondary", "inventory", "Unknown")

COLOR_HEX: Dict[str, str] = {
    "primary": "#1a73e8",
    "secondary": "#9334e6",
    "success": "#34a853",
    "warning": "#fbbc04",
    "error": "#ea4335",
    "info": "#4285f4",
    "text_secondary": "#5f6368",
}

CATEGORY_COLORS: Dict[str, str] = {
    "Electronics": "primary",
    "Food & Beverages": "success",
    "Fitness": "warning",
    "Home & Kitchen": "secondary",
}


def status_presentation(status: Optional[StockStatus]) -> StatusPresentation:
    return STATUS_PRESENTATION.get(status, FALLBACK_PRESENTATION)


def status_color(status: Optional[StockStatus]) -> str:
    return status_presentation(status).color


def status_icon(status: Optional[StockStatus]) -> str:
    return status_presentation(status).icon


def status_label(status: Optional[StockStatus]) -> str:
    return status_presentation(status).label


def category_color(category: Optional[str]) -> str:
    return CATEGORY_COLORS.get(category or "", "text_secondary")


def color_hex(token: str) -> str:
    """Resolve a semantic color token to the hex value used by the dashboard."""
    return COLOR_HEX.get(token, COLOR_HEX["text_secondary"])


def product_label(product: Product) -> str:
    return f"{product.name} - {product.category}" if product.category else product.name


def product_options(products: Iterable[Product]) -> Dict[str, str]:
    """Picker options keyed by product id; labels may repeat, ids do not."""
    return {p.id: product_label(p) for p in products}
