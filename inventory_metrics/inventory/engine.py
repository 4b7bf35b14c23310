from __future__ import annotations

from typing import Iterable, List, Optional

import pandas as pd
from pydantic import BaseModel, Field

from ..config import AppConfig, get_config
from ..data.models import (
    InventoryFilters,
    InventoryMetrics,
    Product,
    ProductStockRow,
    StockAlerts,
    StockStatus,
)
from . import filters as product_filters
from . import presentation
from .metrics import compute_metrics, list_categories, stock_alerts
from .stock import selling_value, stock_percentage, stock_status, stock_value, total_stock
from .thresholds import CategoryThresholds

STOCK_TABLE_COLUMNS = [
    "product_id", "name", "category", "brand", "current_stock", "min_stock",
    "status", "status_label", "stock_value", "selling_value", "stock_percentage",
]


class InventoryView(BaseModel):
    """Everything the dashboard renders for one filter state."""
    metrics: InventoryMetrics = Field(description="Aggregates over the full collection")
    rows: List[ProductStockRow] = Field(description="Rows for the filtered products, in input order")
    alerts: StockAlerts = Field(description="Low / out-of-stock alerts")
    categories: List[str] = Field(description="Categories available to the category filter")


class InventoryMetricsEngine:
    """
    Derives stock levels, statuses and valuations from an in-memory collection.
    - Holds only the threshold table and the best-seller predicate.
    - Every call recomputes from the products passed in; nothing is cached
      and the products are never modified.
    """

    def __init__(
        self,
        thresholds: Optional[CategoryThresholds] = None,
        best_seller: Optional[product_filters.BestSellerPredicate] = None,
    ) -> None:
        self.thresholds = thresholds or CategoryThresholds()
        self.best_seller = best_seller or product_filters.StockValueBestSeller()

    @classmethod
    def from_config(cls, config: Optional[AppConfig] = None) -> "InventoryMetricsEngine":
        config = config or get_config()
        return cls(
            thresholds=CategoryThresholds.from_config(config),
            best_seller=product_filters.StockValueBestSeller(config.best_seller_value_threshold),
        )

    # ---------- per product ----------

    def total_stock(self, product: Product) -> int:
        return total_stock(product)

    def min_stock_level(self, category: Optional[str]) -> int:
        return self.thresholds.min_stock_level(category)

    def status(self, product: Product) -> StockStatus:
        return stock_status(product, self.thresholds)

    def row(self, product: Product) -> ProductStockRow:
        status = self.status(product)
        look = presentation.status_presentation(status)
        return ProductStockRow(
            product_id=product.id,
            name=product.name,
            category=product.category,
            brand=product.brand,
            current_stock=total_stock(product),
            min_stock=self.min_stock_level(product.category),
            status=status,
            status_label=look.label,
            status_color=look.color,
            status_icon=look.icon,
            stock_value=stock_value(product),
            selling_value=selling_value(product),
            stock_percentage=stock_percentage(product, self.thresholds),
        )

    # ---------- collection ----------

    def metrics(self, products: Iterable[Product]) -> InventoryMetrics:
        return compute_metrics(products, self.thresholds)

    def matches(self, product: Product, search_term: str, category_filter: str, active_tab: int) -> bool:
        return product_filters.matches(
            product, search_term, category_filter, active_tab, self.thresholds, self.best_seller
        )

    def filter(self, products: Iterable[Product], filters: InventoryFilters) -> List[Product]:
        return product_filters.filter_products(products, filters, self.thresholds, self.best_seller)

    def evaluate(self, products: Iterable[Product], filters: Optional[InventoryFilters] = None) -> InventoryView:
        """Metrics and alerts over the full collection, rows over the filtered subset."""
        products = list(products)
        filters = filters or InventoryFilters()
        metrics = self.metrics(products)
        return InventoryView(
            metrics=metrics,
            rows=[self.row(p) for p in self.filter(products, filters)],
            alerts=stock_alerts(metrics),
            categories=list_categories(products),
        )


def stock_table(rows: Iterable[ProductStockRow]) -> pd.DataFrame:
    """Rows as a DataFrame in the column order used by the inventory table."""
    records = [row.model_dump(mode="json") for row in rows]
    if not records:
        return pd.DataFrame(columns=STOCK_TABLE_COLUMNS)
    return pd.DataFrame.from_records(records)[STOCK_TABLE_COLUMNS]


def stock_table_css(table: pd.DataFrame) -> pd.DataFrame:
    """Text colours for a stock table, shaped like ``table`` for ``Styler.apply(axis=None)``.

    The status column takes its status colour and the category column its
    category colour; every other cell is left unstyled.
    """
    css = pd.DataFrame("", index=table.index, columns=table.columns)
    if "status" in table.columns:
        css["status"] = [
            f"color: {presentation.color_hex(presentation.status_color(_as_status(value)))}"
            for value in table["status"]
        ]
    if "category" in table.columns:
        css["category"] = [
            f"color: {presentation.color_hex(presentation.category_color(value))}" for value in table["category"]
        ]
    return css


def _as_status(value) -> Optional[StockStatus]:
    try:
        return StockStatus(value)
    except ValueError:
        return None
