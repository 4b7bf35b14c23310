from __future__ import annotations

from typing import Iterable, List

from ..data.models import InventoryMetrics, Product, StockAlerts, StockStatus
from ..logging import get_logger
from .stock import selling_value, stock_status, stock_value, total_stock
from .thresholds import CategoryThresholds

logger = get_logger(__name__)


def compute_metrics(products: Iterable[Product], thresholds: CategoryThresholds) -> InventoryMetrics:
    """Aggregate stock counts and valuations over the whole collection.

    An empty collection yields all-zero metrics. The margin percentage is
    guarded to 0 when there is no stock value.
    """
    products = list(products)

    in_stock = sum(1 for p in products if total_stock(p) > 0)
    low_stock = sum(1 for p in products if stock_status(p, thresholds) == StockStatus.LOW_STOCK)
    out_of_stock = sum(1 for p in products if total_stock(p) == 0)

    total_stock_value = sum((stock_value(p) for p in products), 0.0)
    total_selling_value = sum((selling_value(p) for p in products), 0.0)
    profit_margin = total_selling_value - total_stock_value
    margin_percentage = (profit_margin / total_stock_value) * 100 if total_stock_value > 0 else 0.0

    metrics = InventoryMetrics(
        total_items=len(products),
        in_stock=in_stock,
        low_stock=low_stock,
        out_of_stock=out_of_stock,
        total_stock_value=total_stock_value,
        total_selling_value=total_selling_value,
        profit_margin=profit_margin,
        margin_percentage=margin_percentage,
    )
    logger.debug(
        f"Computed metrics for {metrics.total_items} products: "
        f"{metrics.low_stock} low, {metrics.out_of_stock} out, value {metrics.total_stock_value:.2f}"
    )
    return metrics


def _plural(count: int, one: str, many: str) -> str:
    return one if count == 1 else many


def stock_alerts(metrics: InventoryMetrics) -> StockAlerts:
    """Build the low / out-of-stock alert summary shown under the table."""
    low_message = None
    if metrics.low_stock > 0:
        low_message = (
            f"{metrics.low_stock} {_plural(metrics.low_stock, 'product', 'products')} "
            f"{_plural(metrics.low_stock, 'is', 'are')} running low on stock."
        )
    out_message = None
    if metrics.out_of_stock > 0:
        out_message = (
            f"{metrics.out_of_stock} {_plural(metrics.out_of_stock, 'product', 'products')} "
            f"{_plural(metrics.out_of_stock, 'is', 'are')} out of stock."
        )
    return StockAlerts(
        low_stock=metrics.low_stock,
        out_of_stock=metrics.out_of_stock,
        all_optimal=metrics.low_stock == 0 and metrics.out_of_stock == 0 and metrics.total_items > 0,
        low_stock_message=low_message,
        out_of_stock_message=out_message,
    )


def list_categories(products: Iterable[Product]) -> List[str]:
    """Sorted distinct non-empty categories, for the category dropdown."""
    return sorted({p.category for p in products if p.category})
