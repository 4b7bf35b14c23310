from .data_filters import (
    ALL_CATEGORIES,
    InventoryFilters,
    InventoryTab,
)

from .products import ApiModel, Batch, GstDetails, Product, Variation
from .stock_entry import NewStockEntry
from .inventory import (
    InventoryMetrics,
    ProductStockRow,
    StockAlerts,
    StockStatus,
)
from .list_response import StringList

__all__ = [
    # Filter classes
    "ALL_CATEGORIES",
    "InventoryFilters",
    "InventoryTab",
    # Source records
    "ApiModel",
    "Batch",
    "GstDetails",
    "Product",
    "Variation",
    "NewStockEntry",
    # Derived models
    "InventoryMetrics",
    "ProductStockRow",
    "StockAlerts",
    "StockStatus",
    # List response models
    "StringList",
]
