from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class StockStatus(str, Enum):
    """Stock-health classification of a single product."""
    IN_STOCK = "in_stock"
    LOW_STOCK = "low_stock"
    OUT_OF_STOCK = "out_of_stock"
    OVER_STOCK = "over_stock"


class InventoryMetrics(BaseModel):
    """Portfolio-wide aggregates over the full product collection."""
    total_items: int = Field(default=0, description="Number of products")
    in_stock: int = Field(default=0, description="Products with any stock")
    low_stock: int = Field(default=0, description="Products classified low_stock")
    out_of_stock: int = Field(default=0, description="Products with zero stock")
    total_stock_value: float = Field(default=0.0, description="SUM(stock * base_cost_price)")
    total_selling_value: float = Field(default=0.0, description="SUM(stock * base_price)")
    profit_margin: float = Field(default=0.0, description="Selling value minus stock value")
    margin_percentage: float = Field(default=0.0, description="Profit margin as a percentage of stock value")


class ProductStockRow(BaseModel):
    """Derived per-product values shown in the inventory table."""
    product_id: str = Field(description="Product identifier")
    name: str = Field(description="Product name")
    category: str = Field(description="Product category")
    brand: Optional[str] = Field(default=None, description="Product brand")
    current_stock: int = Field(description="Variation stock plus batch quantity")
    min_stock: int = Field(description="Minimum stock level for the category")
    status: StockStatus = Field(description="Stock-health classification")
    status_label: str = Field(description="Human readable status")
    status_color: str = Field(description="Semantic color token for the status")
    status_icon: str = Field(description="Icon token for the status")
    stock_value: float = Field(description="current_stock * base_cost_price")
    selling_value: float = Field(description="current_stock * base_price")
    stock_percentage: float = Field(description="Fill level against 3x the minimum, capped at 100")


class StockAlerts(BaseModel):
    """Low / out-of-stock alert summary for the dashboard."""
    low_stock: int = Field(description="Products running low")
    out_of_stock: int = Field(description="Products with no stock")
    all_optimal: bool = Field(description="True when a non-empty collection has no alerts")
    low_stock_message: Optional[str] = Field(default=None, description="Low stock alert text")
    out_of_stock_message: Optional[str] = Field(default=None, description="Out of stock alert text")
