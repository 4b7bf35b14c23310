from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel, Field

ALL_CATEGORIES = "all"


class InventoryTab(IntEnum):
    """Tabs of the inventory table."""
    ALL = 0
    LOW_STOCK = 1
    OUT_OF_STOCK = 2
    BEST_SELLERS = 3


class InventoryFilters(BaseModel):
    """Filters for the inventory product table."""
    search_term: str = Field(default="", description="Case-insensitive search over name, category, brand and HSN code")
    category: str = Field(default=ALL_CATEGORIES, description="Exact category filter, or 'all'")
    active_tab: int = Field(default=InventoryTab.ALL, description="Active tab index (see InventoryTab)")
