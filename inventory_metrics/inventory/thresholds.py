from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt

from ..config import DEFAULT_CATEGORY_MIN_STOCK, DEFAULT_MIN_STOCK, AppConfig, get_config


class CategoryThresholds(BaseModel):
    """Minimum stock level per category, with a fallback for anything unmatched."""
    model_config = ConfigDict(frozen=True)

    levels: Dict[str, NonNegativeInt] = Field(default_factory=lambda: dict(DEFAULT_CATEGORY_MIN_STOCK), description="Category name to minimum stock level")
    default: int = Field(default=DEFAULT_MIN_STOCK, ge=1, description="Minimum stock level for unmatched categories")

    def min_stock_level(self, category: Optional[str]) -> int:
        """Return the minimum stock level for ``category``; never fails.

        Missing, empty, unknown and zero-valued entries all resolve to the default.
        """
        if not category:
            return self.default
        return self.levels.get(category) or self.default

    @classmethod
    def from_config(cls, config: Optional[AppConfig] = None) -> "CategoryThresholds":
        """Build the table from AppConfig (category_min_stock / default_min_stock)."""
        config = config or get_config()
        return cls(levels=dict(config.category_min_stock), default=config.default_min_stock)
