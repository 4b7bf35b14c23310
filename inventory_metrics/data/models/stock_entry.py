from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from .products import ApiModel, Batch


class NewStockEntry(ApiModel):
    """A stock receipt entered from the dashboard's add-stock form."""
    product_id: str = Field(min_length=1, description="Product receiving the stock")
    quantity: int = Field(gt=0, description="Units received")
    batch_number: str = Field(min_length=1, description="Batch identifier")
    cost_price: float = Field(ge=0, description="Cost price per unit")
    selling_price: float = Field(ge=0, description="Selling price per unit")
    supplier: Optional[str] = Field(default=None, description="Supplier name")
    mfg_date: Optional[datetime] = Field(default=None, description="Manufacturing date")
    exp_date: Optional[datetime] = Field(default=None, description="Expiry date")

    def to_batch(self) -> Batch:
        """Convert the entry into the batch record stored on the product."""
        return Batch(
            batch_number=self.batch_number,
            quantity=self.quantity,
            cost_price=self.cost_price,
            selling_price=self.selling_price,
            mfg_date=self.mfg_date,
            exp_date=self.exp_date,
        )
