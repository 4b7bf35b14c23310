from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def blank_to_none(value):
    """Empty or whitespace-only strings stand for an unset optional value."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


class ApiModel(BaseModel):
    """Base for records exchanged with the products API (camelCase on the wire)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class GstDetails(ApiModel):
    """Tax classification attached to a product."""
    type: Optional[str] = Field(default=None, description="GST type")
    hsn_code: Optional[str] = Field(default=None, description="HSN tax-classification code")
    cgst_rate: Optional[float] = Field(default=None, description="Central GST rate")
    sgst_rate: Optional[float] = Field(default=None, description="State GST rate")
    igst_rate: Optional[float] = Field(default=None, description="Integrated GST rate")
    utgst_rate: Optional[float] = Field(default=None, description="Union territory GST rate")

    @field_validator("type", "hsn_code", "cgst_rate", "sgst_rate", "igst_rate", "utgst_rate", mode="before")
    @classmethod
    def _blank_is_none(cls, value):
        return blank_to_none(value)


class Variation(ApiModel):
    """A sellable variant of a product with its own stock counter."""
    name: str = Field(default="", description="Variation name")
    price: float = Field(default=0.0, description="Variation selling price")
    cost_price: float = Field(default=0.0, description="Variation cost price")
    stock: int = Field(default=0, ge=0, description="Units in stock for this variation")
    sku: Optional[str] = Field(default=None, description="Stock keeping unit code")

    @field_validator("stock", "price", "cost_price", mode="before")
    @classmethod
    def _missing_number_is_zero(cls, value):
        return 0 if value is None else value

    @field_validator("name", mode="before")
    @classmethod
    def _missing_name_is_empty(cls, value):
        return "" if value is None else value


class Batch(ApiModel):
    """A received lot of stock."""
    batch_number: str = Field(default="", description="Batch identifier")
    quantity: int = Field(default=0, ge=0, description="Units received in this batch")
    cost_price: float = Field(default=0.0, description="Batch cost price per unit")
    selling_price: float = Field(default=0.0, description="Batch selling price per unit")
    mfg_date: Optional[datetime] = Field(default=None, description="Manufacturing date")
    exp_date: Optional[datetime] = Field(default=None, description="Expiry date")

    @field_validator("quantity", "cost_price", "selling_price", mode="before")
    @classmethod
    def _missing_number_is_zero(cls, value):
        return 0 if value is None else value

    @field_validator("batch_number", mode="before")
    @classmethod
    def _missing_batch_number_is_empty(cls, value):
        return "" if value is None else value

    @field_validator("mfg_date", "exp_date", mode="before")
    @classmethod
    def _blank_date_is_none(cls, value):
        return blank_to_none(value)


class Product(ApiModel):
    """Product record as returned by the products API.

    Only ``id`` is required. Null or blank values in any other field fall back to
    the field default, so a sloppy record still counts toward the totals.
    """
    id: str = Field(validation_alias=AliasChoices("_id", "id"), serialization_alias="_id", description="Opaque product identifier")
    name: str = Field(default="", description="Product name")
    description: Optional[str] = Field(default=None, description="Product description")
    category: str = Field(default="", description="Product category")
    sub_category: Optional[str] = Field(default=None, description="Product sub-category")
    brand: Optional[str] = Field(default=None, description="Product brand")
    base_price: float = Field(default=0.0, description="Selling price per unit")
    base_cost_price: float = Field(default=0.0, description="Acquisition cost per unit")
    gst_details: Optional[GstDetails] = Field(default=None, description="Tax details")
    variations: Optional[List[Variation]] = Field(default=None, description="Sellable variants")
    batches: Optional[List[Batch]] = Field(default=None, description="Received stock lots")
    tags: Optional[List[str]] = Field(default=None, description="Free-form tags")
    created_at: Optional[datetime] = Field(default=None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(default=None, description="Last update timestamp")

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value):
        # Mongo-style ids may arrive as numbers in fixtures
        return str(value) if isinstance(value, int) else value

    @field_validator("name", "category", mode="before")
    @classmethod
    def _missing_text_is_empty(cls, value):
        return "" if value is None else value

    @field_validator("base_price", "base_cost_price", mode="before")
    @classmethod
    def _missing_number_is_zero(cls, value):
        return 0 if value is None else value

    @field_validator("created_at", "updated_at", mode="before")
    @classmethod
    def _blank_date_is_none(cls, value):
        return blank_to_none(value)
