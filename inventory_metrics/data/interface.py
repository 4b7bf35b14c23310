from __future__ import annotations

from typing import List, Protocol

from .models import NewStockEntry, Product, StringList


# ---- Errors raised at the source boundary ----

class ProductSourceError(RuntimeError):
    """Loading or persisting products failed."""


class ProductSourceAuthError(ProductSourceError):
    """The products API rejected the session (HTTP 401)."""


class ProductNotFoundError(ProductSourceError):
    """A stock entry referenced a product the source does not hold."""


# ---- Product source protocol ----

class ProductSource(Protocol):
    """
    Backend-agnostic contract for the inventory dashboard.

    - list_products() returns the in-memory collection; refresh() replaces
      it wholesale from the underlying source.
    - Derived stock values are never written back through this interface.
    """

    def refresh(self) -> None:
        """Reload the product collection from the underlying source."""
        ...

    def list_products(self) -> List[Product]:
        """List all products."""
        ...

    def list_product_categories(self) -> StringList:
        """List all product categories."""
        ...

    def add_stock(self, entry: NewStockEntry) -> Product:
        """Persist a new stock batch and return the updated product."""
        ...
