from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional

from ...config import get_config
from ...logging import get_logger
from ..interface import ProductNotFoundError, ProductSource, ProductSourceError
from ..models import NewStockEntry, Product, StringList
from ..normalize import normalize_product_payload, parse_products

logger = get_logger(__name__)


def resolve_data_dir(data_dir: str | Path) -> Path:
    """Resolve a relative data directory against the repository root."""
    path = Path(data_dir)
    if path.is_absolute():
        return path

    current = Path.cwd()
    # Look up the directory tree for pyproject.toml
    for parent in [current] + list(current.parents):
        if (parent / "pyproject.toml").exists():
            return parent / path
    return current / path


def record_id(record: Any) -> Optional[str]:
    """Id of a raw product record, read the same way ``Product`` reads it."""
    if not isinstance(record, dict):
        return None
    value = record.get("_id", record.get("id"))
    return None if value is None else str(value)


class JsonProductSource(ProductSource):
    """
    JSON-file backed implementation.
    - Loads the products file once at construction; refresh() reloads it and
      replaces the collection wholesale.
    - add_stock() appends a batch to the product's raw record and rewrites the
      file atomically. Records that failed validation, fields the models do not
      know and the file's top-level shape are written back untouched.
    """

    def __init__(self, data_dir: str | Path = None, products_file: Optional[str] = None) -> None:
        config = get_config()
        if data_dir is None:
            data_dir = config.data_dir
        self.data_dir = resolve_data_dir(data_dir)
        self.path = self.data_dir / (products_file or config.products_file)
        self._payload: Any = None
        self._products: List[Product] = []
        self.refresh()

    # ---------- loading helpers ----------

    @staticmethod
    def _read(path: Path) -> Any:
        if not path.exists():
            raise FileNotFoundError(
                f"Products file not found: {path}\n"
                f"Please either:\n"
                f"  1. Generate sample data: python -m inventory_metrics.backend.seed_data\n"
                f"  2. Set DATA_DIR environment variable to point to your data directory\n"
                f"  3. Create a .env file with DATA_DIR=/path/to/your/data"
            )

        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise ProductSourceError(
                f"Error reading products from {path}: {e}\n"
                f"Please check that the file is valid JSON and readable."
            ) from e

    def _save(self) -> None:
        tmp_name = None
        try:
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp", delete=False
            ) as tmp:
                tmp_name = tmp.name
                json.dump(self._payload, tmp, indent=2, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise ProductSourceError(f"Error writing products to {self.path}: {e}") from e

    def _raw_record(self, product_id: str) -> Optional[Dict[str, Any]]:
        # normalize_product_payload hands back the records held by self._payload,
        # so patching one edits the payload in place
        for record in normalize_product_payload(self._payload):
            if record_id(record) == product_id:
                return record
        return None

    # ---------- interface implementation ----------

    def refresh(self) -> None:
        self._payload = self._read(self.path)
        self._products = parse_products(self._payload)
        logger.info(f"Loaded {len(self._products)} products from {self.path}")

    def list_products(self) -> List[Product]:
        return list(self._products)

    def list_product_categories(self) -> StringList:
        categories = {p.category for p in self._products if p.category}
        return StringList(values=sorted(categories))

    def add_stock(self, entry: NewStockEntry) -> Product:
        index = next((i for i, p in enumerate(self._products) if p.id == entry.product_id), None)
        record = self._raw_record(entry.product_id) if index is not None else None
        if record is None:
            logger.error(f"Cannot add stock: unknown product {entry.product_id}")
            raise ProductNotFoundError(f"Product not found: {entry.product_id}")

        had_batches = "batches" in record
        previous = record.get("batches")
        batch = entry.to_batch().model_dump(mode="json", by_alias=True, exclude_none=True)
        record["batches"] = list(previous or []) + [batch]
        try:
            self._save()
        except ProductSourceError:
            # leave memory matching the file on disk
            if had_batches:
                record["batches"] = previous
            else:
                del record["batches"]
            raise

        updated = Product.model_validate(record)
        self._products[index] = updated
        logger.info(f"Added {entry.quantity} units (batch {entry.batch_number}) to product {updated.id}")
        return updated
