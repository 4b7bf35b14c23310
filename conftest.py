import pytest

from inventory_metrics.config import set_config_for_test
from inventory_metrics.data.models import Batch, GstDetails, Product, Variation


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    for var in [
        "PRODUCT_SOURCE", "DATA_DIR", "PRODUCTS_FILE", "API_BASE_URL", "API_TOKEN",
        "CATEGORY_MIN_STOCK", "DEFAULT_MIN_STOCK", "BEST_SELLER_VALUE_THRESHOLD", "LOG_JSON", "LOG_FILE",
    ]:
        monkeypatch.delenv(var, raising=False)
    set_config_for_test(log_level="WARNING")
    yield


@pytest.fixture
def make_product():
    counter = {"n": 0}

    def _make(variation_stock=(), batch_quantity=(), category="Misc", name=None,
              base_price=0.0, base_cost_price=0.0, brand=None, hsn_code=None, **kwargs):
        counter["n"] += 1
        return Product(
            id=kwargs.pop("id", f"p{counter['n']}"),
            name=name or f"Product {counter['n']}",
            category=category,
            brand=brand,
            base_price=base_price,
            base_cost_price=base_cost_price,
            gst_details=GstDetails(hsn_code=hsn_code) if hsn_code else None,
            variations=[Variation(name=f"v{i}", stock=s) for i, s in enumerate(variation_stock)] or None,
            batches=[Batch(batch_number=f"b{i}", quantity=q) for i, q in enumerate(batch_quantity)] or None,
            **kwargs,
        )

    return _make
