import json

from inventory_metrics.backend import seed_data
from inventory_metrics.data.backends.json_backend import JsonProductSource
from inventory_metrics.data.models import StockStatus
from inventory_metrics.inventory.engine import InventoryMetricsEngine

def test_generates_products(tmp_path, capsys):
    assert seed_data.main(["--products", "40", "--output-dir", str(tmp_path), "--seed", "7"]) == 0
    records = json.loads((tmp_path / "products.json").read_text(encoding="utf-8"))
    assert len(records) == 40
    assert {r["category"] for r in records} == set(seed_data.CATEGORIES)
    assert "products: 40" in capsys.readouterr().out

def test_same_seed_same_stock(tmp_path):
    a, b = tmp_path / "a", tmp_path / "b"
    seed_data.main(["--products", "10", "--output-dir", str(a), "--seed", "3"])
    seed_data.main(["--products", "10", "--output-dir", str(b), "--seed", "3"])
    load = lambda d: [(r["_id"], r.get("variations"), r.get("batches") and [x["quantity"] for x in r["batches"]])
                      for r in json.loads((d / "products.json").read_text(encoding="utf-8"))]
    assert load(a) == load(b)

def test_no_overwrite(tmp_path):
    (tmp_path / "products.json").write_text("[]", encoding="utf-8")
    assert seed_data.main(["--output-dir", str(tmp_path), "--no-overwrite"]) == 2
    assert (tmp_path / "products.json").read_text(encoding="utf-8") == "[]"

def test_generated_data_loads_into_engine(tmp_path):
    seed_data.main(["--products", "120", "--output-dir", str(tmp_path), "--seed", "42"])
    products = JsonProductSource(data_dir=tmp_path).list_products()
    assert len(products) == 120
    view = InventoryMetricsEngine().evaluate(products)
    assert view.metrics.total_items == 120
    assert {row.status for row in view.rows} >= {StockStatus.OUT_OF_STOCK, StockStatus.LOW_STOCK}
