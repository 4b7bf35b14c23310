import json

import pytest
from inventory_metrics.config import set_config_for_test
from inventory_metrics.data import util
from inventory_metrics.data.backends.json_backend import JsonProductSource

def test_json_source_from_config(tmp_path):
    (tmp_path / "products.json").write_text(json.dumps([{"_id": "a", "name": "A"}]), encoding="utf-8")
    set_config_for_test(product_source="json", data_dir=str(tmp_path))
    source = util.get_product_source()
    assert isinstance(source, JsonProductSource)
    assert [p.id for p in source.list_products()] == ["a"]

def test_http_source_selected(monkeypatch):
    created = []
    monkeypatch.setattr(util, "HttpProductSource", lambda: created.append(True) or "http-source")
    assert util.get_product_source("http") == "http-source"
    assert created == [True]

def test_unknown_kind():
    with pytest.raises(ValueError):
        util.get_product_source("csv")
