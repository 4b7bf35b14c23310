import pytest
from inventory_metrics.data.normalize import normalize_product_payload, parse_products
from inventory_metrics.inventory.metrics import compute_metrics
from inventory_metrics.inventory.thresholds import CategoryThresholds

RECORD = {
    "_id": "65a1",
    "name": "Laptop Pro",
    "category": "Electronics",
    "brand": "Voltix",
    "basePrice": 100,
    "baseCostPrice": 60,
    "gstDetails": {"type": "goods", "hsnCode": "8471", "cgstRate": 9},
    "variations": [{"name": "16GB", "price": 110, "costPrice": 70, "stock": 5, "sku": "LP-16"}],
    "batches": [{
        "batchNumber": "B-1", "quantity": 3, "costPrice": 60, "sellingPrice": 100,
        "mfgDate": "2024-01-10T00:00:00Z", "expDate": "2026-01-10T00:00:00Z",
    }],
    "isReturnable": True,
    "updatedAt": "2024-05-01T10:00:00Z",
}


def test_list_payload():
    assert normalize_product_payload([RECORD, RECORD]) == [RECORD, RECORD]

def test_wrapped_payload():
    assert normalize_product_payload({"products": [RECORD], "total": 1}) == [RECORD]

def test_single_record_payload():
    assert normalize_product_payload(RECORD) == [RECORD]

@pytest.mark.parametrize("payload", [None, "products", 42, 3.5, True])
def test_unrecognized_payload_is_empty(payload):
    assert normalize_product_payload(payload) == []

def test_parse_camel_case_record():
    [product] = parse_products({"products": [RECORD]})
    assert product.id == "65a1"
    assert product.base_price == 100
    assert product.base_cost_price == 60
    assert product.gst_details.hsn_code == "8471"
    assert product.variations[0].cost_price == 70
    assert product.batches[0].batch_number == "B-1"
    assert product.batches[0].exp_date.year == 2026
    assert product.updated_at is not None

def test_parse_accepts_plain_id_and_missing_fields():
    [product] = parse_products([{"id": 7, "name": "Bare"}])
    assert product.id == "7"
    assert product.category == ""
    assert product.base_price == 0
    assert product.variations is None
    assert product.batches is None

def test_invalid_records_are_skipped():
    products = parse_products([RECORD, {"name": "no id"}, "junk", {"_id": "x", "name": "Bad", "variations": [{"stock": -2}]}])
    assert [p.id for p in products] == ["65a1"]

def test_null_and_blank_values_degrade_to_defaults():
    products = parse_products([
        {"_id": "a", "name": "A", "basePrice": None, "baseCostPrice": None, "variations": [{"stock": 5}]},
        {"_id": "b", "name": None, "variations": [{"stock": 5, "costPrice": None, "price": None}]},
        {"_id": "c", "category": None, "batches": [{"quantity": 4, "mfgDate": "", "expDate": " ", "sellingPrice": None}]},
        {"_id": "d", "createdAt": "", "gstDetails": {"hsnCode": "", "cgstRate": ""}},
    ])
    assert [p.id for p in products] == ["a", "b", "c", "d"]
    a, b, c, d = products
    assert a.base_price == 0 and a.base_cost_price == 0
    assert b.name == ""
    assert b.variations[0].cost_price == 0
    assert c.category == ""
    assert c.batches[0].quantity == 4
    assert c.batches[0].mfg_date is None and c.batches[0].exp_date is None
    assert d.created_at is None
    assert d.gst_details.hsn_code is None

def test_sloppy_records_still_count_toward_metrics():
    products = parse_products([
        {"_id": "a", "basePrice": None, "variations": [{"stock": 5}]},
        {"_id": "b", "variations": [{"stock": 0, "costPrice": None}]},
        {"_id": "c", "batches": [{"quantity": 4, "mfgDate": ""}]},
    ])
    metrics = compute_metrics(products, CategoryThresholds())
    assert metrics.total_items == 3
    assert metrics.out_of_stock == 1
    assert metrics.low_stock == 2

def test_dump_round_trips_wire_names():
    [product] = parse_products(RECORD)
    dumped = product.model_dump(mode="json", by_alias=True, exclude_none=True)
    assert dumped["_id"] == "65a1"
    assert dumped["baseCostPrice"] == 60
    assert dumped["gstDetails"]["hsnCode"] == "8471"
    assert parse_products(dumped)[0] == product
