#!/usr/bin/env python3
"""
seed_data.py

Generates realistic fake inventory data to a JSON file (default: sample_data/products.json).
Records use the same camelCase shape as the products API, so the JSON and HTTP
product sources read identical data.

Each product tracks stock through variations, batches, both, or neither, so the
dashboard shows every stock status.

Run:
  python -m inventory_metrics.backend.seed_data --products 60 --seed 42
"""

from __future__ import annotations
import argparse
import json
import random
import string
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Dict, List, Optional

from ..config import get_config
from ..data.backends.json_backend import resolve_data_dir

# -----------------------------
# Config & helper structures
# -----------------------------

CATEGORIES: Dict[str, Dict[str, List[str]]] = {
    "Electronics": {
        "brands": ["Voltix", "NovaTech", "Circuitry"],
        "items": ["Laptop Pro", "Wireless Mouse", "USB-C Hub", "Smart Speaker", "Monitor 27in"],
        "hsn": ["8471", "8518", "8528"],
    },
    "Food & Beverages": {
        "brands": ["GreenFields", "BeanWorks", "Leaf&Lime"],
        "items": ["Green Tea", "Coffee Beans", "Trail Mix", "Olive Oil", "Honey Jar"],
        "hsn": ["0902", "0901", "1509"],
    },
    "Fitness": {
        "brands": ["IronCore", "FlexFit"],
        "items": ["Yoga Mat", "Dumbbell Set", "Resistance Band", "Skipping Rope"],
        "hsn": ["9506"],
    },
    "Home & Kitchen": {
        "brands": ["HomeGuard", "FreshNest", "ShinePro"],
        "items": ["Steel Kettle", "Knife Set", "Storage Jar", "Table Lamp"],
        "hsn": ["7323", "8211", "9405"],
    },
    "Personal Care": {
        "brands": ["GlowCare", "PureForm"],
        "items": ["Face Wash", "Hair Oil", "Body Lotion"],
        "hsn": ["3304", "3305"],
    },
}

VARIATION_NAMES = ["Small", "Medium", "Large", "Red", "Blue", "Black"]

# how a product records its stock; weights keep some products empty
TRACKING_MODES = ["variations", "batches", "both", "none"]
TRACKING_WEIGHTS = [0.4, 0.4, 0.1, 0.1]


# -----------------------------
# Utility functions
# -----------------------------

def rand_sku() -> str:
    return "".join(random.choices(string.ascii_uppercase + string.digits, k=8))

def rand_object_id() -> str:
    return "".join(random.choices("0123456789abcdef", k=24))

def price_round(p: float) -> float:
    return round(max(p, 0.01), 2)

def stock_level() -> int:
    """Skewed stock draw: mostly modest counts, occasionally zero or large."""
    r = random.random()
    if r < 0.1:
        return 0
    if r < 0.85:
        return random.randint(1, 40)
    return random.randint(41, 200)


# -----------------------------
# Core generators
# -----------------------------

def gen_variations(base_price: float, base_cost: float) -> List[Dict]:
    names = random.sample(VARIATION_NAMES, k=random.randint(1, 3))
    return [
        {
            "name": name,
            "price": price_round(base_price * random.uniform(0.9, 1.2)),
            "costPrice": price_round(base_cost * random.uniform(0.9, 1.2)),
            "stock": stock_level() // len(names),
            "sku": rand_sku(),
        }
        for name in names
    ]

def gen_batches(base_price: float, base_cost: float, now: datetime) -> List[Dict]:
    batches = []
    for i in range(random.randint(1, 3)):
        mfg = now - timedelta(days=random.randint(10, 300))
        batches.append({
            "batchNumber": f"B{now:%y%m}-{i + 1:02d}-{random.randint(100, 999)}",
            "quantity": stock_level(),
            "costPrice": price_round(base_cost),
            "sellingPrice": price_round(base_price),
            "mfgDate": mfg.isoformat(),
            "expDate": (mfg + timedelta(days=random.randint(180, 720))).isoformat(),
        })
    return batches

def gen_products(n: int, now: Optional[datetime] = None) -> List[Dict]:
    now = now or datetime.now(timezone.utc).replace(microsecond=0)
    products = []
    categories = list(CATEGORIES.keys())
    for i in range(n):
        category = categories[i % len(categories)]
        catalog = CATEGORIES[category]
        brand = random.choice(catalog["brands"])
        base_cost = price_round(random.uniform(20.0, 2500.0))
        base_price = price_round(base_cost * random.uniform(1.1, 1.8))
        mode = random.choices(TRACKING_MODES, weights=TRACKING_WEIGHTS)[0]

        product = {
            "_id": rand_object_id(),
            "name": f"{brand} {random.choice(catalog['items'])}",
            "category": category,
            "brand": brand,
            "basePrice": base_price,
            "baseCostPrice": base_cost,
            "gstDetails": {
                "type": "goods",
                "hsnCode": random.choice(catalog["hsn"]),
                "cgstRate": 9,
                "sgstRate": 9,
                "igstRate": 18,
                "utgstRate": 0,
            },
            "createdAt": (now - timedelta(days=random.randint(30, 400))).isoformat(),
            "updatedAt": (now - timedelta(days=random.randint(0, 29))).isoformat(),
        }
        if mode in ("variations", "both"):
            product["variations"] = gen_variations(base_price, base_cost)
        if mode in ("batches", "both"):
            product["batches"] = gen_batches(base_price, base_cost, now)
        products.append(product)
    return products


# -----------------------------
# Main
# -----------------------------

def main(argv: Optional[List[str]] = None) -> int:
    config = get_config()

    parser = argparse.ArgumentParser(description="Generate fake inventory products to JSON.")
    parser.add_argument("--products", type=int, default=config.default_seed_products, help="Number of products.")
    parser.add_argument("--output-dir", type=str, default=config.data_dir)
    parser.add_argument("--output-file", type=str, default=config.products_file)
    parser.add_argument("--seed", type=int, default=config.default_seed_value)
    parser.add_argument("--no-overwrite", action="store_true", help="Fail if the products file already exists.")
    args = parser.parse_args(argv)

    random.seed(args.seed)

    outdir = resolve_data_dir(args.output_dir)
    outdir.mkdir(parents=True, exist_ok=True)
    path = Path(outdir) / args.output_file
    if args.no_overwrite and path.exists():
        print(f"Refusing to overwrite existing file: {path}", file=sys.stderr)
        return 2

    products = gen_products(args.products)
    path.write_text(json.dumps(products, indent=2, ensure_ascii=False), encoding="utf-8")

    # simple summary
    with_variations = sum(1 for p in products if "variations" in p)
    with_batches = sum(1 for p in products if "batches" in p)
    print(f"Generated data in {path}")
    print(f" products: {len(products)} | with variations: {with_variations} | with batches: {with_batches}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
