from __future__ import annotations

from typing import Literal, Optional

from ..config import get_config
from .backends.http_backend import HttpProductSource
from .backends.json_backend import JsonProductSource
from .interface import ProductSource


def get_product_source(kind: Optional[Literal["json", "http"]] = None) -> ProductSource:
    kind = kind or get_config().product_source
    if kind == "json":
        # Reads from configured data folder
        return JsonProductSource()
    if kind == "http":
        return HttpProductSource()
    raise ValueError(f"Unknown product source kind: {kind}")
