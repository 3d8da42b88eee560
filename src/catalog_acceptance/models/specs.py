"""
Fixture specs with documented defaults.

Callers pass partial dicts or keyword overrides; `merge` combines them with
the default table on every call, so no default is ever shared or mutated
between builds.

Product defaults:

    title         "Product"
    price         1.00
    description   "This is a test product"
    type          "simple"
    sync_enabled  True      (ignored for variable products)
    visible       True      (ignored for variable products)

Variable product defaults add:

    type          "variable"  (always)
    attributes    {"size": ["s"]}
    variations    {"product_variation": {"size": "s"}}
"""

from copy import deepcopy
from pydantic import BaseModel
from typing import Any, Dict, List, Mapping, Optional

from .catalog import ProductType

PRODUCT_DEFAULTS: Dict[str, Any] = {
    "title": "Product",
    "price": 1.00,
    "description": "This is a test product",
    "type": "simple",
    "sync_enabled": True,
    "visible": True,
}

VARIABLE_PRODUCT_DEFAULTS: Dict[str, Any] = {
    **PRODUCT_DEFAULTS,
    "type": "variable",
    "attributes": {
        "size": ["s"],
    },
    "variations": {
        "product_variation": {"size": "s"},
    },
}


def merge(defaults: Mapping[str, Any], overrides: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """Return a new dict with overrides applied on top of a copy of defaults"""
    merged = deepcopy(dict(defaults))
    if overrides:
        merged.update(overrides)
    return merged


class ProductSpec(BaseModel):
    title: str
    price: float
    description: str
    type: ProductType
    sync_enabled: bool
    visible: bool

    @classmethod
    def from_overrides(cls, overrides: Optional[Mapping[str, Any]] = None) -> "ProductSpec":
        return cls(**merge(PRODUCT_DEFAULTS, overrides))


class VariableProductSpec(ProductSpec):
    attributes: Dict[str, List[str]]
    variations: Dict[str, Dict[str, str]]

    @classmethod
    def from_overrides(cls, overrides: Optional[Mapping[str, Any]] = None) -> "VariableProductSpec":
        merged = merge(VARIABLE_PRODUCT_DEFAULTS, overrides)
        merged["type"] = "variable"
        return cls(**merged)
