"""
Product fixtures
Create simple and variable products directly in the catalog database
"""

import logging
from typing import Any, Mapping, Optional, Union

from ..catalog import CatalogStore
from ..catalog.sync import disable_sync_for_products, enable_sync_for_products, set_product_visibility
from ..models import Product, ProductSpec, VariableProduct

logger = logging.getLogger(__name__)


def build_product(store: CatalogStore, spec: Optional[Mapping[str, Any]] = None,
                  **overrides) -> Union[Product, VariableProduct]:
    """
    Create a product in the database.

    Args:
        store: catalog store the product is written to
        spec: partial product spec, see `models.specs` for the default table
        **overrides: same keys as `spec`, applied after it

    Sync and visibility flags are only applied to non-variable products.

    Returns:
        The persisted product with its id populated
    """
    product_spec = ProductSpec.from_overrides({**(spec or {}), **overrides})

    product_class = VariableProduct if product_spec.type == "variable" else Product
    product = product_class(
        title=product_spec.title,
        price=product_spec.price,
        description=product_spec.description,
        type=product_spec.type,
    )

    store.save_product(product)

    if product_spec.type != "variable":
        if product_spec.sync_enabled:
            enable_sync_for_products(store, [product])
        else:
            disable_sync_for_products(store, [product])

        set_product_visibility(store, product, product_spec.visible)

    return product
