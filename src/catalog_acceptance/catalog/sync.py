"""
Catalog sync and visibility operations.

These mirror what the catalog's marketplace integration exposes for products:
flipping the per-product sync flag and the visibility flag. Both are
idempotent, calling them twice with the same value leaves the row unchanged.
"""

import logging
from typing import Iterable

from ..models import Product
from .store import CatalogStore

logger = logging.getLogger(__name__)


def enable_sync_for_products(store: CatalogStore, products: Iterable[Product]) -> None:
    for product in products:
        store.update_product_flags(product.id, sync_enabled=True)
        product.sync_enabled = True
        logger.debug(f"Sync enabled for product #{product.id}")


def disable_sync_for_products(store: CatalogStore, products: Iterable[Product]) -> None:
    for product in products:
        store.update_product_flags(product.id, sync_enabled=False)
        product.sync_enabled = False
        logger.debug(f"Sync disabled for product #{product.id}")


def set_product_visibility(store: CatalogStore, product: Product, visible: bool) -> None:
    store.update_product_flags(product.id, visible=bool(visible))
    product.visible = bool(visible)
    logger.debug(f"Product #{product.id} visibility set to {bool(visible)}")
