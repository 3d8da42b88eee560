# Catalog package
from .store import CatalogStore
from .sync import disable_sync_for_products, enable_sync_for_products, set_product_visibility

__all__ = [
    'CatalogStore',
    'disable_sync_for_products',
    'enable_sync_for_products',
    'set_product_visibility',
]
