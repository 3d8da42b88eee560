from ..catalog import CatalogStore
from ..models import Order


def build_order(store: CatalogStore) -> Order:
    """Create an empty order in the database"""
    return store.save_order(Order())
