"""
Catalog acceptance helpers.

Fixture builders that write catalog entities straight into the database and
admin UI helpers that find variation panels on the product edit screen.
"""

from .admin import AdminNavigator, see_connect_button
from .catalog import CatalogStore
from .dom import VariationLocator
from .fixtures import build_order, build_product, build_variable_product

__version__ = "0.1.0"

__all__ = [
    'AdminNavigator',
    'CatalogStore',
    'VariationLocator',
    'build_order',
    'build_product',
    'build_variable_product',
    'see_connect_button',
]
