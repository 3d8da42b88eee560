# Fixture builders
from .orders import build_order
from .products import build_product
from .variable_products import build_variable_product

__all__ = ['build_order', 'build_product', 'build_variable_product']
