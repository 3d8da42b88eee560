from .catalog import (
    Attribute,
    Order,
    Product,
    ProductType,
    VariableProduct,
    VariableProductFixture,
    Variation,
)
from .specs import (
    PRODUCT_DEFAULTS,
    VARIABLE_PRODUCT_DEFAULTS,
    ProductSpec,
    VariableProductSpec,
    merge,
)

__all__ = [
    'Attribute',
    'Order',
    'Product',
    'ProductType',
    'VariableProduct',
    'VariableProductFixture',
    'Variation',
    'PRODUCT_DEFAULTS',
    'VARIABLE_PRODUCT_DEFAULTS',
    'ProductSpec',
    'VariableProductSpec',
    'merge',
]
