"""
Variable product fixtures
Build a variable product with its attribute matrix and labelled variations
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ..catalog import CatalogStore
from ..core.exceptions import InvalidStateError
from ..models import (
    PRODUCT_DEFAULTS,
    Attribute,
    VariableProduct,
    VariableProductFixture,
    VariableProductSpec,
    Variation,
)
from .products import build_product

logger = logging.getLogger(__name__)


def build_variable_product(store: CatalogStore, spec: Optional[Mapping[str, Any]] = None,
                           **overrides) -> VariableProductFixture:
    """
    Create a variable product in the database.

    Use the keys of `variations` to retrieve the variation objects from the
    returned fixture, e.g. ``fixture.variations["red"]``.

    Args:
        store: catalog store the product is written to
        spec: partial spec; besides the product keys it accepts
            attributes: {attribute name: [options]}
            variations: {label: {attribute name: option}}
        **overrides: same keys as `spec`, applied after it

    Returns:
        VariableProductFixture with the persisted product and variations
    """
    product_spec = VariableProductSpec.from_overrides({**(spec or {}), **overrides})

    base_fields = {key: getattr(product_spec, key) for key in PRODUCT_DEFAULTS}
    product: VariableProduct = build_product(store, base_fields)

    attributes = [
        Attribute(name=name, options=list(options), visible=True, variation=True)
        for name, options in product_spec.attributes.items()
    ]
    store.set_attributes(product, attributes)
    store.save_product(product)

    variations: Dict[str, Variation] = {}
    created: List[Tuple[int, str]] = []

    for label, selections in product_spec.variations.items():
        variation = Variation(parent_id=product.id, attributes=dict(selections))
        store.save_variation(variation)

        created.append((variation.id, label))
        variations[label] = variation

    _link_children(store, product, created, expected=len(product_spec.variations))

    logger.info(
        f"Variable product #{product.id} ready with {len(attributes)} attribute(s) "
        f"and {len(variations)} variation(s)"
    )

    return VariableProductFixture(product=product, variations=variations)


def _link_children(store: CatalogStore, product: VariableProduct,
                   created: List[Tuple[int, str]], expected: int) -> None:
    """Persist the child list once every variation has an id"""
    child_ids = [variation_id for variation_id, _ in created]

    if len(child_ids) != expected or any(variation_id is None for variation_id in child_ids):
        raise InvalidStateError(
            f"Refusing to link {len(child_ids)} of {expected} variation(s) to product #{product.id}"
        )

    if len(set(child_ids)) != len(child_ids):
        raise InvalidStateError(f"Duplicate variation ids for product #{product.id}: {child_ids}")

    store.set_children(product, child_ids)
    store.save_product(product)
