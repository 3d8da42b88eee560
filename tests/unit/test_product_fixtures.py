"""
Unit tests for the simple product and order fixture builders.
"""

from unittest.mock import patch

from catalog_acceptance.fixtures import build_order, build_product
from catalog_acceptance.fixtures import products as products_module
from catalog_acceptance.models import Product, VariableProduct


def test_build_product_with_defaults(catalog_store):
    product = build_product(catalog_store)

    assert isinstance(product, Product)
    assert product.id is not None
    stored = catalog_store.get_product(product.id)
    assert stored.title == "Product"
    assert stored.price == 1.00
    assert stored.description == "This is a test product"
    assert stored.sync_enabled is True
    assert stored.visible is True


def test_build_product_overrides_are_per_call(catalog_store):
    first = build_product(catalog_store, {"title": "Special", "price": 20})
    second = build_product(catalog_store)

    assert first.title == "Special"
    assert first.price == 20.0
    assert second.title == "Product"
    assert second.price == 1.00


def test_build_product_accepts_keyword_overrides(catalog_store):
    product = build_product(catalog_store, {"title": "From dict"}, title="From kwargs", visible=False)

    assert product.title == "From kwargs"
    assert catalog_store.get_product(product.id).visible is False


def test_build_product_with_sync_disabled_calls_disable_and_visibility(catalog_store):
    with patch.object(products_module, "disable_sync_for_products",
                      wraps=products_module.disable_sync_for_products) as disable_sync, \
            patch.object(products_module, "enable_sync_for_products") as enable_sync, \
            patch.object(products_module, "set_product_visibility",
                         wraps=products_module.set_product_visibility) as set_visibility:
        product = build_product(catalog_store, {"sync_enabled": False, "visible": False})

    disable_sync.assert_called_once_with(catalog_store, [product])
    enable_sync.assert_not_called()
    set_visibility.assert_called_once_with(catalog_store, product, False)

    stored = catalog_store.get_product(product.id)
    assert stored.sync_enabled is False
    assert stored.visible is False
    assert catalog_store.get_attributes(product.id) == []
    assert catalog_store.get_children(product.id) == []


def test_build_product_with_sync_enabled_calls_enable(catalog_store):
    with patch.object(products_module, "enable_sync_for_products") as enable_sync, \
            patch.object(products_module, "disable_sync_for_products") as disable_sync:
        product = build_product(catalog_store)

    enable_sync.assert_called_once_with(catalog_store, [product])
    disable_sync.assert_not_called()


def test_build_variable_typed_product_skips_sync_and_visibility(catalog_store):
    with patch.object(products_module, "enable_sync_for_products") as enable_sync, \
            patch.object(products_module, "disable_sync_for_products") as disable_sync, \
            patch.object(products_module, "set_product_visibility") as set_visibility:
        product = build_product(catalog_store, {"type": "variable", "sync_enabled": False})

    assert isinstance(product, VariableProduct)
    enable_sync.assert_not_called()
    disable_sync.assert_not_called()
    set_visibility.assert_not_called()


def test_build_order_persists_empty_order(catalog_store):
    order = build_order(catalog_store)

    assert order.id is not None
    assert catalog_store.get_order(order.id).id == order.id
