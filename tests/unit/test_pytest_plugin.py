"""
Tests for the fixtures the pytest plugin exposes.
"""

from catalog_acceptance import CatalogStore, VariationLocator, build_variable_product


def test_catalog_store_fixture_uses_overridden_database(catalog_store, tmp_path):
    assert isinstance(catalog_store, CatalogStore)
    assert catalog_store.db.db_path == tmp_path / "catalog.db"


def test_variation_locator_fixture(variation_locator):
    assert isinstance(variation_locator, VariationLocator)
    assert variation_locator.timeout > 0


def test_fixtures_compose_for_a_locate_flow(catalog_store, variation_locator, edit_screen):
    fixture = build_variable_product(catalog_store, {
        "attributes": {"color": ["red", "blue"]},
        "variations": {"r": {"color": "red"}, "b": {"color": "blue"}},
    })
    red, blue = fixture.variations["r"], fixture.variations["b"]

    # The admin may render the newest variation first
    page = edit_screen({blue.id: 0, red.id: 1})

    assert variation_locator.locate(page, red) == 1
    assert variation_locator.locate(page, blue) == 0
