"""
pytest plugin exposing the catalog fixtures to acceptance suites.

Enable it from a conftest.py:

    pytest_plugins = ("catalog_acceptance.pytest_plugin",)

Override `catalog_database` to point the store somewhere else.
"""

import logging

import pytest

from .catalog import CatalogStore
from .core.config import AcceptanceConfig
from .core.logger_config import setup_logger
from .db import Database, create_database
from .dom import VariationLocator


def pytest_configure(config):
    setup_logger(level=logging.DEBUG if config.getoption("verbose") > 1 else logging.INFO)


@pytest.fixture
def catalog_database() -> Database:
    """Catalog database at the configured path, schema created on first use"""
    return Database(create_database(AcceptanceConfig.get_database_path()))


@pytest.fixture
def catalog_store(catalog_database) -> CatalogStore:
    return CatalogStore(catalog_database)


@pytest.fixture
def variation_locator() -> VariationLocator:
    return VariationLocator()
