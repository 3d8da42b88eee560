"""
Pytest configuration and fixtures for catalog acceptance helper tests.

The catalog database lives in a per-test temporary directory and the
Playwright page is a MagicMock wired to behave like the product edit screen.
"""

from typing import Dict, List, Optional
from unittest.mock import MagicMock

import pytest

from catalog_acceptance.db import Database, create_database


@pytest.fixture
def catalog_database(tmp_path) -> Database:
    """Fresh catalog database per test"""
    return Database(create_database(tmp_path / "catalog.db"))


def _make_panel(variation_id: int, position: int, collapsed: bool = True) -> MagicMock:
    """Mock element handle for one rendered variation panel"""
    classes = ["woocommerce_variation", "wc-metabox"]
    if collapsed:
        classes.append("closed")

    panel = MagicMock(name=f"panel_{variation_id}")
    panel.get_attribute.side_effect = lambda name: " ".join(classes) if name == "class" else None

    def click(timeout=None):
        if "closed" in classes:
            classes.remove("closed")
        else:
            classes.append("closed")

    panel.click.side_effect = click

    field = MagicMock(name=f"field_{variation_id}")
    field.get_attribute.side_effect = (
        lambda name: f"variable_post_id[{position}]" if name == "name" else str(variation_id)
    )
    panel.query_selector.return_value = field
    return panel


@pytest.fixture
def edit_screen():
    """
    Build a mock product edit page.

    Call with {variation_id: render position}; the page answers
    wait_for_selector for panel selectors that mention a rendered id.
    """

    def _build(rendered: Dict[int, int], overlay_timeout: bool = False):
        from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

        panels = {variation_id: _make_panel(variation_id, position)
                  for variation_id, position in rendered.items()}
        calls: List[Optional[str]] = []

        def wait_for_selector(selector, state="visible", timeout=None):
            calls.append(selector)
            if selector == ".blockOverlay":
                if overlay_timeout:
                    raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded.")
                return None
            for variation_id, panel in panels.items():
                if f"@value = '{variation_id}'" in selector:
                    return panel
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded.")

        page = MagicMock(name="page")
        page.wait_for_selector.side_effect = wait_for_selector
        page.panels = panels
        page.selector_calls = calls
        return page

    return _build
